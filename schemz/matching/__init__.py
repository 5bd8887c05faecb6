"""Applicant-to-catalog matching on top of the persistence layer."""

from schemz.matching.service import MatchingService, match_schemes_for_applicant, matching_service

__all__ = [
    "MatchingService",
    "matching_service",
    "match_schemes_for_applicant",
]
