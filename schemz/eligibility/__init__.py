"""Eligibility engine — weighted rule scoring of benefit schemes."""

from schemz.eligibility.attributes import ABSENT, resolve_attribute
from schemz.eligibility.engine import match_schemes
from schemz.eligibility.rules import evaluate_rule, rule_matches
from schemz.eligibility.scoring import match_percentage, score_scheme
from schemz.schemas.eligibility import (
    ApplicantProfile,
    Rule,
    RuleResult,
    Scheme,
    SchemeMatch,
    SchemeScore,
)

__all__ = [
    "match_schemes",
    "score_scheme",
    "match_percentage",
    "evaluate_rule",
    "rule_matches",
    "resolve_attribute",
    "ABSENT",
    "ApplicantProfile",
    "Rule",
    "RuleResult",
    "Scheme",
    "SchemeMatch",
    "SchemeScore",
]
