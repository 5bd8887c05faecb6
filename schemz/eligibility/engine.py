"""Eligibility engine: scores a scheme catalog for one applicant.

Pure Python orchestrator. No DB access, no shared state.
The caller fetches the applicant profile and the active schemes and passes
them in by value; nothing here mutates them or keeps results between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from schemz.eligibility.scoring import score_scheme
from schemz.schemas.eligibility import ApplicantProfile, Rule, Scheme, SchemeMatch

logger = logging.getLogger(__name__)


def _matched_rules(scheme: Scheme, matched_flags: list[bool]) -> list[Rule]:
    return [rule for rule, matched in zip(scheme.rules or [], matched_flags) if matched]


def match_schemes(profile: ApplicantProfile, schemes: Iterable[Scheme]) -> list[SchemeMatch]:
    """Score every scheme and return the non-zero matches, best first.

    Schemes are expected to be pre-filtered to active ones; no activity
    filter is applied here. Ties keep their input order.
    """
    matches: list[SchemeMatch] = []
    evaluated = 0
    faults = 0

    for scheme in schemes:
        evaluated += 1
        score = score_scheme(profile, scheme)
        faults += score.fault_count
        if score.match_percentage <= 0:
            continue
        matches.append(SchemeMatch(
            scheme=scheme,
            match_percentage=score.match_percentage,
            matched_rules=_matched_rules(scheme, [r.matched for r in score.results]),
            fault_count=score.fault_count,
        ))

    matches.sort(key=lambda m: m.match_percentage, reverse=True)

    logger.debug(
        "Eligibility run: %d schemes evaluated, %d matched, %d rule faults",
        evaluated,
        len(matches),
        faults,
    )
    return matches
