"""Weighted scheme scoring.

match = floor(matched_weight / total_weight * 100), in integer arithmetic.
A scheme without rules scores 100; a scheme whose rules weigh nothing
scores 0.
"""

from __future__ import annotations

from schemz.eligibility.rules import evaluate_rule
from schemz.schemas.eligibility import ApplicantProfile, Scheme, SchemeScore

FULL_MATCH = 100


def score_scheme(profile: ApplicantProfile, scheme: Scheme) -> SchemeScore:
    """Evaluate every rule of a scheme and aggregate the weights."""
    if not scheme.rules:
        # Open scheme: no conditions means everyone qualifies
        return SchemeScore(match_percentage=FULL_MATCH)

    results = [evaluate_rule(profile, rule) for rule in scheme.rules]
    total_weight = sum(r.weight for r in results)
    matched_weight = sum(r.weight for r in results if r.matched)

    if total_weight == 0:
        percentage = 0
    else:
        percentage = matched_weight * FULL_MATCH // total_weight

    return SchemeScore(
        match_percentage=percentage,
        matched_weight=matched_weight,
        total_weight=total_weight,
        results=results,
    )


def match_percentage(profile: ApplicantProfile, scheme: Scheme) -> int:
    """Integer match percentage of a scheme, in [0, 100]."""
    return score_scheme(profile, scheme).match_percentage
