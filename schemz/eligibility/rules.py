"""Rule evaluation.

Each rule resolves to one of three outcomes: matched, unmatched or fault.
Missing applicant data and unknown operators are plain non-matches; parse
errors and unexpected exceptions are faults, logged and folded into a
non-match so one bad rule never aborts scoring.
"""

from __future__ import annotations

import logging

from schemz.eligibility.attributes import ABSENT, resolve_attribute, stringify
from schemz.models.enums import RuleOperator, RuleOutcome
from schemz.schemas.eligibility import ApplicantProfile, Rule, RuleResult
from schemz.schemas.operands import (
    MalformedOperand,
    MembershipOperand,
    NumericOperand,
    TextOperand,
    UnsupportedOperand,
    parse_number,
)

logger = logging.getLogger(__name__)


def _compare(operator: RuleOperator, actual: float, expected: float) -> bool:
    if operator == RuleOperator.GT:
        return actual > expected
    if operator == RuleOperator.GE:
        return actual >= expected
    if operator == RuleOperator.LT:
        return actual < expected
    return actual <= expected


def _result(rule: Rule, outcome: RuleOutcome, actual: str | None = None, detail: str | None = None) -> RuleResult:
    return RuleResult(
        field=rule.field,
        operator=rule.operator,
        value=rule.value,
        weight=rule.weight,
        outcome=outcome,
        actual=actual,
        detail=detail,
    )


def _fault(rule: Rule, actual: str | None, detail: str) -> RuleResult:
    logger.warning(
        "Rule evaluation fault field=%s operator=%s value=%r actual=%r: %s",
        rule.field,
        rule.operator,
        rule.value,
        actual,
        detail,
    )
    return _result(rule, RuleOutcome.FAULT, actual=actual, detail=detail)


def _evaluate(profile: ApplicantProfile, rule: Rule) -> RuleResult:
    value = resolve_attribute(profile, rule.field)
    if value is ABSENT:
        return _result(rule, RuleOutcome.UNMATCHED)

    actual = stringify(value)
    operand = rule.operand

    if isinstance(operand, UnsupportedOperand):
        return _result(rule, RuleOutcome.UNMATCHED, actual=actual)

    if isinstance(operand, MalformedOperand):
        return _fault(rule, actual, operand.error)

    if isinstance(operand, TextOperand):
        equal = operand.text is not None and actual.lower() == operand.text
        passed = not equal if rule.parsed_operator.is_negated else equal
    elif isinstance(operand, NumericOperand):
        try:
            number = parse_number(actual)
        except ValueError:
            return _fault(rule, actual, f"applicant value {actual!r} is not a number")
        passed = _compare(rule.parsed_operator, number, operand.number)
    elif isinstance(operand, MembershipOperand):
        passed = actual.lower() in operand.options
    else:
        return _fault(rule, actual, f"unhandled operand {type(operand).__name__}")

    return _result(rule, RuleOutcome.MATCHED if passed else RuleOutcome.UNMATCHED, actual=actual)


def evaluate_rule(profile: ApplicantProfile, rule: Rule) -> RuleResult:
    """Evaluate one rule against an applicant. Never raises."""
    try:
        return _evaluate(profile, rule)
    except Exception as exc:  # noqa: BLE001 - any fault folds into a non-match
        return _fault(rule, None, f"{type(exc).__name__}: {exc}")


def rule_matches(profile: ApplicantProfile, rule: Rule) -> bool:
    """True only when the rule matched; unmatched and faults are both False."""
    return evaluate_rule(profile, rule).outcome == RuleOutcome.MATCHED
