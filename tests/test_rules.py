"""Tests for rule operands and rule evaluation."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from schemz.eligibility.rules import evaluate_rule, rule_matches
from schemz.models.enums import RuleOperator, RuleOutcome
from schemz.schemas.eligibility import ApplicantProfile, Rule
from schemz.schemas.operands import (
    MalformedOperand,
    MembershipOperand,
    NumericOperand,
    TextOperand,
    UnsupportedOperand,
)


def _rule(field: str, operator: str, value, weight: int = 10) -> Rule:
    return Rule(field=field, operator=operator, value=value, weight=weight)


@pytest.fixture()
def applicant():
    return ApplicantProfile(
        age=22,
        income=150000.0,
        category="obc",
        gender="F",
        state="Maharashtra",
        disability=True,
    )


# ── Operand parsing ──────────────────────────────────────────────────


class TestOperandParsing:
    def test_numeric(self):
        assert _rule("income", "<", "300000").operand == NumericOperand(300000.0)

    def test_numeric_with_whitespace(self):
        assert _rule("income", ">=", " 2.5e5 ").operand == NumericOperand(250000.0)

    def test_malformed_numeric(self):
        operand = _rule("income", "<", "abc").operand
        assert isinstance(operand, MalformedOperand)
        assert operand.raw == "abc"

    def test_text_is_lowercased(self):
        assert _rule("state", "EQUALS", "Delhi").operand == TextOperand("delhi")

    def test_membership_trimmed(self):
        assert _rule("category", "IN", "GEN, OBC ,SC").operand == MembershipOperand(("gen", "obc", "sc"))

    def test_unknown_operator(self):
        rule = _rule("age", "BETWEEN", "18,30")
        assert rule.parsed_operator is None
        assert rule.operand == UnsupportedOperand("BETWEEN")

    def test_operator_tokens_are_exact(self):
        assert RuleOperator.parse("in") is None
        assert RuleOperator.parse("IN") is RuleOperator.IN
        assert RuleOperator.parse("NOT_EQUALS") is RuleOperator.NOT_EQUALS

    def test_non_text_values_coerced(self):
        assert _rule("age", "<=", 30).value == "30"
        assert _rule("disability", "==", True).value == "true"
        assert _rule("category", "IN", ["SC", "ST"]).value == "SC,ST"

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            _rule("age", "<", "30", weight=-1)

    @pytest.mark.parametrize("value", ["300_000", "1_0", "0x10", "inf", "nan", "12abc", ""])
    def test_non_decimal_numbers_are_malformed(self, value):
        assert isinstance(_rule("income", "<", value).operand, MalformedOperand)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("300000", 300000.0), ("-4.5", -4.5), (".5", 0.5), ("3.", 3.0), ("1E3", 1000.0), ("+2e-1", 0.2)],
    )
    def test_decimal_and_exponent_forms(self, value, expected):
        assert _rule("income", "<", value).operand == NumericOperand(expected)

    def test_underscore_separated_value_does_not_match(self):
        result = evaluate_rule(ApplicantProfile(income=150000.0), _rule("income", "<", "300_000"))
        assert result.outcome == RuleOutcome.FAULT
        assert result.matched is False


class TestRuleImmutability:
    def test_fields_cannot_be_reassigned(self):
        rule = _rule("income", "<", "abc")
        with pytest.raises(ValidationError):
            rule.value = "300000"
        with pytest.raises(ValidationError):
            rule.operator = "IN"

    def test_copy_with_new_value_reparses(self):
        applicant = ApplicantProfile(income=150000.0)
        strict = _rule("income", "<", "100000")
        relaxed = strict.model_copy(update={"value": "300000"})

        assert rule_matches(applicant, strict) is False
        assert rule_matches(applicant, relaxed) is True
        assert relaxed.operand == NumericOperand(300000.0)

    def test_copy_fixing_malformed_value(self):
        broken = _rule("income", "<", "abc")
        fixed = broken.model_copy(update={"value": "300000"})
        result = evaluate_rule(ApplicantProfile(income=150000.0), fixed)
        assert result.outcome == RuleOutcome.MATCHED
        assert result.detail is None

    def test_copy_with_new_operator_reparses(self):
        applicant = ApplicantProfile(category="obc")
        equals = _rule("category", "==", "GEN, OBC")
        membership = equals.model_copy(update={"operator": "IN"})

        assert rule_matches(applicant, equals) is False
        assert membership.parsed_operator is RuleOperator.IN
        assert rule_matches(applicant, membership) is True


# ── Evaluation ───────────────────────────────────────────────────────


class TestNumericOperators:
    def test_income_below_limit(self, applicant):
        assert rule_matches(applicant, _rule("income", "<", "300000")) is True

    def test_income_above_limit(self):
        rich = ApplicantProfile(income=450000.0)
        assert rule_matches(rich, _rule("income", "<", "300000")) is False

    @pytest.mark.parametrize(
        ("operator", "value", "expected"),
        [
            (">", "21", True),
            (">", "22", False),
            (">=", "22", True),
            ("<", "22", False),
            ("<=", "22", True),
            ("<=", "21.5", False),
        ],
    )
    def test_age_boundaries(self, applicant, operator, value, expected):
        assert rule_matches(applicant, _rule("age", operator, value)) is expected

    def test_malformed_rule_value_is_fault(self, applicant):
        result = evaluate_rule(applicant, _rule("income", "<", "abc"))
        assert result.outcome == RuleOutcome.FAULT
        assert result.matched is False
        assert "abc" in result.detail

    def test_non_numeric_applicant_value_is_fault(self, applicant):
        result = evaluate_rule(applicant, _rule("state", ">", "5"))
        assert result.outcome == RuleOutcome.FAULT
        assert result.actual == "Maharashtra"

    def test_boolean_attribute_is_not_numeric(self, applicant):
        result = evaluate_rule(applicant, _rule("disability", ">", "0"))
        assert result.outcome == RuleOutcome.FAULT

    def test_missing_value_is_fault(self, applicant):
        result = evaluate_rule(applicant, _rule("age", "<", None))
        assert result.outcome == RuleOutcome.FAULT

    def test_fault_is_logged(self, applicant, caplog):
        with caplog.at_level(logging.WARNING, logger="schemz.eligibility.rules"):
            evaluate_rule(applicant, _rule("income", "<", "abc"))
        assert "Rule evaluation fault" in caplog.text


class TestEqualityOperators:
    @pytest.mark.parametrize("operator", ["==", "EQUALS"])
    def test_case_insensitive(self, applicant, operator):
        assert rule_matches(applicant, _rule("state", operator, "MAHARASHTRA")) is True

    @pytest.mark.parametrize("operator", ["!=", "NOT_EQUALS"])
    def test_negation(self, applicant, operator):
        assert rule_matches(applicant, _rule("state", operator, "Delhi")) is True
        assert rule_matches(applicant, _rule("state", operator, "maharashtra")) is False

    def test_boolean_attribute(self, applicant):
        assert rule_matches(applicant, _rule("disability", "==", "TRUE")) is True
        assert rule_matches(applicant, _rule("disability", "==", True)) is True

    def test_numbers_compare_as_text(self, applicant):
        assert rule_matches(applicant, _rule("age", "==", "22")) is True
        assert rule_matches(applicant, _rule("income", "==", "150000")) is False

    def test_none_rule_value(self, applicant):
        assert rule_matches(applicant, _rule("state", "==", None)) is False
        assert rule_matches(applicant, _rule("state", "!=", None)) is True


class TestInOperator:
    def test_case_insensitive_and_trimmed(self, applicant):
        assert rule_matches(applicant, _rule("category", "IN", "GEN, OBC, SC")) is True

    def test_not_listed(self, applicant):
        assert rule_matches(applicant, _rule("category", "IN", "SC,ST")) is False

    def test_single_option(self, applicant):
        assert rule_matches(applicant, _rule("gender", "IN", "f")) is True


class TestFailClosed:
    def test_unknown_field(self, applicant):
        result = evaluate_rule(applicant, _rule("salary", "<", "100"))
        assert result.outcome == RuleOutcome.UNMATCHED
        assert result.actual is None

    def test_unset_field(self, applicant):
        result = evaluate_rule(applicant, _rule("occupation", "!=", "Farmer"))
        assert result.outcome == RuleOutcome.UNMATCHED

    def test_unknown_operator_is_not_a_fault(self, applicant):
        result = evaluate_rule(applicant, _rule("age", "between", "18,30"))
        assert result.outcome == RuleOutcome.UNMATCHED
        assert result.detail is None

    def test_unexpected_exception_becomes_fault(self, applicant, monkeypatch):
        def boom(profile, field):
            raise RuntimeError("resolver exploded")

        monkeypatch.setattr("schemz.eligibility.rules.resolve_attribute", boom)
        result = evaluate_rule(applicant, _rule("age", "<", "30"))
        assert result.outcome == RuleOutcome.FAULT
        assert "resolver exploded" in result.detail


class TestResultTrace:
    def test_copies_rule_and_actual(self, applicant):
        result = evaluate_rule(applicant, _rule("age", "<=", "30", weight=50))
        assert result.field == "age"
        assert result.operator == "<="
        assert result.value == "30"
        assert result.weight == 50
        assert result.actual == "22"
        assert result.outcome == RuleOutcome.MATCHED
