"""Tagged rule operands.

A rule's textual value is parsed once, when the rule is built, into the
operand its operator expects. A value that cannot be parsed becomes a
MalformedOperand so the rule can still be scored (as a fault) without
re-parsing on every evaluation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from schemz.models.enums import RuleOperator


@dataclass(frozen=True, slots=True)
class NumericOperand:
    """Operand for >, >=, <, <=."""

    number: float


@dataclass(frozen=True, slots=True)
class TextOperand:
    """Operand for ==, !=. Stored lowercased; None never equals anything."""

    text: str | None


@dataclass(frozen=True, slots=True)
class MembershipOperand:
    """Operand for IN: trimmed, lowercased alternatives."""

    options: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MalformedOperand:
    """Value that could not be parsed for its operator."""

    raw: str | None
    error: str


@dataclass(frozen=True, slots=True)
class UnsupportedOperand:
    """Operator token not recognised; the rule never matches."""

    operator: str | None


Operand = NumericOperand | TextOperand | MembershipOperand | MalformedOperand | UnsupportedOperand


# Decimal or exponent notation, plus the NaN / Infinity spellings; no `_` separators
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|NaN|[+-]?Infinity")


def parse_number(raw: str) -> float:
    """Parse a real number, raising ValueError on anything non-numeric."""
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise ValueError(f"not a number: {raw!r}")
    return float(text)


def parse_operand(operator: RuleOperator | None, raw: str | None, token: str | None = None) -> Operand:
    """Build the operand a rule value represents under its operator."""
    if operator is None:
        return UnsupportedOperand(operator=token)

    if operator.is_equality:
        return TextOperand(text=raw.lower() if raw is not None else None)

    if raw is None:
        return MalformedOperand(raw=None, error=f"operator {operator.value} requires a value")

    if operator.is_numeric:
        try:
            return NumericOperand(number=parse_number(raw))
        except ValueError:
            return MalformedOperand(raw=raw, error=f"rule value {raw!r} is not a number")

    # IN
    return MembershipOperand(options=tuple(opt.strip().lower() for opt in raw.split(",")))
