"""Pydantic schemas for the eligibility engine.

Pure data classes, no DB dependencies. Used as inputs/outputs for the
deterministic scoring pipeline; the persistence layer converts ORM records
into these before calling the engine.
"""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from schemz.models.enums import RuleOperator, RuleOutcome
from schemz.schemas.operands import Operand, parse_operand


# ---------------------------------------------------------------------------
# Rules and schemes
# ---------------------------------------------------------------------------


class Rule(BaseModel):
    """A single weighted eligibility predicate.

    Rules are immutable. The operand is parsed from `value` at construction
    and cached with the (operator, value) pair it came from; see
    `schemz.schemas.operands`.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    operator: str
    value: str | None = None
    weight: int = Field(default=10, ge=0)

    _parsed_from: tuple[str, str | None] | None = PrivateAttr(default=None)
    _parsed_operator: RuleOperator | None = PrivateAttr(default=None)
    _operand: Operand | None = PrivateAttr(default=None)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """Rule values are text. Numbers and booleans are rendered, lists are comma-joined."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    def model_post_init(self, __context: Any) -> None:
        self._ensure_parsed()

    def _ensure_parsed(self) -> None:
        # model_copy(update=...) skips validation, so compare against the parsed source
        source = (self.operator, self.value)
        if self._parsed_from == source:
            return
        self._parsed_operator = RuleOperator.parse(self.operator)
        self._operand = parse_operand(self._parsed_operator, self.value, token=self.operator)
        self._parsed_from = source

    @property
    def parsed_operator(self) -> RuleOperator | None:
        self._ensure_parsed()
        return self._parsed_operator

    @property
    def operand(self) -> Operand:
        self._ensure_parsed()
        return self._operand  # type: ignore[return-value]


class Scheme(BaseModel):
    """A benefit scheme and its eligibility rules.

    Descriptive fields are opaque to the engine. An empty rule list means
    the scheme has no conditions and matches everyone.
    """

    id: uuid.UUID | None = None
    name: str
    description: str | None = None
    benefits: str | None = None
    ministry: str | None = None
    active: bool = True
    rules: list[Rule] | None = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Applicant
# ---------------------------------------------------------------------------


class ApplicantProfile(BaseModel):
    """Attributes evaluated against scheme rules.

    Every attribute is optional; an unset attribute makes any rule that
    references it fail.
    """

    # Numeric
    age: int | None = None
    income: float | None = None

    # Flags
    disability: bool | None = None
    bpl_status: bool | None = None      # below poverty line

    # Categorical
    category: str | None = None         # GEN, OBC, SC, ST
    education: str | None = None
    gender: str | None = None           # M, F, O
    state: str | None = None
    occupation: str | None = None
    marital_status: str | None = None   # Single, Married, Widowed, Divorced
    residence_type: str | None = None   # Urban, Rural
    employment_type: str | None = None  # Government, Private, Self-Employed, Unemployed, Student


# ---------------------------------------------------------------------------
# Engine output
# ---------------------------------------------------------------------------


class RuleResult(BaseModel):
    """Outcome of one rule against one applicant, with trace data."""

    field: str
    operator: str
    value: str | None = None
    weight: int
    outcome: RuleOutcome
    actual: str | None = None           # stringified applicant value, None if absent
    detail: str | None = None           # fault description

    @property
    def matched(self) -> bool:
        return self.outcome == RuleOutcome.MATCHED


class SchemeScore(BaseModel):
    """Weighted score of one scheme for one applicant."""

    match_percentage: int = Field(ge=0, le=100)
    matched_weight: int = 0
    total_weight: int = 0
    results: list[RuleResult] = Field(default_factory=list)

    @property
    def fault_count(self) -> int:
        return sum(1 for r in self.results if r.outcome == RuleOutcome.FAULT)


class SchemeMatch(BaseModel):
    """A scheme paired with its match percentage. Built per request, never stored."""

    scheme: Scheme
    match_percentage: int = Field(ge=0, le=100)
    matched_rules: list[Rule] = Field(default_factory=list)
    fault_count: int = 0
