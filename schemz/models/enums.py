"""Domain enums shared by the ORM models, the Pydantic schemas and the engine.

All enums use the str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class RuleOperator(str, Enum):
    """Comparison operators a rule may carry.

    Symbolic and spelled-out equality forms are both accepted.
    """

    EQ = "=="
    EQUALS = "EQUALS"
    NE = "!="
    NOT_EQUALS = "NOT_EQUALS"
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    IN = "IN"

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_OPERATORS

    @property
    def is_equality(self) -> bool:
        return self in (RuleOperator.EQ, RuleOperator.EQUALS, RuleOperator.NE, RuleOperator.NOT_EQUALS)

    @property
    def is_negated(self) -> bool:
        return self in (RuleOperator.NE, RuleOperator.NOT_EQUALS)

    @classmethod
    def parse(cls, token: str | None) -> RuleOperator | None:
        """Exact-token lookup. Unknown operators return None instead of raising."""
        if token is None:
            return None
        try:
            return cls(token)
        except ValueError:
            return None


_NUMERIC_OPERATORS = frozenset({RuleOperator.GT, RuleOperator.GE, RuleOperator.LT, RuleOperator.LE})


class RuleOutcome(str, Enum):
    """Result of evaluating one rule against one applicant.

    Only MATCHED contributes weight; FAULT is tracked separately for observability.
    """

    MATCHED = "matched"
    UNMATCHED = "unmatched"
    FAULT = "fault"


class ApplicantAttribute(str, Enum):
    """Applicant attributes a rule can reference.

    Values are the normalised lookup keys (lowercase, no separators).
    """

    AGE = "age"
    INCOME = "income"
    CATEGORY = "category"
    EDUCATION = "education"
    GENDER = "gender"
    STATE = "state"
    DISABILITY = "disability"
    OCCUPATION = "occupation"
    MARITAL_STATUS = "maritalstatus"
    RESIDENCE_TYPE = "residencetype"
    EMPLOYMENT_TYPE = "employmenttype"
    BPL_STATUS = "bplstatus"

    @classmethod
    def from_field(cls, field: str | None) -> ApplicantAttribute | None:
        """Resolve a rule field name, ignoring case and `_`/`-`/space separators."""
        if not field:
            return None
        key = field.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        try:
            return cls(key)
        except ValueError:
            return None
