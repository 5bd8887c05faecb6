"""SQLAlchemy ORM models for Schemz.

Import all models here so Alembic and Base.metadata.create_all() discover them.
"""

from __future__ import annotations

from schemz.models.applicant import Applicant
from schemz.models.base import Base
from schemz.models.enums import ApplicantAttribute, RuleOperator, RuleOutcome
from schemz.models.scheme import RuleRecord, SchemeRecord

__all__ = [
    # Base
    "Base",
    # Models
    "Applicant",
    "SchemeRecord",
    "RuleRecord",
    # Enums
    "ApplicantAttribute",
    "RuleOperator",
    "RuleOutcome",
]
