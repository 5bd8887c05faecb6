"""Catalog and applicant lookups feeding the eligibility engine.

ORM records are converted to the pure Pydantic schemas here, so the engine
only ever sees detached snapshots.
"""

from __future__ import annotations

import logging
import uuid

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from schemz.errors import ApplicantNotFoundError
from schemz.models.applicant import Applicant
from schemz.models.scheme import RuleRecord, SchemeRecord
from schemz.schemas.eligibility import ApplicantProfile, Rule, Scheme

logger = logging.getLogger(__name__)


def _rule_from_record(scheme: SchemeRecord, record: RuleRecord) -> Rule | None:
    try:
        return Rule(field=record.field, operator=record.operator, value=record.value, weight=record.weight)
    except ValidationError as exc:
        logger.warning(
            "Skipping invalid rule %s of scheme %s (%s %s %r weight=%s): %s",
            record.id,
            scheme.id,
            record.field,
            record.operator,
            record.value,
            record.weight,
            exc,
        )
        return None


def scheme_from_record(record: SchemeRecord) -> Scheme | None:
    """Snapshot a scheme and its rules, in rule position order.

    Rows that do not form a valid Rule are dropped with a warning so the
    rest of the catalog can still be matched. A scheme left with no valid
    rules returns None rather than turning into an open (100%) scheme.
    """
    rows = sorted(record.rules or [], key=lambda r: r.position)
    rules = [_rule_from_record(record, r) for r in rows]
    if rows and all(rule is None for rule in rules):
        logger.warning("Scheme %s (%s) has no valid rules, excluded from matching", record.id, record.name)
        return None
    return Scheme(
        id=record.id,
        name=record.name,
        description=record.description,
        benefits=record.benefits,
        ministry=record.ministry,
        active=record.active,
        rules=[rule for rule in rules if rule is not None],
    )


def profile_from_record(record: Applicant) -> ApplicantProfile:
    """Snapshot the matchable attributes of an applicant."""
    return ApplicantProfile(
        age=record.age,
        income=record.income,
        category=record.category,
        education=record.education,
        gender=record.gender,
        state=record.state,
        disability=record.disability,
        occupation=record.occupation,
        marital_status=record.marital_status,
        residence_type=record.residence_type,
        employment_type=record.employment_type,
        bpl_status=record.bpl_status,
    )


async def list_active_schemes(db: AsyncSession) -> list[Scheme]:
    """All schemes flagged active, with their rules, oldest first."""
    result = await db.execute(
        select(SchemeRecord)
        .where(SchemeRecord.active.is_(True))
        .options(selectinload(SchemeRecord.rules))
        .order_by(SchemeRecord.created_at)
    )
    records = list(result.scalars().all())
    logger.debug("Loaded %d active schemes", len(records))
    schemes = [scheme_from_record(r) for r in records]
    return [s for s in schemes if s is not None]


async def get_profile(db: AsyncSession, applicant_id: uuid.UUID) -> ApplicantProfile:
    """Load an applicant's profile.

    Raises:
        ApplicantNotFoundError: if no applicant has this id.
    """
    record = await db.get(Applicant, applicant_id)
    if record is None:
        raise ApplicantNotFoundError(applicant_id)
    return profile_from_record(record)
