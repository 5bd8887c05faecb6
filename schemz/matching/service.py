"""Matching service — fetch an applicant and the active catalog, then score.

Thin async wrapper around the pure engine: all I/O happens before
`match_schemes` is called, and nothing it returns is written back.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from schemz.db.queries import get_profile, list_active_schemes
from schemz.eligibility.engine import match_schemes
from schemz.schemas.eligibility import SchemeMatch

logger = logging.getLogger(__name__)


class MatchingService:
    """Matches stored applicants against the stored scheme catalog."""

    async def match_for_applicant(self, db: AsyncSession, applicant_id: uuid.UUID) -> list[SchemeMatch]:
        """Ranked scheme matches for one applicant.

        Raises:
            ApplicantNotFoundError: if the applicant id is unknown.
        """
        profile = await get_profile(db, applicant_id)
        schemes = await list_active_schemes(db)
        matches = match_schemes(profile, schemes)
        logger.info(
            "Matched applicant %s: %d of %d active schemes",
            applicant_id,
            len(matches),
            len(schemes),
        )
        return matches


# Module-level singleton
matching_service = MatchingService()


async def match_schemes_for_applicant(db: AsyncSession, applicant_id: uuid.UUID) -> list[SchemeMatch]:
    """Convenience wrapper around the module-level service."""
    return await matching_service.match_for_applicant(db, applicant_id)
