"""Scheme matching API — FastAPI router.

Authentication is handled upstream; `user_id` is taken as given.
"""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from schemz.db.engine import get_session
from schemz.errors import ApplicantNotFoundError
from schemz.matching.service import match_schemes_for_applicant

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schemes", tags=["schemes"])


@router.get("/match")
async def get_matching_schemes(
    user_id: uuid.UUID = Query(..., description="Applicant to match"),
    db: AsyncSession = Depends(get_session),
) -> dict[str, Any]:
    """Active schemes the applicant matches, best match first."""
    try:
        matches = await match_schemes_for_applicant(db, user_id)
    except ApplicantNotFoundError as exc:
        logger.info("Match requested for unknown applicant %s", exc.applicant_id)
        raise HTTPException(status_code=404, detail="User not found") from exc

    return {
        "success": True,
        "count": len(matches),
        "data": [m.model_dump(mode="json") for m in matches],
    }
