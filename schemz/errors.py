"""Exceptions raised by the collaborator layer around the eligibility engine.

The engine itself never raises; these cover lookups that can fail.
"""

from __future__ import annotations

import uuid


class SchemzError(Exception):
    """Base class for application errors."""


class ApplicantNotFoundError(SchemzError):
    """No applicant exists with the requested id."""

    def __init__(self, applicant_id: uuid.UUID) -> None:
        self.applicant_id = applicant_id
        super().__init__(f"User not found: {applicant_id}")
