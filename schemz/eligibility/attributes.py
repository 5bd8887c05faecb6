"""Attribute resolution: rule field name -> typed applicant value.

Field names go through the ApplicantAttribute key type and a fixed accessor
table. Unknown names and unset values both come back as ABSENT.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Final

from schemz.models.enums import ApplicantAttribute
from schemz.schemas.eligibility import ApplicantProfile


class _Absent(Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent.ABSENT

AttributeValue = int | float | bool | str


ATTRIBUTE_ACCESSORS: dict[ApplicantAttribute, Callable[[ApplicantProfile], AttributeValue | None]] = {
    ApplicantAttribute.AGE: lambda p: p.age,
    ApplicantAttribute.INCOME: lambda p: p.income,
    ApplicantAttribute.CATEGORY: lambda p: p.category,
    ApplicantAttribute.EDUCATION: lambda p: p.education,
    ApplicantAttribute.GENDER: lambda p: p.gender,
    ApplicantAttribute.STATE: lambda p: p.state,
    ApplicantAttribute.DISABILITY: lambda p: p.disability,
    ApplicantAttribute.OCCUPATION: lambda p: p.occupation,
    ApplicantAttribute.MARITAL_STATUS: lambda p: p.marital_status,
    ApplicantAttribute.RESIDENCE_TYPE: lambda p: p.residence_type,
    ApplicantAttribute.EMPLOYMENT_TYPE: lambda p: p.employment_type,
    ApplicantAttribute.BPL_STATUS: lambda p: p.bpl_status,
}


def resolve_attribute(profile: ApplicantProfile, field: str | None) -> AttributeValue | _Absent:
    """Look up the applicant value a rule field refers to.

    Returns ABSENT for unknown field names and for attributes the profile
    does not set. Never raises.
    """
    key = ApplicantAttribute.from_field(field)
    if key is None:
        return ABSENT
    value = ATTRIBUTE_ACCESSORS[key](profile)
    if value is None:
        return ABSENT
    return value


def stringify(value: AttributeValue) -> str:
    """Text form used by equality and membership comparisons."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
