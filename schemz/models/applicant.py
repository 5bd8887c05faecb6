"""Applicant model — the person whose profile is matched against schemes.

Login credentials and roles live with the auth service, not here.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from schemz.models.base import Base, TimestampMixin


class Applicant(TimestampMixin, Base):
    """Applicant identity plus the attributes eligibility rules can reference."""

    __tablename__ = "users"

    # Identity
    name: Mapped[str | None] = mapped_column(String(200))
    email: Mapped[str | None] = mapped_column(String(255), unique=True, index=True)

    # Profile
    age: Mapped[int | None] = mapped_column(Integer)
    income: Mapped[float | None] = mapped_column(Float, comment="Annual income")
    category: Mapped[str | None] = mapped_column(String(20), comment="GEN, OBC, SC, ST")
    education: Mapped[str | None] = mapped_column(String(100))
    gender: Mapped[str | None] = mapped_column(String(10))
    state: Mapped[str | None] = mapped_column(String(100))
    disability: Mapped[bool | None] = mapped_column(Boolean)
    occupation: Mapped[str | None] = mapped_column(String(100))
    marital_status: Mapped[str | None] = mapped_column(String(20))
    residence_type: Mapped[str | None] = mapped_column(String(20), comment="Urban, Rural")
    employment_type: Mapped[str | None] = mapped_column(String(50))
    bpl_status: Mapped[bool | None] = mapped_column(Boolean, comment="Below poverty line")

    def __repr__(self) -> str:
        return f"<Applicant id={self.id} email={self.email!r}>"
