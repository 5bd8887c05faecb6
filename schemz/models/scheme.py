"""Scheme and rule models — the catalog the engine scores against."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schemz.models.base import Base, TimestampMixin, UUIDKeyMixin


class SchemeRecord(TimestampMixin, Base):
    """A benefit scheme. Only active schemes are offered for matching."""

    __tablename__ = "schemes"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    benefits: Mapped[str | None] = mapped_column(Text)
    ministry: Mapped[str | None] = mapped_column(String(255))
    active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    rules: Mapped[list[RuleRecord]] = relationship(
        "RuleRecord",
        back_populates="scheme",
        cascade="all, delete-orphan",
        order_by="RuleRecord.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<SchemeRecord id={self.id} name={self.name!r} active={self.active}>"


class RuleRecord(UUIDKeyMixin, Base):
    """One weighted eligibility rule. Values are stored as text."""

    __tablename__ = "eligibility_rules"
    __table_args__ = (CheckConstraint("weight >= 0", name="weight_non_negative"),)

    scheme_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("schemes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    field: Mapped[str] = mapped_column(String(50), nullable=False, comment="Applicant attribute, e.g. income")
    operator: Mapped[str] = mapped_column(String(20), nullable=False, comment="==, !=, >, >=, <, <=, IN")
    value: Mapped[str | None] = mapped_column(Text, comment="Operand; comma-separated for IN")
    weight: Mapped[int] = mapped_column(Integer, default=10, nullable=False)

    scheme: Mapped[SchemeRecord] = relationship("SchemeRecord", back_populates="rules")

    def __repr__(self) -> str:
        return f"<RuleRecord {self.field} {self.operator} {self.value!r} weight={self.weight}>"
