from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from breedersroom.infrastructure.db.base import Base


class IndividualORM(Base):
    __tablename__ = "individuals"
    __table_args__ = (
        Index("ix_individuals_owner_kind", "owner_id", "kind"),
        Index("ix_individuals_source_clutch", "source_clutch_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    kind: Mapped[str] = mapped_column(String(8), nullable=False)
    species: Mapped[str] = mapped_column(String(120), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sex: Mapped[str | None] = mapped_column(String(1), nullable=True)
    sale_status: Mapped[str] = mapped_column(
        String(20), server_default="NOT_FOR_SALE", nullable=False
    )
    hatched_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    # No FK: clutches reference matings, which reference individuals
    source_clutch_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
