from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Float, ForeignKey, Index, Integer, String, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from breedersroom.infrastructure.db.base import Base

NOT_DELETED = "deleted_at IS NULL"


class ClutchORM(Base):
    __tablename__ = "clutches"
    __table_args__ = (
        Index(
            "ux_clutches_mating_date",
            "mating_id",
            "laid_on",
            unique=True,
            postgresql_where=text(NOT_DELETED),
            sqlite_where=text(NOT_DELETED),
        ),
        Index(
            "ux_clutches_mating_order",
            "mating_id",
            "clutch_order",
            unique=True,
            postgresql_where=text(NOT_DELETED),
            sqlite_where=text(NOT_DELETED),
        ),
        Index("ix_clutches_owner", "owner_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    mating_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("matings.id"), nullable=True
    )
    owner_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    species: Mapped[str] = mapped_column(String(120), nullable=False)
    laid_on: Mapped[date] = mapped_column(Date, nullable=False)
    clutch_order: Mapped[int] = mapped_column(Integer, nullable=False)
    egg_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    temperature: Mapped[float | None] = mapped_column(Float, nullable=True)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
