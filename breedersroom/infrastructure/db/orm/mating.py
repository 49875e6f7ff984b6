from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from breedersroom.infrastructure.db.base import Base

NOT_DELETED = "deleted_at IS NULL"


class MatingORM(Base):
    __tablename__ = "matings"
    __table_args__ = (
        Index(
            "ux_matings_owner_parents_date",
            "owner_id",
            "father_id",
            "mother_id",
            "mated_on",
            unique=True,
            postgresql_where=text(NOT_DELETED),
            sqlite_where=text(NOT_DELETED),
        ),
        Index("ix_matings_owner_date", "owner_id", "mated_on"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False
    )
    father_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), nullable=True
    )
    mother_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), nullable=True
    )
    mated_on: Mapped[date] = mapped_column(Date, nullable=False)
    species: Mapped[str] = mapped_column(String(120), nullable=False)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
