from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from breedersroom.infrastructure.db.base import Base


class EggORM(Base):
    """Egg detail row; ``id`` is also the id of its ``individuals`` row."""

    __tablename__ = "eggs"
    __table_args__ = (UniqueConstraint("clutch_id", "position", name="ux_eggs_clutch_position"),)

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), primary_key=True
    )
    clutch_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("clutches.id"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(16), server_default="FERTILIZED", nullable=False)
    temperature: Mapped[float | None] = mapped_column(Float, nullable=True)
    hatched_individual_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), nullable=True
    )
    hatched_on: Mapped[date | None] = mapped_column(Date, nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
