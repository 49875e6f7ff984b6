from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from breedersroom.infrastructure.db.base import Base

PENDING_ONLY = "status = 'pending'"
ACTIVE_ONLY = "status IN ('pending', 'approved')"


class ParentLinkRequestORM(Base):
    __tablename__ = "parent_link_requests"
    __table_args__ = (
        Index(
            "ux_parent_links_pending",
            "child_id",
            "parent_id",
            "role",
            unique=True,
            postgresql_where=text(PENDING_ONLY),
            sqlite_where=text(PENDING_ONLY),
        ),
        Index(
            "ux_parent_links_active_role",
            "child_id",
            "role",
            unique=True,
            postgresql_where=text(ACTIVE_ONLY),
            sqlite_where=text(ACTIVE_ONLY),
        ),
        Index("ix_parent_links_parent", "parent_id", "status"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    child_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), nullable=False
    )
    parent_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("individuals.id"), nullable=False
    )
    role: Mapped[str] = mapped_column(String(8), nullable=False)
    status: Mapped[str] = mapped_column(String(12), server_default="pending", nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    reject_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    requested_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    decided_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    decided_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
