from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ParentLinkCreate(BaseModel):
    child_id: UUID
    parent_id: UUID
    role: str = Field(..., description="father or mother")
    message: str | None = None


class ParentLinkDecision(BaseModel):
    status: str = Field(..., description="approved, rejected or cancelled")
    reject_reason: str | None = None


class ParentLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    child_id: UUID
    parent_id: UUID
    role: str
    status: str
    message: str | None
    reject_reason: str | None
    requested_by: UUID | None
    decided_by: UUID | None
    decided_at: datetime | None
    created_at: datetime
    updated_at: datetime
    version: int
