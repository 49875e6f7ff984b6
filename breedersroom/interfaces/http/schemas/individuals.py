from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from breedersroom.interfaces.http.schemas.parent_links import ParentLinkResponse


class IndividualCreate(BaseModel):
    species: str = Field(..., min_length=1, max_length=120)
    name: str | None = Field(default=None, max_length=255)
    sex: str | None = Field(default=None, description="M, F or N")
    hatched_on: date | None = None
    father_id: UUID | None = None
    mother_id: UUID | None = None
    message: str | None = None  # Sent along with link requests to other owners


class IndividualSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str | None
    species: str
    sex: str | None
    is_deleted: bool


class IndividualResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    kind: str
    species: str
    name: str | None
    sex: str | None
    sale_status: str
    hatched_on: date | None
    source_clutch_id: UUID | None
    created_at: datetime
    updated_at: datetime
    version: int


class ParentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    link_id: UUID
    role: str
    status: str
    parent: IndividualSummary | None


class ParentsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    child_id: UUID
    father: ParentResponse | None = None
    mother: ParentResponse | None = None


class IndividualDetailResponse(IndividualResponse):
    parents: ParentsResponse | None = None


class IndividualCreatedResponse(BaseModel):
    individual: IndividualResponse
    links: list[ParentLinkResponse]
