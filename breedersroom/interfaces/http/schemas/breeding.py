from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from breedersroom.interfaces.http.schemas.individuals import (
    IndividualResponse,
    IndividualSummary,
)
from breedersroom.interfaces.http.schemas.parent_links import ParentLinkResponse


class MatingCreate(BaseModel):
    mated_on: date
    father_id: UUID | None = None
    mother_id: UUID | None = None


class EggDetail(BaseModel):
    status: str = "FERTILIZED"
    temperature: float | None = None
    name: str | None = Field(default=None, max_length=255)


class ClutchCreate(BaseModel):
    mating_id: UUID
    laid_on: date
    clutch_order: int
    egg_count: int | None = Field(default=None, ge=0)
    temperature: float | None = None
    eggs: list[EggDetail] = Field(default_factory=list)


class ClutchDateUpdate(BaseModel):
    laid_on: date


class EggUpdate(BaseModel):
    status: str | None = None
    temperature: float | None = None


class HatchRequest(BaseModel):
    hatched_on: date
    name: str | None = Field(default=None, max_length=255)
    sex: str | None = None


class EggResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    clutch_id: UUID
    position: int
    name: str | None
    status: str
    temperature: float | None
    hatched_individual_id: UUID | None
    hatched_on: date | None
    version: int


class ClutchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    mating_id: UUID | None
    species: str
    laid_on: date
    clutch_order: int
    egg_count: int | None
    temperature: float | None
    created_at: datetime
    version: int
    eggs: list[EggResponse] = Field(default_factory=list)


class MatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    mated_on: date
    species: str
    father_id: UUID | None
    mother_id: UUID | None
    created_at: datetime
    version: int
    father: IndividualSummary | None = None
    mother: IndividualSummary | None = None
    clutches: list[ClutchResponse] = Field(default_factory=list)


class MatingListResponse(BaseModel):
    items: list[MatingResponse]
    total: int
    limit: int
    offset: int


class HatchResponse(BaseModel):
    egg: EggResponse
    individual: IndividualResponse
    links: list[ParentLinkResponse]
