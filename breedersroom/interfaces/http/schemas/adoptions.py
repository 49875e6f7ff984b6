from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AdoptionCreate(BaseModel):
    individual_id: UUID
    buyer_id: UUID | None = None
    status: str | None = Field(
        default=None, description="NOT_FOR_SALE, ON_SALE, ON_RESERVATION or SOLD"
    )
    price: Decimal | None = Field(default=None, ge=0)
    adopted_on: date | None = None
    memo: str | None = None
    location: str | None = Field(default=None, description="ONLINE or OFFLINE")


class AdoptionUpdate(BaseModel):
    """Partial update; fields left out keep their value, explicit nulls clear it."""

    buyer_id: UUID | None = None
    status: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    adopted_on: date | None = None
    memo: str | None = None
    location: str | None = None


class AdoptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    individual_id: UUID
    seller_id: UUID
    buyer_id: UUID | None
    status: str
    price: Decimal | None
    adopted_on: date | None
    memo: str | None
    location: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class AdoptionListResponse(BaseModel):
    items: list[AdoptionResponse]
    total: int
    limit: int
    offset: int
