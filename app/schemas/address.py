"""Request/response schemas for address endpoints."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, RequestModel


class AddressCreate(RequestModel):
    city: str = Field(..., min_length=3, max_length=255)
    state: str = Field(..., min_length=3, max_length=255)
    country: str = Field(..., min_length=3, max_length=255)


class AddressUpdate(RequestModel):
    city: str | None = Field(default=None, min_length=3, max_length=255)
    state: str | None = Field(default=None, min_length=3, max_length=255)
    country: str | None = Field(default=None, min_length=3, max_length=255)


class AddressStateQuery(RequestModel):
    """Filter for addresses in one state of one country."""

    state: str = Field(..., min_length=3, max_length=255)
    country: str = Field(..., min_length=3, max_length=255)


class AddressOut(CamelModel):
    id: int
    city: str
    state: str
    country: str
    created_at: datetime
    updated_at: datetime


class AddressIdOut(CamelModel):
    id: int
