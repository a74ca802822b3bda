"""Request/response schemas for institution endpoints."""

from datetime import datetime

from pydantic import Field

from app.models.institution import InstitutionType
from app.schemas.base import CamelModel, DbId, RequestModel


class InstitutionCreate(RequestModel):
    name: str = Field(..., min_length=3, max_length=255)
    type: InstitutionType
    address_id: DbId


class InstitutionUpdate(RequestModel):
    name: str | None = Field(default=None, min_length=3, max_length=255)
    type: InstitutionType | None = None
    address_id: DbId | None = None


class InstitutionOut(CamelModel):
    id: int
    name: str
    type: InstitutionType
    address_id: int
    created_at: datetime
    updated_at: datetime
