"""Request/response schemas for classroom endpoints."""

from datetime import datetime

from pydantic import Field

from app.models.user import UserRole
from app.schemas.base import CamelModel, DbId, RequestModel


class ClassroomCreate(RequestModel):
    name: str = Field(..., min_length=3, max_length=255)
    institution_id: DbId | None = None
    users: list[DbId] = Field(..., min_length=2, description="Member user ids")


class ClassroomUpdate(RequestModel):
    """Fields to change; when users is given it replaces the member list."""

    name: str | None = Field(default=None, min_length=3, max_length=255)
    institution_id: DbId | None = None
    users: list[DbId] | None = Field(default=None, min_length=2)


class ClassroomMember(CamelModel):
    """Member summary (no secrets, no terms/profile data)."""

    id: int
    name: str
    username: str
    role: UserRole


class ClassroomOut(CamelModel):
    id: int
    name: str
    institution_id: int | None = None
    creator_id: int
    created_at: datetime
    updated_at: datetime


class ClassroomDetail(ClassroomOut):
    users: list[ClassroomMember]
