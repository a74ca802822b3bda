"""Request/response schemas for auth endpoints."""

from pydantic import Field

from app.models.user import UserRole
from app.schemas.base import CamelModel, DbId, RequestModel, Secret


class SignInRequest(RequestModel):
    """Credentials for sign-in. `hash` carries the user's secret."""

    username: str = Field(..., min_length=3, max_length=20, description="Username")
    hash: Secret = Field(..., description="User secret")


class SignUpRequest(RequestModel):
    """New account; the secret is hashed before storage."""

    name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(..., min_length=3, max_length=20)
    hash: Secret
    role: UserRole
    institution_id: DbId | None = None
    classrooms: list[DbId] = Field(default_factory=list)


class SessionData(CamelModel):
    """Token issued for an identity (sign-up, passwordless sign-in, renewal)."""

    id: int
    role: UserRole
    token: str
    expires_in: int = Field(..., description="Token lifetime in milliseconds")
    institution_id: int | None = None


class SignInData(SessionData):
    accepted_terms: bool
    profile_image: str | None = None


class CheckSignInData(CamelModel):
    id: int


class AcceptTermsData(CamelModel):
    id: int
    accepted_terms: bool


class CurrentUser(CamelModel):
    """Authenticated user (id, username, role) for dependency injection."""

    id: int
    username: str
    role: UserRole
    institution_id: int | None = None
    accepted_terms: bool = False
    profile_image: str | None = None
