"""Pydantic request/response schemas."""

from app.schemas.address import (
    AddressCreate,
    AddressIdOut,
    AddressOut,
    AddressStateQuery,
    AddressUpdate,
)
from app.schemas.auth import (
    AcceptTermsData,
    CheckSignInData,
    CurrentUser,
    SessionData,
    SignInData,
    SignInRequest,
    SignUpRequest,
)
from app.schemas.base import CamelModel, Envelope, RequestModel
from app.schemas.classroom import (
    ClassroomCreate,
    ClassroomDetail,
    ClassroomMember,
    ClassroomOut,
    ClassroomUpdate,
)
from app.schemas.health import HealthData, ServiceInfo
from app.schemas.institution import InstitutionCreate, InstitutionOut, InstitutionUpdate

__all__ = [
    "AcceptTermsData",
    "AddressCreate",
    "AddressIdOut",
    "AddressOut",
    "AddressStateQuery",
    "AddressUpdate",
    "CamelModel",
    "CheckSignInData",
    "ClassroomCreate",
    "ClassroomDetail",
    "ClassroomMember",
    "ClassroomOut",
    "ClassroomUpdate",
    "CurrentUser",
    "Envelope",
    "HealthData",
    "InstitutionCreate",
    "InstitutionOut",
    "InstitutionUpdate",
    "RequestModel",
    "SessionData",
    "SignInData",
    "SignInRequest",
    "ServiceInfo",
    "SignUpRequest",
]
