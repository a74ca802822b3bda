"""SQLAlchemy ORM models."""

from app.models.address import Address
from app.models.base import Base
from app.models.classroom import Classroom, classroom_users
from app.models.institution import Institution, InstitutionType
from app.models.user import User, UserRole

__all__ = [
    "Address",
    "Base",
    "Classroom",
    "Institution",
    "InstitutionType",
    "User",
    "UserRole",
    "classroom_users",
]
