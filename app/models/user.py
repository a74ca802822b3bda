"""ORM model for application users (auth and RBAC)."""

import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin


class UserRole(str, enum.Enum):
    """Closed set of roles, listed from least to most privileged."""

    GUEST = "GUEST"
    USER = "USER"
    APPLIER = "APPLIER"
    PUBLISHER = "PUBLISHER"
    COORDINATOR = "COORDINATOR"
    ADMIN = "ADMIN"


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    The lowest-id row with role GUEST is the identity handed out by
    passwordless sign-in.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False, length=32),
        nullable=False,
        default=UserRole.USER,
        index=True,
    )
    institution_id = Column(
        Integer, ForeignKey("institutions.id", ondelete="SET NULL"), nullable=True
    )
    accepted_terms = Column(Boolean, nullable=False, default=False)
    profile_image = Column(String(1024), nullable=True)

    institution = relationship("Institution", back_populates="users")
    classrooms = relationship(
        "Classroom", secondary="classroom_users", back_populates="users"
    )
