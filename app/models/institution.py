"""ORM model for institutions (schools, universities)."""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin


class InstitutionType(str, enum.Enum):
    PRIMARY = "PRIMARY"
    LOWER_SECONDARY = "LOWER_SECONDARY"
    UPPER_SECONDARY = "UPPER_SECONDARY"
    TERTIARY = "TERTIARY"


class Institution(TimestampMixin, Base):
    __tablename__ = "institutions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(
        Enum(InstitutionType, name="institution_type", native_enum=False, length=32),
        nullable=False,
    )
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=False)

    address = relationship("Address", back_populates="institutions")
    users = relationship("User", back_populates="institution")
    # Mirrors ON DELETE CASCADE on classrooms.institution_id.
    classrooms = relationship(
        "Classroom", back_populates="institution", cascade="save-update, merge, delete"
    )
