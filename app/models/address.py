"""ORM model for postal addresses referenced by institutions."""

from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin


class Address(TimestampMixin, Base):
    __tablename__ = "addresses"
    __table_args__ = (
        UniqueConstraint("city", "state", "country", name="uq_addresses_city_state_country"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    city = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False, index=True)
    country = Column(String(255), nullable=False)

    institutions = relationship("Institution", back_populates="address")
