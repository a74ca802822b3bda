"""ORM model for classrooms and their member users."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin

classroom_users = Table(
    "classroom_users",
    Base.metadata,
    Column("classroom_id", Integer, ForeignKey("classrooms.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Classroom(TimestampMixin, Base):
    """
    Group of users inside (optionally) an institution.

    creator_id is the owner used by the authorization policy for update/delete.
    """

    __tablename__ = "classrooms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    institution_id = Column(
        Integer, ForeignKey("institutions.id", ondelete="CASCADE"), nullable=True
    )
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    institution = relationship("Institution", back_populates="classrooms")
    creator = relationship("User", foreign_keys=[creator_id])
    users = relationship(
        "User", secondary=classroom_users, back_populates="classrooms", order_by="User.id"
    )
