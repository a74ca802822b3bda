"""Small persistence helpers shared by the resource services."""

import logging
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: type[ModelT], obj_id: int, label: str) -> ModelT:
    """Load a row by primary key or raise NotFoundError('<label> not found.')."""
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFoundError(f"{label} not found.", details={"id": obj_id})
    return obj


def load_all_or_404(db: Session, model: type[ModelT], ids: list[int], label: str) -> list[ModelT]:
    """Load every row in ids (duplicates ignored) or raise NotFoundError naming the missing ids."""
    wanted = set(ids)
    if not wanted:
        return []
    rows = db.query(model).filter(model.id.in_(wanted)).all()
    missing = sorted(wanted - {row.id for row in rows})
    if missing:
        raise NotFoundError(f"{label} not found.", details={"ids": missing})
    return rows


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit the session; on an integrity violation roll back and raise ConflictError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Integrity violation rolled back: %s", e.orig)
        raise ConflictError(message) from e
