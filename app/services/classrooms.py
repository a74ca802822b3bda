"""Classroom CRUD; update and delete are limited to the creator or an admin."""

import logging

from sqlalchemy.orm import Session

from app.core.policy import Action, Resource, enforce
from app.models import Classroom, Institution, User
from app.schemas.auth import CurrentUser
from app.schemas.classroom import ClassroomCreate, ClassroomUpdate
from app.services.persistence import commit_or_conflict, get_or_404, load_all_or_404

logger = logging.getLogger(__name__)


def create_classroom(db: Session, actor: CurrentUser, payload: ClassroomCreate) -> Classroom:
    enforce(actor, Resource.CLASSROOM, Action.CREATE)
    if payload.institution_id is not None:
        get_or_404(db, Institution, payload.institution_id, "Institution")
    members = load_all_or_404(db, User, payload.users, "User")
    classroom = Classroom(
        name=payload.name,
        institution_id=payload.institution_id,
        creator_id=actor.id,
        users=members,
    )
    db.add(classroom)
    commit_or_conflict(db, "Classroom could not be created.")
    db.refresh(classroom)
    logger.info("Classroom created: classroom_id=%s actor_id=%s", classroom.id, actor.id)
    return classroom


def update_classroom(
    db: Session, actor: CurrentUser, classroom_id: int, payload: ClassroomUpdate
) -> Classroom:
    classroom = get_or_404(db, Classroom, classroom_id, "Classroom")
    enforce(actor, Resource.CLASSROOM, Action.UPDATE, target_owner_id=classroom.creator_id)
    if payload.name is not None:
        classroom.name = payload.name
    if payload.institution_id is not None:
        get_or_404(db, Institution, payload.institution_id, "Institution")
        classroom.institution_id = payload.institution_id
    if payload.users is not None:
        classroom.users = load_all_or_404(db, User, payload.users, "User")
    commit_or_conflict(db, "Classroom could not be updated.")
    db.refresh(classroom)
    logger.info("Classroom updated: classroom_id=%s actor_id=%s", classroom.id, actor.id)
    return classroom


def get_all_classrooms(db: Session, actor: CurrentUser) -> list[Classroom]:
    enforce(actor, Resource.CLASSROOM, Action.GET_ALL)
    return db.query(Classroom).order_by(Classroom.id).all()


def get_classroom(db: Session, actor: CurrentUser, classroom_id: int) -> Classroom:
    enforce(actor, Resource.CLASSROOM, Action.GET)
    return get_or_404(db, Classroom, classroom_id, "Classroom")


def delete_classroom(db: Session, actor: CurrentUser, classroom_id: int) -> Classroom:
    classroom = get_or_404(db, Classroom, classroom_id, "Classroom")
    enforce(actor, Resource.CLASSROOM, Action.DELETE, target_owner_id=classroom.creator_id)
    db.delete(classroom)
    commit_or_conflict(db, "Classroom could not be deleted.")
    logger.info("Classroom deleted: classroom_id=%s actor_id=%s", classroom_id, actor.id)
    return classroom
