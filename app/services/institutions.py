"""Institution CRUD behind the authorization policy."""

import logging

from sqlalchemy.orm import Session

from app.core.policy import Action, Resource, enforce
from app.models import Address, Institution
from app.schemas.auth import CurrentUser
from app.schemas.institution import InstitutionCreate, InstitutionUpdate
from app.services.persistence import commit_or_conflict, get_or_404

logger = logging.getLogger(__name__)


def create_institution(
    db: Session, actor: CurrentUser, payload: InstitutionCreate
) -> Institution:
    enforce(actor, Resource.INSTITUTION, Action.CREATE)
    get_or_404(db, Address, payload.address_id, "Address")
    institution = Institution(**payload.model_dump())
    db.add(institution)
    commit_or_conflict(db, "Institution could not be created.")
    db.refresh(institution)
    logger.info("Institution created: institution_id=%s actor_id=%s", institution.id, actor.id)
    return institution


def update_institution(
    db: Session, actor: CurrentUser, institution_id: int, payload: InstitutionUpdate
) -> Institution:
    enforce(actor, Resource.INSTITUTION, Action.UPDATE)
    institution = get_or_404(db, Institution, institution_id, "Institution")
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "address_id" in changes:
        get_or_404(db, Address, changes["address_id"], "Address")
    for field, value in changes.items():
        setattr(institution, field, value)
    commit_or_conflict(db, "Institution could not be updated.")
    db.refresh(institution)
    logger.info("Institution updated: institution_id=%s actor_id=%s", institution.id, actor.id)
    return institution


def get_all_institutions(db: Session, actor: CurrentUser | None) -> list[Institution]:
    enforce(actor, Resource.INSTITUTION, Action.GET_ALL)
    return db.query(Institution).order_by(Institution.id).all()


def get_institution(db: Session, actor: CurrentUser | None, institution_id: int) -> Institution:
    enforce(actor, Resource.INSTITUTION, Action.GET)
    return get_or_404(db, Institution, institution_id, "Institution")


def delete_institution(db: Session, actor: CurrentUser, institution_id: int) -> Institution:
    enforce(actor, Resource.INSTITUTION, Action.DELETE)
    institution = get_or_404(db, Institution, institution_id, "Institution")
    db.delete(institution)
    commit_or_conflict(db, "Institution is still referenced.")
    logger.info("Institution deleted: institution_id=%s actor_id=%s", institution_id, actor.id)
    return institution
