"""Address CRUD behind the authorization policy."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.policy import Action, Resource, enforce
from app.models import Address
from app.schemas.address import AddressCreate, AddressStateQuery, AddressUpdate
from app.schemas.auth import CurrentUser
from app.services.persistence import commit_or_conflict, get_or_404

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "An address with this city, state and country already exists."


def create_address(db: Session, actor: CurrentUser, payload: AddressCreate) -> Address:
    enforce(actor, Resource.ADDRESS, Action.CREATE)
    address = Address(**payload.model_dump())
    db.add(address)
    commit_or_conflict(db, DUPLICATE_MESSAGE)
    db.refresh(address)
    logger.info("Address created: address_id=%s actor_id=%s", address.id, actor.id)
    return address


def update_address(
    db: Session, actor: CurrentUser, address_id: int, payload: AddressUpdate
) -> Address:
    enforce(actor, Resource.ADDRESS, Action.UPDATE)
    address = get_or_404(db, Address, address_id, "Address")
    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(address, field, value)
    commit_or_conflict(db, DUPLICATE_MESSAGE)
    db.refresh(address)
    logger.info("Address updated: address_id=%s actor_id=%s", address.id, actor.id)
    return address


def get_all_addresses(db: Session, actor: CurrentUser) -> list[Address]:
    enforce(actor, Resource.ADDRESS, Action.GET_ALL)
    return db.query(Address).order_by(Address.id).all()


def get_address(db: Session, actor: CurrentUser, address_id: int) -> Address:
    enforce(actor, Resource.ADDRESS, Action.GET)
    return get_or_404(db, Address, address_id, "Address")


def get_addresses_by_state(
    db: Session, actor: CurrentUser, query: AddressStateQuery
) -> list[Address]:
    enforce(actor, Resource.ADDRESS, Action.GET_BY_STATE)
    return (
        db.query(Address)
        .filter(Address.state == query.state, Address.country == query.country)
        .order_by(Address.city)
        .all()
    )


def get_address_id(db: Session, actor: CurrentUser, lookup: AddressCreate) -> int:
    """Resolve the id of the address identified by (city, state, country)."""
    enforce(actor, Resource.ADDRESS, Action.GET_ID)
    address = (
        db.query(Address)
        .filter(
            Address.city == lookup.city,
            Address.state == lookup.state,
            Address.country == lookup.country,
        )
        .first()
    )
    if address is None:
        raise NotFoundError("Address not found.")
    return address.id


def delete_address(db: Session, actor: CurrentUser, address_id: int) -> Address:
    enforce(actor, Resource.ADDRESS, Action.DELETE)
    address = get_or_404(db, Address, address_id, "Address")
    db.delete(address)
    commit_or_conflict(db, "Address is still referenced by an institution.")
    logger.info("Address deleted: address_id=%s actor_id=%s", address_id, actor.id)
    return address
