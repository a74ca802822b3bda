"""Address endpoints. Writes and the full listing are admin-only."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.body import body_openapi, form_body
from app.api.deps import ActorDep, DbDep, IdPath
from app.schemas.address import (
    AddressCreate,
    AddressIdOut,
    AddressOut,
    AddressStateQuery,
    AddressUpdate,
)
from app.schemas.base import Envelope
from app.services import addresses

router = APIRouter()


@router.post(
    "/createAddress",
    response_model=Envelope[AddressOut],
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(AddressCreate),
)
def create_address(
    body: Annotated[AddressCreate, Depends(form_body(AddressCreate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[AddressOut]:
    address = addresses.create_address(db, actor, body)
    return Envelope[AddressOut](message="Address created.", data=AddressOut.model_validate(address))


@router.put(
    "/updateAddress/{address_id}",
    response_model=Envelope[AddressOut],
    openapi_extra=body_openapi(AddressUpdate),
)
def update_address(
    address_id: IdPath,
    body: Annotated[AddressUpdate, Depends(form_body(AddressUpdate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[AddressOut]:
    address = addresses.update_address(db, actor, address_id, body)
    return Envelope[AddressOut](message="Address updated.", data=AddressOut.model_validate(address))


@router.get("/getAllAddresses", response_model=Envelope[list[AddressOut]])
def get_all_addresses(actor: ActorDep, db: DbDep) -> Envelope[list[AddressOut]]:
    rows = addresses.get_all_addresses(db, actor)
    return Envelope[list[AddressOut]](
        message="All addresses found.",
        data=[AddressOut.model_validate(row) for row in rows],
    )


@router.get("/getAddress/{address_id}", response_model=Envelope[AddressOut])
def get_address(address_id: IdPath, actor: ActorDep, db: DbDep) -> Envelope[AddressOut]:
    address = addresses.get_address(db, actor, address_id)
    return Envelope[AddressOut](message="Address found.", data=AddressOut.model_validate(address))


@router.post(
    "/getAddressesByState",
    response_model=Envelope[list[AddressOut]],
    openapi_extra=body_openapi(AddressStateQuery),
)
def get_addresses_by_state(
    body: Annotated[AddressStateQuery, Depends(form_body(AddressStateQuery))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[list[AddressOut]]:
    """List the addresses of one state, ordered by city."""
    rows = addresses.get_addresses_by_state(db, actor, body)
    return Envelope[list[AddressOut]](
        message="Addresses found.",
        data=[AddressOut.model_validate(row) for row in rows],
    )


@router.post(
    "/getAddressId",
    response_model=Envelope[AddressIdOut],
    openapi_extra=body_openapi(AddressCreate),
)
def get_address_id(
    body: Annotated[AddressCreate, Depends(form_body(AddressCreate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[AddressIdOut]:
    """Look an address up by its (city, state, country) key."""
    address_id = addresses.get_address_id(db, actor, body)
    return Envelope[AddressIdOut](message="Address ID found.", data=AddressIdOut(id=address_id))


@router.delete("/deleteAddress/{address_id}", response_model=Envelope[AddressOut])
def delete_address(address_id: IdPath, actor: ActorDep, db: DbDep) -> Envelope[AddressOut]:
    address = addresses.delete_address(db, actor, address_id)
    return Envelope[AddressOut](message="Address deleted.", data=AddressOut.model_validate(address))
