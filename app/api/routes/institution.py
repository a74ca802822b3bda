"""Institution endpoints. Reads are public so sign-up forms can list institutions."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.body import body_openapi, form_body
from app.api.deps import ActorDep, DbDep, IdPath, OptionalActorDep
from app.schemas.base import Envelope
from app.schemas.institution import InstitutionCreate, InstitutionOut, InstitutionUpdate
from app.services import institutions

router = APIRouter()


@router.post(
    "/createInstitution",
    response_model=Envelope[InstitutionOut],
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(InstitutionCreate),
)
def create_institution(
    body: Annotated[InstitutionCreate, Depends(form_body(InstitutionCreate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[InstitutionOut]:
    institution = institutions.create_institution(db, actor, body)
    return Envelope[InstitutionOut](
        message="Institution created.", data=InstitutionOut.model_validate(institution)
    )


@router.put(
    "/updateInstitution/{institution_id}",
    response_model=Envelope[InstitutionOut],
    openapi_extra=body_openapi(InstitutionUpdate),
)
def update_institution(
    institution_id: IdPath,
    body: Annotated[InstitutionUpdate, Depends(form_body(InstitutionUpdate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[InstitutionOut]:
    institution = institutions.update_institution(db, actor, institution_id, body)
    return Envelope[InstitutionOut](
        message="Institution updated.", data=InstitutionOut.model_validate(institution)
    )


@router.get("/getAllInstitutions", response_model=Envelope[list[InstitutionOut]])
def get_all_institutions(actor: OptionalActorDep, db: DbDep) -> Envelope[list[InstitutionOut]]:
    rows = institutions.get_all_institutions(db, actor)
    return Envelope[list[InstitutionOut]](
        message="All institutions found.",
        data=[InstitutionOut.model_validate(row) for row in rows],
    )


@router.get("/getInstitution/{institution_id}", response_model=Envelope[InstitutionOut])
def get_institution(
    institution_id: IdPath, actor: OptionalActorDep, db: DbDep
) -> Envelope[InstitutionOut]:
    institution = institutions.get_institution(db, actor, institution_id)
    return Envelope[InstitutionOut](
        message="Institution found.", data=InstitutionOut.model_validate(institution)
    )


@router.delete("/deleteInstitution/{institution_id}", response_model=Envelope[InstitutionOut])
def delete_institution(
    institution_id: IdPath, actor: ActorDep, db: DbDep
) -> Envelope[InstitutionOut]:
    institution = institutions.delete_institution(db, actor, institution_id)
    return Envelope[InstitutionOut](
        message="Institution deleted.", data=InstitutionOut.model_validate(institution)
    )
