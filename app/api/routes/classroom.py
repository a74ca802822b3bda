"""Classroom endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.body import body_openapi, form_body
from app.api.deps import ActorDep, DbDep, IdPath
from app.schemas.base import Envelope
from app.schemas.classroom import (
    ClassroomCreate,
    ClassroomDetail,
    ClassroomOut,
    ClassroomUpdate,
)
from app.services import classrooms

router = APIRouter()


@router.post(
    "/createClassroom",
    response_model=Envelope[ClassroomDetail],
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(ClassroomCreate),
)
def create_classroom(
    body: Annotated[ClassroomCreate, Depends(form_body(ClassroomCreate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[ClassroomDetail]:
    """Create a classroom owned by the caller (appliers and above)."""
    classroom = classrooms.create_classroom(db, actor, body)
    return Envelope[ClassroomDetail](
        message="Classroom created.", data=ClassroomDetail.model_validate(classroom)
    )


@router.put(
    "/updateClassroom/{classroom_id}",
    response_model=Envelope[ClassroomDetail],
    openapi_extra=body_openapi(ClassroomUpdate),
)
def update_classroom(
    classroom_id: IdPath,
    body: Annotated[ClassroomUpdate, Depends(form_body(ClassroomUpdate))],
    actor: ActorDep,
    db: DbDep,
) -> Envelope[ClassroomDetail]:
    classroom = classrooms.update_classroom(db, actor, classroom_id, body)
    return Envelope[ClassroomDetail](
        message="Classroom updated.", data=ClassroomDetail.model_validate(classroom)
    )


@router.get("/getAllClassrooms", response_model=Envelope[list[ClassroomOut]])
def get_all_classrooms(actor: ActorDep, db: DbDep) -> Envelope[list[ClassroomOut]]:
    rows = classrooms.get_all_classrooms(db, actor)
    return Envelope[list[ClassroomOut]](
        message="All classrooms found.",
        data=[ClassroomOut.model_validate(row) for row in rows],
    )


@router.get("/getClassroom/{classroom_id}", response_model=Envelope[ClassroomDetail])
def get_classroom(classroom_id: IdPath, actor: ActorDep, db: DbDep) -> Envelope[ClassroomDetail]:
    classroom = classrooms.get_classroom(db, actor, classroom_id)
    return Envelope[ClassroomDetail](
        message="Classroom found.", data=ClassroomDetail.model_validate(classroom)
    )


@router.delete("/deleteClassroom/{classroom_id}", response_model=Envelope[ClassroomOut])
def delete_classroom(classroom_id: IdPath, actor: ActorDep, db: DbDep) -> Envelope[ClassroomOut]:
    classroom = classrooms.delete_classroom(db, actor, classroom_id)
    return Envelope[ClassroomOut](
        message="Classroom deleted.", data=ClassroomOut.model_validate(classroom)
    )
