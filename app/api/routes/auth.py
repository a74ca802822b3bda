"""Sign-up, sign-in and session endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.body import body_openapi, form_body
from app.api.deps import ActorDep, DbDep
from app.core.config import get_settings
from app.schemas.auth import (
    AcceptTermsData,
    CheckSignInData,
    SessionData,
    SignInData,
    SignInRequest,
    SignUpRequest,
)
from app.schemas.base import Envelope
from app.services import auth as auth_service

router = APIRouter()


@router.post(
    "/signUp",
    response_model=Envelope[SessionData],
    status_code=status.HTTP_201_CREATED,
    openapi_extra=body_openapi(SignUpRequest),
)
def sign_up(
    body: Annotated[SignUpRequest, Depends(form_body(SignUpRequest))],
    db: DbDep,
) -> Envelope[SessionData]:
    """
    Create an account and sign it in.

    The secret (`hash` field) is stored as a bcrypt hash and never echoed back.
    """
    data = auth_service.sign_up(db, body, get_settings())
    return Envelope[SessionData](message="User signed up.", data=data)


@router.post(
    "/signIn",
    response_model=Envelope[SignInData],
    openapi_extra=body_openapi(SignInRequest),
)
def sign_in(
    body: Annotated[SignInRequest, Depends(form_body(SignInRequest))],
    db: DbDep,
) -> Envelope[SignInData]:
    """
    Authenticate with username and secret; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    data = auth_service.sign_in(db, body)
    return Envelope[SignInData](message="User signed in.", data=data)


@router.get("/passwordlessSignIn", response_model=Envelope[SessionData])
def passwordless_sign_in(db: DbDep) -> Envelope[SessionData]:
    """Sign in as the shared guest identity."""
    data = auth_service.passwordless_sign_in(db)
    return Envelope[SessionData](message="User signed in.", data=data)


@router.post("/renewSignIn", response_model=Envelope[SessionData])
def renew_sign_in(actor: ActorDep) -> Envelope[SessionData]:
    data = auth_service.renew_sign_in(actor)
    return Envelope[SessionData](message="User signed in.", data=data)


@router.get("/checkSignIn", response_model=Envelope[CheckSignInData])
def check_sign_in(actor: ActorDep) -> Envelope[CheckSignInData]:
    data = auth_service.check_sign_in(actor)
    return Envelope[CheckSignInData](message="User currently signed in.", data=data)


@router.get("/acceptTerms", response_model=Envelope[AcceptTermsData])
def accept_terms(actor: ActorDep, db: DbDep) -> Envelope[AcceptTermsData]:
    data = auth_service.accept_terms(db, actor)
    return Envelope[AcceptTermsData](message="Terms accepted.", data=data)
