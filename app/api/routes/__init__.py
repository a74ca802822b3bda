"""API routes."""

from fastapi import APIRouter

from app.api.routes import address, auth, classroom, health, institution

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(address.router, prefix="/address", tags=["address"])
router.include_router(institution.router, prefix="/institution", tags=["institution"])
router.include_router(classroom.router, prefix="/classroom", tags=["classroom"])
