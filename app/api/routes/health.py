"""Health check endpoint with a database connectivity check."""

from fastapi import APIRouter

from app.api.deps import DbDep
from app.core.config import settings
from app.core.database import check_db_connected
from app.schemas.base import Envelope
from app.schemas.health import HealthData

router = APIRouter()


@router.get("/", response_model=Envelope[HealthData])
def get_health(db: DbDep) -> Envelope[HealthData]:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return Envelope[HealthData](
        message="Service is running.",
        data=HealthData(environment=settings.APP_ENV, database=db_status),
    )
