"""FastAPI application entrypoint. No business logic; only wiring, middleware and error envelopes."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router as api_router
from app.core.config import settings
from app.core.errors import AppError, InternalError, ValidationFailedError
from app.core.validation import format_violations
from app.schemas.base import Envelope
from app.schemas.health import ServiceInfo

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PICCE API",
    version="0.1.0",
    docs_url="/api-docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(error: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_envelope(),
        headers=error.headers,
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = format_violations(list(exc.errors()))
    return _error_response(ValidationFailedError("Invalid request parameters.", details=violations))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(InternalError("An unexpected error occurred."))


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", response_model=Envelope[ServiceInfo])
def root() -> Envelope[ServiceInfo]:
    """Root route; minimal payload for discovery."""
    return Envelope[ServiceInfo](
        message="PICCE API",
        data=ServiceInfo(name=app.title, version=app.version, docs_url=app.docs_url),
    )
