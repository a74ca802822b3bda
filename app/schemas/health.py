"""Schemas for the service status routes."""

from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel


class HealthData(CamelModel):
    """Payload of the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Database connectivity at the time of the request",
    )


class ServiceInfo(CamelModel):
    name: str
    version: str
    docs_url: str | None = None
