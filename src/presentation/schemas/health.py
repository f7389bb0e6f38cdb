"""Health check schema."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
    version: str
    navitas_configured: bool
    timestamp: datetime
