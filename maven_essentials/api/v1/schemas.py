"""
System Schemas
==============

Pydantic models for the operational endpoints.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ApplicationInfoResponse(BaseModel):
    """Response for the root endpoint."""
    status: str
    service: str
    version: str
    docs: str
    started_at: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "running",
                "service": "maven-essentials",
                "version": "0.0.1",
                "docs": "/docs",
                "started_at": "2025-12-20T09:11:50Z",
            }
        }
    )


class HealthResponse(BaseModel):
    """Response for the health endpoint."""
    status: str

    model_config = ConfigDict(json_schema_extra={"example": {"status": "healthy"}})
