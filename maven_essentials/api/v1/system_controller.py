"""
System Controller
=================

FastAPI controller for operational endpoints (service info and health).
"""
from fastapi import APIRouter, Depends, Request

from maven_essentials.api.v1.dependencies import get_definition, get_settings
from maven_essentials.api.v1.schemas import ApplicationInfoResponse, HealthResponse
from maven_essentials.boot.definition import ApplicationDefinition
from maven_essentials.core.config import Settings
from maven_essentials.utils.datetime_utils import to_iso

router = APIRouter(tags=["system"])


@router.get(
    "/",
    response_model=ApplicationInfoResponse,
    summary="Service information",
)
async def root(
    request: Request,
    definition: ApplicationDefinition = Depends(get_definition),
    settings: Settings = Depends(get_settings),
) -> ApplicationInfoResponse:
    """Root endpoint - service name, version and start time."""
    started_at = getattr(request.app.state, "started_at", None)
    return ApplicationInfoResponse(
        status="running",
        service=settings.application_name or definition.name,
        version=definition.version,
        docs=request.app.docs_url or "",
        started_at=to_iso(started_at) if started_at else None,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")
