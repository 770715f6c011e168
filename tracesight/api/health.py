"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from tracesight import __version__
from tracesight.engine.registry import get_registry
from tracesight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )
