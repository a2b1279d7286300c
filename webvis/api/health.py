"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from webvis import __version__
from webvis.dependencies import get_world
from webvis.models.responses import HealthResponse
from webvis.world import World

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(world: World = Depends(get_world)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        scenario_loaded=world.scenario is not None,
    )
