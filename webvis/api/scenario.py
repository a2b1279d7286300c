"""Scenario endpoints: load, inspect and re-serialize the current scenario."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from webvis.config import Settings
from webvis.dependencies import get_settings, get_world
from webvis.models.requests import LoadScenarioRequest
from webvis.models.responses import (
    CameraOut,
    CheckpointsResponse,
    ErrorResponse,
    ModuleOut,
    MoveOut,
    MoveSetOut,
    ScenarioResponse,
    VisgroupOut,
)
from webvis.models.scenario import Scenario
from webvis.scenario.serializer import serialize_scenario
from webvis.world import Camera, World

router = APIRouter(prefix="/scenario")


def scenario_to_response(scenario: Scenario, camera: Camera) -> ScenarioResponse:
    return ScenarioResponse(
        name=scenario.name,
        description=scenario.description,
        shape_type=scenario.shape_type.value,
        visgroups=[
            VisgroupOut(id=vg.id, color=vg.color, hex_color=vg.hex_color, scale=vg.scale)
            for vg in scenario.visgroups.values()
        ],
        modules=[
            ModuleOut(
                module_id=m.module_id,
                visgroup_id=m.visgroup_id,
                position=m.position,
                color=m.color,
                scale=m.scale,
            )
            for m in scenario.modules
        ],
        centroid=scenario.centroid,
        extent=scenario.extent,
        bounds_min=scenario.bounds_min,
        bounds_max=scenario.bounds_max,
        move_sets=[
            MoveSetOut(
                is_checkpoint=ms.is_checkpoint,
                moves=[
                    MoveOut(
                        mover_id=mv.mover_id,
                        kind=mv.kind.value,
                        anchor_code=mv.anchor_code,
                        anchor_direction=mv.anchor_direction,
                        delta_position=mv.delta_position,
                    )
                    for mv in ms.moves
                ],
            )
            for ms in scenario.move_sets
        ],
        camera=CameraOut(position=camera.position, target=camera.target),
        warnings=[str(w) for w in scenario.warnings],
    )


def _current(world: World) -> Scenario:
    if world.scenario is None:
        raise HTTPException(status_code=404, detail="No scenario loaded")
    return world.scenario


@router.post(
    "",
    response_model=ScenarioResponse,
    responses={422: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def load_scenario(
    req: LoadScenarioRequest,
    world: World = Depends(get_world),
    settings: Settings = Depends(get_settings),
) -> ScenarioResponse:
    size = len(req.text.encode("utf-8"))
    if size > settings.max_scenario_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Scenario is {size} bytes; limit is {settings.max_scenario_bytes}",
        )
    scenario = world.load_scenario(req.text)
    return scenario_to_response(scenario, world.camera)


@router.get("", response_model=ScenarioResponse)
async def get_scenario(world: World = Depends(get_world)) -> ScenarioResponse:
    return scenario_to_response(_current(world), world.camera)


@router.get("/text", response_class=PlainTextResponse)
async def get_scenario_text(world: World = Depends(get_world)) -> str:
    return serialize_scenario(_current(world))


@router.get("/checkpoints", response_model=CheckpointsResponse)
async def get_checkpoints(world: World = Depends(get_world)) -> CheckpointsResponse:
    move_sets = _current(world).move_sets
    return CheckpointsResponse(
        move_set_count=len(move_sets),
        checkpoints=move_sets.checkpoint_indices(),
    )
