"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    scenario_loaded: bool = False


class ErrorResponse(BaseModel):
    error: str
    message: str
    line_number: int | None = None


class VisgroupOut(BaseModel):
    id: int
    color: tuple[int, int, int]
    hex_color: str
    scale: float


class ModuleOut(BaseModel):
    module_id: int
    visgroup_id: int
    position: tuple[int, int, int]
    color: tuple[int, int, int]
    scale: float


class MoveOut(BaseModel):
    mover_id: int
    kind: str
    anchor_code: int
    anchor_direction: tuple[float, float, float]
    delta_position: tuple[int, int, int]


class MoveSetOut(BaseModel):
    is_checkpoint: bool
    moves: list[MoveOut] = Field(default_factory=list)


class CameraOut(BaseModel):
    position: tuple[float, float, float]
    target: tuple[float, float, float]


class ScenarioResponse(BaseModel):
    name: str
    description: str
    shape_type: str
    visgroups: list[VisgroupOut] = Field(default_factory=list)
    modules: list[ModuleOut] = Field(default_factory=list)
    centroid: tuple[float, float, float]
    extent: float
    bounds_min: tuple[float, float, float]
    bounds_max: tuple[float, float, float]
    move_sets: list[MoveSetOut] = Field(default_factory=list)
    camera: CameraOut
    warnings: list[str] = Field(default_factory=list)


class CheckpointsResponse(BaseModel):
    move_set_count: int
    checkpoints: list[int] = Field(default_factory=list)
