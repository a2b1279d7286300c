"""Scenario data model, the parser's output.

Visgroup → ModulePlacement (color/scale dereferenced at parse time)
Move → MoveSet → MoveSetSequence
Scenario is the aggregate root handed to the rendering and playback side.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webvis.scenario.errors import ScenarioWarning

Vec3 = tuple[float, float, float]
IntVec3 = tuple[int, int, int]


class ShapeType(enum.Enum):
    CUBE = "CUBE"
    RHOMBIC_DODECAHEDRON = "RHOMBIC_DODECAHEDRON"
    CATOM = "CATOM"

    @classmethod
    def from_token(cls, token: str) -> ShapeType | None:
        """Exact, case-sensitive lookup. Returns None for unknown tokens."""
        try:
            return cls(token)
        except ValueError:
            return None


class MoveKind(enum.Enum):
    SLIDING = "SLIDING"
    PIVOT = "PIVOT"


@dataclass(frozen=True)
class Visgroup:
    id: int
    color: IntVec3
    # scalePercent / 100
    scale: float

    @property
    def css_color(self) -> str:
        r, g, b = self.color
        return f"rgb({r}, {g}, {b})"

    @property
    def hex_color(self) -> str:
        r, g, b = self.color
        return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class ModulePlacement:
    module_id: int
    shape_type: ShapeType
    position: IntVec3
    visgroup_id: int
    color: IntVec3
    scale: float


@dataclass(frozen=True)
class Move:
    mover_id: int
    # Raw signed direction code as written in the scenario file
    anchor_code: int
    # Unit vector, or (0, 0, 0) for a pure slide / unknown code
    anchor_direction: Vec3
    delta_position: IntVec3
    kind: MoveKind
    shape_type: ShapeType


@dataclass
class MoveSet:
    """A batch of moves executed together."""

    moves: list[Move] = field(default_factory=list)
    is_checkpoint: bool = False

    def __len__(self) -> int:
        return len(self.moves)

    def mark_checkpoint(self) -> None:
        # One-way: a checkpoint batch never reverts
        self.is_checkpoint = True


class MoveSetSequence:
    """Ordered choreography of MoveSets, consumed front-to-back by playback."""

    def __init__(self, move_sets: list[MoveSet] | None = None) -> None:
        self._move_sets: list[MoveSet] = list(move_sets or [])

    def __len__(self) -> int:
        return len(self._move_sets)

    def __iter__(self) -> Iterator[MoveSet]:
        return iter(self._move_sets)

    def __getitem__(self, index: int) -> MoveSet:
        return self._move_sets[index]

    @property
    def move_count(self) -> int:
        return sum(len(ms) for ms in self._move_sets)

    def checkpoint_indices(self) -> list[int]:
        return [i for i, ms in enumerate(self._move_sets) if ms.is_checkpoint]

    def next_checkpoint(self, index: int) -> int | None:
        """First checkpoint strictly after ``index``, or None."""
        for i in range(index + 1, len(self._move_sets)):
            if self._move_sets[i].is_checkpoint:
                return i
        return None

    def previous_checkpoint(self, index: int) -> int | None:
        """Last checkpoint strictly before ``index``, or None."""
        for i in range(min(index, len(self._move_sets)) - 1, -1, -1):
            if self._move_sets[i].is_checkpoint:
                return i
        return None


@dataclass
class Scenario:
    """Fully parsed scenario. Built wholesale by ``parse_scenario``."""

    name: str
    description: str
    shape_type: ShapeType
    modules: list[ModulePlacement]
    centroid: Vec3
    extent: float
    move_sets: MoveSetSequence
    # Component-wise bounding box of module positions
    bounds_min: Vec3 = (0.0, 0.0, 0.0)
    bounds_max: Vec3 = (0.0, 0.0, 0.0)
    # Snapshot of the visgroup table, kept for canonical serialization
    visgroups: dict[int, Visgroup] = field(default_factory=dict)
    # Recovered misses: UnknownShapeType, UnrecognizedDirectionCode
    warnings: list[ScenarioWarning] = field(default_factory=list)

    @property
    def num_modules(self) -> int:
        return len(self.modules)
