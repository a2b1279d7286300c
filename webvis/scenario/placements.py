"""Module placement builder (block 1): ``moduleId, visgroupId, x, y, z`` per line.

Keeps running sum / min / max so centroid and extent come out of the same
pass that builds the placements.
"""

from __future__ import annotations

import numpy as np

from webvis.models.scenario import ModulePlacement, ShapeType, Vec3
from webvis.scenario.errors import EmptyModuleBlock
from webvis.scenario.sanitizer import parse_int_fields
from webvis.scenario.visgroups import VisgroupTable
from webvis.utils import geometry


def _as_vec3(arr: np.ndarray | None) -> Vec3 | None:
    if arr is None:
        return None
    return (float(arr[0]), float(arr[1]), float(arr[2]))


class PlacementBuilder:
    def __init__(self, visgroups: VisgroupTable, shape_type: ShapeType) -> None:
        self.visgroups = visgroups
        self.shape_type = shape_type
        self.placements: list[ModulePlacement] = []
        self._total = np.zeros(3, dtype=np.float64)
        self._min_coords: np.ndarray | None = None
        self._max_coords: np.ndarray | None = None

    def add_line(self, text: str, line_number: int) -> ModulePlacement:
        module_id, vg_id, x, y, z = parse_int_fields(text, line_number)
        group = self.visgroups.resolve(vg_id, line_number)
        placement = ModulePlacement(
            module_id=module_id,
            shape_type=self.shape_type,
            position=(x, y, z),
            visgroup_id=vg_id,
            color=group.color,
            scale=group.scale,
        )
        self.placements.append(placement)

        pos = np.array([x, y, z], dtype=np.float64)
        if self._min_coords is None:
            self._min_coords = pos.copy()
            self._max_coords = pos.copy()
        self._total += pos
        self._min_coords = np.minimum(self._min_coords, pos)
        self._max_coords = np.maximum(self._max_coords, pos)
        return placement

    @property
    def min_coords(self) -> Vec3 | None:
        return _as_vec3(self._min_coords)

    @property
    def max_coords(self) -> Vec3 | None:
        return _as_vec3(self._max_coords)

    def centroid(self) -> Vec3:
        if not self.placements:
            raise EmptyModuleBlock("scenario defines no modules; centroid is undefined")
        c = self._total / len(self.placements)
        return (float(c[0]), float(c[1]), float(c[2]))

    def extent(self) -> float:
        if self._min_coords is None or self._max_coords is None:
            raise EmptyModuleBlock("scenario defines no modules; extent is undefined")
        return geometry.extent(self._min_coords, self._max_coords)
