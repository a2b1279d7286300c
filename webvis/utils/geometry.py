"""Leaf-node geometry helpers. No scenario imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def normalize(vec: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unit vector in the direction of ``vec``. The zero vector stays zero."""
    norm = float(np.linalg.norm(vec))
    if norm < 1e-12:
        return np.zeros_like(vec, dtype=np.float64)
    return vec / norm


def extent(min_coords: NDArray[np.float64], max_coords: NDArray[np.float64]) -> float:
    """Largest per-axis span of a bounding box."""
    return float(np.max(max_coords - min_coords))


def frame_camera(
    center: tuple[float, float, float],
    span: float,
    padding: float = 3.0,
) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
    """Camera (position, look-at target) that keeps the whole scenario in view.

    The camera sits on the +z side of the centroid, ``span + padding`` away.
    """
    cx, cy, cz = center
    return (cx, cy, cz + span + padding), (cx, cy, cz)
