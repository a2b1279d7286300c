"""Direction code resolver — signed integer code → unit anchor vector.

The table is keyed by the absolute value of the code; the sign only decides
the move kind (see ``moves.decode_move``). Codes read as two digits naming
the axis directions summed together (1=+x, 2=+y, 3=+z, 4=-x, 5=-y, 6=-z),
so 13 is +x+z and 56 is -y-z.
"""

from __future__ import annotations

import logging

import numpy as np

from webvis.models.scenario import Vec3
from webvis.utils.geometry import normalize

logger = logging.getLogger(__name__)

ZERO: Vec3 = (0.0, 0.0, 0.0)

_RAW_DIRECTIONS: dict[int, tuple[int, int, int]] = {
    0: (0, 0, 0),
    1: (1, 0, 0),
    2: (0, 1, 0),
    3: (0, 0, 1),
    4: (-1, 0, 0),
    5: (0, -1, 0),
    6: (0, 0, -1),
    12: (1, 1, 0),
    13: (1, 0, 1),
    15: (1, -1, 0),
    16: (1, 0, -1),
    23: (0, 1, 1),
    26: (0, 1, -1),
    42: (-1, 1, 0),
    43: (-1, 0, 1),
    45: (-1, -1, 0),
    46: (-1, 0, -1),
    53: (0, -1, 1),
    56: (0, -1, -1),
}


def _unit(raw: tuple[int, int, int]) -> Vec3:
    v = normalize(np.asarray(raw, dtype=np.float64))
    return (float(v[0]), float(v[1]), float(v[2]))


DIRECTIONS: dict[int, Vec3] = {code: _unit(raw) for code, raw in _RAW_DIRECTIONS.items()}


def is_known_code(code: int) -> bool:
    return abs(code) in DIRECTIONS


def resolve_direction(code: int) -> Vec3:
    """Unit anchor direction for ``code``. Unknown codes give the zero vector."""
    direction = DIRECTIONS.get(abs(code))
    if direction is None:
        logger.warning("Unrecognized rotation code %d, treating as zero vector", code)
        return ZERO
    return direction
