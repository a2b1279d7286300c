"""Move decoding (blocks >= 2) and MoveSet assembly.

Each move line is ``moverId, anchorDirCode, dx, dy, dz``. Positive codes are
pivots; zero and negative codes are slides. Consecutive lines form a MoveSet;
a blank line closes it.
"""

from __future__ import annotations

import logging

from webvis.models.scenario import Move, MoveKind, MoveSet, MoveSetSequence, ShapeType
from webvis.scenario.directions import resolve_direction
from webvis.scenario.sanitizer import parse_int_fields

logger = logging.getLogger(__name__)


def classify_move(anchor_code: int) -> MoveKind:
    return MoveKind.PIVOT if anchor_code > 0 else MoveKind.SLIDING


def decode_move(text: str, line_number: int, shape_type: ShapeType) -> Move:
    mover_id, anchor_code, dx, dy, dz = parse_int_fields(text, line_number)
    return Move(
        mover_id=mover_id,
        anchor_code=anchor_code,
        anchor_direction=resolve_direction(anchor_code),
        delta_position=(dx, dy, dz),
        kind=classify_move(anchor_code),
        shape_type=shape_type,
    )


class MoveSetAssembler:
    """Groups decoded moves into checkpoint-tagged batches.

    The checkpoint flag starts set, so the first batch is always a
    checkpoint. It is cleared each time a batch is emitted and set again by
    any ``*``-marked line in the batch being built.
    """

    def __init__(self) -> None:
        self.move_sets: list[MoveSet] = []
        self._current = MoveSet()
        self._checkpoint = True

    def mark_checkpoint(self) -> None:
        self._checkpoint = True

    def add(self, move: Move) -> None:
        self._current.moves.append(move)

    def boundary(self) -> None:
        """Close the batch being built, if it holds any moves."""
        if not self._current.moves:
            return
        self._emit()
        self._checkpoint = False

    def finish(self) -> MoveSetSequence:
        if self._current.moves:
            self._emit()
        return MoveSetSequence(self.move_sets)

    def _emit(self) -> None:
        if self._checkpoint:
            self._current.mark_checkpoint()
        self.move_sets.append(self._current)
        logger.debug(
            "MoveSet %d: %d moves%s",
            len(self.move_sets) - 1,
            len(self._current.moves),
            " (checkpoint)" if self._current.is_checkpoint else "",
        )
        self._current = MoveSet()
