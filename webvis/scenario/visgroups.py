"""Visgroup table (block 0): ``id, r, g, b, scalePercent`` per line."""

from __future__ import annotations

import logging

from webvis.models.scenario import Visgroup
from webvis.scenario.errors import UnresolvedVisgroupReference
from webvis.scenario.sanitizer import parse_int_fields

logger = logging.getLogger(__name__)


class VisgroupTable:
    """Scenario-local id → Visgroup lookup. Duplicate ids: last write wins."""

    def __init__(self) -> None:
        self._groups: dict[int, Visgroup] = {}

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, vg_id: int) -> bool:
        return vg_id in self._groups

    def add_line(self, text: str, line_number: int) -> Visgroup:
        vg_id, r, g, b, scale_percent = parse_int_fields(text, line_number)
        if vg_id in self._groups:
            logger.debug("Visgroup %d redefined on line %d", vg_id, line_number)
        group = Visgroup(id=vg_id, color=(r, g, b), scale=scale_percent / 100)
        self._groups[vg_id] = group
        return group

    def resolve(self, vg_id: int, line_number: int | None = None) -> Visgroup:
        try:
            return self._groups[vg_id]
        except KeyError:
            raise UnresolvedVisgroupReference(
                f"visgroup {vg_id} is not defined", line_number
            ) from None

    def snapshot(self) -> dict[int, Visgroup]:
        return dict(self._groups)
