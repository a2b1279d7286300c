"""Scenario parser — text → Scenario.

Layout of a scenario file:

    name
    description
    CUBE | RHOMBIC_DODECAHEDRON | CATOM
    <blank>
    visgroup block      id,r,g,b,scalePercent
    <blank>
    module block        moduleId,visgroupId,x,y,z
    <blank>
    move block(s)       [*]moverId,anchorDirCode,dx,dy,dz

Blocks are identified only by position. Lines are sanitized first, so a
comment-only line separates blocks exactly like an empty one.
"""

from __future__ import annotations

import enum
import logging

from webvis.models.scenario import Scenario, ShapeType
from webvis.scenario.directions import is_known_code
from webvis.scenario.errors import (
    MalformedHeader,
    ScenarioWarning,
    UnknownShapeType,
    UnrecognizedDirectionCode,
)
from webvis.scenario.moves import MoveSetAssembler, decode_move
from webvis.scenario.placements import PlacementBuilder
from webvis.scenario.sanitizer import sanitize_line
from webvis.scenario.visgroups import VisgroupTable

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = "\n\n"
HEADER_LINES = 3
DEFAULT_SHAPE_TYPE = ShapeType.CUBE


class BlockState(enum.Enum):
    EXPECTING_VISGROUPS = "visgroups"
    EXPECTING_MODULES = "modules"
    EXPECTING_MOVES = "moves"


_NEXT_STATE = {
    BlockState.EXPECTING_VISGROUPS: BlockState.EXPECTING_MODULES,
    BlockState.EXPECTING_MODULES: BlockState.EXPECTING_MOVES,
    BlockState.EXPECTING_MOVES: BlockState.EXPECTING_MOVES,
}


def parse_shape_type(token: str, warnings: list[ScenarioWarning] | None = None) -> ShapeType:
    shape_type = ShapeType.from_token(token)
    if shape_type is None:
        message = f"Unknown module type {token!r}, defaulting to {DEFAULT_SHAPE_TYPE.value}"
        logger.warning(message)
        if warnings is not None:
            warnings.append(UnknownShapeType(message))
        return DEFAULT_SHAPE_TYPE
    return shape_type


def split_header(text: str) -> tuple[list[str], str, int]:
    """Split normalized text into (metadata lines, data section, data start line).

    The returned line number is 1-based and refers to the first data line.
    """
    sep = text.find(HEADER_SEPARATOR)
    if sep < 0:
        raise MalformedHeader("no blank line separates the metadata from the data blocks")
    metadata_lines = text[:sep].split("\n")
    if len(metadata_lines) < HEADER_LINES:
        raise MalformedHeader(
            f"expected {HEADER_LINES} metadata lines (name, description, module type), "
            f"found {len(metadata_lines)}"
        )
    if len(metadata_lines) > HEADER_LINES:
        logger.warning(
            "Ignoring %d extra metadata line(s)", len(metadata_lines) - HEADER_LINES
        )
    # metadata lines + the blank separator line
    data_start = len(metadata_lines) + 2
    return metadata_lines, text[sep + len(HEADER_SEPARATOR):], data_start


def parse_scenario(text: str) -> Scenario:
    """Parse scenario text into a Scenario. Raises ScenarioError on malformed input."""
    text = text.replace("\r", "")
    metadata_lines, data, line_number = split_header(text)
    warnings: list[ScenarioWarning] = []

    name, description = metadata_lines[0], metadata_lines[1]
    shape_type = parse_shape_type(metadata_lines[2], warnings)

    visgroups = VisgroupTable()
    placements = PlacementBuilder(visgroups, shape_type)
    assembler = MoveSetAssembler()

    state = BlockState.EXPECTING_VISGROUPS

    for raw in data.split("\n"):
        line = sanitize_line(raw)
        if line is None:
            if state is BlockState.EXPECTING_MOVES:
                assembler.boundary()
            state = _NEXT_STATE[state]
            logger.debug("Line %d: block boundary, now %s", line_number, state.value)
            line_number += 1
            continue

        if state is BlockState.EXPECTING_VISGROUPS:
            visgroups.add_line(line.text, line_number)
        elif state is BlockState.EXPECTING_MODULES:
            placements.add_line(line.text, line_number)
        else:
            if line.checkpoint:
                assembler.mark_checkpoint()
            move = decode_move(line.text, line_number, shape_type)
            if not is_known_code(move.anchor_code):
                warnings.append(
                    UnrecognizedDirectionCode(
                        f"line {line_number}: unrecognized rotation code {move.anchor_code}"
                    )
                )
            assembler.add(move)
        line_number += 1

    scenario = Scenario(
        name=name,
        description=description,
        shape_type=shape_type,
        modules=placements.placements,
        centroid=placements.centroid(),
        extent=placements.extent(),
        move_sets=assembler.finish(),
        bounds_min=placements.min_coords,
        bounds_max=placements.max_coords,
        visgroups=visgroups.snapshot(),
        warnings=warnings,
    )
    logger.info(
        "Parsed scenario %r: %d visgroups, %d modules, %d move sets",
        scenario.name,
        len(scenario.visgroups),
        scenario.num_modules,
        len(scenario.move_sets),
    )
    return scenario
