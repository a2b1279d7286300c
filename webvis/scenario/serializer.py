"""Write a Scenario back out in canonical scenario-file form.

Output parses back to the same placements, visgroups and move sets. Comments
and spacing of the original file are not preserved.
"""

from __future__ import annotations

from webvis.models.scenario import Scenario


def _row(*values: int) -> str:
    return ",".join(str(v) for v in values)


def serialize_scenario(scenario: Scenario) -> str:
    """Generate canonical scenario text."""
    lines = [scenario.name, scenario.description, scenario.shape_type.value, ""]

    for vg in scenario.visgroups.values():
        lines.append(_row(vg.id, *vg.color, round(vg.scale * 100)))
    lines.append("")

    for m in scenario.modules:
        lines.append(_row(m.module_id, m.visgroup_id, *m.position))

    for move_set in scenario.move_sets:
        lines.append("")
        for i, move in enumerate(move_set.moves):
            row = _row(move.mover_id, move.anchor_code, *move.delta_position)
            # One marker per batch is enough
            if i == 0 and move_set.is_checkpoint:
                row = "*" + row
            lines.append(row)

    return "\n".join(lines) + "\n"
