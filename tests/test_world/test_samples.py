"""Every bundled sample scenario must parse."""

import pytest

from tests.conftest import SAMPLES_DIR

from webvis.models.scenario import MoveKind
from webvis.scenario.parser import parse_scenario


@pytest.mark.parametrize("path", sorted(SAMPLES_DIR.glob("*.scen")), ids=lambda p: p.name)
def test_sample_parses(path):
    sc = parse_scenario(path.read_text())
    assert sc.num_modules > 0
    assert len(sc.move_sets) > 0
    assert sc.move_sets[0].is_checkpoint
    assert sc.warnings == []


def test_pivot_walk(samples_dir):
    sc = parse_scenario((samples_dir / "pivot_walk.scen").read_text())
    assert sc.visgroups[1].color == (255, 120, 0)
    assert sc.visgroups[1].scale == pytest.approx(0.9)
    assert sc.centroid == pytest.approx((1.0, 0.0, 0.0))
    assert sc.extent == 2.0
    assert [ms.is_checkpoint for ms in sc.move_sets] == [True, True, False]
    last = sc.move_sets[2].moves
    assert [m.kind for m in last] == [MoveKind.SLIDING, MoveKind.SLIDING]
    assert last[0].anchor_direction == (1.0, 0.0, 0.0)
