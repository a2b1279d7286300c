"""Tests for the scenario data model."""

import dataclasses

import pytest

from webvis.models.scenario import (
    Move,
    MoveKind,
    MoveSet,
    MoveSetSequence,
    ShapeType,
    Visgroup,
)


def _move(mover_id: int = 1) -> Move:
    return Move(
        mover_id=mover_id,
        anchor_code=0,
        anchor_direction=(0.0, 0.0, 0.0),
        delta_position=(1, 0, 0),
        kind=MoveKind.SLIDING,
        shape_type=ShapeType.CUBE,
    )


def _sequence(flags: list[bool]) -> MoveSetSequence:
    return MoveSetSequence([MoveSet(moves=[_move()], is_checkpoint=f) for f in flags])


def test_shape_type_from_token():
    assert ShapeType.from_token("CATOM") is ShapeType.CATOM
    assert ShapeType.from_token("catom") is None
    assert ShapeType.from_token("") is None


def test_visgroup_colors():
    vg = Visgroup(id=0, color=(255, 16, 0), scale=0.5)
    assert vg.css_color == "rgb(255, 16, 0)"
    assert vg.hex_color == "#ff1000"


def test_records_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _move().mover_id = 2


def test_checkpoint_is_sticky():
    ms = MoveSet()
    ms.mark_checkpoint()
    ms.mark_checkpoint()
    assert ms.is_checkpoint


def test_checkpoint_navigation():
    seq = _sequence([True, False, True, False, False, True])
    assert len(seq) == 6
    assert seq.move_count == 6
    assert seq.checkpoint_indices() == [0, 2, 5]
    assert seq.next_checkpoint(0) == 2
    assert seq.next_checkpoint(2) == 5
    assert seq.next_checkpoint(5) is None
    assert seq.previous_checkpoint(4) == 2
    assert seq.previous_checkpoint(2) == 0
    assert seq.previous_checkpoint(0) is None
    assert seq.previous_checkpoint(99) == 5


def test_empty_sequence():
    seq = MoveSetSequence()
    assert len(seq) == 0
    assert seq.checkpoint_indices() == []
    assert seq.next_checkpoint(-1) is None
