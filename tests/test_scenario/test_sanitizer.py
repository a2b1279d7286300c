"""Tests for line sanitization and field parsing."""

import pytest

from webvis.scenario.errors import MalformedField
from webvis.scenario.sanitizer import parse_int_fields, sanitize_line


def test_strips_spaces():
    line = sanitize_line(" 1 , 2,3 ,4, 5 ")
    assert line.text == "1,2,3,4,5"
    assert not line.checkpoint


def test_strips_comment():
    line = sanitize_line("1,2,3,4,5 // trailing note")
    assert line.text == "1,2,3,4,5"


def test_comment_only_line_is_boundary():
    assert sanitize_line("// section header") is None
    assert sanitize_line("   ") is None
    assert sanitize_line("") is None


def test_checkpoint_marker():
    line = sanitize_line("* 3, 1, 0, 1, 0")
    assert line.checkpoint
    assert line.text == "3,1,0,1,0"


def test_marker_after_comment_is_ignored():
    assert sanitize_line("// *1,1,1,0,0") is None


def test_parse_int_fields():
    assert parse_int_fields("1,-2,3,0,45", line_number=4) == [1, -2, 3, 0, 45]


def test_parse_int_fields_rejects_non_integer():
    with pytest.raises(MalformedField) as exc:
        parse_int_fields("1,2,x,4,5", line_number=12)
    assert exc.value.line_number == 12
    assert "line 12" in str(exc.value)


def test_parse_int_fields_rejects_wrong_count():
    with pytest.raises(MalformedField):
        parse_int_fields("1,2,3,4", line_number=1)
    with pytest.raises(MalformedField):
        parse_int_fields("1,2,3,4,5,6", line_number=1)


def test_parse_int_fields_rejects_float():
    with pytest.raises(MalformedField):
        parse_int_fields("1,2,3.5,4,5", line_number=1)


@pytest.mark.parametrize("text", ["1,\t2,0,0,0", "1,1_0,1,0,0", "1,+,0,0,0", "1,,0,0,0"])
def test_parse_int_fields_rejects_loose_tokens(text):
    with pytest.raises(MalformedField) as exc:
        parse_int_fields(text, line_number=3)
    assert exc.value.line_number == 3


def test_parse_int_fields_accepts_explicit_sign():
    assert parse_int_fields("+1,-0,7,-12,+3", line_number=1) == [1, 0, 7, -12, 3]
