"""Per-line sanitization: drop spaces, strip ``//`` comments, detect ``*`` markers."""

from __future__ import annotations

import re
from typing import NamedTuple

from webvis.scenario.errors import MalformedField

COMMENT_MARKER = "//"
CHECKPOINT_MARKER = "*"

# Every data line (visgroup, module, move) carries five integers
FIELD_COUNT = 5

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class SanitizedLine(NamedTuple):
    text: str
    checkpoint: bool


def sanitize_line(raw: str) -> SanitizedLine | None:
    """Return the cleaned line, or None if nothing is left (a block boundary).

    Only the space character is removed. Tabs and other characters survive
    and are rejected by ``parse_int_fields``.
    """
    line = raw.replace(" ", "").split(COMMENT_MARKER, 1)[0]
    if not line:
        return None
    if line[0] == CHECKPOINT_MARKER:
        return SanitizedLine(line[1:], True)
    return SanitizedLine(line, False)


def parse_int_fields(text: str, line_number: int, count: int = FIELD_COUNT) -> list[int]:
    """Split a sanitized data line into exactly ``count`` integers."""
    tokens = text.split(",")
    if len(tokens) != count:
        raise MalformedField(
            f"expected {count} comma-separated integers, got {len(tokens)} in {text!r}",
            line_number,
        )
    values: list[int] = []
    for token in tokens:
        if _INT_TOKEN.fullmatch(token) is None:
            raise MalformedField(f"not an integer: {token!r}", line_number)
        values.append(int(token))
    return values
