"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from webvis.world import World

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples" / "scenarios"


# Minimal scenario: one red visgroup, two cubes, one pivot
TWO_CUBES = """S1
desc
CUBE

0,255,0,0,100

1,0,0,0,0
2,0,1,0,0

1,1,1,0,0
"""

# Module 2 points at a visgroup that does not exist
UNRESOLVED_VISGROUP = """Broken
module references visgroup 9
CUBE

0,255,0,0,100

1,0,0,0,0
2,9,1,0,0

1,1,1,0,0
"""

# Second batch carries an explicit checkpoint marker
CHECKPOINTED = """Checkpoints
two batches
CUBE

0,255,255,255,100

1,0,0,0,0
2,0,1,0,0

1,1,1,0,0

*2,0,0,1,0
"""

# Comments, stray spaces, CRLF endings, unknown shape token and rotation code
MESSY = (
    "Messy\r\n"
    "comments and spaces everywhere\r\n"
    "HEXAGON\r\n"
    "\r\n"
    " 0 , 10 , 20 , 30 , 50   // visgroups: grey-ish\r\n"
    "0,40,50,60,75 // redefined\r\n"
    "\r\n"
    "5, 0, -1, 2, 3\r\n"
    "6, 0, 3, -2, 9 // far corner\r\n"
    "\r\n"
    "5, 99, 0, 0, 1\r\n"
    "6, -13, 1, 0, 0\r\n"
    "\r\n"
    "\r\n"
    "5, 2, 0, 1, 0 // second batch\r\n"
)

NO_MOVES = """Static
nothing moves
CATOM

0,1,2,3,100

7,0,4,5,6
"""


@pytest.fixture
def two_cubes_text() -> str:
    return TWO_CUBES


@pytest.fixture
def messy_text() -> str:
    return MESSY


@pytest.fixture
def world() -> World:
    return World()


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES_DIR
