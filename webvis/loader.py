"""Scenario input retrieval.

Reading runs in a worker thread so the event loop stays free. Failures are
reported as ScenarioSourceError, never as a parse error.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from webvis.scenario.errors import ScenarioSourceError

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ScenarioSourceError(f"{path}: not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ScenarioSourceError(f"{path}: {e.strerror or e}") from e


async def read_scenario_file(path: str | Path) -> str:
    """Read a scenario file without blocking the event loop."""
    path = Path(path)
    logger.debug("Reading scenario file %s", path)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _read_text, path)
