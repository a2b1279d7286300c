"""World: the single owner of scene state.

Holds the module registry, the active-move pointer, the camera and the
currently loaded scenario. Loading a scenario always tears the previous one
down first, so state from two scenarios never mixes. A failed load leaves the
world empty.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from webvis.loader import read_scenario_file
from webvis.models.scenario import ModulePlacement, Move, Scenario, Vec3
from webvis.scenario.parser import parse_scenario
from webvis.utils.geometry import frame_camera

logger = logging.getLogger(__name__)


@dataclass
class Camera:
    position: Vec3 = (0.0, 0.0, 0.0)
    target: Vec3 = (0.0, 0.0, 0.0)


class ModuleRegistry:
    """Placements currently in the scene.

    ``on_destroy`` is called once per placement on teardown, letting a
    rendering layer drop its own objects.
    """

    def __init__(self, on_destroy: Callable[[ModulePlacement], None] | None = None) -> None:
        self._placements: list[ModulePlacement] = []
        self._by_id: dict[int, ModulePlacement] = {}
        self._on_destroy = on_destroy

    def __len__(self) -> int:
        return len(self._placements)

    def __iter__(self) -> Iterator[ModulePlacement]:
        return iter(self._placements)

    def add(self, placement: ModulePlacement) -> None:
        # Module ids are not validated unique; lookup returns the latest
        self._placements.append(placement)
        self._by_id[placement.module_id] = placement

    def get(self, module_id: int) -> ModulePlacement | None:
        return self._by_id.get(module_id)

    def destroy_all(self) -> None:
        if self._on_destroy is not None:
            for placement in self._placements:
                self._on_destroy(placement)
        self._placements.clear()
        self._by_id.clear()


class World:
    def __init__(
        self,
        camera_padding: float = 3.0,
        registry: ModuleRegistry | None = None,
        on_cancel_move: Callable[[Move], None] | None = None,
    ) -> None:
        self.camera_padding = camera_padding
        self.modules = registry if registry is not None else ModuleRegistry()
        self.camera = Camera()
        self.scenario: Scenario | None = None
        self.active_move: Move | None = None
        self._on_cancel_move = on_cancel_move

    def start_move(self, move: Move) -> None:
        """Called by playback when a move begins animating."""
        self.cancel_active_move()
        self.active_move = move

    def finish_move(self) -> None:
        self.active_move = None

    def cancel_active_move(self) -> None:
        if self.active_move is None:
            return
        logger.debug("Cancelling active move of module %d", self.active_move.mover_id)
        if self._on_cancel_move is not None:
            self._on_cancel_move(self.active_move)
        self.active_move = None

    def reset(self) -> None:
        """Drop every piece of scenario state. Order: stop motion, then teardown."""
        self.cancel_active_move()
        self.modules.destroy_all()
        self.scenario = None

    def load_scenario(self, text: str) -> Scenario:
        """Teardown → parse → install.

        Parse errors propagate after teardown; the world is then empty.
        """
        self.reset()
        scenario = parse_scenario(text)
        self._install(scenario)
        return scenario

    async def load_scenario_file(self, path: str | Path) -> Scenario:
        # Retrieval errors surface before any teardown
        text = await read_scenario_file(path)
        return self.load_scenario(text)

    def _install(self, scenario: Scenario) -> None:
        for placement in scenario.modules:
            self.modules.add(placement)
        self.camera.position, self.camera.target = frame_camera(
            scenario.centroid, scenario.extent, self.camera_padding
        )
        self.scenario = scenario
        logger.info(
            "Installed scenario %r (%d modules), camera at %s",
            scenario.name,
            len(self.modules),
            self.camera.position,
        )
