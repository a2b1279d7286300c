"""FastAPI dependency injection."""

from __future__ import annotations

from webvis.config import settings
from webvis.world import World

# One scene per process; loads replace it wholesale
_world = World(camera_padding=settings.camera_padding)


def get_settings():
    return settings


def get_world() -> World:
    return _world
