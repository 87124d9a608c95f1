import os

# Surfaces and drawing work without a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from config_module import FieldConfig
from particle_module import Particle, Window
from spawn_module import SpawnGenerator


@pytest.fixture
def window():
    return Window(1200.0, 800.0)


@pytest.fixture
def config():
    return FieldConfig()


@pytest.fixture
def spawner():
    return SpawnGenerator.seeded(1234)


@pytest.fixture
def make_particle():
    def _make(x, y, dx=1.0, dy=0.0, radius=2.0):
        return Particle((float(x), float(y)), (dx, dy), radius)
    return _make


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    import pygame
    pygame.init()
    yield
    pygame.quit()
