"""
Shared fixtures for Simple Pong tests
"""

import os

# PyGame must not open a real window or audio device during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from simple_pong.core.match import Match  # noqa: E402
from simple_pong.utils.config import ScreenConfig  # noqa: E402


@pytest.fixture
def screen() -> ScreenConfig:
    """An 800x600 logical screen"""
    return ScreenConfig(width=800, height=600)


@pytest.fixture
def match(screen: ScreenConfig) -> Match:
    """A fresh match on the 800x600 screen"""
    return Match(screen)
