import random

import pytest

from blockfall.config import GameConfig
from blockfall.game_state import GameSession


class FirstChoiceRandom(random.Random):
    """Random source that always picks the first catalog entry."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def small_config() -> GameConfig:
    return GameConfig(width=4, height=6)


@pytest.fixture
def session(small_config: GameConfig) -> GameSession:
    # First catalog entry is the vertical three-cell bar, spawned at (0, 0).
    return GameSession(small_config, rng=FirstChoiceRandom())
