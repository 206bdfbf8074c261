import pytest

from blockfall.config import GameConfig, HEIGHT, WIDTH


def test_defaults():
    config = GameConfig()
    assert (config.width, config.height) == (WIDTH, HEIGHT)
    assert config.row_reward == 10
    assert config.initial_drop_interval == 600
    assert config.min_drop_interval == 100
    assert config.spawn_column == WIDTH // 2 - 2


def test_spawn_column_clamped_on_narrow_boards():
    assert GameConfig(width=3, height=6).spawn_column == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"width": 2},
        {"row_reward": -10},
        {"speedup_every": 0},
        {"drop_interval_step": -5},
        {"min_drop_interval": 0},
        {"min_drop_interval": 700},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_is_immutable():
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.width = 5
