"""Tunable constants for a game session."""

from __future__ import annotations

from dataclasses import dataclass

from .pieces import max_piece_size


# Dimensions of the default playfield.
WIDTH = 20
HEIGHT = 30

# Points awarded for every cleared row.
ROW_REWARD = 10

# Gravity timing in milliseconds.  The interval shrinks by
# ``DROP_INTERVAL_STEP`` each time the score lands on a multiple of
# ``SPEEDUP_EVERY`` and never goes below ``MIN_DROP_INTERVAL``.
INITIAL_DROP_INTERVAL = 600
DROP_INTERVAL_STEP = 10
MIN_DROP_INTERVAL = 100
SPEEDUP_EVERY = 10


@dataclass(frozen=True)
class GameConfig:
    """Board size, scoring and speed-ramp settings for a session."""

    width: int = WIDTH
    height: int = HEIGHT
    row_reward: int = ROW_REWARD
    initial_drop_interval: int = INITIAL_DROP_INTERVAL
    drop_interval_step: int = DROP_INTERVAL_STEP
    min_drop_interval: int = MIN_DROP_INTERVAL
    speedup_every: int = SPEEDUP_EVERY

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive")
        piece_w, piece_h = max_piece_size()
        if self.width < piece_w or self.height < piece_h:
            raise ValueError(
                f"Board {self.width}x{self.height} cannot hold a {piece_w}x{piece_h} piece"
            )
        if self.row_reward < 0:
            raise ValueError("row_reward must not be negative")
        if self.drop_interval_step < 0:
            raise ValueError("drop_interval_step must not be negative")
        if self.speedup_every <= 0:
            raise ValueError("speedup_every must be positive")
        if not 0 < self.min_drop_interval <= self.initial_drop_interval:
            raise ValueError("min_drop_interval must be in (0, initial_drop_interval]")

    @property
    def spawn_column(self) -> int:
        """Column where new pieces appear, roughly centred."""

        return max(0, self.width // 2 - 2)
