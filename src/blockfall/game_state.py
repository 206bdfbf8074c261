"""Game session state machine.

A :class:`GameSession` owns the board, the active piece, the score and the
gravity interval.  Two kinds of events drive it: elapsed-time deltas passed to
:meth:`GameSession.tick` and movement commands from
:mod:`blockfall.commands`.  Both run through the same collision check and,
when a downward move is blocked, the same lock sequence::

    FALLING -> LOCKING -> CLEARING -> SPAWNING -> FALLING
                                              \\-> GAME_OVER

``GAME_OVER`` is terminal until :meth:`GameSession.restart` is called.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import Board
from .commands import Command, apply_command
from .config import GameConfig
from .piece import ActivePiece
from .pieces import random_color, random_shape
from .utils import collides, next_drop_interval, render_grid


LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    """States of the session's piece lifecycle."""

    FALLING = "falling"
    LOCKING = "locking"
    CLEARING = "clearing"
    SPAWNING = "spawning"
    GAME_OVER = "game_over"


class BoardFull(Exception):
    """Raised when a freshly spawned piece overlaps the locked cells."""


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers."""

    grid: Tuple[Tuple[int, ...], ...]
    piece: Optional[ActivePiece]
    score: int
    drop_interval: int
    phase: Phase

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def frame(self) -> List[List[int]]:
        """Return the board with the active piece drawn on top."""

        return render_grid(self.grid, self.piece)


class GameSession:
    """Mutable state and transitions for one game."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.on_game_over = on_game_over
        self.board = Board(self.config.width, self.config.height)
        self.active: Optional[ActivePiece] = None
        self.score = 0
        self.drop_interval = self.config.initial_drop_interval
        self.drop_accum = 0.0
        self.phase = Phase.SPAWNING
        self.restart()

    # Lifecycle --------------------------------------------------------
    def restart(self) -> None:
        """Reset board, score and speed, then spawn the first piece."""

        self.board.clear()
        self.score = 0
        self.drop_interval = self.config.initial_drop_interval
        self.drop_accum = 0.0
        self.phase = Phase.SPAWNING
        self._spawn_or_game_over()
        LOGGER.info("Session started on a %dx%d board", self.board.width, self.board.height)

    def spawn(self) -> ActivePiece:
        """Place a new random piece at the spawn point and return it.

        Raises:
            BoardFull: If the new piece overlaps locked cells.
        """

        self.active = ActivePiece(
            shape=random_shape(self.rng),
            color=random_color(self.rng),
            position=(self.config.spawn_column, 0),
        )
        if collides(self.board, self.active):
            raise BoardFull("No room to spawn a new piece")
        return self.active

    def _spawn_or_game_over(self) -> None:
        try:
            self.spawn()
        except BoardFull:
            self._game_over()
        else:
            self.phase = Phase.FALLING

    def _game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        self.board.clear()
        self.drop_accum = 0.0
        LOGGER.info("Game over. Final score: %d", self.score)
        if self.on_game_over is not None:
            self.on_game_over(self.score)

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def falling(self) -> bool:
        return self.phase is Phase.FALLING and self.active is not None

    # Transitions ------------------------------------------------------
    def tick(self, delta_ms: float) -> None:
        """Advance gravity by ``delta_ms`` milliseconds.

        At most one downward step is taken per call; the accumulator restarts
        from zero after each step.
        """

        if delta_ms < 0:
            raise ValueError("delta_ms must not be negative")
        if self.phase is not Phase.FALLING:
            return
        self.drop_accum += delta_ms
        if self.drop_accum > self.drop_interval:
            self.drop_accum = 0.0
            self.step_down()

    def step_down(self) -> bool:
        """Move the piece one row down, locking it if the move is blocked.

        Returns ``True`` if the piece moved and ``False`` if it was locked.
        """

        if not self.falling:
            return False
        if self.try_translate(0, 1):
            return True
        self.lock_and_continue()
        return False

    def try_translate(self, dx: int, dy: int) -> bool:
        """Translate the active piece, rolling back if it would collide."""

        if not self.falling:
            return False
        self.active.translate(dx, dy)
        if collides(self.board, self.active):
            self.active.translate(-dx, -dy)
            return False
        return True

    def try_rotate(self) -> bool:
        """Rotate the active piece in place, restoring it if it would collide."""

        if not self.falling:
            return False
        previous = self.active.rotate()
        if collides(self.board, self.active):
            self.active.shape = previous
            return False
        return True

    def lock_and_continue(self) -> None:
        """Lock the active piece, clear rows and spawn the next piece."""

        if not self.falling:
            return
        self.phase = Phase.LOCKING
        self.board.lock_piece(self.active)

        self.phase = Phase.CLEARING
        cleared = self.remove_completed_rows()
        if cleared:
            interval = next_drop_interval(self.drop_interval, self.score, self.config)
            if interval != self.drop_interval:
                LOGGER.debug("Drop interval %d -> %d ms", self.drop_interval, interval)
                self.drop_interval = interval

        self.phase = Phase.SPAWNING
        self._spawn_or_game_over()

    def remove_completed_rows(self) -> int:
        """Remove completed rows from the board and score them."""

        cleared = self.board.remove_completed_rows()
        if cleared:
            self.score += cleared * self.config.row_reward
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        return cleared

    def handle(self, command: Command) -> bool:
        """Apply an input command; see :func:`blockfall.commands.apply_command`."""

        return apply_command(self, command)

    # Views ------------------------------------------------------------
    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the state a renderer needs."""

        return Snapshot(
            grid=tuple(tuple(row) for row in self.board.rows()),
            piece=self.active.copy() if self.active is not None else None,
            score=self.score,
            drop_interval=self.drop_interval,
            phase=self.phase,
        )
