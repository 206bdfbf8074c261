"""Simple pygame front-end for the game engine.

The window only draws :class:`~blockfall.game_state.Snapshot` objects and
forwards keyboard input as :class:`~blockfall.commands.Command` values; all
game rules live in :class:`~blockfall.game_state.GameSession`.

Run with: `python -m blockfall.run_pygame`
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import pygame

from .commands import Command
from .config import GameConfig
from .game_state import GameSession, Snapshot

# Size of a single board cell in pixels
CELL_SIZE = 15
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (0, 0, 0)
LOCKED_COLOR = (255, 255, 255)

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
}


LOGGER = logging.getLogger(__name__)


def draw_snapshot(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render locked cells and the active piece."""

    screen.fill(BACKGROUND)
    for r, row in enumerate(snapshot.grid):
        for c, value in enumerate(row):
            if value:
                rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                pygame.draw.rect(screen, LOCKED_COLOR, rect)
    if snapshot.piece is not None and not snapshot.game_over:
        color = pygame.Color(snapshot.piece.color)
        for c, r in snapshot.piece.cells():
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, color, rect)


def handle_key(event: pygame.event.Event, runner: "GameRunner") -> None:
    """Process keyboard events for piece movement and session control."""

    if runner.state is None:
        return
    if event.key == pygame.K_r:
        runner.restart()
    elif event.key == pygame.K_p:
        if runner.paused:
            runner.resume()
        else:
            runner.pause()
    elif not runner.paused:
        command = KEY_COMMANDS.get(event.key)
        if command is not None:
            runner.state.handle(command)


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.state: Optional[GameSession] = None
        self._running = False
        self._paused = False
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def _on_game_over(self, score: int) -> None:
        LOGGER.info("Board full with score %d. Press R to restart.", score)

    def new_session(self) -> GameSession:
        self.state = GameSession(self.config, on_game_over=self._on_game_over)
        return self.state

    def restart(self) -> None:
        if self.state is None:
            self.new_session()
        else:
            self.state.restart()
        self._paused = False

    def frame(self, dt: float) -> None:
        """Advance the session by ``dt`` milliseconds and redraw.

        Errors raised while advancing are logged and the session restarts so
        the window keeps running.
        """

        if self.state is None:
            return
        try:
            if not self._paused:
                self.state.tick(dt)
            snapshot = self.state.snapshot()
            if self._screen is not None:
                draw_snapshot(self._screen, snapshot)
                status = "Game Over - " if snapshot.game_over else ""
                if self._paused:
                    status = "Paused - "
                pygame.display.set_caption(f"Blockfall - {status}Score: {snapshot.score}")
                pygame.display.flip()
        except Exception:
            LOGGER.exception("Crash detected; restarting session")
            self.state.restart()

    async def _run_loop(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(
            (self.config.width * CELL_SIZE, self.config.height * CELL_SIZE)
        )
        pygame.display.set_caption("Blockfall")
        self._clock = pygame.time.Clock()
        self.new_session()
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self)
            self.frame(dt)
            # Yield to the host event loop to keep other tasks responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def start(self) -> None:
        if self._running:
            LOGGER.info("Game already running")
            return
        self._paused = False
        asyncio.run(self._run_loop())

    def pause(self) -> None:
        if not self._running:
            LOGGER.info("Pause ignored: game not running")
            return
        self._paused = True
        LOGGER.info("Paused")

    def resume(self) -> None:
        if not self._running:
            LOGGER.info("Resume ignored: game not running")
            return
        self._paused = False
        LOGGER.info("Resumed")

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    GameRunner().start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
