"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .board import Board, LOCKED
from .config import GameConfig
from .piece import ActivePiece


def collides(board: Board, piece: ActivePiece) -> bool:
    """Return ``True`` if ``piece`` overlaps locked cells or leaves ``board``.

    Cells past the left, right or bottom edge (and above the top) always count
    as a collision because :meth:`Board.is_empty` treats them as occupied.
    """

    return any(not board.is_empty(y, x) for x, y in piece.cells())


def next_drop_interval(interval: int, score: int, config: GameConfig) -> int:
    """Return the gravity interval to use after a clear that left ``score``.

    The interval shrinks by one step when ``score`` is a nonzero multiple of
    ``config.speedup_every`` and is never reduced below the configured floor.
    """

    if score <= 0 or score % config.speedup_every:
        return interval
    if interval <= config.min_drop_interval:
        return interval
    return max(config.min_drop_interval, interval - config.drop_interval_step)


def render_grid(
    grid: Sequence[Sequence[int]], piece: Optional[ActivePiece] = None
) -> List[List[int]]:
    """Return a copy of ``grid`` with ``piece`` overlaid.

    Renderers can draw the result directly without locking the piece.  Cells
    of the piece that fall outside the grid are skipped.
    """

    frame = [list(row) for row in grid]
    if piece is not None:
        height = len(frame)
        width = len(frame[0]) if frame else 0
        for x, y in piece.cells():
            if 0 <= y < height and 0 <= x < width:
                frame[y][x] = LOCKED
    return frame
