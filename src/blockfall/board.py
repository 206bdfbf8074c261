"""Board representation for the playfield."""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .piece import ActivePiece


Grid = NDArray[np.uint8]

EMPTY = 0
LOCKED = 1


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size grid of locked cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by collision checks.
        """

        if self.in_bounds(row, col):
            return bool(self.grid[row, col] == EMPTY)
        return False

    def is_row_complete(self, row: int) -> bool:
        """Return ``True`` when every cell of ``row`` is locked."""

        if not 0 <= row < self.height:
            raise IndexError("Row out of bounds")
        return bool(np.all(self.grid[row] == LOCKED))

    def lock_piece(self, piece: ActivePiece) -> None:
        """Lock the piece's occupied cells into the board grid."""

        coordinates = np.asarray(piece.cells(), dtype=np.int16)
        if coordinates.size == 0:
            return

        cols, rows = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        self.grid[rows, cols] = LOCKED

    def remove_completed_rows(self) -> int:
        """Remove completed rows and return how many were removed.

        Every complete row is dropped in a single pass and replaced by an
        empty row at the top, so the grid keeps its ``(height, width)`` shape
        and the rows above each gap shift down intact.
        """

        full_rows = np.array([self.is_row_complete(row) for row in range(self.height)], dtype=bool)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid[:] = np.vstack((new_rows, remaining))
        return cleared

    def clear(self) -> None:
        """Reset every cell to empty in place."""

        self.grid.fill(EMPTY)

    def rows(self) -> List[List[int]]:
        """Return the grid as plain nested lists."""

        return self.grid.tolist()
