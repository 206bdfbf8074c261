"""The falling piece controlled by the player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .pieces import Shape, rotate_shape


@dataclass
class ActivePiece:
    """Active falling piece in the game.

    ``position`` is the ``(x, y)`` board coordinate of the shape's top-left
    cell; ``x`` counts columns and ``y`` counts rows from the top.
    """

    shape: Shape
    color: str
    position: Tuple[int, int] = (0, 0)  # (x, y)

    def rotate(self) -> Shape:
        """Rotate the piece clockwise and return the shape it had before.

        The returned shape lets the caller restore the piece if the rotated
        shape turns out to collide.
        """

        previous = self.shape
        self.shape = rotate_shape(previous)
        return previous

    def translate(self, dx: int, dy: int) -> None:
        """Move the piece by ``dx`` columns and ``dy`` rows."""

        x, y = self.position
        self.position = (x + dx, y + dy)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` coordinates of every occupied cell."""

        px, py = self.position
        return [
            (px + x, py + y)
            for y, row in enumerate(self.shape)
            for x, value in enumerate(row)
            if value
        ]

    def copy(self) -> "ActivePiece":
        return ActivePiece(self.shape, self.color, self.position)
