"""Piece shapes, colour palette and the helpers that pick from them.

Shapes are stored as immutable tuples of rows.  A ``1`` marks an occupied
cell relative to the top-left corner of the piece's bounding box.  Nothing in
this module mutates a catalog entry; :func:`rotate_shape` always builds a new
matrix.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

Shape = Tuple[Tuple[int, ...], ...]


PIECES: Tuple[Shape, ...] = (
    (
        (1,),
        (1,),
        (1,),
    ),
    (
        (1, 0),
        (1, 0),
        (1, 1),
    ),
    (
        (0, 1),
        (0, 1),
        (1, 1),
    ),
    (
        (1, 1),
        (1, 1),
    ),
    (
        (1, 0),
        (1, 1),
    ),
    (
        (0, 1),
        (1, 1),
    ),
    (
        (0, 1, 0),
        (1, 1, 1),
    ),
    (
        (1, 1, 0),
        (0, 1, 1),
    ),
)

COLORS: Tuple[str, ...] = ("yellow", "red", "blue", "green")


def random_shape(rng: Optional[random.Random] = None) -> Shape:
    """Return a catalog shape chosen uniformly at random.

    ``rng`` may be supplied for reproducible sequences; the module level
    generator is used otherwise.
    """

    return (rng or random).choice(PIECES)


def random_color(rng: Optional[random.Random] = None) -> str:
    """Return a palette colour chosen uniformly at random."""

    return (rng or random).choice(COLORS)


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Row ``i`` of the result is column ``i`` of ``shape`` read from the bottom
    row upwards, so a ``rows x cols`` matrix becomes ``cols x rows``.
    """

    return tuple(zip(*reversed(shape)))


def shape_size(shape: Shape) -> Tuple[int, int]:
    """Return ``(width, height)`` of ``shape``'s bounding box."""

    return (len(shape[0]) if shape else 0, len(shape))


def max_piece_size() -> Tuple[int, int]:
    """Return the largest width and height found in the catalog."""

    sizes = [shape_size(shape) for shape in PIECES]
    return max(w for w, _ in sizes), max(h for _, h in sizes)
