"""Falling-block puzzle engine."""

from .board import Board
from .commands import Command, apply_command, command_for_key
from .config import GameConfig
from .game_state import BoardFull, GameSession, Phase, Snapshot
from .piece import ActivePiece
from .pieces import COLORS, PIECES, random_color, random_shape, rotate_shape
from .utils import collides, next_drop_interval, render_grid

__all__ = [
    "Board",
    "ActivePiece",
    "GameConfig",
    "GameSession",
    "Phase",
    "Snapshot",
    "BoardFull",
    "Command",
    "apply_command",
    "command_for_key",
    "COLORS",
    "PIECES",
    "random_color",
    "random_shape",
    "rotate_shape",
    "collides",
    "next_drop_interval",
    "render_grid",
]
