"""Translate player commands into session transitions."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameSession


class Command(str, Enum):
    """Discrete movement commands accepted by a session."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"


# Browser-style key names, as delivered by ``KeyboardEvent.key``.
KEY_BINDINGS: Dict[str, Command] = {
    "ArrowLeft": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
    "ArrowDown": Command.SOFT_DROP,
    "ArrowUp": Command.ROTATE,
}


def command_for_key(key: str) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` if it is unbound."""

    return KEY_BINDINGS.get(key)


def apply_command(session: "GameSession", command: Command) -> bool:
    """Apply ``command`` to ``session`` and report whether anything changed.

    Moves and rotations that would collide are rolled back and reported as
    ``False``.  A blocked soft drop locks the piece straight away instead of
    waiting for the next gravity tick, so it returns ``True`` in that case.
    Commands are ignored unless a piece is falling.
    """

    if not session.falling:
        return False
    if command is Command.MOVE_LEFT:
        return session.try_translate(-1, 0)
    if command is Command.MOVE_RIGHT:
        return session.try_translate(1, 0)
    if command is Command.ROTATE:
        return session.try_rotate()
    if command is Command.SOFT_DROP:
        if not session.try_translate(0, 1):
            session.lock_and_continue()
        return True
    raise ValueError(f"Unknown command: {command!r}")
