"""Headless ASCII demo for the game engine.

Run with: `python -m blockfall`

A session is driven with fixed-length ticks and random commands, then the
final frame is printed together with the score.  Useful as a smoke test that
the state machine locks, clears and respawns pieces without a renderer.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import Command, GameConfig, GameSession, Snapshot, render_grid
from .config import HEIGHT, WIDTH


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pieces and commands.")
    parser.add_argument("--frames", type=int, default=2000, help="Number of ticks to simulate.")
    parser.add_argument("--frame-ms", type=float, default=16.0, help="Milliseconds per tick.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def simulate(session: GameSession, frames: int, frame_ms: float, rng: random.Random) -> None:
    """Feed ``frames`` ticks and a random command stream into ``session``."""

    commands = list(Command)
    for _ in range(frames):
        if session.game_over:
            break
        if rng.random() < 0.25:
            session.handle(rng.choice(commands))
        session.tick(frame_ms)


def make_rngs(seed: int | None) -> tuple[random.Random, random.Random]:
    """Return separate generators for the piece sequence and the command stream."""

    piece_rng = random.Random(seed)
    return piece_rng, random.Random(piece_rng.randrange(2**32))


def final_frame(snapshot: Snapshot) -> list[list[int]]:
    """Return the frame to print; a piece left over after game over is hidden."""

    return render_grid(snapshot.grid, None if snapshot.game_over else snapshot.piece)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    config = GameConfig(width=args.width, height=args.height)
    piece_rng, command_rng = make_rngs(args.seed)
    session = GameSession(config, rng=piece_rng)
    simulate(session, args.frames, args.frame_ms, command_rng)

    snapshot = session.snapshot()
    _print_grid(final_frame(snapshot))
    print(f"Score: {snapshot.score}  Interval: {snapshot.drop_interval}ms  State: {snapshot.phase.value}")


if __name__ == "__main__":
    main()
