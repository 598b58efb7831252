"""Command-line entry point: show the controls and start a game."""

from __future__ import annotations

import argparse

from supersnake.game import Game

DEFAULT_SIZE = 20

BANNER = """\
=== 🐍 SUPER SNAKE GAME 🐍 ===

Controls:
  Movement: WASD or Arrow Keys
  Q - Quit
  +/- - Increase/Decrease board size

SIZE CONTROLS (Press during game):
  1 - Small   (██)
  2 - Medium  (███)
  3 - Large   (████) [DEFAULT]
  4 - XLarge  (██████)
  5 - HUGE    (████████)
  E - Emoji   (🟩)

⭐ SPECIAL: Collect ★★★★ power fruit for 10 seconds of invincibility!
   While powered, you can pass through walls!

Press ENTER to start..."""


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supersnake", description="Play snake in the terminal."
    )
    parser.add_argument(
        "--width", type=_positive_int, default=DEFAULT_SIZE, help="board width"
    )
    parser.add_argument(
        "--height", type=_positive_int, default=DEFAULT_SIZE, help="board height"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the controls, wait for Enter and play one game."""
    args = _parser().parse_args(argv)
    print(BANNER, flush=True)
    try:
        input()
    except EOFError:
        pass
    Game(args.width, args.height).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())