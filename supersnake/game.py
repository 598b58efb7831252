"""The game loop: input, movement, collisions, scoring and drawing."""

from __future__ import annotations

import random
import sys
import time
from typing import Protocol, TextIO

from supersnake.board import CLEAR_SCREEN, Board
from supersnake.snake import Direction, Snake
from supersnake.terminal import KeyReader

HOME = "\033[H"
START_SPEED_MS = 300
MIN_SPEED_MS = 120
SPEED_STEP_MS = 10

_DIRECTION_KEYS = {
    "w": Direction.UP,
    "W": Direction.UP,
    "U": Direction.UP,
    "s": Direction.DOWN,
    "S": Direction.DOWN,
    "D": Direction.DOWN,
    "a": Direction.LEFT,
    "A": Direction.LEFT,
    "L": Direction.LEFT,
    "d": Direction.RIGHT,
    "R": Direction.RIGHT,
}

_SIZE_KEYS = {
    "1": "small",
    "2": "medium",
    "3": "large",
    "4": "xlarge",
    "5": "huge",
}


class _Reader(Protocol):
    def get_key(self) -> str | None: ...


class Game:
    """One game of snake on a board of the given size."""

    end_pause = 2.0

    def __init__(
        self,
        width: int,
        height: int,
        reader: _Reader | None = None,
        out: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.snake = Snake(height // 2, width // 2)
        self.board = Board(width, height, self.snake, rng)
        self.out = out if out is not None else sys.stdout
        self._owns_reader = reader is None
        self.reader = reader if reader is not None else KeyReader().open()
        self.game_over = False
        self.game_speed = START_SPEED_MS

        self.out.write(CLEAR_SCREEN)
        self.out.flush()

    def run(self) -> None:
        """Play until the game ends, then show the final score."""
        try:
            while not self.game_over:
                self.process_input()
                self.update()
                self.render()
                time.sleep(self.game_speed / 1000)
            self.out.write(
                f"\n💀 Game Over! Final Score: {self.snake.size - 1} 💀\n"
            )
            self.out.flush()
            if self.end_pause > 0:
                time.sleep(self.end_pause)
        finally:
            if self._owns_reader:
                self.reader.close()

    def process_input(self) -> None:
        """Read one pending key, if any, and act on it."""
        key = self.reader.get_key()
        if key:
            self.handle_key(key)

    def handle_key(self, key: str) -> None:
        """Apply the effect of a single key press."""
        direction = _DIRECTION_KEYS.get(key)
        if direction is not None:
            self.snake.change_direction(direction)
        elif key in ("q", "Q"):
            self.game_over = True
        elif key in ("+", "="):
            self.board.resize(self.board.width + 2, self.board.height + 2)
        elif key in ("-", "_"):
            self.board.resize(self.board.width - 2, self.board.height - 2)
        elif key in ("e", "E"):
            self.board.toggle_emoji_mode()
        elif key in _SIZE_KEYS:
            self.board.set_emoji_size(_SIZE_KEYS[key])

    def update(self) -> None:
        """Advance the snake one step and resolve what it runs into."""
        snake = self.snake
        board = self.board
        snake.move()

        row, col = snake.head
        if not (0 <= row < board.height and 0 <= col < board.width):
            if not snake.power_active:
                self.game_over = True
                return
            if row < 0:
                row = board.height - 1
            if row >= board.height:
                row = 0
            if col < 0:
                col = board.width - 1
            if col >= board.width:
                col = 0
            snake.body[0] = (row, col)

        if snake.eats_itself():
            self.game_over = True
            return

        if board.check_food():
            snake.grow()
            board.spawn_food()
            if self.game_speed > MIN_SPEED_MS:
                self.game_speed -= SPEED_STEP_MS

        board.check_power_fruit()
        board.update_power_fruit()
        snake.update_power()

    def render(self) -> None:
        """Redraw the board from the top-left corner."""
        self.out.write(HOME)
        self.board.draw(self.out)
        self.out.flush()

    def is_game_over(self) -> bool:
        return self.game_over