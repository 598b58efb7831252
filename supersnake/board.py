"""The playing field: food, power fruit, visuals and frame rendering."""

from __future__ import annotations

import random
import sys
import time
from typing import TextIO

from supersnake.snake import Snake

FOOD_OPTIONS = ("🍎", "🍉", "🍌", "🍇", "🍒", "🍊", "🥕", "🌽")

EMOJI_SIZES = {
    "small": ("▒▒", "##"),
    "medium": ("▓▓", "██"),
    "large": ("🟩", "⬜"),
    "xlarge": ("🟩", "⬛"),
    "huge": ("🟩", "🧱"),
    "emoji": ("🐍", "⬜"),
}

MIN_SIZE = 10
POWER_FRUIT_FRAMES = 100
POWER_FRUIT_CHANCE = 100
INVINCIBLE_MESSAGE = "⚡ Invincible Mode Activated for 10 seconds! ⚡"
CLEAR_SCREEN = "\033[2J\033[H"


class Board:
    """A width x height field holding the snake, food and a power fruit."""

    activation_pause = 0.3

    def __init__(
        self,
        width: int,
        height: int,
        snake: Snake,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.snake = snake
        self.rng = rng if rng is not None else random.Random()

        self.food: tuple[int, int] = (0, 0)
        self.power_fruit: tuple[int, int] = (0, 0)
        self.power_fruit_active = False
        self.power_fruit_timer = 0

        self.snake_emoji = "🟩"
        self.food_emoji = "🍎"
        self.power_emoji = "💎"
        self.empty_emoji = "  "
        self.power_snake_emoji = "🟨"
        self.border_emoji = "⬜"

        self.emoji_mode = False
        self.message = ""
        self.message_timer = 0

        self.spawn_food()

    def _random_cell(self) -> tuple[int, int]:
        return self.rng.randrange(self.height), self.rng.randrange(self.width)

    def spawn_food(self) -> None:
        """Place food on a random cell not covered by the snake."""
        occupied = set(self.snake.body)
        cell = self._random_cell()
        while cell in occupied:
            cell = self._random_cell()
        self.food = cell
        self.food_emoji = self.rng.choice(FOOD_OPTIONS)

    def spawn_power_fruit(self) -> None:
        """Place a power fruit away from the snake and the food."""
        occupied = set(self.snake.body) | {self.food}
        cell = self._random_cell()
        while cell in occupied:
            cell = self._random_cell()
        self.power_fruit = cell
        self.power_fruit_active = True
        self.power_fruit_timer = POWER_FRUIT_FRAMES

    def check_food(self) -> bool:
        """Whether the snake's head is on the food."""
        return self.snake.head == self.food

    def check_power_fruit(self) -> bool:
        """Consume the power fruit if the head is on it, powering the snake."""
        if not self.power_fruit_active or self.snake.head != self.power_fruit:
            return False
        self.snake.activate_power()
        self.power_fruit_active = False
        self.message = INVINCIBLE_MESSAGE
        self.message_timer = 15
        if self.activation_pause > 0:
            time.sleep(self.activation_pause)
        return True

    def update_power_fruit(self) -> None:
        """Maybe spawn a power fruit, and age an existing one."""
        if not self.power_fruit_active and self.rng.randrange(POWER_FRUIT_CHANCE) == 0:
            self.spawn_power_fruit()
        if self.power_fruit_active:
            self.power_fruit_timer -= 1
            if self.power_fruit_timer <= 0:
                self.power_fruit_active = False

    def _cell(self, cell: tuple[int, int], body: set[tuple[int, int]]) -> str:
        snake = self.snake
        if cell == snake.head:
            if snake.power_active:
                return "🟦" if snake.power_time_left % 2 == 0 else "🟨"
            return self.snake_emoji
        if cell == self.food:
            return self.food_emoji
        if self.power_fruit_active and cell == self.power_fruit:
            return "💎" if self.rng.randrange(2) else "💥"
        if cell in body:
            return self.power_snake_emoji if snake.power_active else self.snake_emoji
        return self.empty_emoji

    def render(self) -> str:
        """Build one frame as text; counts down any on-screen message."""
        body = set(self.snake.body)
        border_line = self.border_emoji * (self.width + 2)
        lines = [border_line]
        for row in range(self.height):
            cells = "".join(self._cell((row, col), body) for col in range(self.width))
            lines.append(f"{self.border_emoji}{cells}{self.border_emoji}")
        lines.append(border_line)
        lines.append("Movement: WASD or Arrow Keys | Press 'E' for Emoji Mode")

        status = f"Score: {self.snake.size - 1}"
        if self.snake.power_active:
            status += f" | ⚡ Invincible ({self.snake.power_time_left}s) ⚡"
        lines.append(status)

        frame = "\n".join(lines) + "\n"
        if self.message_timer > 0:
            frame += f"\n{self.message}\n"
            self.message_timer -= 1
        return frame

    def draw(self, out: TextIO | None = None) -> None:
        """Write one frame to ``out`` (stdout by default) in a single write."""
        stream = out if out is not None else sys.stdout
        stream.write(self.render())
        stream.flush()

    def clear_screen(self, out: TextIO | None = None) -> None:
        """Clear the terminal and move the cursor home."""
        stream = out if out is not None else sys.stdout
        stream.write(CLEAR_SCREEN)
        stream.flush()

    def resize(self, width: int, height: int) -> None:
        """Change the board size (never below 10) and respawn the food."""
        self.width = max(MIN_SIZE, width)
        self.height = max(MIN_SIZE, height)
        self.spawn_food()

    def set_emoji_size(self, size: str) -> None:
        """Switch to a named glyph preset; unknown names are ignored."""
        preset = EMOJI_SIZES.get(size)
        if preset is not None:
            self.snake_emoji, self.border_emoji = preset

    def toggle_emoji_mode(self) -> None:
        """Flip emoji mode and show a short notice."""
        self.emoji_mode = not self.emoji_mode
        if self.emoji_mode:
            self.snake_emoji, self.border_emoji = "🐍", "⬜"
            self.message = "✨ Emoji Mode Activated! ✨"
        else:
            self.snake_emoji, self.border_emoji = "🟩", "⬜"
            self.message = "💤 Emoji Mode Off"
        self.message_timer = 10