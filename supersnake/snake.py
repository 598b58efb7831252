"""The snake: its body, heading, growth and power-up state."""

from __future__ import annotations

from collections import deque
from enum import Enum

POWER_FRAMES = 67
FRAME_MS = 150

_OPPOSITE = {}


class Direction(Enum):
    """Heading of the snake's head."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_OPPOSITE.update(
    {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }
)

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Snake:
    """A snake made of (row, col) cells; the head is ``body[0]``."""

    def __init__(self, row: int, col: int) -> None:
        self.body: deque[tuple[int, int]] = deque([(row, col)])
        self.direction = Direction.RIGHT
        self._growing = False
        self._powered = False
        self._power_timer = 0

    def move(self) -> None:
        """Advance one cell in the current direction, growing if asked to."""
        row, col = self.body[0]
        d_row, d_col = self.direction.delta
        self.body.appendleft((row + d_row, col + d_col))
        if self._growing:
            self._growing = False
        else:
            self.body.pop()

    def change_direction(self, new_dir: Direction) -> None:
        """Turn, unless the new direction would reverse the snake."""
        if new_dir is not self.direction.opposite:
            self.direction = new_dir

    def collision(self, width: int, height: int) -> bool:
        """Whether the head is outside the board; never while powered."""
        if self._powered:
            return False
        row, col = self.body[0]
        return not (0 <= row < height and 0 <= col < width)

    def eats_itself(self) -> bool:
        """Whether the head overlaps any other body segment."""
        head = self.body[0]
        return any(segment == head for segment in list(self.body)[1:])

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def size(self) -> int:
        return len(self.body)

    def grow(self) -> None:
        """Keep the tail on the next move."""
        self._growing = True

    def activate_power(self) -> None:
        """Become invincible for a fixed number of frames."""
        self._powered = True
        self._power_timer = POWER_FRAMES

    def update_power(self) -> None:
        """Count down one frame of power."""
        if self._powered and self._power_timer > 0:
            self._power_timer -= 1
            if self._power_timer == 0:
                self._powered = False

    @property
    def power_active(self) -> bool:
        return self._powered

    @property
    def power_time_left(self) -> int:
        """Remaining power in whole seconds."""
        return (self._power_timer * FRAME_MS) // 1000