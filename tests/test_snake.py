from collections import deque

import pytest

from supersnake.snake import Direction, Snake


def test_starts_with_single_segment_heading_right():
    snake = Snake(5, 7)
    assert snake.head == (5, 7)
    assert snake.size == 1
    assert snake.direction is Direction.RIGHT


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (4, 5)),
        (Direction.DOWN, (6, 5)),
        (Direction.RIGHT, (5, 6)),
    ],
)
def test_move_follows_direction(direction, expected):
    snake = Snake(5, 5)
    snake.change_direction(direction)
    snake.move()
    assert snake.head == expected
    assert snake.size == 1


def test_reverse_direction_is_ignored():
    snake = Snake(5, 5)
    snake.change_direction(Direction.LEFT)
    assert snake.direction is Direction.RIGHT
    snake.move()
    assert snake.head == (5, 6)


def test_turn_then_reverse_blocked():
    snake = Snake(5, 5)
    snake.change_direction(Direction.UP)
    snake.change_direction(Direction.DOWN)
    assert snake.direction is Direction.UP


def test_grow_keeps_tail_once():
    snake = Snake(5, 5)
    snake.grow()
    snake.move()
    assert snake.size == 2
    assert list(snake.body) == [(5, 6), (5, 5)]
    snake.move()
    assert snake.size == 2
    assert list(snake.body) == [(5, 7), (5, 6)]


def test_eats_itself_detects_overlap():
    snake = Snake(1, 1)
    snake.body = deque([(1, 1), (1, 2), (2, 2), (1, 1)])
    assert snake.eats_itself()


def test_eats_itself_false_for_straight_body():
    snake = Snake(1, 1)
    for _ in range(3):
        snake.grow()
        snake.move()
    assert not snake.eats_itself()
    assert len(set(snake.body)) == snake.size


def test_collision_outside_board():
    snake = Snake(0, 9)
    assert not snake.collision(10, 10)
    snake.move()
    assert snake.collision(10, 10)


def test_collision_ignored_while_powered():
    snake = Snake(0, 9)
    snake.move()
    snake.activate_power()
    assert not snake.collision(10, 10)


def test_power_lasts_67_frames():
    snake = Snake(3, 3)
    snake.activate_power()
    assert snake.power_active
    for _ in range(66):
        snake.update_power()
    assert snake.power_active
    snake.update_power()
    assert not snake.power_active
    assert snake.power_time_left == 0


def test_power_time_left_counts_down():
    snake = Snake(3, 3)
    snake.activate_power()
    assert snake.power_time_left == 10
    before = snake.power_time_left
    for _ in range(20):
        snake.update_power()
    assert snake.power_time_left < before


def test_update_power_without_power_is_noop():
    snake = Snake(3, 3)
    snake.update_power()
    assert not snake.power_active
    assert snake.power_time_left == 0