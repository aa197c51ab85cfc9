"""Snake game rules: movement on a grid, steering, eating and food placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
SNAKE_SIZE = 20

Position = tuple[int, int]


class Direction(Enum):
    """Heading of the snake; NONE keeps it still."""

    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEPS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Snake:
    """A snake whose body is a list of segment positions, head first."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    size: int = SNAKE_SIZE
    body: list[Position] = field(default_factory=list)
    direction: Direction = Direction.NONE

    def __post_init__(self) -> None:
        if not self.body:
            self.body = [(self.width // 2, self.height // 2)]

    def head(self) -> Position:
        if not self.body:
            raise ValueError("Snake has no body!")
        return self.body[0]

    def update(self) -> None:
        """Move one cell in the current direction, keeping the length."""
        x, y = self.head()
        dx, dy = _STEPS[self.direction]
        self.body.insert(0, (x + dx * self.size, y + dy * self.size))
        self.body.pop()

    def steer(self, direction: Direction) -> bool:
        """Turn unless that would reverse onto itself; return whether it turned."""
        if direction is Direction.NONE or _OPPOSITE.get(direction) is self.direction:
            return False
        self.direction = direction
        return True

    def grow(self) -> None:
        """Add a segment on top of the last one."""
        if not self.body:
            raise ValueError("Snake has no body!")
        self.body.append(self.body[-1])


def spawn_food(
    rng: Optional[random.Random] = None,
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
    size: int = SNAKE_SIZE,
) -> Position:
    """Pick a random grid-aligned cell inside the window."""
    source = rng if rng is not None else random
    x = source.randrange(width // size) * size
    y = source.randrange(height // size) * size
    return x, y


def step_game(
    snake: Snake,
    food: Position,
    rng: Optional[random.Random] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> tuple[Position, bool]:
    """Advance the snake once; if it reaches the food it grows and new food appears.

    Returns the food position to use next and whether the snake ate.
    """
    snake.update()
    if snake.head() != food:
        return food, False
    snake.grow()
    new_food = spawn_food(
        rng,
        snake.width if width is None else width,
        snake.height if height is None else height,
        snake.size,
    )
    return new_food, True