"""Side-scrolling platformer rules: gravity, landing, jumping and endless platforms."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PLAYER_SIZE = 50
PLAYER_MOVEMENT_SPEED = 5
GRAVITY = 2
JUMP_FORCE = -25

PLATFORM_SPACING = 50
PLATFORM_MIN_WIDTH = 100
PLATFORM_MAX_WIDTH = 300
PLATFORM_HEIGHT = 20
PLATFORM_MIN_GAP = 10


@dataclass
class Box:
    """An axis-aligned rectangle with integer coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass
class Platform(Box):
    """A solid ledge the player can land on from above."""


class Player:
    """A square that falls under gravity and can land on platforms."""

    def __init__(
        self,
        x: int,
        y: int,
        size: int = PLAYER_SIZE,
        screen_height: int = SCREEN_HEIGHT,
    ) -> None:
        self.rect = Box(x, y, size, size)
        self.y_velocity = 0
        self.on_ground = False
        self.screen_height = screen_height

    def __repr__(self) -> str:
        return (
            f"Player(rect={self.rect!r}, y_velocity={self.y_velocity}, "
            f"on_ground={self.on_ground})"
        )

    def _lands_on(self, platform: Box, next_y: int) -> bool:
        rect = self.rect
        return (
            rect.x < platform.right
            and rect.right > platform.x
            and rect.bottom <= platform.y
            and next_y + rect.height > platform.y
        )

    def update(self, platforms: list[Box]) -> None:
        """Apply one step of gravity and movement, landing on the first platform met."""
        if not self.on_ground:
            self.y_velocity += GRAVITY
        next_y = self.rect.y + self.y_velocity
        self.on_ground = False

        for platform in platforms:
            if self._lands_on(platform, next_y):
                self.rect.y = platform.y - self.rect.height
                self.y_velocity = 0
                self.on_ground = True
                return

        self.rect.y = min(max(next_y, 0), self.screen_height - self.rect.height)

    def jump(self) -> None:
        """Leave the ground with the jump impulse; does nothing in the air."""
        if self.on_ground:
            self.y_velocity = JUMP_FORCE
            self.on_ground = False

    def move_left(self) -> None:
        self.rect.x -= PLAYER_MOVEMENT_SPEED

    def move_right(self) -> None:
        self.rect.x += PLAYER_MOVEMENT_SPEED


class PlatformGenerator:
    """Lays out random platforms to the right as the view scrolls."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        last_platform_x: int = 0,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.last_platform_x = last_platform_x

    def extend(self, platforms: list[Platform], camera_x: int) -> list[Platform]:
        """Append platforms until they reach past the right screen edge; return the new ones."""
        right_edge = camera_x + self.screen_width
        added: list[Platform] = []
        while self.last_platform_x < right_edge + PLATFORM_SPACING:
            width = self.rng.randint(PLATFORM_MIN_WIDTH, PLATFORM_MAX_WIDTH)
            x = self.last_platform_x + self.rng.randrange(PLATFORM_MIN_GAP, PLATFORM_SPACING)
            y = (
                self.screen_height
                - PLATFORM_HEIGHT
                - self.rng.randrange(self.screen_height // 3)
            )
            platform = Platform(x, y, width, PLATFORM_HEIGHT)
            platforms.append(platform)
            added.append(platform)
            self.last_platform_x = x + width
        return added


def prune_platforms(platforms: list[Platform], camera_x: int) -> list[Platform]:
    """Drop, in place, platforms wholly left of the view; return the list."""
    platforms[:] = [p for p in platforms if p.right > camera_x]
    return platforms