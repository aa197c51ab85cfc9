"""Falling-block rules: tetromino shapes, a simple rigid body and grid collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

BLOCK_SIZE = 20

Color = tuple[int, int, int]

_SHAPES: dict[str, tuple[tuple[int, int], ...]] = {
    "I": ((0, 0), (1, 0), (2, 0), (3, 0)),
    "O": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "T": ((0, 0), (1, 0), (2, 0), (1, 1)),
    "L": ((0, 0), (0, 1), (0, 2), (1, 2)),
    "J": ((1, 0), (1, 1), (1, 2), (0, 2)),
    "S": ((0, 0), (1, 0), (1, 1), (2, 1)),
    "Z": ((1, 0), (2, 0), (0, 1), (1, 1)),
}


@dataclass(frozen=True)
class Block:
    """An axis-aligned square cell of a shape."""

    x: int
    y: int
    width: int = BLOCK_SIZE
    height: int = BLOCK_SIZE

    def moved(self, dx: int, dy: int) -> Block:
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass
class RigidBody:
    """Velocity integrator that always moves at a fixed speed."""

    mass: float
    velocity: tuple[float, float] = (0.0, 0.0)
    acceleration: tuple[float, float] = (0.0, 0.0)
    speed: float = 10.0

    def apply_force(self, fx: float, fy: float) -> None:
        ax, ay = self.acceleration
        self.acceleration = (ax + fx / self.mass, ay + fy / self.mass)

    def update(self, delta_time: float) -> None:
        """Integrate acceleration, then rescale the velocity to `speed`."""
        vx = self.velocity[0] + self.acceleration[0] * delta_time
        vy = self.velocity[1] + self.acceleration[1] * delta_time
        norm = math.hypot(vx, vy)
        if norm != 0.0:
            vx /= norm
            vy /= norm
        self.velocity = (vx * self.speed, vy * self.speed)

    def reset_acceleration(self) -> None:
        self.acceleration = (0.0, 0.0)


@dataclass
class Shape2D:
    """A group of blocks moving together under a rigid body."""

    blocks: list[Block]
    color: Color
    rigid_body: RigidBody = field(default_factory=lambda: RigidBody(1.0))

    def copy(self) -> Shape2D:
        body = replace(self.rigid_body)
        return Shape2D(list(self.blocks), self.color, body)

    def collides_with(self, other: Shape2D) -> bool:
        """Whether any block of this shape shares a position with one of `other`."""
        theirs = {(b.x, b.y) for b in other.blocks}
        return any((b.x, b.y) in theirs for b in self.blocks)

    def collision_with_placed_tetrominos(self, placed: list[Shape2D]) -> bool:
        """Whether any block equals a block of an already placed shape."""
        placed_blocks = {block for shape in placed for block in shape.blocks}
        return any(block in placed_blocks for block in self.blocks)

    def update(
        self,
        delta_time: float,
        screen_width: int,
        screen_height: int,
        placed: list[Shape2D],
    ) -> bool:
        """Move by the body's velocity; return whether the shape hit something."""
        self.rigid_body.update(delta_time)
        previous = list(self.blocks)
        vx, vy = self.rigid_body.velocity
        self.translate(int(vx), int(vy))

        collision = False
        if not self.is_valid_position(0, 1, screen_width, screen_height):
            self.rigid_body.velocity = (self.rigid_body.velocity[0], 0.0)
            self.rigid_body.reset_acceleration()
            collision = True

        if not self.is_valid_position(1, 1, screen_width, screen_height) or not (
            self.is_valid_position(-1, 1, screen_width, screen_height)
        ):
            self.blocks = list(previous)
            self.rigid_body.velocity = (0.0, self.rigid_body.velocity[1])
            collision = True

        if any(self.collides_with(other) for other in placed):
            self.blocks = list(previous)
            self.rigid_body.velocity = (self.rigid_body.velocity[0], 0.0)
            self.rigid_body.reset_acceleration()
            collision = True

        return collision

    def is_valid_position(self, dx: int, dy: int, screen_width: int, screen_height: int) -> bool:
        """Whether every block, shifted by (dx, dy), lies inside the screen."""
        for block in self.blocks:
            x = block.x + dx
            y = block.y + dy
            if x < 0 or x + BLOCK_SIZE > screen_width or y < 0 or y + BLOCK_SIZE > screen_height:
                return False
        return True

    def rotate(self) -> None:
        """Rotate a quarter turn around the second block."""
        if len(self.blocks) < 2:
            raise ValueError("a shape needs at least two blocks to rotate")
        pivot = self.blocks[1]
        self.blocks = [
            replace(b, x=pivot.x - (b.y - pivot.y), y=pivot.y + (b.x - pivot.x))
            for b in self.blocks
        ]

    def translate(self, dx: int, dy: int) -> None:
        self.blocks = [block.moved(dx, dy) for block in self.blocks]


def create_tetromino(x: int, y: int, shape_type: str, color: Color, mass: float) -> Shape2D:
    """Build one of the I, O, T, L, J, S, Z shapes; other letters give an empty shape."""
    offsets = _SHAPES.get(shape_type, ())
    blocks = [Block(x + cx * BLOCK_SIZE, y + cy * BLOCK_SIZE) for cx, cy in offsets]
    return Shape2D(blocks, color, RigidBody(mass))