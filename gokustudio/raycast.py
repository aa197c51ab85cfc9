"""Grid ray casting: one vertical wall stripe per screen column, and player movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

WIDTH = 800
HEIGHT = 600

WorldMap = Sequence[Sequence[int]]
Color = tuple[int, int, int]
Vec2 = tuple[float, float]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_OPEN_ROW = (1,) + (0,) * 22 + (1,)

WORLD_MAP: tuple[tuple[int, ...], ...] = (
    (1,) * 24,
    _OPEN_ROW,
    (1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 1),
    _OPEN_ROW,
    (1, 0, 0, 0, 0, 0, 0, 2, 2, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 2, 2, 2, 2, 2, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    *([_OPEN_ROW] * 11),
    (1,) * 24,
)

_WALL_COLORS: dict[int, Color] = {
    1: (255, 0, 0),
    2: (0, 255, 0),
    3: (0, 0, 255),
    4: (255, 255, 0),
}


def wall_color(cell: int) -> Color:
    """Color for a wall cell value; unknown values are white."""
    return _WALL_COLORS.get(cell, (255, 255, 255))


def _to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _to_index(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


def _cell(world_map: WorldMap, mx: int, my: int) -> int:
    if not (0 <= mx < len(world_map) and 0 <= my < len(world_map[mx])):
        raise IndexError(f"ray left the map at ({mx}, {my})")
    return world_map[mx][my]


def _inverse(value: float) -> float:
    return math.inf if value == 0.0 else abs(1.0 / value)


@dataclass(frozen=True)
class Stripe:
    """A vertical line to draw for one screen column."""

    x: int
    draw_start: int
    draw_end: int
    color: Color
    cell: int
    side: int
    distance: float


def cast_ray(
    player_pos: Vec2,
    player_dir: Vec2,
    plane: Vec2,
    x: int,
    width: int = WIDTH,
    height: int = HEIGHT,
    world_map: WorldMap = WORLD_MAP,
) -> Stripe:
    """Trace the ray for column x through the grid until it hits a wall."""
    px, py = player_pos
    camera_x = 2.0 * x / width - 1.0
    ray_x = player_dir[0] + plane[0] * camera_x
    ray_y = player_dir[1] + plane[1] * camera_x

    map_x = _to_i32(px)
    map_y = _to_i32(py)
    delta_x = _inverse(ray_x)
    delta_y = _inverse(ray_y)

    if ray_x < 0.0:
        step_x, side_x = -1, (px - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - px) * delta_x
    if ray_y < 0.0:
        step_y, side_y = -1, (py - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - py) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        cell = _cell(world_map, map_x, map_y)
        if cell > 0:
            break

    if side == 0:
        numerator, ray = map_x - px + (1 - step_x) / 2.0, ray_x
    else:
        numerator, ray = map_y - py + (1 - step_y) / 2.0, ray_y
    if ray == 0.0:
        distance = math.nan if numerator == 0.0 else math.copysign(math.inf, numerator)
    else:
        distance = numerator / ray

    if distance == 0.0:
        ratio = math.copysign(math.inf, distance) * math.copysign(1.0, height)
    else:
        ratio = height / distance
    line_height = max(_to_i32(ratio), 1)
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)
    return Stripe(x, draw_start, draw_end, wall_color(cell), cell, side, distance)


def render_columns(
    player_pos: Vec2,
    player_dir: Vec2,
    plane: Vec2,
    width: int = WIDTH,
    height: int = HEIGHT,
    world_map: WorldMap = WORLD_MAP,
) -> list[Stripe]:
    """Cast one ray per column of the screen."""
    return [
        cast_ray(player_pos, player_dir, plane, x, width, height, world_map)
        for x in range(width)
    ]


@dataclass
class Player:
    """Position and facing direction on the grid."""

    x: float = 22.0
    y: float = 12.0
    dir_x: float = -1.0
    dir_y: float = 0.0

    @property
    def position(self) -> Vec2:
        return (self.x, self.y)

    @property
    def direction(self) -> Vec2:
        return (self.dir_x, self.dir_y)

    def _step(self, sign: float, move_speed: float, world_map: WorldMap) -> None:
        new_x = self.x + sign * self.dir_x * move_speed
        if _cell(world_map, _to_index(new_x), _to_index(self.y)) == 0:
            self.x = new_x
        new_y = self.y + sign * self.dir_y * move_speed
        if _cell(world_map, _to_index(self.x), _to_index(new_y)) == 0:
            self.y = new_y

    def move_forward(self, move_speed: float, world_map: WorldMap = WORLD_MAP) -> None:
        """Step along the facing direction, axis by axis, unless a wall is there."""
        self._step(1.0, move_speed, world_map)

    def move_backward(self, move_speed: float, world_map: WorldMap = WORLD_MAP) -> None:
        """Step against the facing direction, axis by axis, unless a wall is there."""
        self._step(-1.0, move_speed, world_map)

    def rotate(self, angle: float) -> None:
        """Turn the facing direction by angle radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        old_x = self.dir_x
        self.dir_x = self.dir_x * cos_a - self.dir_y * sin_a
        self.dir_y = old_x * sin_a + self.dir_y * cos_a