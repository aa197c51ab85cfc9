"""Editor viewport: panning, animated sprite images and the background grid."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ViewportState:
    """Pan offset of the editor viewport, moved with the W/A/S/D keys."""

    offset_x: float = 0.0
    offset_y: float = 0.0

    def update_offset(self, key: str, delta: float) -> None:
        """Move the view for a key name; other keys are ignored."""
        key = key.lower()
        if key == "w":
            self.offset_y -= delta
        elif key == "s":
            self.offset_y += delta
        elif key == "a":
            self.offset_x -= delta
        elif key == "d":
            self.offset_x += delta


@dataclass
class Image:
    """A sprite sheet placed in the viewport, optionally animated."""

    texture_id: int
    width: int
    height: int
    frames: int
    rows: int
    pos_x: float
    pos_y: float
    layer: int = 0
    current_frame: int = 0
    current_row: int = 0
    selected_row: int = 0
    scale: float = 1.0
    is_dragging: bool = False
    offset_x: float = 0.0
    offset_y: float = 0.0
    animation: bool = False
    last_update: float = field(default_factory=time.monotonic)
    frame_duration: float = 0.1

    def update(self, now: Optional[float] = None) -> None:
        """Advance one frame if animating and a frame's time has passed.

        Wrapping past the last frame moves on to the next row.
        """
        if now is None:
            now = time.monotonic()
        if not self.animation or now - self.last_update < self.frame_duration:
            return
        self.current_frame = (self.current_frame + 1) % self.frames
        if self.current_frame == 0:
            self.current_row = (self.current_row + 1) % self.rows
        self.last_update = now

    def set_selected_row(self, row: int) -> None:
        self.selected_row = row
        self.current_row = row


def generate_grid_vertices(spacing: float, width: float, height: float) -> list[float]:
    """Line vertices (x, y pairs) of a grid in normalized device coordinates."""
    step = int(spacing)
    if step <= 0:
        raise ValueError("grid spacing must be at least 1")
    half_width = width / 2.0
    half_height = height / 2.0
    vertices: list[float] = []
    for x in range(int(-half_width), int(half_width) + 1, step):
        nx = x / half_width
        vertices.extend((nx, -1.0, nx, 1.0))
    for y in range(int(-half_height), int(half_height) + 1, step):
        ny = y / half_height
        vertices.extend((-1.0, ny, 1.0, ny))
    return vertices