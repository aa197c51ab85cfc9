"""Grid of tile indices with a plain-text file format, and tileset slicing."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]

_U32_MAX = 2**32 - 1


def _parse_count(token: str, what: str, limit: Optional[int] = None) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None
    if value < 0 or (limit is not None and value > limit):
        raise ValueError(f"invalid {what}: {token!r}")
    return value


@dataclass
class Tilemap:
    """A width x height grid of tile indices stored row by row."""

    width: int
    height: int
    tiles: Optional[list[int]] = field(default=None)

    def __post_init__(self) -> None:
        if self.tiles is None:
            self.tiles = [0] * (self.width * self.height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_tile(self, x: int, y: int, tile: int) -> None:
        """Set a tile; coordinates outside the map are ignored."""
        if self._contains(x, y):
            self.tiles[y * self.width + x] = tile

    def get_tile(self, x: int, y: int) -> int:
        """Return a tile, or 0 outside the map."""
        if self._contains(x, y):
            return self.tiles[y * self.width + x]
        return 0

    def save_to_file(self, path: PathLike) -> None:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(f"{self.width} {self.height}\n")
            fh.writelines(f"{tile}\n" for tile in self.tiles)

    @classmethod
    def load_from_file(cls, path: PathLike) -> Tilemap:
        with open(path, encoding="utf-8") as fh:
            dimensions = fh.readline().split()
            if len(dimensions) < 2:
                raise ValueError("tilemap header must hold a width and a height")
            width = _parse_count(dimensions[0], "width")
            height = _parse_count(dimensions[1], "height")
            tiles = [_parse_count(line.strip(), "tile", _U32_MAX) for line in fh]
        return cls(width, height, tiles)


def create_texture_slice(
    tileset_path: PathLike,
    x: int,
    y: int,
    width: int,
    height: int,
    index: int,
    output_dir: PathLike = ".",
) -> Path:
    """Cut a region out of a tileset and save it as slice_<index>.png.

    The region is clamped to the image bounds.
    """
    with Image.open(tileset_path) as image:
        image_width, image_height = image.size
        left = min(x, image_width)
        top = min(y, image_height)
        right = left + min(width, image_width - left)
        bottom = top + min(height, image_height - top)
        piece = image.crop((left, top, right, bottom))
    target = Path(output_dir) / f"slice_{index}.png"
    piece.save(target)
    return target