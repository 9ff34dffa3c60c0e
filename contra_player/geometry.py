"""Rectangles, colours and sprite state for the tile world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TILE_SIZE = 16


def is_solid_tile(tile: str) -> bool:
    """Return True when a map cell is a solid (digit) tile."""
    return len(tile) == 1 and "0" <= tile <= "9"


@dataclass
class FloatRect:
    """Axis-aligned rectangle with float coordinates, y growing downwards."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def bottom(self) -> float:
        """Y coordinate of the lower edge."""
        return self.top + self.height


@dataclass(frozen=True)
class IntRect:
    """Integer rectangle selecting a region of a texture.

    A negative width selects the region mirrored horizontally.
    """

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


class Color(Enum):
    """Tint applied to a sprite."""

    WHITE = (255, 255, 255)
    RED = (255, 0, 0)


@dataclass
class Sprite:
    """Drawable state: texture, region of it, tint and screen position."""

    texture: str | None = None
    texture_rect: IntRect = field(default_factory=IntRect)
    color: Color = Color.WHITE
    position: tuple[float, float] = (0.0, 0.0)