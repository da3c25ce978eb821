"""blobworld/geometry.py — Platform rectangles and extent inference.

Rects are axis-aligned, in world pixels, with (x, y) at the top-left corner.
Sign of w/h is not checked here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """A walkable platform rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @classmethod
    def from_dict(cls, data: Mapping) -> Rect:
        """Build a Rect from an ``{x, y, w, h}`` record. Missing keys become 0."""
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            w=data.get("w", 0),
            h=data.get("h", 0),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}


def max_right(rects: Iterable[Rect], default: float) -> float:
    """Largest right edge (x + w) over *rects*, or *default* when empty."""
    return max((r.right for r in rects), default=default)


def max_bottom(rects: Iterable[Rect], default: float) -> float:
    """Largest bottom edge (y + h) over *rects*, or *default* when empty."""
    return max((r.bottom for r in rects), default=default)
