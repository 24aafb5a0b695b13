"""
Pixel Pong game entities: moving rectangles and the registry that owns them
"""

import math
from collections.abc import Iterator

import numpy as np


class Rect:
    """Axis-aligned rectangle with a velocity, used for paddles, ball and walls"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        vx: float = 0.0,
        vy: float = 0.0,
        name: str = "",
    ):
        if not (width > 0 and height > 0):
            raise ValueError(f"Rect size must be positive, got {width}x{height}")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Rect position must be finite, got ({x}, {y})")

        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.vx = vx
        self.vy = vy
        self.name = name

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)

    def __repr__(self) -> str:
        return (
            f"Rect({self.name or '?'}: x={self.x:.2f}, y={self.y:.2f}, "
            f"w={self.width}, h={self.height}, vx={self.vx:.3f}, vy={self.vy:.3f})"
        )


class RectRegistry:
    """Ordered collection owning every rect of the game

    Handles are insertion indexes, so they stay valid for the registry lifetime.
    Iteration order is insertion order, which the physics relies on.
    """

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def add(self, rect: Rect) -> int:
        """Registers a rect and returns its handle"""
        self._rects.append(rect)
        return len(self._rects) - 1

    def __getitem__(self, handle: int) -> Rect:
        if not 0 <= handle < len(self._rects):
            raise KeyError(f"Unknown rect handle: {handle}")
        return self._rects[handle]

    def __iter__(self) -> Iterator[Rect]:
        return iter(self._rects)

    def __len__(self) -> int:
        return len(self._rects)

    def as_array(self) -> np.ndarray:
        """Snapshot of all rects as rows of (x, y, width, height, vx, vy)"""
        if not self._rects:
            return np.empty((0, 6), dtype=np.float64)
        return np.array(
            [(r.x, r.y, r.width, r.height, r.vx, r.vy) for r in self._rects],
            dtype=np.float64,
        )
