from __future__ import annotations

import numpy as np

from softrender.errors import InvalidSurfaceError
from softrender.types import COLOR, DEPTH, MASK, PIXELS


class RasterSurface:
    """
    RGBA pixel grid plus a same-sized depth grid.

    Both arrays are indexed ``[y, x]`` with (0, 0) at the top-left. Pixels
    start opaque black and depths start at -inf, so the first triangle to
    reach a pixel always wins it.
    """

    __slots__ = ["width", "height", "pixels", "depth"]

    def __init__(self, width: int, height: int) -> None:
        if (
            isinstance(width, bool)
            or isinstance(height, bool)
            or not isinstance(width, (int, np.integer))
            or not isinstance(height, (int, np.integer))
        ):
            raise InvalidSurfaceError(f"surface size must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise InvalidSurfaceError(f"surface size must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)

        self.pixels: PIXELS = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        self.pixels[..., 3] = 255
        self.depth: DEPTH = np.full((self.height, self.width), -np.inf, dtype=np.float64)

    def offset(self, x: int, y: int) -> int:
        """Row-major index of (x, y) into the flattened buffers."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} surface")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> COLOR:
        r, g, b, _ = self.pixels.reshape(-1, 4)[self.offset(x, y)]
        return int(r), int(g), int(b)

    def depth_at(self, x: int, y: int) -> float:
        return float(self.depth.ravel()[self.offset(x, y)])

    def rgb(self) -> PIXELS:
        """(H, W, 3) view of the color channels."""
        return self.pixels[..., :3]

    def covered(self) -> MASK:
        """Mask of pixels some triangle has written."""
        return np.isfinite(self.depth)
