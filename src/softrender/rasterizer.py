# rasterizer.py
"""
Orthographic triangle rasterizer with a per-pixel depth test.

Each triangle is rotated, shifted so the origin lands at the surface
center, shaded once from its face normal and then filled pixel by pixel
over its clamped bounding box. Larger z is closer to the viewer.
"""

from dataclasses import dataclass
import logging
import math

from numba import njit  # type: ignore
import numpy as np

from softrender.errors import DegenerateGeometryError
from softrender.models import Matrix3, Mesh, Triangle, Vector3
from softrender.shading import shade, shade_factor
from softrender.surface import RasterSurface
from softrender.types import BBOX, DEPTH, PIXELS

log = logging.getLogger(__name__)

# Twice-signed-area magnitude below which a projected triangle is skipped
DEGENERATE_EPSILON = 1e-9

# ===============================
# KERNELS
# ===============================


@njit(cache=True)  # type: ignore
def barycentric(
    px: float,
    py: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    area: float,
) -> tuple[float, float, float]:
    """Weights of (px, py) against the triangle; ``area`` is signed_area()."""
    b1 = ((py - y3) * (x2 - x3) + (y2 - y3) * (x3 - px)) / area
    b2 = ((py - y1) * (x3 - x1) + (y3 - y1) * (x1 - px)) / area
    b3 = ((py - y2) * (x1 - x2) + (y1 - y2) * (x2 - px)) / area
    return b1, b2, b3


# No fastmath: the depth buffer starts at -inf
@njit(cache=True)  # type: ignore
def fill_triangle(
    pixels: PIXELS,
    depth: DEPTH,
    x1: float,
    y1: float,
    z1: float,
    x2: float,
    y2: float,
    z2: float,
    x3: float,
    y3: float,
    z3: float,
    area: float,
    min_x: int,
    max_x: int,
    min_y: int,
    max_y: int,
    r: np.uint8,
    g: np.uint8,
    b: np.uint8,
) -> int:
    """
    Fill every pixel of the box that lies inside the triangle (edges
    included) and beats the stored depth. Returns the number of writes.
    """
    written = 0
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            b1, b2, b3 = barycentric(x, y, x1, y1, x2, y2, x3, y3, area)
            if b1 < 0.0 or b1 > 1.0 or b2 < 0.0 or b2 > 1.0 or b3 < 0.0 or b3 > 1.0:
                continue

            z = b1 * z1 + b2 * z2 + b3 * z3
            # Strictly greater: equal depths keep the earlier triangle
            if z > depth[y, x]:
                depth[y, x] = z
                pixels[y, x, 0] = r
                pixels[y, x, 1] = g
                pixels[y, x, 2] = b
                written += 1
    return written


# ===============================
# GEOMETRY
# ===============================


def project_vertex(v: Vector3, matrix: Matrix3, width: int, height: int) -> Vector3:
    """Rotate ``v`` and move the origin to pixel (width // 2, height // 2)."""
    t = matrix.apply(v)
    return Vector3(t.x + width // 2, t.y + height // 2, t.z)


def face_normal(v1: Vector3, v2: Vector3, v3: Vector3) -> Vector3:
    return (v2 - v1).cross(v3 - v1).normalize()


def signed_area(v1: Vector3, v2: Vector3, v3: Vector3) -> float:
    """Twice the signed screen-space area; the barycentric denominator."""
    return (v1.y - v3.y) * (v2.x - v3.x) + (v2.y - v3.y) * (v3.x - v1.x)


def bounding_box(v1: Vector3, v2: Vector3, v3: Vector3, width: int, height: int) -> BBOX:
    """
    Integer pixel range (min_x, max_x, min_y, max_y) clamped to the surface.

    The range is empty (min > max) when the triangle misses the surface.
    """
    min_x = max(0, math.ceil(min(v1.x, v2.x, v3.x)))
    max_x = min(width - 1, math.floor(max(v1.x, v2.x, v3.x)))
    min_y = max(0, math.ceil(min(v1.y, v2.y, v3.y)))
    max_y = min(height - 1, math.floor(max(v1.y, v2.y, v3.y)))
    return min_x, max_x, min_y, max_y


# ===============================
# RASTERIZER
# ===============================


@dataclass
class RasterStats:
    triangles_drawn: int = 0
    triangles_skipped: int = 0
    pixels_written: int = 0


def rasterize_triangle(tri: Triangle, matrix: Matrix3, surface: RasterSurface) -> int:
    """
    Draw one triangle into ``surface``.

    Raises:
        DegenerateGeometryError: The triangle has no area on screen or no
            usable normal. Nothing is written in that case.

    Returns:
        Number of pixel writes
    """
    w, h = surface.width, surface.height
    v1 = project_vertex(tri.v1, matrix, w, h)
    v2 = project_vertex(tri.v2, matrix, w, h)
    v3 = project_vertex(tri.v3, matrix, w, h)

    normal = face_normal(v1, v2, v3)
    area = signed_area(v1, v2, v3)
    if abs(area) < DEGENERATE_EPSILON:
        raise DegenerateGeometryError(f"zero screen area for {tri!r}")

    r, g, b = shade(tri.color, shade_factor(normal))

    min_x, max_x, min_y, max_y = bounding_box(v1, v2, v3, w, h)
    if min_x > max_x or min_y > max_y:
        return 0

    return int(
        fill_triangle(
            surface.pixels,
            surface.depth,
            v1.x,
            v1.y,
            v1.z,
            v2.x,
            v2.y,
            v2.z,
            v3.x,
            v3.y,
            v3.z,
            area,
            min_x,
            max_x,
            min_y,
            max_y,
            np.uint8(r),
            np.uint8(g),
            np.uint8(b),
        )
    )


def rasterize(mesh: Mesh, matrix: Matrix3, surface: RasterSurface) -> RasterStats:
    """Draw every triangle in order, skipping degenerate ones."""
    stats = RasterStats()
    for tri in mesh:
        try:
            stats.pixels_written += rasterize_triangle(tri, matrix, surface)
        except DegenerateGeometryError as exc:
            stats.triangles_skipped += 1
            log.debug("Skipping triangle: %s", exc)
            continue
        stats.triangles_drawn += 1

    log.debug(
        "Rasterized %d triangles (%d skipped, %d pixel writes)",
        stats.triangles_drawn,
        stats.triangles_skipped,
        stats.pixels_written,
    )
    return stats
