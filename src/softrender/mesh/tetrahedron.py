# tetrahedron.py
"""
Base solid and 1-to-4 triangle subdivision ("inflation").

Subdivision is pure geometric refinement: every child lies in its parent's
plane, so the silhouette never changes, only the triangle density.
"""

import logging

from softrender.models import Mesh, Triangle, Vector3
from softrender.types import COLOR

log = logging.getLogger(__name__)

HALF_EXTENT = 100.0

WHITE: COLOR = (255, 255, 255)
RED: COLOR = (255, 0, 0)
GREEN: COLOR = (0, 255, 0)
BLUE: COLOR = (0, 0, 255)


def base_solid(half_extent: float = HALF_EXTENT) -> Mesh:
    """
    Build the 4-triangle tetrahedron on alternating corners of a cube.

    Face colors, by the corner each face is missing:
        white - (+h, -h, -h)
        red   - (-h, +h, -h)
        green - (-h, -h, +h)
        blue  - (+h, +h, +h)

    Args:
        half_extent: Half the edge length of the enclosing cube

    Returns:
        New list of 4 triangles
    """
    h = half_extent
    a = Vector3(h, h, h)
    b = Vector3(-h, -h, h)
    c = Vector3(-h, h, -h)
    d = Vector3(h, -h, -h)

    return [
        Triangle(a, b, c, WHITE),
        Triangle(a, b, d, RED),
        Triangle(c, d, a, GREEN),
        Triangle(c, d, b, BLUE),
    ]


def inflate(mesh: Mesh) -> Mesh:
    """Split every triangle into 4 through its edge midpoints, keeping order."""
    result: Mesh = []
    for tri in mesh:
        v1, v2, v3 = tri.v1, tri.v2, tri.v3
        v12 = v1.midpoint(v2)
        v23 = v2.midpoint(v3)
        v31 = v3.midpoint(v1)

        # Three corners, then the center
        result.append(Triangle(v1, v12, v31, tri.color))
        result.append(Triangle(v12, v2, v23, tri.color))
        result.append(Triangle(v31, v23, v3, tri.color))
        result.append(Triangle(v12, v23, v31, tri.color))
    return result


def subdivide(mesh: Mesh, depth: int) -> Mesh:
    """Apply inflate() ``depth`` times; yields ``len(mesh) * 4**depth`` triangles."""
    if depth < 0:
        raise ValueError(f"subdivision depth must be >= 0, got {depth}")

    result = list(mesh)
    for _ in range(depth):
        result = inflate(result)

    log.debug("Subdivided %d triangles to %d (depth %d)", len(mesh), len(result), depth)
    return result
