# renderer.py
import logging

from softrender.mesh.tetrahedron import base_solid, subdivide
from softrender.models import Mesh
from softrender.rasterizer import rasterize
from softrender.surface import RasterSurface
from softrender.transform import build_transform

log = logging.getLogger(__name__)


def render(
    heading: float,
    pitch: float,
    width: int,
    height: int,
    subdivision_depth: int = 4,
    *,
    mesh: Mesh | None = None,
) -> RasterSurface:
    """
    Render one frame.

    Everything (mesh, transform, buffers) is rebuilt on every call, so no
    state is shared between frames.

    Args:
        heading: Rotation about the vertical axis, radians
        pitch: Rotation about the horizontal axis, radians
        width: Surface width in pixels (> 0)
        height: Surface height in pixels (> 0)
        subdivision_depth: Times to inflate the mesh (>= 0)
        mesh: Triangles to draw instead of the base tetrahedron

    Returns:
        A fresh RasterSurface; ``.pixels`` holds the RGBA image, opaque
        black wherever nothing was drawn.

    Raises:
        InvalidSurfaceError: width or height is not a positive integer
        ValueError: subdivision_depth is negative
    """
    surface = RasterSurface(width, height)

    source = base_solid() if mesh is None else mesh
    triangles = subdivide(source, subdivision_depth)
    transform = build_transform(heading, pitch)

    stats = rasterize(triangles, transform, surface)
    log.debug(
        "Rendered %dx%d at heading=%.4f pitch=%.4f: %s",
        width,
        height,
        heading,
        pitch,
        stats,
    )
    return surface
