"""
Softrender

A minimal software 3D rasterizer: a subdivided tetrahedron, rotated by
heading and pitch, projected orthographically and filled with barycentric
rasterization and a per-pixel depth buffer.
"""

from .errors import DegenerateGeometryError, DegenerateVectorError, InvalidSurfaceError, RenderError
from .models import Matrix3, Triangle, Vector3
from .renderer import render
from .surface import RasterSurface

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "Triangle",
    "Matrix3",
    "RasterSurface",
    "render",
    "RenderError",
    "InvalidSurfaceError",
    "DegenerateGeometryError",
    "DegenerateVectorError",
]
