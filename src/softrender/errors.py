class RenderError(Exception):
    """Base class for every error raised by softrender."""


class InvalidSurfaceError(RenderError, ValueError):
    """Surface width or height is not a positive integer."""


class DegenerateGeometryError(RenderError):
    """A triangle has no usable area; the rasterizer skips it."""


class DegenerateVectorError(DegenerateGeometryError):
    """Tried to normalize a zero-length vector."""
