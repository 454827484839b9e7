import math

from softrender.models import Vector3
from softrender.types import COLOR


def shade_factor(normal: Vector3) -> float:
    """
    Brightness for a unit face normal: ``abs(normal.z)``.

    Faces square-on to the viewer get 1.0, edge-on faces approach 0.0.
    The sign is ignored, so both sides of a face shade the same.
    """
    return min(1.0, abs(normal.z))


def shade(color: COLOR, factor: float) -> COLOR:
    """Scale each channel by ``factor`` (clamped to [0, 1]), rounding half up."""
    factor = max(0.0, min(1.0, factor))
    return (
        _channel(color[0], factor),
        _channel(color[1], factor),
        _channel(color[2], factor),
    )


def _channel(value: int, factor: float) -> int:
    return max(0, min(255, int(math.floor(value * factor + 0.5))))
