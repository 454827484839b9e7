"""
Defaults shared by render() callers and the viewer.

The core itself is stateless; this only collects the values a driver needs
to call it (surface size, subdivision depth, angle ranges in degrees).
"""

from dataclasses import dataclass
import math
import os

from softrender.errors import InvalidSurfaceError


@dataclass
class RenderConfig:
    """Configuration for a render driver."""

    width: int = 400
    height: int = 400
    subdivision_depth: int = 4
    heading_deg: float = 0.0
    pitch_deg: float = 0.0
    heading_range: tuple[float, float] = (-180.0, 180.0)
    pitch_range: tuple[float, float] = (-90.0, 90.0)
    step_deg: float = 2.0  # Angle change per key press

    def __post_init__(self) -> None:
        for size in (self.width, self.height):
            if isinstance(size, bool) or not isinstance(size, int):
                raise InvalidSurfaceError(
                    f"surface size must be integers, got {self.width!r}x{self.height!r}"
                )
        if self.width <= 0 or self.height <= 0:
            raise InvalidSurfaceError(
                f"surface size must be positive, got {self.width}x{self.height}"
            )
        if self.subdivision_depth < 0:
            raise ValueError(f"subdivision depth must be >= 0, got {self.subdivision_depth}")
        self.heading_deg = self.clamp_heading(self.heading_deg)
        self.pitch_deg = self.clamp_pitch(self.pitch_deg)

    @property
    def heading(self) -> float:
        return math.radians(self.heading_deg)

    @property
    def pitch(self) -> float:
        return math.radians(self.pitch_deg)

    def clamp_heading(self, degrees: float) -> float:
        lo, hi = self.heading_range
        return max(lo, min(hi, degrees))

    def clamp_pitch(self, degrees: float) -> float:
        lo, hi = self.pitch_range
        return max(lo, min(hi, degrees))

    @classmethod
    def from_env(cls, **overrides: object) -> "RenderConfig":
        """
        Build a config from SOFTRENDER_WIDTH, SOFTRENDER_HEIGHT and
        SOFTRENDER_DEPTH, falling back to the defaults. Keyword arguments
        win over the environment.
        """
        values: dict[str, object] = {}
        for field_name, var in (
            ("width", "SOFTRENDER_WIDTH"),
            ("height", "SOFTRENDER_HEIGHT"),
            ("subdivision_depth", "SOFTRENDER_DEPTH"),
        ):
            raw = os.environ.get(var)
            if raw:
                try:
                    values[field_name] = int(raw)
                except ValueError as exc:
                    raise ValueError(f"{var} must be an integer, got {raw!r}") from exc
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
