# transform.py
import numpy as np

from softrender.models import Matrix3

# ------------------------
# Rotation helpers
# ------------------------


def heading_matrix(angle: float) -> Matrix3:
    """Rotation about the vertical (Y) axis."""
    c, s = np.cos(angle), np.sin(angle)
    return Matrix3(
        np.array(
            [
                [c, 0.0, -s],
                [0.0, 1.0, 0.0],
                [s, 0.0, c],
            ],
            dtype=np.float64,
        )
    )


def pitch_matrix(angle: float) -> Matrix3:
    """Rotation about the horizontal (X) axis."""
    c, s = np.cos(angle), np.sin(angle)
    return Matrix3(
        np.array(
            [
                [1.0, 0.0, 0.0],
                [0.0, c, s],
                [0.0, -s, c],
            ],
            dtype=np.float64,
        )
    )


# ------------------------
# Combined transform
# ------------------------


def build_transform(heading: float, pitch: float) -> Matrix3:
    """
    Compose heading and pitch (radians) into one matrix.

    Pitch is applied first, then heading:
    ``build_transform(h, p).apply(v) == heading_matrix(h).apply(pitch_matrix(p).apply(v))``.
    Angles are used as given, without wrapping.
    """
    return heading_matrix(heading).compose(pitch_matrix(pitch))
