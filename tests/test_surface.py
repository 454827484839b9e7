import numpy as np
import pytest

from softrender.errors import InvalidSurfaceError
from softrender.surface import RasterSurface


def test_new_surface_is_opaque_black_with_empty_depth():
    s = RasterSurface(10, 5)
    assert s.pixels.shape == (5, 10, 4)
    assert s.pixels.dtype == np.uint8
    assert np.all(s.pixels[..., :3] == 0)
    assert np.all(s.pixels[..., 3] == 255)
    assert s.depth.shape == (5, 10)
    assert np.all(np.isneginf(s.depth))
    assert not s.covered().any()


def test_offset_is_row_major():
    s = RasterSurface(10, 5)
    assert s.offset(0, 0) == 0
    assert s.offset(3, 2) == 23
    assert s.offset(9, 4) == 49
    with pytest.raises(IndexError):
        s.offset(10, 0)
    with pytest.raises(IndexError):
        s.offset(0, -1)


def test_pixel_and_depth_accessors():
    s = RasterSurface(4, 3)
    s.pixels[2, 1, :3] = (9, 8, 7)
    s.depth[2, 1] = 42.0
    assert s.pixel(1, 2) == (9, 8, 7)
    assert s.depth_at(1, 2) == 42.0
    assert s.covered()[2, 1]
    assert s.rgb().shape == (3, 4, 3)


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10), (10, -5), (2.5, 10), (True, 10)])
def test_invalid_sizes(width, height):
    with pytest.raises(InvalidSurfaceError):
        RasterSurface(width, height)
