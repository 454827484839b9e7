import pygame
import pytest

from softrender.config import RenderConfig
from softrender.viewer import (
    apply_key,
    config_from_args,
    main,
    parse_arguments,
    render_frame,
    save_snapshot,
    to_pygame_surface,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SOFTRENDER_WIDTH", "SOFTRENDER_HEIGHT", "SOFTRENDER_DEPTH"):
        monkeypatch.delenv(var, raising=False)


def small_config(**kwargs):
    return RenderConfig(width=64, height=48, subdivision_depth=0, **kwargs)


def test_arrow_keys_step_and_clamp():
    cfg = small_config(step_deg=5.0)
    assert apply_key(cfg, pygame.K_RIGHT)
    assert cfg.heading_deg == 5.0
    assert apply_key(cfg, pygame.K_DOWN)
    assert cfg.pitch_deg == 5.0

    cfg.heading_deg = 178.0
    assert apply_key(cfg, pygame.K_RIGHT)
    assert cfg.heading_deg == 180.0
    # Already at the end of the range
    assert not apply_key(cfg, pygame.K_RIGHT)

    cfg.pitch_deg = -90.0
    assert not apply_key(cfg, pygame.K_UP)


def test_reset_and_unknown_keys():
    cfg = small_config(heading_deg=30.0, pitch_deg=10.0)
    assert not apply_key(cfg, pygame.K_SPACE)
    assert apply_key(cfg, pygame.K_r)
    assert (cfg.heading_deg, cfg.pitch_deg) == (0.0, 0.0)
    assert not apply_key(cfg, pygame.K_r)


def test_to_pygame_surface_matches_pixels():
    frame = render_frame(RenderConfig(width=300, height=200, subdivision_depth=0))
    surf = to_pygame_surface(frame)
    assert surf.get_size() == (300, 200)
    for x, y in [(0, 0), (100, 150), (200, 50), (150, 100)]:
        assert tuple(surf.get_at((x, y)))[:3] == frame.pixel(x, y)


def test_args_to_config():
    args = parse_arguments(["--width", "120", "--depth", "1", "--heading", "400", "--pitch", "30"])
    cfg = config_from_args(args)
    assert (cfg.width, cfg.height, cfg.subdivision_depth) == (120, 400, 1)
    assert cfg.heading_deg == 180.0
    assert cfg.pitch_deg == 30.0


def test_snapshot(tmp_path):
    path = tmp_path / "frame.bmp"
    save_snapshot(small_config(heading_deg=45.0), str(path))
    assert path.exists()
    loaded = pygame.image.load(str(path))
    assert loaded.get_size() == (64, 48)


def test_main_snapshot_mode(tmp_path):
    path = tmp_path / "cli.bmp"
    main(["--width", "32", "--height", "32", "--depth", "0", "--snapshot", str(path)])
    assert path.exists()
