"""
Interactive pygame driver for the rasterizer.

Arrow keys stand in for the heading/pitch sliders. A new frame is rendered
only when an angle changes; the core is called with radians and hands back
a fresh surface every time.
"""

import argparse
import logging
import sys

import numpy as np
import pygame

from softrender.config import RenderConfig
from softrender.renderer import render
from softrender.surface import RasterSurface

log = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Software-rasterized tetrahedron viewer")
    parser.add_argument("--width", type=int, default=None, help=f"Surface width (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=None, help=f"Surface height (default: {defaults.height})")
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help=f"Subdivision depth (default: {defaults.subdivision_depth})",
    )
    parser.add_argument("--heading", type=float, default=0.0, help="Initial heading in degrees")
    parser.add_argument("--pitch", type=float, default=0.0, help="Initial pitch in degrees")
    parser.add_argument(
        "--step",
        type=float,
        default=defaults.step_deg,
        help=f"Degrees per key press (default: {defaults.step_deg})",
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        default=None,
        metavar="PATH",
        help="Render one frame to PATH and exit without opening a window",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    overrides: dict[str, object] = {
        "heading_deg": args.heading,
        "pitch_deg": args.pitch,
        "step_deg": args.step,
    }
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    if args.depth is not None:
        overrides["subdivision_depth"] = args.depth
    return RenderConfig.from_env(**overrides)


def render_frame(config: RenderConfig) -> RasterSurface:
    return render(
        config.heading,
        config.pitch,
        config.width,
        config.height,
        config.subdivision_depth,
    )


def to_pygame_surface(surface: RasterSurface) -> pygame.Surface:
    """Copy the RGB channels into a new pygame Surface (pygame indexes [x, y])."""
    return pygame.surfarray.make_surface(np.ascontiguousarray(surface.rgb().swapaxes(0, 1)))


def apply_key(config: RenderConfig, key: int) -> bool:
    """Update the config's angles for one key press; True if anything changed."""
    heading, pitch = config.heading_deg, config.pitch_deg

    if key == pygame.K_LEFT:
        config.heading_deg = config.clamp_heading(heading - config.step_deg)
    elif key == pygame.K_RIGHT:
        config.heading_deg = config.clamp_heading(heading + config.step_deg)
    elif key == pygame.K_UP:
        config.pitch_deg = config.clamp_pitch(pitch - config.step_deg)
    elif key == pygame.K_DOWN:
        config.pitch_deg = config.clamp_pitch(pitch + config.step_deg)
    elif key == pygame.K_r:
        config.heading_deg = 0.0
        config.pitch_deg = 0.0

    return (heading, pitch) != (config.heading_deg, config.pitch_deg)


def save_snapshot(config: RenderConfig, path: str) -> None:
    frame = render_frame(config)
    pygame.image.save(to_pygame_surface(frame), path)
    log.info("Saved %dx%d frame to %s", config.width, config.height, path)


def run(config: RenderConfig) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    clock = pygame.time.Clock()

    print("\n" + "=" * 60)
    print("SOFTWARE RASTERIZER")
    print("=" * 60)
    print("  Left / Right    - Heading")
    print("  Up / Down       - Pitch")
    print("  R               - Reset rotation")
    print("  Esc             - Quit")
    print("=" * 60)

    running = True
    dirty = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r and apply_key(config, event.key):
                    dirty = True

        # Arrows act while held, like dragging a slider
        keys = pygame.key.get_pressed()
        for key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN):
            if keys[key] and apply_key(config, key):
                dirty = True

        if dirty and running:
            frame = render_frame(config)
            screen.blit(to_pygame_surface(frame), (0, 0))
            pygame.display.flip()
            pygame.display.set_caption(
                f"Heading: {config.heading_deg:.0f}°  Pitch: {config.pitch_deg:.0f}°"
            )
            dirty = False

        clock.tick(60)

    pygame.quit()


def main(argv: list[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    if args.snapshot:
        save_snapshot(config, args.snapshot)
        return

    run(config)
    sys.exit()


if __name__ == "__main__":
    main()
