"""CLI entry point for the oled_raytrace package.

Invoke as:  python scripts/oled_raytrace --header anim.h
"""

# Started by directory path: nothing is imported as a package yet, so put
# scripts/ on the path and start over as `oled_raytrace.__main__`.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    sys.path[:0] = [] if _package_root in sys.path else [_package_root]
    runpy.run_module("oled_raytrace", run_name="__main__", alter_sys=True)
    sys.exit(0)

import argparse
import functools
import importlib
import sys

try:
    import numpy  # noqa: F401
except ImportError:
    sys.exit("Missing dependency: numpy (install with: pip install numpy)")

from ._common import ARRAY_PREFIX, FRAME_DELAY_MS, RenderConfig
from .emit import save_header
from .preview import ascii_frame, oled_frame, play, sleep_pacer
from .sequence import generate_frames
from .surfaces import SURFACES, make_surface


def require(module, package):
    """Import an optional dependency or exit with an install hint."""
    try:
        return importlib.import_module(module)
    except ImportError:
        sys.exit(f"Missing dependency: {package} (install with: pip install {package})")


def render_ascii(frame, flip=False):
    return ascii_frame(frame.brightness, flip=flip)


def render_oled(frame, flip=False):
    return oled_frame(frame.pixels, flip=flip)


def with_progress(frames, total, log):
    """Pass frames through, reporting each one on `log`."""
    for frame in frames:
        print(f"  Frame {frame.index + 1}/{total} (angle {frame.angle:.4f})", file=log, flush=True)
        yield frame


def build_parser():
    parser = argparse.ArgumentParser(
        description="Render a rotating surface into dithered frames for a 32x128 OLED."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--header", metavar="PATH", help="Write the C frame table to PATH ('-' for stdout)"
    )
    group.add_argument("--ascii", action="store_true", help="Play a shaded ASCII preview")
    group.add_argument("--oled", action="store_true", help="Play the dithered on/off preview")
    group.add_argument("--gif", metavar="PATH", help="Save the dithered frames as an animated GIF")
    group.add_argument(
        "--diagrams", metavar="DIR", help="Save a contact sheet and shading diagrams to DIR"
    )
    group.add_argument("--list", action="store_true", help="List available surfaces")

    parser.add_argument(
        "--surface",
        default="strip",
        choices=sorted(SURFACES),
        help="Surface to render (default: strip)",
    )
    parser.add_argument("--frames", type=int, default=None, help="Frame count (default: 32)")
    parser.add_argument(
        "--step", type=float, default=None, help="Parametric sampling step (default: 0.001)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=FRAME_DELAY_MS,
        help=f"Preview delay between frames in ms (default: {FRAME_DELAY_MS})",
    )
    parser.add_argument(
        "--name",
        default=ARRAY_PREFIX,
        help=f"Array name prefix for --header (default: {ARRAY_PREFIX})",
    )
    parser.add_argument("--scale", type=int, default=4, help="GIF upscale factor (default: 4)")
    parser.add_argument(
        "--flip", action="store_true", help="Turn the terminal previews 180 degrees"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.list:
        print("Available surfaces:")
        for name in sorted(SURFACES):
            print(f"  {name}")
        return 0

    overrides = {}
    if args.frames is not None:
        overrides["frame_count"] = args.frames
    if args.step is not None:
        overrides["step"] = args.step
    try:
        config = RenderConfig(**overrides)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    if args.delay < 0 or args.scale <= 0:
        print("Delay must be >= 0 and scale must be positive", file=sys.stderr)
        return 1

    surface = make_surface(args.surface, config)
    frames = generate_frames(surface, config)

    try:
        if args.ascii or args.oled:
            render = render_ascii if args.ascii else render_oled
            render = functools.partial(render, flip=args.flip)
            try:
                play(frames, render, pace=sleep_pacer(args.delay))
            except KeyboardInterrupt:
                print()
            return 0

        # Keep stdout clean when the table itself goes there
        log = sys.stderr if args.header == "-" else sys.stdout
        print(f"Rendering {args.surface}: {config.frame_count} frames...", file=log)
        frames = with_progress(frames, config.frame_count, log)

        if args.header:
            total = save_header(args.header, frames, prefix=args.name)
            print(f"Wrote {total} bytes as {args.name}0..{config.frame_count - 1}", file=log)
        elif args.gif:
            require("PIL", "Pillow")
            from .capture import frames_to_gif

            if not frames_to_gif(frames, args.gif, scale=args.scale, duration_ms=args.delay):
                return 1
        elif args.diagrams:
            require("matplotlib", "matplotlib")
            from . import diagrams

            print(f"{args.diagrams}/")
            diagrams.diagram_contact_sheet(frames, args.diagrams)
            diagrams.diagram_light_curve(args.diagrams)
            diagrams.diagram_dither_bands(args.diagrams)
    except OSError as e:
        print(f"Cannot write output: {e}", file=sys.stderr)
        return 1

    print("Done!", file=log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
