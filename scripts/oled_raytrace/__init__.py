"""oled_raytrace: Pre-bake a rotating 3-D surface animation for a 32x128 OLED.

Point-samples a parametric surface (twisted strip or torus), z-buffers and
shades it, orders-dithers the brightness to on/off pixels and packs each
frame into the byte layout the display expects.

Usage:
    python scripts/oled_raytrace --header anim.h       # firmware table
    python scripts/oled_raytrace --ascii               # shaded preview
    python scripts/oled_raytrace --oled --surface torus
    python scripts/oled_raytrace --gif anim.gif
    python scripts/oled_raytrace --diagrams docs/

Requires: pip install numpy Pillow matplotlib
"""

from ._common import DEFAULT_CONFIG, RenderConfig
from .dither import dither, dither_buffer
from .packing import pack_frame, unpack_frame
from .raster import RasterResult, rasterize, render_frame
from .sequence import Frame, frame_angles, generate_frames
from .surfaces import SURFACES, SurfacePair, Torus, TwistedStrip, make_surface

__all__ = [
    "DEFAULT_CONFIG",
    "Frame",
    "RasterResult",
    "RenderConfig",
    "SURFACES",
    "SurfacePair",
    "Torus",
    "TwistedStrip",
    "dither",
    "dither_buffer",
    "frame_angles",
    "generate_frames",
    "make_surface",
    "pack_frame",
    "rasterize",
    "render_frame",
    "unpack_frame",
]
