"""Drive the rasterizer and ditherer across the animation."""

from typing import NamedTuple

import numpy as np

from ._common import DEFAULT_CONFIG
from .dither import dither_buffer
from .raster import render_frame


class Frame(NamedTuple):
    index: int
    angle: float
    brightness: np.ndarray
    pixels: np.ndarray


def frame_angles(config=DEFAULT_CONFIG):
    """Rotation angle of each frame.

    The angle is bumped before every frame, so frame 0 is already one step
    past the rest pose and the last frame lands on pi (half a turn, which
    the symmetric surfaces need to loop).
    """
    phi = 0.0
    for _ in range(config.frame_count):
        phi += config.angle_step
        yield phi


def generate_frames(surface, config=DEFAULT_CONFIG):
    """Yield a Frame for each step of the animation."""
    for index, angle in enumerate(frame_angles(config)):
        brightness = render_frame(angle, surface, config)
        yield Frame(index, angle, brightness, dither_buffer(brightness))
