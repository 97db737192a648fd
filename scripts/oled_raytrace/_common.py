"""Shared constants and run configuration for oled_raytrace."""

import dataclasses
import math
from dataclasses import dataclass

from .vecmath import Vec3

# ---------------------------------------------------------------------------
# Display and animation
# ---------------------------------------------------------------------------

SCREEN_WIDTH = 32
SCREEN_HEIGHT = 128
NUM_FRAMES = 32
NUM_SURFACES = 2  # Interleaved copies of the surface per frame

# Parametric sampling step in both u and v.  Much finer than a pixel so the
# perspective-compressed far side still covers every pixel.
UV_STEP = 0.001

# ---------------------------------------------------------------------------
# Camera and lighting
# ---------------------------------------------------------------------------

FOCAL_LENGTH = 4.0  # Projection scale numerator
CAMERA_DISTANCE = 6.0  # Shift along +x that puts the surface in front of us
LIGHT_POSITION = Vec3(0.0, -2.0, 1.2)
FAR_DEPTH = 1000.0  # Depth sentinel, beyond anything reachable

# ---------------------------------------------------------------------------
# Surfaces
# ---------------------------------------------------------------------------

WIDTH_SCALE = 1.3  # Twisted strip radius at v = 0
TORUS_MAJOR = 1.0
TORUS_MINOR = 0.5

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

SHADES = " ,-~:;=!*$@#"  # Lightest to darkest
ARRAY_PREFIX = "ANIM_FRAME"
FRAME_DELAY_MS = 16


@dataclass(frozen=True)
class RenderConfig:
    """Immutable parameters for one rendering run.

    Defaults reproduce the tables shipped to the keyboard firmware; change
    them only for previews and tests.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    frame_count: int = NUM_FRAMES
    num_surfaces: int = NUM_SURFACES
    step: float = UV_STEP
    focal_length: float = FOCAL_LENGTH
    camera_distance: float = CAMERA_DISTANCE
    light: Vec3 = LIGHT_POSITION
    width_scale: float = WIDTH_SCALE
    torus_major: float = TORUS_MAJOR
    torus_minor: float = TORUS_MINOR

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Screen size must be positive, got {self.width}x{self.height}")
        if self.width % 8:
            raise ValueError(f"Screen width must be a multiple of 8, got {self.width}")
        if self.frame_count <= 0:
            raise ValueError(f"Frame count must be positive, got {self.frame_count}")
        if self.num_surfaces <= 0:
            raise ValueError(f"Surface count must be positive, got {self.num_surfaces}")
        if not self.step > 0:
            raise ValueError(f"Sampling step must be positive, got {self.step}")
        # Accept any 3-sequence for the light, store it as a Vec3
        object.__setattr__(self, "light", Vec3(*(float(c) for c in self.light)))

    @property
    def angle_step(self):
        """Rotation added before each frame."""
        return math.pi / self.frame_count

    def replace(self, **changes):
        """Return a copy with some fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = RenderConfig()
