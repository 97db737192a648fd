import math

import pytest

from oled_raytrace import DEFAULT_CONFIG, RenderConfig
from oled_raytrace.vecmath import Vec3


def test_defaults_match_firmware_tables():
    c = DEFAULT_CONFIG
    assert (c.width, c.height, c.frame_count, c.num_surfaces) == (32, 128, 32, 2)
    assert c.step == 0.001
    assert c.light == Vec3(0.0, -2.0, 1.2)
    assert (c.camera_distance, c.focal_length) == (6.0, 4.0)
    assert c.width_scale == 1.3
    assert (c.torus_major, c.torus_minor) == (1.0, 0.5)
    assert c.angle_step == math.pi / 32


def test_replace_keeps_config_frozen():
    c = DEFAULT_CONFIG.replace(frame_count=8, light=(1, 2, 3))
    assert c.frame_count == 8
    assert c.light == Vec3(1.0, 2.0, 3.0)
    assert DEFAULT_CONFIG.frame_count == 32
    with pytest.raises(AttributeError):
        c.frame_count = 4


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"width": 12}, "multiple of 8"),
        ({"height": 0}, "Screen size"),
        ({"frame_count": -1}, "Frame count"),
        ({"num_surfaces": 0}, "Surface count"),
        ({"step": 0.0}, "Sampling step"),
    ],
)
def test_validation(changes, message):
    with pytest.raises(ValueError, match=message):
        RenderConfig(**changes)
