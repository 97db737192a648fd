import math

import numpy as np

from oled_raytrace import DEFAULT_CONFIG, RenderConfig, dither_buffer, frame_angles, generate_frames, render_frame
from oled_raytrace.surfaces import TwistedStrip


def test_default_angles():
    angles = list(frame_angles(DEFAULT_CONFIG))
    assert len(angles) == 32
    for k, angle in enumerate(angles):
        assert math.isclose(angle, (k + 1) * (math.pi / 32), rel_tol=1e-12)
    assert math.isclose(angles[-1], math.pi, rel_tol=1e-12)


def test_generate_frames_count_and_contents():
    config = RenderConfig(frame_count=3, step=0.05)
    surface = TwistedStrip()
    frames = list(generate_frames(surface, config))

    assert [f.index for f in frames] == [0, 1, 2]
    for k, frame in enumerate(frames):
        assert math.isclose(frame.angle, (k + 1) * math.pi / 3, rel_tol=1e-12)
        assert frame.pixels.dtype == bool
        assert frame.pixels.shape == (config.height, config.width)
        assert np.array_equal(frame.brightness, render_frame(frame.angle, surface, config))
        assert np.array_equal(frame.pixels, dither_buffer(frame.brightness))


def test_generate_frames_is_lazy():
    frames = generate_frames(TwistedStrip(), RenderConfig(frame_count=1000, step=0.1))
    first = next(frames)
    assert first.index == 0
