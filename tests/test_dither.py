import numpy as np
import pytest

from oled_raytrace import dither, dither_buffer
from oled_raytrace.dither import BANDS


@pytest.mark.parametrize(
    "brightness, x, y, lit",
    [
        (0.0, 0, 0, False),
        (-0.5, 3, 3, False),
        (0.1, 3, 3, True),
        (0.1, 3, 4, False),
        (0.11, 6, 0, True),
        (0.2, 2, 4, True),
        (0.2, 3, 3, False),
        (0.3, 1, 2, True),
        (0.3, 1, 1, False),
        (0.4, 1, 1, True),
        (0.4, 1, 2, False),
        (0.6, 1, 1, True),
        (0.6, 1, 2, False),
        (0.7, 2, 1, True),
        (0.7, 1, 1, False),
        (0.8, 1, 0, True),
        (0.8, 3, 6, False),
        (0.89, 3, 6, True),
        (1.0, 0, 0, True),
    ],
)
def test_band_predicates(brightness, x, y, lit):
    assert dither(brightness, x, y) is lit


def test_band_table_bounds():
    assert [bound for bound, _ in BANDS] == [0.0, 0.11, 0.25, 0.33, 0.5, 0.66, 0.75, 0.88]


def test_dither_is_pure():
    for _ in range(3):
        assert dither(0.45, 7, 9) == dither(0.45, 7, 9)
    # Only x, y residues mod 2 and 3 matter
    assert dither(0.3, 1, 2) == dither(0.3, 7, 8)


def test_buffer_matches_scalar():
    rng = np.random.default_rng(1234)
    brightness = rng.random((12, 16))
    # Include exact band bounds
    brightness[0, : len(BANDS)] = [bound for bound, _ in BANDS]

    pixels = dither_buffer(brightness)
    assert pixels.dtype == bool
    assert pixels.shape == brightness.shape
    for y in range(brightness.shape[0]):
        for x in range(brightness.shape[1]):
            assert pixels[y, x] == dither(brightness[y, x], x, y)


def test_coverage_grows_with_brightness():
    coverage = [dither_buffer(np.full((36, 36), level)).mean() for level in (0.0, 0.1, 0.2, 0.3, 0.45, 0.6, 0.7, 0.8, 1.0)]
    assert coverage == sorted(coverage)
    assert coverage[0] == 0.0
    assert coverage[-1] == 1.0
