"""Ordered dithering from brightness to on/off pixels.

Each brightness band lights a fixed fraction of pixels picked by a parity
test on (x, y).  The table is part of the firmware contract: existing
bitmap tables were generated with exactly these bands and patterns.
"""

import numpy as np

# (upper bound, predicate).  The first band whose bound is >= brightness
# decides; anything above the last bound is fully on.
BANDS = [
    (0.0, lambda x, y: np.zeros_like(x, dtype=bool)),
    (0.11, lambda x, y: (x % 3 == 0) & (y % 3 == 0)),
    (0.25, lambda x, y: (x % 2 == 0) & (y % 2 == 0)),
    (0.33, lambda x, y: (x + y) % 3 == 0),
    (0.5, lambda x, y: (x + y) % 2 == 0),
    (0.66, lambda x, y: (x + y) % 3 != 0),
    (0.75, lambda x, y: (x % 2 == 0) | (y % 2 == 0)),
    (0.88, lambda x, y: (x % 3 != 0) | (y % 3 != 0)),
]


def dither(brightness, x, y):
    """Whether pixel (x, y) is lit at this brightness."""
    for bound, lit in BANDS:
        if brightness <= bound:
            return bool(lit(np.int64(x), np.int64(y)))
    return True


def dither_buffer(brightness):
    """Dither a whole (height, width) brightness buffer into a bool array."""
    brightness = np.asarray(brightness, dtype=np.float64)
    y, x = np.indices(brightness.shape)

    # np.select takes the first matching condition, same as the ladder above
    conditions = [brightness <= bound for bound, _ in BANDS]
    choices = [lit(x, y) for _, lit in BANDS]
    return np.select(conditions, choices, default=True)
