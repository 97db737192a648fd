"""Terminal previews of the animation.

Two renderings: the brightness buffer through a 12-level character ramp,
and the dithered on/off buffer exactly as the OLED will show it.  Both take
flip=True to turn the picture 180 degrees, matching the way the firmware
generator printed its buffer.
"""

import sys
import time

import numpy as np

from ._common import FRAME_DELAY_MS, SHADES

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _turned(buffer, flip):
    return buffer[::-1, ::-1] if flip else buffer


def ascii_frame(brightness, shades=SHADES, flip=False):
    """Brightness buffer as text, one ramp character per pixel."""
    brightness = np.clip(_turned(np.asarray(brightness, dtype=np.float64), flip), 0.0, 1.0)
    levels = np.floor(brightness * (len(shades) - 1)).astype(np.int64)
    ramp = np.array(list(shades))
    return "\n".join("".join(row) for row in ramp[levels])


def oled_frame(pixels, on="#", off=" ", flip=False):
    """Dithered buffer as text."""
    rows = _turned(np.asarray(pixels, dtype=bool), flip)
    return "\n".join("".join(on if p else off for p in row) for row in rows)


def sleep_pacer(delay_ms=FRAME_DELAY_MS):
    """Pacing hook that sleeps a fixed time between frames."""

    def pace():
        time.sleep(delay_ms / 1000.0)

    return pace


def play(frames, render, pace=None, stream=None):
    """Show frames one after another in the terminal.

    `render` turns a Frame into text, `pace` is called after each frame
    (no delay if None).  Returns the number of frames shown.
    """
    stream = stream if stream is not None else sys.stdout
    shown = 0
    for frame in frames:
        stream.write(CLEAR_SCREEN)
        stream.write(render(frame))
        stream.write("\n")
        stream.flush()
        shown += 1
        if pace is not None:
            pace()
    return shown
