"""Write packed frames as C array initializers for the firmware.

Produces blocks like:
    static const char ANIM_FRAME0 [] PROGMEM = {
        0x00, 0x00, ..., 0x1C,
        ...
        0x00, 0x00, ..., 0x00
    };

One line per 8-pixel column block, one entry per display row, in the byte
order produced by pack_frame.
"""

import io
import sys

from ._common import ARRAY_PREFIX
from .packing import pack_frame


def format_frame(index, data, row_length, prefix=ARRAY_PREFIX):
    """Format one frame's packed bytes as a PROGMEM array block."""
    lines = [f"static const char {prefix}{index} [] PROGMEM = {{"]
    rows = [data[i : i + row_length] for i in range(0, len(data), row_length)]
    for n, row in enumerate(rows):
        hex_values = ", ".join(f"0x{b:02X}" for b in row)
        trailer = "," if n < len(rows) - 1 else ""
        lines.append(f"    {hex_values}{trailer}")
    lines.append("};")
    return "\n".join(lines) + "\n"


def write_header(out, frames, prefix=ARRAY_PREFIX, source="oled_raytrace"):
    """Write every frame to the text stream `out`.  Returns the byte count."""
    out.write(f"/* Auto-generated by {source} -- do not edit by hand. */\n")
    total = 0
    for frame in frames:
        height = frame.pixels.shape[0]
        data = pack_frame(frame.pixels)
        out.write(format_frame(frame.index, data, height, prefix))
        total += len(data)
    return total


def save_header(path, frames, prefix=ARRAY_PREFIX, source="oled_raytrace"):
    """Write the frame table to `path`, or to stdout when path is '-'.

    Every frame is rendered and formatted before the destination is opened,
    so an interrupted run leaves an existing header untouched.
    """
    text = io.StringIO()
    total = write_header(text, frames, prefix, source)

    if path == "-":
        sys.stdout.write(text.getvalue())
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text.getvalue())
    return total
