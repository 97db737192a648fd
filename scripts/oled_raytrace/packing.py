"""Bit-pack dithered frames in the display's page order.

The OLED controller is addressed in 8-pixel-wide column blocks: one byte
covers 8 horizontally adjacent pixels of a single row, least significant
bit on the left.  All rows of block 0 come first, then all rows of block 1,
and so on.
"""

import numpy as np


def pack_frame(pixels):
    """Pack a (height, width) bool buffer into bytes.

    Raises ValueError if the width is not a multiple of 8.
    """
    pixels = np.asarray(pixels, dtype=bool)
    height, width = pixels.shape
    if width % 8:
        raise ValueError(f"Frame width must be a multiple of 8, got {width}")

    # (height, blocks, 8) -> one byte per (row, block), bit b = column b
    packed = np.packbits(pixels.reshape(height, width // 8, 8), axis=-1, bitorder="little")
    return packed[..., 0].T.tobytes()


def unpack_frame(data, width, height):
    """Inverse of pack_frame."""
    if width % 8:
        raise ValueError(f"Frame width must be a multiple of 8, got {width}")
    expected = width // 8 * height
    if len(data) != expected:
        raise ValueError(f"Expected {expected} bytes for {width}x{height}, got {len(data)}")

    blocks = np.frombuffer(bytes(data), dtype=np.uint8).reshape(width // 8, height)
    bits = np.unpackbits(blocks.T[..., np.newaxis], axis=-1, bitorder="little")
    return bits.reshape(height, width).astype(bool)
