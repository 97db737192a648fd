import numpy as np
import pytest

from oled_raytrace import pack_frame, unpack_frame


def test_bit_and_block_order():
    pixels = np.zeros((4, 16), dtype=bool)
    pixels[0, 0] = True  # block 0, row 0, bit 0
    pixels[2, 9] = True  # block 1, row 2, bit 1
    pixels[3, 7] = True  # block 0, row 3, bit 7

    data = pack_frame(pixels)
    assert len(data) == 8
    assert data[0] == 0x01
    assert data[3] == 0x80
    assert data[4 + 2] == 0x02
    assert sum(data) == 0x01 + 0x80 + 0x02


def test_full_row_packs_to_ff():
    pixels = np.zeros((2, 8), dtype=bool)
    pixels[1] = True
    assert pack_frame(pixels) == bytes([0x00, 0xFF])


def test_roundtrip():
    rng = np.random.default_rng(7)
    pixels = rng.random((128, 32)) > 0.5
    data = pack_frame(pixels)
    assert len(data) == 128 * 32 // 8
    assert np.array_equal(unpack_frame(data, 32, 128), pixels)


def test_width_must_be_byte_aligned():
    with pytest.raises(ValueError):
        pack_frame(np.zeros((4, 12), dtype=bool))
    with pytest.raises(ValueError):
        unpack_frame(bytes(6), 12, 4)


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError, match="Expected 16 bytes"):
        unpack_frame(bytes(15), 32, 4)
