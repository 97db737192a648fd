import io

import numpy as np

from oled_raytrace import Frame
from oled_raytrace.preview import CLEAR_SCREEN, ascii_frame, oled_frame, play, sleep_pacer


def test_ascii_ramp_levels():
    text = ascii_frame(np.array([[0.0, 1.0], [0.5, 0.999]]))
    assert text == " #\n;@"


def test_ascii_frame_shape():
    text = ascii_frame(np.zeros((128, 32)))
    lines = text.split("\n")
    assert len(lines) == 128
    assert all(len(line) == 32 for line in lines)


def test_oled_frame():
    assert oled_frame(np.array([[True, False], [False, True]])) == "# \n #"


def test_play_paces_every_frame():
    frames = [Frame(i, 0.0, np.zeros((2, 8)), np.zeros((2, 8), dtype=bool)) for i in range(3)]
    calls = []
    out = io.StringIO()

    shown = play(frames, lambda f: f"frame {f.index}", pace=lambda: calls.append(1), stream=out)

    assert shown == 3
    assert len(calls) == 3
    text = out.getvalue()
    assert text.count(CLEAR_SCREEN) == 3
    assert text.endswith("frame 2\n")


def test_play_without_pacing():
    out = io.StringIO()
    assert play([], str, stream=out) == 0
    assert out.getvalue() == ""


def test_sleep_pacer(monkeypatch):
    slept = []
    monkeypatch.setattr("oled_raytrace.preview.time.sleep", slept.append)
    sleep_pacer(40)()
    assert slept == [0.04]


def test_oled_frame_flipped():
    pixels = np.array([[True, False], [False, False], [False, False]])
    assert oled_frame(pixels) == "# \n  \n  "
    assert oled_frame(pixels, flip=True) == "  \n  \n #"


def test_ascii_frame_flipped():
    brightness = np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.5]])
    assert ascii_frame(brightness, flip=True) == ";  \n  #"
    # The caller's buffer keeps its orientation
    assert brightness[0, 0] == 1.0
