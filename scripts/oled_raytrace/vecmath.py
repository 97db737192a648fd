"""Small vector helpers shared by the surfaces and the rasterizer.

Every function accepts a Vec3/Vec2 or a numpy array whose last axis holds
the components, so the same code handles a single point and a whole grid of
samples.
"""

from typing import NamedTuple

import numpy as np


class Vec3(NamedTuple):
    x: float
    y: float
    z: float


class Vec2(NamedTuple):
    x: float
    y: float


def dot(a, b):
    """Sum of elementwise products over the last axis."""
    return np.sum(np.asarray(a, dtype=np.float64) * np.asarray(b, dtype=np.float64), axis=-1)


def normalize(v):
    """Scale v to unit length.

    A zero vector has no direction; callers must catch the degenerate case
    first (numpy returns nan rather than raising).
    """
    v = np.asarray(v, dtype=np.float64)
    length = np.sqrt(np.sum(v * v, axis=-1, keepdims=True))
    return v / length


def magnitude2(a, b):
    """Length of the 2-D vector (a, b)."""
    return np.sqrt(a * a + b * b)


def rotate_z(v, cos_phi, sin_phi):
    """Rotate points about the z axis.  z passes through untouched."""
    v = np.asarray(v, dtype=np.float64)
    out = np.empty_like(v)
    out[..., 0] = cos_phi * v[..., 0] - sin_phi * v[..., 1]
    out[..., 1] = sin_phi * v[..., 0] + cos_phi * v[..., 1]
    out[..., 2] = v[..., 2]
    return out
