"""Parametric surfaces for the rasterizer.

A surface is any object with two methods:

    position(u, v, strip_index) -> (..., 3) array of points
    normal(points, strip_index) -> (..., 3) array of unit normals

u and v are numpy arrays (or floats) in [-1, 1) that broadcast together.
strip_index picks one of the interleaved copies drawn each frame; surfaces
that do not interleave ignore it.  Position and normal always travel
together: never mix the position of one surface with the normal of another.
"""

import math
from typing import Callable, NamedTuple

import numpy as np

from ._common import NUM_SURFACES, TORUS_MAJOR, TORUS_MINOR, WIDTH_SCALE
from .vecmath import magnitude2, normalize


def _stack(x, y, z):
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1).astype(np.float64)


class TwistedStrip:
    """Ribbon twisted once around the z axis, drawn as interleaved strips.

    Each strip sweeps an angular band of width pi/num_surfaces; strip i is
    rotated by 2*i of those bands.  The radius pinches to zero at v = -1,
    where the normal is undefined and reported as the zero vector.
    """

    def __init__(self, width_scale=WIDTH_SCALE, num_surfaces=NUM_SURFACES):
        self.width_scale = width_scale
        self.num_surfaces = num_surfaces

    def __repr__(self):
        return f"TwistedStrip(width_scale={self.width_scale}, num_surfaces={self.num_surfaces})"

    def position(self, u, v, strip_index):
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        strip_width = math.pi / self.num_surfaces
        alpha = 2.0 * strip_width * strip_index
        r = self.width_scale * (np.cos(math.pi * v) + 1.0) / 2.0
        theta = 2.0 * math.pi * v + strip_width * u / 2.0 + alpha
        return _stack(r * np.cos(theta), r * np.sin(theta), v)

    def normal(self, points, strip_index):
        points = np.asarray(points, dtype=np.float64)
        x = points[..., 0]
        y = points[..., 1]
        z = points[..., 2]

        pole = (x == 0) & (y == 0)
        slope = self.width_scale * math.pi / 2.0 * np.sin(math.pi * z)
        n = _stack(x, y, magnitude2(x, y) * slope)

        # Give the pole a harmless direction, then zero it after normalizing
        n[pole] = (0.0, 0.0, 1.0)
        n = normalize(n)
        n[pole] = 0.0
        return n


class Torus:
    """Ring around the x axis: central circle of radius `major` in the y-z
    plane, tube radius `minor`.  The strip index is ignored."""

    def __init__(self, major=TORUS_MAJOR, minor=TORUS_MINOR):
        self.major = major
        self.minor = minor

    def __repr__(self):
        return f"Torus(major={self.major}, minor={self.minor})"

    def position(self, u, v, strip_index):
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        r = self.major + self.minor * np.cos(math.pi * v)
        theta = math.pi * u
        return _stack(self.minor * np.sin(math.pi * v), r * np.cos(theta), r * np.sin(theta))

    def normal(self, points, strip_index):
        points = np.asarray(points, dtype=np.float64)
        y = points[..., 1]
        z = points[..., 2]
        # Nearest point on the central circle lies at the same angle
        t = np.arctan2(z, y)
        offset = _stack(
            points[..., 0],
            y - self.major * np.cos(t),
            z - self.major * np.sin(t),
        )
        return normalize(offset)


class SurfacePair(NamedTuple):
    """Adapter for a surface given as two plain functions."""

    position_fn: Callable
    normal_fn: Callable

    def position(self, u, v, strip_index):
        return np.asarray(self.position_fn(u, v, strip_index), dtype=np.float64)

    def normal(self, points, strip_index):
        return np.asarray(self.normal_fn(points, strip_index), dtype=np.float64)


# ---------------------------------------------------------------------------
# Surface registry
# ---------------------------------------------------------------------------

SURFACES = {
    "strip": lambda config: TwistedStrip(config.width_scale, config.num_surfaces),
    "torus": lambda config: Torus(config.torus_major, config.torus_minor),
}


def make_surface(name, config):
    """Build a registered surface with the dimensions from `config`."""
    try:
        factory = SURFACES[name]
    except KeyError:
        raise KeyError(
            f"Unknown surface '{name}' (choose from: {', '.join(sorted(SURFACES))})"
        ) from None
    return factory(config)
