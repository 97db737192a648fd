"""Point-sampling rasterizer with a z-buffer and a fixed light.

The surface is swept over its (u, v) domain at a step far finer than a
pixel.  Every sample is rotated about z, pushed away from the camera along
+x, perspective projected onto the y-z plane and dropped into the nearest
pixel.  The depth buffer keeps the closest sample per pixel; only that
sample gets shaded.

Samples are processed a block of v-rows at a time with numpy.  Within a
block the nearest sample per pixel is picked with a stable sort, so the
result is the same as visiting samples one by one in (strip, v, u) order
and replacing a pixel only when the new depth is strictly smaller.
"""

import math
from typing import NamedTuple

import numpy as np

from ._common import DEFAULT_CONFIG, FAR_DEPTH
from .vecmath import dot, normalize, rotate_z

# v-rows per block; bounds memory to a few MB of float64 per array
BLOCK_ROWS = 200


class RasterResult(NamedTuple):
    brightness: np.ndarray
    depth: np.ndarray


def sample_axis(step):
    """Parameter values from -1 (inclusive) to 1 (exclusive)."""
    return np.arange(-1.0, 1.0, step)


def light_curve(cosine):
    """Map light/normal alignment to brightness.

    Lit faces land in [0.3, 1.0]; faces turned away keep a dim rim of
    0.1 - 0.4*cosine so the silhouette never vanishes on the display.
    """
    cosine = np.asarray(cosine, dtype=np.float64)
    return np.where(cosine > 0, 0.3 + 0.7 * cosine, 0.1 - 0.4 * cosine)


def transform(points, cos_phi, sin_phi, config=DEFAULT_CONFIG):
    """Rotate object-space points and move them in front of the camera.

    Returns camera-space points; their x component is the sample's depth.
    """
    translated = rotate_z(points, cos_phi, sin_phi)
    translated[..., 0] += config.camera_distance
    return translated


def project(translated, config=DEFAULT_CONFIG):
    """Perspective-project camera-space points to integer pixel coordinates.

    Returns (px, py).  Coordinates are truncated toward zero, so points just
    past the left or top edge still land in column or row 0.
    """
    scale = config.focal_length / translated[..., 0]
    sx = translated[..., 1] * scale
    sy = translated[..., 2] * scale
    px = ((sx / 2.0 + 0.5) * config.width).astype(np.int64)
    py = ((sy / 2.0 + 0.5) * config.height).astype(np.int64)
    return px, py


def shade(translated, normals, cos_phi, sin_phi, config=DEFAULT_CONFIG):
    """Brightness in [0, 1] for samples with object-space `normals`."""
    to_light = normalize(np.asarray(config.light, dtype=np.float64) - translated)
    rotated_normals = rotate_z(normals, cos_phi, sin_phi)
    return np.clip(light_curve(dot(to_light, rotated_normals)), 0.0, 1.0)


def _nearest_per_pixel(index, depth):
    """Positions of the nearest sample for each distinct pixel index.

    Ties go to the earliest sample: lexsort is stable, so equal
    (index, depth) keys keep their original order.
    """
    order = np.lexsort((depth, index))
    _, first = np.unique(index[order], return_index=True)
    return order[first]


def rasterize(angle, surface, config=DEFAULT_CONFIG):
    """Render one frame at rotation `angle`.

    Returns a RasterResult with the brightness and depth buffers, both of
    shape (height, width).  Pixels no sample reached keep brightness 0 and
    depth FAR_DEPTH.
    """
    size = config.width * config.height
    brightness = np.zeros(size, dtype=np.float64)
    depth = np.full(size, FAR_DEPTH, dtype=np.float64)

    cos_phi = math.cos(angle)
    sin_phi = math.sin(angle)
    us = sample_axis(config.step)
    vs = sample_axis(config.step)

    for strip in range(config.num_surfaces):
        for start in range(0, len(vs), BLOCK_ROWS):
            v, u = np.meshgrid(vs[start : start + BLOCK_ROWS], us, indexing="ij")
            points = surface.position(u, v, strip).reshape(-1, 3)

            translated = transform(points, cos_phi, sin_phi, config)
            px, py = project(translated, config)

            inside = (px >= 0) & (px < config.width) & (py >= 0) & (py < config.height)
            if not inside.any():
                continue
            points = points[inside]
            translated = translated[inside]
            index = py[inside] * config.width + px[inside]
            sample_depth = translated[:, 0]

            nearest = _nearest_per_pixel(index, sample_depth)
            # Strictly nearer than what earlier blocks left behind
            nearest = nearest[sample_depth[nearest] < depth[index[nearest]]]
            if nearest.size == 0:
                continue

            hit = index[nearest]
            depth[hit] = sample_depth[nearest]
            normals = surface.normal(points[nearest], strip)
            brightness[hit] = shade(translated[nearest], normals, cos_phi, sin_phi, config)

    shape = (config.height, config.width)
    return RasterResult(brightness.reshape(shape), depth.reshape(shape))


def render_frame(angle, surface, config=DEFAULT_CONFIG):
    """Brightness buffer for one rotation angle."""
    return rasterize(angle, surface, config).brightness
