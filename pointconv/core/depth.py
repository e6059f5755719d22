from __future__ import annotations
import math
from typing import Optional

from .point_types import RGB, Intensity, PointXYZRGBA
from .pointcloud import PointCloud
from .utils import f32, get_logger, inverse_focal

_log = get_logger()

DEPTH_SCALE_M = f32(0.001)   # raw depth is in millimetres
_NAN = float("nan")


def depth_and_rgb_to_xyzrgba(
    depth: PointCloud[Intensity],
    image: PointCloud[RGB],
    focal: float,
    out: Optional[PointCloud[PointXYZRGBA]] = None,
    update_density: bool = True,
) -> PointCloud[PointXYZRGBA]:
    """Back-project a registered depth image and colour image into XYZRGBA points.

    Pinhole model with the principal point at pixel (0, 0):
    ``z = depth * 0.001``, ``x = u * z / focal``, ``y = v * z / focal``.
    Zero depth marks an unmeasured pixel and yields a NaN position.
    Colour is copied from `image` at the same pixel; alpha is 0.

    The result is a fresh cloud sized by `depth` (a supplied `out` is
    cleared first). With `update_density`, `is_dense` is set to whether no
    NaN position was produced; otherwise it is left to the caller.
    """
    if depth.point_type is not Intensity:
        raise TypeError(f"depth must be a PointCloud[Intensity], got {depth.point_type.__name__}")
    if image.point_type is not RGB:
        raise TypeError(f"image must be a PointCloud[RGB], got {image.point_type.__name__}")
    width, height = depth.width, depth.height
    if (image.width, image.height) != (width, height):
        raise ValueError(
            f"Depth ({width}x{height}) and image ({image.width}x{image.height}) sizes differ"
        )
    if len(depth) != width * height or len(image) != width * height:
        raise ValueError(f"Depth/image point counts do not match {width}x{height}")
    inv_focal = inverse_focal(focal)

    if out is None:
        out = PointCloud(PointXYZRGBA)
    out.clear()

    invalid = 0
    for v in range(height):
        for u in range(width):
            raw = f32(depth.at(u, v).intensity)
            px = image.at(u, v)
            if raw == 0:
                x = y = z = _NAN
                invalid += 1
            else:
                z32 = raw * DEPTH_SCALE_M
                x = float(f32(u) * z32 * inv_focal)
                y = float(f32(v) * z32 * inv_focal)
                z = float(z32)
                if math.isnan(x) or math.isnan(y) or math.isnan(z):
                    invalid += 1
            out.append(PointXYZRGBA(x=x, y=y, z=z, r=px.r, g=px.g, b=px.b, a=0))

    out.width = width
    out.height = height
    if update_density:
        out.is_dense = invalid == 0
    _log.debug("Fused %dx%d depth image (%d invalid pixels)", width, height, invalid)
    return out
