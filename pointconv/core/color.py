"""Per-record colour formulas.

All arithmetic runs in single precision so results match the reference
float32 formulas bit-for-bit, including two known quirks that callers rely on:

* the luma weights are applied to raw 0..255 channels, so the float
  intensity lives in [0, 255] rather than [0, 1];
* the 8-bit and 32-bit intensity variants scale only the red term by the
  target type's maximum before narrowing.

Conventions: h in degrees [0, 360), s and v in [0, 1]. Undefined hue
(s == 0) is reported as 0.
"""
from __future__ import annotations
from typing import Tuple

import numpy as np

from .point_types import (
    RGB, Intensity, Intensity8u, Intensity32u,
    PointXYZI, PointXYZRGB, PointXYZRGBA, PointXYZHSV,
)
from .utils import f32, truncate_uint

_W_R = f32(0.299)
_W_G = f32(0.587)
_W_B = f32(0.114)
_U8_MAX = f32(255)
_U32_MAX = f32(2**32 - 1)   # rounds to 2**32 in single precision


def _luma(r: int, g: int, b: int, red_scale: np.float32 = f32(1)) -> np.float32:
    return red_scale * _W_R * f32(r) + _W_G * f32(g) + _W_B * f32(b)


def rgb_to_intensity(p: RGB) -> Intensity:
    return Intensity(intensity=float(_luma(p.r, p.g, p.b)))


def rgb_to_intensity8u(p: RGB) -> Intensity8u:
    return Intensity8u(intensity=truncate_uint(_luma(p.r, p.g, p.b, _U8_MAX), 8))


def rgb_to_intensity32u(p: RGB) -> Intensity32u:
    return Intensity32u(intensity=truncate_uint(_luma(p.r, p.g, p.b, _U32_MAX), 32))


def xyzrgb_to_xyzi(p: PointXYZRGB) -> PointXYZI:
    return PointXYZI(x=p.x, y=p.y, z=p.z, intensity=float(_luma(p.r, p.g, p.b)))


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Return (h, s, v) for 8-bit channels."""
    # plain ints: channel differences must go negative, not wrap
    r, g, b = int(r), int(g), int(b)
    hi = max(r, g, b)
    lo = min(r, g, b)
    v = f32(hi) / _U8_MAX
    if hi == 0:
        return 0.0, 0.0, float(v)

    diff = f32(hi - lo)
    s = diff / f32(hi)
    if hi == lo:
        return 0.0, float(s), float(v)

    if hi == r:
        h = f32(60) * (f32(g - b) / diff)
    elif hi == g:
        h = f32(60) * (f32(2) + f32(b - r) / diff)
    else:
        h = f32(60) * (f32(4) + f32(r - g) / diff)
    if h < 0:
        h = h + f32(360)
    return float(h), float(s), float(v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Return 8-bit (r, g, b); each channel is 255 * component truncated.

    Raises `ValueError` for a NaN or infinite component.
    """
    h, s, v = f32(h), f32(s), f32(v)
    if not (np.isfinite(h) and np.isfinite(s) and np.isfinite(v)):
        raise ValueError(f"HSV components must be finite, got ({h}, {s}, {v})")
    if s == 0:
        grey = truncate_uint(_U8_MAX * v, 8)
        return grey, grey, grey

    a = h / f32(60)
    sector = int(np.floor(a))
    frac = a - f32(sector)
    p = v * (f32(1) - s)
    q = v * (f32(1) - s * frac)
    t = v * (f32(1) - s * (f32(1) - frac))

    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    r, g, b = (truncate_uint(_U8_MAX * c, 8) for c in rgb)
    return r, g, b


def xyzrgb_to_xyzhsv(p: PointXYZRGB) -> PointXYZHSV:
    h, s, v = rgb_to_hsv(p.r, p.g, p.b)
    return PointXYZHSV(x=p.x, y=p.y, z=p.z, h=h, s=s, v=v)


def xyzrgba_to_xyzhsv(p: PointXYZRGBA) -> PointXYZHSV:
    # alpha has no HSV counterpart and is dropped
    h, s, v = rgb_to_hsv(p.r, p.g, p.b)
    return PointXYZHSV(x=p.x, y=p.y, z=p.z, h=h, s=s, v=v)


def xyzhsv_to_xyzrgb(p: PointXYZHSV) -> PointXYZRGB:
    r, g, b = hsv_to_rgb(p.h, p.s, p.v)
    return PointXYZRGB(x=p.x, y=p.y, z=p.z, r=r, g=g, b=b)
