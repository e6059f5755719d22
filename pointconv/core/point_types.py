from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Type

_U8_MAX = 255
_U32_MAX = 2**32 - 1


def _check_channels(rec: object, names: tuple[str, ...]) -> None:
    for name in names:
        value = getattr(rec, name)
        if not 0 <= value <= _U8_MAX:
            raise ValueError(f"{type(rec).__name__}.{name}={value} outside [0, 255]")


@dataclass
class RGB:
    """Colour-only record; channels in [0, 255]."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        _check_channels(self, ("r", "g", "b", "a"))


@dataclass
class Intensity:
    intensity: float = 0.0


@dataclass
class Intensity8u:
    intensity: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.intensity <= _U8_MAX:
            raise ValueError(f"Intensity8u value {self.intensity} outside [0, 255]")


@dataclass
class Intensity32u:
    intensity: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.intensity <= _U32_MAX:
            raise ValueError(f"Intensity32u value {self.intensity} outside [0, 2**32 - 1]")


@dataclass
class PointXYZI:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    intensity: float = 0.0


@dataclass
class PointXYZRGB:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channels(self, ("r", "g", "b"))


@dataclass
class PointXYZRGBA:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        _check_channels(self, ("r", "g", "b", "a"))


@dataclass
class PointXYZHSV:
    """Position plus hue in degrees [0, 360), saturation and value in [0, 1]."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    h: float = 0.0
    s: float = 0.0
    v: float = 0.0


POINT_TYPES: Dict[str, Type] = {
    "rgb": RGB,
    "intensity": Intensity,
    "intensity8u": Intensity8u,
    "intensity32u": Intensity32u,
    "xyzi": PointXYZI,
    "xyzrgb": PointXYZRGB,
    "xyzrgba": PointXYZRGBA,
    "xyzhsv": PointXYZHSV,
}


def point_type_by_name(name: str) -> Type:
    try:
        return POINT_TYPES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown point type '{name}' (expected one of {sorted(POINT_TYPES)})") from None


def has_position(point_type: Type) -> bool:
    fields = getattr(point_type, "__dataclass_fields__", {})
    return all(k in fields for k in ("x", "y", "z"))
