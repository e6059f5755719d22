from __future__ import annotations
import dataclasses
from typing import Any, Callable, Dict, List, Tuple, Type, TypeVar, overload

from .color import (
    rgb_to_intensity, rgb_to_intensity8u, rgb_to_intensity32u, xyzrgb_to_xyzi,
    xyzrgb_to_xyzhsv, xyzrgba_to_xyzhsv, xyzhsv_to_xyzrgb,
)
from .point_types import (
    RGB, Intensity, Intensity8u, Intensity32u,
    PointXYZI, PointXYZRGB, PointXYZRGBA, PointXYZHSV,
)
from .utils import get_logger

_log = get_logger()

P = TypeVar("P")
Converter = Callable[[Any], Any]


class UnsupportedConversionError(TypeError):
    """No conversion is registered for the (input type, output type) pair."""

    def __init__(self, in_type: type, out_type: type) -> None:
        super().__init__(
            f"No conversion registered from {in_type.__name__} to {out_type.__name__}"
        )
        self.in_type = in_type
        self.out_type = out_type


# (input record type, output record type) -> converter
_CONVERTERS: Dict[Tuple[type, type], Converter] = {}


def register_conversion(in_type: type, out_type: type) -> Callable[[Converter], Converter]:
    """Decorator registering `fn(in_record) -> out_record` for one exact type pair."""
    def deco(fn: Converter) -> Converter:
        if in_type is out_type:
            raise ValueError(f"{in_type.__name__} -> {out_type.__name__} is always an identity copy")
        key = (in_type, out_type)
        if key in _CONVERTERS:
            raise ValueError(f"Conversion {in_type.__name__} -> {out_type.__name__} already registered")
        _CONVERTERS[key] = fn
        _log.debug("Registered conversion %s -> %s", in_type.__name__, out_type.__name__)
        return fn
    return deco


def copy_point(point: P) -> P:
    return dataclasses.replace(point)


def get_converter(in_type: type, out_type: type) -> Converter:
    """Resolve the converter for an exact type pair; subclasses do not match."""
    if in_type is out_type:
        return copy_point
    try:
        return _CONVERTERS[(in_type, out_type)]
    except KeyError:
        raise UnsupportedConversionError(in_type, out_type) from None


def supported_conversions() -> List[Tuple[type, type]]:
    return list(_CONVERTERS)


# Overloads let a static type checker reject unsupported pairs before runtime.
@overload
def convert_point(point: RGB, out_type: Type[Intensity]) -> Intensity: ...
@overload
def convert_point(point: RGB, out_type: Type[Intensity8u]) -> Intensity8u: ...
@overload
def convert_point(point: RGB, out_type: Type[Intensity32u]) -> Intensity32u: ...
@overload
def convert_point(point: PointXYZRGB, out_type: Type[PointXYZI]) -> PointXYZI: ...
@overload
def convert_point(point: PointXYZRGB, out_type: Type[PointXYZHSV]) -> PointXYZHSV: ...
@overload
def convert_point(point: PointXYZRGBA, out_type: Type[PointXYZHSV]) -> PointXYZHSV: ...
@overload
def convert_point(point: PointXYZHSV, out_type: Type[PointXYZRGB]) -> PointXYZRGB: ...
@overload
def convert_point(point: P, out_type: Type[P]) -> P: ...

def convert_point(point: Any, out_type: type) -> Any:
    """Convert one record to `out_type`, selected by the exact (input, output) types."""
    return get_converter(type(point), out_type)(point)


register_conversion(RGB, Intensity)(rgb_to_intensity)
register_conversion(RGB, Intensity8u)(rgb_to_intensity8u)
register_conversion(RGB, Intensity32u)(rgb_to_intensity32u)
register_conversion(PointXYZRGB, PointXYZI)(xyzrgb_to_xyzi)
register_conversion(PointXYZRGB, PointXYZHSV)(xyzrgb_to_xyzhsv)
register_conversion(PointXYZRGBA, PointXYZHSV)(xyzrgba_to_xyzhsv)
register_conversion(PointXYZHSV, PointXYZRGB)(xyzhsv_to_xyzrgb)
