import pytest

from pointconv.core import dispatch
from pointconv.core.dispatch import (
    UnsupportedConversionError,
    convert_point,
    get_converter,
    register_conversion,
    supported_conversions,
)
from pointconv.core.point_types import (
    RGB,
    Intensity,
    Intensity8u,
    Intensity32u,
    PointXYZHSV,
    PointXYZI,
    PointXYZRGB,
    PointXYZRGBA,
)


def test_supported_pairs_are_registered() -> None:
    assert set(supported_conversions()) == {
        (RGB, Intensity),
        (RGB, Intensity8u),
        (RGB, Intensity32u),
        (PointXYZRGB, PointXYZI),
        (PointXYZRGB, PointXYZHSV),
        (PointXYZRGBA, PointXYZHSV),
        (PointXYZHSV, PointXYZRGB),
    }


def test_convert_point_selects_by_output_type() -> None:
    src = RGB(1, 0, 0)
    assert isinstance(convert_point(src, Intensity), Intensity)
    assert convert_point(src, Intensity8u).intensity == 76
    assert isinstance(convert_point(src, Intensity32u), Intensity32u)


def test_identity_conversion_copies() -> None:
    src = PointXYZHSV(1.0, 2.0, 3.0, 90.0, 0.25, 0.75)
    out = convert_point(src, PointXYZHSV)
    assert out == src
    assert out is not src


def test_unsupported_pair_raises() -> None:
    with pytest.raises(UnsupportedConversionError) as exc:
        convert_point(PointXYZI(), PointXYZHSV)
    assert isinstance(exc.value, TypeError)
    assert exc.value.in_type is PointXYZI
    assert exc.value.out_type is PointXYZHSV


def test_subclasses_do_not_inherit_conversions() -> None:
    class TaggedRGB(RGB):
        pass

    with pytest.raises(UnsupportedConversionError):
        get_converter(TaggedRGB, Intensity)


def test_register_rejects_duplicates_and_identity() -> None:
    with pytest.raises(ValueError):
        register_conversion(RGB, Intensity)(lambda p: Intensity())
    with pytest.raises(ValueError):
        register_conversion(RGB, RGB)(lambda p: p)


def test_register_new_pair(monkeypatch) -> None:
    monkeypatch.setattr(dispatch, "_CONVERTERS", dict(dispatch._CONVERTERS))

    @register_conversion(PointXYZRGBA, PointXYZI)
    def _rgba_to_xyzi(p: PointXYZRGBA) -> PointXYZI:
        return PointXYZI(p.x, p.y, p.z, float(p.a))

    out = convert_point(PointXYZRGBA(1.0, 2.0, 3.0, a=9), PointXYZI)
    assert out == PointXYZI(1.0, 2.0, 3.0, 9.0)
    assert (PointXYZRGBA, PointXYZI) in supported_conversions()
