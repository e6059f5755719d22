from __future__ import annotations
from typing import TypeVar

from .dispatch import get_converter
from .pointcloud import PointCloud
from .utils import get_logger

_log = get_logger()

PIn = TypeVar("PIn")
POut = TypeVar("POut")


def convert_point_cloud(cloud_in: PointCloud[PIn], cloud_out: PointCloud[POut]) -> PointCloud[POut]:
    """Convert every record of `cloud_in` into `cloud_out`, index for index.

    Width, height, sensor origin/orientation and the density flag are copied
    onto `cloud_out`, whose records are replaced. The converter is resolved
    from the two clouds' point types before anything is written, so an
    unsupported pair raises `UnsupportedConversionError` and a cloud whose
    length differs from width x height raises `ValueError`. A converter
    returning a record other than `cloud_out.point_type` raises `TypeError`.
    All three leave `cloud_out` untouched.
    """
    convert = get_converter(cloud_in.point_type, cloud_out.point_type)
    n = cloud_in.width * cloud_in.height
    if len(cloud_in) != n:
        raise ValueError(
            f"Input cloud holds {len(cloud_in)} points but is declared "
            f"{cloud_in.width}x{cloud_in.height}"
        )
    converted = [convert(p) for p in cloud_in.points]
    for q in converted:
        cloud_out.check_point(q)

    cloud_out.width = cloud_in.width
    cloud_out.height = cloud_in.height
    cloud_out.sensor_origin = cloud_in.sensor_origin.copy()
    cloud_out.sensor_orientation = cloud_in.sensor_orientation.copy()
    cloud_out.is_dense = cloud_in.is_dense
    cloud_out.points = converted

    _log.debug(
        "Converted %d points %s -> %s",
        n, cloud_in.point_type.__name__, cloud_out.point_type.__name__,
    )
    return cloud_out
