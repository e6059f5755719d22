"""pointconv – point-attribute conversion for structured point clouds.

This package contains:
- Point record types (core.point_types) and the PointCloud container (core.pointcloud)
- Single-precision colour formulas: RGB -> intensity, RGB <-> HSV (core.color)
- A registry that selects a conversion from the exact (input, output) record
  types and rejects unsupported pairs (core.dispatch)
- Whole-cloud conversion with metadata propagation (core.conversion)
- Depth + colour image back-projection to XYZRGBA points (core.depth)
- YAML/pydantic pipeline configuration (config) and config-driven entry points (sdk)
"""

from .core.point_types import (
    RGB, Intensity, Intensity8u, Intensity32u,
    PointXYZI, PointXYZRGB, PointXYZRGBA, PointXYZHSV,
    POINT_TYPES, point_type_by_name,
)
from .core.pointcloud import PointCloud
from .core.color import rgb_to_hsv, hsv_to_rgb
from .core.dispatch import (
    UnsupportedConversionError, convert_point, get_converter,
    register_conversion, supported_conversions,
)
from .core.conversion import convert_point_cloud
from .core.depth import depth_and_rgb_to_xyzrgba
from .motion.pose import Pose
