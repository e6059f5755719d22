from __future__ import annotations

from pathlib import Path
from typing import Union

from ..config import PipelineConfig, load_config
from ..core.conversion import convert_point_cloud
from ..core.depth import depth_and_rgb_to_xyzrgba
from ..core.point_types import RGB, Intensity, PointXYZRGBA
from ..core.pointcloud import PointCloud
from ..core.utils import get_logger
from ..motion.pose import Pose

_log = get_logger()

ConfigLike = Union[str, Path, PipelineConfig]


def _resolve(config: ConfigLike) -> PipelineConfig:
    cfg = config if isinstance(config, PipelineConfig) else load_config(config)
    _log.setLevel(cfg.log_level)
    return cfg


def convert_from_config(cloud: PointCloud, config: ConfigLike) -> PointCloud:
    """Convert `cloud` to the point type named in the config's ``conversion`` section.

    Parameters
    ----------
    cloud:
        Input cloud; left unmodified.
    config:
        Path to a YAML file or a pre-loaded :class:`~pointconv.config.schema.PipelineConfig`.

    Returns
    -------
    A new cloud of the target type carrying the input's metadata.
    """
    cfg = _resolve(config)
    target = cfg.target_type()
    out = convert_point_cloud(cloud, PointCloud(target))
    _log.info("Converted %d %s points to %s", len(out), cloud.point_type.__name__, target.__name__)
    return out


def fuse_from_config(
    depth: PointCloud[Intensity],
    image: PointCloud[RGB],
    config: ConfigLike,
) -> PointCloud[PointXYZRGBA]:
    """Fuse a depth and colour image using the config's ``fusion`` section.

    When the section carries a ``sensor`` pose it is written onto the result.
    """
    cfg = _resolve(config)
    if cfg.fusion is None:
        raise ValueError("Pipeline has no 'fusion' section")
    fusion = cfg.fusion
    out = depth_and_rgb_to_xyzrgba(depth, image, fusion.focal_px, update_density=fusion.update_density)
    if fusion.sensor is not None:
        out.sensor_pose = Pose.from_xyz_rpy(fusion.sensor.xyz, fusion.sensor.rpy_deg)
    _log.info("Fused %dx%d depth image (dense=%s)", out.width, out.height, out.is_dense)
    return out
