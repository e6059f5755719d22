import numpy as np
import pytest

from pointconv.core.point_types import (
    RGB,
    Intensity8u,
    Intensity32u,
    PointXYZHSV,
    PointXYZRGB,
    point_type_by_name,
)
from pointconv.core.pointcloud import PointCloud
from pointconv.motion.pose import Pose


def test_records_reject_out_of_range_channels() -> None:
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        PointXYZRGB(0.0, 0.0, 0.0, -1, 0, 0)
    with pytest.raises(ValueError):
        Intensity8u(300)
    with pytest.raises(ValueError):
        Intensity32u(2**32)


def test_point_type_lookup() -> None:
    assert point_type_by_name("XYZHSV") is PointXYZHSV
    with pytest.raises(ValueError):
        point_type_by_name("xyzl")


def test_pointcloud_infers_unorganized_shape() -> None:
    cloud = PointCloud(RGB, points=[RGB(), RGB(), RGB()])
    assert (cloud.width, cloud.height) == (3, 1)
    assert not cloud.is_organized
    np.testing.assert_array_equal(cloud.sensor_origin, np.zeros(3))
    np.testing.assert_array_equal(cloud.sensor_orientation, np.eye(3))


def test_pointcloud_rejects_foreign_records() -> None:
    with pytest.raises(TypeError):
        PointCloud(RGB, points=[PointXYZRGB()])
    cloud = PointCloud(RGB)
    with pytest.raises(TypeError):
        cloud.append(Intensity8u())


def test_pointcloud_at_is_row_major_and_bounds_checked() -> None:
    pts = [RGB(i, 0, 0) for i in range(6)]
    cloud = PointCloud(RGB, points=pts, width=3, height=2)
    assert cloud.is_organized
    assert cloud.at(2, 1).r == 5
    assert cloud.at(0, 1).r == 3
    with pytest.raises(IndexError):
        cloud.at(3, 0)


def test_pointcloud_resize_pads_with_defaults() -> None:
    cloud = PointCloud(PointXYZHSV, points=[PointXYZHSV(h=10.0)])
    cloud.resize(3)
    assert len(cloud) == 3
    assert cloud[2] == PointXYZHSV()
    cloud.resize(1)
    assert cloud[0].h == 10.0


def test_pointcloud_xyz_requires_position() -> None:
    cloud = PointCloud(PointXYZRGB, points=[PointXYZRGB(1.0, 2.0, 3.0)])
    np.testing.assert_allclose(cloud.xyz(), [[1.0, 2.0, 3.0]])
    with pytest.raises(TypeError):
        PointCloud(RGB).xyz()


def test_sensor_pose_round_trip() -> None:
    pose = Pose.from_xyz_rpy((1.0, 2.0, 3.0), (0.0, 0.0, 90.0))
    cloud = PointCloud(RGB)
    cloud.sensor_pose = pose
    got = cloud.sensor_pose
    np.testing.assert_allclose(got.t, [1.0, 2.0, 3.0])
    np.testing.assert_allclose(got.R @ np.array([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)


def test_pose_rejects_non_rotation() -> None:
    with pytest.raises(ValueError):
        Pose(t=np.zeros(3), R=2.0 * np.eye(3))


def test_pointcloud_defaults_to_identity_sensor_pose() -> None:
    identity = Pose.identity()
    cloud = PointCloud(RGB)
    np.testing.assert_array_equal(cloud.sensor_pose.t, identity.t)
    np.testing.assert_array_equal(cloud.sensor_pose.R, identity.R)
    other = PointCloud(RGB)
    cloud.sensor_origin[0] = 4.0
    assert other.sensor_origin[0] == 0.0
