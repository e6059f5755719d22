from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Type, TypeVar
import numpy as np

from ..motion.pose import Pose
from .point_types import has_position

P = TypeVar("P")


@dataclass
class PointCloud(Generic[P]):
    """Ordered collection of records of a single `point_type` plus sensor metadata.

    `width` x `height` describe the row-major organisation (height 1 means
    unorganized). `is_dense` is True iff no record holds a NaN position.
    """
    point_type: Type[P]
    points: List[P] = field(default_factory=list)
    width: int = 0
    height: int = 1
    is_dense: bool = True
    sensor_origin: np.ndarray = field(default_factory=lambda: Pose.identity().t)           # (3,)
    sensor_orientation: np.ndarray = field(default_factory=lambda: Pose.identity().R)        # (3,3)

    def __post_init__(self) -> None:
        self.points = list(self.points)
        for p in self.points:
            self.check_point(p)
        if self.width == 0 and self.points:
            self.width, self.height = len(self.points), 1
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        self.sensor_origin = np.asarray(self.sensor_origin, dtype=np.float64).reshape(3)
        self.sensor_orientation = np.asarray(self.sensor_orientation, dtype=np.float64).reshape(3, 3)

    def check_point(self, p: object) -> None:
        """Raise `TypeError` unless `p` is exactly this cloud's point type."""
        if type(p) is not self.point_type:
            raise TypeError(
                f"PointCloud[{self.point_type.__name__}] cannot hold {type(p).__name__}"
            )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[P]:
        return iter(self.points)

    def __getitem__(self, index: int) -> P:
        return self.points[index]

    @property
    def is_organized(self) -> bool:
        return self.height > 1

    def at(self, u: int, v: int) -> P:
        """Record at column `u`, row `v`."""
        if not (0 <= u < self.width and 0 <= v < self.height):
            raise IndexError(f"pixel ({u}, {v}) outside {self.width}x{self.height} cloud")
        return self.points[v * self.width + u]

    def append(self, p: P) -> None:
        self.check_point(p)
        self.points.append(p)

    def resize(self, n: int) -> None:
        if n < len(self.points):
            del self.points[n:]
        else:
            self.points.extend(self.point_type() for _ in range(n - len(self.points)))

    def clear(self) -> None:
        self.points.clear()
        self.width, self.height = 0, 1

    def xyz(self) -> np.ndarray:
        if not has_position(self.point_type):
            raise TypeError(f"{self.point_type.__name__} records carry no position")
        if not self.points:
            return np.zeros((0, 3), dtype=np.float32)
        return np.array([(p.x, p.y, p.z) for p in self.points], dtype=np.float32)

    @property
    def sensor_pose(self) -> Pose:
        return Pose(t=self.sensor_origin.copy(), R=self.sensor_orientation.copy())

    @sensor_pose.setter
    def sensor_pose(self, pose: Pose) -> None:
        self.sensor_origin = np.array(pose.t, dtype=np.float64).reshape(3)
        self.sensor_orientation = np.array(pose.R, dtype=np.float64).reshape(3, 3)
