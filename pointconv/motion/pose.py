from __future__ import annotations
from dataclasses import dataclass
import numpy as np

@dataclass
class Pose:
    """Sensor acquisition pose: origin `t` and orientation `R` in the cloud frame."""
    t: np.ndarray   # (3,)
    R: np.ndarray   # (3,3)

    def __post_init__(self) -> None:
        self.t = np.asarray(self.t, dtype=np.float64).reshape(3)
        self.R = np.asarray(self.R, dtype=np.float64).reshape(3, 3)
        if not np.allclose(self.R @ self.R.T, np.eye(3), atol=1e-6):
            raise ValueError("Pose orientation must be a rotation matrix")

    @staticmethod
    def identity() -> "Pose":
        return Pose(t=np.zeros(3), R=np.eye(3))

    @staticmethod
    def from_xyz_rpy(xyz: tuple[float,float,float], rpy_deg: tuple[float,float,float]) -> "Pose":
        rx, ry, rz = np.deg2rad(rpy_deg)
        cx, sx = np.cos(rx), np.sin(rx)
        cy, sy = np.cos(ry), np.sin(ry)
        cz, sz = np.cos(rz), np.sin(rz)
        Rx = np.array([[1,0,0],[0,cx,-sx],[0,sx,cx]])
        Ry = np.array([[cy,0,sy],[0,1,0],[-sy,0,cy]])
        Rz = np.array([[cz,-sz,0],[sz,cz,0],[0,0,1]])
        return Pose(t=np.array(xyz, dtype=float), R=Rz @ Ry @ Rx)
