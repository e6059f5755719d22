from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, field_validator, model_validator

from ..core.point_types import POINT_TYPES
from ..core.utils import inverse_focal

PointTypeName = Literal[
    "rgb", "intensity", "intensity8u", "intensity32u",
    "xyzi", "xyzrgb", "xyzrgba", "xyzhsv",
]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SensorPoseConfig(BaseModel):
    xyz: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rpy_deg: tuple[float, float, float] = (0.0, 0.0, 0.0)


class ConversionConfig(BaseModel):
    target: PointTypeName


class DepthFusionConfig(BaseModel):
    focal_px: float
    update_density: bool = True
    sensor: Optional[SensorPoseConfig] = None

    @field_validator("focal_px")
    @classmethod
    def _focal_nonzero(cls, value: float) -> float:
        inverse_focal(value)
        return value


class PipelineConfig(BaseModel):
    conversion: Optional[ConversionConfig] = None
    fusion: Optional[DepthFusionConfig] = None
    log_level: LogLevel = "INFO"

    @model_validator(mode="after")
    def _require_step(self) -> "PipelineConfig":
        if self.conversion is None and self.fusion is None:
            raise ValueError("Pipeline needs a 'conversion' or 'fusion' section")
        return self

    def target_type(self) -> type:
        if self.conversion is None:
            raise ValueError("Pipeline has no 'conversion' section")
        return POINT_TYPES[self.conversion.target]


def load_config(path: str | Path) -> PipelineConfig:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError("Configuration root must be a mapping.")
    return PipelineConfig.model_validate(data)
