"""Configuration loading utilities for pointconv."""

from .schema import (
    ConversionConfig,
    DepthFusionConfig,
    PipelineConfig,
    SensorPoseConfig,
    load_config,
)

__all__ = [
    "ConversionConfig",
    "DepthFusionConfig",
    "PipelineConfig",
    "SensorPoseConfig",
    "load_config",
]
