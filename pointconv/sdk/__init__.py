"""High-level entry points driven by pipeline configuration."""

from .run import convert_from_config, fuse_from_config

__all__ = ["convert_from_config", "fuse_from_config"]
