"""Configuration management for SVCS."""

from .types import CommitIdScheme, SvcsConfig, VcsPaths
from .loader import ConfigLoader

__all__ = [
    "CommitIdScheme",
    "SvcsConfig",
    "VcsPaths",
    "ConfigLoader",
]
