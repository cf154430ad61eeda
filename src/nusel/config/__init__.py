"""nusel configuration loading system.

This package provides a small YAML configuration loader with:
- Hierarchical file includes with cycle detection
- Deep merging of the including file over the included ones
- Typed exceptions for every failure mode

Main Entry Point
----------------
load_config_file : Load a nusel configuration file
"""

from .errors import (
    ConfigCycleError,
    ConfigError,
    ConfigIncludeError,
    ConfigPathError,
    ConfigValidationError,
)
from .load import load_config, load_config_file

__all__ = [
    "load_config",
    "load_config_file",
    "ConfigError",
    "ConfigIncludeError",
    "ConfigCycleError",
    "ConfigPathError",
    "ConfigValidationError",
]
