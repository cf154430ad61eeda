"""Main configuration loading functions for nusel.

This module provides the entry points for loading configurations:
- load_config(): Load from a YAML string
- load_config_file(): Load from a file path

A configuration may pull in other files through a top-level `include` key,
given as a single path or as a list of paths relative to the including file:

.. code-block:: yaml

    include: base.yaml

    ana:
      selection_1muNp:
        beam: bnb

Included files are merged in order, then the including file is merged on top.
"""

import os
from copy import deepcopy
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigCycleError, ConfigIncludeError, ConfigPathError

__all__ = ["load_config", "load_config_file", "deep_merge"]

# Name of the include directive
INCLUDE_KEY = "include"


def deep_merge(
    base_dict: Dict[str, Any], override_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Recursively merge override_dict into base_dict.

    Parameters
    ----------
    base_dict : Dict[str, Any]
        Base dictionary
    override_dict : Dict[str, Any]
        Override dictionary

    Returns
    -------
    Dict[str, Any]
        Merged dictionary (new copy)
    """
    result = deepcopy(base_dict)

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def resolve_config_path(filename: str, current_dir: str) -> str:
    """Resolve a configuration file path.

    Resolution order:
    1. If absolute path, return as-is
    2. Try relative to current_dir
    3. Try relative to current_dir with .yaml/.yml extension

    Parameters
    ----------
    filename : str
        Config filename or path to resolve
    current_dir : str
        Directory of the config file doing the including

    Returns
    -------
    str
        Resolved absolute path

    Raises
    ------
    ConfigPathError
        If file cannot be found in any location
    """
    if os.path.isabs(filename):
        if os.path.exists(filename):
            return filename
        raise ConfigPathError(f"Absolute path not found: {filename}")

    relative_path = os.path.join(current_dir, filename)
    if os.path.exists(relative_path):
        return os.path.abspath(relative_path)

    for ext in (".yaml", ".yml"):
        if not filename.endswith(ext) and os.path.exists(relative_path + ext):
            return os.path.abspath(relative_path + ext)

    raise ConfigPathError(
        f"Configuration file not found: {filename} (searched in {current_dir})"
    )


def _load_config_recursive(
    cfg_path: Optional[str] = None,
    config_string: Optional[str] = None,
    root_dir: Optional[str] = None,
    include_stack: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Recursively load config with cycle detection.

    Parameters
    ----------
    cfg_path : Optional[str]
        Path to configuration file (mutually exclusive with config_string)
    config_string : Optional[str]
        YAML configuration string (mutually exclusive with cfg_path)
    root_dir : Optional[str]
        Root directory for resolving relative include paths.
        Defaults to directory of cfg_path when loading from file.
    include_stack : Optional[List[str]]
        Stack of currently-loading files (for cycle detection)

    Returns
    -------
    Dict[str, Any]
        Configuration content, with all includes merged in
    """
    if (cfg_path is None) == (config_string is None):
        raise ValueError("Must provide exactly one of cfg_path or config_string")

    # Determine the identifier for cycle detection and root directory
    if cfg_path is not None:
        cfg_path = os.path.abspath(cfg_path)
        identifier = cfg_path
        if root_dir is None:
            root_dir = os.path.dirname(cfg_path)
    else:
        identifier = "<string>"
        if root_dir is None:
            root_dir = os.getcwd()

    include_stack = include_stack or []
    if identifier in include_stack:
        raise ConfigCycleError(include_stack + [identifier])
    include_stack = include_stack + [identifier]

    # Load YAML
    try:
        if cfg_path is not None:
            with open(cfg_path, "r", encoding="utf-8") as cfg_file:
                main_config = yaml.safe_load(cfg_file)
        else:
            main_config = yaml.safe_load(config_string)
    except FileNotFoundError as exc:
        raise ConfigIncludeError(f"Configuration file not found: {cfg_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigIncludeError(f"Error loading {identifier}: {exc}") from exc

    if main_config is None:
        return {}
    if not isinstance(main_config, dict):
        raise ConfigIncludeError(
            f"The top level of {identifier} must be a mapping, "
            f"got {type(main_config).__name__}."
        )

    # Load the includes, in order
    includes = main_config.pop(INCLUDE_KEY, [])
    if isinstance(includes, str):
        includes = [includes]

    config = {}
    for include_file in includes:
        include_path = resolve_config_path(include_file, root_dir)
        included = _load_config_recursive(
            cfg_path=include_path, include_stack=include_stack
        )
        config = deep_merge(config, included)

    return deep_merge(config, main_config)


def load_config(config_str: str, root_dir: Optional[str] = None) -> Dict[str, Any]:
    """Load a nusel configuration from a YAML string.

    Parameters
    ----------
    config_str : str
        YAML configuration string
    root_dir : Optional[str]
        Root directory for resolving relative include paths. If not provided,
        defaults to current working directory.

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration

    Raises
    ------
    ConfigCycleError
        If circular include detected
    ConfigIncludeError
        If the YAML cannot be parsed
    ConfigPathError
        If an included file cannot be found
    """
    return _load_config_recursive(config_string=config_str, root_dir=root_dir)


def load_config_file(cfg_path: str) -> Dict[str, Any]:
    """Load a nusel configuration file.

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration
    """
    return _load_config_recursive(cfg_path=cfg_path)
