"""Path management utilities for flow-project-config library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import CONFIG_PATH_ENV, DEFAULT_CONFIG_FILENAME


def get_default_config_path() -> Path:
    """
    Get default project configuration path.

    Returns:
        Path to ./flow.json
    """
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def get_global_config_path() -> Path:
    """
    Get global user configuration path.

    Returns:
        Path to ~/flow.json
    """
    return Path.home() / DEFAULT_CONFIG_FILENAME


def resolve_config_path(path: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the configuration path to use.

    Args:
        path: Explicit path (defaults to $FLOW_CONFIG_PATH, then ./flow.json)

    Returns:
        Absolute path to the configuration file
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV) or None
    if path is None:
        return get_default_config_path()
    return Path(path).absolute()
