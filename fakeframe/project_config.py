from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from fakeframe.python_libs.common.exceptions import ConfigurationError, ErrorContext

PROJECT_CONFIG_ENV_VAR = "FAKEFRAME_CONFIG"
PROJECT_CONFIG_FILE_NAME = "fakeframe.yml"


def load_project_config(config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Load project configuration from YAML.

    The search order is:
    1. The ``config_dir`` parameter if provided.
    2. The path specified in the ``FAKEFRAME_CONFIG`` environment variable.
    3. ``fakeframe.yml`` in the current working directory.
    Returns an empty dictionary if no configuration file is found.
    """
    search_paths = []
    if config_dir:
        search_paths.append(Path(config_dir))
    env_path = os.getenv(PROJECT_CONFIG_ENV_VAR)
    if env_path:
        search_paths.append(Path(env_path))
    search_paths.append(Path.cwd())

    for path in search_paths:
        config_file = path
        if config_file.is_dir():
            config_file = config_file / PROJECT_CONFIG_FILE_NAME
        if config_file.is_file():
            try:
                with config_file.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Could not parse project config: {e}",
                    ErrorContext(file_path=str(config_file)),
                ) from e
            if not isinstance(data, dict):
                raise ConfigurationError(
                    "Project config must be a mapping", ErrorContext(file_path=str(config_file))
                )
            return data
    return {}
