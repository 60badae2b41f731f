from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime options of an indexing run, their defaults, and the
optional JSON configuration file that can pre-seed them.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from autoindexer.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
INDEX_FILE_NAME = "index.html"

# Entry names never listed nor recursed into (generated artifacts)
DEFAULT_SKIP_LIST: Tuple[str, ...] = (INDEX_FILE_NAME,)

# -----------------------------------------------------------------------------
# Options Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexOptions:
    """
    Immutable options for a single indexing run.

    Attributes:
        root_fs_path: Directory to start indexing from.
        base_url: Prefix for every generated hyperlink.
        custom_style: Inline CSS replacing the default stylesheet.
        skip_list: Entry names excluded from scanning and listing.
    """
    root_fs_path: str
    base_url: str
    custom_style: Optional[str] = None
    skip_list: Tuple[str, ...] = DEFAULT_SKIP_LIST


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root_fs_path": os.getcwd(),
        "base_url": "",
        "style_path": "",
        "skip_list": list(DEFAULT_SKIP_LIST),
        "log_level": "INFO",
        "log_file": "",
    }


def get_config_path() -> str:
    """Return the default location of the persistent configuration file."""
    return os.path.join(get_user_data_dir(create=False), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file and merge it over the defaults.

    A missing file yields the defaults. A corrupt file is reported and
    ignored. Unknown keys are dropped.

    Args:
        path: Optional explicit config file. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    return config
