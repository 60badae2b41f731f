from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary coming from the CLI or the
config file conforms to the expected schema before an indexing run.
Handles type coercion, path normalization and default value injection.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from autoindexer.domain.config import IndexOptions, get_default_config
from autoindexer.infra.fs import normalize_path, read_text_file

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised in strict mode when a configuration field has the wrong type."""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Fills missing keys with domain defaults and coerces untrusted values.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise ConfigError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("root_fs_path", "base_url", "style_path", "log_level", "log_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["skip_list"] = _as_list_str(
        merged.get("skip_list"), defaults["skip_list"], "skip_list", warnings, strict
    )

    merged["root_fs_path"] = normalize_path(merged["root_fs_path"], os.getcwd())
    if merged["style_path"]:
        merged["style_path"] = normalize_path(merged["style_path"], "")

    return merged, warnings


def options_from_config(config: Dict[str, Any]) -> IndexOptions:
    """
    Build IndexOptions from a validated configuration dictionary.

    The custom stylesheet is read from `style_path` when one is configured.

    Raises:
        OSError: If the stylesheet file cannot be read.
    """
    custom_style = None
    if config.get("style_path"):
        custom_style = read_text_file(config["style_path"])

    return IndexOptions(
        root_fs_path=config["root_fs_path"],
        base_url=config["base_url"],
        custom_style=custom_style,
        skip_list=tuple(config["skip_list"]),
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(
        value: Any,
        fallback: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> List[str]:
    """Validate a list of strings, accepting a comma-separated string too."""
    if value is None:
        return list(fallback)
    if isinstance(value, str):
        return [x.strip() for x in value.split(",") if x.strip()]
    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for item in value:
            if isinstance(item, str) and item.strip():
                out.append(item.strip())
            elif not isinstance(item, str):
                msg = f"Invalid item in '{field}': expected str, received {type(item).__name__}."
                if strict:
                    raise ConfigError(msg)
                warnings.append(f"{msg} Item ignored.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)
