from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the per-user data directory used for the
persistent configuration and log files.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "autoindexer"
UNIX_APP_DIR_NAME = ".autoindexer"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/autoindexer
    - Linux/Mac: ~/.autoindexer

    Args:
        create: Create the directory hierarchy when missing.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            # Persistence is optional on read-only homes
            pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables ($VAR/%VAR%) and the user home shortcut.
    Reverts to the fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file, propagating any OSError."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
