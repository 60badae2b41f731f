from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample directory trees used across test suites.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

# Fixed timestamps (UTC): 2023-11-14 22:13:20 and 2000-02-29 00:00:00
FILE_MTIME = 1700000000
DIR_MTIME = 951782400


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small directory tree with fixed modification times.

    Structure:
    /site
      readme.txt        (1023 bytes)
      .hidden           (skipped)
      index.html        (stale artifact, skipped)
      /docs
        guide.pdf       (1024 bytes)
        /.git           (skipped)
    """
    root = tmp_path / "site"
    root.mkdir()

    (root / "readme.txt").write_bytes(b"x" * 1023)
    (root / ".hidden").write_text("secret", encoding="utf-8")
    (root / "index.html").write_text("stale", encoding="utf-8")

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.pdf").write_bytes(b"y" * 1024)
    (docs / ".git").mkdir()

    os.utime(root / "readme.txt", (FILE_MTIME, FILE_MTIME))
    os.utime(docs / "guide.pdf", (FILE_MTIME, FILE_MTIME))
    os.utime(docs, (DIR_MTIME, DIR_MTIME))

    return root
