from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point via subprocess and validates exit codes, stream
output and the generated index files.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects 'src' into PYTHONPATH and points HOME at a scratch directory so
    the user's own configuration file is never read.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)

    cmd = [sys.executable, "-m", "autoindexer.main"] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_generates_indexes(sample_tree: Path, tmp_path: Path) -> None:
    result = run_cli([str(sample_tree), "-u", "https://files.example.com", "--json"], tmp_path)

    assert result.returncode == 0, result.stderr
    summary = json.loads(result.stdout)
    assert summary["directories"] == 2

    page = (sample_tree / "docs" / "index.html").read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html")
    assert '<a href="https://files.example.com/">Parent directory/</a>' in page
    assert 'href="https://files.example.com/docs/guide.pdf"' in page
    assert "INFO | Indexing finished" in result.stderr


def test_cli_missing_directory(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "does-not-exist")], tmp_path)

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_version(tmp_path: Path) -> None:
    result = run_cli(["--version"], tmp_path)

    assert result.returncode == 0
    assert "autoindexer" in result.stdout
