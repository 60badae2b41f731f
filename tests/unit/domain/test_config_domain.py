from __future__ import annotations

"""
Unit tests for the Configuration Domain: defaults and config file loading.
"""

import json
from pathlib import Path

from autoindexer.domain.config import IndexOptions, get_default_config, load_config


def test_default_config_keys() -> None:
    cfg = get_default_config()
    assert set(cfg) == {"root_fs_path", "base_url", "style_path", "skip_list", "log_level", "log_file"}
    assert cfg["skip_list"] == ["index.html"]


def test_index_options_defaults() -> None:
    options = IndexOptions(root_fs_path="/srv", base_url="")
    assert options.custom_style is None
    assert options.skip_list == ("index.html",)


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"base_url": "https://x.org", "bogus": 1}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["base_url"] == "https://x.org"
    assert "bogus" not in cfg


def test_load_config_corrupt_file_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{ not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()
