from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from autoindexer import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the autoindexer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="autoindexer",
        description="Generate a static index.html listing in every directory of a tree.",
    )

    # --- Paths and links ---
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to index (same as --input).",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to index. Defaults to the current directory.",
    )
    p.add_argument(
        "-u", "--base-url",
        dest="base_url",
        default=None,
        help="Prefix for every generated link, e.g. https://example.com/files.",
    )

    # --- Page content ---
    p.add_argument(
        "--style",
        dest="style_path",
        default=None,
        help="CSS file inlined instead of the default stylesheet.",
    )
    p.add_argument(
        "--skip",
        dest="skip_list",
        default=None,
        help="Comma-separated entry names to exclude in addition to the defaults.",
    )

    # --- Configuration ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file. Defaults to ~/.autoindexer/config.json.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    The positional root wins over --input when both are given.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_fs_path"] = args.root or args.input_path
    overrides["base_url"] = args.base_url
    overrides["style_path"] = args.style_path
    overrides["log_file"] = args.log_file

    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.skip_list:
        overrides["extra_skip"] = _split_csv(args.skip_list)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
