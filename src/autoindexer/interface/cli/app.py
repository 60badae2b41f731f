from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, config file and CLI overrides), the indexing run and
result reporting.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from autoindexer.core.engine import IndexSummary, index_tree
from autoindexer.core.validator import options_from_config, validate_config
from autoindexer.domain.config import get_default_config, load_config
from autoindexer.infra.logging import LoggingConfig, configure_logging, get_logger
from autoindexer.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    overrides = cli_args.args_to_overrides(args)

    # 1. Resolve base configuration (defaults vs config file)
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, overrides)

    # 2. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight input verification
    root_path = clean_conf["root_fs_path"]
    if not os.path.isdir(root_path):
        msg = f"Input directory does not exist: {root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 5. Indexing run
    try:
        options = options_from_config(clean_conf)
        summary = index_tree(options)
    except KeyboardInterrupt:
        logger.warning("Indexing interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        msg = f"Indexing failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering
    if args.json_output:
        print(json.dumps(asdict(summary), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(summary)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-empty overrides into the base configuration.

    Extra skip names extend the configured skip-list instead of replacing it.
    """
    out = dict(base)
    for k in ("root_fs_path", "base_url", "style_path", "log_level", "log_file"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]

    extra_skip = overrides.get("extra_skip")
    if extra_skip:
        current = out.get("skip_list")
        merged = list(current) if isinstance(current, (list, tuple)) else []
        merged.extend(name for name in extra_skip if name not in merged)
        out["skip_list"] = merged

    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(summary: IndexSummary) -> None:
    print(f"Indexed: {summary.root_fs_path}")
    print(f"Directories: {summary.directories}")
    print(f"Files listed: {summary.files}")
    print(f"Index pages written: {len(summary.written)}")


if __name__ == "__main__":
    sys.exit(main())
