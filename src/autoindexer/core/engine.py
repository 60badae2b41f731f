from __future__ import annotations

"""
Core indexing pipeline.

Coordinates a full indexing run:
1. Scans the filesystem subtree into the in-memory mirror.
2. Walks the mirror and writes one index page per directory.

Every failure is fatal to the run and propagates to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from autoindexer.core.renderer import render_tree
from autoindexer.core.scanner import build_directory_tree
from autoindexer.domain.config import IndexOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSummary:
    """
    Informational outcome of a successful run.

    Attributes:
        root_fs_path: Directory that was indexed.
        directories: Number of directories indexed.
        files: Number of files listed across all pages.
        written: Paths of the generated index files, in write order.
    """
    root_fs_path: str
    directories: int
    files: int
    written: List[str] = field(default_factory=list)


def index_tree(options: IndexOptions) -> IndexSummary:
    """
    Generate an index page in the root directory and every directory below it.

    The whole mirror is built before the first page is written, and it is
    released when this call returns.

    Args:
        options: Indexing options.

    Returns:
        IndexSummary: Counts and written paths.

    Raises:
        OSError: On any scan or write failure.
    """
    logger.info(f"Indexing started at {options.root_fs_path}")

    root = build_directory_tree(options.root_fs_path, options.skip_list)
    directories = list(root.walk())
    file_count = sum(len(d.files) for d in directories)
    logger.debug(f"Mirror built: {len(directories)} directories, {file_count} files")

    written = render_tree(root, options)

    logger.info(f"Indexing finished: {len(written)} index pages written.")
    return IndexSummary(
        root_fs_path=options.root_fs_path,
        directories=len(directories),
        files=file_count,
        written=written,
    )
