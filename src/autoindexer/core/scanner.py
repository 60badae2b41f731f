from __future__ import annotations

"""
Directory Scanner.

Mirrors a filesystem subtree into the in-memory Directory model. All
filesystem reads of an indexing run happen here, before any rendering.
Any OSError aborts the whole scan.
"""

import logging
import os
import posixpath
import stat
from typing import Iterable

from autoindexer.domain.config import DEFAULT_SKIP_LIST
from autoindexer.domain.fs_models import Directory, File

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
ROOT_WEB_PATH = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_directory_tree(
        root_fs_path: str,
        skip_list: Iterable[str] = DEFAULT_SKIP_LIST,
) -> Directory:
    """
    Scan a directory and everything below it into a Directory mirror.

    Directories are visited with an explicit work stack, not recursion.

    Args:
        root_fs_path: Directory to scan. Becomes web path '/'.
        skip_list: Entry names excluded from the scan.

    Returns:
        Directory: Fully populated mirror of the subtree.

    Raises:
        NotADirectoryError: If the root is not a directory.
        OSError: On any unreadable entry below the root.
    """
    root_stat = os.stat(root_fs_path)
    if not stat.S_ISDIR(root_stat.st_mode):
        raise NotADirectoryError(f"Not a directory: '{root_fs_path}'")

    logger.debug(f"Scanning directory tree at {root_fs_path}")
    root = Directory(
        name=os.path.basename(os.path.normpath(root_fs_path)),
        web_path=ROOT_WEB_PATH,
        fs_path=root_fs_path,
        mod_time=int(root_stat.st_mtime),
    )

    skip = frozenset(skip_list)
    pending = [root]
    while pending:
        dir_node = pending.pop()
        _scan_directory(dir_node, skip)
        pending.extend(reversed(dir_node.subdirs))

    return root


def should_skip(name: str, skip_list: Iterable[str] = DEFAULT_SKIP_LIST) -> bool:
    """Return True for hidden entries and entries named in the skip-list."""
    return name.startswith(HIDDEN_PREFIX) or name in skip_list

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _scan_directory(dir_node: Directory, skip_list: frozenset) -> None:
    """Record the files and direct subdirectories of one directory by name."""
    with os.scandir(dir_node.fs_path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if should_skip(entry.name, skip_list):
            continue

        # Symlinks, sockets, fifos and devices are not listed
        if entry.is_file(follow_symlinks=False):
            # Opened so that unreadable files fail the scan
            with open(entry.path, "rb") as fh:
                entry_stat = os.fstat(fh.fileno())
            dir_node.files.append(File(
                name=entry.name,
                size=entry_stat.st_size,
                mod_time=int(entry_stat.st_mtime),
            ))
        elif entry.is_dir(follow_symlinks=False):
            entry_stat = entry.stat(follow_symlinks=False)
            dir_node.subdirs.append(Directory(
                name=entry.name,
                web_path=posixpath.join(dir_node.web_path, entry.name),
                fs_path=os.path.join(dir_node.fs_path, entry.name),
                mod_time=int(entry_stat.st_mtime),
            ))

    logger.debug(
        f"Scanned {dir_node.web_path}: {len(dir_node.files)} files, "
        f"{len(dir_node.subdirs)} subdirs"
    )
