from __future__ import annotations

"""
Filesystem Mirror Data Models.

In-memory records of a scanned directory subtree. The scanner fills them
completely before any index page is rendered.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Represents a regular file listed in a directory index.

    Attributes:
        name: Bare entry name.
        size: Size in bytes.
        mod_time: Modification time in Unix seconds.
    """
    name: str
    size: int
    mod_time: int


@dataclass
class Directory:
    """
    Represents a scanned directory and everything below it.

    Attributes:
        name: Basename of the filesystem path.
        web_path: '/'-rooted logical path mirroring the relative structure.
        fs_path: Filesystem path of the directory.
        mod_time: Modification time in Unix seconds.
        files: Regular files in scan order.
        subdirs: Owned subdirectories in scan order.
    """
    name: str
    web_path: str
    fs_path: str
    mod_time: int
    files: List[File] = field(default_factory=list)
    subdirs: List[Directory] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.web_path == "/"

    def walk(self) -> Iterator[Directory]:
        """Yield this directory and every descendant in pre-order."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.subdirs))
