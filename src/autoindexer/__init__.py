from __future__ import annotations

"""
autoindexer: static "Index of" pages for every directory of a subtree.
"""

from autoindexer.core.engine import IndexSummary, index_tree
from autoindexer.domain.config import IndexOptions

__version__ = "0.1.0"

__all__ = [
    "IndexOptions",
    "IndexSummary",
    "index_tree",
    "__version__",
]
