from __future__ import annotations

"""
Index Page Renderer.

Converts Directory mirror nodes into XHTML index pages and writes one
`index.html` per directory. Each page's markup tree lives only for the
duration of its own render call.
"""

import functools
import logging
import os
import posixpath
from typing import List

from autoindexer.core.formatting import format_size, format_timestamp
from autoindexer.domain.config import INDEX_FILE_NAME, IndexOptions
from autoindexer.domain.fs_models import Directory
from autoindexer.markup import tags
from autoindexer.markup.document import Document
from autoindexer.markup.node import Children, Node, Text

logger = logging.getLogger(__name__)

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
DEFAULT_STYLE_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "resources",
    "default_style.css",
)
PLACEHOLDER = "-"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(directory: Directory, options: IndexOptions) -> List[str]:
    """
    Write an index page for a directory and for every directory below it.

    Pre-order: the current directory first, then each subdir in order.

    Args:
        directory: Root of the mirror subtree to render.
        options: Indexing options.

    Returns:
        List[str]: Paths of the written index files, in write order.
    """
    return [render_single_index(d, options) for d in directory.walk()]


def render_single_index(directory: Directory, options: IndexOptions) -> str:
    """
    Write `<fs_path>/index.html` for one directory.

    The destination is created (or truncated) before the page is built.
    Writer errors propagate and may leave a truncated file behind.

    Args:
        directory: Directory to list.
        options: Indexing options.

    Returns:
        str: Path of the written index file.
    """
    index_path = os.path.join(directory.fs_path, INDEX_FILE_NAME)

    # Undecodable entry names round-trip as their original bytes
    with open(index_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as out:
        build_index_document(directory, options).render(out)

    logger.debug(f"Wrote {index_path}")
    return index_path


def build_index_document(directory: Directory, options: IndexOptions) -> Document:
    """
    Build the full index page for a directory without touching the disk.

    Args:
        directory: Directory to list.
        options: Indexing options (base URL and stylesheet).

    Returns:
        Document: The page, ready to render.
    """
    style = options.custom_style if options.custom_style is not None else load_default_style()

    return Document(tags.html({"xmlns": XHTML_NAMESPACE}, Children([
        tags.head({}, Children([
            tags.meta({"name": "viewport", "content": "width=device-width"}, Text("")),
            tags.meta(
                {"http-equiv": "content-type", "content": "text/html; charset=UTF-8"},
                Text(""),
            ),
            tags.style({"type": "text/css"}, Text(style)),
        ])),
        tags.body({}, Children([
            tags.h1({}, Text(f"Index of {directory.web_path}")),
            tags.table({"id": "list"}, Children([
                tags.thead({}, Children([
                    tags.tr({}, Children([
                        tags.th({"style": "width:55%"}, Text("File Name")),
                        tags.th({"style": "width:20%"}, Text("File Size")),
                        tags.th({"style": "width:25%"}, Text("Date")),
                    ])),
                ])),
                tags.tbody({}, Children(build_listing_rows(directory, options.base_url))),
            ])),
        ])),
    ])))


def build_listing_rows(directory: Directory, base_url: str) -> List[Node]:
    """
    Build the table rows of a listing: parent link, subdirs, then files.

    Args:
        directory: Directory to list.
        base_url: Prefix for every hyperlink.

    Returns:
        List[Node]: One <tr> node per entry.
    """
    rows: List[Node] = []

    if not directory.is_root:
        parent_url = join_url(base_url, posixpath.dirname(directory.web_path))
        rows.append(_row(
            tags.a({"href": parent_url}, Text("Parent directory/")),
            PLACEHOLDER,
            PLACEHOLDER,
        ))

    for subdir in directory.subdirs:
        url = join_url(base_url, subdir.web_path)
        rows.append(_row(
            tags.a({"href": url, "title": subdir.name}, Text(subdir.name)),
            PLACEHOLDER,
            format_timestamp(subdir.mod_time),
        ))

    for file_entry in directory.files:
        url = join_url(base_url, directory.web_path, file_entry.name)
        rows.append(_row(
            tags.a({"href": url, "title": file_entry.name}, Text(file_entry.name)),
            format_size(file_entry.size),
            format_timestamp(file_entry.mod_time),
        ))

    return rows


def join_url(*parts: str) -> str:
    """
    Join URL segments with exactly one '/' at each boundary.

    Empty segments are ignored; separators inside a segment are untouched.
    """
    result = ""
    for part in parts:
        if not part:
            continue
        if not result:
            result = part
        else:
            result = result.rstrip("/") + "/" + part.lstrip("/")
    return result


@functools.lru_cache(maxsize=1)
def load_default_style() -> str:
    """Return the packaged default stylesheet, read from disk once."""
    with open(DEFAULT_STYLE_FILE, "r", encoding="utf-8") as f:
        return f.read()

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _row(link: Node, size: str, date: str) -> Node:
    return tags.tr({}, Children([
        tags.td({"class": "link"}, Children([link])),
        tags.td({"class": "size"}, Text(size)),
        tags.td({"class": "date"}, Text(date)),
    ]))
