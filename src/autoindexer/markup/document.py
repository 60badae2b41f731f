from __future__ import annotations

"""
Markup Document.

Wraps a root node with the fixed XHTML 1.0 Strict DOCTYPE preamble.
"""

import io
from dataclasses import dataclass

from autoindexer.markup.node import Node, Writer

DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN"\n'
    '  "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">'
)


@dataclass
class Document:
    """A complete document: preamble followed by a single root element."""
    root: Node

    def render(self, writer: Writer) -> None:
        """Write the preamble then the root rendering, with no separator."""
        writer.write(DOCTYPE)
        self.root.render(writer)

    def to_string(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()
