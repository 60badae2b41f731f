from __future__ import annotations

from .document import DOCTYPE, Document
from .node import Attribute, Children, Content, Node, Text, element
from .tags import TAGS, get_constructor

__all__ = [
    "Attribute",
    "Children",
    "Content",
    "DOCTYPE",
    "Document",
    "Node",
    "TAGS",
    "Text",
    "element",
    "get_constructor",
]
