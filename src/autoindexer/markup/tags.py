from __future__ import annotations

"""
Shorthand Tag Constructors.

Convenience layer over `element` for the fixed vocabulary of tags used by
the index renderer. Each constructor is pre-bound to its tag name.
"""

from typing import Callable, Dict, Mapping

from autoindexer.markup.node import Attributes, Content, Node, element

TagConstructor = Callable[[Attributes, Content], Node]


def _bind(tag: str) -> TagConstructor:
    def construct(attributes: Attributes, content: Content) -> Node:
        return element(tag, attributes, content)

    construct.__name__ = tag
    construct.__qualname__ = tag
    construct.__doc__ = f"Build a <{tag}> node."
    return construct

# -----------------------------------------------------------------------------
# COMMON TAGS
# -----------------------------------------------------------------------------

html = _bind("html")
head = _bind("head")
meta = _bind("meta")
style = _bind("style")
body = _bind("body")
h1 = _bind("h1")
table = _bind("table")
thead = _bind("thead")
tbody = _bind("tbody")
tr = _bind("tr")
th = _bind("th")
td = _bind("td")
a = _bind("a")
p = _bind("p")
div = _bind("div")

# Registry of the vocabulary above, keyed by tag name
TAGS: Mapping[str, TagConstructor] = {
    fn.__name__: fn
    for fn in (html, head, meta, style, body, h1, table, thead, tbody, tr, th, td, a, p, div)
}


def get_constructor(tag: str) -> TagConstructor:
    """
    Look up the shorthand constructor for a tag name.

    Args:
        tag: Tag name from the common vocabulary.

    Returns:
        TagConstructor: The pre-bound constructor.

    Raises:
        KeyError: If the tag is not part of the vocabulary.
    """
    try:
        return TAGS[tag]
    except KeyError:
        raise KeyError(f"Unknown shorthand tag: {tag!r}") from None
