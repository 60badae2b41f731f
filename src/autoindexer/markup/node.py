from __future__ import annotations

"""
Markup Node Model.

Provides the generic element tree used to produce markup output. A node
carries a tag, an ordered list of attributes and exactly one kind of
content: literal text or an ordered list of child nodes. Rendering is a
pure function of the tree and always emits explicit closing tags.
"""

import io
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Protocol, Tuple, Union

# -----------------------------------------------------------------------------
# TYPE DEFINITIONS
# -----------------------------------------------------------------------------

class Writer(Protocol):
    """Minimal text sink accepted by the renderers."""

    def write(self, s: str) -> int: ...


@dataclass(frozen=True)
class Attribute:
    """
    A single key/value pair rendered as ` key="value"`.

    Attributes:
        key: Attribute name, written verbatim.
        value: Attribute value, written verbatim (no escaping).
    """
    key: str
    value: str


@dataclass(frozen=True)
class Text:
    """Leaf content: literal text written verbatim between the tags."""
    value: str = ""


@dataclass(frozen=True)
class Children:
    """Branch content: an ordered sequence of owned child nodes."""
    nodes: Tuple["Node", ...] = ()

    def __init__(self, nodes: Iterable["Node"] = ()) -> None:
        object.__setattr__(self, "nodes", tuple(nodes))


Content = Union[Text, Children]
Attributes = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

# -----------------------------------------------------------------------------
# NODE
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    One element of the markup tree.

    The content variant is fixed at construction time and is never
    reinterpreted afterwards.

    Attributes:
        tag: Element name.
        attributes: Attributes in render order. Duplicate keys are kept.
        content: Either Text or Children.
    """
    tag: str
    attributes: List[Attribute] = field(default_factory=list)
    content: Content = field(default_factory=Text)

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, Text)

    @property
    def children(self) -> Tuple[Node, ...]:
        if isinstance(self.content, Children):
            return self.content.nodes
        return ()

    def render(self, writer: Writer) -> None:
        """
        Serialize the node and all descendants into the writer.

        Output form: <tag k1="v1" k2="v2">CONTENT</tag>. Any error raised by
        the writer propagates unchanged, leaving the sink truncated.

        Args:
            writer: Text sink exposing a write(str) method.
        """
        writer.write(f"<{self.tag}")
        for attr in self.attributes:
            writer.write(f' {attr.key}="{attr.value}"')
        writer.write(">")

        if isinstance(self.content, Text):
            writer.write(self.content.value)
        else:
            for child in self.content.nodes:
                child.render(writer)

        writer.write(f"</{self.tag}>")

    def to_string(self) -> str:
        """Render the node into a new string."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

# -----------------------------------------------------------------------------
# CONSTRUCTION API
# -----------------------------------------------------------------------------

def element(tag: str, attributes: Attributes, content: Content) -> Node:
    """
    Build a node from a tag, its attributes and an explicit content variant.

    Args:
        tag: Element name.
        attributes: A mapping (insertion order is kept) or an iterable of
                    (key, value) pairs, which may repeat keys.
        content: Text(...) for leaf content, Children([...]) for child nodes.

    Returns:
        Node: The constructed element.

    Raises:
        TypeError: If content is neither Text nor Children.
    """
    if not isinstance(content, (Text, Children)):
        raise TypeError(
            f"Invalid content for <{tag}>: expected Text or Children, "
            f"received {type(content).__name__}."
        )
    return Node(tag=tag, attributes=_to_attribute_list(attributes), content=content)


def _to_attribute_list(attributes: Attributes) -> List[Attribute]:
    """Normalize a mapping or pair iterable into Attribute records."""
    if isinstance(attributes, Mapping):
        pairs: Iterable[Tuple[str, str]] = attributes.items()
    else:
        pairs = attributes
    return [Attribute(key=k, value=v) for k, v in pairs]
