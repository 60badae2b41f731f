from __future__ import annotations

"""
Unit tests for the Shorthand Tag Constructors.
"""

import pytest

from autoindexer.markup import tags
from autoindexer.markup.node import Text, element


def test_registry_covers_common_vocabulary() -> None:
    expected = {
        "html", "head", "meta", "style", "body", "h1", "table", "thead",
        "tbody", "tr", "th", "td", "a", "p", "div",
    }
    assert set(tags.TAGS) == expected


@pytest.mark.parametrize("name", sorted(tags.TAGS))
def test_shorthand_matches_general_constructor(name: str) -> None:
    shorthand = tags.get_constructor(name)({"id": "x"}, Text("body"))
    general = element(name, {"id": "x"}, Text("body"))

    assert shorthand == general
    assert shorthand.tag == name


def test_unknown_tag_lookup_fails() -> None:
    with pytest.raises(KeyError):
        tags.get_constructor("blink")
