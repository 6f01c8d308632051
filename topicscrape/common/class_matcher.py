"""CSS class marker matching for lxml nodes.

Regions of a topic page are identified by class tokens. Matching is a plain
linear scan over the ``class`` attribute split on single spaces; runs of
whitespace or tabs are not normalized, so ``"a  b"`` yields an empty token
between ``a`` and ``b`` and ``"a\\tb"`` is one token.
"""

from __future__ import annotations

from typing import Any


def is_element(node: Any) -> bool:
    """Return True for element nodes.

    lxml represents comments, processing instructions and entities as nodes
    whose ``tag`` is a factory function rather than a string.
    """
    return isinstance(getattr(node, "tag", None), str)


def has_css_class(node: Any, css_class: str) -> bool:
    """Check whether an element carries ``css_class`` in its class list.

    Args:
        node: An lxml node. Non-element nodes never match.
        css_class: The class token to look for.

    Returns:
        True iff the node's ``class`` attribute, split on single spaces,
        contains a token exactly equal to ``css_class``.
    """
    if not is_element(node):
        return False
    classes = node.get("class")
    if classes is None:
        return False
    return css_class in classes.split(" ")
