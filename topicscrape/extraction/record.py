"""Record extraction from a comment-shaped subtree.

A record region contains up to four class-tagged markers:

- ``username`` and ``role``: plain text, read from the element's first
  direct text.
- ``comment-text``: the body anchor. Its inner markup becomes the record's
  text and its ``data-id`` attribute the record's identifier.
- ``datetime``: trimmed text. It terminates the record; nothing after it in
  document order is examined, and body markup stops just before it.

Regions may be missing; the corresponding fields stay empty.
"""

from __future__ import annotations

import copy
import html
from typing import Any

import lxml.html

from topicscrape.common.class_matcher import has_css_class
from topicscrape.common.traversal import VisitResult, walk
from topicscrape.data_types import Record

USERNAME_CLASS = "username"
ROLE_CLASS = "role"
BODY_CLASS = "comment-text"
DATETIME_CLASS = "datetime"

DATA_ID_ATTRIBUTE = "data-id"


def first_text(element: Any) -> str:
    """Return the first direct text content of ``element``.

    That is the element's leading text or, failing that, the first text that
    follows one of its child nodes. Text nested deeper is never returned.
    """
    if element.text:
        return element.text
    for child in element:
        if child.tail:
            return child.tail
    return ""


def _is_ancestor(ancestor: Any, node: Any) -> bool:
    return any(parent is ancestor for parent in node.iterancestors())


def _serialize(node: Any, with_tail: bool = True) -> str:
    return lxml.html.tostring(node, encoding="unicode", with_tail=with_tail)


def _serialize_until(element: Any, stop_at: Any) -> str:
    """Serialize ``element`` truncated just before its descendant ``stop_at``.

    The terminator, its tail and everything following it inside ``element``
    are dropped from a copy; enclosing tags stay balanced.
    """
    path: list[int] = []
    node = stop_at
    while node is not element:
        parent = node.getparent()
        path.append(parent.index(node))
        node = parent

    truncated = copy.deepcopy(element)
    marker = truncated
    for index in reversed(path):
        marker = marker[index]

    node = marker
    while node is not truncated:
        parent = node.getparent()
        for sibling in list(node.itersiblings()):
            parent.remove(sibling)
        node.tail = None
        node = parent
    marker.getparent().remove(marker)

    return _serialize(truncated, with_tail=False)


def inner_markup(element: Any, stop_at: Any = None) -> str:
    """Serialize the content of ``element`` without its own start/end tag.

    Args:
        element: The wrapper whose descendants are serialized.
        stop_at: Optional descendant acting as a terminator. Serialization
            ends just before it.

    Returns:
        Leading text and every child node (with its tail) in document order.
    """
    parts: list[str] = []
    if element.text:
        parts.append(html.escape(element.text, quote=False))
    for child in element:
        if stop_at is not None and (
            child is stop_at or _is_ancestor(child, stop_at)
        ):
            if child is not stop_at:
                parts.append(_serialize_until(child, stop_at))
            break
        parts.append(_serialize(child))
    return "".join(parts)


class RecordExtractor:
    """Single-walk visitor that collects one Record from a subtree.

    Only one body anchor is active at a time: ``comment-text`` elements
    nested inside the active anchor are treated as ordinary body markup. A
    later, non-nested anchor replaces the text and identifier of an
    earlier one.

    Example::

        record = RecordExtractor().extract(comment_element)
    """

    def __init__(self) -> None:
        self.username = ""
        self.role = ""
        self.text = ""
        self.datetime = ""
        self.data_id = ""
        self._anchor: Any = None
        self._terminator: Any = None

    def visit(self, node: Any) -> VisitResult:
        if has_css_class(node, USERNAME_CLASS):
            self.username = first_text(node)

        if has_css_class(node, ROLE_CLASS):
            self.role = first_text(node)

        if self._anchor is None and has_css_class(node, BODY_CLASS):
            self._anchor = node
            self.data_id = node.get(DATA_ID_ATTRIBUTE, "")

        if has_css_class(node, DATETIME_CLASS):
            self.datetime = first_text(node).strip()
            if self._anchor is not None:
                self._terminator = node
            return VisitResult.STOP

        return VisitResult.CONTINUE

    def leave(self, node: Any) -> None:
        if node is self._anchor:
            if self._terminator is node:
                # a body that is its own terminator has no content to keep
                self.text = ""
            else:
                self.text = inner_markup(node, stop_at=self._terminator)
            self._anchor = None
            self._terminator = None

    def extract(self, root: Any) -> Record:
        walk(root, self.visit, self.leave)
        return Record(
            username=self.username,
            role=self.role,
            text=self.text,
            datetime=self.datetime,
            data_id=self.data_id,
        )


def extract_record(root: Any) -> Record:
    """Extract one Record from the subtree rooted at ``root``."""
    return RecordExtractor().extract(root)
