"""Depth-first traversal of lxml trees with explicit control signals.

Extraction routines describe what they do at each node through a ``visit``
callback that returns a VisitResult. The walker, not the callback, owns the
control flow: a stop signal travels back up the call stack and is honoured
before the next sibling at every level.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any


class VisitResult(Enum):
    """What the walker should do after visiting a node."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


Visitor = Callable[[Any], VisitResult]
Leaver = Callable[[Any], None]


def walk(node: Any, visit: Visitor, leave: Leaver | None = None) -> bool:
    """Walk ``node`` and its descendants in document (pre-)order.

    Args:
        node: Root of the subtree to walk. Comments and processing
            instructions are visited like any other node.
        visit: Called once per node before its children.
        leave: Optional callback invoked once the node's subtree has been
            walked (or cut short), in post-order. It is called for every
            node that was visited, including the one that requested a stop.

    Returns:
        True if the walk ran to completion, False if a visitor stopped it.
    """
    result = visit(node)
    completed = result is not VisitResult.STOP
    if result is VisitResult.CONTINUE:
        for child in node:
            if not walk(child, visit, leave):
                completed = False
                break
    if leave is not None:
        leave(node)
    return completed
