"""Region extraction for topic pages.

Three scans locate the class-tagged regions of a topic page:

- The question scan finds the ``question-view`` record and, once it meets
  the ``linked-questions`` block, collects that block and stops the walk.
- The linked-questions scan collects every ``linked-question`` inside the
  block.
- The comment-list scan collects the direct ``comment-item`` children of
  every ``comment-list`` container in the page.

Absent regions produce empty values, never errors.
"""

from __future__ import annotations

import logging
from typing import Any

from topicscrape.common.class_matcher import has_css_class
from topicscrape.common.traversal import VisitResult, walk
from topicscrape.data_types import Record, Topic
from topicscrape.extraction.record import extract_record

logger = logging.getLogger(__name__)

QUESTION_VIEW_CLASS = "question-view"
LINKED_QUESTIONS_CLASS = "linked-questions"
LINKED_QUESTION_CLASS = "linked-question"
COMMENT_LIST_CLASS = "comment-list"
COMMENT_ITEM_CLASS = "comment-item"


class QuestionRegionScanner:
    """Visitor for the question / linked-questions pair.

    With several ``question-view`` elements the last one visited before the
    walk stops wins.
    """

    def __init__(self) -> None:
        self.question = Record()
        self.linked_questions: list[Record] = []

    def visit(self, node: Any) -> VisitResult:
        if has_css_class(node, QUESTION_VIEW_CLASS):
            self.question = extract_record(node)
        if has_css_class(node, LINKED_QUESTIONS_CLASS):
            self.linked_questions = scan_linked_questions(node)
            return VisitResult.STOP
        return VisitResult.CONTINUE

    def scan(self, root: Any) -> tuple[Record, list[Record]]:
        walk(root, self.visit)
        return self.question, self.linked_questions


def scan_question_region(root: Any) -> tuple[Record, list[Record]]:
    """Return the question record and the linked questions of a page."""
    return QuestionRegionScanner().scan(root)


def scan_linked_questions(container: Any) -> list[Record]:
    """Collect every ``linked-question`` in ``container``, in document order.

    The container itself is examined too, and matches nested inside other
    matches are collected as well.
    """
    linked: list[Record] = []

    def visit(node: Any) -> VisitResult:
        if has_css_class(node, LINKED_QUESTION_CLASS):
            linked.append(extract_record(node))
        return VisitResult.CONTINUE

    walk(container, visit)
    return linked


def scan_comment_lists(root: Any) -> list[Record]:
    """Collect the comments of every ``comment-list`` in the page.

    Only direct ``comment-item`` children of a list are records. The inside
    of a matched list is not searched for further lists or items, while the
    rest of the page is.
    """
    comments: list[Record] = []

    def visit(node: Any) -> VisitResult:
        if not has_css_class(node, COMMENT_LIST_CLASS):
            return VisitResult.CONTINUE
        for child in node:
            if has_css_class(child, COMMENT_ITEM_CLASS):
                comments.append(extract_record(child))
        return VisitResult.SKIP_CHILDREN

    walk(root, visit)
    return comments


def parse_topic(doc: Any) -> Topic:
    """Extract a Topic from a parsed topic page.

    Args:
        doc: Root of the parsed document (any lxml element).

    Returns:
        A fresh Topic. Calling this twice on the same tree yields equal
        results.
    """
    question, linked_questions = scan_question_region(doc)
    comments = scan_comment_lists(doc)
    logger.debug(
        "Extracted question, %d linked questions, %d comments",
        len(linked_questions),
        len(comments),
    )
    return Topic(
        question=question,
        linked_questions=linked_questions,
        comments=comments,
    )
