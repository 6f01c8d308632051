"""Extraction of topic records from parsed HTML.

Example::

    from topicscrape.extraction import parse_topic

    topic = parse_topic(lxml.html.document_fromstring(page))
"""

from topicscrape.extraction.record import (
    RecordExtractor,
    extract_record,
    inner_markup,
)
from topicscrape.extraction.regions import (
    parse_topic,
    scan_comment_lists,
    scan_linked_questions,
    scan_question_region,
)

__all__ = [
    "RecordExtractor",
    "extract_record",
    "inner_markup",
    "parse_topic",
    "scan_comment_lists",
    "scan_linked_questions",
    "scan_question_region",
]
