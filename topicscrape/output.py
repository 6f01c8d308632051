"""Rendering of extracted topics.

CSV output has one header row followed by the question, the linked
questions and the comments, one row each. JSON output is a single compact
document per topic.
"""

from __future__ import annotations

import csv
import logging
import os
from pathlib import Path

from pydantic_core import PydanticSerializationError

from topicscrape.common.exceptions import OutputException
from topicscrape.data_types import CSV_HEADER, Topic

logger = logging.getLogger(__name__)

DEFAULT_CSV_FILENAME = "topic.csv"


def resolve_output_path(filename: str) -> Path:
    """Return where a CSV file named ``filename`` is written.

    The file always lands under the current directory, even when
    ``filename`` is absolute: ``/tmp/out.csv`` becomes ``./tmp/out.csv``.
    """
    separators = os.sep + (os.altsep or "")
    return Path(".") / filename.lstrip(separators)


def write_csv(topic: Topic, path: Path, request_url: str = "") -> None:
    """Write ``topic`` to ``path`` as CSV, replacing any existing file.

    Raises:
        OutputException: If the file cannot be created or written. Rows
            written before the failure stay in the file.
    """
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for record in topic.records():
                writer.writerow(record.csv_row())
    except OSError as e:
        raise OutputException(
            f"Cannot write to file: {e}", request_url, str(path)
        ) from e
    logger.debug(
        "Wrote %d rows to %s", len(topic.records()) + 1, path
    )


def render_json(topic: Topic, request_url: str = "") -> str:
    """Render ``topic`` as a compact JSON document.

    Raises:
        OutputException: If the topic cannot be serialized.
    """
    try:
        return topic.to_json()
    except PydanticSerializationError as e:
        raise OutputException(
            f"Cannot serialize topic: {e}", request_url, "<stdout>"
        ) from e
