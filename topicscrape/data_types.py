"""Core data types for topicscrape.

Record and Topic are the values produced by extraction. They are plain
pydantic models: created fresh for each URL, rendered, then discarded.

Response is the fetch layer's view of an HTTP answer, modeled after
httpx.Response but decoupled from it so extraction code and tests never
depend on the HTTP client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

CSV_HEADER: tuple[str, ...] = ("Username", "Role", "Text", "Datetime")


class Record(BaseModel):
    """One comment-shaped entity: the question, a linked question or a comment.

    Every field defaults to an empty string, so a Record is well formed even
    when none of its markup regions are present.
    """

    username: str = Field("", description="Author name, plain text")
    role: str = Field("", description="Author role, plain text")
    text: str = Field("", description="Inner markup of the body region")
    datetime: str = Field("", description="Timestamp text, whitespace-trimmed")
    data_id: str = Field(
        "", description="data-id attribute of the body region, if any"
    )

    @model_serializer(mode="wrap")
    def omit_empty_data_id(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        if not self.data_id:
            data.pop("data_id", None)
        return data

    def csv_row(self) -> list[str]:
        """Return the record's CSV cells in CSV_HEADER order.

        ``data_id`` is never part of CSV output.
        """
        return [self.username, self.role, self.text, self.datetime]


class Topic(BaseModel):
    """The full extraction result for one topic URL."""

    question: Record = Field(default_factory=Record)
    linked_questions: list[Record] = Field(
        default_factory=list, serialization_alias="linked_question"
    )
    comments: list[Record] = Field(default_factory=list)

    def records(self) -> list[Record]:
        """All records in output order: question, linked questions, comments."""
        return [self.question, *self.linked_questions, *self.comments]

    def to_json(self) -> str:
        """Render the topic as a compact JSON document."""
        return self.model_dump_json(by_alias=True)


@dataclass
class Response:
    """HTTP response from fetching a topic page.

    Attributes:
        status_code: HTTP status code (200, 404, etc.).
        headers: Response headers.
        content: Raw response bytes.
        url: Final URL after any redirects.
    """

    status_code: int
    headers: dict[str, str]
    content: bytes
    url: str
