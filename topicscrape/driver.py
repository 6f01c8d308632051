"""Synchronous topic driver.

The driver owns the per-URL loop: fetch the page, build the document tree,
extract the Topic and hand it to the on_topic callback. URLs are processed
strictly one after another, and the first fatal error ends the run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from topicscrape.common.request_manager import SyncRequestManager
from topicscrape.data_types import Topic
from topicscrape.extraction import parse_topic

logger = logging.getLogger(__name__)


class TopicDriver:
    """Processes topic URLs in order, one at a time.

    Example usage::

        topics = []
        driver = TopicDriver(
            ["https://example.com/topic/1"],
            on_topic=lambda url, topic: topics.append(topic),
        )
        driver.run()
    """

    def __init__(
        self,
        urls: Iterable[str],
        request_manager: SyncRequestManager | None = None,
        on_topic: Callable[[str, Topic], None] | None = None,
        on_run_start: Callable[[int], None] | None = None,
        on_run_complete: Callable[[str, Exception | None], None]
        | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            urls: Topic URLs, processed in the given order.
            request_manager: SyncRequestManager used for fetching. If None,
                the driver creates one and closes it when the run ends.
            on_topic: Optional callback invoked with the URL and its Topic
                as soon as the Topic is extracted. Exceptions raised by the
                callback end the run like any other fatal error.
            on_run_start: Optional callback invoked with the number of URLs.
            on_run_complete: Optional callback invoked with the run status
                ("completed" | "error") and the error, if any.
        """
        self.urls = list(urls)
        if request_manager is not None:
            self.request_manager = request_manager
            self._owns_request_manager = False
        else:
            self.request_manager = SyncRequestManager()
            self._owns_request_manager = True
        self.on_topic = on_topic
        self.on_run_start = on_run_start
        self.on_run_complete = on_run_complete

    def process_url(self, url: str) -> Topic:
        """Fetch ``url`` and extract its Topic."""
        logger.info("Fetching %s", url)
        doc = self.request_manager.fetch_document(url)
        topic = parse_topic(doc)
        logger.info(
            "Extracted %s: %d linked questions, %d comments",
            url,
            len(topic.linked_questions),
            len(topic.comments),
        )
        return topic

    def run(self) -> None:
        """Process every URL, stopping at the first fatal error.

        The error is re-raised after on_run_complete has been notified.
        """
        if self.on_run_start:
            self.on_run_start(len(self.urls))

        status = "completed"
        error: Exception | None = None
        try:
            for url in self.urls:
                topic = self.process_url(url)
                if self.on_topic:
                    self.on_topic(url, topic)
        except Exception as e:
            status = "error"
            error = e
            raise
        finally:
            if self._owns_request_manager:
                self.request_manager.close()
            if self.on_run_complete:
                self.on_run_complete(status, error)
