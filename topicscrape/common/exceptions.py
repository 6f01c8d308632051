"""Exception types for topic scraping errors.

Every fatal condition of a run is one of the exceptions defined here. Missing
markup regions are not errors and never raise; extraction falls back to empty
values instead.
"""

from typing import Any


class TopicScrapeException(Exception):
    """Base class for fatal errors while processing a topic URL.

    Subclasses describe which stage failed (fetch, parse, output) and carry
    enough context for the operator to tell which URL was being processed.
    """

    def __init__(
        self,
        message: str,
        request_url: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the failure.
            request_url: The topic URL that was being processed.
            context: Optional dict of additional context (status, path, etc).
        """
        self.message = message
        self.request_url = request_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        parts.append(f"URL: {self.request_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class FetchException(TopicScrapeException):
    """Raised when a topic page could not be retrieved.

    Covers network failures and transport errors raised by the HTTP client.
    The original client exception is chained as ``__cause__``.
    """


class HTTPStatusException(FetchException):
    """Raised when the server answers with a non-success status code.

    Attributes:
        status_code: The HTTP status code received.
        url: The URL that returned the status.
    """

    def __init__(self, status_code: int, reason: str, url: str) -> None:
        """Initialize the exception.

        Args:
            status_code: The actual status code received.
            reason: The reason phrase sent with the status.
            url: The URL of the request.
        """
        self.status_code = status_code
        self.url = url
        super().__init__(
            f"getting {url}: {status_code} {reason}".rstrip(),
            url,
            {"status_code": status_code},
        )


class RequestTimeoutException(FetchException):
    """Raised when a request exceeds the configured timeout.

    Attributes:
        url: The URL that timed out.
        timeout_seconds: The timeout duration in seconds.
    """

    def __init__(self, url: str, timeout_seconds: float | None) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Request to {url} timed out after {timeout_seconds}s",
            url,
            {"timeout_seconds": timeout_seconds},
        )


class ParseException(TopicScrapeException):
    """Raised when fetched content cannot be built into an HTML tree."""


class OutputException(TopicScrapeException):
    """Raised when the extracted topic cannot be written or serialized.

    A CSV file opened before the failure may be left partially written.
    """

    def __init__(
        self,
        message: str,
        request_url: str,
        destination: str,
    ) -> None:
        self.destination = destination
        super().__init__(message, request_url, {"destination": destination})
