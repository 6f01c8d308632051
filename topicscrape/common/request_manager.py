"""Request manager for fetching topic pages.

SyncRequestManager encapsulates the HTTP client and the conversion of an
HTTP answer into a parsed lxml document. It is responsible for:

- Maintaining the httpx.Client
- Mapping HTTP and transport failures onto FetchException subclasses
- Building the document tree, mapping parser failures onto ParseException

Drivers only ever see Response objects and parsed trees.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import lxml.etree
import lxml.html
from lxml.html import HtmlElement

from topicscrape import __version__
from topicscrape.common.exceptions import (
    FetchException,
    HTTPStatusException,
    ParseException,
    RequestTimeoutException,
)
from topicscrape.data_types import Response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"topicscrape/{__version__}"


class SyncRequestManager:
    """Manages HTTP requests for the synchronous topic driver.

    Example::

        with SyncRequestManager(timeout=30.0) as manager:
            doc = manager.fetch_document("https://example.com/topic/1")
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the request manager.

        Args:
            timeout: Request timeout in seconds. None means no timeout (default).
            user_agent: Value of the User-Agent header.
            transport: Optional httpx transport, mainly for tests.
        """
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> SyncRequestManager:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

    def fetch(self, url: str) -> Response:
        """Fetch ``url`` and return the Response.

        Raises:
            HTTPStatusException: If the server answers with a non-2xx status.
            RequestTimeoutException: If the request times out.
            FetchException: On any other transport failure.
        """
        try:
            http_response = self._client.get(url)
        except httpx.TimeoutException as e:
            raise RequestTimeoutException(
                url=url, timeout_seconds=self.timeout
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchException(f"getting {url}: {e}", url) from e

        logger.debug(
            "GET %s -> %s (%d bytes)",
            url,
            http_response.status_code,
            len(http_response.content),
        )

        if not http_response.is_success:
            raise HTTPStatusException(
                status_code=http_response.status_code,
                reason=http_response.reason_phrase,
                url=url,
            )

        return Response(
            status_code=http_response.status_code,
            headers=dict(http_response.headers),
            content=http_response.content,
            url=str(http_response.url),
        )

    def fetch_document(self, url: str) -> HtmlElement:
        """Fetch ``url`` and build its HTML document tree."""
        return parse_document(self.fetch(url).content, url)


def parse_document(content: bytes | str, url: str = "") -> HtmlElement:
    """Build an lxml document tree from page content.

    The parser is lenient; only content it cannot turn into a document at
    all (for example an empty body) is an error.

    Raises:
        ParseException: If no document tree can be built.
    """
    try:
        return lxml.html.document_fromstring(content)
    except (lxml.etree.LxmlError, ValueError) as e:
        raise ParseException(
            f"parsing {url} as HTML: {e}",
            url,
            {"content_length": len(content)},
        ) from e
