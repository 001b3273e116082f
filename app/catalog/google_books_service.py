"""
Google Books integration for the catalogue.

``GoogleBooksClient.search()`` issues exactly one request against the
volumes search endpoint and maps the ``items`` of the response into
``BookInformation`` records. Nothing is cached and nothing is retried:
a request either yields a page (possibly empty) or raises.

* network failures, timeouts and non-200 statuses raise
  ``TransportError``;
* bodies that are not JSON, or JSON that is not shaped like a volumes
  payload, raise ``DecodeError``.

Only the Python standard library is used for HTTP requests.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, List

from pydantic import ValidationError

from app.config import Settings

from .errors import DecodeError, TransportError
from .schemas import BookInformation, VolumesPage


logger = logging.getLogger(__name__)


def _http_get_json(url: str, timeout: float) -> Any:
    """Perform an HTTP GET and return the parsed JSON body."""
    request = urllib.request.Request(
        url,
        headers={
            'User-Agent': 'book-search-aggregator/1.0',
            'Accept': 'application/json',
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            if response.status != 200:
                raise TransportError(
                    f"making GET request: {url} returned status {response.status}"
                )
            raw = response.read()
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        # HTTPError (4xx/5xx) and socket timeouts land here too.
        raise TransportError(f"making GET request: {exc}") from exc
    try:
        return json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"decoding response from {url}: {exc}") from exc


class GoogleBooksClient:
    """Thin client for ``GET /books/v1/volumes?q=...``.

    Instances hold only immutable configuration and may be shared
    between concurrent requests.
    """

    def __init__(self, base_url: str, page_size: int = 20, timeout: float = 10) -> None:
        self.base_url = base_url
        self.page_size = page_size
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleBooksClient":
        return cls(
            base_url=settings.google_books_url,
            page_size=settings.upstream_page_size,
            timeout=settings.upstream_timeout_seconds,
        )

    def build_url(self, query: str, start_index: int = 0) -> str:
        params = {
            'q': query,
            'startIndex': max(0, int(start_index)),
            'maxResults': self.page_size,
        }
        return f"{self.base_url}?{urllib.parse.urlencode(params)}"

    def search(self, query: str, start_index: int = 0) -> List[BookInformation]:
        """Return the candidate records of one result page, in upstream order."""
        url = self.build_url(query, start_index)
        logger.debug("Google Books request: %s", url)
        try:
            data = _http_get_json(url, self.timeout)
        except (TransportError, DecodeError) as exc:
            logger.error("Google Books request to %s failed: %s", url, exc)
            raise
        if not isinstance(data, dict):
            logger.error("Google Books returned a non-object body for %s", url)
            raise DecodeError(f"decoding response from {url}: expected a JSON object")
        try:
            page = VolumesPage.model_validate(data)
        except ValidationError as exc:
            logger.error("Google Books returned an unexpected payload for %s: %s", url, exc)
            raise DecodeError(f"decoding response from {url}: {exc}") from exc
        return [item.volume_info for item in page.items]
