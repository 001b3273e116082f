"""
Fetch-filter-accumulate loop behind ``GET /books``.

``fetch_books()`` keeps asking the upstream source for result pages,
drops incomplete candidates and collects the rest until the requested
number of books is reached or the source has nothing more to give.
The buffer lives only for the duration of one call, so concurrent
requests never share state.

The loop always terminates:

* at most ``max_calls`` upstream requests are made per call;
* each request asks for the page following the candidates already
  seen (``start_index``);
* an empty page, or a page identical to the previous one (an upstream
  that ignores the offset), ends the loop with whatever was collected.

None of these stop conditions is an error. Upstream errors
(``BookSearchError``) propagate unchanged and no partial result is
returned with them.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from typing_extensions import Protocol

from .schemas import Book, BookInformation
from .validation import is_complete


logger = logging.getLogger(__name__)

# Hard ceiling on the number of books returned per request.
MAX_LIMIT = 50

DEFAULT_MAX_CALLS = 10


class BookSource(Protocol):
    def search(self, query: str, start_index: int = 0) -> List[BookInformation]:
        ...


def clamp_limit(limit: int) -> int:
    return max(0, min(int(limit), MAX_LIMIT))


def fetch_books(
    query: str,
    limit: int,
    client: BookSource,
    *,
    max_calls: int = DEFAULT_MAX_CALLS,
    require_categories: bool = False,
) -> List[Book]:
    """Return up to ``min(limit, MAX_LIMIT)`` complete books for ``query``.

    Books keep the order in which the upstream returned them, across
    pages. Raises whatever ``client.search`` raises.
    """
    limit = clamp_limit(limit)
    if limit == 0:
        return []

    books: List[Book] = []
    offset = 0
    calls = 0
    previous: Optional[List[BookInformation]] = None
    reason = "limit reached"

    while len(books) < limit:
        if calls >= max_calls:
            reason = "call cap reached"
            break
        page = client.search(query, start_index=offset)
        calls += 1

        if not page:
            reason = "upstream exhausted"
            break
        if page == previous:
            reason = "upstream repeated page"
            break

        for info in page:
            if len(books) >= limit:
                break
            if not is_complete(info, require_categories=require_categories):
                continue
            books.append(Book(book_information=info))

        previous = page
        offset += len(page)

    logger.info(
        "query=%r limit=%s accepted=%s calls=%s (%s)",
        query, limit, len(books), calls, reason,
    )
    return books
