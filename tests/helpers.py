from typing import List, Optional, Sequence

from app.catalog.schemas import BookInformation, ImageLinks


def make_info(n: int = 1, **overrides) -> BookInformation:
    fields = dict(
        title=f"Book {n}",
        description=f"Description of book {n}",
        authors=[f"Author {n}"],
        categories=["Fiction"],
        page_count=100 + n,
        image_links=ImageLinks(
            small_thumbnail=f"http://books.example/{n}/small.jpg",
            thumbnail=f"http://books.example/{n}/thumb.jpg",
        ),
    )
    fields.update(overrides)
    return BookInformation(**fields)


def make_incomplete(n: int = 1) -> BookInformation:
    return make_info(n, description="")


class StubBooksClient:
    """Upstream stand-in that serves ``pages`` in order, then repeats the last one.

    Repeating the last page mimics the real API when it ignores the
    offset. Every call is recorded in ``calls``.
    """

    def __init__(self, pages: Sequence[List[BookInformation]] = (), error: Optional[Exception] = None) -> None:
        self.pages = [list(p) for p in pages]
        self.error = error
        self.calls = []

    def search(self, query: str, start_index: int = 0) -> List[BookInformation]:
        self.calls.append((query, start_index))
        if self.error is not None:
            raise self.error
        if not self.pages:
            return []
        if len(self.pages) == 1:
            return list(self.pages[0])
        return self.pages.pop(0)
