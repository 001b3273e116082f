"""
Catalog package for the book search API.

This package wraps the Google Books volumes search behind a single
``GET /books`` endpoint. Each request is answered by repeatedly
querying the upstream API, discarding records with missing metadata
(no description, no thumbnails, no page count, ...) and returning at
most 50 complete records in upstream order.
"""

from .router import router as catalog_router  # noqa: F401
