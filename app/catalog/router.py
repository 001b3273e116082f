"""
Route definitions for the catalogue API.

Endpoints:
- GET  /books?query=...&limit=...  : complete books matching ``query``

Parameters are validated by hand rather than through FastAPI's typed
query parameters so that invalid input is answered with 400 (and a
short message) instead of the framework's 422.
"""

from __future__ import annotations

import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import Settings

from .aggregator import fetch_books
from .errors import BookSearchError
from .google_books_service import GoogleBooksClient
from .schemas import BookSearchResponse


router = APIRouter(tags=["catalog"])

# ASCII digits with an optional sign, nothing else.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_books_client(settings: Settings = Depends(get_app_settings)) -> GoogleBooksClient:
    return GoogleBooksClient.from_settings(settings)


def _parse_limit(raw: Optional[str]) -> int:
    if raw is None or raw == "":
        raise HTTPException(status_code=400, detail="limit is required")
    if not _INTEGER_RE.fullmatch(raw):
        raise HTTPException(status_code=400, detail=f"processing limit: invalid syntax: {raw!r}")
    limit = int(raw)
    if limit < 0:
        raise HTTPException(status_code=400, detail="limit cant be a negative number")
    return limit


@router.get("/books", response_model=BookSearchResponse)
def search_books(
    query: Optional[str] = Query(default=None, description="Free-text search term"),
    limit: Optional[str] = Query(default=None, description="Maximum number of books (capped at 50)"),
    settings: Settings = Depends(get_app_settings),
    client: GoogleBooksClient = Depends(get_books_client),
) -> JSONResponse:
    """Return up to ``limit`` complete books matching ``query``."""
    if not query:
        raise HTTPException(status_code=400, detail="query is required")
    n = _parse_limit(limit)

    try:
        books = fetch_books(
            query,
            n,
            client,
            max_calls=settings.max_upstream_calls,
            require_categories=settings.require_categories,
        )
    except BookSearchError as exc:
        raise HTTPException(status_code=500, detail=f"getting books: {exc}")

    # Encode here so that a failure is answered with our own 500.
    try:
        response = BookSearchResponse(query=query, total=len(books), books=books)
        return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
    except (ValidationError, TypeError, ValueError) as exc:
        raise HTTPException(status_code=500, detail=f"encoding response: {exc}")
