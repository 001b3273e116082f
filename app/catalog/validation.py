"""Completeness checks applied to upstream candidates before they are served."""

from __future__ import annotations

from .schemas import BookInformation


def is_complete(info: BookInformation, require_categories: bool = False) -> bool:
    """Return True when ``info`` carries every field the catalogue renders.

    A record is complete when it has a title, a description, at least one
    author, a positive page count and both thumbnail URLs. With
    ``require_categories`` it must also list at least one category.
    Only emptiness is checked: a field holding whitespace still counts
    as present.
    """
    if not (info.title and info.description):
        return False
    if not info.authors:
        return False
    if info.page_count <= 0:
        return False
    links = info.image_links
    if not (links.small_thumbnail and links.thumbnail):
        return False
    if require_categories and not info.categories:
        return False
    return True
