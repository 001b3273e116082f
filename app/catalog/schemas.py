"""
Pydantic schema definitions for the catalog module.

``BookInformation`` mirrors the ``volumeInfo`` object of the Google
Books volumes API, restricted to the fields the catalogue serves.
The same model is used to parse upstream items and to serialise the
response, so field aliases follow the upstream camelCase names
(``pageCount``, ``imageLinks``, ``smallThumbnail``).

Upstream items frequently omit fields or send ``null``. Such values
are coerced to empty defaults here so that an incomplete item still
parses; whether it is usable is decided later by ``validation``.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ImageLinks(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    small_thumbnail: str = Field(default="", alias="smallThumbnail")
    thumbnail: str = ""

    @field_validator("small_thumbnail", "thumbnail", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class BookInformation(BaseModel):
    """Descriptive metadata of a single volume.

    Records are produced once per upstream page and never modified
    afterwards, hence ``frozen``. Two records with identical field
    contents compare equal.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    description: str = ""
    authors: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    page_count: int = Field(default=0, alias="pageCount")
    image_links: ImageLinks = Field(default_factory=ImageLinks, alias="imageLinks")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _text_none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("authors", "categories", mode="before")
    @classmethod
    def _list_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("page_count", mode="before")
    @classmethod
    def _count_none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("image_links", mode="before")
    @classmethod
    def _links_none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class Book(BaseModel):
    """A single accepted search result."""

    book_information: BookInformation


class BookSearchResponse(BaseModel):
    """Payload of ``GET /books``."""

    query: str
    total: int
    books: List[Book] = Field(default_factory=list)


# Upstream payload shapes. Unknown keys are ignored.


class VolumeItem(BaseModel):
    volume_info: BookInformation = Field(default_factory=BookInformation, alias="volumeInfo")

    @field_validator("volume_info", mode="before")
    @classmethod
    def _info_none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class VolumesPage(BaseModel):
    """One page of the volumes search. Google omits ``items`` when nothing matched."""

    total_items: int = Field(default=0, alias="totalItems")
    items: List[VolumeItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _items_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
