"""Offset-paginated collection resource.

Renders as::

    {"page": {"size": 3, "total_elements": 3, "total_pages": 1, "number": 0},
     "_links": {...},
     "_embedded": {"strings": ["foo", "bar", "baz"]}}

The ``_embedded`` entry is always present, even for an empty page.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from hal_resources.models.collection import CollectionResources
from hal_resources.models.pagination import PageLike, mapped

T = TypeVar("T")
U = TypeVar("U")


# -----------------------------------------------------------------------------
# Metadata
# -----------------------------------------------------------------------------
class PageMetadata(BaseModel):
    """
    Value object for pagination metadata.

    There are two ways to get one and they can disagree on total_pages:
    ``of`` derives it as ceil(total_elements / size) with 0 for size 0,
    while ``from_page`` trusts the page result's own count (a repository may
    report 1 page for size 0, for example). Both are kept as-is.
    """

    size: int = Field(
        ...,
        ge=0,
        description="The requested size of the page"
    )
    total_elements: Optional[int] = Field(
        None,
        ge=0,
        description="The total number of elements available"
    )
    total_pages: Optional[int] = Field(
        None,
        ge=0,
        description="How many pages are available in total"
    )
    number: Optional[int] = Field(
        None,
        ge=0,
        description="The zero-based number of the current page"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, size: int, number: int, total_elements: int) -> PageMetadata:
        """Create metadata from size, number and total elements, deriving total pages."""
        total_pages = 0 if size == 0 else (total_elements + size - 1) // size
        return cls(size=size, total_elements=total_elements, total_pages=total_pages, number=number)

    @classmethod
    def from_page(cls, page: PageLike[Any]) -> PageMetadata:
        return cls(
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number=page.number,
        )

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"size": self.size}
        if self.total_elements is not None:
            data["total_elements"] = self.total_elements
        if self.total_pages is not None:
            data["total_pages"] = self.total_pages
        if self.number is not None:
            data["number"] = self.number
        return data


# -----------------------------------------------------------------------------
# Resources
# -----------------------------------------------------------------------------
class PagedResources(CollectionResources[PageMetadata, T], Generic[T]):

    value_field = "page"
    metadata_type = PageMetadata
    embed_empty = True

    @classmethod
    def from_page(
        cls,
        key: str,
        page: PageLike[U],
        mapper: Optional[Callable[[U], T]] = None,
    ) -> PagedResources[T]:
        """Wrap a page result, optionally converting each item with ``mapper``."""
        return cls(key, mapped(page.content, mapper), PageMetadata.from_page(page))

    @classmethod
    def from_content(cls, key: str, content: Sequence[T]) -> PagedResources[T]:
        """Wrap a whole collection as a single page."""
        size = 0 if content is None else len(content)
        return cls(key, content, PageMetadata.of(size, 0, size))
