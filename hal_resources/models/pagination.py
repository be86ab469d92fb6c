from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

U = TypeVar("U")


# -----------------------------------------------------------------------------
# Protocols
# -----------------------------------------------------------------------------
@runtime_checkable
class PageLike(Protocol[U]):
    """An offset-paginated query result, e.g. one produced by a repository."""

    @property
    def content(self) -> Sequence[U]: ...

    @property
    def size(self) -> int: ...

    @property
    def number(self) -> int: ...

    @property
    def total_elements(self) -> int: ...

    @property
    def total_pages(self) -> int: ...


@runtime_checkable
class ChunkLike(Protocol[U]):
    """A cursor-chunked query result."""

    @property
    def content(self) -> Sequence[U]: ...

    @property
    def pagination_token(self) -> Optional[str]: ...


# -----------------------------------------------------------------------------
# Page
# -----------------------------------------------------------------------------
class Page(BaseModel, Generic[U]):
    content: List[U] = Field(
        default_factory=list,
        description="Items of the current page"
    )
    size: int = Field(
        ...,
        ge=0,
        description="Requested page size"
    )
    number: int = Field(
        0,
        ge=0,
        description="Zero-based index of the current page"
    )
    total_elements: int = Field(
        ...,
        ge=0,
        description="Total number of elements across all pages"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def total_pages(self) -> int:
        # repository convention: an unsized page is a single page
        if self.size == 0:
            return 1
        return (self.total_elements + self.size - 1) // self.size

    @classmethod
    def single(cls, content: Sequence[U]) -> Page[U]:
        """A page holding the whole collection."""
        return cls(content=list(content), size=len(content), number=0, total_elements=len(content))


# -----------------------------------------------------------------------------
# Chunk
# -----------------------------------------------------------------------------
class ChunkRequest(BaseModel):
    size: Optional[int] = Field(
        None,
        ge=0,
        description="Maximum number of items requested for the chunk"
    )
    pagination_token: Optional[str] = Field(
        None,
        description="Opaque token of the chunk to continue from"
    )

    model_config = ConfigDict(frozen=True)


class Chunk(BaseModel, Generic[U]):
    content: List[U] = Field(
        default_factory=list,
        description="Items of the chunk"
    )
    pagination_token: Optional[str] = Field(
        None,
        description="Opaque continuation token"
    )
    chunk_request: Optional[ChunkRequest] = Field(
        None,
        description="The request this chunk answers"
    )

    model_config = ConfigDict(frozen=True)

    def has_content(self) -> bool:
        return bool(self.content)


def mapped(content: Sequence[Any], mapper: Optional[Callable[[Any], Any]]) -> List[Any]:
    """Apply ``mapper`` to every item of ``content``, keeping order."""
    if mapper is None:
        return list(content)
    return [mapper(item) for item in content]
