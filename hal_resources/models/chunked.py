"""Cursor-chunked collection resource.

Renders as::

    {"chunk": {"size": 3, "pagination_token": "T1"},
     "_links": {...},
     "_embedded": {"resources": ["aaa", "bbb", "ccc"]}}

Unlike PagedResources, an empty chunk has no ``_embedded`` field at all.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from hal_resources.models.collection import CollectionResources
from hal_resources.models.pagination import ChunkLike, mapped

T = TypeVar("T")
U = TypeVar("U")


# -----------------------------------------------------------------------------
# Metadata
# -----------------------------------------------------------------------------
class ChunkMetadata(BaseModel):
    size: int = Field(
        ...,
        ge=0,
        description="Number of items in this chunk"
    )
    pagination_token: Optional[str] = Field(
        None,
        description="Opaque token to request the next chunk with"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_chunk(cls, chunk: ChunkLike[Any]) -> ChunkMetadata:
        return cls(size=len(chunk.content), pagination_token=chunk.pagination_token)

    @model_serializer
    def serialize_model(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"size": self.size}
        if self.pagination_token is not None:
            data["pagination_token"] = self.pagination_token
        return data


# -----------------------------------------------------------------------------
# Resources
# -----------------------------------------------------------------------------
class ChunkedResources(CollectionResources[ChunkMetadata, T], Generic[T]):

    value_field = "chunk"
    metadata_type = ChunkMetadata
    embed_empty = False

    @classmethod
    def from_chunk(
        cls,
        key: str,
        chunk: ChunkLike[U],
        mapper: Optional[Callable[[U], T]] = None,
    ) -> ChunkedResources[T]:
        """Wrap a chunk result, optionally converting each item with ``mapper``."""
        return cls(key, mapped(chunk.content, mapper), ChunkMetadata.from_chunk(chunk))

    @classmethod
    def from_content(cls, key: str, content: Sequence[T]) -> ChunkedResources[T]:
        """Wrap a whole collection as a chunk without a continuation token."""
        size = 0 if content is None else len(content)
        return cls(key, content, ChunkMetadata(size=size))
