from .chunked import ChunkedResources, ChunkMetadata
from .collection import CollectionResources
from .link import (
    ATOM_NAMESPACE,
    REL_FIRST,
    REL_LAST,
    REL_NEXT,
    REL_PREVIOUS,
    REL_SELF,
    Link,
)
from .paged import PagedResources, PageMetadata
from .pagination import Chunk, ChunkLike, ChunkRequest, Page, PageLike
from .resource import Resource

__all__ = [
    "ATOM_NAMESPACE",
    "Chunk",
    "ChunkLike",
    "ChunkMetadata",
    "ChunkRequest",
    "ChunkedResources",
    "CollectionResources",
    "Link",
    "Page",
    "PageLike",
    "PageMetadata",
    "PagedResources",
    "REL_FIRST",
    "REL_LAST",
    "REL_NEXT",
    "REL_PREVIOUS",
    "REL_SELF",
    "Resource",
]
