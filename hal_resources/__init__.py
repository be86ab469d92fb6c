"""HAL (Hypertext Application Language) resource envelopes.

Wraps domain values with ``_links`` and ``_embedded`` and provides paginated
(``page``) and cursor-chunked (``chunk``) collection resources.
"""

from .exceptions import (
    DeserializationError,
    InvalidArgumentError,
    InvalidPaginationTokenError,
    ResourceError,
    UnsupportedOperationError,
)
from .models import (
    Chunk,
    ChunkedResources,
    ChunkMetadata,
    ChunkRequest,
    Link,
    Page,
    PagedResources,
    PageMetadata,
    Resource,
)
from .utils.serialization import from_json, to_json

__version__ = "0.1.0"

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "ChunkRequest",
    "ChunkedResources",
    "DeserializationError",
    "InvalidArgumentError",
    "InvalidPaginationTokenError",
    "Link",
    "Page",
    "PageMetadata",
    "PagedResources",
    "Resource",
    "ResourceError",
    "UnsupportedOperationError",
    "from_json",
    "to_json",
]
