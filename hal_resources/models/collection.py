from __future__ import annotations

from types import MappingProxyType
from typing import Any, ClassVar, Generic, List, Mapping, NoReturn, Optional, Sequence, Tuple, TypeVar

from hal_resources.exceptions import (
    DeserializationError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from hal_resources.models.resource import (
    EMBEDDED_FIELD,
    LINKS_FIELD,
    Resource,
    require_object,
    load_links,
)
from hal_resources.utils.serialization import validate_as

M = TypeVar("M")
T = TypeVar("T")


class CollectionResources(Resource[M], Generic[M, T]):
    """
    A resource whose value is collection metadata and whose only embedded
    entry is the collection itself, stored under a caller-chosen key.

    Implemented by PagedResources and ChunkedResources only. The embedded
    entry is fixed at construction, so embed_resource is not supported.
    """

    # Field the metadata is nested under
    value_field: ClassVar[str]
    metadata_type: ClassVar[type]
    # Whether an empty collection still produces an embedded entry
    embed_empty: ClassVar[bool]

    def __init__(self, key: str, content: Sequence[T], metadata: M) -> None:
        if key is None:
            raise InvalidArgumentError("The key must not be None")
        if content is None:
            raise InvalidArgumentError("The content must not be None")
        if metadata is None:
            raise InvalidArgumentError("The metadata must not be None")
        super().__init__(metadata)
        self._key = key
        self._content: Tuple[T, ...] = tuple(content)

    @property
    def key(self) -> str:
        return self._key

    @property
    def content(self) -> List[T]:
        """A copy of the collection; the resource itself never changes."""
        return list(self._content)

    @property
    def embedded_resources(self) -> Mapping[str, List[T]]:
        if not self._content and not self.embed_empty:
            return MappingProxyType({})
        return MappingProxyType({self._key: list(self._content)})

    def embed_resource(self, rel: str, resource: Any) -> NoReturn:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support embedding additional resources"
        )

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        item_type: Any = Any,
        key: Optional[str] = None,
    ) -> CollectionResources[Any, Any]:
        """
        Build a collection resource from its HAL JSON object.

        Items of the embedded collection are validated as ``item_type``. When
        ``key`` is given the embedded collection must be stored under it; it
        also names the collection when the document carries none.
        """
        fields = require_object(data)
        if cls.value_field not in fields:
            raise DeserializationError("Field required", path=(cls.value_field,))
        metadata = validate_as(cls.metadata_type, fields[cls.value_field], (cls.value_field,))

        raw_embedded = fields.get(EMBEDDED_FIELD)
        if raw_embedded is None:
            if cls.embed_empty:
                raise DeserializationError("Field required", path=(EMBEDDED_FIELD,))
            found_key, raw_items = key or "", []
        else:
            raw_embedded = require_object(raw_embedded, (EMBEDDED_FIELD,))
            if len(raw_embedded) != 1:
                raise DeserializationError(
                    f"Expected exactly one embedded collection, got {len(raw_embedded)}",
                    path=(EMBEDDED_FIELD,),
                )
            ((found_key, raw_items),) = raw_embedded.items()
            if key is not None and found_key != key:
                raise DeserializationError(
                    f"Expected embedded collection {key!r}", path=(EMBEDDED_FIELD, found_key)
                )

        items = validate_as(List[item_type], raw_items, (EMBEDDED_FIELD, found_key))
        resource = cls(found_key, items, metadata)
        for rel, link in load_links(fields.get(LINKS_FIELD)).items():
            resource.add_link(rel, link)
        return resource
