"""HAL resource envelope.

A :class:`Resource` wraps a value together with a relation -> :class:`Link`
map and a relation -> object map of embedded resources, and renders as::

    {...fields of value, "_links": {rel: {"href": ...}}, "_embedded": {rel: ...}}

``_links`` and ``_embedded`` are left out entirely when empty. The value is
flattened into the enclosing object unless the class sets ``value_field``,
in which case it is nested under that name (see PagedResources and
ChunkedResources).
"""

from __future__ import annotations

from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    get_args,
    get_origin,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from hal_resources.exceptions import (
    DeserializationError,
    InvalidArgumentError,
)
from hal_resources.models.link import Link
from hal_resources.utils.serialization import to_jsonable, to_json, parse_json, validate_as

T = TypeVar("T")

LINKS_FIELD = "_links"
EMBEDDED_FIELD = "_embedded"

# Field a value with no fields of its own (str, int, list...) is written under
SCALAR_VALUE_FIELD = "value"


# -----------------------------------------------------------------------------
# JSON helpers
# -----------------------------------------------------------------------------
def require_object(data: Any, path: Tuple[Any, ...] = ()) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise DeserializationError("Expected a JSON object", path=path)
    return dict(data)


def load_links(raw: Any) -> Dict[str, Link]:
    """Read a ``_links`` object. Only ``href`` is taken from each link."""
    if raw is None:
        return {}
    raw = require_object(raw, (LINKS_FIELD,))
    links: Dict[str, Link] = {}
    for rel, raw_link in raw.items():
        path = (LINKS_FIELD, rel)
        raw_link = require_object(raw_link, path)
        links[rel] = validate_as(Link, {"href": raw_link.get("href")}, path)
    return links


def dump_links(links: Mapping[str, Link]) -> Dict[str, Any]:
    return {rel: link.model_dump(mode="json") for rel, link in links.items()}


def _is_any(type_: Any) -> bool:
    return type_ is Any or type_ is None or type_ is object


# -----------------------------------------------------------------------------
# Resource
# -----------------------------------------------------------------------------
class Resource(Generic[T]):
    """
    Envelope holding one value plus HAL links and embedded resources.

    The link and embedded maps belong to the resource; the value is shared
    with the caller as-is. Mutating methods return ``self`` so calls chain::

        Resource(bean).add_link("self", Link("http://example.com/beans/1"))
    """

    # None -> flatten the value into the enclosing object
    value_field: ClassVar[Optional[str]] = None

    def __init__(self, value: T = None) -> None:
        self._value = value
        self._links: Dict[str, Link] = {}
        self._embedded: Dict[str, Any] = {}

    # -------------------------------------------------------------------------
    # Value
    # -------------------------------------------------------------------------
    @property
    def value(self) -> T:
        return self._value

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------
    @property
    def links(self) -> Dict[str, Link]:
        """All links contained in this resource (the live map)."""
        return self._links

    def add_link(self, rel: str, link: Link) -> Resource[T]:
        """Add ``link`` under ``rel``, replacing any link already there."""
        if link is None:
            raise InvalidArgumentError("Link must not be None")
        self._links[rel] = link
        return self

    def has_links(self) -> bool:
        return bool(self._links)

    def has_link(self, rel: str) -> bool:
        return self.get_link(rel) is not None

    def get_link(self, rel: str) -> Optional[Link]:
        return self._links.get(rel)

    def clear_links(self) -> None:
        self._links.clear()

    # -------------------------------------------------------------------------
    # Embedded resources
    # -------------------------------------------------------------------------
    @property
    def embedded_resources(self) -> Mapping[str, Any]:
        return self._embedded

    def embed_resource(self, rel: str, resource: Any) -> Resource[T]:
        self._embedded[rel] = resource
        return self

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    def _dump_value(self) -> Dict[str, Any]:
        if self.value_field is not None:
            return {self.value_field: to_jsonable(self._value)}
        if self._value is None:
            return {}
        dumped = to_jsonable(self._value)
        if isinstance(dumped, dict):
            reserved = sorted(set(dumped) & {LINKS_FIELD, EMBEDDED_FIELD})
            if reserved:
                raise InvalidArgumentError(f"Value fields clash with reserved HAL keys: {reserved}")
            return dict(dumped)
        return {SCALAR_VALUE_FIELD: dumped}

    def to_dict(self) -> Dict[str, Any]:
        """Return the HAL JSON object for this resource."""
        data = self._dump_value()
        if self.links:
            data[LINKS_FIELD] = dump_links(self.links)
        embedded = self.embedded_resources
        if embedded:
            data[EMBEDDED_FIELD] = to_jsonable(dict(embedded))
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        return to_json(self.to_dict(), indent=indent)

    # -------------------------------------------------------------------------
    # Deserialization
    # -------------------------------------------------------------------------
    @classmethod
    def _load_value(cls, fields: Dict[str, Any], value_type: Any) -> Any:
        if _is_any(value_type):
            if not fields:
                return None
            # a dict holding only "value" reads back as that scalar
            if set(fields) == {SCALAR_VALUE_FIELD}:
                return fields[SCALAR_VALUE_FIELD]
            return fields
        if not fields:
            # a None value writes no fields
            try:
                return validate_as(value_type, None)
            except DeserializationError:
                return validate_as(value_type, fields)
        if set(fields) == {SCALAR_VALUE_FIELD}:
            try:
                return validate_as(value_type, fields)
            except DeserializationError:
                return validate_as(value_type, fields[SCALAR_VALUE_FIELD], (SCALAR_VALUE_FIELD,))
        return validate_as(value_type, fields)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        value_type: Any = Any,
        embedded_types: Optional[Mapping[str, Any]] = None,
    ) -> Resource[Any]:
        """
        Build a resource from its HAL JSON object.

        ``_links`` and ``_embedded`` are extracted; all remaining fields are
        validated as ``value_type``. Embedded objects are kept as plain JSON
        values unless ``embedded_types`` names a type for their relation.

        Without a ``value_type`` the encoding is ambiguous: a dict value whose
        only key is ``"value"`` is indistinguishable from a wrapped scalar and
        reads back unwrapped, so ``Resource({"value": 1})`` returns as
        ``Resource(1)``. Pass ``dict`` to keep the object.
        """
        fields = require_object(data)
        raw_links = fields.pop(LINKS_FIELD, None)
        raw_embedded = fields.pop(EMBEDDED_FIELD, None)

        resource = cls(cls._load_value(fields, value_type))
        for rel, link in load_links(raw_links).items():
            resource.add_link(rel, link)
        if raw_embedded is not None:
            embedded_types = embedded_types or {}
            for rel, raw in require_object(raw_embedded, (EMBEDDED_FIELD,)).items():
                if rel in embedded_types:
                    raw = validate_as(embedded_types[rel], raw, (EMBEDDED_FIELD, rel))
                resource.embed_resource(rel, raw)
        return resource

    @classmethod
    def from_json(cls, text: str | bytes, *args: Any, **kwargs: Any) -> Resource[Any]:
        """Parse JSON text; extra arguments are passed to :meth:`from_dict`."""
        return cls.from_dict(parse_json(text), *args, **kwargs)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        # Resource[X] validates with X as the type argument for from_dict
        origin = get_origin(source) or cls
        args = get_args(source)
        type_arg = args[0] if args else Any

        def validate(data: Any) -> Any:
            if isinstance(data, origin):
                return data
            return origin.from_dict(data, type_arg)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda resource: resource.to_dict()
            ),
        )

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.value == other.value
            and self.links == other.links
            and dict(self.embedded_resources) == dict(other.embedded_resources)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self.value!r}, links={self.links!r}, "
            f"embedded_resources={dict(self.embedded_resources)!r})"
        )
