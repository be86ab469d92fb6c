"""JSON encoding / decoding helpers shared by the resource models.

pydantic_core does the heavy lifting: ``to_jsonable_python`` turns pydantic
models, dataclasses and plain containers into JSON-compatible values, and
``TypeAdapter`` validates JSON values back into the requested type. Resources
themselves are not pydantic models, so they are handed to the encoder through
the ``fallback`` hook.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import structlog
from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json as _from_json
from pydantic_core import to_json as _to_json
from pydantic_core import to_jsonable_python

from hal_resources.exceptions import DeserializationError

logger = structlog.get_logger()


def _fallback(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_jsonable(obj: Any) -> Any:
    """Convert ``obj`` (including nested resources) into plain JSON values."""
    return to_jsonable_python(obj, fallback=_fallback)


def to_json(obj: Any, indent: Optional[int] = None) -> str:
    """Serialize ``obj`` to a JSON string."""
    return _to_json(obj, indent=indent, fallback=_fallback).decode("utf-8")


def parse_json(text: str | bytes) -> Any:
    """Parse JSON text, reporting syntax errors as DeserializationError."""
    try:
        return _from_json(text)
    except ValueError as e:
        logger.debug("json_parse_failed", error=str(e))
        raise DeserializationError(f"Invalid JSON: {e}") from e


def validate_as(type_: Any, data: Any, path: Tuple[Any, ...] = ()) -> Any:
    """
    Validate ``data`` as ``type_``.

    pydantic ValidationErrors are translated to DeserializationError with the
    location of the first failing field appended to ``path``.
    """
    try:
        return TypeAdapter(type_).validate_python(data)
    except ValidationError as e:
        error = e.errors()[0]
        full_path = tuple(path) + tuple(error["loc"])
        message = error["msg"]
        # errors raised by nested resource validators keep their own path
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, DeserializationError):
            full_path += cause.path
            message = cause.message
        logger.debug("deserialization_failed", path=full_path, error=message)
        raise DeserializationError(message, path=full_path) from e


def from_json(text: str | bytes, resource_type: Any) -> Any:
    """
    Deserialize JSON text into ``resource_type``.

    ``resource_type`` is any type pydantic can validate, typically a
    parametrized resource such as ``PagedResources[Resource[Bean]]``.
    """
    return validate_as(resource_type, parse_json(text))
