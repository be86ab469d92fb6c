"""Exception hierarchy for HAL resources."""

from __future__ import annotations

from typing import Any, Tuple


class ResourceError(Exception):
    """Base exception for all hal_resources errors."""

    pass


class InvalidArgumentError(ResourceError, ValueError):
    """A required argument was missing (``None``)."""

    pass


class UnsupportedOperationError(ResourceError, TypeError):
    """The operation is not supported by this kind of resource.

    Raised by collection resources whose embedded set is fixed at
    construction time.
    """

    pass


class DeserializationError(ResourceError, ValueError):
    """A JSON document could not be mapped onto a resource."""

    def __init__(self, message: str, path: Tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = tuple(path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} (at {'.'.join(str(p) for p in self.path)})"


class InvalidPaginationTokenError(ResourceError, ValueError):
    """A pagination token could not be decoded."""

    pass
