from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog
from cryptography.fernet import Fernet, InvalidToken
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hal_resources.config.settings import settings
from hal_resources.exceptions import InvalidPaginationTokenError

logger = structlog.get_logger()


class PaginationKeys(BaseModel):
    """Keys of the first and last item of a chunk, as carried by a token."""

    first_key: Optional[Any] = Field(
        None,
        description="Key of the first item of the chunk"
    )
    last_key: Optional[Any] = Field(
        None,
        description="Key of the last item of the chunk"
    )

    model_config = ConfigDict(frozen=True)


# -----------------------------------------------------------------------------
# Encoder interface
# -----------------------------------------------------------------------------
class PaginationTokenEncoder(ABC):
    """
    Turns the boundary keys of a chunk into an opaque pagination token and back.

    Resources never look inside a token; callers encode one when building a
    Chunk and decode it when the client asks for the next chunk.
    """

    @abstractmethod
    def encode(self, first_key: Any, last_key: Any) -> str:
        pass

    @abstractmethod
    def decode(self, token: str) -> PaginationKeys:
        pass

    def extract_first_key(self, token: str) -> Any:
        return self.decode(token).first_key

    def extract_last_key(self, token: str) -> Any:
        return self.decode(token).last_key


def _keys_to_bytes(first_key: Any, last_key: Any) -> bytes:
    return PaginationKeys(first_key=first_key, last_key=last_key).model_dump_json().encode("utf-8")


def _keys_from_bytes(payload: bytes) -> PaginationKeys:
    try:
        return PaginationKeys.model_validate_json(payload)
    except ValidationError as e:
        logger.debug("pagination_token_rejected", reason="malformed payload")
        raise InvalidPaginationTokenError("Invalid pagination token.") from e


# -----------------------------------------------------------------------------
# Plain (base64) tokens
# -----------------------------------------------------------------------------
class SimplePaginationTokenEncoder(PaginationTokenEncoder):
    """URL-safe base64 of a JSON document. Readable by anyone holding the token."""

    def encode(self, first_key: Any, last_key: Any) -> str:
        return base64.urlsafe_b64encode(_keys_to_bytes(first_key, last_key)).decode("utf-8")

    def decode(self, token: str) -> PaginationKeys:
        if not token:
            raise InvalidPaginationTokenError("Cannot decode empty token.")
        try:
            payload = base64.urlsafe_b64decode(token.encode("utf-8"))
        except (binascii.Error, ValueError) as e:
            logger.debug("pagination_token_rejected", reason="not base64")
            raise InvalidPaginationTokenError("Invalid pagination token.") from e
        return _keys_from_bytes(payload)


# -----------------------------------------------------------------------------
# Encrypted tokens
# -----------------------------------------------------------------------------
class EncryptedPaginationTokenEncoder(PaginationTokenEncoder):
    """Fernet-encrypted JSON document, so clients cannot read or forge keys."""

    def __init__(self, key: Optional[str] = None) -> None:
        key = key or settings.PAGINATION_TOKEN_KEY
        if not key:
            raise ValueError("A Fernet key is required (set HAL_PAGINATION_TOKEN_KEY).")
        self._fernet = Fernet(key)

    def encode(self, first_key: Any, last_key: Any) -> str:
        encrypted = self._fernet.encrypt(_keys_to_bytes(first_key, last_key))
        return encrypted.decode("utf-8")

    def decode(self, token: str) -> PaginationKeys:
        if not token:
            raise InvalidPaginationTokenError("Cannot decode empty token.")
        try:
            decrypted_bytes = self._fernet.decrypt(token.encode("utf-8"))
        except InvalidToken as e:
            logger.debug("pagination_token_rejected", reason="decryption failed")
            raise InvalidPaginationTokenError("Invalid pagination token.") from e
        return _keys_from_bytes(decrypted_bytes)


def generate_key() -> str:
    return Fernet.generate_key().decode("utf-8")
