from .tokens import (
    EncryptedPaginationTokenEncoder,
    PaginationKeys,
    PaginationTokenEncoder,
    SimplePaginationTokenEncoder,
    generate_key,
)

__all__ = [
    "EncryptedPaginationTokenEncoder",
    "PaginationKeys",
    "PaginationTokenEncoder",
    "SimplePaginationTokenEncoder",
    "generate_key",
]
