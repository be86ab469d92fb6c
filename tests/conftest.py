"""Shared fixtures."""

import pytest

from hal_resources.security.tokens import SimplePaginationTokenEncoder


@pytest.fixture
def encoder() -> SimplePaginationTokenEncoder:
    return SimplePaginationTokenEncoder()
