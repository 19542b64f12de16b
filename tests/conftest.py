# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def offline_session() -> Generator[MagicMock, None, None]:
    """Replace the curl_cffi session so no test reaches the network."""
    with patch(
        "storefront.services.catalog_client.curl_requests.Session"
    ) as mock_session_cls:
        yield mock_session_cls
