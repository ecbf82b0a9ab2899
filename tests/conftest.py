"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest

from selectel_storage import Session


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear storage-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    env_vars_to_clear = [
        "SELECTEL_STORAGE_USER",
        "SELECTEL_STORAGE_KEY",
        "SELECTEL_STORAGE_AUTH_URL",
        "DEBUG",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_user() -> str:
    """Mock account id for testing."""
    return "12345"


@pytest.fixture
def mock_key() -> str:
    """Mock storage key for testing."""
    return "storage_key_123456789"


@pytest.fixture
def mock_token() -> str:
    """Mock storage token for testing."""
    return "tk_test_123456789"


@pytest.fixture
def storage_url() -> str:
    return "https://12345.selcdn.ru/"


@pytest.fixture
def mock_session(storage_url: str, mock_token: str) -> Session:
    return Session(endpoint_url=storage_url, auth_token=mock_token)


@pytest.fixture
def mock_json_session(storage_url: str, mock_token: str) -> Session:
    return Session(endpoint_url=storage_url, auth_token=mock_token, response_format="json")
