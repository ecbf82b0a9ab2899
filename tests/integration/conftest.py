"""Fixtures for integration tests using respx mocking."""

import pytest
import respx

AUTH_URL = "https://auth.selcdn.ru/"
STORAGE_URL = "https://12345.selcdn.ru/"


@pytest.fixture
def mock_auth_response_headers() -> dict:
    """Headers of a successful auth response."""
    return {
        "X-Storage-Url": STORAGE_URL,
        "X-Storage-Token": "tk_test_123456789",
        "X-Expire-Auth-Token": "86400",
    }


@pytest.fixture
def mock_account_head_headers() -> dict:
    """Headers of a HEAD on the account."""
    return {
        "X-Account-Bytes-Used": "2048",
        "X-Account-Container-Count": "2",
        "X-Account-Object-Count": "7",
        "X-Account-Meta-Temp-Url-Key": "temp-secret",
        "Content-Type": "text/plain; charset=utf-8",
    }


@pytest.fixture
def mock_container_head_headers() -> dict:
    """Headers of a HEAD on a freshly created container."""
    return {
        "X-Container-Object-Count": "0",
        "X-Container-Bytes-Used": "0",
        "X-Container-Meta-Type": "public",
        "Content-Length": "0",
    }


@pytest.fixture
def mock_file_listing_json() -> str:
    return (
        '[{"hash": "b1946ac92492d2347c6235b4d2611184", "last_modified": '
        '"2024-01-15T10:30:00.000000", "bytes": 6, "name": "cat.jpg", '
        '"content_type": "image/jpeg"}]'
    )


@pytest.fixture
def api_mock():
    """respx router for the auth and storage endpoints."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock
