"""Integration tests for the auth bootstrap using respx mocking.

Tests both sync and async variants to ensure API parity.
"""

import httpx
import pytest

from selectel_storage import (
    AsyncStorageClient,
    AuthenticationError,
    ForbiddenError,
    HTTPConfig,
    Session,
    StorageClient,
    authenticate,
    authenticate_async,
)

AUTH_URL = "https://auth.selcdn.ru/"
STORAGE_URL = "https://12345.selcdn.ru/"


class TestAuthenticate:
    def test_authenticate_sync(self, mock_env_clear, api_mock, mock_auth_response_headers):
        route = api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        session = authenticate("12345", "secret")

        assert session == Session(
            endpoint_url=STORAGE_URL, auth_token="tk_test_123456789", response_format=""
        )
        request = route.calls.last.request
        assert request.headers["x-auth-user"] == "12345"
        assert request.headers["x-auth-key"] == "secret"
        assert request.headers["host"] == "auth.selcdn.ru"

    @pytest.mark.asyncio
    async def test_authenticate_async(
        self, mock_env_clear, api_mock, mock_auth_response_headers
    ):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        session = await authenticate_async("12345", "secret", response_format="json")

        assert session.endpoint_url == STORAGE_URL
        assert session.auth_token == "tk_test_123456789"
        assert session.response_format == "json"

    def test_credentials_from_env(
        self, mock_env_clear, monkeypatch, api_mock, mock_auth_response_headers
    ):
        monkeypatch.setenv("SELECTEL_STORAGE_USER", "env-user")
        monkeypatch.setenv("SELECTEL_STORAGE_KEY", "env-key")
        route = api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        authenticate()

        assert route.calls.last.request.headers["x-auth-user"] == "env-user"

    def test_custom_auth_url(self, mock_env_clear, api_mock, mock_auth_response_headers):
        route = api_mock.get("https://auth.example.com/v1.0").mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        authenticate("u", "k", config=HTTPConfig(auth_url="https://auth.example.com/v1.0"))

        assert route.called
        assert route.calls.last.request.headers["host"] == "auth.example.com"

    def test_unknown_format_falls_back_to_plain(
        self, mock_env_clear, api_mock, mock_auth_response_headers
    ):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        session = authenticate("u", "k", response_format="yaml")

        assert session.response_format == ""

    def test_forbidden(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(return_value=httpx.Response(403))

        with pytest.raises(ForbiddenError) as exc_info:
            authenticate("12345", "wrong")

        assert exc_info.value.status_code == 403
        assert "Forbidden for user '12345'" in str(exc_info.value)

    def test_other_failure(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(AuthenticationError) as exc_info:
            authenticate("12345", "secret")

        assert not isinstance(exc_info.value, ForbiddenError)
        assert exc_info.value.status_code == 500

    def test_success_code_is_exactly_204(
        self, mock_env_clear, api_mock, mock_auth_response_headers
    ):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(200, headers=mock_auth_response_headers)
        )

        with pytest.raises(AuthenticationError) as exc_info:
            authenticate("12345", "secret")

        assert exc_info.value.status_code == 200

    def test_return_mode_gives_code(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(return_value=httpx.Response(403))

        assert authenticate("12345", "wrong", errors="return") == 403

    def test_missing_storage_headers(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers={"X-Storage-Url": STORAGE_URL})
        )

        with pytest.raises(AuthenticationError, match="x-storage-token"):
            authenticate("12345", "secret", errors="return")

    def test_missing_credentials_makes_no_request(self, mock_env_clear, api_mock):
        route = api_mock.get(AUTH_URL).mock(return_value=httpx.Response(204))

        with pytest.raises(RuntimeError):
            authenticate()

        assert not route.called


class TestLogin:
    def test_login_sync(self, mock_env_clear, api_mock, mock_auth_response_headers):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        client = StorageClient.login("12345", "secret", "xml")

        assert isinstance(client, StorageClient)
        assert client.url == STORAGE_URL
        assert client.response_format == "xml"

    @pytest.mark.asyncio
    async def test_login_async(self, mock_env_clear, api_mock, mock_auth_response_headers):
        api_mock.get(AUTH_URL).mock(
            return_value=httpx.Response(204, headers=mock_auth_response_headers)
        )

        client = await AsyncStorageClient.login("12345", "secret")

        assert isinstance(client, AsyncStorageClient)
        assert client.session.auth_token == "tk_test_123456789"

    def test_login_return_mode(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(return_value=httpx.Response(401))

        assert StorageClient.login("12345", "secret", errors="return") == 401

    def test_failed_login_raises_by_default(self, mock_env_clear, api_mock):
        api_mock.get(AUTH_URL).mock(return_value=httpx.Response(401))

        with pytest.raises(AuthenticationError):
            StorageClient.login("12345", "secret")
