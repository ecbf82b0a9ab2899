"""Exchange account credentials for a storage URL and token."""

from __future__ import annotations

import urllib.parse

from ._http import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    HTTPConfig,
    iter_coroutine,
    require_credentials,
)
from .errors import AuthenticationError, ForbiddenError
from .types import ErrorMode, Session
from .utils import resolve_format


async def _authenticate(
    transport: BaseTransport,
    user: str,
    key: str,
    response_format: str | None,
    errors: ErrorMode,
) -> Session | int:
    auth_url = transport.config.auth_url
    headers = {
        "Host": urllib.parse.urlsplit(auth_url).netloc,
        "X-Auth-User": user,
        "X-Auth-Key": key,
    }
    outcome = await transport.execute(auth_url, "GET", headers=headers)
    code = outcome.headers["HTTP-Code"]

    if code != 204:
        if errors == "return":
            return code
        if code == 403:
            raise ForbiddenError(user)
        raise AuthenticationError(code)

    storage_url = outcome.headers.get("x-storage-url")
    token = outcome.headers.get("x-storage-token")
    if not storage_url or not token:
        raise AuthenticationError(code, "No x-storage-url or x-storage-token header in response")

    return Session(
        endpoint_url=storage_url,
        auth_token=token,
        response_format=resolve_format(response_format, ""),
    )


def authenticate(
    user: str | None = None,
    key: str | None = None,
    *,
    response_format: str | None = None,
    config: HTTPConfig | None = None,
    errors: ErrorMode = "raise",
) -> Session | int:
    """Authenticate against the auth endpoint and return a :class:`Session`.

    Parameters:
    - user, key: account credentials (default to env SELECTEL_STORAGE_USER
      and SELECTEL_STORAGE_KEY)
    - response_format: listing format for the session ("", "json" or "xml");
      unknown values fall back to ""
    - config: HTTP settings, including the auth URL
    - errors: "raise" to raise on a rejected login, "return" to get the HTTP
      status code back instead

    Raises ForbiddenError on 403 and AuthenticationError on any other
    status than 204.
    """
    user, key = require_credentials(user, key)
    transport = BlockingTransport(config or HTTPConfig())
    return iter_coroutine(_authenticate(transport, user, key, response_format, errors))


async def authenticate_async(
    user: str | None = None,
    key: str | None = None,
    *,
    response_format: str | None = None,
    config: HTTPConfig | None = None,
    errors: ErrorMode = "raise",
) -> Session | int:
    """Async version of :func:`authenticate`."""
    user, key = require_credentials(user, key)
    transport = AsyncTransport(config or HTTPConfig())
    return await _authenticate(transport, user, key, response_format, errors)


__all__ = ["authenticate", "authenticate_async"]
