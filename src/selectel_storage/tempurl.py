"""Signed temporary URLs.

The server recomputes the signature from the request it receives, so the
message layout below must not change: method, expiry and path joined by
single newlines, signed with HMAC-SHA1 and hex encoded in lowercase.
"""

from __future__ import annotations

import hashlib
import hmac
import urllib.parse


def sign_temp_url(key: str | bytes, path: str, expires: int, method: str = "GET") -> str:
    """Return the ``temp_url_sig`` value for ``method`` on ``path`` until ``expires``."""
    if isinstance(key, str):
        key = key.encode("utf-8")
    hmac_body = f"{method.upper()}\n{int(expires)}\n{path}"
    return hmac.new(key, hmac_body.encode("utf-8"), hashlib.sha1).hexdigest()


def build_temp_url(
    endpoint_url: str,
    key: str | bytes,
    path: str,
    expires: int,
    filename: str | None = None,
    method: str = "GET",
) -> str:
    """
    Returns a TempURL for ``path`` (an absolute path such as
    ``/container/object``) relative to ``endpoint_url``, valid until the
    unix time ``expires``. ``filename`` overrides the name the browser saves
    the download under.
    """
    expires = int(expires)
    sig = sign_temp_url(key, path, expires, method)
    url = f"{endpoint_url.rstrip('/')}{path}?temp_url_sig={sig}&temp_url_expires={expires}"
    if filename:
        url += "&filename=" + urllib.parse.quote_plus(filename)
    return url


__all__ = ["sign_temp_url", "build_temp_url"]
