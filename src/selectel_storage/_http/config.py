"""HTTP configuration for storage clients."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .._version import __version__

DEFAULT_AUTH_URL = "https://auth.selcdn.ru/"
DEFAULT_TIMEOUT: float | None = None
USER_AGENT = f"selectel-storage-python/{__version__}"


@dataclass
class HTTPConfig:
    """Configuration for HTTP requests to the storage service.

    ``verify`` controls TLS certificate validation. It is on by default;
    turning it off accepts any certificate the server presents.
    """

    auth_url: str = field(
        default_factory=lambda: os.getenv("SELECTEL_STORAGE_AUTH_URL") or DEFAULT_AUTH_URL
    )
    timeout: float | None = DEFAULT_TIMEOUT
    verify: bool = True
    user_agent: str = USER_AGENT
    default_headers: dict[str, str] = field(default_factory=dict)

    def get_headers(self) -> dict[str, str]:
        """Build the headers sent with every request."""
        return {
            "user-agent": self.user_agent,
            "accept-encoding": "gzip, deflate",
            **self.default_headers,
        }


def require_credentials(user: str | None, key: str | None) -> tuple[str, str]:
    """Resolve credentials from arguments or environment, raising if not found."""
    resolved_user = user or os.getenv("SELECTEL_STORAGE_USER")
    resolved_key = key or os.getenv("SELECTEL_STORAGE_KEY")
    if not resolved_user or not resolved_key:
        raise RuntimeError(
            "Missing storage credentials. Pass user=... and key=... or set "
            "SELECTEL_STORAGE_USER and SELECTEL_STORAGE_KEY."
        )
    return resolved_user, resolved_key


__all__ = [
    "HTTPConfig",
    "DEFAULT_AUTH_URL",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "require_credentials",
]
