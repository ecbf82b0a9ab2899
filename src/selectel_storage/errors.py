from __future__ import annotations


class StorageError(Exception):
    """Base class for every error raised by this package."""


class AuthenticationError(StorageError):
    """The auth endpoint did not hand out a storage URL and token."""

    def __init__(self, status_code: int, detail: str = "Authentication failed"):
        super().__init__(f"{detail} (HTTP {status_code})")
        self.status_code = status_code
        self.detail = detail


class ForbiddenError(AuthenticationError):
    def __init__(self, user: str, status_code: int = 403):
        super().__init__(status_code, f"Forbidden for user '{user}'")
        self.user = user


class UnexpectedStatusError(StorageError):
    """A request finished with a status code its operation does not accept."""

    def __init__(self, status_code: int, operation: str):
        super().__init__(f"{operation} failed: unexpected HTTP {status_code}")
        self.status_code = status_code
        self.operation = operation


class ResourceNotFoundError(StorageError):
    """A local file given to an upload does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File '{path}' does not exist")
        self.path = path


class MalformedResponseError(StorageError):
    def __init__(self, status_line: str):
        super().__init__(f"Cannot parse HTTP status line: {status_line!r}")
        self.status_line = status_line


__all__ = [
    "StorageError",
    "AuthenticationError",
    "ForbiddenError",
    "UnexpectedStatusError",
    "ResourceNotFoundError",
    "MalformedResponseError",
]
