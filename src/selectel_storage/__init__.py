"""Client for OpenStack Swift compatible object storage (Selectel Cloud Storage)."""

from ._http import DEFAULT_AUTH_URL, HTTPConfig
from ._version import __version__
from .aio import AsyncContainer, AsyncStorageClient
from .auth import authenticate, authenticate_async
from .client import Container, StorageClient
from .errors import (
    AuthenticationError,
    ForbiddenError,
    MalformedResponseError,
    ResourceNotFoundError,
    StorageError,
    UnexpectedStatusError,
)
from .tempurl import build_temp_url, sign_temp_url
from .types import (
    ErrorMode,
    RequestOutcome,
    ResponseFormat,
    Session,
    SupportsObjectMetadata,
)

__all__ = [
    "__version__",
    "DEFAULT_AUTH_URL",
    "HTTPConfig",
    "StorageClient",
    "Container",
    "AsyncStorageClient",
    "AsyncContainer",
    "authenticate",
    "authenticate_async",
    "build_temp_url",
    "sign_temp_url",
    "Session",
    "RequestOutcome",
    "ResponseFormat",
    "ErrorMode",
    "SupportsObjectMetadata",
    "StorageError",
    "AuthenticationError",
    "ForbiddenError",
    "UnexpectedStatusError",
    "ResourceNotFoundError",
    "MalformedResponseError",
]
