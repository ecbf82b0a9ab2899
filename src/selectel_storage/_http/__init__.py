"""Shared HTTP infrastructure for storage clients."""

from .config import DEFAULT_AUTH_URL, DEFAULT_TIMEOUT, HTTPConfig, require_credentials
from .envelope import (
    build_envelope,
    decode_envelope,
    encode_query,
    parse_head,
    split_envelope,
)
from .iter_coroutine import iter_coroutine
from .transport import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    RequestBody,
    compute_body_length,
)

__all__ = [
    "DEFAULT_AUTH_URL",
    "DEFAULT_TIMEOUT",
    "HTTPConfig",
    "require_credentials",
    "iter_coroutine",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "RequestBody",
    "compute_body_length",
    "build_envelope",
    "decode_envelope",
    "encode_query",
    "parse_head",
    "split_envelope",
]
