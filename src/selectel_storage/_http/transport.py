"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
import asyncio
import time
from collections.abc import AsyncIterator, Iterator, Mapping
from typing import IO, Any, Union

import httpx

from ..types import RequestOutcome
from ..utils import debug
from .config import HTTPConfig
from .envelope import build_envelope, decode_envelope, encode_query

CHUNK_SIZE = 64 * 1024
QUERY_METHODS = ("GET", "HEAD")

RequestBody = Union[bytes, IO[bytes], None]


def compute_body_length(body: RequestBody) -> int:
    if body is None:
        return 0
    if isinstance(body, (bytes, bytearray, memoryview)):
        return len(body)
    pos = body.tell()
    body.seek(0, 2)
    end = body.tell()
    body.seek(pos)
    return int(end - pos)


def _iter_chunks(stream: IO[bytes], length: int) -> Iterator[bytes]:
    left = length
    while left > 0:
        chunk = stream.read(min(CHUNK_SIZE, left))
        if not chunk:
            raise OSError("Early EOF from input")
        left -= len(chunk)
        yield chunk


async def _aiter_chunks(stream: IO[bytes], length: int) -> AsyncIterator[bytes]:
    left = length
    while left > 0:
        chunk = await asyncio.to_thread(stream.read, min(CHUNK_SIZE, left))
        if not chunk:
            raise OSError("Early EOF from input")
        left -= len(chunk)
        yield chunk


class BaseTransport(abc.ABC):
    """Abstract base class for HTTP transports.

    Every call builds its own httpx client and closes it before returning,
    so nothing set up for one request (body, method, one-shot headers) can
    leak into the next, and one transport may serve concurrent callers.
    """

    def __init__(self, config: HTTPConfig) -> None:
        self._config = config

    @property
    def config(self) -> HTTPConfig:
        return self._config

    def _client_kwargs(self) -> dict[str, Any]:
        return {
            "timeout": httpx.Timeout(self._config.timeout),
            "verify": self._config.verify,
            "follow_redirects": False,
        }

    def _prepare(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None,
        params: Mapping[str, Any] | None,
        body: RequestBody,
        content_length: int | None,
        *,
        async_content: bool,
    ) -> tuple[str, dict[str, str], Any]:
        request_headers = self._config.get_headers()
        if headers:
            request_headers.update({k.lower(): v for k, v in headers.items()})

        content: Any = None
        if method in QUERY_METHODS:
            query = encode_query(params)
            if query:
                url = f"{url}?{query}"
        elif method == "POST":
            # A Content-Type on an object POST replaces the stored one
            form = encode_query(params)
            if form:
                content = form.encode("ascii")
                request_headers["content-type"] = "application/x-www-form-urlencoded"
        elif method == "PUT":
            if content_length is None:
                content_length = compute_body_length(body)
            request_headers["content-length"] = str(content_length)
            if body is None:
                content = b""
            elif isinstance(body, (bytes, bytearray, memoryview)):
                content = bytes(body)
            elif async_content:
                content = _aiter_chunks(body, content_length)
            else:
                content = _iter_chunks(body, content_length)

        debug(f"> {method} {url}")
        return url, request_headers, content

    def _outcome(
        self, method: str, response: httpx.Response, total_time: float
    ) -> RequestOutcome:
        debug(f"< {response.status_code} {response.reason_phrase}")
        status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
        raw = build_envelope(
            status_line.rstrip().encode("ascii", errors="replace"),
            response.headers.raw,
            response.content,
        )
        headers, content = decode_envelope(raw)
        info = {
            "url": str(response.url),
            "method": method,
            "http_code": response.status_code,
            "total_time": total_time,
            "size_download": len(content),
            "content_type": response.headers.get("content-type"),
        }
        return RequestOutcome(info=info, headers=headers, content=content)

    @abc.abstractmethod
    async def execute(
        self,
        url: str,
        method: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        content_length: int | None = None,
    ) -> RequestOutcome:
        """Send one HTTP request and decompose its response."""
        ...


class BlockingTransport(BaseTransport):
    """
    Synchronous HTTP transport using httpx.Client.

    Methods are declared async but don't actually await anything,
    allowing them to be executed via iter_coroutine().
    """

    async def execute(
        self,
        url: str,
        method: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        content_length: int | None = None,
    ) -> RequestOutcome:
        method = method.upper()
        url, request_headers, content = self._prepare(
            method, url, headers, params, body, content_length, async_content=False
        )
        started = time.monotonic()
        with httpx.Client(**self._client_kwargs()) as client:
            response = client.request(method, url, content=content, headers=request_headers)
        return self._outcome(method, response, time.monotonic() - started)


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport using httpx.AsyncClient.

    File bodies are read in a worker thread, one chunk at a time, so an
    upload does not block the event loop on disk reads.
    """

    async def execute(
        self,
        url: str,
        method: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        content_length: int | None = None,
    ) -> RequestOutcome:
        method = method.upper()
        url, request_headers, content = self._prepare(
            method, url, headers, params, body, content_length, async_content=True
        )
        started = time.monotonic()
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            response = await client.request(
                method, url, content=content, headers=request_headers
            )
        return self._outcome(method, response, time.monotonic() - started)


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "RequestBody",
    "compute_body_length",
]
