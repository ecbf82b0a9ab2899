from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

ResponseFormat = Literal["", "json", "xml"]
ErrorMode = Literal["raise", "return"]

RESPONSE_FORMATS: tuple[str, ...] = ("", "json", "xml")


@dataclass(frozen=True, slots=True)
class Session:
    endpoint_url: str
    auth_token: str
    response_format: ResponseFormat = ""


@dataclass(slots=True)
class RequestOutcome:
    """Everything a single request produced.

    ``info`` holds transport metadata (``url``, ``method``, ``http_code``,
    ``total_time``, ``size_download``, ``content_type``). ``headers`` is the
    parsed header block, keyed by lowercase name, plus the synthesized
    ``HTTP-Version`` and ``HTTP-Code`` entries.
    """

    info: dict[str, Any]
    headers: dict[str, Any]
    content: bytes = b""

    @property
    def status_code(self) -> int:
        return int(self.info["http_code"])

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


@runtime_checkable
class SupportsObjectMetadata(Protocol):
    """Clients able to set metadata on individual objects (containers only)."""

    def set_file_headers(self, name: str, headers: Mapping[str, str]) -> Any: ...
