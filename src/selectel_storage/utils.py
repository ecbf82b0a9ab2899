from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from .types import RESPONSE_FORMATS, ResponseFormat

ACCEPT_BY_FORMAT = {
    "json": "application/json",
    "xml": "application/xml",
    "": "text/plain",
}
# Compound suffixes the extract-archive middleware understands
ARCHIVE_FORMATS = ("tar.gz", "tar.bz2")


def debug(message: str, *args: Any) -> None:
    try:
        debug_env = os.getenv("DEBUG", "")
        if "storage" in debug_env:
            print(f"selectel-storage: {message}", *args)
    except Exception:
        pass


def normalize_endpoint(url: str) -> str:
    """Ensure url ends with a single trailing slash so names can be appended."""
    return url.rstrip("/") + "/"


def resolve_format(requested: str | None, current: ResponseFormat) -> ResponseFormat:
    """Return ``requested`` when it is a known format, else ``current``."""
    if requested in RESPONSE_FORMATS:
        return requested  # type: ignore[return-value]
    return current


def filter_headers(headers: Mapping[str, Any], prefix: str = "x-") -> dict[str, Any]:
    """Select the headers whose name starts with ``prefix``, ignoring case."""
    prefix = prefix.lower()
    return {k: v for k, v in headers.items() if k.lower().startswith(prefix)}


def parse_listing(text: str, response_format: str) -> Any:
    """Turn a listing body into names, decoded JSON or trimmed text.

    Plain listings are one name per line; an empty body lists nothing.
    """
    body = text.strip()
    if response_format == "":
        return body.split("\n") if body else []
    return body


def parse_archive_response(text: str, response_format: str) -> Any:
    if response_format == "json":
        return json.loads(text)
    return parse_listing(text, response_format)


def archive_format(path: str) -> str:
    name = os.path.basename(path).lower()
    for compound in ARCHIVE_FORMATS:
        if name.endswith("." + compound):
            return compound
    _, ext = os.path.splitext(name)
    return ext[1:]


__all__ = [
    "ACCEPT_BY_FORMAT",
    "archive_format",
    "debug",
    "filter_headers",
    "normalize_endpoint",
    "parse_archive_response",
    "parse_listing",
    "resolve_format",
]
