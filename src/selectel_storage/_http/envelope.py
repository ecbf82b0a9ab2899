"""Raw response envelope codec.

A response envelope is the status line, the header lines, a blank line and
the body, exactly as they travel on the wire::

    HTTP/1.1 204 No Content\\r\\n
    X-Storage-Url: https://...\\r\\n
    \\r\\n
    <body>
"""

from __future__ import annotations

import re
import urllib.parse
from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MalformedResponseError

CRLF = b"\r\n"
HEAD_SEPARATOR = CRLF + CRLF
# Swift metadata values are UTF-8; undecodable bytes survive as surrogates
HEAD_ENCODING = "utf-8"
STATUS_LINE_RE = re.compile(r"^HTTP/(\S+) (\d{3})(?:\s|$)")


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Serialize params as ``key=value&...``.

    Values use their ``str()`` form; empty strings still emit ``key=`` while
    ``None`` drops the key entirely.
    """
    if not params:
        return ""
    pairs = [(k, str(v)) for k, v in params.items() if v is not None]
    return urllib.parse.urlencode(pairs)


def build_envelope(
    status_line: bytes,
    header_items: Iterable[tuple[bytes, bytes]],
    body: bytes,
) -> bytes:
    """Join raw header bytes into an envelope, leaving them undecoded."""
    head = CRLF.join([status_line, *(k + b": " + v for k, v in header_items)])
    return head + HEAD_SEPARATOR + body


def split_envelope(raw: bytes) -> tuple[str, bytes]:
    """Split an envelope on its first blank line.

    Any further separators belong to the body and are put back.
    """
    head, *rest = raw.split(HEAD_SEPARATOR)
    return head.decode(HEAD_ENCODING, errors="surrogateescape"), HEAD_SEPARATOR.join(rest)


def parse_head(head: str) -> dict[str, Any]:
    """Parse a header block into a flat mapping.

    The status line yields ``HTTP-Version`` and ``HTTP-Code``; every
    ``Name: value`` line is stored under its lowercase name, the last
    occurrence of a repeated header winning.
    """
    lines = head.split("\r\n")
    match = STATUS_LINE_RE.match(lines[0])
    if match is None:
        raise MalformedResponseError(lines[0])

    result: dict[str, Any] = {
        "HTTP-Version": match.group(1),
        "HTTP-Code": int(match.group(2)),
    }
    for line in lines[1:]:
        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            continue
        result[name.lower()] = value.strip()
    return result


def decode_envelope(raw: bytes) -> tuple[dict[str, Any], bytes]:
    head, body = split_envelope(raw)
    return parse_head(head), body


__all__ = [
    "build_envelope",
    "decode_envelope",
    "encode_query",
    "parse_head",
    "split_envelope",
]
