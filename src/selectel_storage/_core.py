"""Core business logic shared by the blocking and async clients."""

from __future__ import annotations

import json
import os
import urllib.parse
from collections.abc import Mapping
from typing import Any

from ._http import BaseTransport
from .errors import ResourceNotFoundError, UnexpectedStatusError
from .tempurl import build_temp_url
from .types import ErrorMode, RequestOutcome, ResponseFormat, Session
from .utils import (
    ACCEPT_BY_FORMAT,
    archive_format,
    filter_headers,
    normalize_endpoint,
    parse_archive_response,
    parse_listing,
    resolve_format,
)

DEFAULT_LIMIT = 10000
CONTAINER_META_PREFIXES = ("x-container-meta-",)
OBJECT_META_PREFIXES = ("x-container-meta-", "x-object-meta-")


def _require_file(path: str | os.PathLike[str]) -> str:
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise ResourceNotFoundError(path)
    return path


class _BaseClient:
    """Base class with the async implementation common to every client.

    ``url`` is the root every name is appended to: the storage endpoint for
    an account, ``<endpoint><container>/`` for a container.
    """

    def __init__(
        self,
        url: str,
        session: Session,
        transport: BaseTransport,
        errors: ErrorMode = "raise",
    ) -> None:
        self._url = normalize_endpoint(url)
        self._session = session
        self._transport = transport
        self._errors: ErrorMode = errors

    @property
    def url(self) -> str:
        return self._url

    @property
    def session(self) -> Session:
        return self._session

    @property
    def response_format(self) -> ResponseFormat:
        return self._session.response_format

    def _auth_headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        headers = dict(extra or {})
        headers["X-Auth-Token"] = self._session.auth_token
        return headers

    def _error(self, code: int, operation: str) -> int:
        if self._errors == "raise":
            raise UnexpectedStatusError(code, operation)
        return code

    async def _execute(self, name: str, method: str, **kwargs: Any) -> RequestOutcome:
        return await self._transport.execute(self._url + name, method, **kwargs)

    async def _head_info(self, name: str = "") -> RequestOutcome:
        return await self._execute(name, "HEAD", headers=self._auth_headers())

    async def _fetch_listing(self, params: dict[str, Any]) -> RequestOutcome:
        return await self._execute("", "GET", headers=self._auth_headers(), params=params)

    async def _listing(self, params: dict[str, Any]) -> list[str] | str:
        outcome = await self._fetch_listing(params)
        return parse_listing(outcome.text, params["format"])

    async def _delete(self, name: str) -> dict[str, Any] | int:
        outcome = await self._execute(name, "DELETE", headers=self._auth_headers())
        if outcome.status_code != 204:
            return self._error(outcome.status_code, "delete")
        return outcome.info

    async def _copy(self, origin: str, destination: str) -> RequestOutcome:
        path = urllib.parse.urlsplit(self._url).path
        headers = self._auth_headers({"Destination": path + destination})
        return await self._execute(origin, "COPY", headers=headers)

    async def _set_meta_info(
        self,
        name: str,
        headers: Mapping[str, str],
        prefixes: tuple[str, ...],
        accepted: tuple[int, ...],
        operation: str,
    ) -> int:
        meta: dict[str, str] = {}
        for prefix in prefixes:
            meta.update(filter_headers(headers, prefix))
        outcome = await self._execute(name, "POST", headers=self._auth_headers(meta))
        if outcome.status_code not in accepted:
            return self._error(outcome.status_code, operation)
        return outcome.status_code

    async def _put_archive(
        self, archive_path: str | os.PathLike[str], extract_path: str | None = None
    ) -> Any:
        archive_path = _require_file(archive_path)
        fmt = self.response_format
        query = urllib.parse.urlencode({"extract-archive": archive_format(archive_path)})
        headers = self._auth_headers({"Accept": ACCEPT_BY_FORMAT.get(fmt, "text/plain")})
        with open(archive_path, "rb") as fp:
            outcome = await self._execute(
                f"{extract_path or ''}?{query}",
                "PUT",
                headers=headers,
                body=fp,
                content_length=os.path.getsize(archive_path),
            )
        if not outcome.is_success:
            return self._error(outcome.status_code, "put_archive")
        return parse_archive_response(outcome.text, fmt)

    def get_temp_url(
        self,
        key: str | bytes,
        path: str,
        expires: int,
        filename: str | None = None,
        method: str = "GET",
    ) -> str:
        """Return a link to ``path`` that works without a token until ``expires``.

        ``key`` must match the account's ``X-Account-Meta-Temp-URL-Key``
        (see ``set_account_meta_temp_url_key``); ``expires`` is a unix
        timestamp and ``filename`` an optional download name.
        """
        return build_temp_url(self._url, key, path, expires, filename, method)


class _BaseStorageClient(_BaseClient):
    """Account level operations."""

    _container_class: type[_BaseContainer]

    async def _get_info(self) -> dict[str, Any]:
        outcome = await self._head_info()
        return filter_headers(outcome.headers)

    async def _list_containers(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str = "",
        response_format: str | None = None,
    ) -> list[str] | str:
        params = {
            "limit": limit,
            "marker": marker,
            "format": resolve_format(response_format, self.response_format),
        }
        return await self._listing(params)

    async def _get_container(self, name: str) -> _BaseContainer | int:
        outcome = await self._head_info(name)
        if outcome.status_code != 204:
            return self._error(outcome.status_code, "get_container")
        return self._container_class(
            self._url + name,
            self._session,
            self._transport,
            self._errors,
            info=filter_headers(outcome.headers),
        )

    async def _create_container(
        self, name: str, headers: Mapping[str, str] | None = None
    ) -> _BaseContainer | int:
        outcome = await self._execute(name, "PUT", headers=self._auth_headers(headers))
        if outcome.status_code not in (201, 202):
            return self._error(outcome.status_code, "create_container")
        return await self._get_container(name)

    async def _set_container_headers(self, name: str, headers: Mapping[str, str]) -> int:
        return await self._set_meta_info(
            name, headers, CONTAINER_META_PREFIXES, (204,), "set_container_headers"
        )

    async def _set_account_meta_temp_url_key(self, key: str) -> int:
        headers = self._auth_headers({"X-Account-Meta-Temp-URL-Key": key})
        outcome = await self._execute("", "POST", headers=headers)
        if outcome.status_code != 202:
            return self._error(outcome.status_code, "set_account_meta_temp_url_key")
        return outcome.status_code


class _BaseContainer(_BaseClient):
    """Container level operations.

    Holds a snapshot of the container's ``x-*`` headers, taken from the HEAD
    that located the container or fetched on the first ``get_info`` call.
    The snapshot is only refreshed on request.
    """

    def __init__(
        self,
        url: str,
        session: Session,
        transport: BaseTransport,
        errors: ErrorMode = "raise",
        info: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(url, session, transport, errors)
        self._info: dict[str, Any] | None = dict(info) if info else None

    @property
    def name(self) -> str:
        return self._url.rstrip("/").rsplit("/", 1)[-1]

    async def _get_info(self, refresh: bool = False) -> dict[str, Any] | int:
        if not refresh and self._info is not None:
            return self._info
        outcome = await self._head_info()
        if outcome.status_code != 204:
            return self._error(outcome.status_code, "get_info")
        self._info = filter_headers(outcome.headers)
        return self._info

    async def _get_file(
        self, name: str, headers: Mapping[str, str] | None = None
    ) -> RequestOutcome:
        return await self._execute(name, "GET", headers=self._auth_headers(headers))

    async def _list_files(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str | None = None,
        prefix: str | None = None,
        path: str | None = None,
        delimiter: str | None = None,
        response_format: str | None = None,
    ) -> list[str] | str:
        params = {
            "limit": limit,
            "marker": marker,
            "prefix": prefix,
            "path": path,
            "delimiter": delimiter,
            "format": resolve_format(response_format, self.response_format),
        }
        return await self._listing(params)

    async def _get_file_info(self, name: str) -> Any:
        params = {"limit": 1, "marker": "", "prefix": name, "format": "json"}
        outcome = await self._fetch_listing(params)
        if not outcome.is_success:
            return self._error(outcome.status_code, "get_file_info")
        listing = outcome.text.strip()
        entries = json.loads(listing) if listing else []
        info = entries[0] if entries else None
        if self.response_format == "json":
            return json.dumps(info)
        return info

    async def _put_file(
        self,
        local_path: str | os.PathLike[str],
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        local_path = _require_file(local_path)
        if remote_name is None:
            remote_name = os.path.basename(local_path)
        with open(local_path, "rb") as fp:
            outcome = await self._execute(
                remote_name,
                "PUT",
                headers=self._auth_headers(headers),
                body=fp,
                content_length=os.path.getsize(local_path),
            )
        if outcome.status_code != 201:
            return self._error(outcome.status_code, "put_file")
        return outcome.info

    async def _put_file_contents(
        self,
        contents: bytes | str,
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        outcome = await self._execute(
            remote_name or "",
            "PUT",
            headers=self._auth_headers(headers),
            body=contents,
            content_length=len(contents),
        )
        if outcome.status_code != 201:
            return self._error(outcome.status_code, "put_file_contents")
        return outcome.info

    async def _set_file_headers(self, name: str, headers: Mapping[str, str]) -> int:
        return await self._set_meta_info(
            name, headers, OBJECT_META_PREFIXES, (202, 204), "set_file_headers"
        )

    async def _create_directory(self, name: str) -> dict[str, Any]:
        headers = self._auth_headers({"Content-Type": "application/directory"})
        outcome = await self._execute(name, "PUT", headers=headers)
        return outcome.info
