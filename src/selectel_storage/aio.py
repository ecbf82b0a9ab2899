"""Async storage clients."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from ._core import DEFAULT_LIMIT, _BaseContainer, _BaseStorageClient
from ._http import AsyncTransport, BaseTransport, HTTPConfig
from .auth import authenticate_async
from .types import ErrorMode, RequestOutcome, Session


class AsyncContainer(_BaseContainer):
    """Asynchronous client for one container."""

    async def get_info(self, refresh: bool = False) -> dict[str, Any] | int:
        return await self._get_info(refresh)

    async def get_file(
        self, name: str, headers: Mapping[str, str] | None = None
    ) -> RequestOutcome:
        return await self._get_file(name, headers)

    async def get_file_info(self, name: str) -> Any:
        return await self._get_file_info(name)

    async def list_files(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str | None = None,
        prefix: str | None = None,
        path: str | None = None,
        delimiter: str | None = None,
        response_format: str | None = None,
    ) -> list[str] | str:
        return await self._list_files(limit, marker, prefix, path, delimiter, response_format)

    async def put_file(
        self,
        local_path: str | os.PathLike[str],
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        return await self._put_file(local_path, remote_name, headers)

    async def put_file_contents(
        self,
        contents: bytes | str,
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        return await self._put_file_contents(contents, remote_name, headers)

    async def set_file_headers(self, name: str, headers: Mapping[str, str]) -> int:
        return await self._set_file_headers(name, headers)

    async def create_directory(self, name: str) -> dict[str, Any]:
        return await self._create_directory(name)

    async def delete(self, name: str) -> dict[str, Any] | int:
        return await self._delete(name)

    async def copy(self, origin: str, destination: str) -> RequestOutcome:
        return await self._copy(origin, destination)

    async def put_archive(
        self, archive_path: str | os.PathLike[str], extract_path: str | None = None
    ) -> Any:
        return await self._put_archive(archive_path, extract_path)


class AsyncStorageClient(_BaseStorageClient):
    """Asynchronous client for a storage account.

    Calls do not share connections, so one client can serve many tasks at
    once::

        client = await AsyncStorageClient.login("12345", "secret")
        photos, docs = await asyncio.gather(
            client.get_container("photos"), client.get_container("docs")
        )
    """

    _container_class = AsyncContainer

    def __init__(
        self,
        session: Session,
        *,
        config: HTTPConfig | None = None,
        errors: ErrorMode = "raise",
        transport: BaseTransport | None = None,
    ) -> None:
        transport = transport or AsyncTransport(config or HTTPConfig())
        super().__init__(session.endpoint_url, session, transport, errors)

    @classmethod
    async def login(
        cls,
        user: str | None = None,
        key: str | None = None,
        response_format: str | None = None,
        *,
        config: HTTPConfig | None = None,
        errors: ErrorMode = "raise",
    ) -> AsyncStorageClient | int:
        config = config or HTTPConfig()
        session = await authenticate_async(
            user, key, response_format=response_format, config=config, errors=errors
        )
        if isinstance(session, int):
            return session
        return cls(session, config=config, errors=errors)

    async def get_info(self) -> dict[str, Any]:
        return await self._get_info()

    async def list_containers(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str = "",
        response_format: str | None = None,
    ) -> list[str] | str:
        return await self._list_containers(limit, marker, response_format)

    async def create_container(
        self, name: str, headers: Mapping[str, str] | None = None
    ) -> AsyncContainer | int:
        return await self._create_container(name, headers)  # type: ignore[return-value]

    async def get_container(self, name: str) -> AsyncContainer | int:
        return await self._get_container(name)  # type: ignore[return-value]

    async def delete(self, name: str) -> dict[str, Any] | int:
        return await self._delete(name)

    async def copy(self, origin: str, destination: str) -> RequestOutcome:
        return await self._copy(origin, destination)

    async def set_container_headers(self, name: str, headers: Mapping[str, str]) -> int:
        return await self._set_container_headers(name, headers)

    async def set_account_meta_temp_url_key(self, key: str) -> int:
        return await self._set_account_meta_temp_url_key(key)

    async def put_archive(
        self, archive_path: str | os.PathLike[str], extract_path: str | None = None
    ) -> Any:
        return await self._put_archive(archive_path, extract_path)


__all__ = ["AsyncStorageClient", "AsyncContainer"]
