"""Blocking storage clients."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from ._core import DEFAULT_LIMIT, _BaseContainer, _BaseStorageClient
from ._http import BaseTransport, BlockingTransport, HTTPConfig, iter_coroutine
from .auth import authenticate
from .types import ErrorMode, RequestOutcome, Session


class Container(_BaseContainer):
    """Synchronous client for one container.

    Usually obtained from :meth:`StorageClient.get_container` or
    :meth:`StorageClient.create_container`.
    """

    def get_info(self, refresh: bool = False) -> dict[str, Any] | int:
        """Return the container's ``x-*`` headers, re-reading them if ``refresh``."""
        return iter_coroutine(self._get_info(refresh))

    def get_file(self, name: str, headers: Mapping[str, str] | None = None) -> RequestOutcome:
        """Download an object.

        ``headers`` may carry conditional headers such as ``If-None-Match``
        or ``If-Modified-Since``. The status code is not checked: a 304 or
        404 comes back as an ordinary outcome.
        """
        return iter_coroutine(self._get_file(name, headers))

    def get_file_info(self, name: str) -> Any:
        """Return the listing entry of ``name`` (None when nothing matches).

        A non-2xx listing is a status failure, raised or returned according
        to the error mode.
        """
        return iter_coroutine(self._get_file_info(name))

    def list_files(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str | None = None,
        prefix: str | None = None,
        path: str | None = None,
        delimiter: str | None = None,
        response_format: str | None = None,
    ) -> list[str] | str:
        """List object names, or the raw JSON/XML listing for those formats."""
        return iter_coroutine(
            self._list_files(limit, marker, prefix, path, delimiter, response_format)
        )

    def put_file(
        self,
        local_path: str | os.PathLike[str],
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        """Upload a local file, named after its base name unless ``remote_name`` is given."""
        return iter_coroutine(self._put_file(local_path, remote_name, headers))

    def put_file_contents(
        self,
        contents: bytes | str,
        remote_name: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | int:
        return iter_coroutine(self._put_file_contents(contents, remote_name, headers))

    def set_file_headers(self, name: str, headers: Mapping[str, str]) -> int:
        """Replace the metadata of object ``name`` with the meta headers in ``headers``."""
        return iter_coroutine(self._set_file_headers(name, headers))

    def create_directory(self, name: str) -> dict[str, Any]:
        """Create an empty ``application/directory`` marker object. Not status-checked."""
        return iter_coroutine(self._create_directory(name))

    def delete(self, name: str) -> dict[str, Any] | int:
        return iter_coroutine(self._delete(name))

    def copy(self, origin: str, destination: str) -> RequestOutcome:
        return iter_coroutine(self._copy(origin, destination))

    def put_archive(
        self, archive_path: str | os.PathLike[str], extract_path: str | None = None
    ) -> Any:
        return iter_coroutine(self._put_archive(archive_path, extract_path))


class StorageClient(_BaseStorageClient):
    """Synchronous client for a storage account.

    Build one with :meth:`login`, or from an existing :class:`Session`::

        client = StorageClient.login("12345", "secret")
        photos = client.create_container("photos")
        photos.put_file("/tmp/cat.jpg")

    ``errors="return"`` makes operations return the HTTP status code
    instead of raising :class:`~selectel_storage.errors.UnexpectedStatusError`.
    """

    _container_class = Container

    def __init__(
        self,
        session: Session,
        *,
        config: HTTPConfig | None = None,
        errors: ErrorMode = "raise",
        transport: BaseTransport | None = None,
    ) -> None:
        transport = transport or BlockingTransport(config or HTTPConfig())
        super().__init__(session.endpoint_url, session, transport, errors)

    @classmethod
    def login(
        cls,
        user: str | None = None,
        key: str | None = None,
        response_format: str | None = None,
        *,
        config: HTTPConfig | None = None,
        errors: ErrorMode = "raise",
    ) -> StorageClient | int:
        """Authenticate and return a client bound to the new session."""
        config = config or HTTPConfig()
        session = authenticate(
            user, key, response_format=response_format, config=config, errors=errors
        )
        if isinstance(session, int):
            return session
        return cls(session, config=config, errors=errors)

    def get_info(self) -> dict[str, Any]:
        """Return the account's ``x-*`` headers (usage counters, metadata)."""
        return iter_coroutine(self._get_info())

    def list_containers(
        self,
        limit: int = DEFAULT_LIMIT,
        marker: str = "",
        response_format: str | None = None,
    ) -> list[str] | str:
        return iter_coroutine(self._list_containers(limit, marker, response_format))

    def create_container(
        self, name: str, headers: Mapping[str, str] | None = None
    ) -> Container | int:
        return iter_coroutine(self._create_container(name, headers))  # type: ignore[return-value]

    def get_container(self, name: str) -> Container | int:
        return iter_coroutine(self._get_container(name))  # type: ignore[return-value]

    def delete(self, name: str) -> dict[str, Any] | int:
        """Delete a container (which must be empty) or an object ``container/name``."""
        return iter_coroutine(self._delete(name))

    def copy(self, origin: str, destination: str) -> RequestOutcome:
        """Server side copy of ``origin`` to ``destination``.

        The outcome is returned whatever its status; check
        ``outcome.status_code`` yourself.
        """
        return iter_coroutine(self._copy(origin, destination))

    def set_container_headers(self, name: str, headers: Mapping[str, str]) -> int:
        return iter_coroutine(self._set_container_headers(name, headers))

    def set_account_meta_temp_url_key(self, key: str) -> int:
        """Store the secret temp URLs are signed with. Needed once per account."""
        return iter_coroutine(self._set_account_meta_temp_url_key(key))

    def put_archive(
        self, archive_path: str | os.PathLike[str], extract_path: str | None = None
    ) -> Any:
        """Upload an archive and have the server unpack it under ``extract_path``."""
        return iter_coroutine(self._put_archive(archive_path, extract_path))


__all__ = ["StorageClient", "Container"]
