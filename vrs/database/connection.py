"""Process-wide document store connection.

``get_connection()`` hands every request handler the same ``Connection``.
The first caller starts the one connection attempt; callers arriving while it
is in flight await that same attempt. A failed attempt is forgotten so the
next call retries.

Supported connection strings (``VRS_DATABASE_URL``)::

    firestore://<project>[/<database>]
    memory://[<name>]
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Tuple
from urllib.parse import urlsplit

from vrs.config import runtime_config
from vrs.database.memory import get_memory_database

try:  # pragma: no cover - optional dependency
    from google.cloud import firestore  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    firestore = None

logger = logging.getLogger(__name__)

BACKEND_FIRESTORE = "firestore"
BACKEND_MEMORY = "memory"
DEFAULT_FIRESTORE_DATABASE = "(default)"


class StoreError(RuntimeError):
    """Base document store error."""


class StoreNotConnected(StoreError):
    """Raised when the store is used through a connection that is not open."""


class UnsupportedDatabaseURL(StoreError):
    """Raised for connection strings with an unknown scheme or missing target."""


class Connection:
    """Ready handle to a document store backend."""

    def __init__(
        self,
        backend: str,
        client: Any,
        target: str,
        closer: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.backend = backend
        self.target = target
        self._client = client
        self._closer = closer
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def client(self) -> Any:
        # No command buffering: a closed handle fails immediately.
        if not self._open:
            raise StoreNotConnected(f"{self.backend} connection to {self.target} is not open")
        return self._client

    async def close(self) -> None:
        if not self._open:
            return
        self._open = False
        if self._closer is not None:
            result = self._closer()
            if inspect.isawaitable(result):
                await result


def describe_url(url: str) -> str:
    """Return ``url`` without any credentials, for logs."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return f"{parts.scheme}://{host}{parts.path}"


def parse_database_url(url: str) -> Tuple[str, str, Optional[str]]:
    """Split a connection string into ``(backend, target, database)``."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    path = parts.path.strip("/") or None
    if scheme == BACKEND_MEMORY:
        return BACKEND_MEMORY, parts.netloc or path or "default", None
    if scheme == BACKEND_FIRESTORE:
        if not parts.netloc:
            raise UnsupportedDatabaseURL("firestore:// connection string requires a project")
        return BACKEND_FIRESTORE, parts.netloc, path or DEFAULT_FIRESTORE_DATABASE
    raise UnsupportedDatabaseURL(f"unsupported document store scheme: {parts.scheme or '<none>'}")


async def _open_firestore(project: str, database: str) -> Connection:  # pragma: no cover - needs GCP
    if firestore is None:
        raise StoreError("google-cloud-firestore not installed")
    client = firestore.AsyncClient(project=project, database=database)
    # Probe so an unreachable store fails here rather than on first request.
    await client.collection(runtime_config.get_resources_collection()).limit(1).get()
    return Connection(BACKEND_FIRESTORE, client, f"{project}/{database}", closer=getattr(client, "close", None))


async def open_connection(url: str) -> Connection:
    backend, target, database = parse_database_url(url)
    if backend == BACKEND_MEMORY:
        db = get_memory_database(target)
        return Connection(BACKEND_MEMORY, db, target)
    return await _open_firestore(target, database or DEFAULT_FIRESTORE_DATABASE)


Opener = Callable[[str], Awaitable[Connection]]


class ConnectionManager:
    def __init__(self, url: Optional[str] = None, opener: Optional[Opener] = None) -> None:
        self._url = url
        self._opener = opener or open_connection
        self._connection: Optional[Connection] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def connection(self) -> Optional[Connection]:
        return self._connection

    async def get_connection(self) -> Connection:
        if self._connection is not None:
            return self._connection
        if self._pending is None:
            url = self._url or runtime_config.require_database_url()
            task = asyncio.ensure_future(self._attempt(url))
            task.add_done_callback(self._settle)
            self._pending = task
        # Shielded: an abandoned request must not cancel the shared attempt.
        connection = await asyncio.shield(self._pending)
        if connection is not self._connection:
            raise StoreNotConnected("connection attempt was superseded by close()")
        return connection

    def _settle(self, task: asyncio.Future) -> None:
        # Runs once per attempt, whether or not anyone is still waiting on it.
        if task.cancelled() or task.exception() is not None:
            if self._pending is task:
                self._pending = None
            return
        if self._pending is not task:
            # close() ran while this attempt was in flight.
            asyncio.ensure_future(task.result().close())
            return
        self._connection = task.result()

    async def _attempt(self, url: str) -> Connection:
        try:
            connection = await self._opener(url)
        except Exception as exc:
            logger.warning("Document store connection to %s failed: %s", describe_url(url), exc)
            raise
        logger.info("Connected to %s document store %s", connection.backend, connection.target)
        return connection

    async def close(self) -> None:
        connection = self._connection
        self._connection = None
        self._pending = None
        if connection is not None:
            await connection.close()
            logger.info("Closed %s document store %s", connection.backend, connection.target)


_default_manager: Optional[ConnectionManager] = None


def get_connection_manager() -> ConnectionManager:
    global _default_manager
    if _default_manager is None:
        _default_manager = ConnectionManager()
    return _default_manager


def set_connection_manager(manager: Optional[ConnectionManager]) -> None:
    global _default_manager
    _default_manager = manager


async def get_connection() -> Connection:
    return await get_connection_manager().get_connection()
