from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import pytest

firestore = pytest.importorskip("google.cloud.firestore")
from google.api_core import exceptions as gcp_exceptions  # noqa: E402

from vrs.database.connection import BACKEND_FIRESTORE, Connection  # noqa: E402
from vrs.resources.firestore_repository import FirestoreResourceRepository  # noqa: E402
from vrs.resources.repository import resource_repo_for  # noqa: E402
from vrs.resources.schemas import Resource  # noqa: E402


class _Snapshot:
    def __init__(self, doc_id: str, data: Optional[Dict[str, Any]]) -> None:
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class _Document:
    def __init__(self, store: Dict[str, Dict[str, Any]], doc_id: str) -> None:
        self._store = store
        self.id = doc_id

    async def create(self, data):
        if self.id in self._store:
            raise gcp_exceptions.AlreadyExists(self.id)
        self._store[self.id] = copy.deepcopy(data)

    async def get(self):
        return _Snapshot(self.id, self._store.get(self.id))

    async def update(self, fields):
        if self.id not in self._store:
            raise gcp_exceptions.NotFound(self.id)
        doc = self._store[self.id]
        for key, value in fields.items():
            if isinstance(value, firestore.Increment):
                doc[key] = doc.get(key, 0) + value.value
            else:
                doc[key] = value

    async def delete(self):
        self._store.pop(self.id, None)


class _Query:
    def __init__(self, store, field: str, direction: str) -> None:
        self._store = store
        self._field = field
        self._direction = direction

    async def stream(self):
        reverse = self._direction == firestore.Query.DESCENDING
        for doc_id, data in sorted(self._store.items(), key=lambda kv: kv[1][self._field], reverse=reverse):
            yield _Snapshot(doc_id, data)


class _Collection:
    def __init__(self) -> None:
        self.docs: Dict[str, Dict[str, Any]] = {}

    def document(self, doc_id: str) -> _Document:
        return _Document(self.docs, doc_id)

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        return _Query(self.docs, field, direction)


class _Client:
    def __init__(self) -> None:
        self.collections: Dict[str, _Collection] = {}

    def collection(self, name: str) -> _Collection:
        return self.collections.setdefault(name, _Collection())


@pytest.fixture
def client() -> _Client:
    return _Client()


@pytest.fixture
def repo(client) -> FirestoreResourceRepository:
    connection = Connection(BACKEND_FIRESTORE, client, "proj/(default)")
    found = resource_repo_for(connection, "resources")
    assert isinstance(found, FirestoreResourceRepository)
    return found


def _resource(title: str, minutes: int = 0) -> Resource:
    return Resource(
        title=title,
        type="PDF",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
    )


@pytest.mark.asyncio
async def test_documents_use_json_field_names(repo, client):
    created = await repo.create(_resource("Graphs"))
    stored = client.collection("resources").docs[created.id]
    assert set(stored) == {"id", "title", "type", "downloads", "uploadedBy", "createdAt"}
    assert (await repo.get(created.id)) == created


@pytest.mark.asyncio
async def test_list_orders_by_created_at_descending(repo):
    old = await repo.create(_resource("old", 0))
    new = await repo.create(_resource("new", 5))
    assert [r.id for r in await repo.list()] == [new.id, old.id]


@pytest.mark.asyncio
async def test_update_and_increment(repo):
    created = await repo.create(_resource("Graphs"))

    updated = await repo.update(created.id, {"type": "Video"})
    bumped = await repo.increment_downloads(created.id)

    assert updated.type == "Video"
    assert bumped.downloads == 1
    assert await repo.update("0" * 32, {"type": "Video"}) is None
    assert await repo.increment_downloads("0" * 32) is None


@pytest.mark.asyncio
async def test_delete_reports_match(repo):
    created = await repo.create(_resource("Graphs"))
    assert await repo.delete(created.id) is True
    assert await repo.delete(created.id) is False
    assert await repo.get(created.id) is None
