"""Storage abstractions for resources."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Protocol

from vrs.config import runtime_config
from vrs.database.connection import BACKEND_FIRESTORE, BACKEND_MEMORY, Connection, StoreError
from vrs.resources.schemas import Resource


class ResourceRepository(Protocol):
    async def create(self, resource: Resource) -> Resource:
        ...

    async def get(self, resource_id: str) -> Optional[Resource]:
        ...

    async def list(self) -> List[Resource]:
        ...

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Resource]:
        ...

    async def increment_downloads(self, resource_id: str, amount: int = 1) -> Optional[Resource]:
        ...

    async def delete(self, resource_id: str) -> bool:
        ...


class InMemoryResourceRepository:
    """Resources held in an ``InMemoryDatabase`` collection, stored as plain documents."""

    def __init__(self, connection: Connection, collection: Optional[str] = None) -> None:
        self._connection = connection
        self._collection_name = collection or runtime_config.get_resources_collection()

    def _docs(self) -> Dict[str, Dict[str, Any]]:
        return self._connection.client.collection(self._collection_name)

    async def create(self, resource: Resource) -> Resource:
        self._docs()[resource.id] = resource.to_document()
        return resource

    async def get(self, resource_id: str) -> Optional[Resource]:
        doc = self._docs().get(resource_id)
        if doc is None:
            return None
        return Resource(**copy.deepcopy(doc))

    async def list(self) -> List[Resource]:
        docs = list(self._docs().values())
        # newest first; equal timestamps keep the later insert ahead
        order = sorted(range(len(docs)), key=lambda i: (docs[i]["createdAt"], i), reverse=True)
        return [Resource(**copy.deepcopy(docs[i])) for i in order]

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Resource]:
        docs = self._docs()
        doc = docs.get(resource_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(changes))
        return Resource(**copy.deepcopy(doc))

    async def increment_downloads(self, resource_id: str, amount: int = 1) -> Optional[Resource]:
        doc = self._docs().get(resource_id)
        if doc is None:
            return None
        doc["downloads"] = int(doc.get("downloads") or 0) + amount
        return Resource(**copy.deepcopy(doc))

    async def delete(self, resource_id: str) -> bool:
        return self._docs().pop(resource_id, None) is not None


def resource_repo_for(connection: Connection, collection: Optional[str] = None) -> ResourceRepository:
    if connection.backend == BACKEND_MEMORY:
        return InMemoryResourceRepository(connection, collection)
    if connection.backend == BACKEND_FIRESTORE:
        from vrs.resources.firestore_repository import FirestoreResourceRepository

        return FirestoreResourceRepository(connection, collection)
    raise StoreError(f"no resource repository for backend {connection.backend!r}")
