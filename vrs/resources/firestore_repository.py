"""Firestore-backed resource repository (async client)."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from vrs.config import runtime_config
from vrs.database.connection import Connection
from vrs.resources.schemas import Resource

try:  # pragma: no cover - optional dependency
    from google.api_core import exceptions as gcp_exceptions  # type: ignore
    from google.cloud import firestore  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    firestore = None
    gcp_exceptions = None


class FirestoreResourceRepository:
    def __init__(self, connection: Connection, collection: Optional[str] = None) -> None:
        if firestore is None:
            raise RuntimeError("google-cloud-firestore not installed")
        self._connection = connection
        self._collection_name = collection or runtime_config.get_resources_collection()

    def _col(self):
        return self._connection.client.collection(self._collection_name)

    @staticmethod
    def _from_snapshot(snap) -> Optional[Resource]:
        if not snap or not snap.exists:
            return None
        data = snap.to_dict() or {}
        data.setdefault("id", snap.id)
        return Resource(**data)

    async def create(self, resource: Resource) -> Resource:
        # create() rejects an existing document id instead of overwriting it.
        await self._col().document(resource.id).create(resource.to_document())
        return resource

    async def get(self, resource_id: str) -> Optional[Resource]:
        snap = await self._col().document(resource_id).get()
        return self._from_snapshot(snap)

    async def list(self) -> List[Resource]:
        query = self._col().order_by("createdAt", direction=firestore.Query.DESCENDING)
        items: List[Resource] = []
        async for snap in query.stream():
            resource = self._from_snapshot(snap)
            if resource is not None:
                items.append(resource)
        return items

    async def _update_fields(self, resource_id: str, fields: Dict[str, Any]) -> Optional[Resource]:
        doc = self._col().document(resource_id)
        try:
            await doc.update(fields)
        except gcp_exceptions.NotFound:
            return None
        return self._from_snapshot(await doc.get())

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Resource]:
        if not changes:
            return await self.get(resource_id)
        return await self._update_fields(resource_id, changes)

    async def increment_downloads(self, resource_id: str, amount: int = 1) -> Optional[Resource]:
        return await self._update_fields(resource_id, {"downloads": firestore.Increment(amount)})

    async def delete(self, resource_id: str) -> bool:
        doc = self._col().document(resource_id)
        snap = await doc.get()
        if not snap or not snap.exists:
            return False
        await doc.delete()
        return True
