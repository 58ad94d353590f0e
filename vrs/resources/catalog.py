"""Capability set shared by the store-backed service and the mock API.

Presentation code and tests are written against ``ResourceCatalog``; which
implementation backs a page is a wiring decision.
"""
from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable

from vrs.resources.schemas import Resource
from vrs.resources.service import (
    InvalidResourceId,
    ResourceNotFound,
    ResourceService,
    get_resource_service,
)


@runtime_checkable
class ResourceCatalog(Protocol):
    async def list_resources(self) -> List[Resource]:
        ...

    async def search_resources(self, query: str) -> List[Resource]:
        ...

    async def upload_resource(self, payload: Any) -> Resource:
        ...

    async def record_download(self, resource_id: str) -> Resource:
        ...


class StoreResourceCatalog:
    """ResourceCatalog over the real document store."""

    def __init__(self, service: Optional[ResourceService] = None) -> None:
        self._service = service

    @property
    def service(self) -> ResourceService:
        return self._service or get_resource_service()

    async def list_resources(self) -> List[Resource]:
        return await self.service.list_resources()

    async def search_resources(self, query: str) -> List[Resource]:
        return await self.service.list_resources(query=query)

    async def upload_resource(self, payload: Any) -> Resource:
        return await self.service.create_resource(payload)

    async def record_download(self, resource_id: str) -> Resource:
        try:
            return await self.service.record_download(resource_id)
        except InvalidResourceId as exc:
            # A malformed id names nothing in the catalog.
            raise ResourceNotFound(f"resource {resource_id} not found") from exc
