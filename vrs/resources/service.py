"""Service layer for resource CRUD against the document store."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pydantic import ValidationError

from vrs.database.connection import Connection, get_connection
from vrs.resources.repository import ResourceRepository, resource_repo_for
from vrs.resources.schemas import (
    RESOURCE_ID_PATTERN,
    Resource,
    ResourceCreate,
    new_resource_id,
    normalize_patch,
)

logger = logging.getLogger(__name__)

ConnectionProvider = Callable[[], Awaitable[Connection]]
RepositoryFactory = Callable[[Connection, Optional[str]], ResourceRepository]


class ResourceError(Exception):
    """Base resource error."""


class ResourceNotFound(ResourceError):
    """Raised when no stored resource matches the identifier."""


class InvalidResourceId(ResourceError):
    """Raised for identifiers that cannot name a stored resource."""


class ResourceValidationError(ResourceError):
    """Raised when a candidate record breaks the resource schema."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_resource_id(raw: str) -> str:
    value = (raw or "").strip().lower()
    if not RESOURCE_ID_PATTERN.match(value):
        raise InvalidResourceId(f"malformed resource id: {raw!r}")
    return value


def _require_mapping(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ResourceValidationError("resource payload must be a JSON object")
    return payload


def matches_query(resource: Resource, query: str) -> bool:
    needle = query.lower()
    return needle in resource.title.lower() or needle in resource.type.lower()


class ResourceService:
    def __init__(
        self,
        connection_provider: Optional[ConnectionProvider] = None,
        repo_factory: Optional[RepositoryFactory] = None,
        id_fn: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        collection: Optional[str] = None,
    ) -> None:
        self._connection_provider = connection_provider
        self._repo_factory = repo_factory or resource_repo_for
        self._id_fn = id_fn or new_resource_id
        self._clock = clock or _utc_now
        self._collection = collection

    async def _repo(self) -> ResourceRepository:
        provider = self._connection_provider or get_connection
        connection = await provider()
        return self._repo_factory(connection, self._collection)

    async def list_resources(self, query: Optional[str] = None) -> List[Resource]:
        repo = await self._repo()
        resources = await repo.list()
        if query:
            resources = [r for r in resources if matches_query(r, query)]
        return resources

    async def create_resource(self, payload: Any) -> Resource:
        try:
            draft = ResourceCreate.model_validate(_require_mapping(payload))
            resource = Resource(
                id=self._id_fn(),
                title=draft.title,
                type=draft.type,
                uploaded_by=draft.uploaded_by,
                downloads=0,
                created_at=self._clock(),
            )
        except ValidationError as exc:
            raise ResourceValidationError(str(exc)) from exc
        repo = await self._repo()
        created = await repo.create(resource)
        logger.debug("Created resource %s", created.id)
        return created

    async def get_resource(self, resource_id: str) -> Resource:
        resource_id = parse_resource_id(resource_id)
        repo = await self._repo()
        resource = await repo.get(resource_id)
        if resource is None:
            raise ResourceNotFound(f"resource {resource_id} not found")
        return resource

    async def update_resource(self, resource_id: str, payload: Any) -> Resource:
        resource_id = parse_resource_id(resource_id)
        fields = normalize_patch(_require_mapping(payload))
        repo = await self._repo()
        existing = await repo.get(resource_id)
        if existing is None:
            raise ResourceNotFound(f"resource {resource_id} not found")
        merged = existing.model_dump()
        merged.update(fields)
        try:
            validated = Resource.model_validate(merged)
        except ValidationError as exc:
            raise ResourceValidationError(str(exc)) from exc
        # Only the supplied fields are written, as one single-document update.
        changes = validated.model_dump(by_alias=True, include=set(fields))
        updated = await repo.update(resource_id, changes)
        if updated is None:
            raise ResourceNotFound(f"resource {resource_id} not found")
        logger.debug("Updated resource %s fields=%s", resource_id, sorted(changes))
        return updated

    async def record_download(self, resource_id: str) -> Resource:
        resource_id = parse_resource_id(resource_id)
        repo = await self._repo()
        updated = await repo.increment_downloads(resource_id)
        if updated is None:
            raise ResourceNotFound(f"resource {resource_id} not found")
        return updated

    async def delete_resource(self, resource_id: str) -> bool:
        """Delete the resource; deleting an absent id is not an error."""
        resource_id = parse_resource_id(resource_id)
        repo = await self._repo()
        deleted = await repo.delete(resource_id)
        if deleted:
            logger.debug("Deleted resource %s", resource_id)
        else:
            logger.debug("Delete of resource %s matched no record", resource_id)
        return deleted


_default_service: Optional[ResourceService] = None


def get_resource_service() -> ResourceService:
    global _default_service
    if _default_service is None:
        _default_service = ResourceService()
    return _default_service


def set_resource_service(service: Optional[ResourceService]) -> None:
    global _default_service
    _default_service = service
