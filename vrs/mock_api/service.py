"""Latency-simulating stand-ins for the dashboard and admin backends.

Every call sleeps first, then answers from the fixtures in
``vrs.mock_api.fixtures``. Writes are echoed back and never stored.
"""
from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from vrs.config import runtime_config
from vrs.mock_api import fixtures
from vrs.mock_api.schemas import Profile, Statistics, UserSummary
from vrs.resources.schemas import Resource, ResourceCreate
from vrs.resources.service import ResourceNotFound, ResourceValidationError, matches_query


class ProfileValidationError(ValueError):
    """Raised when a profile update breaks the profile schema."""


def _millis_id() -> str:
    return str(int(time.time() * 1000))


class _MockBackend:
    def __init__(self, latency: Optional[float] = None) -> None:
        self._latency = latency

    @property
    def latency(self) -> float:
        if self._latency is not None:
            return self._latency
        return runtime_config.get_mock_latency_seconds()

    async def _delay(self) -> None:
        await asyncio.sleep(self.latency)


class MockResourceApi(_MockBackend):
    """Dashboard mock; satisfies ``ResourceCatalog``."""

    def __init__(self, latency: Optional[float] = None, id_fn: Optional[Callable[[], str]] = None) -> None:
        super().__init__(latency)
        self._id_fn = id_fn or _millis_id

    async def get_resources(self) -> List[Resource]:
        await self._delay()
        return fixtures.demo_resources()

    async def list_resources(self) -> List[Resource]:
        return await self.get_resources()

    async def upload_resource(self, payload: Any) -> Resource:
        await self._delay()
        if isinstance(payload, ResourceCreate):
            payload = payload.model_dump()
        try:
            draft = ResourceCreate.model_validate(payload)
        except ValidationError as exc:
            raise ResourceValidationError(str(exc)) from exc
        return Resource(
            id=self._id_fn(),
            title=draft.title,
            type=draft.type,
            uploaded_by=draft.uploaded_by,
            downloads=0,
        )

    async def search_resources(self, query: str) -> List[Resource]:
        resources = await self.get_resources()
        return [r for r in resources if matches_query(r, query)]

    async def record_download(self, resource_id: str) -> Resource:
        resources = await self.get_resources()
        for resource in resources:
            if resource.id == resource_id:
                return resource.model_copy(update={"downloads": resource.downloads + 1})
        raise ResourceNotFound(f"resource {resource_id} not found")

    async def get_user_profile(self) -> Profile:
        await self._delay()
        return fixtures.demo_profile()

    async def update_user_profile(self, profile: Any) -> Profile:
        await self._delay()
        if isinstance(profile, Profile):
            return profile.model_copy()
        try:
            return Profile.model_validate(profile)
        except ValidationError as exc:
            raise ProfileValidationError(str(exc)) from exc


class MockAdminApi(_MockBackend):
    """Admin dashboard mock."""

    async def get_users(self) -> List[UserSummary]:
        await self._delay()
        return fixtures.demo_users()

    async def get_resources(self) -> List[Resource]:
        await self._delay()
        return fixtures.demo_resources()

    async def get_statistics(self) -> Statistics:
        await self._delay()
        return fixtures.demo_statistics()
