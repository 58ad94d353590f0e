from __future__ import annotations

import time

import pytest

from vrs.mock_api import MockAdminApi, MockResourceApi, Profile, ProfileValidationError, Role
from vrs.resources.service import ResourceNotFound, ResourceValidationError


@pytest.fixture
def api() -> MockResourceApi:
    return MockResourceApi(latency=0)


@pytest.mark.asyncio
async def test_get_resources_returns_fixtures(api):
    resources = await api.get_resources()
    assert [(r.title, r.type, r.downloads) for r in resources] == [
        ("Introduction to React", "PDF", 120),
        ("Advanced JavaScript Concepts", "Video", 85),
        ("Database Design Principles", "Presentation", 62),
    ]


@pytest.mark.asyncio
async def test_upload_echoes_with_synthesized_id(api):
    before = int(time.time() * 1000)
    uploaded = await api.upload_resource({"title": "Graph Theory", "type": "PDF", "downloads": 7})

    assert uploaded.title == "Graph Theory"
    assert uploaded.downloads == 0
    assert int(uploaded.id) >= before
    # fixtures are not mutated by uploads
    assert len(await api.get_resources()) == 3


@pytest.mark.asyncio
async def test_upload_validates_like_the_store(api):
    with pytest.raises(ResourceValidationError):
        await api.upload_resource({"title": "", "type": "PDF"})


@pytest.mark.asyncio
async def test_search_matches_title_or_type(api):
    assert [r.title for r in await api.search_resources("video")] == ["Advanced JavaScript Concepts"]
    assert [r.title for r in await api.search_resources("DESIGN")] == ["Database Design Principles"]


@pytest.mark.asyncio
async def test_record_download_returns_bumped_copy(api):
    bumped = await api.record_download("1")
    assert bumped.downloads == 121
    assert (await api.get_resources())[0].downloads == 120
    with pytest.raises(ResourceNotFound):
        await api.record_download("404")


@pytest.mark.asyncio
async def test_profile_roundtrip(api):
    profile = await api.get_user_profile()
    assert profile == Profile(name="John Doe", email="john@example.com", role=Role.student)

    updated = await api.update_user_profile({"name": "Jane", "email": "jane@example.com", "role": "Faculty"})
    assert updated.role is Role.faculty


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "profile",
    [
        {"name": "Jane", "email": "not-an-email", "role": "student"},
        {"name": "Jane", "email": "jane@example.com", "role": "dean"},
        {"email": "jane@example.com", "role": "student"},
    ],
)
async def test_profile_update_rejects_invalid(api, profile):
    with pytest.raises(ProfileValidationError):
        await api.update_user_profile(profile)


@pytest.mark.asyncio
async def test_admin_fixtures():
    admin = MockAdminApi(latency=0)
    users = await admin.get_users()
    stats = await admin.get_statistics()

    assert [u.role for u in users] == [Role.student, Role.faculty, Role.admin]
    assert len(await admin.get_resources()) == 3
    assert stats.model_dump(by_alias=True) == {
        "totalUsers": 150,
        "userRoles": {"admin": 5, "faculty": 45, "student": 100},
        "totalResources": 75,
        "totalDownloads": 1500,
    }


@pytest.mark.asyncio
async def test_latency_comes_from_config(monkeypatch):
    monkeypatch.setenv("VRS_MOCK_LATENCY_MS", "20")
    api = MockResourceApi()
    assert api.latency == 0.02
    started = time.monotonic()
    await api.get_user_profile()
    assert time.monotonic() - started >= 0.015
