"""Static demo data for the mock API."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from vrs.mock_api.schemas import Profile, Role, RoleCounts, Statistics, UserSummary
from vrs.resources.schemas import Resource

_SEEDED_AT = datetime(2024, 9, 1, tzinfo=timezone.utc)


def demo_resources() -> List[Resource]:
    return [
        Resource(id="1", title="Introduction to React", type="PDF", downloads=120, created_at=_SEEDED_AT),
        Resource(id="2", title="Advanced JavaScript Concepts", type="Video", downloads=85, created_at=_SEEDED_AT),
        Resource(id="3", title="Database Design Principles", type="Presentation", downloads=62, created_at=_SEEDED_AT),
    ]


def demo_profile() -> Profile:
    return Profile(name="John Doe", email="john@example.com", role=Role.student)


def demo_users() -> List[UserSummary]:
    return [
        UserSummary(id="1", name="John Doe", email="john@example.com", role=Role.student),
        UserSummary(id="2", name="Jane Smith", email="jane@example.com", role=Role.faculty),
        UserSummary(id="3", name="Admin User", email="admin@example.com", role=Role.admin),
    ]


def demo_statistics() -> Statistics:
    return Statistics(
        total_users=150,
        user_roles=RoleCounts(admin=5, faculty=45, student=100),
        total_resources=75,
        total_downloads=1500,
    )
