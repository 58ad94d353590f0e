"""Mock backends that serve fixture data shaped like the real entities."""

from vrs.mock_api.schemas import Profile, Role, RoleCounts, Statistics, UserSummary
from vrs.mock_api.service import MockAdminApi, MockResourceApi, ProfileValidationError

__all__ = [
    "MockAdminApi",
    "MockResourceApi",
    "Profile",
    "ProfileValidationError",
    "Role",
    "RoleCounts",
    "Statistics",
    "UserSummary",
]
