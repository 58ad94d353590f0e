"""Profile and admin statistics contracts served by the mock API."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    student = "student"
    faculty = "faculty"
    admin = "admin"


class Profile(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    role: Role = Role.student

    @field_validator("role", mode="before")
    @classmethod
    def _role_lower(cls, v):
        return v.lower() if isinstance(v, str) else v


class UserSummary(Profile):
    id: str


class RoleCounts(BaseModel):
    admin: int = Field(default=0, ge=0)
    faculty: int = Field(default=0, ge=0)
    student: int = Field(default=0, ge=0)


class Statistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(..., ge=0, alias="totalUsers")
    user_roles: RoleCounts = Field(default_factory=RoleCounts, alias="userRoles")
    total_resources: int = Field(..., ge=0, alias="totalResources")
    total_downloads: int = Field(..., ge=0, alias="totalDownloads")
