"""Shared learning resources package."""

from vrs.resources.catalog import ResourceCatalog, StoreResourceCatalog
from vrs.resources.repository import InMemoryResourceRepository, ResourceRepository, resource_repo_for
from vrs.resources.schemas import TITLE_MAX_LENGTH, Resource, ResourceCreate
from vrs.resources.service import (
    InvalidResourceId,
    ResourceError,
    ResourceNotFound,
    ResourceService,
    ResourceValidationError,
)

__all__ = [
    "Resource",
    "ResourceCreate",
    "TITLE_MAX_LENGTH",
    "ResourceCatalog",
    "StoreResourceCatalog",
    "ResourceRepository",
    "InMemoryResourceRepository",
    "resource_repo_for",
    "ResourceService",
    "ResourceError",
    "ResourceNotFound",
    "InvalidResourceId",
    "ResourceValidationError",
]
