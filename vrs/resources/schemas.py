"""Schemas for shared learning resources."""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 60
RESOURCE_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")

# Keys a client may send that never reach the stored record on update.
IMMUTABLE_FIELDS = frozenset({"id", "_id", "createdAt", "created_at"})


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_resource_id() -> str:
    return uuid4().hex


class ResourceFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., max_length=TITLE_MAX_LENGTH)
    type: str
    uploaded_by: Optional[str] = Field(default=None, alias="uploadedBy")

    @field_validator("title", "type")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class ResourceCreate(ResourceFields):
    """Candidate record accepted on create; other keys are ignored."""


class Resource(ResourceFields):
    id: str = Field(default_factory=new_resource_id)
    downloads: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_now, alias="createdAt")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def _field_keys() -> Dict[str, str]:
    keys: Dict[str, str] = {}
    for name, info in Resource.model_fields.items():
        keys[name] = name
        if info.alias:
            keys[info.alias] = name
    return keys


_FIELD_BY_KEY = _field_keys()


def normalize_patch(patch: Dict[str, Any]) -> Dict[str, Any]:
    """Map client keys to field names, dropping immutable and unknown keys."""
    fields: Dict[str, Any] = {}
    for key, value in patch.items():
        if key in IMMUTABLE_FIELDS:
            continue
        name = _FIELD_BY_KEY.get(key)
        if name is None:
            continue
        fields[name] = value
    return fields
