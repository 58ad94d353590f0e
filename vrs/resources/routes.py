"""FastAPI routes for the resource collection and item endpoints."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Query

from vrs.common.envelope import failure_response, success_response
from vrs.resources.service import ResourceNotFound, get_resource_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["resources"])


def _rejected(operation: str, exc: Exception, status_code: int = 400):
    # Callers only ever see {"success": false}; the cause stays server-side.
    logger.warning("resources.%s rejected (%s): %s", operation, type(exc).__name__, exc)
    return failure_response(status_code)


# ===== Collection =====

@router.get("/resources")
async def list_resources(q: Optional[str] = Query(None)):
    try:
        resources = await get_resource_service().list_resources(query=q)
    except Exception as exc:
        raise _rejected("list", exc) from exc
    return success_response(resources)


@router.post("/resources")
async def create_resource(payload: Any = Body(None)):
    try:
        resource = await get_resource_service().create_resource(payload)
    except Exception as exc:
        raise _rejected("create", exc) from exc
    return success_response(resource, status_code=201)


# ===== Item =====

@router.get("/resources/{resource_id}")
async def get_resource(resource_id: str):
    try:
        resource = await get_resource_service().get_resource(resource_id)
    except ResourceNotFound as exc:
        raise _rejected("get", exc, status_code=404) from exc
    except Exception as exc:
        raise _rejected("get", exc) from exc
    return success_response(resource)


@router.put("/resources/{resource_id}")
async def update_resource(resource_id: str, payload: Any = Body(None)):
    try:
        resource = await get_resource_service().update_resource(resource_id, payload)
    except ResourceNotFound as exc:
        raise _rejected("update", exc, status_code=404) from exc
    except Exception as exc:
        raise _rejected("update", exc) from exc
    return success_response(resource)


@router.delete("/resources/{resource_id}")
async def delete_resource(resource_id: str):
    try:
        await get_resource_service().delete_resource(resource_id)
    except Exception as exc:
        raise _rejected("delete", exc) from exc
    return success_response({})
