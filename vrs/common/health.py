"""Liveness and readiness probes."""
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from vrs.database.connection import get_connection

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


class HealthStatus(BaseModel):
    status: str
    version: str = "0.1.0"


@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(status="ok")


@router.get("/ready", response_model=HealthStatus)
async def readiness_check():
    try:
        await get_connection()
    except Exception as exc:
        logger.warning("Readiness check failed: %s", exc)
        return JSONResponse(content=HealthStatus(status="unavailable").model_dump(), status_code=503)
    return HealthStatus(status="ok")
