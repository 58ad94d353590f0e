"""Application factory for the VRS resource service."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vrs.common.envelope import failure_body
from vrs.common.health import router as health_router
from vrs.config import runtime_config
from vrs.resources.routes import router as resources_router

logger = logging.getLogger(__name__)

# --- Error Handling ---

async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict) and "success" in detail:
        return JSONResponse(content=detail, status_code=exc.status_code)
    # Unsupported methods fall through to a plain 400 like any other bad request.
    status_code = 400 if exc.status_code == 405 else exc.status_code
    return JSONResponse(content=failure_body(), status_code=status_code)


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(content=failure_body(), status_code=400)


async def _generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(content=failure_body(), status_code=500)


def register_error_handlers(target_app: FastAPI) -> None:
    target_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    target_app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    target_app.add_exception_handler(Exception, _generic_exception_handler)

# --- App Factory ---

def create_app() -> FastAPI:
    # Fail at startup, not on the first request, when the store is not configured.
    runtime_config.require_database_url()

    app = FastAPI(title="VRS Resources", version="0.1.0")
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(resources_router)
    return app
