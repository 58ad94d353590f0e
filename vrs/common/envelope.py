"""Response envelope shared by the resource endpoints.

Every response body has the shape::

    {"success": true, "data": ...}   # 200 / 201
    {"success": false}               # 400 / 404 / 500

Failures never carry field-level or store-level detail.
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class Envelope(BaseModel):
    success: bool
    data: Optional[Any] = None


def build_envelope(success: bool, data: Any = None) -> dict:
    """Construct the envelope body (without a response object)."""
    if not success:
        return Envelope(success=False).model_dump(exclude={"data"})
    return Envelope(success=True, data=jsonable_encoder(data, by_alias=True)).model_dump()


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=build_envelope(True, data), status_code=status_code)


def failure_body() -> dict:
    return build_envelope(False)


def failure_response(status_code: int = 400) -> HTTPException:
    """Build the generic failure exception for the given status.

    The app-level handler in ``vrs.server`` renders the detail as the body.
    """
    return HTTPException(status_code=status_code, detail=failure_body())
