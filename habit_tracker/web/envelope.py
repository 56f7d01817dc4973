"""Uniform ``{ok, data?|error?}`` response envelope."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from habit_tracker.core.errors import AuthError, TrackerError

logger = logging.getLogger(__name__)


def ok(**fields) -> dict:
    return {"ok": True, **fields}


def error_response(status_code: int, message: str | None = None) -> JSONResponse:
    body = {"ok": False}
    if message:
        body["error"] = message
    return JSONResponse(status_code=status_code, content=body)


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    # 日本語: 認証失敗は詳細を返さない / English: Auth failures carry no detail beyond ok:false
    if isinstance(exc, AuthError):
        return error_response(exc.status_code)
    return error_response(exc.status_code, exc.message or "request failed")


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, str(exc) or "unknown error")
