"""Shared-secret token check."""

from __future__ import annotations

import hmac
import logging

from fastapi import Request

from habit_tracker.core.config import API_TOKEN_HEADER, AppConfig
from habit_tracker.core.errors import AuthError

logger = logging.getLogger(__name__)


def token_matches(expected: str | None, supplied: str | None) -> bool:
    # 日本語: サーバ側トークン未設定なら常に拒否 / English: Reject everything when the server holds no token
    if not expected or not supplied:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


def require_api_token(request: Request) -> None:
    config: AppConfig = request.app.state.config
    if not token_matches(config.api_token, request.headers.get(API_TOKEN_HEADER)):
        logger.warning("Rejected %s %s: bad or missing API token", request.method, request.url.path)
        raise AuthError("unauthorized")
