"""Template helpers."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from habit_tracker.core.config import API_TOKEN_HEADER, BASE_DIR

# 日本語: Jinja テンプレートローダー / English: Jinja template loader
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def resolve_proxy_prefix(request: Request) -> str:
    # 日本語: 逆プロキシの prefix ヘッダを解決 / English: Resolve forwarded proxy prefix if present
    forwarded_prefix = (request.headers.get("x-forwarded-prefix") or "").strip()
    if "," in forwarded_prefix:
        forwarded_prefix = forwarded_prefix.split(",", 1)[0].strip()
    proxy_prefix = forwarded_prefix or request.scope.get("root_path", "")
    if proxy_prefix and not proxy_prefix.startswith("/"):
        proxy_prefix = f"/{proxy_prefix}"
    return proxy_prefix.rstrip("/") if proxy_prefix not in {"", "/"} else ""


def template_response(request: Request, template_name: str, context: Dict[str, Any]) -> HTMLResponse:
    # 日本語: 呼び出し側コンテキストをコピーして request を保証 / English: Copy caller context and ensure request is present
    payload = dict(context)
    payload.setdefault("proxy_prefix", resolve_proxy_prefix(request))
    payload.setdefault("token_header", API_TOKEN_HEADER)
    return templates.TemplateResponse(request, template_name, payload)
