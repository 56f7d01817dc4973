"""Page routes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from habit_tracker.web import handlers as web_handlers
from habit_tracker.web.templates import template_response

# 日本語: HTMLページ配信用ルーター / English: Router for HTML page endpoints
router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="index")
def index(request: Request):
    return web_handlers.index(request, template_response_fn=template_response)
