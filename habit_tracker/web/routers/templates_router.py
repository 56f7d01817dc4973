"""Action template CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from habit_tracker.core.db import get_db
from habit_tracker.web import handlers as web_handlers
from habit_tracker.web.auth import require_api_token

# 日本語: 行動テンプレートAPI群 / English: Action template API router
router = APIRouter(dependencies=[Depends(require_api_token)])


@router.get("/api/action-templates", name="list_templates")
def list_templates(db: Session = Depends(get_db)):
    return web_handlers.api_list_templates(db)


@router.post("/api/action-templates", name="upsert_template")
async def upsert_template(request: Request, db: Session = Depends(get_db)):
    return await web_handlers.api_upsert_template(request, db)


@router.delete("/api/action-templates", name="delete_template")
async def delete_template(request: Request, db: Session = Depends(get_db)):
    # 日本語: 関連ログを先に削除してからテンプレートを削除 / English: Logs are removed before the template itself
    return await web_handlers.api_delete_template(request, db)
