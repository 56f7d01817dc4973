"""Daily plan routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from habit_tracker.core.db import get_db
from habit_tracker.web import handlers as web_handlers
from habit_tracker.web.auth import require_api_token

# 日本語: 日次プランAPI群 / English: Daily plan API router
router = APIRouter(dependencies=[Depends(require_api_token)])


@router.get("/api/plan", name="get_plan")
def get_plan(request: Request, db: Session = Depends(get_db)):
    return web_handlers.api_get_plan(request, db)


@router.put("/api/plan", name="put_plan")
async def put_plan(request: Request, db: Session = Depends(get_db)):
    return await web_handlers.api_put_plan(request, db)


@router.post("/api/generate-draft", name="generate_draft")
async def generate_draft(request: Request, db: Session = Depends(get_db)):
    # 日本語: 有効なテンプレートから下書きプランを生成 / English: Build a draft plan from active templates
    return await web_handlers.api_generate_draft(request, db)
