"""Weekly statistics route."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from habit_tracker.core.db import get_db
from habit_tracker.web import handlers as web_handlers
from habit_tracker.web.auth import require_api_token

router = APIRouter(dependencies=[Depends(require_api_token)])


@router.get("/api/week-stats", name="week_stats")
def week_stats(request: Request, db: Session = Depends(get_db)):
    # 日本語: 月曜始まりの週でカテゴリ別の実施日数を返す / English: Per-category completion days for the Monday-start week
    return web_handlers.api_week_stats(request, db)
