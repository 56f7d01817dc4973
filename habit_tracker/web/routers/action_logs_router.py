"""Completion check/uncheck routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from habit_tracker.core.db import get_db
from habit_tracker.web import handlers as web_handlers
from habit_tracker.web.auth import require_api_token

router = APIRouter(dependencies=[Depends(require_api_token)])


@router.get("/api/action-logs", name="list_action_logs")
def list_action_logs(request: Request, db: Session = Depends(get_db)):
    return web_handlers.api_list_logs(request, db)


@router.post("/api/action-logs", name="record_action_log")
async def record_action_log(request: Request, db: Session = Depends(get_db)):
    # 日本語: チェック = 一意ペアへの冪等 upsert / English: Check = idempotent upsert on the unique pair
    return await web_handlers.api_record_log(request, db)


@router.delete("/api/action-logs", name="remove_action_log")
async def remove_action_log(request: Request, db: Session = Depends(get_db)):
    return await web_handlers.api_remove_log(request, db)
