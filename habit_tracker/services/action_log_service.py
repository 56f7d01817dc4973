"""Completion record (action log) persistence."""

from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from habit_tracker.core.errors import ValidationError, store_guard
from habit_tracker.models import ActionLog

logger = logging.getLogger(__name__)


def require_log_key(payload: dict) -> Tuple[str, str]:
    action_id = str(payload.get("actionId") or "").strip()
    date_key = str(payload.get("dateKey") or "").strip()
    if not action_id or not date_key:
        raise ValidationError("actionId and dateKey are required")
    return action_id, date_key


def serialize_log(log: ActionLog) -> dict:
    return {
        "actionId": log.action_id,
        "dateKey": log.date_key,
        "createdAt": log.created_at.isoformat() if log.created_at else None,
    }


def list_logs_for_day(db: Session, date_key: str) -> List[ActionLog]:
    with store_guard(db, "list logs"):
        return list(db.exec(select(ActionLog).where(ActionLog.date_key == date_key)).all())


def record_completion(db: Session, action_id: str, date_key: str) -> bool:
    """Idempotently mark ``action_id`` done on ``date_key``.

    Returns True when a new record was written.
    """
    with store_guard(db, "record completion"):
        existing = db.exec(
            select(ActionLog).where(ActionLog.action_id == action_id, ActionLog.date_key == date_key)
        ).first()
        if existing is not None:
            return False
        db.add(ActionLog(action_id=action_id, date_key=date_key))
        try:
            db.commit()
        except IntegrityError:
            # 日本語: 同時書き込みで一意制約に当たった場合は既存扱い / English: A concurrent insert already holds the pair
            db.rollback()
            logger.info("Completion %s@%s already recorded", action_id, date_key)
            return False
    logger.info("Recorded completion %s@%s", action_id, date_key)
    return True


def remove_completion(db: Session, action_id: str, date_key: str) -> None:
    with store_guard(db, "remove completion"):
        db.exec(
            delete(ActionLog).where(ActionLog.action_id == action_id, ActionLog.date_key == date_key)
        )
        db.commit()
    logger.info("Removed completion %s@%s", action_id, date_key)


__all__ = [
    "require_log_key",
    "serialize_log",
    "list_logs_for_day",
    "record_completion",
    "remove_completion",
]
