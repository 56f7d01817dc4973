"""Action template persistence."""

from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy import delete
from sqlmodel import Session, select

from habit_tracker.core.errors import ValidationError, store_guard
from habit_tracker.models import ActionLog, ActionTemplate, Category
from habit_tracker.services.calendar_service import (
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    clamp_time_of_day,
)

logger = logging.getLogger(__name__)


def _first_present(payload: dict, *keys):
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def serialize_template(template: ActionTemplate) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "category": Category.coerce(template.category).value,
        "start_time": clamp_time_of_day(template.start_time, DEFAULT_START_TIME),
        "end_time": clamp_time_of_day(template.end_time, DEFAULT_END_TIME),
        "default_time": template.default_time,
        "is_active": template.is_active,
        "created_at": template.created_at.isoformat() if template.created_at else None,
    }


def list_templates(db: Session) -> List[ActionTemplate]:
    with store_guard(db, "list templates"):
        return list(db.exec(select(ActionTemplate).order_by(ActionTemplate.created_at)).all())


def upsert_template(db: Session, payload: dict) -> ActionTemplate:
    """Create or replace a template keyed on ``id``; a missing id gets a fresh one."""
    name = str(payload.get("name") or "").strip()
    if not name:
        raise ValidationError("name is required")

    template_id = str(payload.get("id") or "").strip() or uuid.uuid4().hex
    category = Category.coerce(payload.get("category"))
    # 日本語: 旧キー time / default_time も開始時刻として受け付ける / English: Accept legacy time/default_time keys as the start
    start_time = clamp_time_of_day(
        str(_first_present(payload, "start_time", "time", "default_time") or DEFAULT_START_TIME),
        DEFAULT_START_TIME,
    )
    end_time = clamp_time_of_day(str(payload.get("end_time") or DEFAULT_END_TIME), DEFAULT_END_TIME)

    with store_guard(db, "upsert template"):
        template = db.get(ActionTemplate, template_id)
        if template is None:
            template = ActionTemplate(id=template_id, name=name)
            db.add(template)
        template.name = name
        template.category = category.value
        template.start_time = start_time
        template.end_time = end_time
        template.default_time = start_time
        if "is_active" in payload:
            template.is_active = bool(payload.get("is_active"))
        db.commit()
        db.refresh(template)

    logger.info("Saved template %s (%s)", template.id, template.category)
    return template


def delete_template(db: Session, template_id: str) -> None:
    """Remove a template after clearing its completion records."""
    template_id = str(template_id or "").strip()
    if not template_id:
        raise ValidationError("id is required")

    with store_guard(db, "delete template logs"):
        db.exec(delete(ActionLog).where(ActionLog.action_id == template_id))
    with store_guard(db, "delete template"):
        db.exec(delete(ActionTemplate).where(ActionTemplate.id == template_id))
        db.commit()
    logger.info("Deleted template %s and its logs", template_id)


__all__ = [
    "serialize_template",
    "list_templates",
    "upsert_template",
    "delete_template",
]
