"""Daily plan snapshots.

A plan is a per-day, denormalized list of items stored wholesale. Completion
state for weekly stats always comes from action logs; the ``done`` flags in a
plan are informational only.
"""

from __future__ import annotations

import logging
from typing import List

from sqlmodel import Session, select

from habit_tracker.core.errors import ValidationError, store_guard
from habit_tracker.models import ActionTemplate, DailyPlan
from habit_tracker.models.tracker_models import utc_now
from habit_tracker.services.calendar_service import (
    DEFAULT_START_TIME,
    clamp_time_of_day,
    is_strict_date_key,
)

logger = logging.getLogger(__name__)

PLAN_STATUSES = ("draft", "confirmed")
DRAFT_REASON = "Generated from active templates"


def serialize_plan(plan: DailyPlan) -> dict:
    return {
        "date_key": plan.date_key,
        "status": plan.status,
        "plan": plan.plan,
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
        "updated_at": plan.updated_at.isoformat() if plan.updated_at else None,
    }


def _normalize_item(raw_item, index: int) -> dict:
    if not isinstance(raw_item, dict):
        raise ValidationError(f"plan.items[{index}] must be an object")
    name = str(raw_item.get("name") or "").strip()
    if not name:
        raise ValidationError(f"plan.items[{index}].name is required")

    item = {
        "id": str(raw_item.get("id") or f"item-{index + 1}"),
        "name": name,
        "time": clamp_time_of_day(raw_item.get("time")),
        "done": bool(raw_item.get("done", False)),
    }
    if raw_item.get("reason") is not None:
        item["reason"] = str(raw_item["reason"])
    if raw_item.get("priority") is not None:
        try:
            item["priority"] = int(raw_item["priority"])
        except (TypeError, ValueError):
            raise ValidationError(f"plan.items[{index}].priority must be an integer")
    return item


def normalize_plan(plan) -> dict:
    if not isinstance(plan, dict):
        raise ValidationError("plan object is required")
    normalized = dict(plan)
    raw_items = plan.get("items", [])
    if not isinstance(raw_items, list):
        raise ValidationError("plan.items must be a list")
    normalized["items"] = [_normalize_item(item, index) for index, item in enumerate(raw_items)]
    return normalized


def get_plan(db: Session, date_key: str) -> DailyPlan | None:
    with store_guard(db, "get plan"):
        return db.get(DailyPlan, date_key)


def save_plan(db: Session, date_key: str, status: str, plan: dict) -> DailyPlan:
    """Upsert the whole plan row for ``date_key``."""
    if not is_strict_date_key(date_key):
        raise ValidationError("dateKey is required (YYYY-MM-DD)")
    if status not in PLAN_STATUSES:
        raise ValidationError("status must be 'draft' or 'confirmed'")
    normalized = normalize_plan(plan)

    with store_guard(db, "save plan"):
        row = db.get(DailyPlan, date_key)
        if row is None:
            row = DailyPlan(date_key=date_key)
            db.add(row)
        row.status = status
        row.plan = normalized
        row.updated_at = utc_now()
        db.commit()
        db.refresh(row)

    logger.info("Saved %s plan for %s with %d items", status, date_key, len(normalized["items"]))
    return row


def build_draft_items(templates: List[ActionTemplate]) -> List[dict]:
    items = []
    for index, template in enumerate(templates):
        items.append(
            {
                "id": template.id,
                "name": template.name,
                "time": clamp_time_of_day(template.start_time or template.default_time, DEFAULT_START_TIME),
                "done": False,
                "priority": index + 1,
                "reason": DRAFT_REASON,
            }
        )
    return items


def generate_draft(db: Session, date_key: str) -> DailyPlan:
    """Build a draft plan for ``date_key`` from every active template."""
    with store_guard(db, "load active templates"):
        templates = db.exec(
            select(ActionTemplate)
            .where(ActionTemplate.is_active == True)  # noqa: E712
            .order_by(ActionTemplate.start_time, ActionTemplate.created_at)
        ).all()

    plan = {
        "dateKey": date_key,
        "items": build_draft_items(list(templates)),
        "generatedAt": utc_now().isoformat(),
    }
    return save_plan(db, date_key, "draft", plan)


__all__ = [
    "PLAN_STATUSES",
    "serialize_plan",
    "normalize_plan",
    "get_plan",
    "save_plan",
    "build_draft_items",
    "generate_draft",
]
