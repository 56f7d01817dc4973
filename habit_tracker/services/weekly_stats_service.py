"""Weekly per-category completion tally."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Dict, Iterable, Set, Union

from sqlmodel import Session, select

from habit_tracker.core.errors import store_guard
from habit_tracker.models import ActionLog, ActionTemplate, Category
from habit_tracker.services.calendar_service import week_range

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7

CategoryLookup = Union[Mapping, Callable[[str], object], None]


def _record_fields(record) -> tuple:
    if isinstance(record, Mapping):
        action_id = record.get("actionId", record.get("action_id"))
        date_key = record.get("dateKey", record.get("date_key"))
        return action_id, date_key
    return record.action_id, record.date_key


def _resolve_category(category_of: CategoryLookup, action_id) -> Category:
    # 日本語: 参照不能・未知のカテゴリは既定カテゴリへ / English: Unresolvable or unknown categories fold into the default
    if category_of is None:
        return Category.default()
    try:
        if isinstance(category_of, Mapping):
            raw_category = category_of.get(action_id)
        else:
            raw_category = category_of(action_id)
    except LookupError:
        return Category.default()
    return Category.coerce(raw_category)


def aggregate_weekly_categories(
    records: Iterable, category_of: CategoryLookup
) -> Dict[Category, Dict[str, int]]:
    """Count distinct completion days per category.

    ``records`` are ``{actionId, dateKey}`` mappings or ``ActionLog`` rows that
    already fall inside the week. Several completions in one category on the
    same day count as a single day. Every category appears in the result.
    """
    day_sets: Dict[Category, Set[str]] = {category: set() for category in Category}
    for record in records:
        action_id, date_key = _record_fields(record)
        day_sets[_resolve_category(category_of, action_id)].add(date_key)
    return {
        category: {"days": len(day_sets[category]), "total": DAYS_IN_WEEK}
        for category in Category
    }


def build_week_stats(db: Session, date_key: str) -> dict:
    """Week range plus category tally for the week containing ``date_key``."""
    bounds = week_range(date_key)
    with store_guard(db, "load week logs"):
        logs = db.exec(
            select(ActionLog).where(
                ActionLog.date_key >= bounds.week_start,
                ActionLog.date_key <= bounds.week_end,
            )
        ).all()
    with store_guard(db, "load template categories"):
        templates = db.exec(select(ActionTemplate)).all()

    category_of = {template.id: template.category for template in templates}
    tallies = aggregate_weekly_categories(logs, category_of)
    logger.debug("Week %s..%s tallied from %d logs", bounds.week_start, bounds.week_end, len(logs))
    return {
        **bounds.to_dict(),
        "data": {category.value: tally for category, tally in tallies.items()},
    }


__all__ = [
    "DAYS_IN_WEEK",
    "aggregate_weekly_categories",
    "build_week_stats",
]
