"""Service-layer exports."""

from .action_log_service import list_logs_for_day, record_completion, remove_completion
from .calendar_service import (
    WeekRange,
    clamp_time_of_day,
    current_date_key,
    format_date_key,
    parse_date_key,
    to_date,
    week_range,
    week_start,
)
from .plan_service import generate_draft, get_plan, save_plan
from .template_service import delete_template, list_templates, upsert_template
from .weekly_stats_service import aggregate_weekly_categories, build_week_stats

__all__ = [
    "WeekRange",
    "clamp_time_of_day",
    "current_date_key",
    "format_date_key",
    "parse_date_key",
    "to_date",
    "week_range",
    "week_start",
    "aggregate_weekly_categories",
    "build_week_stats",
    "list_templates",
    "upsert_template",
    "delete_template",
    "list_logs_for_day",
    "record_completion",
    "remove_completion",
    "get_plan",
    "save_plan",
    "generate_draft",
]
