"""HTTP handler implementations used by the routers."""

from __future__ import annotations

from fastapi import Request
from sqlmodel import Session

from habit_tracker.core.config import AppConfig
from habit_tracker.core.errors import ValidationError
from habit_tracker.services import action_log_service, plan_service, template_service
from habit_tracker.services.calendar_service import current_date_key, is_strict_date_key
from habit_tracker.services.weekly_stats_service import build_week_stats
from habit_tracker.web.envelope import ok


async def _read_json(request: Request) -> dict:
    # 日本語: 不正な JSON 本文は空の入力として扱う / English: Treat an unparseable JSON body as empty input
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    return payload if isinstance(payload, dict) else {}


def _required_query(request: Request, name: str) -> str:
    value = (request.query_params.get(name) or "").strip()
    if not value:
        raise ValidationError(f"{name} is required")
    return value


def _today_key(request: Request) -> str:
    config: AppConfig = request.app.state.config
    return current_date_key(config.timezone)


def index(request: Request, *, template_response_fn):
    return template_response_fn(request, "index.html", {"page_id": "index"})


def api_list_templates(db: Session):
    templates = template_service.list_templates(db)
    return ok(data=[template_service.serialize_template(template) for template in templates])


async def api_upsert_template(request: Request, db: Session):
    payload = await _read_json(request)
    template = template_service.upsert_template(db, payload)
    return ok(data={"id": template.id})


async def api_delete_template(request: Request, db: Session):
    payload = await _read_json(request)
    template_service.delete_template(db, payload.get("id"))
    return ok()


def api_list_logs(request: Request, db: Session):
    date_key = _required_query(request, "dateKey")
    logs = action_log_service.list_logs_for_day(db, date_key)
    return ok(data=[action_log_service.serialize_log(log) for log in logs])


async def api_record_log(request: Request, db: Session):
    action_id, date_key = action_log_service.require_log_key(await _read_json(request))
    action_log_service.record_completion(db, action_id, date_key)
    return ok()


async def api_remove_log(request: Request, db: Session):
    action_id, date_key = action_log_service.require_log_key(await _read_json(request))
    action_log_service.remove_completion(db, action_id, date_key)
    return ok()


def api_week_stats(request: Request, db: Session):
    date_key = _required_query(request, "dateKey")
    return ok(**build_week_stats(db, date_key))


def api_get_plan(request: Request, db: Session):
    date_key = (request.query_params.get("date") or "").strip() or _today_key(request)
    if not is_strict_date_key(date_key):
        raise ValidationError("Invalid date format")
    plan = plan_service.get_plan(db, date_key)
    return ok(data=plan_service.serialize_plan(plan) if plan else None)


async def api_put_plan(request: Request, db: Session):
    payload = await _read_json(request)
    plan_service.save_plan(db, payload.get("dateKey"), payload.get("status"), payload.get("plan"))
    return ok()


async def api_generate_draft(request: Request, db: Session):
    payload = await _read_json(request)
    date_key = str(payload.get("dateKey") or "").strip() or _today_key(request)
    if not is_strict_date_key(date_key):
        raise ValidationError("Invalid date format")
    plan = plan_service.generate_draft(db, date_key)
    return ok(dateKey=date_key, count=len(plan.plan.get("items", [])))
