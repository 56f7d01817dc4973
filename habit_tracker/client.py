"""HTTP client for the tracker API plus the optimistic check/uncheck flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set

import httpx

from habit_tracker.core.config import API_TOKEN_HEADER
from habit_tracker.core.errors import FormatError, TrackerError

logger = logging.getLogger(__name__)


class ApiError(TrackerError):
    """Envelope with ``ok: false`` or a non-2xx status."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class TrackerClient:
    def __init__(
        self,
        base_url: str = "",
        token: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self._token = token or ""

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TrackerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, *, params=None, json=None) -> Dict[str, Any]:
        try:
            response = self._http.request(
                method,
                path,
                params=params,
                json=json,
                headers={API_TOKEN_HEADER: self._token},
            )
        except httpx.HTTPError as exc:
            # 日本語: 通信失敗も API エラーとして扱う / English: Transport failures surface as API errors too
            raise ApiError(f"Request failed: {path} ({exc})", status_code=503) from exc
        try:
            payload = response.json() if response.content else None
        except ValueError as exc:
            raise FormatError(f"Response is not JSON. url={path} status={response.status_code}") from exc

        if response.is_success and isinstance(payload, dict) and payload.get("ok"):
            return payload
        message = payload.get("error") if isinstance(payload, dict) else None
        raise ApiError(message or f"API request failed: {path}", status_code=response.status_code)

    def list_templates(self) -> List[dict]:
        return self._request("GET", "/api/action-templates").get("data") or []

    def save_template(
        self,
        name: str,
        category: str,
        start_time: str = "09:00",
        end_time: str = "10:00",
        template_id: str | None = None,
    ) -> str:
        body = {"name": name, "category": category, "start_time": start_time, "end_time": end_time}
        if template_id:
            body["id"] = template_id
        return self._request("POST", "/api/action-templates", json=body)["data"]["id"]

    def delete_template(self, template_id: str) -> None:
        self._request("DELETE", "/api/action-templates", json={"id": template_id})

    def done_ids(self, date_key: str) -> Set[str]:
        payload = self._request("GET", "/api/action-logs", params={"dateKey": date_key})
        return {row["actionId"] for row in payload.get("data") or []}

    def check(self, action_id: str, date_key: str) -> None:
        self._request("POST", "/api/action-logs", json={"actionId": action_id, "dateKey": date_key})

    def uncheck(self, action_id: str, date_key: str) -> None:
        self._request("DELETE", "/api/action-logs", json={"actionId": action_id, "dateKey": date_key})

    def week_stats(self, date_key: str) -> dict:
        payload = self._request("GET", "/api/week-stats", params={"dateKey": date_key})
        return {key: payload[key] for key in ("weekStart", "weekEnd", "data")}

    def get_plan(self, date_key: str | None = None) -> Optional[dict]:
        params = {"date": date_key} if date_key else None
        return self._request("GET", "/api/plan", params=params).get("data")

    def put_plan(self, date_key: str, status: str, plan: dict) -> None:
        self._request("PUT", "/api/plan", json={"dateKey": date_key, "status": status, "plan": plan})

    def generate_draft(self, date_key: str | None = None) -> int:
        body = {"dateKey": date_key} if date_key else {}
        return self._request("POST", "/api/generate-draft", json=body)["count"]


class ToggleState(str, Enum):
    PENDING = "pending"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


@dataclass
class ToggleTransition:
    action_id: str
    date_key: str
    previous_done: bool
    state: ToggleState = ToggleState.PENDING
    error: Optional[Exception] = None

    @property
    def next_done(self) -> bool:
        return not self.previous_done


@dataclass
class CompletionBoard:
    """Visible done-state for one day, updated optimistically.

    A toggle shows its new state before the write is sent, reverts exactly to
    the previous state if the write fails, and only refreshes weekly stats once
    the write is acknowledged.
    """

    client: TrackerClient
    date_key: str
    done_ids: Set[str] = field(default_factory=set)
    week_stats: Optional[dict] = None
    last_error: Optional[str] = None

    def refresh(self) -> None:
        self.done_ids = self.client.done_ids(self.date_key)
        self.week_stats = self.client.week_stats(self.date_key)

    def begin_toggle(self, action_id: str) -> ToggleTransition:
        transition = ToggleTransition(action_id, self.date_key, action_id in self.done_ids)
        self._show(action_id, transition.next_done)
        return transition

    def settle(self, transition: ToggleTransition) -> ToggleTransition:
        if transition.state is not ToggleState.PENDING:
            return transition
        try:
            if transition.next_done:
                self.client.check(transition.action_id, transition.date_key)
            else:
                self.client.uncheck(transition.action_id, transition.date_key)
        except TrackerError as exc:
            self._show(transition.action_id, transition.previous_done)
            transition.state = ToggleState.ROLLED_BACK
            transition.error = exc
            self.last_error = exc.message or "Failed to save check"
            logger.warning("Rolled back toggle of %s: %s", transition.action_id, self.last_error)
            return transition

        transition.state = ToggleState.COMMITTED
        self.last_error = None
        self.week_stats = self.client.week_stats(self.date_key)
        return transition

    def toggle(self, action_id: str) -> ToggleTransition:
        return self.settle(self.begin_toggle(action_id))

    def _show(self, action_id: str, done: bool) -> None:
        if done:
            self.done_ids.add(action_id)
        else:
            self.done_ids.discard(action_id)
