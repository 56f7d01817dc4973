"""Habit tracker SQLModel models."""

import datetime

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from .category import Category


def utc_now() -> datetime.datetime:
    # 日本語: 保存する時刻は常に UTC のタイムゾーン付き / English: Stored timestamps are always timezone-aware UTC
    return datetime.datetime.now(datetime.timezone.utc)


def _timestamp_field():
    return Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))


# 日本語: 毎日繰り返す行動のテンプレート / English: Template for a recurring daily action
class ActionTemplate(SQLModel, table=True):
    __tablename__ = "action_template"

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=100)
    category: str = Field(default=Category.OTHER.value, max_length=20)
    # 日本語: "HH:MM" 24時間表記 / English: "HH:MM", 24-hour clock
    start_time: str = Field(default="09:00", max_length=5)
    end_time: str = Field(default="10:00", max_length=5)
    # 日本語: 旧クライアント互換の start_time ミラー / English: start_time mirror for older clients
    default_time: str = Field(default="09:00", max_length=5)
    is_active: bool = Field(default=True)
    created_at: datetime.datetime = _timestamp_field()


# 日本語: 「行動Xを日付Yに完了した」という事実 / English: Fact that action X was completed on day Y
class ActionLog(SQLModel, table=True):
    __tablename__ = "action_log"
    __table_args__ = (UniqueConstraint("action_id", "date_key", name="uq_action_log_action_date"),)

    id: int | None = Field(default=None, primary_key=True)
    action_id: str = Field(max_length=64, index=True)
    date_key: str = Field(max_length=10, index=True)
    created_at: datetime.datetime = _timestamp_field()


# 日本語: 日付単位の計画スナップショット / English: Per-day plan snapshot
class DailyPlan(SQLModel, table=True):
    __tablename__ = "daily_plan"

    date_key: str = Field(primary_key=True, max_length=10)
    status: str = Field(default="draft", max_length=20)
    plan: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    created_at: datetime.datetime = _timestamp_field()
    updated_at: datetime.datetime = _timestamp_field()
