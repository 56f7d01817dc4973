"""Closed category enum for action templates."""

from __future__ import annotations

from enum import Enum


# 日本語: 行動カテゴリの唯一の定義 / English: Single definition of action categories
class Category(str, Enum):
    EXERCISE = "exercise"
    STUDY = "study"
    OTHER = "other"

    @classmethod
    def default(cls) -> "Category":
        return cls.OTHER

    @classmethod
    def coerce(cls, value) -> "Category":
        """Return the matching member, falling back to OTHER for anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.default()
        return cls.default()
