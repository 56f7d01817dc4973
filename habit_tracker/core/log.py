"""Process-wide logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # 日本語: basicConfig は既存ハンドラがあれば何もしない / English: basicConfig is a no-op once handlers exist
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT)
    logging.getLogger("habit_tracker").setLevel(resolved_level)
