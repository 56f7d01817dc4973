"""Core package exports."""

from .config import API_TOKEN_HEADER, BASE_DIR, AppConfig, load_config
from .db import Database, get_db
from .errors import (
    AuthError,
    FormatError,
    InvalidDateKey,
    StoreError,
    TrackerError,
    ValidationError,
    store_guard,
)
from .log import configure_logging

__all__ = [
    "API_TOKEN_HEADER",
    "BASE_DIR",
    "AppConfig",
    "load_config",
    "Database",
    "get_db",
    "TrackerError",
    "ValidationError",
    "InvalidDateKey",
    "AuthError",
    "StoreError",
    "FormatError",
    "store_guard",
    "configure_logging",
]
