"""Error taxonomy shared by services and HTTP handlers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

logger = logging.getLogger(__name__)


class TrackerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Missing or malformed required field."""

    status_code = 400


class InvalidDateKey(ValidationError):
    """Date-key that does not split into three numeric components."""


class AuthError(TrackerError):
    """Missing or mismatched API token."""

    status_code = 401


class StoreError(TrackerError):
    """Underlying query or write failure."""

    status_code = 500


class FormatError(TrackerError):
    """Response body that is not the expected JSON envelope (client side)."""


@contextmanager
def store_guard(db: Session, operation: str) -> Iterator[None]:
    # 日本語: DB 例外をロールバックして StoreError に変換 / English: Roll back and translate DB failures into StoreError
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store operation failed: %s", operation)
        raise StoreError(str(getattr(exc, "orig", None) or exc)) from exc
