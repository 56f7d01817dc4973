"""ASGI entrypoint (``uvicorn habit_tracker.asgi:app``)."""

from .application import create_app

# 日本語: import 時点で既定アプリを構築 / English: Build default app instance at import time
app = create_app()

__all__ = ["app", "create_app"]
