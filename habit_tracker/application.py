"""FastAPI application assembly."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from habit_tracker.core.config import BASE_DIR, AppConfig, load_config
from habit_tracker.core.db import Database
from habit_tracker.core.errors import TrackerError
from habit_tracker.core.log import configure_logging
from habit_tracker.web.envelope import tracker_error_handler, unexpected_error_handler
from habit_tracker.web.routers import (
    action_logs_router,
    page_router,
    plan_router,
    templates_router,
    week_stats_router,
)

logger = logging.getLogger(__name__)


def create_app(config: AppConfig | None = None, database: Database | None = None) -> FastAPI:
    # 日本語: 設定は明示的に受け取り、未指定なら環境変数から構築 / English: Take explicit config, falling back to the environment
    config = config or load_config()
    configure_logging(config.log_level)
    if not config.api_token:
        logger.warning("TRACKER_API_TOKEN is not set; every API request will be rejected.")

    # 日本語: 逆プロキシ配下運用を想定して root_path を設定 / English: root_path for reverse-proxy deployments
    app = FastAPI(title="Habit Tracker", root_path=config.proxy_prefix)
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")
    app.state.config = config
    app.state.database = database or Database(config)

    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # 日本語: 機能別ルーターを順次登録 / English: Register feature routers
    app.include_router(page_router)
    app.include_router(templates_router)
    app.include_router(action_logs_router)
    app.include_router(week_stats_router)
    app.include_router(plan_router)

    @app.on_event("startup")
    def _startup_init_db() -> None:
        # 日本語: 起動時にマイグレーション適用を保証 / English: Ensure migrations are applied on startup
        app.state.database.ensure_initialized()

    return app
