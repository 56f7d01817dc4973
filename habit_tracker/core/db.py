"""Database engine and session helpers."""

from __future__ import annotations

import logging
import threading
from typing import Iterator

from fastapi import Request
from sqlmodel import Session, create_engine

from habit_tracker.core.config import AppConfig, normalize_database_url
from habit_tracker.core.migrations import upgrade_to_head

logger = logging.getLogger(__name__)


class Database:
    """Engine owner built from explicit configuration."""

    def __init__(self, config: AppConfig, engine=None):
        self.config = config
        if engine is None:
            # 日本語: URL検証後にエンジン生成 / English: Build engine after URL validation
            self.database_url = normalize_database_url(config.database_url)
            engine = create_engine(self.database_url)
        else:
            self.database_url = engine.url.render_as_string(hide_password=False)
        self.engine = engine
        self._initialized = not config.auto_migrate
        self._init_lock = threading.Lock()

    def ensure_initialized(self) -> None:
        if self._initialized:
            return
        # 日本語: マイグレーションはプロセス内で一度だけ実行 / English: Run migrations once per process with lock protection
        with self._init_lock:
            if self._initialized:
                return
            logger.info("Applying database migrations")
            upgrade_to_head(self.database_url)
            self._initialized = True

    def create_session(self) -> Session:
        # 日本語: 明示的セッション生成 / English: Explicit session factory
        self.ensure_initialized()
        return Session(self.engine)


def get_db(request: Request) -> Iterator[Session]:
    # 日本語: FastAPI Depends 用のセッション供給器 / English: Dependency provider for FastAPI routes
    database: Database = request.app.state.database
    database.ensure_initialized()
    with Session(database.engine) as db:
        yield db
