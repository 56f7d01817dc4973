"""Router exports."""

# 日本語: 各機能ルーターを集約して application.py から一括 import 可能にする / English: Re-export feature routers for centralized app wiring
from .action_logs_router import router as action_logs_router
from .page_router import router as page_router
from .plan_router import router as plan_router
from .templates_router import router as templates_router
from .week_stats_router import router as week_stats_router

__all__ = [
    "page_router",
    "templates_router",
    "action_logs_router",
    "week_stats_router",
    "plan_router",
]
