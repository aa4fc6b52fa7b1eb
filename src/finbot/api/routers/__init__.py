"""API routers package."""

from finbot.api.routers.insights import router as insights_router
from finbot.api.routers.chat import router as chat_router

__all__ = [
    "insights_router",
    "chat_router",
]
