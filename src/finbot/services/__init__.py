"""Service layer - business logic orchestration."""

from finbot.services.rate_limiter import (
    RateLimiter,
    RateLimitConfig,
    RateLimitResult,
    DEFAULT_RATE_LIMITS,
)
from finbot.services.context_builder import FinancialContextBuilder
from finbot.services.chat_service import ChatService

__all__ = [
    "RateLimiter",
    "RateLimitConfig",
    "RateLimitResult",
    "DEFAULT_RATE_LIMITS",
    "FinancialContextBuilder",
    "ChatService",
]
