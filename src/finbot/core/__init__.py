"""Core utilities and shared functionality."""

from finbot.core.timezone import (
    local_tz,
    now_local,
    to_local,
    to_naive_local,
    month_bounds,
    format_date_label,
)
from finbot.core.exceptions import (
    AppError,
    ValidationError,
    UnauthorizedError,
    RateLimitExceededError,
    AggregationError,
    LLMServiceError,
    LLMConfigurationError,
)

__all__ = [
    "local_tz",
    "now_local",
    "to_local",
    "to_naive_local",
    "month_bounds",
    "format_date_label",
    "AppError",
    "ValidationError",
    "UnauthorizedError",
    "RateLimitExceededError",
    "AggregationError",
    "LLMServiceError",
    "LLMConfigurationError",
]
