"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        headers: Optional[dict[str, str]] = None,
    ):
        self.message = message
        self.code = code
        self.headers = headers
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class UnauthorizedError(AppError):
    """Raised when the caller cannot be identified."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class RateLimitExceededError(AppError):
    """Raised by the HTTP layer when the rate limiter rejects a request."""

    status_code = 429

    def __init__(self, headers: dict[str, str]):
        super().__init__(
            "Rate limit exceeded. Please try again later.",
            code="RATE_LIMITED",
            headers=headers,
        )


class AggregationError(AppError):
    """Raised when the financial summary could not be assembled."""

    status_code = 500

    def __init__(self, message: str = "Failed to fetch financial summary"):
        super().__init__(message, code="AGGREGATION_FAILED")


class LLMServiceError(AppError):
    """Raised when the chat completion provider fails."""

    status_code = 500

    def __init__(self, message: str = "Failed to process chat message"):
        super().__init__(message, code="LLM_ERROR")


class LLMConfigurationError(LLMServiceError):
    """Raised when the chat completion provider is not configured."""

    def __init__(self, detail: str):
        super().__init__("AI service configuration error")
        self.code = "LLM_NOT_CONFIGURED"
        self.detail = detail
