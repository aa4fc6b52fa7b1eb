"""Dependency injection for FastAPI."""

from typing import Callable, Optional

from fastapi import Depends, Header, Request, Response
from sqlalchemy.orm import Session

from finbot.config.settings import get_settings
from finbot.core.exceptions import RateLimitExceededError, UnauthorizedError
from finbot.providers import ChatCompletionProvider, OpenRouterProvider, StubChatProvider
from finbot.repositories.sqlalchemy.database import get_db
from finbot.repositories.sqlalchemy import (
    SqlAlchemyTransactionRepository,
    SqlAlchemyBudgetRepository,
    SqlAlchemyGoalRepository,
    SqlAlchemyPortfolioRepository,
)
from finbot.services import (
    ChatService,
    FinancialContextBuilder,
    RateLimiter,
    RateLimitResult,
)


def get_current_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Identify the caller from the X-User-Id header set by the auth proxy."""
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedError()
    return x_user_id.strip()


def get_rate_limiter(request: Request) -> RateLimiter:
    """Provide the process-wide RateLimiter owned by the application."""
    return request.app.state.rate_limiter


def rate_limit(operation_class: str) -> Callable[..., RateLimitResult]:
    """Build a dependency that admits the caller or raises a 429."""

    def _check(
        response: Response,
        user_id: str = Depends(get_current_user_id),
        limiter: RateLimiter = Depends(get_rate_limiter),
    ) -> RateLimitResult:
        result = limiter.check_limit(user_id, operation_class)
        if not result.admitted:
            raise RateLimitExceededError(result.headers)
        response.headers.update(result.headers)
        return result

    return _check


# Each repository gets its own session: the context builder reads them from
# separate worker threads at the same time.
def get_transaction_repo(
    db: Session = Depends(get_db, use_cache=False),
) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_budget_repo(
    db: Session = Depends(get_db, use_cache=False),
) -> SqlAlchemyBudgetRepository:
    """Provide BudgetRepository instance."""
    return SqlAlchemyBudgetRepository(db)


def get_goal_repo(
    db: Session = Depends(get_db, use_cache=False),
) -> SqlAlchemyGoalRepository:
    """Provide GoalRepository instance."""
    return SqlAlchemyGoalRepository(db)


def get_portfolio_repo(
    db: Session = Depends(get_db, use_cache=False),
) -> SqlAlchemyPortfolioRepository:
    """Provide PortfolioRepository instance."""
    return SqlAlchemyPortfolioRepository(db)


def get_context_builder(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    budget_repo: SqlAlchemyBudgetRepository = Depends(get_budget_repo),
    goal_repo: SqlAlchemyGoalRepository = Depends(get_goal_repo),
    portfolio_repo: SqlAlchemyPortfolioRepository = Depends(get_portfolio_repo),
) -> FinancialContextBuilder:
    """Provide FinancialContextBuilder instance."""
    settings = get_settings()
    return FinancialContextBuilder(
        transaction_repo=transaction_repo,
        budget_repo=budget_repo,
        goal_repo=goal_repo,
        portfolio_repo=portfolio_repo,
        window_days=settings.summary_window_days,
        top_category_limit=settings.top_category_limit,
    )


def get_llm_provider() -> ChatCompletionProvider:
    """Provide the configured chat completion provider."""
    settings = get_settings()
    if settings.llm_provider == "stub":
        return StubChatProvider()
    return OpenRouterProvider.from_settings(settings)


def get_chat_service(
    provider: ChatCompletionProvider = Depends(get_llm_provider),
    context_builder: FinancialContextBuilder = Depends(get_context_builder),
) -> ChatService:
    """Provide ChatService instance."""
    settings = get_settings()
    return ChatService(
        provider=provider,
        context_builder=context_builder,
        history_limit=settings.chat_history_limit,
        max_tokens=settings.llm_max_tokens,
        temperature=settings.llm_temperature,
    )
