"""Financial insights endpoints."""

import logging

from fastapi import APIRouter, Depends

from finbot.api.deps import get_context_builder, get_current_user_id, rate_limit
from finbot.api.schemas import FinancialContextResponse, FinancialSummaryResponse
from finbot.core.exceptions import AggregationError
from finbot.services import FinancialContextBuilder, RateLimitResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/summary", response_model=FinancialSummaryResponse)
async def get_summary(
    _limit: RateLimitResult = Depends(rate_limit("insights")),
    user_id: str = Depends(get_current_user_id),
    builder: FinancialContextBuilder = Depends(get_context_builder),
) -> FinancialSummaryResponse:
    """Get the caller's financial summary for the last 30 days."""
    try:
        summary = await builder.get_financial_summary(user_id)
    except Exception as exc:
        logger.exception("Error fetching financial summary for user %s", user_id)
        raise AggregationError() from exc

    return FinancialSummaryResponse.model_validate(summary)


@router.get("/context", response_model=FinancialContextResponse)
async def get_context(
    _limit: RateLimitResult = Depends(rate_limit("insights")),
    user_id: str = Depends(get_current_user_id),
    builder: FinancialContextBuilder = Depends(get_context_builder),
) -> FinancialContextResponse:
    """Get the rendered snapshot that is injected into the assistant prompt."""
    try:
        context = await builder.build_financial_context(user_id)
    except Exception as exc:
        logger.exception("Error building financial context for user %s", user_id)
        raise AggregationError("Failed to build financial context") from exc

    return FinancialContextResponse(context=context)
