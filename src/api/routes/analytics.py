"""Analytics API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.analytics import GetAnalytics
from src.domain.analytics import AnalyticsSnapshot, YearFilter
from src.adapter.repositories import (
    SqlAlchemyGigRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
)
from src.depends import get_session
from src.api.error import raise_for

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "",
    response_model=AnalyticsSnapshot,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
)
async def get_analytics(
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    funnel_year: YearFilter = Query(YearFilter.THIS_YEAR, description="thisYear or lastYear"),
    earnings_year: YearFilter = Query(YearFilter.THIS_YEAR, description="thisYear or lastYear"),
    session: AsyncSession = Depends(get_session)
):
    """
    Analytics snapshot for a user.

    Keys are camelCase (`totalInvoiced`, `bookingFunnel`, `paymentDelay`, ...).
    Amounts are JSON numbers.
    """
    use_case = GetAnalytics(
        gig_repo=SqlAlchemyGigRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(user_id, funnel_year=funnel_year, earnings_year=earnings_year)

    if result.is_err():
        raise_for(result.error)

    return result.value
