"""Unit tests for GetAnalytics use case"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.analytics.get_analytics import GetAnalytics
from src.domain.analytics import YearFilter
from src.domain.gig import Gig, GigStatus


def repo_returning(items):
    repo = MagicMock()
    repo.list_by_user = AsyncMock(return_value=items)
    return repo


@pytest.mark.asyncio
class TestGetAnalytics:

    async def test_snapshot_for_user(self):
        gigs = [
            Gig(id="g1", user_id="user_1", title="Paid", date=date(2024, 3, 2),
                amount=Decimal("400"), status=GigStatus.PAID),
        ]
        gig_repo = repo_returning(gigs)
        use_case = GetAnalytics(gig_repo, repo_returning([]), repo_returning([]))

        result = await use_case.execute(
            "user_1",
            funnel_year=YearFilter.LAST_YEAR,
            earnings_year=YearFilter.LAST_YEAR,
            today=date(2025, 1, 15),
        )

        assert result.is_ok()
        snapshot = result.value
        assert snapshot.total_paid == Decimal("400")
        assert snapshot.booking_funnel.paid == 1
        assert snapshot.monthly_earnings[2].amount == Decimal("400")
        gig_repo.list_by_user.assert_called_once_with("user_1")

    async def test_this_year_excludes_last_year_gigs(self):
        gigs = [
            Gig(id="g1", user_id="user_1", title="Paid", date=date(2024, 3, 2),
                amount=Decimal("400"), status=GigStatus.PAID),
        ]
        use_case = GetAnalytics(repo_returning(gigs), repo_returning([]), repo_returning([]))

        result = await use_case.execute("user_1", today=date(2025, 1, 15))

        assert result.value.booking_funnel.inquiry == 0
        assert all(m.amount == 0 for m in result.value.monthly_earnings)
        assert result.value.total_paid == Decimal("400")

    async def test_failure(self):
        broken = MagicMock()
        broken.list_by_user = AsyncMock(side_effect=Exception("db down"))
        use_case = GetAnalytics(broken, repo_returning([]), repo_returning([]))

        result = await use_case.execute("user_1")

        assert result.is_err()
        assert result.error.code == "ANALYTICS_FAILED"
