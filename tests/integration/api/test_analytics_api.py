"""Integration tests for the Analytics API endpoint"""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from httpx import AsyncClient

from src.domain.client import Client
from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice


class TestAnalyticsAPIIntegration:

    @pytest.mark.asyncio
    async def test_empty_user(self, client: AsyncClient):
        response = await client.get("/analytics", params={"user_id": "nobody"})

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["totalPaid"]) == 0
        assert data["activeGigs"] == 0
        assert len(data["monthlyEarnings"]) == 12
        assert data["monthlyEarnings"][0]["month"] == "Jan"
        assert data["topClients"] == []
        assert [b["bucket"] for b in data["paymentDelay"]["delayData"]] == [
            "0-7 days", "8-14 days", "15-30 days", "30+ days",
        ]

    @pytest.mark.asyncio
    async def test_snapshot_from_database(self, client: AsyncClient, db_session):
        # Arrange
        today = date.today()
        sent_at = datetime(today.year, 1, 5, 10, 0, tzinfo=timezone.utc)
        db_session.add(Client(id="client_a", user_id="user_stats", name="Client A"))
        db_session.add(
            Gig(id="gig_paid", user_id="user_stats", client_id="client_a", title="Paid",
                date=date(today.year, 1, 2), amount=Decimal("300.00"), status=GigStatus.PAID)
        )
        db_session.add(
            Gig(id="gig_late", user_id="user_stats", client_id="client_a", title="Late",
                date=date(today.year, 1, 3), amount=Decimal("200.00"), status=GigStatus.INVOICE_SENT)
        )
        db_session.add(
            Invoice(id="inv_paid", user_id="user_stats", gig_id="gig_paid", client_id="client_a",
                    invoice_number="INV-2000-000001", due_date=date(today.year, 1, 12),
                    subtotal=Decimal("300.00"), total=Decimal("300.00"),
                    invoice_sent_at=sent_at, invoice_paid_at=sent_at + timedelta(days=9))
        )
        db_session.add(
            Invoice(id="inv_late", user_id="user_stats", gig_id="gig_late", client_id="client_a",
                    invoice_number="INV-2000-000002", due_date=today - timedelta(days=10),
                    subtotal=Decimal("200.00"), total=Decimal("200.00"), invoice_sent_at=sent_at)
        )
        await db_session.commit()

        # Act
        response = await client.get(
            "/analytics",
            params={"user_id": "user_stats", "funnel_year": "thisYear", "earnings_year": "thisYear"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["totalPaid"]) == Decimal("300")
        assert Decimal(data["totalInvoiced"]) == Decimal("500")
        assert data["statusCounts"]["overdue"] == 1
        assert data["activeGigs"] == 2
        assert data["bookingFunnel"]["conversionRates"]["invoiceSentToPaid"] == 50.0
        assert Decimal(data["monthlyEarnings"][0]["amount"]) == Decimal("300")
        assert data["topClients"][0]["avgPaymentTime"] == 9.0
        assert data["paymentDelay"]["delayData"][1]["count"] == 1

    @pytest.mark.asyncio
    async def test_invalid_year_filter(self, client: AsyncClient):
        response = await client.get("/analytics", params={"user_id": "u", "funnel_year": "2019"})

        assert response.status_code == 422
