"""Unit tests for ListGigs and ListClients use cases"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.gigs.list_gigs import ListGigs
from src.app.use_cases.gigs.list_clients import ListClients
from src.domain.client import Client
from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice

TODAY = date(2025, 6, 20)


@pytest.fixture
def gigs():
    created = datetime(2025, 5, 1)
    return [
        Gig(id="g1", user_id="user_1", client_id="c1", title="Overdue gig", date=date(2025, 5, 10),
            amount=Decimal("300"), status=GigStatus.INVOICE_SENT, created_at=created),
        Gig(id="g2", user_id="user_1", client_id="c1", title="Upcoming gig", date=date(2025, 8, 1),
            amount=Decimal("150"), status=GigStatus.CONFIRMED, created_at=created),
    ]


@pytest.fixture
def invoices():
    return [
        Invoice(id="i1", user_id="user_1", gig_id="g1", client_id="c1",
                invoice_number="INV-2025-000001", due_date=date(2025, 5, 17),
                subtotal=Decimal("300"), total=Decimal("300")),
    ]


@pytest.fixture
def mock_gig_repo(gigs):
    repo = MagicMock()
    repo.list_by_user = AsyncMock(return_value=gigs)
    return repo


@pytest.fixture
def mock_invoice_repo(invoices):
    repo = MagicMock()
    repo.list_by_user = AsyncMock(return_value=invoices)
    return repo


@pytest.mark.asyncio
class TestListGigs:

    async def test_list_derives_overdue(self, mock_gig_repo, mock_invoice_repo):
        result = await ListGigs(mock_gig_repo, mock_invoice_repo).execute("user_1", today=TODAY)

        assert result.is_ok()
        assert result.value.total == 2
        overdue, upcoming = result.value.gigs
        assert overdue.status == "invoice_sent"
        assert overdue.status_key == "overdue"
        assert overdue.display_status == "Overdue"
        assert overdue.invoice_id == "i1"
        assert upcoming.is_overdue is False
        assert upcoming.invoice_id is None

    async def test_list_failure(self, mock_gig_repo, mock_invoice_repo):
        mock_gig_repo.list_by_user = AsyncMock(side_effect=Exception("db down"))

        result = await ListGigs(mock_gig_repo, mock_invoice_repo).execute("user_1", today=TODAY)

        assert result.is_err()
        assert result.error.code == "LIST_GIGS_FAILED"


@pytest.mark.asyncio
class TestListClients:

    async def test_directory_entries(self, mock_gig_repo, mock_invoice_repo):
        client_repo = MagicMock()
        client_repo.list_by_user = AsyncMock(
            return_value=[Client(id="c1", user_id="user_1", name="Hotel Westport")]
        )

        result = await ListClients(client_repo, mock_gig_repo, mock_invoice_repo).execute(
            "user_1", today=TODAY
        )

        assert result.is_ok()
        entry = result.value.clients[0]
        assert entry.number_of_gigs == 2
        assert entry.outstanding == Decimal("300")
        assert entry.status == "Active"
        assert entry.last_activity == date(2025, 8, 1)

    async def test_list_clients_failure(self, mock_gig_repo, mock_invoice_repo):
        client_repo = MagicMock()
        client_repo.list_by_user = AsyncMock(side_effect=Exception("db down"))

        result = await ListClients(client_repo, mock_gig_repo, mock_invoice_repo).execute("user_1")

        assert result.is_err()
        assert result.error.code == "LIST_CLIENTS_FAILED"
