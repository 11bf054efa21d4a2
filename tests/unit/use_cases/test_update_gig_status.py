"""Unit tests for UpdateGigStatus use case"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.gigs.update_gig_status import UpdateGigStatus
from src.app.use_cases.gigs.dtos import UpdateGigStatusCommandDTO
from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice, InvoiceStatus

NOW = datetime(2025, 6, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_gig():
    return Gig(
        id="gig_1",
        user_id="user_1",
        title="Corporate dinner",
        date=date(2025, 6, 1),
        amount=Decimal("400.00"),
        status=GigStatus.INVOICE_SENT,
        created_at=datetime(2025, 5, 1),
    )


@pytest.fixture
def sample_invoice():
    return Invoice(
        id="inv_1",
        user_id="user_1",
        gig_id="gig_1",
        invoice_number="INV-2025-000001",
        due_date=date(2025, 6, 8),
        subtotal=Decimal("400.00"),
        total=Decimal("400.00"),
        status=InvoiceStatus.SENT,
        invoice_sent_at=datetime(2025, 6, 1),
    )


@pytest.fixture
def mock_gig_repo(sample_gig):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_gig)
    repo.update = AsyncMock(side_effect=lambda gig: gig)
    return repo


@pytest.fixture
def mock_invoice_repo(sample_invoice):
    repo = MagicMock()
    repo.get_by_gig_id = AsyncMock(return_value=sample_invoice)
    repo.update = AsyncMock(side_effect=lambda invoice: invoice)
    repo.create = AsyncMock(side_effect=lambda invoice: invoice)
    repo.generate_invoice_number = AsyncMock(return_value="INV-2025-000002")
    return repo


@pytest.fixture
def update_use_case(mock_uow, mock_gig_repo, mock_invoice_repo):
    return UpdateGigStatus(mock_uow, mock_gig_repo, mock_invoice_repo)


def command(status):
    return UpdateGigStatusCommandDTO(user_id="user_1", gig_id="gig_1", status=status)


@pytest.mark.asyncio
class TestUpdateGigStatus:

    async def test_overdue_gig_shows_overdue_before_payment(self, update_use_case):
        """Setting confirmed again keeps the overdue display from the invoice"""
        result = await update_use_case.execute(command(GigStatus.CONFIRMED), now=NOW)

        assert result.is_ok()
        assert result.value.status == "confirmed"
        assert result.value.status_key == "overdue"

    async def test_paid_marks_invoice_paid(self, update_use_case, sample_invoice, mock_invoice_repo, mock_uow):
        # Act
        result = await update_use_case.execute(command(GigStatus.PAID), now=NOW)

        # Assert
        assert result.is_ok()
        assert result.value.status == "paid"
        assert result.value.is_overdue is False
        assert sample_invoice.status == InvoiceStatus.PAID
        assert sample_invoice.invoice_paid_at == NOW
        mock_invoice_repo.update.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_naive_now_is_stored_as_utc(self, update_use_case, sample_invoice):
        result = await update_use_case.execute(
            command(GigStatus.PAID), now=datetime(2025, 6, 20, 12, 0)
        )

        assert result.is_ok()
        assert sample_invoice.invoice_paid_at == NOW
        assert sample_invoice.invoice_paid_at.tzinfo is not None

    async def test_paid_twice_keeps_first_paid_at(self, update_use_case, sample_invoice, mock_invoice_repo):
        first = datetime(2025, 6, 10)
        sample_invoice.mark_paid(first)

        result = await update_use_case.execute(command(GigStatus.PAID), now=NOW)

        assert result.is_ok()
        assert sample_invoice.invoice_paid_at == first
        mock_invoice_repo.update.assert_not_called()

    async def test_invoice_sent_without_invoice_records_one(
        self, update_use_case, sample_gig, mock_invoice_repo
    ):
        sample_gig.status = GigStatus.CONFIRMED
        mock_invoice_repo.get_by_gig_id = AsyncMock(return_value=None)

        result = await update_use_case.execute(command(GigStatus.INVOICE_SENT), now=NOW)

        assert result.is_ok()
        created = mock_invoice_repo.create.call_args.args[0]
        assert created.subtotal == Decimal("400.00")
        assert created.due_date == NOW.date()
        assert created.invoice_sent_at == NOW
        assert result.value.invoice_id == created.id
        assert result.value.is_overdue is False

    async def test_gig_not_found(self, update_use_case, mock_gig_repo, mock_uow):
        mock_gig_repo.get_by_id = AsyncMock(return_value=None)

        result = await update_use_case.execute(command(GigStatus.PAID), now=NOW)

        assert result.is_err()
        assert result.error.code == "GIG_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back(self, update_use_case, mock_gig_repo, mock_uow):
        mock_gig_repo.update = AsyncMock(side_effect=Exception("deadlock"))

        result = await update_use_case.execute(command(GigStatus.CONFIRMED), now=NOW)

        assert result.is_err()
        assert result.error.code == "UPDATE_GIG_FAILED"
        mock_uow.rollback.assert_called_once()
