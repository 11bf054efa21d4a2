"""Unit tests for CreateInvoice use case

Tests cover:
- VAT breakdown and default subtotal/due date
- One invoice per gig
- Gig moves to invoice_sent
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.gigs.create_invoice import CreateInvoice
from src.app.use_cases.gigs.dtos import CreateInvoiceCommandDTO
from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice

NOW = datetime(2025, 6, 14, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_gig():
    return Gig(
        id="gig_1",
        user_id="user_1",
        client_id="client_1",
        title="Wedding reception",
        date=date(2025, 6, 14),
        amount=Decimal("850.00"),
        status=GigStatus.CONFIRMED,
    )


@pytest.fixture
def mock_gig_repo(sample_gig):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_gig)
    repo.update = AsyncMock(side_effect=lambda gig: gig)
    return repo


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.get_by_gig_id = AsyncMock(return_value=None)
    repo.generate_invoice_number = AsyncMock(return_value="INV-2025-000001")
    repo.create = AsyncMock(side_effect=lambda invoice: invoice)
    return repo


@pytest.fixture
def invoice_use_case(mock_uow, mock_gig_repo, mock_invoice_repo):
    return CreateInvoice(mock_uow, mock_gig_repo, mock_invoice_repo)


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:

    async def test_invoice_with_vat(self, invoice_use_case, sample_gig, mock_uow):
        """
        Given: Confirmed gig worth 850
        When: Invoice created with 23% VAT
        Then: VAT 195.50, total 1045.50, gig moves to invoice_sent
        """
        # Arrange
        command = CreateInvoiceCommandDTO(
            user_id="user_1", gig_id="gig_1", include_vat=True, vat_rate=Decimal("23")
        )

        # Act
        result = await invoice_use_case.execute(command, now=NOW)

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "INV-2025-000001"
        assert invoice.subtotal == Decimal("850.00")
        assert invoice.vat_amount == Decimal("195.50")
        assert invoice.total == Decimal("1045.50")
        assert invoice.status == "sent"
        assert invoice.invoice_sent_at == NOW
        assert invoice.client_id == "client_1"
        assert sample_gig.status == GigStatus.INVOICE_SENT
        mock_uow.commit.assert_called_once()

    async def test_defaults(self, invoice_use_case):
        """Due date defaults to a week out and VAT is off"""
        command = CreateInvoiceCommandDTO(user_id="user_1", gig_id="gig_1")

        result = await invoice_use_case.execute(command, now=NOW)

        assert result.is_ok()
        assert result.value.due_date == date(2025, 6, 21)
        assert result.value.include_vat is False
        assert result.value.vat_amount == Decimal("0")
        assert result.value.total == Decimal("850.00")
        assert result.value.vat_rate == Decimal("23")

    async def test_explicit_subtotal_and_due_date(self, invoice_use_case):
        command = CreateInvoiceCommandDTO(
            user_id="user_1",
            gig_id="gig_1",
            subtotal=Decimal("100"),
            due_date=date(2025, 7, 31),
            include_vat=True,
            vat_rate=Decimal("13.5"),
        )

        result = await invoice_use_case.execute(command, now=NOW)

        assert result.value.subtotal == Decimal("100.00")
        assert result.value.vat_amount == Decimal("13.50")
        assert result.value.due_date == date(2025, 7, 31)


@pytest.mark.asyncio
class TestCreateInvoiceErrors:

    async def test_second_invoice_for_gig(self, invoice_use_case, mock_invoice_repo, mock_uow):
        mock_invoice_repo.get_by_gig_id = AsyncMock(
            return_value=Invoice(
                id="inv_1",
                user_id="user_1",
                gig_id="gig_1",
                invoice_number="INV-2025-000001",
                subtotal=Decimal("850.00"),
                total=Decimal("850.00"),
            )
        )

        result = await invoice_use_case.execute(
            CreateInvoiceCommandDTO(user_id="user_1", gig_id="gig_1"), now=NOW
        )

        assert result.is_err()
        assert result.error.code == "INVOICE_ALREADY_EXISTS"
        mock_invoice_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_gig_not_found(self, invoice_use_case, mock_gig_repo):
        mock_gig_repo.get_by_id = AsyncMock(return_value=None)

        result = await invoice_use_case.execute(
            CreateInvoiceCommandDTO(user_id="user_1", gig_id="missing"), now=NOW
        )

        assert result.is_err()
        assert result.error.code == "GIG_NOT_FOUND"

    async def test_failure_rolls_back(self, invoice_use_case, mock_invoice_repo, mock_uow):
        mock_invoice_repo.create = AsyncMock(side_effect=Exception("unique violation"))

        result = await invoice_use_case.execute(
            CreateInvoiceCommandDTO(user_id="user_1", gig_id="gig_1"), now=NOW
        )

        assert result.is_err()
        assert result.error.code == "CREATE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
