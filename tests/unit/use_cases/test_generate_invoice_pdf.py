"""Unit tests for GenerateInvoicePdf use case"""

import base64
import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.gigs.generate_invoice_pdf import GenerateInvoicePdf
from src.adapter.services.pdf_service import ReportLabPdfService
from src.domain.client import Client
from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice


@pytest.fixture
def sample_gig():
    return Gig(
        id="gig_1", user_id="user_1", client_id="c1", title="Wedding reception",
        date=date(2025, 6, 14), amount=Decimal("850.00"), location="Galway",
        status=GigStatus.INVOICE_SENT,
    )


@pytest.fixture
def sample_invoice(sample_gig):
    return Invoice.for_gig(
        sample_gig,
        invoice_number="INV-2025-000001",
        due_date=date(2025, 6, 21),
        sent_at=datetime(2025, 6, 14, 18, 0),
        include_vat=True,
        vat_rate=Decimal("23"),
    )


@pytest.fixture
def repos(sample_gig, sample_invoice):
    invoice_repo = MagicMock()
    invoice_repo.get_by_id = AsyncMock(return_value=sample_invoice)
    gig_repo = MagicMock()
    gig_repo.get_by_id = AsyncMock(return_value=sample_gig)
    client_repo = MagicMock()
    client_repo.get_by_id = AsyncMock(
        return_value=Client(id="c1", user_id="user_1", name="Ardilaun Hotel", email="events@ardilaun.ie")
    )
    return invoice_repo, gig_repo, client_repo


@pytest.mark.asyncio
class TestGenerateInvoicePdf:

    async def test_renders_pdf_with_reportlab(self, repos, sample_invoice):
        # Arrange
        invoice_repo, gig_repo, client_repo = repos
        use_case = GenerateInvoicePdf(invoice_repo, gig_repo, client_repo, ReportLabPdfService())

        # Act
        result = await use_case.execute(sample_invoice.id, "user_1")

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "INV-2025-000001"
        pdf_bytes = base64.b64decode(result.value.pdf_base64)
        assert pdf_bytes.startswith(b"%PDF")

    async def test_passes_client_and_sender(self, repos, sample_invoice):
        invoice_repo, gig_repo, client_repo = repos
        pdf_service = MagicMock()
        pdf_service.generate_invoice = MagicMock(return_value=b"%PDF-1.4 test")
        use_case = GenerateInvoicePdf(
            invoice_repo, gig_repo, client_repo, pdf_service, sender_name="Seán Music"
        )

        result = await use_case.execute(sample_invoice.id, "user_1")

        assert result.is_ok()
        kwargs = pdf_service.generate_invoice.call_args.kwargs
        assert kwargs["client"].name == "Ardilaun Hotel"
        assert kwargs["sender_name"] == "Seán Music"
        assert base64.b64decode(result.value.pdf_base64) == b"%PDF-1.4 test"

    async def test_invoice_not_found(self, repos):
        invoice_repo, gig_repo, client_repo = repos
        invoice_repo.get_by_id = AsyncMock(return_value=None)
        use_case = GenerateInvoicePdf(invoice_repo, gig_repo, client_repo, MagicMock())

        result = await use_case.execute("missing", "user_1")

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"

    async def test_render_failure(self, repos, sample_invoice):
        invoice_repo, gig_repo, client_repo = repos
        pdf_service = MagicMock()
        pdf_service.generate_invoice = MagicMock(side_effect=RuntimeError("font missing"))
        use_case = GenerateInvoicePdf(invoice_repo, gig_repo, client_repo, pdf_service)

        result = await use_case.execute(sample_invoice.id, "user_1")

        assert result.is_err()
        assert result.error.code == "GENERATE_PDF_FAILED"
