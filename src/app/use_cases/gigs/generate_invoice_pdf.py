"""GenerateInvoicePdf Use Case

Renders a gig invoice as a PDF document.
"""

import base64
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.services.pdf_service import PdfService
from src.domain.base import utc_now
from .dtos import InvoicePdfResponseDTO


class GenerateInvoicePdf:
    """
    Use Case: Generate invoice PDF

    Business Rules:
    1. Invoice must exist and belong to the user
    2. The billed client is printed when the invoice has one
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice
    2. Retrieve gig and client
    3. Generate PDF using PDF service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        gig_repo: GigRepository,
        client_repo: ClientRepository,
        pdf_service: PdfService,
        sender_name: str = "GigÉire",
    ):
        self.invoice_repo = invoice_repo
        self.gig_repo = gig_repo
        self.client_repo = client_repo
        self.pdf_service = pdf_service
        self.sender_name = sender_name

    async def execute(self, invoice_id: str, user_id: str) -> Result[InvoicePdfResponseDTO]:
        """
        Execute invoice PDF generation

        Args:
            invoice_id: Invoice ID
            user_id: Owning user ID

        Returns:
            Result[InvoicePdfResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id, user_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Retrieve gig and client
            gig = await self.gig_repo.get_by_id(invoice.gig_id, user_id)
            client = None
            if invoice.client_id:
                client = await self.client_repo.get_by_id(invoice.client_id, user_id)

            # Step 3: Generate PDF
            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                gig=gig,
                client=client,
                sender_name=self.sender_name,
            )

            # Step 4: Build response
            return Return.ok(
                InvoicePdfResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utc_now(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
