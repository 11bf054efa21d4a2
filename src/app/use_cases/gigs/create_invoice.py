"""CreateInvoice Use Case

Invoices a gig and moves it to invoice_sent.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import as_utc, utc_now
from src.domain.gig import GigStatus
from src.domain.invoice import Invoice
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .mappers import invoice_to_dto

logger = logging.getLogger(__name__)

DEFAULT_DUE_DAYS = 7
DEFAULT_VAT_RATE = Decimal("23")


class CreateInvoice:
    """
    Use Case: Create the invoice for a gig

    Business Rules:
    1. One invoice per gig
    2. Invoice number is auto-generated (INV-YYYY-NNNNNN)
    3. Subtotal defaults to the gig amount (0 if the gig has none)
    4. Due date defaults to today + due_days
    5. vat_amount = subtotal * vat_rate / 100 when VAT is included, else 0
    6. invoice_sent_at is the creation time and the gig moves to invoice_sent

    Flow:
    1. Load gig
    2. Check for an existing invoice
    3. Generate invoice number
    4. Build invoice with VAT breakdown
    5. Move gig to invoice_sent
    6. Commit transaction
    7. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        gig_repo: GigRepository,
        invoice_repo: InvoiceRepository,
        due_days: int = DEFAULT_DUE_DAYS,
        default_vat_rate: Decimal = DEFAULT_VAT_RATE,
    ):
        self.uow = uow
        self.gig_repo = gig_repo
        self.invoice_repo = invoice_repo
        self.due_days = due_days
        self.default_vat_rate = Decimal(str(default_vat_rate))

    async def execute(
        self, command: CreateInvoiceCommandDTO, now: Optional[datetime] = None
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with gig_id and VAT options
            now: Current time (defaults to utc_now; naive values are taken as UTC)

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        now = as_utc(now) if now else utc_now()
        try:
            # Step 1: Load gig
            gig = await self.gig_repo.get_by_id(command.gig_id, command.user_id)
            if not gig:
                return Return.err(
                    Error(
                        code="GIG_NOT_FOUND",
                        message=f"Gig with ID {command.gig_id} not found",
                        reason="Gig does not exist or belongs to another user",
                    )
                )

            # Step 2: Check for an existing invoice
            existing = await self.invoice_repo.get_by_gig_id(gig.id)
            if existing:
                return Return.err(
                    Error(
                        code="INVOICE_ALREADY_EXISTS",
                        message=f"Gig {gig.id} already has invoice {existing.invoice_number}",
                        reason="Only one invoice per gig is allowed",
                    )
                )

            # Step 3: Generate invoice number
            invoice_number = await self.invoice_repo.generate_invoice_number()

            # Step 4: Build invoice
            vat_rate = command.vat_rate if command.vat_rate is not None else self.default_vat_rate
            invoice = Invoice.for_gig(
                gig,
                invoice_number=invoice_number,
                due_date=command.due_date or (now.date() + timedelta(days=self.due_days)),
                sent_at=now,
                subtotal=command.subtotal,
                include_vat=command.include_vat,
                vat_rate=vat_rate,
            )
            created = await self.invoice_repo.create(invoice)

            # Step 5: Move gig to invoice_sent
            if gig.status != GigStatus.PAID:
                gig.status = GigStatus.INVOICE_SENT
                await self.gig_repo.update(gig)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {created.invoice_number} for gig {gig.id}: total {created.total}"
            )

            # Step 7: Return response
            return Return.ok(invoice_to_dto(created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for gig {command.gig_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
