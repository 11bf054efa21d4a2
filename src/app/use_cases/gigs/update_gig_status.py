"""UpdateGigStatus Use Case

Moves a gig through the booking pipeline and keeps its invoice in step.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import as_utc, utc_now
from src.domain.gig import GigStatus
from src.domain.invoice import Invoice
from .dtos import UpdateGigStatusCommandDTO, GigResponseDTO
from .mappers import gig_to_dto

logger = logging.getLogger(__name__)


class UpdateGigStatus:
    """
    Use Case: Update the persisted status of a gig

    Business Rules:
    1. Any of the four pipeline statuses may be set directly
    2. Moving to paid marks the invoice paid; invoice_paid_at is set only
       the first time
    3. Moving to invoice_sent without an invoice records a sent invoice for
       the gig amount, due today
    4. Overdue is never persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        gig_repo: GigRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.gig_repo = gig_repo
        self.invoice_repo = invoice_repo

    async def execute(
        self, command: UpdateGigStatusCommandDTO, now: Optional[datetime] = None
    ) -> Result[GigResponseDTO]:
        """
        Execute status update

        Args:
            command: UpdateGigStatusCommandDTO with user_id, gig_id and status
            now: Current time (defaults to utc_now; naive values are taken as UTC)

        Returns:
            Result[GigResponseDTO]: Success with the updated gig or error
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

            invoice = await self.invoice_repo.get_by_gig_id(gig.id)

            # Step 2: Keep invoice in step with the new status
            if command.status == GigStatus.PAID and invoice:
                if invoice.mark_paid(now):
                    invoice = await self.invoice_repo.update(invoice)
            elif command.status == GigStatus.INVOICE_SENT and not invoice:
                invoice_number = await self.invoice_repo.generate_invoice_number()
                invoice = await self.invoice_repo.create(
                    Invoice.for_gig(
                        gig,
                        invoice_number=invoice_number,
                        due_date=now.date(),
                        sent_at=now,
                    )
                )

            # Step 3: Update gig
            previous = gig.status
            gig.status = command.status
            gig = await self.gig_repo.update(gig)

            await self.uow.commit()

            logger.info(
                f"Gig {gig.id} moved from {getattr(previous, 'value', previous)} "
                f"to {command.status.value}"
            )

            return Return.ok(gig_to_dto(gig, invoice, now.date()))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update status of gig {command.gig_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_GIG_FAILED",
                    message="Failed to update gig status",
                    reason=str(e),
                )
            )
