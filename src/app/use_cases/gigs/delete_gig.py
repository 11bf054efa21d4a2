"""DeleteGig Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import DeleteGigResponseDTO

logger = logging.getLogger(__name__)


class DeleteGig:
    """
    Use Case: Delete a gig together with its invoice

    Deletion is permanent; the invoice goes first because it references
    the gig.
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

    async def execute(self, gig_id: str, user_id: str) -> Result[DeleteGigResponseDTO]:
        try:
            gig = await self.gig_repo.get_by_id(gig_id, user_id)
            if not gig:
                return Return.err(
                    Error(
                        code="GIG_NOT_FOUND",
                        message=f"Gig with ID {gig_id} not found",
                        reason="Gig does not exist or belongs to another user",
                    )
                )

            invoice = await self.invoice_repo.get_by_gig_id(gig.id)
            if invoice:
                await self.invoice_repo.delete(invoice)

            await self.gig_repo.delete(gig)
            await self.uow.commit()

            logger.info(f"Deleted gig {gig_id} (invoice deleted: {invoice is not None})")

            return Return.ok(
                DeleteGigResponseDTO(gig_id=gig_id, invoice_deleted=invoice is not None)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete gig {gig_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_GIG_FAILED",
                    message="Failed to delete gig",
                    reason=str(e),
                )
            )
