"""ListGigs Use Case

Lists a user's gigs with their derived display status.
"""

from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import ListGigsResponseDTO
from .mappers import gig_to_dto


class ListGigs:
    """
    Use Case: List gigs of a user

    Each gig carries status_key, display_status and is_overdue computed
    against its invoice, ordered by gig date.
    """

    def __init__(self, gig_repo: GigRepository, invoice_repo: InvoiceRepository):
        self.gig_repo = gig_repo
        self.invoice_repo = invoice_repo

    async def execute(self, user_id: str, today: Optional[date] = None) -> Result[ListGigsResponseDTO]:
        """
        Execute gig listing

        Args:
            user_id: Owning user ID
            today: Date overdue state is computed against (defaults to today)

        Returns:
            Result[ListGigsResponseDTO]: Success with gigs or error
        """
        today = today or date.today()
        try:
            gigs = await self.gig_repo.list_by_user(user_id)
            invoices = await self.invoice_repo.list_by_user(user_id)
            invoices_by_gig = {invoice.gig_id: invoice for invoice in invoices}

            items = [gig_to_dto(gig, invoices_by_gig.get(gig.id), today) for gig in gigs]
            return Return.ok(ListGigsResponseDTO(gigs=items, total=len(items)))

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_GIGS_FAILED",
                    message="Failed to list gigs",
                    reason=str(e),
                )
            )
