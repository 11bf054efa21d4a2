"""GetAnalytics Use Case

Loads a user's gigs, clients and invoices and folds them into the
analytics snapshot.
"""

import logging
from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.analytics import AnalyticsSnapshot, YearFilter, compute_analytics

logger = logging.getLogger(__name__)


class GetAnalytics:
    """
    Use Case: Build the analytics snapshot of a user

    Business Rules:
    1. Everything is recomputed from the user's current records
    2. Funnel and monthly earnings are filtered by gig year (this or last year)
    3. Overdue is derived from invoice due dates, never read from storage

    Flow:
    1. Load gigs, clients and invoices
    2. Compute snapshot
    3. Return response
    """

    def __init__(
        self,
        gig_repo: GigRepository,
        client_repo: ClientRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.gig_repo = gig_repo
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        user_id: str,
        funnel_year: YearFilter = YearFilter.THIS_YEAR,
        earnings_year: YearFilter = YearFilter.THIS_YEAR,
        today: Optional[date] = None,
    ) -> Result[AnalyticsSnapshot]:
        """
        Execute analytics computation

        Args:
            user_id: Owning user ID
            funnel_year: Year filter for the booking funnel
            earnings_year: Year filter for monthly earnings
            today: Reference date (defaults to today)

        Returns:
            Result[AnalyticsSnapshot]: Success with snapshot or error
        """
        today = today or date.today()
        try:
            # Step 1: Load records
            gigs = await self.gig_repo.list_by_user(user_id)
            clients = await self.client_repo.list_by_user(user_id)
            invoices = await self.invoice_repo.list_by_user(user_id)

            # Step 2: Compute snapshot
            snapshot = compute_analytics(
                gigs=gigs,
                clients=clients,
                invoices=invoices,
                funnel_year=funnel_year,
                earnings_year=earnings_year,
                today=today,
            )

            logger.debug(
                f"Analytics for user {user_id}: {len(gigs)} gigs, "
                f"{len(clients)} clients, {len(invoices)} invoices"
            )

            return Return.ok(snapshot)

        except Exception as e:
            logger.error(f"Failed to compute analytics for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="ANALYTICS_FAILED",
                    message="Failed to compute analytics",
                    reason=str(e),
                )
            )
