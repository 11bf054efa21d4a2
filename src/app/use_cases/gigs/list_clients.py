"""ListClients Use Case

Builds the client directory with derived status and balances.
"""

from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.client_summary import build_client_directory
from .dtos import ListClientsResponseDTO, ClientSummaryDTO


class ListClients:
    """
    Use Case: List the client directory of a user

    Business Rules:
    1. Clients are ordered by name, case-insensitively
    2. Outstanding is the sum of gig amounts still awaiting payment
    3. Status is Active with an upcoming gig, Past Client with a paid gig,
       Inquiry otherwise
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        gig_repo: GigRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.client_repo = client_repo
        self.gig_repo = gig_repo
        self.invoice_repo = invoice_repo

    async def execute(self, user_id: str, today: Optional[date] = None) -> Result[ListClientsResponseDTO]:
        today = today or date.today()
        try:
            clients = await self.client_repo.list_by_user(user_id)
            gigs = await self.gig_repo.list_by_user(user_id)
            invoices = await self.invoice_repo.list_by_user(user_id)

            summaries = build_client_directory(clients, gigs, invoices, today)

            return Return.ok(
                ListClientsResponseDTO(
                    clients=[
                        ClientSummaryDTO(
                            client_id=summary.client_id,
                            name=summary.name,
                            email=summary.email,
                            phone=summary.phone,
                            number_of_gigs=summary.number_of_gigs,
                            outstanding=summary.outstanding,
                            last_activity=summary.last_activity,
                            status=summary.status.value,
                        )
                        for summary in summaries
                    ]
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to list clients",
                    reason=str(e),
                )
            )
