"""Client API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.gig_request import CreateClientRequestSchema
from src.app.use_cases.gigs.dtos import (
    CreateClientCommandDTO,
    ClientResponseDTO,
    ListClientsResponseDTO,
)
from src.app.use_cases.gigs import CreateClient, ListClients
from src.adapter.repositories import (
    SqlAlchemyGigRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import raise_for

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post(
    "",
    response_model=ClientResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_client(
    request: CreateClientRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Add a client to the user's directory."""
    use_case = CreateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(CreateClientCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.get(
    "",
    response_model=ListClientsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_clients(
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    List the client directory.

    Each client carries its gig count, outstanding balance, last activity
    date and status (`Active`, `Past Client` or `Inquiry`).
    """
    use_case = ListClients(
        client_repo=SqlAlchemyClientRepository(session),
        gig_repo=SqlAlchemyGigRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for(result.error)

    return result.value
