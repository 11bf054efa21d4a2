"""Gig API Routes

FastAPI routes for the gig pipeline: create, list, status changes, deletion,
plan limit and invoicing.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.gig_request import (
    CreateGigRequestSchema,
    UpdateGigStatusRequestSchema,
    CreateInvoiceRequestSchema,
)
from src.app.use_cases.gigs.dtos import (
    CreateGigCommandDTO,
    UpdateGigStatusCommandDTO,
    CreateInvoiceCommandDTO,
    GigResponseDTO,
    ListGigsResponseDTO,
    DeleteGigResponseDTO,
    InvoiceResponseDTO,
)
from src.app.use_cases.gigs import (
    CreateGig,
    UpdateGigStatus,
    DeleteGig,
    ListGigs,
    CreateInvoice,
)
from src.app.use_cases.subscriptions import CheckGigLimit, GigLimitResponseDTO
from src.adapter.repositories import (
    SqlAlchemyGigRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemySubscriptionRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import raise_for

router = APIRouter(prefix="/gigs", tags=["Gigs"])


@router.post(
    "",
    response_model=GigResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {
            "description": "Gig limit reached on the free plan",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "GIG_LIMIT_REACHED",
                            "message": "Gig limit reached (10/10). Upgrade to premium for unlimited gigs."
                        }
                    }
                }
            }
        },
        404: {"description": "Linked client not found"},
    }
)
async def create_gig(
    request: CreateGigRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a gig.

    Free plan users may hold at most `FREE_PLAN_GIG_LIMIT` gigs; premium
    users are unlimited.

    **Returns:**
    - 201: Gig created
    - 403: Gig limit reached
    - 404: Linked client not found
    """
    use_case = CreateGig(
        uow=SqlAlchemyUnitOfWork(session),
        gig_repo=SqlAlchemyGigRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        subscription_repo=SqlAlchemySubscriptionRepository(session),
        free_limit=ApplicationConfig.FREE_PLAN_GIG_LIMIT,
    )
    result = await use_case.execute(CreateGigCommandDTO(**request.model_dump()))

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.get(
    "",
    response_model=ListGigsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_gigs(
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    List a user's gigs ordered by date.

    Each gig carries `status_key`, `display_status` and `is_overdue`; overdue
    is derived from the invoice due date and never stored.
    """
    use_case = ListGigs(SqlAlchemyGigRepository(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.get(
    "/limit",
    response_model=GigLimitResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_gig_limit(
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    Check whether the user can add another gig.

    `limit` is null for premium users.
    """
    use_case = CheckGigLimit(
        SqlAlchemyGigRepository(session),
        SqlAlchemySubscriptionRepository(session),
        free_limit=ApplicationConfig.FREE_PLAN_GIG_LIMIT,
    )
    result = await use_case.execute(user_id)
    return result.value


@router.patch(
    "/{gig_id}/status",
    response_model=GigResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Gig not found"}},
)
async def update_gig_status(
    gig_id: str,
    request: UpdateGigStatusRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Move a gig to another status.

    Marking a gig `paid` stamps its invoice's first payment time.
    """
    use_case = UpdateGigStatus(
        uow=SqlAlchemyUnitOfWork(session),
        gig_repo=SqlAlchemyGigRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(
        UpdateGigStatusCommandDTO(user_id=request.user_id, gig_id=gig_id, status=request.status)
    )

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.delete(
    "/{gig_id}",
    response_model=DeleteGigResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Gig not found"}},
)
async def delete_gig(
    gig_id: str,
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """Delete a gig and its invoice."""
    use_case = DeleteGig(
        uow=SqlAlchemyUnitOfWork(session),
        gig_repo=SqlAlchemyGigRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(gig_id, user_id)

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.post(
    "/{gig_id}/invoice",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Gig not found"},
        409: {
            "description": "Gig already invoiced",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_ALREADY_EXISTS",
                            "message": "Gig 5b0c7d4e already has invoice INV-2025-000001"
                        }
                    }
                }
            }
        },
    }
)
async def create_invoice(
    gig_id: str,
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Invoice a gig and move it to `invoice_sent`.

    **Request body:**
    - `user_id` (required): Owning user ID
    - `due_date` (optional): Defaults to today + `INVOICE_DUE_DAYS`
    - `include_vat` (optional): Whether VAT is charged
    - `vat_rate` (optional): Percent, defaults to `DEFAULT_VAT_RATE`
    - `subtotal` (optional): Defaults to the gig amount
    """
    use_case = CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        gig_repo=SqlAlchemyGigRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        due_days=ApplicationConfig.INVOICE_DUE_DAYS,
        default_vat_rate=ApplicationConfig.DEFAULT_VAT_RATE,
    )
    result = await use_case.execute(
        CreateInvoiceCommandDTO(gig_id=gig_id, **request.model_dump())
    )

    if result.is_err():
        raise_for(result.error)

    return result.value
