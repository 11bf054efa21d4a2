"""CreateGig Use Case

Creates a gig after enforcing the user's plan limit.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.app.use_cases.subscriptions.check_gig_limit import CheckGigLimit
from src.domain.base import utc_now
from src.domain.gig import Gig
from src.domain.gig_limit import FREE_PLAN_GIG_LIMIT
from .dtos import CreateGigCommandDTO, GigResponseDTO
from .mappers import gig_to_dto

logger = logging.getLogger(__name__)


class CreateGig:
    """
    Use Case: Create a gig

    Business Rules:
    1. Free plan users are capped at the free gig limit, premium is unlimited
    2. If the gig count cannot be read, creation is refused
    3. A linked client must belong to the same user
    4. New gigs start as inquiry unless a status is given

    Flow:
    1. Check gig limit
    2. Validate linked client
    3. Create gig
    4. Commit transaction
    5. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        gig_repo: GigRepository,
        client_repo: ClientRepository,
        subscription_repo: SubscriptionRepository,
        free_limit: int = FREE_PLAN_GIG_LIMIT,
    ):
        self.uow = uow
        self.gig_repo = gig_repo
        self.client_repo = client_repo
        self.subscription_repo = subscription_repo
        self.free_limit = free_limit

    async def execute(self, command: CreateGigCommandDTO) -> Result[GigResponseDTO]:
        """
        Execute gig creation

        Args:
            command: CreateGigCommandDTO with user_id, title, date and details

        Returns:
            Result[GigResponseDTO]: Success with the created gig or error
        """
        # Step 1: Check gig limit
        limit_result = await CheckGigLimit(
            self.gig_repo, self.subscription_repo, self.free_limit
        ).execute(command.user_id)
        limit = limit_result.value

        if not limit.can_add:
            if not limit.verified:
                logger.warning(f"Gig limit could not be verified for user {command.user_id}")
                return Return.err(
                    Error(
                        code="GIG_LIMIT_REACHED",
                        message="Could not verify your gig limit. Please try again.",
                        reason="Plan or gig count could not be read",
                    )
                )
            logger.warning(
                f"Gig limit reached for user {command.user_id}: "
                f"{limit.current_count}/{limit.limit}"
            )
            return Return.err(
                Error(
                    code="GIG_LIMIT_REACHED",
                    message=f"Gig limit reached ({limit.current_count}/{limit.limit}). "
                            f"Upgrade to premium for unlimited gigs.",
                    reason=f"Plan '{limit.plan}' allows {limit.limit} gigs",
                )
            )

        try:
            # Step 2: Validate linked client
            if command.client_id:
                client = await self.client_repo.get_by_id(command.client_id, command.user_id)
                if not client:
                    return Return.err(
                        Error(
                            code="CLIENT_NOT_FOUND",
                            message=f"Client with ID {command.client_id} not found",
                            reason="Client does not exist or belongs to another user",
                        )
                    )

            # Step 3: Create gig
            now = utc_now()
            gig = Gig(
                user_id=command.user_id,
                client_id=command.client_id,
                title=command.title,
                date=command.date,
                amount=command.amount,
                location=command.location,
                status=command.status,
                notes=command.notes,
                created_at=now,
                updated_at=now,
            )
            created = await self.gig_repo.create(gig)

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Created gig {created.id} for user {command.user_id}")

            # Step 5: Return response
            return Return.ok(gig_to_dto(created, None, now.date()))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create gig for user {command.user_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_GIG_FAILED",
                    message="Failed to create gig",
                    reason=str(e),
                )
            )
