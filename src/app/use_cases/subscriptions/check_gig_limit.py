"""CheckGigLimit Use Case

Decides whether a user may create another gig on their plan.
"""

import logging
from libs.result import Result, Return
from src.app.repositories.gig_repository import GigRepository
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.gig_limit import FREE_PLAN_GIG_LIMIT, check_gig_limit
from src.domain.subscription import SubscriptionPlan
from .dtos import GigLimitResponseDTO

logger = logging.getLogger(__name__)


class CheckGigLimit:
    """
    Use Case: Check the gig limit of a user

    Business Rules:
    1. Free plan allows FREE_PLAN_GIG_LIMIT gigs, premium is unlimited
    2. A user without a stored plan, or an unknown plan, is treated as free
    3. If the plan cannot be read, adding is refused at the free limit
    4. If the gig count cannot be read, adding is refused

    The check never fails: errors reading the store resolve to the
    restrictive answer.
    """

    def __init__(
        self,
        gig_repo: GigRepository,
        subscription_repo: SubscriptionRepository,
        free_limit: int = FREE_PLAN_GIG_LIMIT,
    ):
        self.gig_repo = gig_repo
        self.subscription_repo = subscription_repo
        self.free_limit = free_limit

    async def execute(self, user_id: str) -> Result[GigLimitResponseDTO]:
        """
        Execute the gig limit check

        Args:
            user_id: User ID

        Returns:
            Result[GigLimitResponseDTO]: Always ok
        """
        plan = SubscriptionPlan.FREE.value
        try:
            user_plan = await self.subscription_repo.get_by_user_id(user_id)
            if user_plan and user_plan.plan:
                plan = user_plan.plan
        except Exception as e:
            logger.error(f"Could not read plan for user {user_id}, refusing new gigs: {e}")
            return Return.ok(
                GigLimitResponseDTO(
                    user_id=user_id,
                    plan=plan,
                    can_add=False,
                    current_count=0,
                    limit=self.free_limit,
                    verified=False,
                )
            )

        try:
            current_count = await self.gig_repo.count_by_user(user_id)
        except Exception as e:
            logger.error(f"Could not count gigs for user {user_id}, refusing new gigs: {e}")
            current_count = None

        check = check_gig_limit(plan, current_count, self.free_limit)

        return Return.ok(
            GigLimitResponseDTO(
                user_id=user_id,
                plan=plan,
                can_add=check.can_add,
                current_count=check.current_count,
                limit=check.limit,
                verified=current_count is not None,
            )
        )
