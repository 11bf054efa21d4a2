"""Gig limit policy

Decides whether a user may create another gig on their subscription plan.
"""

from dataclasses import dataclass
from typing import Optional
from src.domain.subscription import SubscriptionPlan

FREE_PLAN_GIG_LIMIT = 10


@dataclass(frozen=True)
class GigLimitCheck:
    can_add: bool
    current_count: int
    limit: Optional[int]  # None = no limit

    @property
    def is_unlimited(self) -> bool:
        return self.limit is None


def plan_limit(plan, free_limit: int = FREE_PLAN_GIG_LIMIT) -> Optional[int]:
    """Gig limit for a plan; unknown plans get the free limit"""
    value = plan.value if isinstance(plan, SubscriptionPlan) else plan
    if value == SubscriptionPlan.PREMIUM.value:
        return None
    return free_limit


def check_gig_limit(
    plan,
    current_count: Optional[int],
    free_limit: int = FREE_PLAN_GIG_LIMIT,
) -> GigLimitCheck:
    """
    Check whether one more gig may be created

    Args:
        plan: Subscription plan (SubscriptionPlan or raw string)
        current_count: Number of existing gigs, or None if it could not be read
        free_limit: Cap applied to the free plan

    Returns:
        GigLimitCheck. An unknown count always refuses.
    """
    limit = plan_limit(plan, free_limit)

    if current_count is None:
        return GigLimitCheck(can_add=False, current_count=0, limit=limit)

    if limit is None:
        return GigLimitCheck(can_add=True, current_count=current_count, limit=None)

    return GigLimitCheck(
        can_add=current_count < limit,
        current_count=current_count,
        limit=limit,
    )
