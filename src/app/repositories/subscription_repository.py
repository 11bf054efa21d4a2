"""Subscription Plan Repository Interface

Defines the contract for user plan persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.subscription import UserPlan


class SubscriptionRepository(ABC):
    """
    Repository interface for UserPlan persistence

    A user without a stored plan is on the free tier.
    """

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[UserPlan]:
        """
        Retrieve the plan row of a user

        Args:
            user_id: User ID

        Returns:
            UserPlan if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_plan(self, user_id: str, plan: str) -> UserPlan:
        """
        Create or update the plan of a user

        Args:
            user_id: User ID
            plan: New plan name

        Returns:
            Stored UserPlan
        """
        pass
