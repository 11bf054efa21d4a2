"""SQLAlchemy Subscription Plan Repository Implementation

Implements user plan persistence using SQLAlchemy async session.
"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.base import utc_now
from src.domain.subscription import UserPlan


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """SQLAlchemy implementation of SubscriptionRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: str) -> Optional[UserPlan]:
        statement = select(UserPlan).where(UserPlan.user_id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def set_plan(self, user_id: str, plan: str) -> UserPlan:
        user_plan = await self.get_by_user_id(user_id)
        if user_plan is None:
            user_plan = UserPlan(user_id=user_id, plan=plan)
        else:
            user_plan.plan = plan
            user_plan.updated_at = utc_now()

        self.session.add(user_plan)
        await self.session.flush()
        await self.session.refresh(user_plan)
        return user_plan
