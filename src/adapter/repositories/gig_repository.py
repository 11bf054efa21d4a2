"""SQLAlchemy Gig Repository Implementation

Implements gig persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.gig_repository import GigRepository
from src.domain.base import utc_now
from src.domain.gig import Gig


class SqlAlchemyGigRepository(GigRepository):
    """
    SQLAlchemy implementation of GigRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, gig: Gig) -> Gig:
        self.session.add(gig)
        await self.session.flush()
        await self.session.refresh(gig)
        return gig

    async def get_by_id(self, gig_id: str, user_id: str) -> Optional[Gig]:
        statement = select(Gig).where(Gig.id == gig_id).where(Gig.user_id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: str) -> List[Gig]:
        statement = (
            select(Gig)
            .where(Gig.user_id == user_id)
            .order_by(Gig.date.asc(), Gig.created_at.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_by_user(self, user_id: str) -> int:
        statement = select(func.count()).select_from(Gig).where(Gig.user_id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def update(self, gig: Gig) -> Gig:
        gig.updated_at = utc_now()
        self.session.add(gig)
        await self.session.flush()
        await self.session.refresh(gig)
        return gig

    async def delete(self, gig: Gig) -> None:
        await self.session.delete(gig)
        await self.session.flush()
