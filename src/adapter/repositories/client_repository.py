"""SQLAlchemy Client Repository Implementation

Implements client persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    """SQLAlchemy implementation of ClientRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: str, user_id: str) -> Optional[Client]:
        statement = (
            select(Client)
            .where(Client.id == client_id)
            .where(Client.user_id == user_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: str) -> List[Client]:
        statement = (
            select(Client)
            .where(Client.user_id == user_id)
            .order_by(Client.name.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
