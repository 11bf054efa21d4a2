"""Database engine and FastAPI session dependency"""

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig

import src.domain  # noqa: F401  registers tables on SQLModel.metadata

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables():
    """Create missing tables (gigs, invoices, clients, user_plans)"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
