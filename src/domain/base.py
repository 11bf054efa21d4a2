"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a string UUID4 primary key"""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current UTC timestamp (timezone-aware)"""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps; SQLite returns them without an offset."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class BaseModel(SQLModel):
    """Base class for all table-backed domain entities"""
    pass
