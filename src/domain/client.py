"""Client Domain Entity

A counterparty who may be billed across many gigs.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utc_now


class Client(BaseModel, table=True):
    """
    Client - Counterparty billed for gigs

    Domain Rules:
    - Owned by exactly one user
    - Name is used for lookup but is not enforced unique
    - Status, outstanding balance and last activity are derived from gigs,
      never stored
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_user_id', 'user_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique client identifier (UUID)"
    )

    user_id: str = Field(
        description="Owning user ID"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    email: Optional[str] = Field(
        default=None,
        description="Contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        description="Contact phone"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Client creation timestamp"
    )
