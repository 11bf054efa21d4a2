"""Gig Domain Entity

A single booking/engagement tracked through its status lifecycle.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, DateTime, Text
from src.domain.base import BaseModel, generate_uuid, utc_now


class GigStatus(str, Enum):
    """Persisted gig status values (linear progression)"""
    INQUIRY = "inquiry"
    CONFIRMED = "confirmed"
    INVOICE_SENT = "invoice_sent"
    PAID = "paid"


class Gig(BaseModel, table=True):
    """
    Gig - One booking owned by a single user

    Domain Rules:
    - Status progresses inquiry -> confirmed -> invoice_sent -> paid
    - Status only changes through explicit user action
    - "Overdue" is derived for display and never stored
    - At most one Invoice per gig (invoices.gig_id is unique)
    - Deletion is a hard delete
    """

    __tablename__ = "gigs"
    __table_args__ = (
        Index('ix_gigs_user_id', 'user_id'),
        Index('ix_gigs_client_id', 'client_id'),
        Index('ix_gigs_user_id_date', 'user_id', 'date'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique gig identifier (UUID)"
    )

    user_id: str = Field(
        description="Owning user ID"
    )

    client_id: Optional[str] = Field(
        default=None,
        foreign_key="clients.id",
        description="Linked client ID (optional)"
    )

    title: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Gig title"
    )

    date: dt.date = Field(
        sa_column=Column(Date, nullable=False),
        description="Calendar date of the gig"
    )

    amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True),
        description="Agreed fee (non-negative, currency-agnostic)"
    )

    location: str = Field(
        default="",
        description="Free-text location"
    )

    status: GigStatus = Field(
        default=GigStatus.INQUIRY,
        description="Persisted status (inquiry, confirmed, invoice_sent, paid)"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-text notes"
    )

    created_at: dt.datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Gig creation timestamp"
    )

    updated_at: dt.datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "5b0c7d4e-2f5c-4a8e-9b55-1b2d1f0a9e11",
                "user_id": "user_abc123",
                "client_id": "c7a3b0e2-6f11-4f0c-8d53-0f4c1a2b3c4d",
                "title": "Wedding reception - Galway",
                "date": "2025-06-14",
                "amount": "850.00",
                "location": "Galway",
                "status": "confirmed",
                "notes": None,
                "created_at": "2025-03-01T10:00:00Z",
                "updated_at": "2025-03-01T10:00:00Z"
            }
        }
