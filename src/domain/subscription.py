"""Subscription Plan Domain Entity

Tracks which subscription tier each user is on.
"""

from datetime import datetime
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utc_now


class SubscriptionPlan(str, Enum):
    """Subscription tiers"""
    FREE = "free"
    PREMIUM = "premium"


class UserPlan(BaseModel, table=True):
    """
    UserPlan - Current subscription tier of a user

    Domain Rules:
    - One row per user (user_id is unique)
    - A user without a row is on the free plan
    - Only payment webhooks change the plan
    - plan is stored as a plain string; unrecognised values are treated as free
    """

    __tablename__ = "user_plans"
    __table_args__ = (
        Index('ix_user_plans_user_id', 'user_id', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique row identifier (UUID)"
    )

    user_id: str = Field(
        description="User ID"
    )

    plan: str = Field(
        default=SubscriptionPlan.FREE.value,
        sa_column=Column(String(32), nullable=False, default=SubscriptionPlan.FREE.value),
        description="Subscription plan name (free, premium)"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Last plan change timestamp"
    )
