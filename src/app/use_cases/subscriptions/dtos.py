"""Data Transfer Objects for Subscription Use Cases"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class GigLimitResponseDTO(BaseModel):
    """Response DTO for the gig limit check"""

    user_id: str = Field(..., description="User ID")
    plan: str = Field(..., description="Plan the limit was resolved from")
    can_add: bool = Field(..., description="Whether another gig may be created")
    current_count: int = Field(..., description="Number of existing gigs")
    limit: Optional[int] = Field(
        default=None,
        description="Gig limit for the plan (null = unlimited)"
    )
    verified: bool = Field(
        default=True,
        description="False when the plan or gig count could not be read"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user_abc123",
                "plan": "free",
                "can_add": False,
                "current_count": 10,
                "limit": 10,
                "verified": True
            }
        }


class SubscriptionEventDTO(BaseModel):
    """
    Command DTO for a payment provider event

    Carries the event type and the event's data object (e.g. a checkout
    session or a subscription).
    """

    event_type: str = Field(
        ...,
        description="Event type (e.g., 'customer.subscription.updated')"
    )

    data_object: Dict[str, Any] = Field(
        default_factory=dict,
        description="The event's data.object payload"
    )


class SubscriptionEventResultDTO(BaseModel):
    """Response DTO for a processed payment provider event"""

    event_type: str = Field(..., description="Event type")
    handled: bool = Field(..., description="Whether the event changed a plan")
    user_id: Optional[str] = Field(default=None, description="Affected user")
    plan: Optional[str] = Field(default=None, description="Plan after the event")
