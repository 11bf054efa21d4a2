"""Subscription use cases"""
from .check_gig_limit import CheckGigLimit
from .apply_subscription_event import ApplySubscriptionEvent
from .dtos import (
    GigLimitResponseDTO,
    SubscriptionEventDTO,
    SubscriptionEventResultDTO,
)

__all__ = [
    "CheckGigLimit",
    "ApplySubscriptionEvent",
    "GigLimitResponseDTO",
    "SubscriptionEventDTO",
    "SubscriptionEventResultDTO",
]
