from .base import BaseModel, generate_uuid
from .client import Client
from .gig import Gig, GigStatus
from .invoice import Invoice, InvoiceStatus, calculate_invoice_amounts
from .subscription import UserPlan, SubscriptionPlan

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Client",
    "Gig",
    "GigStatus",
    "Invoice",
    "InvoiceStatus",
    "calculate_invoice_amounts",
    "UserPlan",
    "SubscriptionPlan",
]
