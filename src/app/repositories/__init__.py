from .gig_repository import GigRepository
from .client_repository import ClientRepository
from .invoice_repository import InvoiceRepository
from .subscription_repository import SubscriptionRepository

__all__ = [
    "GigRepository",
    "ClientRepository",
    "InvoiceRepository",
    "SubscriptionRepository",
]
