from .gig_repository import SqlAlchemyGigRepository
from .client_repository import SqlAlchemyClientRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .subscription_repository import SqlAlchemySubscriptionRepository

__all__ = [
    "SqlAlchemyGigRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemySubscriptionRepository",
]
