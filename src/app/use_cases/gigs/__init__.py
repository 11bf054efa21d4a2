"""Gig, invoice and client use cases"""
from .create_gig import CreateGig
from .update_gig_status import UpdateGigStatus
from .delete_gig import DeleteGig
from .list_gigs import ListGigs
from .create_invoice import CreateInvoice
from .generate_invoice_pdf import GenerateInvoicePdf
from .create_client import CreateClient
from .list_clients import ListClients

__all__ = [
    "CreateGig",
    "UpdateGigStatus",
    "DeleteGig",
    "ListGigs",
    "CreateInvoice",
    "GenerateInvoicePdf",
    "CreateClient",
    "ListClients",
]
