"""PDF Generation Service Interface

Defines the contract for rendering invoice documents.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.client import Client
from src.domain.gig import Gig
from src.domain.invoice import Invoice


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders a gig invoice as a PDF document.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        gig: Gig,
        client: Optional[Client] = None,
        sender_name: str = "GigÉire",
    ) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice entity with VAT breakdown
            gig: Gig billed by the invoice
            client: Client billed, if known
            sender_name: Name printed as the invoice issuer

        Returns:
            PDF document as bytes
        """
        pass
