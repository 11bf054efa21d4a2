"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for invoicing and analytics.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str, user_id: str) -> Optional[Invoice]:
        """
        Retrieve a user's invoice by ID

        Args:
            invoice_id: Invoice ID
            user_id: Owning user ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_gig_id(self, gig_id: str) -> Optional[Invoice]:
        """
        Retrieve the invoice attached to a gig

        Args:
            gig_id: Gig ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Invoice]:
        """
        Retrieve all invoices of a user

        Args:
            user_id: Owning user ID

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """
        Hard delete an invoice

        Args:
            invoice: Invoice entity to delete
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self) -> str:
        """
        Generate a unique invoice number

        Format: INV-YYYY-NNNNNN (e.g., INV-2025-000001)

        Returns:
            Unique invoice number string
        """
        pass
