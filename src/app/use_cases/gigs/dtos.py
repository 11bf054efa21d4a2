"""Data Transfer Objects for Gig Use Cases

Pydantic models for command inputs and response outputs of gig, invoice
and client use cases.
"""

import datetime as dt
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.gig import GigStatus


class CreateGigCommandDTO(BaseModel):
    """
    Command DTO for creating a gig

    Used as input to CreateGig use case.
    """

    user_id: str = Field(
        ...,
        description="Owning user ID"
    )

    title: str = Field(
        ...,
        min_length=1,
        description="Gig title"
    )

    date: dt.date = Field(
        ...,
        description="Calendar date of the gig"
    )

    amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Agreed fee (must be >= 0)"
    )

    location: str = Field(
        default="",
        description="Free-text location"
    )

    status: GigStatus = Field(
        default=GigStatus.INQUIRY,
        description="Initial status (inquiry unless cloned)"
    )

    client_id: Optional[str] = Field(
        default=None,
        description="Linked client ID"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Free-text notes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user_abc123",
                "title": "Wedding reception - Galway",
                "date": "2025-06-14",
                "amount": "850.00",
                "location": "Galway",
                "status": "inquiry",
                "client_id": "c7a3b0e2-6f11-4f0c-8d53-0f4c1a2b3c4d",
                "notes": None
            }
        }


class UpdateGigStatusCommandDTO(BaseModel):
    """Command DTO for moving a gig to another status"""

    user_id: str = Field(
        ...,
        description="Owning user ID"
    )

    gig_id: str = Field(
        ...,
        description="Gig ID"
    )

    status: GigStatus = Field(
        ...,
        description="New persisted status"
    )


class GigResponseDTO(BaseModel):
    """
    Response DTO for a gig

    Carries the persisted status plus the derived display state.
    """

    gig_id: str = Field(..., description="Gig ID")
    user_id: str = Field(..., description="Owning user ID")
    client_id: Optional[str] = Field(default=None, description="Linked client ID")
    title: str = Field(..., description="Gig title")
    date: dt.date = Field(..., description="Gig date")
    amount: Optional[Decimal] = Field(default=None, description="Agreed fee")
    location: str = Field(default="", description="Location")
    status: str = Field(..., description="Persisted status")
    status_key: str = Field(..., description="Status key with overdue override")
    display_status: str = Field(..., description="Human status label with overdue override")
    is_overdue: bool = Field(..., description="Whether the invoice due date has passed unpaid")
    invoice_id: Optional[str] = Field(default=None, description="Attached invoice ID")
    created_at: dt.datetime = Field(..., description="Creation timestamp")


class ListGigsResponseDTO(BaseModel):
    """Response DTO for listing gigs"""

    gigs: List[GigResponseDTO] = Field(default_factory=list)
    total: int = Field(default=0, description="Number of gigs")


class DeleteGigResponseDTO(BaseModel):
    """Response DTO for deleting a gig"""

    gig_id: str = Field(..., description="Deleted gig ID")
    invoice_deleted: bool = Field(default=False, description="Whether an attached invoice was deleted")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for invoicing a gig

    Used as input to CreateInvoice use case.
    """

    user_id: str = Field(
        ...,
        description="Owning user ID"
    )

    gig_id: str = Field(
        ...,
        description="Gig to invoice"
    )

    due_date: Optional[dt.date] = Field(
        default=None,
        description="Payment due date (default: today + configured days)"
    )

    include_vat: bool = Field(
        default=False,
        description="Whether VAT is charged"
    )

    vat_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="VAT rate in percent (default: configured rate)"
    )

    subtotal: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Amount before VAT (default: gig amount)"
    )


class InvoiceResponseDTO(BaseModel):
    """Response DTO for invoice operations"""

    invoice_id: str = Field(..., description="Invoice ID")
    gig_id: str = Field(..., description="Invoiced gig ID")
    client_id: Optional[str] = Field(default=None, description="Billed client ID")
    invoice_number: str = Field(..., description="Unique invoice number")
    due_date: Optional[dt.date] = Field(default=None, description="Payment due date")
    include_vat: bool = Field(..., description="Whether VAT is charged")
    vat_rate: Decimal = Field(..., description="VAT rate in percent")
    subtotal: Decimal = Field(..., description="Amount before VAT")
    vat_amount: Decimal = Field(..., description="VAT amount")
    total: Decimal = Field(..., description="subtotal + vat_amount")
    status: str = Field(..., description="Invoice status")
    invoice_sent_at: Optional[dt.datetime] = Field(default=None, description="Sent timestamp")
    invoice_paid_at: Optional[dt.datetime] = Field(default=None, description="First paid timestamp")
    created_at: dt.datetime = Field(..., description="Creation timestamp")


class InvoicePdfResponseDTO(BaseModel):
    """Response DTO for invoice PDF rendering"""

    invoice_id: str = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Invoice number")
    pdf_base64: str = Field(..., description="Base64-encoded PDF document")
    generated_at: dt.datetime = Field(..., description="Generation timestamp")


class CreateClientCommandDTO(BaseModel):
    """Command DTO for creating a client"""

    user_id: str = Field(
        ...,
        description="Owning user ID"
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Client name"
    )

    email: Optional[str] = Field(
        default=None,
        description="Contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        description="Contact phone"
    )


class ClientResponseDTO(BaseModel):
    """Response DTO for a created client"""

    client_id: str = Field(..., description="Client ID")
    user_id: str = Field(..., description="Owning user ID")
    name: str = Field(..., description="Client name")
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    created_at: dt.datetime = Field(..., description="Creation timestamp")


class ClientSummaryDTO(BaseModel):
    """Client directory entry with derived state"""

    client_id: str = Field(..., description="Client ID")
    name: str = Field(..., description="Client name")
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    number_of_gigs: int = Field(default=0)
    outstanding: Decimal = Field(default=Decimal("0"), description="Sum of invoiced, unpaid gig amounts")
    last_activity: Optional[dt.date] = Field(default=None, description="Latest due date or gig date")
    status: str = Field(..., description="Active, Past Client or Inquiry")


class ListClientsResponseDTO(BaseModel):
    """Response DTO for the client directory"""

    clients: List[ClientSummaryDTO] = Field(default_factory=list)
