"""Invoice Domain Entity

Financial record attached to a gig: VAT math and payment timestamps.
"""

from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Tuple
from sqlmodel import Field, Column, Index
from sqlalchemy import Boolean, Numeric, String, Date, DateTime
from src.domain.base import BaseModel, generate_uuid, utc_now

CENT = Decimal("0.01")


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"  # never written; overdue is derived from the gig


def calculate_invoice_amounts(
    subtotal: Decimal, vat_rate: Decimal, include_vat: bool
) -> Tuple[Decimal, Decimal]:
    """
    Compute VAT amount and total for an invoice

    Args:
        subtotal: Amount before VAT
        vat_rate: VAT rate as a percentage (e.g. 23)
        include_vat: Whether VAT applies

    Returns:
        (vat_amount, total), both quantized to cents
    """
    subtotal = Decimal(subtotal).quantize(CENT, rounding=ROUND_HALF_UP)
    if include_vat:
        vat_amount = (subtotal * Decimal(vat_rate) / Decimal(100)).quantize(
            CENT, rounding=ROUND_HALF_UP
        )
    else:
        vat_amount = Decimal("0.00")
    return vat_amount, subtotal + vat_amount


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing record for a single gig

    Domain Rules:
    - One invoice per gig (gig_id is unique)
    - total = subtotal + vat_amount
    - vat_amount = subtotal * vat_rate / 100 when include_vat, else 0
    - Created when the gig moves to invoice_sent (invoice_sent_at = now)
    - invoice_paid_at is set the first time the gig is paid and never changes
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_user_id', 'user_id'),
        Index('ix_invoices_gig_id', 'gig_id', unique=True),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique invoice identifier (UUID)"
    )

    user_id: str = Field(
        description="Owning user ID"
    )

    gig_id: str = Field(
        foreign_key="gigs.id",
        description="Gig this invoice bills (one-to-one)"
    )

    client_id: Optional[str] = Field(
        default=None,
        description="Client billed, copied from the gig at creation"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2025-000001)"
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Payment due date"
    )

    include_vat: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Whether VAT is charged"
    )

    vat_rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(5, 2), nullable=False, default=0),
        description="VAT rate in percent"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="Amount before VAT"
    )

    vat_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(12, 2), nullable=False, default=0),
        description="VAT amount"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(12, 2), nullable=False),
        description="subtotal + vat_amount"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.SENT,
        description="Invoice status (sent, paid, overdue)"
    )

    invoice_sent_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        description="Timestamp when invoice was sent"
    )

    invoice_paid_at: Optional[datetime] = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        description="Timestamp when invoice was first marked paid"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Invoice creation timestamp"
    )

    @classmethod
    def for_gig(
        cls,
        gig,
        invoice_number: str,
        due_date: Optional[date],
        sent_at: datetime,
        subtotal: Optional[Decimal] = None,
        include_vat: bool = False,
        vat_rate: Decimal = Decimal("0"),
    ) -> "Invoice":
        """
        Build a sent invoice for a gig

        Args:
            gig: Gig being invoiced
            invoice_number: Unique invoice number
            due_date: Payment due date
            sent_at: Timestamp the invoice is sent
            subtotal: Amount before VAT (defaults to the gig amount, or 0)
            include_vat: Whether VAT applies
            vat_rate: VAT rate in percent

        Returns:
            New Invoice (not persisted)
        """
        if subtotal is None:
            subtotal = gig.amount or Decimal("0")
        subtotal = Decimal(subtotal).quantize(CENT, rounding=ROUND_HALF_UP)
        vat_amount, total = calculate_invoice_amounts(subtotal, vat_rate, include_vat)

        return cls(
            user_id=gig.user_id,
            gig_id=gig.id,
            client_id=gig.client_id,
            invoice_number=invoice_number,
            due_date=due_date,
            include_vat=include_vat,
            vat_rate=Decimal(vat_rate),
            subtotal=subtotal,
            vat_amount=vat_amount,
            total=total,
            status=InvoiceStatus.SENT,
            invoice_sent_at=sent_at,
            created_at=sent_at,
        )

    def mark_paid(self, paid_at: datetime) -> bool:
        """
        Mark invoice paid, keeping the first payment timestamp

        Returns:
            True if anything changed
        """
        changed = False
        if self.status != InvoiceStatus.PAID:
            self.status = InvoiceStatus.PAID
            changed = True
        if self.invoice_paid_at is None:
            self.invoice_paid_at = paid_at
            changed = True
        return changed

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0e9f1c2a-3b4d-4e5f-8a7b-6c5d4e3f2a1b",
                "user_id": "user_abc123",
                "gig_id": "5b0c7d4e-2f5c-4a8e-9b55-1b2d1f0a9e11",
                "client_id": "c7a3b0e2-6f11-4f0c-8d53-0f4c1a2b3c4d",
                "invoice_number": "INV-2025-000001",
                "due_date": "2025-06-21",
                "include_vat": True,
                "vat_rate": "23.00",
                "subtotal": "850.00",
                "vat_amount": "195.50",
                "total": "1045.50",
                "status": "sent",
                "invoice_sent_at": "2025-06-14T18:00:00Z",
                "invoice_paid_at": None,
                "created_at": "2025-06-14T18:00:00Z"
            }
        }
