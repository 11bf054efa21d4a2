"""Entity to DTO conversion shared by gig use cases"""

from datetime import date
from typing import Optional
from src.domain.base import as_utc
from src.domain.gig import Gig
from src.domain.gig_status import display_status, is_overdue, status_key, status_value
from src.domain.invoice import Invoice
from .dtos import GigResponseDTO, InvoiceResponseDTO


def gig_to_dto(gig: Gig, invoice: Optional[Invoice], today: date) -> GigResponseDTO:
    return GigResponseDTO(
        gig_id=gig.id,
        user_id=gig.user_id,
        client_id=gig.client_id,
        title=gig.title,
        date=gig.date,
        amount=gig.amount,
        location=gig.location,
        status=status_value(gig.status),
        status_key=status_key(gig, invoice, today),
        display_status=display_status(gig, invoice, today),
        is_overdue=is_overdue(gig, invoice, today),
        invoice_id=invoice.id if invoice else None,
        created_at=as_utc(gig.created_at),
    )


def invoice_to_dto(invoice: Invoice) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        gig_id=invoice.gig_id,
        client_id=invoice.client_id,
        invoice_number=invoice.invoice_number,
        due_date=invoice.due_date,
        include_vat=invoice.include_vat,
        vat_rate=invoice.vat_rate,
        subtotal=invoice.subtotal,
        vat_amount=invoice.vat_amount,
        total=invoice.total,
        status=invoice.status.value if hasattr(invoice.status, "value") else str(invoice.status),
        invoice_sent_at=as_utc(invoice.invoice_sent_at),
        invoice_paid_at=as_utc(invoice.invoice_paid_at),
        created_at=as_utc(invoice.created_at),
    )
