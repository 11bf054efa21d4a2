"""Derived gig status

Overdue is a display state computed from the gig and its invoice. It never
changes the persisted gig status.
"""

from datetime import date, datetime
from typing import Optional, Union
from src.domain.gig import GigStatus

OVERDUE = "overdue"

STATUS_LABELS = {
    GigStatus.INQUIRY.value: "Inquiry",
    GigStatus.CONFIRMED.value: "Confirmed",
    GigStatus.INVOICE_SENT.value: "Invoice Sent",
    GigStatus.PAID.value: "Paid",
}


def status_value(status) -> str:
    """Plain string value of a GigStatus or raw status string"""
    return status.value if isinstance(status, GigStatus) else str(status)


def _as_date(value: Union[date, datetime, str, None]) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def is_overdue(gig, invoice, today: date) -> bool:
    """
    Whether a gig is overdue

    A gig is overdue when its invoice due date is strictly before today
    (date-only comparison) and the gig is not paid. A gig without an invoice,
    or whose invoice has no usable due date, is never overdue.

    Args:
        gig: Gig (anything with a ``status``)
        invoice: The gig's invoice, or None
        today: Current date

    Returns:
        True if overdue
    """
    if status_value(gig.status) == GigStatus.PAID.value:
        return False
    if invoice is None:
        return False

    due_date = _as_date(getattr(invoice, "due_date", None))
    if due_date is None:
        return False

    return due_date < _as_date(today)


def display_status(gig, invoice, today: date) -> str:
    """Human label for a gig, with overdue taking precedence"""
    if is_overdue(gig, invoice, today):
        return "Overdue"
    value = status_value(gig.status)
    return STATUS_LABELS.get(value, value)


def status_key(gig, invoice, today: date) -> str:
    """Status key for filtering and styling, with overdue taking precedence"""
    if is_overdue(gig, invoice, today):
        return OVERDUE
    return status_value(gig.status)
