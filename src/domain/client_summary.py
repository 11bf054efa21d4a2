"""Client directory summary

Derives a client's status label, outstanding balance and last activity
from its gigs. Only clients present in the supplied collection are
summarised; gigs pointing at unknown clients are ignored.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Sequence
from src.domain.gig import GigStatus
from src.domain.gig_status import status_value


class ClientStatus(str, Enum):
    ACTIVE = "Active"
    PAST_CLIENT = "Past Client"
    INQUIRY = "Inquiry"


@dataclass
class ClientSummary:
    client_id: str
    name: str
    email: Optional[str]
    phone: Optional[str]
    number_of_gigs: int
    outstanding: Decimal
    last_activity: Optional[date]
    status: ClientStatus


def summarize_client(client, gigs: Sequence, invoices_by_gig: Dict[str, object], today: date) -> ClientSummary:
    """Summary for one client given only that client's gigs"""
    outstanding = sum(
        (Decimal(gig.amount or 0) for gig in gigs
         if status_value(gig.status) == GigStatus.INVOICE_SENT.value),
        Decimal("0"),
    )

    activity_dates = []
    for gig in gigs:
        invoice = invoices_by_gig.get(gig.id)
        due_date = getattr(invoice, "due_date", None) if invoice else None
        activity_dates.append(due_date or gig.date)
    activity_dates = [d for d in activity_dates if d]

    if any(gig.date and gig.date > today for gig in gigs):
        client_status = ClientStatus.ACTIVE
    elif any(status_value(gig.status) == GigStatus.PAID.value for gig in gigs):
        client_status = ClientStatus.PAST_CLIENT
    else:
        client_status = ClientStatus.INQUIRY

    return ClientSummary(
        client_id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        number_of_gigs=len(gigs),
        outstanding=outstanding,
        last_activity=max(activity_dates) if activity_dates else None,
        status=client_status,
    )


def build_client_directory(
    clients: Sequence, gigs: Sequence, invoices: Sequence, today: date
) -> List[ClientSummary]:
    """Summaries for every client, ordered by name"""
    gigs_by_client: Dict[str, list] = {}
    for gig in gigs:
        if gig.client_id:
            gigs_by_client.setdefault(gig.client_id, []).append(gig)

    invoices_by_gig = {invoice.gig_id: invoice for invoice in invoices}

    summaries = [
        summarize_client(client, gigs_by_client.get(client.id, []), invoices_by_gig, today)
        for client in clients
    ]
    return sorted(summaries, key=lambda s: s.name.lower())
