"""Analytics aggregation

Folds a user's gigs, clients and invoices into the summary structures shown
on the analytics page: status counts, booking funnel, monthly earnings,
per-client rollup and payment delay histogram.

Everything here is recomputed from the raw collections on every call. The
functions are pure: no I/O, no hidden state, inputs are never mutated.
"""

import calendar
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Annotated, Dict, Iterable, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from src.domain.base import as_utc
from src.domain.gig import GigStatus
from src.domain.gig_status import OVERDUE, is_overdue, status_value

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Decimal internally, a JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Funnel stages reached by each persisted status. "overdue" is listed so
# rows carrying a legacy overdue value still count as invoiced.
CONFIRMED_OR_LATER = {
    GigStatus.CONFIRMED.value,
    GigStatus.INVOICE_SENT.value,
    GigStatus.PAID.value,
    OVERDUE,
}
INVOICED_OR_LATER = {
    GigStatus.INVOICE_SENT.value,
    GigStatus.PAID.value,
    OVERDUE,
}

# (label, inclusive upper bound in days); the last bucket is open-ended
DELAY_BUCKETS = (
    ("0-7 days", 7),
    ("8-14 days", 14),
    ("15-30 days", 30),
    ("30+ days", None),
)


class YearFilter(str, Enum):
    """Year selector for the funnel and earnings views"""
    THIS_YEAR = "thisYear"
    LAST_YEAR = "lastYear"

    def resolve(self, today: date) -> int:
        if self is YearFilter.LAST_YEAR:
            return today.year - 1
        return today.year


class AnalyticsModel(BaseModel):
    """Base for snapshot models; serialised with camelCase keys

    Tallies keyed by a status value keep that value as their key.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusCounts(AnalyticsModel):
    inquiry: int = 0
    confirmed: int = 0
    invoice_sent: int = Field(default=0, alias="invoice_sent")
    paid: int = 0
    overdue: int = 0


class ConversionRates(AnalyticsModel):
    inquiry_to_confirmed: float = 0.0
    confirmed_to_invoice_sent: float = 0.0
    invoice_sent_to_paid: float = 0.0
    confirmed_to_paid: float = 0.0


class BookingFunnel(AnalyticsModel):
    inquiry: int = 0
    confirmed: int = 0
    invoice_sent: int = Field(default=0, alias="invoice_sent")
    paid: int = 0
    conversion_rates: ConversionRates = Field(default_factory=ConversionRates)


class MonthlyEarning(AnalyticsModel):
    month: str
    amount: Money = ZERO


class TopClient(AnalyticsModel):
    client_id: str
    client_name: str
    number_of_gigs: int = 0
    total_invoiced: Money = ZERO
    total_paid: Money = ZERO
    avg_payment_time: Optional[float] = None  # None = no paid invoice with both timestamps


class PaymentDelayBucket(AnalyticsModel):
    bucket: str
    count: int = 0


class PaymentDelayStats(AnalyticsModel):
    average_time: float = 0.0
    longest_time: int = 0
    delay_data: List[PaymentDelayBucket] = Field(default_factory=list)


class AnalyticsSnapshot(AnalyticsModel):
    total_invoiced: Money = ZERO
    total_paid: Money = ZERO
    average_gig_value: Money = ZERO
    active_gigs: int = 0
    status_counts: StatusCounts = Field(default_factory=StatusCounts)
    booking_funnel: BookingFunnel = Field(default_factory=BookingFunnel)
    monthly_earnings: List[MonthlyEarning] = Field(default_factory=list)
    top_clients: List[TopClient] = Field(default_factory=list)
    payment_delay: PaymentDelayStats = Field(default_factory=PaymentDelayStats)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, truncated toward zero"""
    return int((as_utc(end) - as_utc(start)).total_seconds() / 86400)


def conversion_rate(numerator: int, denominator: int) -> float:
    """Percentage rounded to one decimal place; 0 when denominator is 0"""
    if denominator <= 0:
        return 0.0
    rate = Decimal(numerator) * Decimal(100) / Decimal(denominator)
    return float(rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _gig_year(gig) -> Optional[int]:
    gig_date = getattr(gig, "date", None)
    return gig_date.year if gig_date else None


def _payment_days(invoice) -> Optional[int]:
    if invoice.invoice_sent_at and invoice.invoice_paid_at:
        return days_between(invoice.invoice_sent_at, invoice.invoice_paid_at)
    return None


def count_statuses(gigs: Iterable, invoices_by_gig: Dict[str, object], today: date) -> StatusCounts:
    """Tally persisted statuses; overdue is counted independently"""
    counts = StatusCounts()
    for gig in gigs:
        value = status_value(gig.status)
        if value != OVERDUE and value in StatusCounts.model_fields:
            setattr(counts, value, getattr(counts, value) + 1)
        if is_overdue(gig, invoices_by_gig.get(gig.id), today):
            counts.overdue += 1
    return counts


def build_booking_funnel(gigs: Iterable, year: int) -> BookingFunnel:
    """Stage counts and conversion rates for gigs dated in the given year"""
    funnel = BookingFunnel()
    for gig in gigs:
        if _gig_year(gig) != year:
            continue
        value = status_value(gig.status)
        funnel.inquiry += 1
        if value in CONFIRMED_OR_LATER:
            funnel.confirmed += 1
        if value in INVOICED_OR_LATER:
            funnel.invoice_sent += 1
        if value == GigStatus.PAID.value:
            funnel.paid += 1

    funnel.conversion_rates = ConversionRates(
        inquiry_to_confirmed=conversion_rate(funnel.confirmed, funnel.inquiry),
        confirmed_to_invoice_sent=conversion_rate(funnel.invoice_sent, funnel.confirmed),
        invoice_sent_to_paid=conversion_rate(funnel.paid, funnel.invoice_sent),
        confirmed_to_paid=conversion_rate(funnel.paid, funnel.confirmed),
    )
    return funnel


def build_monthly_earnings(gigs: Iterable, year: int) -> List[MonthlyEarning]:
    """Paid gig amounts per month of the given year, January to December"""
    totals = {month: ZERO for month in range(1, 13)}
    for gig in gigs:
        if status_value(gig.status) != GigStatus.PAID.value:
            continue
        if not gig.amount or _gig_year(gig) != year:
            continue
        totals[gig.date.month] += Decimal(gig.amount)

    return [
        MonthlyEarning(month=calendar.month_abbr[month], amount=totals[month])
        for month in sorted(totals)
    ]


def build_top_clients(clients: Iterable, gigs: Sequence, invoices: Sequence) -> List[TopClient]:
    """Per-client totals, sorted by amount paid (highest first)"""
    gig_counts: Dict[str, int] = defaultdict(int)
    for gig in gigs:
        if gig.client_id:
            gig_counts[gig.client_id] += 1

    invoices_by_client: Dict[str, list] = defaultdict(list)
    for invoice in invoices:
        if invoice.client_id:
            invoices_by_client[invoice.client_id].append(invoice)

    rows = []
    for client in clients:
        if not client or not client.id:
            continue
        client_invoices = invoices_by_client.get(client.id, [])

        total_invoiced = sum((Decimal(inv.total or 0) for inv in client_invoices), ZERO)
        total_paid = sum(
            (Decimal(inv.total) for inv in client_invoices if inv.invoice_paid_at and inv.total),
            ZERO,
        )
        payment_times = [
            days for days in (_payment_days(inv) for inv in client_invoices)
            if days is not None
        ]

        rows.append(
            TopClient(
                client_id=client.id,
                client_name=client.name,
                number_of_gigs=gig_counts.get(client.id, 0),
                total_invoiced=total_invoiced,
                total_paid=total_paid,
                avg_payment_time=(
                    sum(payment_times) / len(payment_times) if payment_times else None
                ),
            )
        )

    return sorted(rows, key=lambda row: row.total_paid, reverse=True)


def bucket_for(days: int) -> str:
    """Delay bucket label for a number of days"""
    for label, upper in DELAY_BUCKETS:
        if upper is None or days <= upper:
            return label
    return DELAY_BUCKETS[-1][0]


def build_payment_delay(invoices: Iterable) -> PaymentDelayStats:
    """Histogram of days from sending to payment over all invoices"""
    counts = {label: 0 for label, _ in DELAY_BUCKETS}
    payment_times = []

    for invoice in invoices:
        days = _payment_days(invoice)
        if days is None:
            continue
        payment_times.append(days)
        counts[bucket_for(days)] += 1

    return PaymentDelayStats(
        average_time=sum(payment_times) / len(payment_times) if payment_times else 0.0,
        longest_time=max(payment_times) if payment_times else 0,
        delay_data=[
            PaymentDelayBucket(bucket=label, count=counts[label])
            for label, _ in DELAY_BUCKETS
        ],
    )


def compute_analytics(
    gigs: Sequence,
    clients: Sequence,
    invoices: Sequence,
    funnel_year,
    earnings_year,
    today: date,
) -> AnalyticsSnapshot:
    """
    Build the full analytics snapshot for one user

    Args:
        gigs: All of the user's gigs
        clients: All of the user's clients
        invoices: All of the user's invoices
        funnel_year: YearFilter (or its value) for the booking funnel
        earnings_year: YearFilter (or its value) for monthly earnings
        today: Current date; resolves the year filters and overdue state

    Returns:
        AnalyticsSnapshot. Empty inputs give a zeroed snapshot.
    """
    funnel_year = YearFilter(funnel_year).resolve(today)
    earnings_year = YearFilter(earnings_year).resolve(today)

    invoices_by_gig = {invoice.gig_id: invoice for invoice in invoices}

    status_counts = count_statuses(gigs, invoices_by_gig, today)

    paid_amounts = [
        Decimal(gig.amount) for gig in gigs
        if status_value(gig.status) == GigStatus.PAID.value and gig.amount
    ]
    total_paid = sum(paid_amounts, ZERO)
    average_gig_value = (
        (total_paid / len(paid_amounts)).quantize(CENT, rounding=ROUND_HALF_UP)
        if paid_amounts else ZERO
    )

    return AnalyticsSnapshot(
        total_invoiced=sum((Decimal(inv.total or 0) for inv in invoices), ZERO),
        total_paid=total_paid,
        average_gig_value=average_gig_value,
        active_gigs=(
            status_counts.confirmed + status_counts.invoice_sent + status_counts.overdue
        ),
        status_counts=status_counts,
        booking_funnel=build_booking_funnel(gigs, funnel_year),
        monthly_earnings=build_monthly_earnings(gigs, earnings_year),
        top_clients=build_top_clients(clients, gigs, invoices),
        payment_delay=build_payment_delay(invoices),
    )
