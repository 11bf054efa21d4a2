"""Unit tests for derived gig status"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.gig import Gig, GigStatus
from src.domain.invoice import Invoice
from src.domain.gig_status import display_status, is_overdue, status_key

TODAY = date(2025, 6, 20)


def make_gig(status=GigStatus.INVOICE_SENT):
    return Gig(
        id="gig_1",
        user_id="user_1",
        title="Pub session",
        date=date(2025, 6, 1),
        amount=Decimal("200.00"),
        status=status,
    )


def make_invoice(due_date):
    return Invoice(
        id="inv_1",
        user_id="user_1",
        gig_id="gig_1",
        invoice_number="INV-2025-000001",
        due_date=due_date,
        subtotal=Decimal("200.00"),
        total=Decimal("200.00"),
    )


class TestIsOverdue:
    """Overdue is derived from the invoice due date"""

    @pytest.mark.parametrize("due_offset", [-30, -1, 0, 1])
    def test_paid_gig_is_never_overdue(self, due_offset):
        """Paid gigs are not overdue whatever the due date"""
        gig = make_gig(GigStatus.PAID)
        invoice = make_invoice(TODAY + timedelta(days=due_offset))

        assert is_overdue(gig, invoice, TODAY) is False

    @pytest.mark.parametrize("status", list(GigStatus))
    def test_gig_without_invoice_is_never_overdue(self, status):
        assert is_overdue(make_gig(status), None, TODAY) is False

    def test_due_yesterday_is_overdue(self):
        assert is_overdue(make_gig(), make_invoice(TODAY - timedelta(days=1)), TODAY) is True

    def test_due_today_is_not_overdue(self):
        assert is_overdue(make_gig(), make_invoice(TODAY), TODAY) is False

    def test_due_tomorrow_is_not_overdue(self):
        assert is_overdue(make_gig(), make_invoice(TODAY + timedelta(days=1)), TODAY) is False

    def test_invoice_without_due_date_is_not_overdue(self):
        assert is_overdue(make_gig(), make_invoice(None), TODAY) is False

    def test_due_date_comparison_ignores_time_of_day(self):
        """A datetime due date late yesterday still counts as yesterday"""
        invoice = make_invoice(None)
        invoice.due_date = datetime(2025, 6, 19, 23, 59)

        assert is_overdue(make_gig(), invoice, TODAY) is True

    def test_confirmed_gig_with_past_due_invoice_is_overdue(self):
        """Any unpaid status with a past due invoice is overdue"""
        gig = make_gig(GigStatus.CONFIRMED)

        assert is_overdue(gig, make_invoice(date(2025, 1, 1)), TODAY) is True


class TestDisplayStatus:
    """Overdue overrides the label but never the stored status"""

    def test_overdue_overrides_label_and_key(self):
        gig = make_gig()
        invoice = make_invoice(date(2025, 6, 1))

        assert display_status(gig, invoice, TODAY) == "Overdue"
        assert status_key(gig, invoice, TODAY) == "overdue"
        assert gig.status == GigStatus.INVOICE_SENT

    def test_labels_for_persisted_statuses(self):
        assert display_status(make_gig(GigStatus.INQUIRY), None, TODAY) == "Inquiry"
        assert display_status(make_gig(GigStatus.CONFIRMED), None, TODAY) == "Confirmed"
        assert display_status(make_gig(GigStatus.INVOICE_SENT), None, TODAY) == "Invoice Sent"
        assert display_status(make_gig(GigStatus.PAID), None, TODAY) == "Paid"

    def test_status_key_without_override(self):
        assert status_key(make_gig(GigStatus.CONFIRMED), None, TODAY) == "confirmed"
