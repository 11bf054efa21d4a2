"""ReportLab PDF Generation Service Implementation

Implements invoice PDF generation using ReportLab library.
"""

from io import BytesIO
from decimal import Decimal
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.client import Client
from src.domain.gig import Gig
from src.domain.invoice import Invoice


def _euro(amount) -> str:
    return f"€{amount:,.2f}"


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Renders a single-line invoice for a gig with its VAT breakdown.
    """

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
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        label_style = ParagraphStyle(
            "LabelStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#6D28D9"),
            spaceAfter=20,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        elements.append(Paragraph(sender_name, title_style))
        elements.append(Paragraph("INVOICE", label_style))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Issued:", (invoice.invoice_sent_at or invoice.created_at).strftime("%d %B %Y")],
            ["Due:", invoice.due_date.strftime("%d %B %Y") if invoice.due_date else "-"],
            ["Status:", invoice.status.value.upper()],
        ]

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )

        elements.append(invoice_table)
        elements.append(Spacer(1, 10 * mm))

        elements.append(Paragraph("Bill To:", bold_style))
        if client:
            elements.append(Paragraph(client.name, normal_style))
            for contact in (client.email, client.phone):
                if contact:
                    elements.append(Paragraph(contact, normal_style))
        else:
            elements.append(Paragraph("-", normal_style))
        elements.append(Spacer(1, 10 * mm))

        description = gig.title
        if gig.location:
            description = f"{description} ({gig.location})"
        line_data = [
            ["Description", "Date", "Amount"],
            [description, gig.date.strftime("%d/%m/%Y"), _euro(invoice.subtotal)],
        ]

        line_table = Table(line_data, colWidths=[100 * mm, 30 * mm, 40 * mm])
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        total_data = [["", "Subtotal:", _euro(invoice.subtotal)]]
        if invoice.include_vat:
            total_data.append(["", f"VAT ({Decimal(invoice.vat_rate).normalize():f}%):", _euro(invoice.vat_amount)])
        total_data.append(["", "Total:", _euro(invoice.total)])

        total_table = Table(total_data, colWidths=[100 * mm, 30 * mm, 40 * mm])
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (1, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (1, -1), (-1, -1), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(total_table)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
