"""Invoice API Routes

FastAPI routes for rendering gig invoices as PDF.
"""

import base64
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.app.use_cases.gigs.dtos import InvoicePdfResponseDTO
from src.app.use_cases.gigs.generate_invoice_pdf import GenerateInvoicePdf
from src.adapter.repositories import (
    SqlAlchemyGigRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
)
from src.adapter.services.pdf_service import ReportLabPdfService
from src.depends import get_session
from src.api.error import raise_for

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found"
                }
            }
        }
    }
}


async def _render(invoice_id: str, user_id: str, session: AsyncSession) -> InvoicePdfResponseDTO:
    use_case = GenerateInvoicePdf(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        gig_repo=SqlAlchemyGigRepository(session),
        client_repo=SqlAlchemyClientRepository(session),
        pdf_service=ReportLabPdfService(),
        sender_name=ApplicationConfig.COMPANY_NAME,
    )
    result = await use_case.execute(invoice_id, user_id)

    if result.is_err():
        raise_for(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """
    Download an invoice as PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Invoice not found
    """
    rendered = await _render(invoice_id, user_id, session)

    return Response(
        content=base64.b64decode(rendered.pdf_base64),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={rendered.invoice_number}.pdf"
        }
    )


@router.get(
    "/{invoice_id}/pdf/base64",
    response_model=InvoicePdfResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE}
)
async def get_invoice_pdf_base64(
    invoice_id: str,
    user_id: str = Query(..., min_length=1, description="Owning user ID"),
    session: AsyncSession = Depends(get_session)
):
    """Render an invoice PDF and return it base64-encoded in JSON."""
    return await _render(invoice_id, user_id, session)
