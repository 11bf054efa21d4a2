"""Request schemas for Gig API

Pydantic models for validating incoming HTTP requests.
"""

import datetime as dt
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from src.domain.gig import GigStatus


class CreateGigRequestSchema(BaseModel):
    """
    Request schema for creating a gig

    Used for POST /gigs endpoint.
    """

    user_id: str = Field(..., min_length=1, description="Owning user ID")
    title: str = Field(..., min_length=1, max_length=255, description="Gig title")
    date: dt.date = Field(..., description="Gig date (YYYY-MM-DD)")
    amount: Optional[Decimal] = Field(default=None, ge=0, description="Agreed fee")
    location: str = Field(default="", description="Location")
    status: GigStatus = Field(default=GigStatus.INQUIRY, description="Initial status")
    client_id: Optional[str] = Field(default=None, description="Linked client ID")
    notes: Optional[str] = Field(default=None, description="Notes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        """Reject whitespace-only titles"""
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user_abc123",
                "title": "Wedding reception - Galway",
                "date": "2025-06-14",
                "amount": "850.00",
                "location": "Galway",
                "client_id": "c7a3b0e2-6f11-4f0c-8d53-0f4c1a2b3c4d"
            }
        }


class UpdateGigStatusRequestSchema(BaseModel):
    """Request schema for PATCH /gigs/{gig_id}/status"""

    user_id: str = Field(..., min_length=1, description="Owning user ID")
    status: GigStatus = Field(..., description="New status")


class CreateInvoiceRequestSchema(BaseModel):
    """Request schema for POST /gigs/{gig_id}/invoice"""

    user_id: str = Field(..., min_length=1, description="Owning user ID")
    due_date: Optional[dt.date] = Field(default=None, description="Payment due date")
    include_vat: bool = Field(default=False, description="Whether VAT is charged")
    vat_rate: Optional[Decimal] = Field(default=None, ge=0, le=100, description="VAT rate in percent")
    subtotal: Optional[Decimal] = Field(default=None, ge=0, description="Amount before VAT")


class CreateClientRequestSchema(BaseModel):
    """Request schema for POST /clients"""

    user_id: str = Field(..., min_length=1, description="Owning user ID")
    name: str = Field(..., min_length=1, description="Client name")
    email: Optional[str] = Field(default=None, description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
