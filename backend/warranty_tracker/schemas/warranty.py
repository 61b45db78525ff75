"""Pydantic schemas for Warranties (camelCase on the wire)."""
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class WarrantyCreate(BaseModel):
    # Raw form values; validate_warranty_input owns the rules.
    product_name: Optional[str] = None
    serial_number: Optional[str] = None
    purchase_date: Optional[str] = None
    warranty_months: Any = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class WarrantyOut(BaseModel):
    id: str
    product_name: str
    serial_number: Optional[str] = None
    purchase_date: date
    warranty_months: int
    expiry_date: date
    created_at: datetime
    status: str
    days_remaining: int
    status_message: str

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
