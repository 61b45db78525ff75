"""Warranty API routes — owner-scoped, delegates to warranty_service."""
import logging
from datetime import date
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from warranty_tracker.database import get_db
from warranty_tracker.dependencies import get_current_user, get_today
from warranty_tracker.models.user import User
from warranty_tracker.models.warranty import Warranty
from warranty_tracker.schemas.warranty import WarrantyCreate, WarrantyOut
from warranty_tracker.services import warranty_service
from warranty_tracker.services.warranty_lifecycle import classify_status

logger = logging.getLogger(__name__)
router = APIRouter()


def _to_out(warranty: Warranty, today: date) -> WarrantyOut:
    """Attach the derived status, recomputed on every read."""
    info = classify_status(warranty.expiry_date, today)
    return WarrantyOut(
        id=warranty.warranty_id,
        product_name=warranty.product_name,
        serial_number=warranty.serial_number,
        purchase_date=warranty.purchase_date,
        warranty_months=warranty.warranty_months,
        expiry_date=warranty.expiry_date,
        created_at=warranty.created_at,
        status=info.status.value,
        days_remaining=info.days_remaining,
        status_message=info.message,
    )


@router.post("", response_model=WarrantyOut, status_code=status.HTTP_201_CREATED)
def create_warranty(
    payload: WarrantyCreate,
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """Create a warranty for the caller; the expiry date is computed server-side."""
    warranty = warranty_service.create_warranty(
        db=db,
        owner=user,
        product_name=payload.product_name,
        serial_number=payload.serial_number,
        purchase_date=payload.purchase_date,
        warranty_months=payload.warranty_months,
        today=today,
    )
    return _to_out(warranty, today)


@router.get("", response_model=list[WarrantyOut])
def list_warranties(
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """List the caller's warranties, newest first."""
    warranties = warranty_service.list_warranties(db, user)
    return [_to_out(w, today) for w in warranties]
