"""Warranty service — owner-scoped create and list.

Input rules and expiry arithmetic come from ``warranty_lifecycle``; this
module adds ownership checks and persistence, and converts storage failures
into ``StorageError``.
"""
import logging
from datetime import date
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from warranty_tracker.errors import StorageError, Unauthenticated, ValidationError
from warranty_tracker.models.user import User
from warranty_tracker.models.warranty import Warranty
from warranty_tracker.services.warranty_lifecycle import (
    compute_expiry,
    parse_purchase_date,
    parse_warranty_months,
    validate_warranty_input,
)

logger = logging.getLogger(__name__)


def _require_owner(owner: Optional[User]) -> User:
    if owner is None:
        raise Unauthenticated()
    return owner


def create_warranty(
    db: Session,
    owner: Optional[User],
    product_name: Optional[str],
    purchase_date: Any,
    warranty_months: Any,
    today: date,
    serial_number: Optional[str] = None,
) -> Warranty:
    """Validate, compute the expiry date and persist a warranty for ``owner``.

    Not idempotent: submitting the same input twice creates two records.
    """
    owner = _require_owner(owner)

    errors = validate_warranty_input(
        product_name, purchase_date, warranty_months, today, serial_number=serial_number,
    )
    if errors:
        logger.warning("Warranty input rejected for user %s: %s", owner.user_id, sorted(errors))
        raise ValidationError(errors)

    purchased = parse_purchase_date(purchase_date)
    months = parse_warranty_months(warranty_months)
    serial = serial_number.strip() if serial_number and serial_number.strip() else None

    warranty = Warranty(
        owner_id=owner.user_id,
        product_name=product_name.strip(),
        serial_number=serial,
        purchase_date=purchased,
        warranty_months=months,
        expiry_date=compute_expiry(purchased, months),
    )
    try:
        db.add(warranty)
        db.commit()
        db.refresh(warranty)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to persist warranty for user %s", owner.user_id, exc_info=True)
        raise StorageError() from exc

    logger.info(
        "Created warranty '%s' (%s) for user %s, expires %s",
        warranty.product_name, warranty.warranty_id, owner.user_id, warranty.expiry_date,
    )
    return warranty


def list_warranties(db: Session, owner: Optional[User]) -> list[Warranty]:
    """All warranties owned by ``owner``, most recently created first."""
    owner = _require_owner(owner)
    try:
        return (
            db.query(Warranty)
            .filter(Warranty.owner_id == owner.user_id)
            .order_by(Warranty.created_at.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.error("Failed to list warranties for user %s", owner.user_id, exc_info=True)
        raise StorageError() from exc
