"""Warranty lifecycle rules — pure functions, no database access.

- Expiry date: purchase date advanced by whole calendar months
- Status: active / expiring / expired, derived from expiry vs. today
- Input validation for new warranties, one message per offending field
"""
import enum
import logging
from datetime import date, datetime
from typing import Any, NamedTuple, Optional, Union

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

PRODUCT_NAME_MIN_LENGTH = 2
PRODUCT_NAME_MAX_LENGTH = 100
MIN_WARRANTY_MONTHS = 1
MAX_WARRANTY_MONTHS = 120
SERIAL_NUMBER_MAX_LENGTH = 100
EXPIRING_WINDOW_DAYS = 30


class WarrantyStatus(str, enum.Enum):
    active = "active"
    expiring = "expiring"
    expired = "expired"


class StatusInfo(NamedTuple):
    status: WarrantyStatus
    days_remaining: int
    message: str


def _as_date(value: Union[date, datetime]) -> date:
    """Drop the time-of-day so comparisons are between calendar dates."""
    if isinstance(value, datetime):
        return value.date()
    return value


def compute_expiry(purchase_date: date, warranty_months: int) -> date:
    """Add ``warranty_months`` calendar months to ``purchase_date``.

    The day of month is kept unless the target month is shorter, in which
    case it clamps to that month's last day (2024-01-31 + 1 → 2024-02-29).
    """
    return _as_date(purchase_date) + relativedelta(months=warranty_months)


def classify_status(expiry_date: Union[date, datetime], today: Union[date, datetime]) -> StatusInfo:
    """Derive the current status of a warranty expiring on ``expiry_date``."""
    days = (_as_date(expiry_date) - _as_date(today)).days

    if days < 0:
        return StatusInfo(WarrantyStatus.expired, days, f"Expired {abs(days)} days ago")
    if days <= EXPIRING_WINDOW_DAYS:
        return StatusInfo(WarrantyStatus.expiring, days, f"Expires in {days} days")
    return StatusInfo(WarrantyStatus.active, days, f"{days} days remaining")


def parse_purchase_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Parse an ISO ``YYYY-MM-DD`` value; None when it is not a real calendar date."""
    if isinstance(value, (date, datetime)):
        return _as_date(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # Clients sometimes send a full timestamp; only the calendar date matters
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_warranty_months(value: Any) -> Optional[int]:
    """Coerce a form value to a whole number of months; None if not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_warranty_input(
    product_name: Optional[str],
    purchase_date: Union[str, date, None],
    warranty_months: Any,
    today: date,
    serial_number: Optional[str] = None,
) -> dict[str, str]:
    """Check new-warranty input; return ``{field: message}`` for every violated rule.

    An empty dict means the input is valid.
    """
    errors: dict[str, str] = {}

    if _is_blank(product_name) or not isinstance(product_name, str):
        errors["product_name"] = "Product name is required"
    elif len(product_name.strip()) < PRODUCT_NAME_MIN_LENGTH:
        errors["product_name"] = f"Product name must be at least {PRODUCT_NAME_MIN_LENGTH} characters"
    elif len(product_name.strip()) > PRODUCT_NAME_MAX_LENGTH:
        errors["product_name"] = f"Product name must be less than {PRODUCT_NAME_MAX_LENGTH} characters"

    if _is_blank(purchase_date):
        errors["purchase_date"] = "Purchase date is required"
    else:
        parsed = parse_purchase_date(purchase_date)
        if parsed is None:
            errors["purchase_date"] = "Invalid date format"
        elif parsed > _as_date(today):
            errors["purchase_date"] = "Purchase date cannot be in the future"

    if _is_blank(warranty_months):
        errors["warranty_months"] = "Warranty duration is required"
    else:
        months = parse_warranty_months(warranty_months)
        if months is None:
            errors["warranty_months"] = "Warranty duration must be a whole number"
        elif months < MIN_WARRANTY_MONTHS:
            errors["warranty_months"] = "Warranty duration must be greater than 0"
        elif months > MAX_WARRANTY_MONTHS:
            errors["warranty_months"] = f"Warranty duration cannot exceed {MAX_WARRANTY_MONTHS} months"

    if serial_number is not None and len(serial_number.strip()) > SERIAL_NUMBER_MAX_LENGTH:
        errors["serial_number"] = f"Serial number must be at most {SERIAL_NUMBER_MAX_LENGTH} characters"

    if errors:
        logger.debug("Warranty input rejected: %s", sorted(errors))
    return errors
