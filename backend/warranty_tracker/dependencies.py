"""Request-scoped dependencies: caller identity and the current date."""
import logging
from datetime import date, datetime
from typing import Optional

import pytz
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from warranty_tracker.config import settings
from warranty_tracker.database import get_db
from warranty_tracker.errors import Unauthenticated
from warranty_tracker.models.user import User
from warranty_tracker.services import credential_service

logger = logging.getLogger(__name__)


def get_today() -> date:
    """Today's calendar date in the configured timezone."""
    return datetime.now(pytz.timezone(settings.TIMEZONE)).date()


def get_current_user(
    x_user_email: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller from the trusted ``X-User-Email`` header.

    Only this function knows how identity is presented; swapping the header
    for a signed token changes nothing downstream.
    """
    user = credential_service.get_user_by_email(db, x_user_email)
    if user is None:
        logger.warning("Unresolved caller identity %r", x_user_email)
        raise Unauthenticated()
    return user
