"""Registration and login routes."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from warranty_tracker.database import get_db
from warranty_tracker.schemas.user import Credentials, UserOut
from warranty_tracker.services import credential_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: Credentials, db: Session = Depends(get_db)):
    """Create an account. Responds with the safe projection ``{email}``."""
    return credential_service.register(db, payload.email, payload.password)


@router.post("/login", response_model=UserOut)
def login(payload: Credentials, db: Session = Depends(get_db)):
    """Check credentials. The client keeps the returned email as its identity header."""
    return credential_service.authenticate(db, payload.email, payload.password)
