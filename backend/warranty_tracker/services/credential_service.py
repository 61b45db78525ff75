"""Credential service — registration and login.

Responsibilities:
- Email normalization (trimmed, lower-cased) for uniqueness and lookup
- Email format + password strength checks
- bcrypt hashing on register, constant-time verify on login
- Indistinguishable failure for unknown email vs. wrong password
"""
import logging
import re
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from warranty_tracker.errors import DuplicateEmail, InvalidCredentials, StorageError, ValidationError
from warranty_tracker.models.user import User
from warranty_tracker import security

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8
MAX_EMAIL_LENGTH = 255


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def validate_credentials(email: str, password: str) -> dict[str, str]:
    """Return ``{field: message}`` for a malformed registration."""
    errors: dict[str, str] = {}

    if not email:
        errors["email"] = "Email is required"
    elif len(email) > MAX_EMAIL_LENGTH:
        errors["email"] = f"Email must be at most {MAX_EMAIL_LENGTH} characters"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"

    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    elif not re.search(r"[A-Z]", password):
        errors["password"] = "Password must contain at least one uppercase letter"
    elif not re.search(r"[a-z]", password):
        errors["password"] = "Password must contain at least one lowercase letter"
    elif not re.search(r"[0-9]", password):
        errors["password"] = "Password must contain at least one number"

    return errors


def get_user_by_email(db: Session, email: Optional[str]) -> Optional[User]:
    """Look up a user by (normalized) email; None when absent."""
    normalized = normalize_email(email)
    if not normalized:
        return None
    try:
        return db.query(User).filter(User.email == normalized).first()
    except SQLAlchemyError as exc:
        logger.error("User lookup failed", exc_info=True)
        raise StorageError() from exc


def register(db: Session, email: Optional[str], password: Optional[str]) -> User:
    """Create a user with a bcrypt-hashed password."""
    normalized = normalize_email(email)
    password = password or ""

    errors = validate_credentials(normalized, password)
    if errors:
        logger.warning("Registration rejected for %r: %s", normalized, sorted(errors))
        raise ValidationError(errors)

    if get_user_by_email(db, normalized) is not None:
        logger.warning("Email already registered: %s", normalized)
        raise DuplicateEmail()

    user = User(email=normalized, password_hash=security.hash_password(password))
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        # Lost a race against a concurrent registration for the same email
        db.rollback()
        logger.warning("Email already registered (unique constraint): %s", normalized)
        raise DuplicateEmail() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to persist user %s", normalized, exc_info=True)
        raise StorageError() from exc

    logger.info("Registered user %s (%s)", user.user_id, user.email)
    return user


def authenticate(db: Session, email: Optional[str], password: Optional[str]) -> User:
    """Return the user for valid credentials, else raise InvalidCredentials."""
    user = get_user_by_email(db, email)

    if user is None or not password:
        # Still pay for a hash check so timing matches a wrong password
        security.dummy_verify()
        verified = False
    else:
        verified = security.verify_password(password, user.password_hash)

    if not verified:
        logger.warning("Failed login attempt for %r", normalize_email(email))
        raise InvalidCredentials()

    logger.info("User logged in: %s", user.user_id)
    return user
