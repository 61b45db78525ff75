"""Password hashing (bcrypt via passlib)."""
from passlib.context import CryptContext

from warranty_tracker.config import settings

# bcrypt cost below 10 is too cheap to resist offline brute force
MIN_BCRYPT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=max(settings.BCRYPT_ROUNDS, MIN_BCRYPT_ROUNDS),
)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of ``plain_password`` against a stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Spend the same bcrypt work as a real verify when there is no stored hash."""
    pwd_context.dummy_verify()
