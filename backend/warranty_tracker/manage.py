"""Project management commands.

Usage:
    python -m warranty_tracker.manage create-tables
    python -m warranty_tracker.manage create-user EMAIL PASSWORD
    python -m warranty_tracker.manage list-users
"""
import argparse
import sys
from typing import Optional, Sequence

from warranty_tracker.database import Base, SessionLocal, engine
from warranty_tracker.errors import WarrantyTrackerError
from warranty_tracker.logging_config import setup_logging
from warranty_tracker.models.user import User
from warranty_tracker.models.warranty import Warranty  # noqa: F401
from warranty_tracker.services import credential_service


def create_tables(args) -> int:
    """Create missing tables (use alembic for real deployments)."""
    Base.metadata.create_all(bind=engine)
    print("Tables created")
    return 0


def create_user(args) -> int:
    db = SessionLocal()
    try:
        user = credential_service.register(db, args.email, args.password)
    except WarrantyTrackerError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        for field, message in getattr(exc, "fields", {}).items():
            print(f"  {field}: {message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user {user.email} ({user.user_id})")
    return 0


def list_users(args) -> int:
    db = SessionLocal()
    try:
        users = db.query(User).order_by(User.email).all()
        if not users:
            print("No users registered")
            return 0
        for user in users:
            print(f"{user.user_id}  {user.email}  warranties={len(user.warranties)}")
    finally:
        db.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Warranty Tracker management commands")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("create-tables", help="Create database tables").set_defaults(func=create_tables)

    create = subparsers.add_parser("create-user", help="Register a user")
    create.add_argument("email")
    create.add_argument("password")
    create.set_defaults(func=create_user)

    subparsers.add_parser("list-users", help="Show registered users").set_defaults(func=list_users)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging(level="WARNING")
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
