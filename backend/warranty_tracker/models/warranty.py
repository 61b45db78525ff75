"""Warranty ORM model."""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Date, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from warranty_tracker.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Warranty(Base):
    __tablename__ = "warranties"

    warranty_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    product_name = Column(String(100), nullable=False)
    serial_number = Column(String(100), nullable=True)
    purchase_date = Column(Date, nullable=False)
    warranty_months = Column(Integer, nullable=False)
    expiry_date = Column(Date, nullable=False)  # purchase_date + warranty_months, never edited by hand
    # Set client-side so rows created within the same second still order correctly
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    owner = relationship("User", back_populates="warranties")
