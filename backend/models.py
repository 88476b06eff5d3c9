from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    total_amount = Column(Integer, nullable=False) # Stored in cents/smallest unit
    split_type = Column(String, nullable=False) # EQUALLY, CUSTOM
    bill_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default="INCOMPLETE", index=True)
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    participants = relationship(
        "Participant",
        cascade="all, delete-orphan",
        order_by="Participant.position",
        lazy="selectin",
    )


class Participant(Base):
    __tablename__ = "participants"

    id = Column(Integer, primary_key=True, index=True)
    bill_id = Column(Integer, ForeignKey("bills.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0) # Input order within the bill
    name = Column(String(100), nullable=False)
    amount = Column(Integer, nullable=False) # The amount this participant owes, in cents
    payment_status = Column(String, nullable=False, default="UNPAID", index=True)
