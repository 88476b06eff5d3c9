"""Settlement utilities: derive a bill's status from its participants' payment flags."""

import logging
from typing import Iterable

from sqlalchemy.orm import Session

import models
import schemas
from utils.validation import get_bill_or_404, get_bill_participant_or_404

logger = logging.getLogger(__name__)


def derive_bill_status(payment_statuses: Iterable[str]) -> schemas.BillStatus:
    """
    Derive a bill status from the multiset of participant payment flags.

    COMPLETE only when every participant (at least one) has paid. "None
    paid" and "some paid" both map to INCOMPLETE; there is no partially
    paid status. PAID is never derived.
    """
    statuses = list(payment_statuses)
    paid_count = sum(1 for s in statuses if s == schemas.PaymentStatus.PAID)

    if statuses and paid_count == len(statuses):
        return schemas.BillStatus.COMPLETE
    return schemas.BillStatus.INCOMPLETE


def apply_derived_status(bill: models.Bill) -> schemas.BillStatus:
    """Set bill.status from its participants' current flags (no commit)."""
    status = derive_bill_status(p.payment_status for p in bill.participants)
    bill.status = status.value
    return status


def recompute_bill_status(db: Session, bill_id: int) -> models.Bill:
    """Re-run the derivation rule against current flags and persist. Idempotent."""
    bill = get_bill_or_404(db, bill_id)

    status = apply_derived_status(bill)
    db.commit()
    db.refresh(bill)

    logger.info(f"Bill status updated to {status.value} for bill id: {bill_id}")
    return bill


def toggle_participant_payment(db: Session, bill_id: int, participant_id: int) -> models.Bill:
    """
    Flip one participant's payment flag (PAID <-> UNPAID) and re-derive the
    bill status over all participants. Flag and status are committed together.
    """
    bill = get_bill_or_404(db, bill_id)
    participant = get_bill_participant_or_404(bill, participant_id)

    if participant.payment_status == schemas.PaymentStatus.PAID:
        participant.payment_status = schemas.PaymentStatus.UNPAID.value
    else:
        participant.payment_status = schemas.PaymentStatus.PAID.value

    status = apply_derived_status(bill)
    db.commit()
    db.refresh(bill)

    logger.info(
        f"Payment status toggled to {participant.payment_status} for participant id: "
        f"{participant_id} in bill id: {bill_id}; bill status is {status.value}"
    )
    return bill


def override_bill_status(bill: models.Bill, status: schemas.BillStatus) -> None:
    """
    Write a bill status as-is, without consulting payment flags (no commit).

    This is the only way to reach PAID. The stored status may disagree with
    the flags afterwards; recompute_bill_status restores agreement.
    """
    derived = derive_bill_status(p.payment_status for p in bill.participants)
    if status != derived:
        logger.warning(
            f"Bill {bill.id} status overridden to {status.value}; "
            f"payment flags derive {derived.value}"
        )
    bill.status = status.value
