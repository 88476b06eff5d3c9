"""Validation utilities for bill lookups and bill creation requests."""

from sqlalchemy.orm import Session

import models
import schemas
from utils.errors import NotFoundError, InvalidSplitError, InvalidAmountError


def get_bill_or_404(db: Session, bill_id: int) -> models.Bill:
    """Get a bill (with its participants) by ID or raise NotFoundError."""
    bill = db.query(models.Bill).filter(models.Bill.id == bill_id).first()
    if not bill:
        raise NotFoundError(f"Bill not found with id: {bill_id}")
    return bill


def get_participant_or_404(db: Session, participant_id: int) -> models.Participant:
    """Get a participant by ID or raise NotFoundError."""
    participant = db.query(models.Participant).filter(models.Participant.id == participant_id).first()
    if not participant:
        raise NotFoundError(f"Participant not found with id: {participant_id}")
    return participant


def get_bill_participant_or_404(bill: models.Bill, participant_id: int) -> models.Participant:
    """Find a participant scoped to the given bill or raise NotFoundError."""
    for participant in bill.participants:
        if participant.id == participant_id:
            return participant
    raise NotFoundError(f"Participant not found with id: {participant_id} in bill: {bill.id}")


def validate_bill_create(bill: schemas.BillCreate) -> None:
    """
    Reject a bill creation request before any split is computed.

    Rules:
    - At least one participant
    - Total amount must be greater than zero
    - Under CUSTOM split, every participant needs an explicit amount

    Negative amounts are rejected by ParticipantCreate itself.
    """
    if not bill.participants:
        raise InvalidSplitError("At least one participant is required for bill creation")

    if bill.total_amount is None or bill.total_amount <= 0:
        raise InvalidAmountError("Total bill amount must be greater than zero")

    if bill.split_type == schemas.SplitType.CUSTOM:
        for participant in bill.participants:
            if participant.amount is None:
                raise InvalidSplitError(
                    f"Amount is required for participant '{participant.name}' when using CUSTOM split"
                )
