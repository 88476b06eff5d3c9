"""
Display utilities: build API representations of bills and participants
"""
import models
import schemas
from utils.currency import from_cents


def participant_detail(participant: models.Participant) -> schemas.Participant:
    """Convert a stored participant (amount in cents) to its API form."""
    return schemas.Participant(
        id=participant.id,
        bill_id=participant.bill_id,
        name=participant.name,
        amount=from_cents(participant.amount),
        payment_status=participant.payment_status
    )


def bill_detail(bill: models.Bill) -> schemas.BillWithParticipants:
    """
    Convert a stored bill to its API form.

    Participants are listed in input order, as the relationship is ordered
    by position.
    """
    return schemas.BillWithParticipants(
        id=bill.id,
        title=bill.title,
        total_amount=from_cents(bill.total_amount),
        split_type=bill.split_type,
        bill_date=bill.bill_date,
        status=bill.status,
        created_at=bill.created_at,
        updated_at=bill.updated_at,
        participants=[participant_detail(p) for p in bill.participants]
    )
