"""Bills router: create, read, update, delete bills and settle participant payments."""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

import models
import schemas
from database import get_db
from utils.currency import to_cents, from_cents
from utils.display import bill_detail
from utils.settlement import (
    override_bill_status,
    recompute_bill_status,
    toggle_participant_payment,
)
from utils.splits import allocate, split_equally, split_custom
from utils.validation import get_bill_or_404, validate_bill_create

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bills"])


def reallocate_bill(bill: models.Bill, total_amount: Decimal, split_type: schemas.SplitType) -> None:
    """
    Re-apply a split to an existing bill after its total or split type changed.

    EQUALLY recomputes every share in participant order. CUSTOM keeps the
    stored shares, which must already sum to the new total. Nothing on the
    bill is touched unless the split succeeds.
    """
    total_cents = to_cents(total_amount)

    if split_type == schemas.SplitType.EQUALLY:
        amounts = split_equally(total_cents, len(bill.participants))
    else:
        current = [
            schemas.ParticipantCreate(name=p.name, amount=from_cents(p.amount))
            for p in bill.participants
        ]
        amounts = split_custom(total_cents, current)

    for participant, amount in zip(bill.participants, amounts):
        participant.amount = amount
    bill.total_amount = total_cents
    bill.split_type = split_type.value


@router.get("/bills", response_model=list[schemas.BillWithParticipants])
def read_bills(
    status: Optional[schemas.BillStatus] = None,
    title: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(models.Bill)
    if status:
        query = query.filter(models.Bill.status == status.value)
    if title:
        query = query.filter(models.Bill.title.icontains(title, autoescape=True))

    bills = query.order_by(models.Bill.bill_date.desc(), models.Bill.id.desc()).all()
    logger.debug(f"Fetched {len(bills)} bills (status={status}, title={title})")
    return [bill_detail(bill) for bill in bills]


@router.get("/bills/status/{status}", response_model=list[schemas.BillWithParticipants])
def read_bills_by_status(status: schemas.BillStatus, db: Session = Depends(get_db)):
    bills = db.query(models.Bill).filter(models.Bill.status == status.value).all()
    return [bill_detail(bill) for bill in bills]


@router.get("/bills/search", response_model=list[schemas.BillWithParticipants])
def search_bills(title: str = Query(min_length=1), db: Session = Depends(get_db)):
    bills = db.query(models.Bill).filter(models.Bill.title.icontains(title, autoescape=True)).all()
    return [bill_detail(bill) for bill in bills]


@router.get("/bills/summary", response_model=schemas.BillStatusSummary)
def get_bill_status_summary(db: Session = Depends(get_db)):
    counts = dict(
        db.query(models.Bill.status, func.count(models.Bill.id))
        .group_by(models.Bill.status)
        .all()
    )
    incomplete = counts.get(schemas.BillStatus.INCOMPLETE.value, 0)
    complete = counts.get(schemas.BillStatus.COMPLETE.value, 0)
    paid = counts.get(schemas.BillStatus.PAID.value, 0)

    return schemas.BillStatusSummary(
        total=incomplete + complete + paid,
        incomplete=incomplete,
        complete=complete,
        paid=paid
    )


@router.get("/bills/{bill_id}", response_model=schemas.BillWithParticipants)
def get_bill(bill_id: int, db: Session = Depends(get_db)):
    bill = get_bill_or_404(db, bill_id)
    return bill_detail(bill)


@router.post("/bills", response_model=schemas.BillWithParticipants, status_code=201)
def create_bill(bill: schemas.BillCreate, db: Session = Depends(get_db)):
    # All checks run before anything is added to the session
    validate_bill_create(bill)
    allocations = allocate(bill.total_amount, bill.split_type, bill.participants)

    db_bill = models.Bill(
        title=bill.title,
        total_amount=to_cents(bill.total_amount),
        split_type=bill.split_type.value,
        bill_date=bill.bill_date,
        status=schemas.BillStatus.INCOMPLETE.value
    )
    for position, (participant, amount) in enumerate(allocations):
        db_bill.participants.append(models.Participant(
            position=position,
            name=participant.name,
            amount=to_cents(amount),
            payment_status=schemas.PaymentStatus.UNPAID.value
        ))

    db.add(db_bill)
    db.commit()
    db.refresh(db_bill)

    logger.info(f"Bill created with id: {db_bill.id} ({len(allocations)} participants, {bill.split_type.value})")
    return bill_detail(db_bill)


@router.put("/bills/{bill_id}", response_model=schemas.BillWithParticipants)
def update_bill(bill_id: int, bill_update: schemas.BillUpdate, db: Session = Depends(get_db)):
    bill = get_bill_or_404(db, bill_id)

    if bill_update.total_amount is not None or bill_update.split_type is not None:
        total_amount = bill_update.total_amount
        if total_amount is None:
            total_amount = from_cents(bill.total_amount)
        split_type = bill_update.split_type or schemas.SplitType(bill.split_type)
        reallocate_bill(bill, total_amount, split_type)

    if bill_update.title is not None:
        bill.title = bill_update.title
    if bill_update.bill_date is not None:
        bill.bill_date = bill_update.bill_date
    if bill_update.status is not None:
        override_bill_status(bill, bill_update.status)

    db.commit()
    db.refresh(bill)

    logger.info(f"Bill updated with id: {bill_id}")
    return bill_detail(bill)


@router.delete("/bills/{bill_id}")
def delete_bill(bill_id: int, db: Session = Depends(get_db)):
    bill = get_bill_or_404(db, bill_id)

    # Participants are removed with the bill (delete-orphan cascade)
    db.delete(bill)
    db.commit()

    logger.info(f"Bill deleted with id: {bill_id}")
    return {"message": "Bill deleted successfully"}


@router.patch("/bills/{bill_id}/pay", response_model=schemas.BillWithParticipants)
def pay_bill(bill_id: int, participant_id: int, db: Session = Depends(get_db)):
    bill = toggle_participant_payment(db, bill_id, participant_id)
    return bill_detail(bill)


@router.put("/bills/{bill_id}/status", response_model=schemas.BillWithParticipants)
def update_bill_status(bill_id: int, db: Session = Depends(get_db)):
    bill = recompute_bill_status(db, bill_id)
    return bill_detail(bill)
