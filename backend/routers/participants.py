"""Participants router: look up bill participants and their payment flags."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

import models
import schemas
from database import get_db
from utils.display import participant_detail
from utils.validation import get_bill_or_404, get_participant_or_404


router = APIRouter(tags=["participants"])


@router.get("/participants", response_model=list[schemas.Participant])
def read_participants(
    payment_status: Optional[schemas.PaymentStatus] = None,
    db: Session = Depends(get_db)
):
    query = db.query(models.Participant)
    if payment_status:
        query = query.filter(models.Participant.payment_status == payment_status.value)

    participants = query.order_by(models.Participant.bill_id, models.Participant.position).all()
    return [participant_detail(p) for p in participants]


@router.get("/participants/{participant_id}", response_model=schemas.Participant)
def get_participant(participant_id: int, db: Session = Depends(get_db)):
    participant = get_participant_or_404(db, participant_id)
    return participant_detail(participant)


@router.get("/bills/{bill_id}/participants", response_model=list[schemas.Participant])
def read_bill_participants(
    bill_id: int,
    payment_status: Optional[schemas.PaymentStatus] = None,
    db: Session = Depends(get_db)
):
    bill = get_bill_or_404(db, bill_id)

    participants = bill.participants
    if payment_status:
        participants = [p for p in participants if p.payment_status == payment_status]

    return [participant_detail(p) for p in participants]
