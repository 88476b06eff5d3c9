from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from utils.currency import quantize_amount


class SplitType(str, Enum):
    EQUALLY = "EQUALLY"
    CUSTOM = "CUSTOM"


class BillStatus(str, Enum):
    INCOMPLETE = "INCOMPLETE"  # Zero or some-but-not-all participants paid
    COMPLETE = "COMPLETE"  # All participants paid
    PAID = "PAID"  # Settled/archived; only set by a direct status update


class PaymentStatus(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"


class ParticipantCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    amount: Optional[Decimal] = None  # Required for CUSTOM, ignored for EQUALLY

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Participant name is required')
        return v

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        if v is None:
            return v
        v = quantize_amount(v)
        if v < 0:
            raise ValueError('Amount cannot be negative')
        return v


class BillCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    total_amount: Decimal
    split_type: SplitType
    bill_date: date
    participants: list[ParticipantCreate] = Field(min_length=1)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Bill title is required')
        return v

    @field_validator('total_amount', mode='before')
    @classmethod
    def validate_total_amount(cls, v):
        v = quantize_amount(v)
        if v <= 0:
            raise ValueError('Total amount must be greater than zero')
        return v


class BillUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    total_amount: Optional[Decimal] = None
    split_type: Optional[SplitType] = None
    bill_date: Optional[date] = None
    status: Optional[BillStatus] = None  # Direct override, bypasses derivation

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError('Bill title is required')
        return v

    @field_validator('total_amount', mode='before')
    @classmethod
    def validate_total_amount(cls, v):
        if v is None:
            return v
        v = quantize_amount(v)
        if v <= 0:
            raise ValueError('Total amount must be greater than zero')
        return v


class Participant(BaseModel):
    id: int
    bill_id: int
    name: str
    amount: Decimal
    payment_status: PaymentStatus

    class Config:
        from_attributes = True


class Bill(BaseModel):
    id: int
    title: str
    total_amount: Decimal
    split_type: SplitType
    bill_date: date
    status: BillStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BillWithParticipants(Bill):
    participants: list[Participant]


class BillStatusSummary(BaseModel):
    """Number of bills in each settlement status."""
    total: int
    incomplete: int
    complete: int
    paid: int
