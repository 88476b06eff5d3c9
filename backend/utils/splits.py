"""Split calculation utilities: turn a bill total into per-participant shares."""

import logging
from decimal import Decimal

import schemas
from utils.currency import to_cents, from_cents, format_amount
from utils.errors import InvalidSplitError, InvalidAmountError

logger = logging.getLogger(__name__)


def split_equally(total_cents: int, count: int) -> list[int]:
    """
    Divide a total equally among `count` participants.

    Algorithm:
    1. Floor-divide the total by the count to get the per-head share
    2. Give every participant except the last the per-head share
    3. Give the last participant the per-head share plus the whole residual

    The residual is always less than `count` cents, so the amounts sum to
    the total exactly and only the last share differs from the others.
    """
    if count < 1:
        raise InvalidSplitError("At least one participant is required to split a bill equally")
    if total_cents <= 0:
        raise InvalidAmountError("Total bill amount must be greater than zero")

    per_head = total_cents // count
    residual = total_cents - per_head * count

    amounts = [per_head] * count
    # Last participant absorbs the rounding residual
    amounts[-1] += residual

    logger.debug(f"Split {format_amount(total_cents)} equally among {count} participants")
    return amounts


def split_custom(total_cents: int, participants: list[schemas.ParticipantCreate]) -> list[int]:
    """
    Validate caller-supplied shares against the total and return them in cents.

    Every participant must carry an explicit, non-negative amount, and the
    amounts must sum to the total exactly (no tolerance).
    """
    if not participants:
        raise InvalidSplitError("At least one participant is required for a custom split")
    if total_cents <= 0:
        raise InvalidAmountError("Total bill amount must be greater than zero")

    amounts = []
    for participant in participants:
        if participant.amount is None:
            raise InvalidSplitError(
                f"Amount is required for participant '{participant.name}' when using CUSTOM split"
            )
        try:
            amount_cents = to_cents(participant.amount)
        except ValueError as e:
            raise InvalidAmountError(f"Invalid amount for participant '{participant.name}': {e}")
        if amount_cents < 0:
            raise InvalidSplitError(f"Amount cannot be negative for participant '{participant.name}'")
        amounts.append(amount_cents)

    total_split = sum(amounts)
    if total_split != total_cents:
        raise InvalidSplitError(
            f"Custom amounts do not sum to the bill total: "
            f"expected {format_amount(total_cents)}, got {format_amount(total_split)}"
        )

    return amounts


def allocate(
    total_amount: Decimal,
    split_type: schemas.SplitType,
    participants: list[schemas.ParticipantCreate]
) -> list[tuple[schemas.ParticipantCreate, Decimal]]:
    """
    Compute each participant's owed amount for a bill.

    Returns (participant, amount) pairs in input order whose amounts sum to
    `total_amount`. Pure: nothing is persisted.
    """
    try:
        total_cents = to_cents(total_amount)
    except ValueError as e:
        raise InvalidAmountError(f"Invalid total bill amount: {e}")

    if split_type == schemas.SplitType.EQUALLY:
        amounts = split_equally(total_cents, len(participants))
    elif split_type == schemas.SplitType.CUSTOM:
        amounts = split_custom(total_cents, participants)
    else:
        raise InvalidSplitError(f"Unsupported split type: {split_type}")

    return [(participant, from_cents(amount)) for participant, amount in zip(participants, amounts)]
