"""Currency-related utilities: cent conversion and formatting."""

from decimal import Decimal, InvalidOperation


# One hundredth of the unit; the quantum for every allocation and reconciliation check
CENT = Decimal("0.01")

# Largest amount accepted anywhere (ten digits, two of them fractional)
MAX_AMOUNT = Decimal("99999999.99")


def quantize_amount(amount) -> Decimal:
    """
    Normalize an amount to exactly two fractional digits.

    Raises ValueError if the amount is not a finite number or carries
    sub-cent precision (e.g. 10.005), since that cannot be represented
    exactly in the smallest currency unit, or if its magnitude exceeds
    MAX_AMOUNT.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount!r}")
        quantized = value.quantize(CENT)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}")

    if quantized != value:
        raise ValueError(f"Amount {value} has more than two decimal places")
    if abs(quantized) > MAX_AMOUNT:
        raise ValueError(f"Amount {quantized} exceeds the maximum of {MAX_AMOUNT}")
    return quantized


def to_cents(amount: Decimal) -> int:
    """Convert a two-decimal amount (e.g. Decimal("12.34")) to cents (1234)."""
    return int(quantize_amount(amount) / CENT)


def from_cents(amount_cents: int) -> Decimal:
    """Convert cents (1234) back to a two-decimal amount (Decimal("12.34"))."""
    return (Decimal(amount_cents) * CENT).quantize(CENT)


def format_amount(amount_cents: int) -> str:
    """
    Format an amount in cents as a plain two-decimal string.

    Args:
        amount_cents: Amount in cents (e.g., 1234 for 12.34)

    Returns:
        Formatted string (e.g., "12.34", "-0.50")
    """
    return str(from_cents(amount_cents))
