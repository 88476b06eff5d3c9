"""Domain errors raised by the split and settlement utilities.

Routers let these propagate; main.py maps each kind to an HTTP status.
"""


class BillingError(Exception):
    """Base class for bill splitting and settlement errors."""
    pass


class NotFoundError(BillingError):
    """A bill, or a participant scoped to a bill, does not exist."""
    pass


class InvalidSplitError(BillingError):
    """Custom amounts are missing, negative or do not sum to the total."""
    pass


class InvalidAmountError(BillingError):
    """A total or participant amount is not positive where it must be."""
    pass
