"""Monetary amount parsing.

Amounts are ``Decimal`` with at most two decimal places; binary floats are
converted through their string form so ``0.1`` stays ``Decimal("0.1")``.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pennywise.domain.budgeting.exceptions import InvalidAmountError

# Constants for validation
DECIMAL_PLACES_LIMIT = -2
ZERO = Decimal("0")
# Largest value a NUMERIC(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def parse_amount(
    value: Any,
    *,
    field_name: str = "amount",
    allow_zero: bool = False,
) -> Decimal:
    """Convert ``value`` to a validated ``Decimal`` amount.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number, has more than two decimal
        places, is negative, exceeds ``MAX_AMOUNT``, or is zero while
        ``allow_zero`` is False.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value, "not a number", field_name)

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidAmountError(value, "not a number", field_name) from e

    if not amount.is_finite():
        raise InvalidAmountError(value, "must be finite", field_name)

    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < DECIMAL_PLACES_LIMIT:
        raise InvalidAmountError(
            value,
            "cannot have more than 2 decimal places",
            field_name,
        )

    if amount < ZERO:
        raise InvalidAmountError(value, "must not be negative", field_name)

    if amount > MAX_AMOUNT:
        raise InvalidAmountError(
            value,
            f"must not exceed {MAX_AMOUNT}",
            field_name,
        )

    if amount == ZERO and not allow_zero:
        raise InvalidAmountError(value, "must be greater than zero", field_name)

    return amount
