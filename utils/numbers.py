"""
Decimal Helpers

Quantities, factors and costs are handled as Decimal so that unit math
such as 3 oz -> 0.1875 lb stays exact.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from constants import COST_DECIMAL_PLACES


def to_decimal(value):
    """
    Coerce a number or numeric string to Decimal.

    Floats go through str() so 0.6 becomes Decimal('0.6'), not its binary
    expansion. Returns None for None.

    Raises:
        ValueError: If the value is not numeric
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, TypeError):
        raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def format_money(value):
    """Format an amount to cents, rounding half up: Decimal('3.6') -> '3.60'."""
    return str(to_decimal(value).quantize(COST_DECIMAL_PLACES, rounding=ROUND_HALF_UP))
