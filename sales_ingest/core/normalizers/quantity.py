"""
Quantity normalizer.
"""

from decimal import Decimal, InvalidOperation

from sales_ingest.core.errors import ParseError


def parse_quantity(value: object) -> int:
    """
    Parse a unit count.

    Accepts integers, integral floats (3.0 from JSON) and integral text
    ("3", "1,000", "3.0").

    Raises:
        ParseError: If the value is not a whole number
    """
    if isinstance(value, bool) or value is None:
        raise ParseError("quantity", value, "quantity must be a whole number")
    if isinstance(value, int):
        return value

    text = str(value).strip().replace(",", "")
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ParseError("quantity", value, "not a number") from None

    if not amount.is_finite() or amount != amount.to_integral_value():
        raise ParseError("quantity", value, "quantity must be a whole number")
    return int(amount)
