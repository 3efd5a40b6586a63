"""
Currency normalizer: raw price text or number -> integer minor units.
"""

from collections.abc import Iterable
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from sales_ingest.core.errors import ParseError

CURRENCY_SYMBOLS = (
    "$", "€", "£", "¥", "₹", "₽", "₩", "₪", "₦", "₡", "₵", "₴", "₸", "₱", "₫", "₨",
)


def strip_currency(value: str, currency_codes: Iterable[str] = ()) -> str:
    """Remove currency symbols, ISO codes, thousands separators, spaces and '%'."""
    cleaned = value.strip()
    for symbol in CURRENCY_SYMBOLS:
        cleaned = cleaned.replace(symbol, "")
    upper = cleaned.upper()
    for code in currency_codes:
        code = code.strip().upper()
        if code and code in upper:
            index = upper.index(code)
            cleaned = cleaned[:index] + cleaned[index + len(code):]
            upper = cleaned.upper()
    for separator in (",", " ", "%"):
        cleaned = cleaned.replace(separator, "")
    return cleaned


def to_minor_units(amount: Decimal, multiplier: float) -> int:
    """Scale a decimal amount and truncate toward zero."""
    scaled = amount * Decimal(str(multiplier))
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def parse_currency(
    value: object,
    multiplier: float = 100.0,
    currency_codes: Iterable[str] = (),
) -> int:
    """
    Parse a price into integer minor units.

    Args:
        value: Raw price ("$1,234.56", "EUR 12", 19.99, 5)
        multiplier: Minor units per major unit (100 for cents)
        currency_codes: ISO codes to strip in addition to symbols

    Returns:
        Price in minor units, truncated ("$1,234.56" -> 123456 at x100)

    Raises:
        ParseError: If the residual string is not a number
    """
    if isinstance(value, bool) or value is None:
        raise ParseError("price", value, "price must be numeric")

    if isinstance(value, (int, float)):
        text = str(value)
    else:
        text = strip_currency(str(value), currency_codes)

    if not text:
        raise ParseError("price", value, "price is empty")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ParseError("price", value, "not a number") from None

    if not amount.is_finite():
        raise ParseError("price", value, "not a finite number")

    return to_minor_units(amount, multiplier)


def format_minor_units(cents: int, multiplier: float = 100.0) -> str:
    """Render minor units back as a decimal string with two places."""
    amount = Decimal(cents) / Decimal(str(multiplier))
    return f"{amount:.2f}"
