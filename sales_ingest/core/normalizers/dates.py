"""
Date normalizer: flexible date strings, epoch numbers and YAML date scalars
to timezone-aware UTC datetimes.
"""

from collections.abc import Iterable
from datetime import date, datetime, time, timezone

from sales_ingest.core.errors import ParseError

# Tried after the configured patterns.
FALLBACK_DATE_FORMATS = (
    "%B %d, %Y",                    # March 15, 2024
    "%b %d, %Y %H:%M:%S",           # Mar 15, 2024 10:30:45
    "%Y-%m-%dT%H:%M:%S.%fZ",        # 2024-03-15T10:30:45.000Z
    "%a %b %d %H:%M:%S %Z %Y",      # Fri Mar 15 10:30:45 UTC 2024
    "%a, %d %b %Y %H:%M:%S %Z",     # Fri, 15 Mar 2024 10:30:45 GMT
)

# Epoch values above this are read as milliseconds.
MILLISECONDS_THRESHOLD = 10**10


def to_utc(value: datetime) -> datetime:
    """Convert an aware datetime to UTC; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_epoch(value: str) -> datetime | None:
    """Interpret an integer string as Unix seconds or milliseconds."""
    try:
        timestamp = int(value)
    except ValueError:
        return None
    try:
        if timestamp > MILLISECONDS_THRESHOLD:
            seconds, millis = divmod(timestamp, 1000)
            parsed = datetime.fromtimestamp(seconds, tz=timezone.utc)
            return parsed.replace(microsecond=millis * 1000)
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def parse_date(value: object, date_formats: Iterable[str] = ()) -> datetime:
    """
    Parse a transaction date.

    Order: configured patterns, then FALLBACK_DATE_FORMATS, then the value as
    a Unix timestamp (seconds, or milliseconds above 10^10).

    Args:
        value: Raw date string, epoch number, or date/datetime scalar
        date_formats: strptime patterns tried first, in order

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ParseError: If no pattern or numeric interpretation succeeds
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, bool) or value is None:
        raise ParseError("transaction_date", value, "unable to parse date")
    if isinstance(value, float) and value.is_integer():
        value = int(value)

    text = str(value).strip()
    if not text:
        raise ParseError("transaction_date", value, "date is empty")

    for pattern in (*date_formats, *FALLBACK_DATE_FORMATS):
        try:
            return to_utc(datetime.strptime(text, pattern))
        except ValueError:
            continue

    parsed = parse_epoch(text)
    if parsed is not None:
        return parsed

    raise ParseError("transaction_date", value, "unable to parse date with any format")


def format_timestamp(value: datetime | None) -> str:
    """Render a timestamp the way exports write it (UTC, second precision)."""
    if value is None:
        return ""
    return to_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")
