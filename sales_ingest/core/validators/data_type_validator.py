"""
DataTypeValidator - validates field formats and business limits.
"""

import re
from datetime import datetime, timezone
from typing import Callable

from sales_ingest.core.models import RunContext, Transaction, TransformConfig
from sales_ingest.core.normalizers import to_utc

from .base_validator import BaseValidator

TRANSACTION_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")
COUNTRY_PATTERN = re.compile(r"[a-zA-Z\s.\-']+")

MAX_UNIT_PRICE_CENTS = 10_000_000
MAX_QUANTITY = 1_000_000
MAX_PAST_YEARS = 10
MAX_FUTURE_YEARS = 1


def shift_years(moment: datetime, years: int) -> datetime:
    """Move a datetime by whole calendar years (Feb 29 falls back to Feb 28)."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)


class DataTypeValidator(BaseValidator):
    """
    Validates data types and formats.

    Checks, in order:
    - transaction_id only uses letters, digits, '_' and '-'
    - country only uses letters, spaces, '.', '-' and apostrophes
    - unit price does not exceed 10,000,000 minor units
    - quantity does not exceed 1,000,000
    - transaction time lies within 10 years before and 1 year after now
    """

    name = "DataTypeValidator"
    description = "Validates data types and formats according to configuration"

    def __init__(
        self,
        config: TransformConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        super().__init__(config)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def validate(self, record: Transaction, context: RunContext) -> None:
        if not TRANSACTION_ID_PATTERN.fullmatch(record.transaction_id):
            raise self.fail("transaction_id", "transaction ID contains invalid characters")

        if not COUNTRY_PATTERN.fullmatch(record.country):
            raise self.fail("country", "country name contains invalid characters")

        if record.unit_price_cents > MAX_UNIT_PRICE_CENTS:
            raise self.fail("price", "unit price exceeds reasonable maximum")

        if record.quantity > MAX_QUANTITY:
            raise self.fail("quantity", "quantity exceeds reasonable maximum")

        if record.transaction_date is not None:
            now = self.clock()
            transaction_date = to_utc(record.transaction_date)
            if transaction_date < shift_years(now, -MAX_PAST_YEARS):
                raise self.fail("transaction_date", "transaction date is too far in the past")
            if transaction_date > shift_years(now, MAX_FUTURE_YEARS):
                raise self.fail("transaction_date", "transaction date is in the future")
