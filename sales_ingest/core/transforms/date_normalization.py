"""
DateNormalization - transaction times in UTC.
"""

from sales_ingest.core.models import Transaction
from sales_ingest.core.normalizers import to_utc

from .base_transformation import BaseTransformation


class DateNormalization(BaseTransformation):
    """Converts transaction times to UTC; the zero value is left alone."""

    name = "DateNormalization"
    description = "Normalizes date formats to standard ISO format"

    def transform(self, record: Transaction) -> Transaction:
        if record.transaction_date is None:
            return record
        return record.model_copy(update={"transaction_date": to_utc(record.transaction_date)})
