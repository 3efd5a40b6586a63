"""
StringCleaning - trims and scrubs the free-text fields.
"""

from sales_ingest.core.models import Transaction
from sales_ingest.core.normalizers import clean_string

from .base_transformation import BaseTransformation

TEXT_FIELDS = ("transaction_id", "country", "region", "product_name")


class StringCleaning(BaseTransformation):
    """Applies clean_string to the identifier, country, region and product name."""

    name = "StringCleaning"
    description = "Cleans and normalizes string values by trimming whitespace and removing special characters"

    def transform(self, record: Transaction) -> Transaction:
        return record.model_copy(
            update={field: clean_string(getattr(record, field)) for field in TEXT_FIELDS}
        )
