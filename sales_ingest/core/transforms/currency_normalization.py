"""
CurrencyNormalization - keeps prices in integer minor units.
"""

from sales_ingest.core.errors import TransformationError
from sales_ingest.core.models import Transaction

from .base_transformation import BaseTransformation


class CurrencyNormalization(BaseTransformation):
    """
    Ensures unit prices are non-negative integer minor units.

    Symbol stripping and scaling happen at parse time; this stage guards the
    canonical record afterwards and rejects negative prices.
    """

    name = "CurrencyNormalization"
    description = "Normalizes currency values by removing symbols and converting to standard format"

    def transform(self, record: Transaction) -> Transaction:
        if record.unit_price_cents < 0:
            raise TransformationError(self.name, f"negative unit price {record.unit_price_cents}")
        return record.model_copy(update={"unit_price_cents": int(record.unit_price_cents)})
