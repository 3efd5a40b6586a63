"""
RangeValidator - validates numeric values are within business ranges.
"""

from sales_ingest.core.models import RunContext, Transaction

from .base_validator import BaseValidator

MIN_UNIT_PRICE_CENTS = 1
MAX_UNIT_PRICE_CENTS = 50_000_000
MIN_QUANTITY = 1
MAX_QUANTITY = 100_000


class RangeValidator(BaseValidator):
    """
    Validates that price lies in [1, 50,000,000] minor units and quantity
    in [1, 100,000].
    """

    name = "RangeValidator"
    description = "Validates that numeric values are within acceptable business ranges"

    def validate(self, record: Transaction, context: RunContext) -> None:
        if not MIN_UNIT_PRICE_CENTS <= record.unit_price_cents <= MAX_UNIT_PRICE_CENTS:
            raise self.fail(
                "price",
                f"unit price {record.unit_price_cents} cents is outside acceptable range",
            )

        if not MIN_QUANTITY <= record.quantity <= MAX_QUANTITY:
            raise self.fail("quantity", f"quantity {record.quantity} is outside acceptable range")
