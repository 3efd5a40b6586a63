"""
RequiredFieldValidator - ensures the canonical fields carry usable values.
"""

from sales_ingest.core.models import RunContext, Transaction

from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that required fields are present and not empty.

    Fails if:
    - transaction_id, country or product_name is empty
    - unit price or quantity is not positive
    - the transaction time is the zero value
    """

    name = "RequiredFieldValidator"
    description = "Validates that required fields are present and not empty"

    def validate(self, record: Transaction, context: RunContext) -> None:
        if not record.transaction_id:
            raise self.fail("transaction_id", "transaction ID is required")
        if not record.country:
            raise self.fail("country", "country is required")
        if not record.product_name:
            raise self.fail("product_name", "product name is required")
        if record.unit_price_cents <= 0:
            raise self.fail("price", "unit price must be positive")
        if record.quantity <= 0:
            raise self.fail("quantity", "quantity must be positive")
        if record.transaction_date is None:
            raise self.fail("transaction_date", "transaction time is required")
