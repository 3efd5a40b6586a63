"""
Transaction model: the canonical record every input format converges to.
"""

from datetime import datetime

from pydantic import BaseModel, Field

CANONICAL_FIELDS = (
    "transaction_id",
    "country",
    "region",
    "product_name",
    "price",
    "quantity",
    "transaction_date",
)


class Transaction(BaseModel):
    """
    A single normalized sale record.

    Attributes:
        transaction_id: Business identifier, unique within a batch
        country: Country name (defaulted when absent in the source)
        region: Region name (defaulted when absent in the source)
        product_name: Product display name
        unit_price_cents: Unit price in integer minor currency units
        quantity: Units sold (defaults to 1)
        transaction_date: Transaction time in UTC; None is the zero value
    """

    transaction_id: str = ""
    country: str = ""
    region: str = ""
    product_name: str = ""
    unit_price_cents: int = 0
    quantity: int = Field(default=1)
    transaction_date: datetime | None = None

    def timestamp_seconds(self) -> int:
        """Epoch seconds of the transaction time (0 for the zero value)."""
        if self.transaction_date is None:
            return 0
        return int(self.transaction_date.timestamp())

    def composite_key(self) -> tuple:
        """Key built from every canonical field, used for exact deduplication."""
        return (
            self.transaction_id,
            self.country,
            self.region,
            self.product_name,
            self.unit_price_cents,
            self.quantity,
            self.timestamp_seconds(),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "transaction_id": "TXN-1001",
                "country": "United States",
                "region": "North",
                "product_name": "Widget A",
                "unit_price_cents": 1999,
                "quantity": 3,
                "transaction_date": "2025-03-15T10:30:45Z",
            }
        }
