"""
Parse-time construction of canonical Transactions from reconciled values.

This is the only place where an entry is dropped rather than flagged: a
missing identifier, product name, price or date, or an unparseable price,
quantity or date raises RecordParseError and the pipeline skips the entry.
"""

from collections.abc import Mapping

from sales_ingest.core.errors import ParseError, RecordParseError
from sales_ingest.core.models import RawValue, Transaction, TransformConfig
from sales_ingest.core.normalizers import normalize_null, parse_currency, parse_date, parse_quantity

from .field_reconciler import stringify

DEFAULT_QUANTITY = 1


class RecordBuilder:
    """
    Builds Transactions from canonical field values using one TransformConfig.
    """

    def __init__(self, config: TransformConfig):
        """
        Initialize record builder.

        Args:
            config: Configuration supplying null tokens, defaults, date
                patterns and the price multiplier
        """
        self.config = config

    def _text(self, values: Mapping[str, RawValue], field_name: str) -> str:
        return normalize_null(stringify(values.get(field_name)), self.config.null_values)

    def _is_missing(self, values: Mapping[str, RawValue], field_name: str) -> bool:
        value = values.get(field_name)
        if value is None:
            return True
        if isinstance(value, str):
            return normalize_null(value, self.config.null_values) == ""
        return False

    def build(self, values: Mapping[str, RawValue]) -> Transaction:
        """
        Build a Transaction.

        Args:
            values: Canonical field name -> raw value (see field_reconciler)

        Returns:
            Transaction with all seven fields populated

        Raises:
            RecordParseError: If a required field is missing or unparseable
        """
        transaction_id = self._text(values, "transaction_id")
        if not transaction_id:
            raise RecordParseError("transaction ID is required")

        product_name = self._text(values, "product_name")
        if not product_name:
            raise RecordParseError(f"product name is required (transaction {transaction_id})")

        country = self._text(values, "country") or self.config.default_country
        region = self._text(values, "region") or self.config.default_region

        if self._is_missing(values, "price"):
            raise RecordParseError(f"price is required (transaction {transaction_id})")
        if self._is_missing(values, "transaction_date"):
            raise RecordParseError(f"transaction date is required (transaction {transaction_id})")

        try:
            unit_price_cents = parse_currency(
                self._raw(values, "price"),
                self.config.price_multiplier,
                self.config.currency_formats,
            )
            if self._is_missing(values, "quantity"):
                quantity = DEFAULT_QUANTITY
            else:
                quantity = parse_quantity(self._raw(values, "quantity"))
            transaction_date = parse_date(self._raw(values, "transaction_date"), self.config.date_formats)
        except ParseError as e:
            raise RecordParseError(f"{e} (transaction {transaction_id})") from e

        return Transaction(
            transaction_id=transaction_id,
            country=country,
            region=region,
            product_name=product_name,
            unit_price_cents=unit_price_cents,
            quantity=quantity,
            transaction_date=transaction_date,
        )

    def _raw(self, values: Mapping[str, RawValue], field_name: str) -> RawValue:
        # Strings are trimmed; numbers and YAML dates pass through untouched.
        value = values.get(field_name)
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (list, dict)):
            return stringify(value)
        return value
