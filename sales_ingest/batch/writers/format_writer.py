"""
Export writer rendering canonical records in any supported output format.

Column order is fixed: transaction_id, country, region, product_name,
price, quantity, transaction_date.
"""

import csv
import json
from collections.abc import Sequence
from typing import Any, TextIO

import yaml

from sales_ingest.core.models import CANONICAL_FIELDS, DataFormat, Transaction
from sales_ingest.core.normalizers import format_minor_units, format_timestamp

EXPORT_COLUMNS = CANONICAL_FIELDS


class FormatWriter:
    """
    Writes records as CSV, TSV, JSON or YAML.

    Prices are converted back from minor units with the configured
    multiplier, so exported files re-import to the same records.
    """

    def __init__(self, price_multiplier: float = 100.0):
        """
        Initialize format writer.

        Args:
            price_multiplier: Minor units per currency unit
        """
        self.price_multiplier = price_multiplier

    def to_row(self, record: Transaction) -> dict[str, Any]:
        """Render a record as an ordered export row."""
        price = format_minor_units(record.unit_price_cents, self.price_multiplier)
        return {
            "transaction_id": record.transaction_id,
            "country": record.country,
            "region": record.region,
            "product_name": record.product_name,
            "price": price,
            "quantity": record.quantity,
            "transaction_date": format_timestamp(record.transaction_date),
        }

    def write(self, records: Sequence[Transaction], file_format: DataFormat, stream: TextIO) -> int:
        """
        Write records to a text stream.

        Args:
            records: Records to export
            file_format: Output format
            stream: Destination text stream

        Returns:
            Number of records written

        Raises:
            ValueError: If the format cannot be exported
        """
        rows = [self.to_row(record) for record in records]

        if file_format == DataFormat.CSV:
            self._write_delimited(rows, stream, ",")
        elif file_format == DataFormat.TSV:
            self._write_delimited(rows, stream, "\t")
        elif file_format == DataFormat.JSON:
            json.dump([self._typed(row) for row in rows], stream, indent=2, ensure_ascii=False)
            stream.write("\n")
        elif file_format == DataFormat.YAML:
            yaml.safe_dump(
                [self._typed(row) for row in rows],
                stream,
                sort_keys=False,
                allow_unicode=True,
            )
        else:
            raise ValueError(f"Unsupported export format: {file_format.value}")

        return len(rows)

    @staticmethod
    def _typed(row: dict[str, Any]) -> dict[str, Any]:
        # Structured formats carry the price as a number
        return {**row, "price": float(row["price"])}

    @staticmethod
    def _write_delimited(rows: list[dict[str, Any]], stream: TextIO, delimiter: str) -> None:
        writer = csv.DictWriter(stream, fieldnames=EXPORT_COLUMNS, delimiter=delimiter, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
