"""
DataDeduplication - keeps the first record per full composite key.
"""

from sales_ingest.core.models import Transaction

from .base_optimization import BaseOptimization


class DataDeduplication(BaseOptimization):
    """
    Removes records that repeat every canonical field of an earlier record.

    The key covers id, country, region, product, price, quantity and the
    timestamp in epoch seconds, so records differing in any field survive.
    """

    name = "DataDeduplication"
    description = "Performs advanced deduplication based on multiple transaction fields"

    def optimize(self, records: list[Transaction]) -> list[Transaction]:
        seen: set[tuple] = set()
        unique = []
        for record in records:
            key = record.composite_key()
            if key not in seen:
                seen.add(key)
                unique.append(record)
        return unique
