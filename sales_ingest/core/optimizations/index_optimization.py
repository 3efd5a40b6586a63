"""
IndexOptimization - placeholder for ordering/index preparation.
"""

from sales_ingest.core.models import Transaction

from .base_optimization import BaseOptimization


class IndexOptimization(BaseOptimization):
    """Currently returns the records unchanged, preserving order and count."""

    name = "IndexOptimization"
    description = "Optimizes data structure for better query performance"

    def optimize(self, records: list[Transaction]) -> list[Transaction]:
        return list(records)
