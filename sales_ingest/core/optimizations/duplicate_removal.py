"""
DuplicateRemoval - keeps the first record per transaction id.
"""

from sales_ingest.core.models import Transaction

from .base_optimization import BaseOptimization


class DuplicateRemoval(BaseOptimization):
    name = "DuplicateRemoval"
    description = "Removes duplicate transactions based on transaction ID"

    def optimize(self, records: list[Transaction]) -> list[Transaction]:
        seen: set[str] = set()
        unique = []
        for record in records:
            if record.transaction_id not in seen:
                seen.add(record.transaction_id)
                unique.append(record)
        return unique
