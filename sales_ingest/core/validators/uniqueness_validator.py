"""
UniquenessValidator - flags repeated transaction ids within one run.
"""

from sales_ingest.core.models import RunContext, Transaction

from .base_validator import BaseValidator


class UniquenessValidator(BaseValidator):
    """
    Fails when a transaction id was already seen in the current run.

    The seen-id set lives in the RunContext, so reusing one validator
    instance across runs never reports cross-run duplicates.
    """

    name = "UniquenessValidator"
    description = "Validates uniqueness constraints such as transaction ID uniqueness"

    def validate(self, record: Transaction, context: RunContext) -> None:
        if record.transaction_id in context.seen_transaction_ids:
            raise self.fail("transaction_id", f"duplicate transaction ID: {record.transaction_id}")
        context.seen_transaction_ids.add(record.transaction_id)
