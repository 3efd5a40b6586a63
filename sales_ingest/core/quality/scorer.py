"""
Quality scorer: completeness, validity, uniqueness and consistency of a record set.
"""

from collections.abc import Sequence

from sales_ingest.core.models import CANONICAL_FIELDS, QualityMetrics, Transaction

# No real pattern-consistency algorithm yet; callers must not rely on this value
PLACEHOLDER_CONSISTENCY = 0.95


def field_is_present(record: Transaction, field_name: str) -> bool:
    """
    Whether a canonical field carries a usable value.

    Strings must be non-empty, price and quantity positive and the
    transaction date set.
    """
    if field_name == "price":
        return record.unit_price_cents > 0
    if field_name == "quantity":
        return record.quantity > 0
    if field_name == "transaction_date":
        return record.transaction_date is not None
    return getattr(record, field_name) != ""


def calculate_quality_metrics(records: Sequence[Transaction]) -> QualityMetrics:
    """
    Score a record set.

    Completeness is the unweighted mean of the seven per-field fractions.
    Validity only checks that price and quantity are non-negative, which is
    looser than RangeValidator.

    Args:
        records: Final record set of a run

    Returns:
        QualityMetrics (all zeros for an empty set)
    """
    total = len(records)
    if total == 0:
        return QualityMetrics(
            field_metrics={f"{field_name}_completeness": 0.0 for field_name in CANONICAL_FIELDS}
        )

    field_metrics = {}
    for field_name in CANONICAL_FIELDS:
        present = sum(1 for record in records if field_is_present(record, field_name))
        field_metrics[f"{field_name}_completeness"] = present / total

    completeness = sum(field_metrics.values()) / len(field_metrics)
    uniqueness = len({record.transaction_id for record in records}) / total
    valid = sum(1 for record in records if record.unit_price_cents >= 0 and record.quantity >= 0)

    return QualityMetrics(
        completeness=min(completeness, 1.0),
        consistency=PLACEHOLDER_CONSISTENCY,
        validity=valid / total,
        uniqueness=uniqueness,
        field_metrics=field_metrics,
    )
