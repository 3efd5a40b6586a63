"""
Quality report: discrete issues and recommendations derived from a record set.
"""

from collections import Counter
from collections.abc import Sequence

from sales_ingest.core.models import (
    DataQualityIssue,
    DataQualityReport,
    QualityMetrics,
    Transaction,
)

from .scorer import calculate_quality_metrics

MAX_EXAMPLES = 5

COMPLETENESS_THRESHOLD = 0.95
VALIDITY_THRESHOLD = 0.90
UNIQUENESS_THRESHOLD = 0.99
COUNTRY_COMPLETENESS_THRESHOLD = 0.90
REGION_COMPLETENESS_THRESHOLD = 0.85


def _examples(records: list[Transaction]) -> list[str]:
    return [record.transaction_id for record in records[:MAX_EXAMPLES]]


def _issue(issue_type: str, description: str, severity: str, affected: list[Transaction]) -> DataQualityIssue:
    return DataQualityIssue(
        type=issue_type,
        description=description,
        severity=severity,
        count=len(affected),
        examples=_examples(affected),
    )


def identify_quality_issues(records: Sequence[Transaction]) -> list[DataQualityIssue]:
    """
    Find missing, duplicate and invalid data in a record set.

    Args:
        records: Records to inspect

    Returns:
        Issues in a fixed order: missing identifiers and product names,
        duplicate ids, invalid prices/quantities/dates, missing countries
        and regions. Categories with no affected record are omitted.
    """
    issues = []

    missing_ids = [r for r in records if r.transaction_id == ""]
    if missing_ids:
        issues.append(_issue(
            "missing_data",
            f"Missing transaction_id in {len(missing_ids)} records",
            "high",
            missing_ids,
        ))

    missing_products = [r for r in records if r.product_name == ""]
    if missing_products:
        issues.append(_issue(
            "missing_data",
            f"Missing product_name in {len(missing_products)} records",
            "high",
            missing_products,
        ))

    id_counts = Counter(record.transaction_id for record in records)
    duplicate_ids = [txn_id for txn_id, count in id_counts.items() if count > 1]
    if duplicate_ids:
        issues.append(DataQualityIssue(
            type="duplicate_data",
            description=f"Found {len(duplicate_ids)} duplicate transaction IDs",
            severity="medium",
            count=len(duplicate_ids),
            examples=duplicate_ids[:MAX_EXAMPLES],
        ))

    invalid_prices = [r for r in records if r.unit_price_cents <= 0]
    if invalid_prices:
        issues.append(_issue(
            "invalid_data",
            f"Invalid prices in {len(invalid_prices)} records",
            "high",
            invalid_prices,
        ))

    invalid_quantities = [r for r in records if r.quantity <= 0]
    if invalid_quantities:
        issues.append(_issue(
            "invalid_data",
            f"Invalid quantities in {len(invalid_quantities)} records",
            "high",
            invalid_quantities,
        ))

    invalid_dates = [r for r in records if r.transaction_date is None]
    if invalid_dates:
        issues.append(_issue(
            "invalid_data",
            f"Invalid dates in {len(invalid_dates)} records",
            "high",
            invalid_dates,
        ))

    missing_countries = [r for r in records if r.country == ""]
    if missing_countries:
        issues.append(_issue(
            "missing_data",
            f"Missing country data in {len(missing_countries)} records",
            "medium",
            missing_countries,
        ))

    missing_regions = [r for r in records if r.region == ""]
    if missing_regions:
        issues.append(_issue(
            "missing_data",
            f"Missing region data in {len(missing_regions)} records",
            "low",
            missing_regions,
        ))

    return issues


def generate_recommendations(metrics: QualityMetrics) -> list[str]:
    """Suggest improvements for every score below its threshold."""
    recommendations = []

    if metrics.completeness < COMPLETENESS_THRESHOLD:
        recommendations.append("Improve data completeness by implementing validation at data entry points")

    if metrics.validity < VALIDITY_THRESHOLD:
        recommendations.append("Implement stricter data validation rules to improve data validity")

    if metrics.uniqueness < UNIQUENESS_THRESHOLD:
        recommendations.append("Review data collection process to eliminate duplicate entries")

    country = metrics.field_metrics.get("country_completeness")
    if country is not None and country < COUNTRY_COMPLETENESS_THRESHOLD:
        recommendations.append("Implement default country mapping or mandatory country field")

    region = metrics.field_metrics.get("region_completeness")
    if region is not None and region < REGION_COMPLETENESS_THRESHOLD:
        recommendations.append("Consider enriching data with region information based on other geographic data")

    recommendations.append("Regular data quality monitoring should be implemented")
    recommendations.append("Consider implementing data lineage tracking for better data governance")

    return recommendations


def build_quality_report(records: Sequence[Transaction]) -> DataQualityReport:
    """
    Build a full quality report for a record set.

    Args:
        records: Records to analyze

    Returns:
        DataQualityReport with metrics, issues and recommendations
    """
    metrics = calculate_quality_metrics(records)
    return DataQualityReport(
        metrics=metrics,
        total_records=len(records),
        issues=identify_quality_issues(records),
        recommendations=generate_recommendations(metrics),
    )
