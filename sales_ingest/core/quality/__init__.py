"""
Data quality scoring and reporting over finished record sets.
"""

from .report import build_quality_report, generate_recommendations, identify_quality_issues
from .scorer import PLACEHOLDER_CONSISTENCY, calculate_quality_metrics, field_is_present

__all__ = [
    "PLACEHOLDER_CONSISTENCY",
    "build_quality_report",
    "calculate_quality_metrics",
    "field_is_present",
    "generate_recommendations",
    "identify_quality_issues",
]
