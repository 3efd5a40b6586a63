"""
DataQualityReport model: metrics plus discrete issues and recommendations.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .transformation_result import QualityMetrics


class DataQualityIssue(BaseModel):
    """A specific quality problem found in a record set."""

    model_config = ConfigDict(frozen=True)

    type: Literal["missing_data", "duplicate_data", "invalid_data"]
    description: str
    severity: Literal["low", "medium", "high"]
    count: int = Field(..., ge=0)
    examples: list[str] = Field(default_factory=list)


class DataQualityReport(BaseModel):
    """
    Quality analysis of a finished record set. Never mutated after creation.
    """

    model_config = ConfigDict(frozen=True)

    metrics: QualityMetrics
    total_records: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    issues: list[DataQualityIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
