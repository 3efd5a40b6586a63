"""
TransformationResult and QualityMetrics models (ephemeral, one per run).
"""

from pydantic import BaseModel, ConfigDict, Field


class QualityMetrics(BaseModel):
    """
    Data quality scores for a finished record set.

    Attributes:
        completeness: Mean of the seven per-field completeness fractions
        consistency: Coarse placeholder estimate (fixed at 0.95 for now)
        validity: Fraction of records with non-negative price and quantity
        uniqueness: Distinct transaction ids / total records
        field_metrics: "<field>_completeness" -> fraction
    """

    model_config = ConfigDict(frozen=True)

    completeness: float = Field(0.0, ge=0.0, le=1.0)
    consistency: float = Field(0.0, ge=0.0, le=1.0)
    validity: float = Field(0.0, ge=0.0, le=1.0)
    uniqueness: float = Field(0.0, ge=0.0, le=1.0)
    field_metrics: dict[str, float] = Field(default_factory=dict)


class TransformationResult(BaseModel):
    """
    Outcome report of one processing call.

    Built once at the end of the run and returned to the caller; frozen so
    later stages cannot rewrite it.

    Attributes:
        source: File path or stream label the records came from
        format: Format the input was parsed as
        original_records: Entries found in the input
        transformed_records: Records in the final (optimized) set
        skipped_records: Entries dropped (parse failures, or filtered)
        errors: Fatal per-record messages, in encounter order
        warnings: Non-fatal per-record or per-stage messages, in order
        transformations_applied: Transformation stages that succeeded at least once
        processing_time_seconds: Wall-clock duration of the call
        data_quality: Metrics computed over the final record set
    """

    model_config = ConfigDict(frozen=True)

    source: str = "stream"
    format: str = ""
    original_records: int = 0
    transformed_records: int = 0
    skipped_records: int = 0
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    transformations_applied: list[str] = Field(default_factory=list)
    processing_time_seconds: float = 0.0
    data_quality: QualityMetrics = Field(default_factory=QualityMetrics)
