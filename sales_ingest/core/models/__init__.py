"""
Core data models for the ingestion pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .data_format import SUPPORTED_FORMATS, DataFormat
from .quality_report import DataQualityIssue, DataQualityReport
from .raw_value import RawMapping, RawValue
from .run_context import RunContext
from .transaction import CANONICAL_FIELDS, Transaction
from .transform_config import TransformConfig, default_configuration
from .transformation_result import QualityMetrics, TransformationResult
from .validation_result import ValidationResult

__all__ = [
    "CANONICAL_FIELDS",
    "SUPPORTED_FORMATS",
    "DataFormat",
    "DataQualityIssue",
    "DataQualityReport",
    "QualityMetrics",
    "RawMapping",
    "RawValue",
    "RunContext",
    "Transaction",
    "TransformConfig",
    "TransformationResult",
    "ValidationResult",
    "default_configuration",
]
