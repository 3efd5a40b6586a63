"""
Record-level validation stages.

Provides validators for required fields, formats and limits, business ranges
and identifier uniqueness.
"""

from .base_validator import BaseValidator, ValidationError
from .data_type_validator import DataTypeValidator
from .range_validator import RangeValidator
from .required_field_validator import RequiredFieldValidator
from .uniqueness_validator import UniquenessValidator

VALIDATOR_REGISTRY: dict[str, type[BaseValidator]] = {
    RequiredFieldValidator.name: RequiredFieldValidator,
    DataTypeValidator.name: DataTypeValidator,
    RangeValidator.name: RangeValidator,
    UniquenessValidator.name: UniquenessValidator,
}

__all__ = [
    "VALIDATOR_REGISTRY",
    "BaseValidator",
    "DataTypeValidator",
    "RangeValidator",
    "RequiredFieldValidator",
    "UniquenessValidator",
    "ValidationError",
]
