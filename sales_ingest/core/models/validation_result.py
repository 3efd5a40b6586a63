"""
ValidationResult model: outcome of running one record through the stages (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of transforming and validating a record (ephemeral, used during processing).

    Attributes:
        record_id: Which record was processed
        passed: True when no validator failed
        passed_rules: Validators that succeeded
        failed_rules: Validators that failed
        warnings: Human-readable messages for every failed stage
        transformations_applied: Transformations that succeeded on the record
    """

    record_id: str
    passed: bool
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    transformations_applied: list[str] = Field(default_factory=list)

    @field_validator("failed_rules")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get("passed") and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "record_id": "TXN-1001",
                "passed": False,
                "passed_rules": ["RequiredFieldValidator", "DataTypeValidator", "RangeValidator"],
                "failed_rules": ["UniquenessValidator"],
                "warnings": [
                    "Validation UniquenessValidator failed for record 4: "
                    "[UniquenessValidator] transaction_id: duplicate transaction ID: TXN-1001"
                ],
                "transformations_applied": ["CurrencyNormalization", "DateNormalization"],
            }
        }
