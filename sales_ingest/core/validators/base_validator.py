"""
Base validator interface for record-level validation stages.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod

from sales_ingest.core.models import RunContext, Transaction, TransformConfig


class ValidationError(Exception):
    """Raised when a validator rejects a record."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Validators are observational: a failure is reported as a warning and the
    record stays in the result set unless the pipeline runs with
    drop_invalid. Validators hold no per-run state; anything that spans
    records lives in the RunContext passed to validate().
    """

    name: str = ""
    description: str = ""

    def __init__(self, config: TransformConfig | None = None):
        """
        Initialize validator.

        Args:
            config: Shared read-only configuration (optional)
        """
        self.config = config

    @abstractmethod
    def validate(self, record: Transaction, context: RunContext) -> None:
        """
        Validate a record.

        Args:
            record: The record to validate
            context: Accumulators for the current run

        Raises:
            ValidationError: If validation fails
        """

    def fail(self, field_name: str, message: str) -> ValidationError:
        return ValidationError(rule_name=self.name, field_name=field_name, message=message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
