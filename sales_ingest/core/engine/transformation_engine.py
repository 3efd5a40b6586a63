"""
Transformation engine for running the pipeline stages over canonical records.

The engine builds its stage lists from the configuration, applies every
transformation and validator to each record, and runs the optimizations over
the finished record set.
"""

import json
from datetime import datetime, timezone
from typing import Any, TextIO

from sales_ingest.core.errors import ConfigurationError
from sales_ingest.core.models import (
    RunContext,
    Transaction,
    TransformationResult,
    TransformConfig,
    ValidationResult,
)
from sales_ingest.core.optimizations import OPTIMIZATION_REGISTRY, BaseOptimization
from sales_ingest.core.transforms import TRANSFORMATION_REGISTRY, BaseTransformation
from sales_ingest.core.validators import VALIDATOR_REGISTRY, BaseValidator, ValidationError
from sales_ingest.observability.logger import get_logger
from sales_ingest.observability.metrics import (
    record_optimization_failure,
    record_transformation_failure,
    record_validation_failure,
)

logger = get_logger(__name__)


class TransformationEngine:
    """
    Orchestrates the transformation, validation and optimization stages.

    Stages run in registration order. A failing transformation is skipped for
    that record and reported as a warning; a failing validator is reported as
    a warning and recorded in the ValidationResult; a failing optimization
    leaves the record set as it was before that pass.
    """

    TRANSFORMATION_REGISTRY = TRANSFORMATION_REGISTRY
    VALIDATOR_REGISTRY = VALIDATOR_REGISTRY
    OPTIMIZATION_REGISTRY = OPTIMIZATION_REGISTRY

    def __init__(self, config: TransformConfig):
        """
        Initialize the engine and build its stages.

        Args:
            config: Shared read-only configuration. The optional
                transformations/validators/optimizations lists select stages
                by name; None selects every built-in in default order.

        Raises:
            ConfigurationError: If a configured stage name is unknown
        """
        self.config = config
        self.transformations: list[BaseTransformation] = []
        self.validators: list[BaseValidator] = []
        self.optimizations: list[BaseOptimization] = []
        self._build_stages()

    def _build_stages(self) -> None:
        """Build stage instances from the configured stage names."""
        for cls in self._resolve(self.TRANSFORMATION_REGISTRY, self.config.transformations, "transformation"):
            self.transformations.append(cls(self.config))

        for cls in self._resolve(self.VALIDATOR_REGISTRY, self.config.validators, "validator"):
            self.validators.append(cls(self.config))

        for cls in self._resolve(self.OPTIMIZATION_REGISTRY, self.config.optimizations, "optimization"):
            self.optimizations.append(cls())

    @staticmethod
    def _resolve(registry: dict[str, type], names: list[str] | None, kind: str) -> list[type]:
        if names is None:
            return list(registry.values())

        classes = []
        for name in names:
            stage_class = registry.get(name)
            if stage_class is None:
                raise ConfigurationError(f"Unknown {kind}: {name}")
            classes.append(stage_class)
        return classes

    def register_transformation(self, transformation: BaseTransformation) -> None:
        """Append a transformation after the existing ones."""
        self.transformations.append(transformation)

    def register_validator(self, validator: BaseValidator) -> None:
        """Append a validator after the existing ones."""
        self.validators.append(validator)

    def register_optimization(self, optimization: BaseOptimization) -> None:
        """Append an optimization after the existing ones."""
        self.optimizations.append(optimization)

    def transform_record(self, record: Transaction, label: Any = "") -> tuple[Transaction, list[str], list[str]]:
        """
        Apply every transformation to a record.

        Args:
            record: Canonical record (not modified)
            label: Identifies the record in warning messages

        Returns:
            Tuple of (transformed record, applied stage names, warnings)
        """
        current = record
        applied = []
        warnings = []

        for transformation in self.transformations:
            try:
                current = transformation.transform(current)
                applied.append(transformation.name)
            # A stage may fail in any way; the record keeps its last values
            except Exception as e:
                message = f"Transformation {transformation.name} failed for record {label}: {e}"
                warnings.append(message)
                record_transformation_failure(transformation.name)
                logger.debug(message)

        return current, applied, warnings

    def validate_record(
        self,
        record: Transaction,
        context: RunContext,
        label: Any = "",
    ) -> ValidationResult:
        """
        Run every validator against a record.

        Args:
            record: Transformed record
            context: Accumulators for the current run
            label: Identifies the record in warning messages

        Returns:
            ValidationResult with passed/failed validator names and warnings
        """
        passed_rules = []
        failed_rules = []
        warnings = []

        for validator in self.validators:
            try:
                validator.validate(record, context)
                passed_rules.append(validator.name)
            except ValidationError as e:
                failed_rules.append(validator.name)
                message = f"Validation {validator.name} failed for record {label}: {e}"
                warnings.append(message)
                record_validation_failure(validator.name, e.field_name)
                logger.debug(message)

        return ValidationResult(
            record_id=record.transaction_id,
            passed=len(failed_rules) == 0,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            warnings=warnings,
        )

    def process_record(
        self,
        record: Transaction,
        context: RunContext,
        label: Any = "",
    ) -> tuple[Transaction, ValidationResult]:
        """
        Transform a record, then validate it when validation is enabled.

        Args:
            record: Canonical record from the parser
            context: Accumulators for the current run
            label: Identifies the record in warning messages

        Returns:
            Tuple of (transformed record, ValidationResult)
        """
        transformed, applied, warnings = self.transform_record(record, label)

        if self.config.enable_validation:
            validation = self.validate_record(transformed, context, label)
        else:
            validation = ValidationResult(record_id=transformed.transaction_id, passed=True)

        validation = validation.model_copy(
            update={
                "warnings": warnings + validation.warnings,
                "transformations_applied": applied,
            }
        )
        return transformed, validation

    def optimize(self, records: list[Transaction]) -> tuple[list[Transaction], list[str]]:
        """
        Run every optimization over the record set.

        Args:
            records: Transformed records in encounter order

        Returns:
            Tuple of (optimized records, warnings)
        """
        if not self.config.enable_optimization:
            return list(records), []

        current = list(records)
        warnings = []

        for optimization in self.optimizations:
            try:
                current = optimization.optimize(current)
            except Exception as e:
                message = f"Optimization {optimization.name} failed: {e}"
                warnings.append(message)
                record_optimization_failure(optimization.name)
                logger.warning(message)

        return current, warnings

    def get_stage_info(self) -> dict[str, list[dict[str, str]]]:
        """
        Describe the registered stages.

        Returns:
            Dictionary mapping stage family to a list of name/description pairs
        """
        return {
            "transformations": [self._describe(stage) for stage in self.transformations],
            "validators": [self._describe(stage) for stage in self.validators],
            "optimizations": [self._describe(stage) for stage in self.optimizations],
        }

    @staticmethod
    def _describe(stage: Any) -> dict[str, str]:
        return {"name": stage.name, "description": stage.description}

    def get_stage_summary(self) -> dict[str, Any]:
        """
        Get summary of registered stages.

        Returns:
            Dictionary with stage counts and toggles
        """
        return {
            "total_stages": len(self.transformations) + len(self.validators) + len(self.optimizations),
            "stages_by_type": self._count_by_type(),
            "validation_enabled": self.config.enable_validation,
            "optimization_enabled": self.config.enable_optimization,
        }

    def _count_by_type(self) -> dict[str, int]:
        """Count stages by family."""
        return {
            "transformations": len(self.transformations),
            "validators": len(self.validators),
            "optimizations": len(self.optimizations),
        }

    def export_transformation_report(self, result: TransformationResult, stream: TextIO) -> None:
        """
        Write a JSON report describing a finished run.

        Args:
            result: Result of a processing call
            stream: Text stream to write to
        """
        report = {
            "summary": result.model_dump(mode="json"),
            "configuration": self.config.model_dump(mode="json"),
            "stages": self.get_stage_info(),
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
        json.dump(report, stream, indent=2)
        stream.write("\n")
