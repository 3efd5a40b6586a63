"""
Batch processing pipeline orchestration.

Coordinates the flow: detect → read → build records → transform → validate →
optimize → score
"""

from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, TextIO

from sales_ingest.batch.readers import FileReader
from sales_ingest.batch.writers import FormatWriter
from sales_ingest.core.config import validate_transform_config
from sales_ingest.core.engine import TransformationEngine
from sales_ingest.core.errors import RecordParseError, StructuralError
from sales_ingest.core.models import (
    SUPPORTED_FORMATS,
    DataFormat,
    DataQualityReport,
    RunContext,
    Transaction,
    TransformationResult,
    TransformConfig,
    default_configuration,
)
from sales_ingest.core.quality import build_quality_report, calculate_quality_metrics
from sales_ingest.core.schema import RecordBuilder, detect_format
from sales_ingest.observability.logger import bind_run, get_logger, log_operation
from sales_ingest.observability.metrics import record_batch_processing, record_input_failure

logger = get_logger(__name__)


class BatchPipeline:
    """
    Orchestrates batch ingestion of sales transactions.

    Flow:
    1. Detect the input format (file variant only)
    2. Read entries and reconcile their field names
    3. Build canonical records (unusable entries are skipped)
    4. Apply every transformation, then every validator
    5. Apply the optimizations to the full record set
    6. Score data quality and assemble the TransformationResult

    One pipeline may serve many calls. Each call gets a fresh RunContext, so
    nothing observed in one run leaks into the next.
    """

    def __init__(self, config: TransformConfig | None = None):
        """
        Initialize batch pipeline.

        Args:
            config: Shared read-only configuration (built-in defaults if None)

        Raises:
            ConfigurationError: If the configuration is unusable
        """
        self.config = config or default_configuration()
        validate_transform_config(self.config)

        # Initialize components
        self.file_reader = FileReader()
        self.record_builder = RecordBuilder(self.config)
        self.engine = TransformationEngine(self.config)
        self.writer = FormatWriter(self.config.price_multiplier)

    def process_file(
        self,
        file_path: str | Path,
        drop_invalid: bool = False,
    ) -> tuple[list[Transaction], TransformationResult]:
        """
        Process a file through the complete pipeline.

        The format comes from the file extension when it is a known one,
        otherwise from sniffing the first kilobyte.

        Args:
            file_path: Path to input file
            drop_invalid: Exclude records that fail any validator

        Returns:
            Tuple of (final records, TransformationResult)

        Raises:
            OSError: If the file cannot be read
            StructuralError: If the content cannot be decoded into records
        """
        path = Path(file_path)
        data = path.read_bytes()
        file_format = detect_format(data, path)
        logger.info(f"Processing file {path} with detected format: {file_format.value}")
        return self.process_bytes(data, file_format, source=str(path), drop_invalid=drop_invalid)

    def process_stream(
        self,
        stream: IO,
        file_format: DataFormat | str,
        drop_invalid: bool = False,
        source: str = "stream",
    ) -> tuple[list[Transaction], TransformationResult]:
        """
        Process a binary or text stream whose format is already known.

        The stream is read to the end; no sniffing is done since it may not
        be seekable.

        Args:
            stream: Readable stream
            file_format: Declared input format
            drop_invalid: Exclude records that fail any validator
            source: Label used in logs and in the result

        Returns:
            Tuple of (final records, TransformationResult)
        """
        return self.process_bytes(stream.read(), file_format, source=source, drop_invalid=drop_invalid)

    def process_bytes(
        self,
        data: bytes | str,
        file_format: DataFormat | str,
        source: str = "stream",
        drop_invalid: bool = False,
    ) -> tuple[list[Transaction], TransformationResult]:
        """
        Process an in-memory input.

        Args:
            data: Raw input (bytes or decoded text)
            file_format: Input format
            source: Label used in logs and in the result
            drop_invalid: Exclude records that fail any validator and count
                them as skipped

        Returns:
            Tuple of (final records, TransformationResult)

        Raises:
            StructuralError: If the input is malformed at the top level
        """
        file_format = DataFormat.parse(file_format)
        context = RunContext()

        errors: list[str] = []
        warnings: list[str] = []
        applied: set[str] = set()
        records: list[Transaction] = []
        skipped = 0

        run_logger = bind_run(logger, context.run_id, source)

        with log_operation("Processing input", logger=run_logger, file_format=file_format.value) as operation:
            # Step 1: Read entries
            try:
                entries = self.file_reader.read(data, file_format)
            except StructuralError:
                record_input_failure(file_format.value)
                raise
            run_logger.debug(f"Read {len(entries)} entries")

            # Step 2: Build, transform and validate each record
            for entry in entries:
                if entry.error is not None:
                    errors.append(f"Record {entry.position}: {entry.error}")
                    skipped += 1
                    continue

                try:
                    record = self.record_builder.build(entry.values)
                except RecordParseError as e:
                    errors.append(f"Record {entry.position}: {e}")
                    skipped += 1
                    continue

                transformed, validation = self.engine.process_record(record, context, entry.position)
                warnings.extend(validation.warnings)
                applied.update(validation.transformations_applied)

                if drop_invalid and not validation.passed:
                    errors.append(
                        f"Record {entry.position}: dropped after failing {', '.join(validation.failed_rules)}"
                    )
                    skipped += 1
                    continue

                records.append(transformed)

            # Step 3: Optimize
            before_optimization = len(records)
            records, optimization_warnings = self.engine.optimize(records)
            warnings.extend(optimization_warnings)

            # Step 4: Score
            quality = calculate_quality_metrics(records)

            result = TransformationResult(
                source=source,
                format=file_format.value,
                original_records=len(entries),
                transformed_records=len(records),
                skipped_records=skipped,
                errors=errors,
                warnings=warnings,
                transformations_applied=[t.name for t in self.engine.transformations if t.name in applied],
                processing_time_seconds=operation.elapsed,
                data_quality=quality,
            )
            operation.add_fields(
                transformed_records=result.transformed_records,
                skipped_records=result.skipped_records,
            )

        record_batch_processing(result, duplicate_records=before_optimization - len(records))

        run_logger.info(
            f"Data processing completed: {len(records)} records in "
            f"{result.processing_time_seconds:.3f}s with {quality.completeness * 100:.2f}% completeness"
        )

        return records, result

    def export_transactions(
        self,
        records: Sequence[Transaction],
        file_format: DataFormat | str,
        stream: TextIO,
    ) -> int:
        """
        Write records in the given format.

        Returns:
            Number of records written
        """
        return self.writer.write(records, DataFormat.parse(file_format), stream)

    def get_data_quality_report(self, records: Sequence[Transaction]) -> DataQualityReport:
        """Build a quality report with issues and recommendations."""
        return build_quality_report(records)

    def export_transformation_report(self, result: TransformationResult, stream: TextIO) -> None:
        """Write a JSON report of a run together with the active configuration."""
        self.engine.export_transformation_report(result, stream)

    def get_supported_formats(self) -> dict[str, list[str]]:
        """
        Describe the formats and stages this pipeline supports.

        Returns:
            Dictionary of input/output formats and registered stage names
        """
        stages = self.engine.get_stage_info()
        formats = [file_format.value for file_format in SUPPORTED_FORMATS]
        return {
            "input_formats": formats,
            "output_formats": list(formats),
            "transformations": [stage["name"] for stage in stages["transformations"]],
            "validators": [stage["name"] for stage in stages["validators"]],
            "optimizations": [stage["name"] for stage in stages["optimizations"]],
        }

    def get_transformation_statistics(self) -> dict[str, Any]:
        """
        Get summary of the pipeline configuration.

        Returns:
            Stage counts, stage details and the main configuration values
        """
        return {
            **self.engine.get_stage_summary(),
            "stages": self.engine.get_stage_info(),
            "date_formats": len(self.config.date_formats),
            "null_values": len(self.config.null_values),
            "custom_mappings": len(self.config.custom_mappings),
            "price_multiplier": self.config.price_multiplier,
        }

    def validate_configuration(self) -> None:
        """Raise ConfigurationError if the active configuration is unusable."""
        validate_transform_config(self.config)
