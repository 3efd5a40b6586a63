"""
Prometheus metrics for sales-ingest

Metrics live in a private registry so embedding applications can expose them
next to their own without name clashes. The CLI prints them on request with
--print-metrics.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from sales_ingest.core.models import QualityMetrics, TransformationResult

REGISTRY = CollectorRegistry()


# =======================
# THROUGHPUT
# =======================

records_processed_total = Counter(
    name="ingest_records_processed_total",
    documentation="Records seen by the pipeline, by outcome",
    labelnames=["format", "status"],  # transformed, skipped, duplicate
    registry=REGISTRY,
)

inputs_processed_total = Counter(
    name="ingest_inputs_processed_total",
    documentation="Files or streams handed to the pipeline, by outcome",
    labelnames=["format", "status"],  # success, failure
    registry=REGISTRY,
)

processing_duration_seconds = Histogram(
    name="ingest_processing_duration_seconds",
    documentation="Wall-clock time to process one input",
    labelnames=["format"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
    registry=REGISTRY,
)

batch_size = Histogram(
    name="ingest_batch_size_records",
    documentation="Entries found in one input",
    labelnames=["format"],
    buckets=[1, 10, 100, 500, 1000, 5000, 10000, 50000, 100000],
    registry=REGISTRY,
)

# =======================
# STAGE FAILURES
# =======================

transformation_failures_total = Counter(
    name="ingest_transformation_failures_total",
    documentation="Records a transformation stage could not handle",
    labelnames=["transformation"],
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="ingest_validation_failures_total",
    documentation="Records rejected by a validator, by offending field",
    labelnames=["validator", "field_name"],
    registry=REGISTRY,
)

optimization_failures_total = Counter(
    name="ingest_optimization_failures_total",
    documentation="Optimization passes that failed and were skipped",
    labelnames=["optimization"],
    registry=REGISTRY,
)

# =======================
# DATA QUALITY
# =======================

data_quality_score = Gauge(
    name="ingest_data_quality_score",
    documentation="Quality score of the most recent run (0-1)",
    labelnames=["dimension"],  # completeness, consistency, validity, uniqueness
    registry=REGISTRY,
)

QUALITY_DIMENSIONS = ("completeness", "consistency", "validity", "uniqueness")


def generate_metrics() -> bytes:
    """Render the registry in the Prometheus text exposition format."""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def record_transformation_failure(transformation: str) -> None:
    transformation_failures_total.labels(transformation=transformation).inc()


def record_validation_failure(validator: str, field_name: str) -> None:
    validation_failures_total.labels(validator=validator, field_name=field_name).inc()


def record_optimization_failure(optimization: str) -> None:
    optimization_failures_total.labels(optimization=optimization).inc()


def record_quality(quality: QualityMetrics) -> None:
    """Publish the four quality dimensions of a finished run."""
    for dimension in QUALITY_DIMENSIONS:
        data_quality_score.labels(dimension=dimension).set(getattr(quality, dimension))


def record_batch_processing(result: TransformationResult, duplicate_records: int = 0) -> None:
    """
    Record the metrics of one finished processing call.

    Args:
        result: Outcome of the call
        duplicate_records: Records removed by the optimization passes
    """
    file_format = result.format
    records_processed_total.labels(format=file_format, status="transformed").inc(result.transformed_records)
    records_processed_total.labels(format=file_format, status="skipped").inc(result.skipped_records)
    if duplicate_records > 0:
        records_processed_total.labels(format=file_format, status="duplicate").inc(duplicate_records)

    batch_size.labels(format=file_format).observe(result.original_records)
    processing_duration_seconds.labels(format=file_format).observe(result.processing_time_seconds)
    inputs_processed_total.labels(format=file_format, status="success").inc()

    record_quality(result.data_quality)


def record_input_failure(file_format: str) -> None:
    inputs_processed_total.labels(format=file_format, status="failure").inc()
