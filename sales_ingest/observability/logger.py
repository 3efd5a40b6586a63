"""
Structured JSON logging for sales-ingest

Every module logs through a child of the "sales_ingest" package logger, which
is configured once with a python-json-logger handler on stderr. Records
emitted while a run is in progress carry its run_id and source so lines from
concurrent runs can be told apart.
"""
import logging
import os
import sys
import time
from typing import Any

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "sales_ingest"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

JSON_FIELDS = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(run_id)s] %(message)s"


class IngestJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for pipeline records.

    Emits timestamp, level and logger on every line, plus run_id and source
    when the record was logged through a RunLogger.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        # Unbound records have no run context; keep the line short
        for key in ("run_id", "source"):
            if log_record.get(key) is None:
                log_record.pop(key, None)


class _RunIdDefault(logging.Filter):
    """Gives unbound records a "-" run_id so TEXT_FORMAT always renders."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = "-"
        return True


def configure_logging(level: str | None = None, format_type: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the previous handler, so the CLI can switch
    level or format after import.

    Args:
        level: Log level name; defaults to LOG_LEVEL, then INFO. Unknown
            names fall back to INFO
        format_type: "json" or "text"; defaults to LOG_FORMAT, then "json"

    Returns:
        The configured "sales_ingest" logger
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = LOG_LEVELS.get(level_name, logging.INFO)
    format_type = (format_type or os.getenv("LOG_FORMAT", "json")).lower()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    # stdout carries exported data and summaries
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(IngestJsonFormatter(fmt=JSON_FIELDS, datefmt="%Y-%m-%dT%H:%M:%S"))
    else:
        handler.addFilter(_RunIdDefault())
        handler.setFormatter(logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger inside the package hierarchy.

    The package logger is configured on first use. Names outside the
    hierarchy are nested under it so they share its handler.

    Args:
        name: Usually the calling module's __name__
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class RunLogger(logging.LoggerAdapter):
    """Logger adapter stamping every record with the current run's id and source."""

    def process(self, msg: Any, kwargs: dict) -> tuple[Any, dict]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def bind_run(logger: logging.Logger, run_id: str, source: str) -> RunLogger:
    """Wrap a logger so its records identify one processing run."""
    return RunLogger(logger, {"run_id": run_id, "source": source})


class log_operation:
    """
    Context manager logging the start and outcome of an operation.

    Fields added with add_fields() while the operation runs are included in
    the completion line, e.g. the record counts of a finished batch.

    Usage:
        with log_operation("Processing input", logger=run_logger) as operation:
            ...
            operation.add_fields(transformed_records=len(records))
    """

    def __init__(
        self,
        operation_name: str,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        **extra_fields,
    ):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = dict(extra_fields)
        self.start_time: float | None = None

    @property
    def elapsed(self) -> float:
        """Seconds since the operation started (0 before it starts)."""
        if self.start_time is None:
            return 0.0
        return time.perf_counter() - self.start_time

    def add_fields(self, **fields) -> None:
        self.extra_fields.update(fields)

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}", extra={"operation": self.operation_name})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        fields = {
            "operation": self.operation_name,
            "duration_seconds": round(self.elapsed, 3),
            **self.extra_fields,
        }

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation_name}", extra={**fields, "status": "success"})
        else:
            self.logger.error(
                f"Failed: {self.operation_name}: {exc_val}",
                extra={**fields, "status": "error", "error_type": exc_type.__name__},
            )
        return False
