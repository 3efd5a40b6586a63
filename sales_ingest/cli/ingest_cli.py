"""
Command-line interface for sales transaction ingestion.

Usage:
    sales-ingest process <input_file> [options]
    python -m sales_ingest.cli.ingest_cli process <input_file> [options]
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from sales_ingest.batch.pipeline import BatchPipeline
from sales_ingest.core.config import DEFAULT_CONFIG_PATH, TransformConfigLoader, load_transformation_config
from sales_ingest.core.errors import ConfigurationError, StructuralError
from sales_ingest.core.models import DataFormat, default_configuration
from sales_ingest.core.schema import SNIFF_SIZE, detect_format, format_from_extension
from sales_ingest.observability.logger import configure_logging, get_logger
from sales_ingest.observability.metrics import generate_metrics

logger = get_logger(__name__)

FORMAT_CHOICES = ["csv", "tsv", "json", "yaml"]


def _resolve_output_format(args, input_format: str) -> DataFormat:
    if args.output_format:
        return DataFormat.parse(args.output_format)
    by_extension = format_from_extension(args.output)
    if by_extension is not None:
        return by_extension
    return DataFormat.parse(input_format)


def process_command(args) -> int:
    """
    Execute the process command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    try:
        config = load_transformation_config(args.config, args.env)
        overrides = {}
        if args.no_validate:
            overrides["enable_validation"] = False
        if args.no_optimize:
            overrides["enable_optimization"] = False
        if overrides:
            config = config.model_copy(update=overrides)

        pipeline = BatchPipeline(config)

        def run(drop_invalid: bool):
            if args.format:
                return pipeline.process_bytes(
                    input_path.read_bytes(),
                    args.format,
                    source=str(input_path),
                    drop_invalid=drop_invalid,
                )
            return pipeline.process_file(input_path, drop_invalid=drop_invalid)

        records, result = run(args.drop_invalid)

        # Recovery: re-run as a filter when the data is too incomplete
        if (
            args.recovery_threshold is not None
            and not args.drop_invalid
            and result.data_quality.completeness < args.recovery_threshold
        ):
            logger.warning(
                f"Completeness {result.data_quality.completeness:.2%} below "
                f"{args.recovery_threshold:.2%}, re-running with invalid records dropped"
            )
            records, result = run(True)

    except (StructuralError, ConfigurationError) as e:
        logger.error(f"Error during processing: {e}")
        return 1

    if args.output:
        output_format = _resolve_output_format(args, result.format)
        with open(args.output, "w", newline="") as f:
            written = pipeline.export_transactions(records, output_format, f)
        logger.info(f"Wrote {written} records to {args.output} as {output_format.value}")

    if args.report:
        with open(args.report, "w") as f:
            pipeline.export_transformation_report(result, f)
        logger.info(f"Wrote transformation report to {args.report}")

    quality_report = pipeline.get_data_quality_report(records)
    summary = {
        "source": result.source,
        "format": result.format,
        "original_records": result.original_records,
        "transformed_records": result.transformed_records,
        "skipped_records": result.skipped_records,
        "errors": len(result.errors),
        "warnings": len(result.warnings),
        "transformations_applied": result.transformations_applied,
        "data_quality": result.data_quality.model_dump(mode="json"),
        "issues": [issue.model_dump(mode="json") for issue in quality_report.issues],
        "recommendations": quality_report.recommendations,
    }
    print(json.dumps(summary, indent=2))

    if args.print_metrics:
        sys.stdout.write(generate_metrics().decode("utf-8"))

    return 0


def detect_command(args) -> int:
    """Print the detected format of a file."""
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    with open(input_path, "rb") as f:
        head = f.read(SNIFF_SIZE)

    print(detect_format(head, input_path).value)
    return 0


def formats_command(args) -> int:
    """Print the supported formats and stages."""
    try:
        config = load_transformation_config(args.config)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print(json.dumps(BatchPipeline(config).get_supported_formats(), indent=2))
    return 0


def config_command(args) -> int:
    """Show the effective configuration or write a default one."""
    if args.init:
        path = TransformConfigLoader(args.init).save_config(default_configuration())
        print(f"Wrote default configuration to {path}")
        return 0

    try:
        config = load_transformation_config(args.config, args.env)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False, allow_unicode=True), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sales-ingest",
        description="Sales transaction ingestion pipeline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process a file, format detected from extension or content
  sales-ingest process data/sales.csv

  # Normalize a YAML export into CSV and keep a run report
  sales-ingest process data/sales.yaml --output clean.csv --report run.json

  # Drop records failing validation when completeness is below 90%
  sales-ingest process data/sales.json --recovery-threshold 0.9

  # Write the default configuration file
  sales-ingest config --init config/data_transformation.yaml
        """
    )

    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL, then INFO)")
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log line format on stderr (default: LOG_FORMAT, then json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Process command
    process_parser = subparsers.add_parser("process", help="Process a data file")
    process_parser.add_argument("input", help="Path to input file")
    process_parser.add_argument(
        "--format",
        choices=FORMAT_CHOICES,
        help="Input format (default: detect from extension or content)"
    )
    process_parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to transformation config YAML (default: {DEFAULT_CONFIG_PATH})"
    )
    process_parser.add_argument(
        "--env",
        help="Environment name; merges <config>.<env>.yaml over the base config"
    )
    process_parser.add_argument("--output", help="Write transformed records to this file")
    process_parser.add_argument(
        "--output-format",
        choices=FORMAT_CHOICES,
        help="Output format (default: from output extension, else input format)"
    )
    process_parser.add_argument("--report", help="Write a JSON transformation report to this file")
    process_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Disable validators"
    )
    process_parser.add_argument(
        "--no-optimize",
        action="store_true",
        help="Disable optimizations"
    )
    process_parser.add_argument(
        "--drop-invalid",
        action="store_true",
        help="Exclude records that fail any validator"
    )
    process_parser.add_argument(
        "--recovery-threshold",
        type=float,
        help="Re-run with --drop-invalid when completeness is below this value (0-1)"
    )
    process_parser.add_argument(
        "--print-metrics",
        action="store_true",
        help="Print Prometheus metrics after processing"
    )

    # Detect command
    detect_parser = subparsers.add_parser("detect", help="Detect the format of a file")
    detect_parser.add_argument("input", help="Path to input file")

    # Formats command
    formats_parser = subparsers.add_parser("formats", help="List supported formats and stages")
    formats_parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to config YAML")

    # Config command
    config_parser = subparsers.add_parser("config", help="Show or initialize the configuration")
    config_parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to config YAML")
    config_parser.add_argument("--env", help="Environment name for overrides")
    group = config_parser.add_mutually_exclusive_group()
    group.add_argument("--show", action="store_true", help="Print the effective configuration (default)")
    group.add_argument("--init", metavar="PATH", help="Write the default configuration to PATH")

    return parser


COMMANDS = {
    "process": process_command,
    "detect": detect_command,
    "formats": formats_command,
    "config": config_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        configure_logging(args.log_level, args.log_format)

    if not args.command:
        parser.print_help()
        return 1

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
