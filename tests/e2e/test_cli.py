"""
End-to-end tests for the sales-ingest command-line interface.

Tests the complete flow: input file -> process command -> exported file,
run report and JSON summary on stdout.
"""

import csv
import json
import os
from pathlib import Path

import pytest
import yaml

from sales_ingest.cli.ingest_cli import main

REPO_CONFIG = str(Path(__file__).resolve().parents[2] / "config" / "data_transformation.yaml")


def _summary(capsys) -> dict:
    return json.loads(capsys.readouterr().out)


@pytest.mark.e2e
class TestProcessCommand:
    """Tests for `sales-ingest process`"""

    def test_process_csv_to_json_with_report(self, test_data_dir, tmp_path, capsys):
        """
        Steps:
        1. Process sales.csv with the shipped configuration
        2. Verify the exported JSON holds the normalized records
        3. Verify the run report and the stdout summary
        """
        output = tmp_path / "clean.json"
        report = tmp_path / "run.json"

        exit_code = main([
            "process",
            os.path.join(test_data_dir, "sales.csv"),
            "--config", REPO_CONFIG,
            "--output", str(output),
            "--report", str(report),
        ])

        assert exit_code == 0

        summary = _summary(capsys)
        assert summary["format"] == "csv"
        assert summary["original_records"] == 5
        assert summary["transformed_records"] == 5
        assert summary["skipped_records"] == 0
        assert summary["errors"] == 0
        assert summary["issues"][0]["type"] == "missing_data"

        exported = json.loads(output.read_text())
        assert [row["transaction_id"] for row in exported] == ["TXN-1001", "TXN-1002", "TXN-1003", "TXN-1004", "TXN-1005"]
        assert exported[1]["country"] == "United Kingdom"
        assert exported[1]["price"] == 1250.0

        run_report = json.loads(report.read_text())
        assert run_report["summary"]["transformed_records"] == 5

    def test_output_format_override(self, test_data_dir, tmp_path, capsys):
        output = tmp_path / "clean.txt"

        exit_code = main([
            "process",
            os.path.join(test_data_dir, "sales.yaml"),
            "--config", REPO_CONFIG,
            "--output", str(output),
            "--output-format", "tsv",
        ])

        assert exit_code == 0
        with open(output, newline="") as f:
            rows = list(csv.reader(f, delimiter="\t"))
        assert rows[0][0] == "transaction_id"
        assert len(rows) == 6

    def test_declared_format(self, test_data_dir, tmp_path, capsys):
        target = tmp_path / "upload.bin"
        target.write_bytes(Path(test_data_dir, "sales.json").read_bytes())

        exit_code = main(["process", str(target), "--format", "json", "--config", REPO_CONFIG])

        assert exit_code == 0
        assert _summary(capsys)["transformed_records"] == 5

    def test_recovery_threshold_drops_invalid_records(self, test_data_dir, capsys):
        exit_code = main([
            "process",
            os.path.join(test_data_dir, "messy.json"),
            "--config", REPO_CONFIG,
            "--recovery-threshold", "0.9",
        ])

        assert exit_code == 0
        summary = _summary(capsys)
        assert summary["skipped_records"] == 8
        assert summary["transformed_records"] == 1

    def test_no_optimize_keeps_duplicates(self, test_data_dir, capsys):
        exit_code = main([
            "process",
            os.path.join(test_data_dir, "messy.json"),
            "--config", REPO_CONFIG,
            "--no-optimize",
        ])

        assert exit_code == 0
        assert _summary(capsys)["transformed_records"] == 3

    def test_print_metrics(self, test_data_dir, capsys):
        exit_code = main([
            "process",
            os.path.join(test_data_dir, "sales.tsv"),
            "--config", REPO_CONFIG,
            "--print-metrics",
        ])

        assert exit_code == 0
        assert "ingest_records_processed_total" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        assert main(["process", str(tmp_path / "absent.csv"), "--config", REPO_CONFIG]) == 1

    def test_malformed_input(self, test_data_dir):
        assert main(["process", os.path.join(test_data_dir, "malformed.json"), "--config", REPO_CONFIG]) == 1

    def test_invalid_config(self, test_data_dir, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("transformation:\n  defaults:\n    price_multiplier: -5\n")

        assert main(["process", os.path.join(test_data_dir, "sales.csv"), "--config", str(config_path)]) == 1


@pytest.mark.e2e
class TestAuxiliaryCommands:
    """Tests for detect, formats and config"""

    def test_detect(self, test_data_dir, capsys):
        assert main(["detect", os.path.join(test_data_dir, "nested.json")]) == 0
        assert capsys.readouterr().out.strip() == "json"

    def test_detect_sniffs_unknown_extension(self, test_data_dir, tmp_path, capsys):
        target = tmp_path / "feed.dat"
        target.write_bytes(Path(test_data_dir, "sales.tsv").read_bytes())

        assert main(["detect", str(target)]) == 0
        assert capsys.readouterr().out.strip() == "tsv"

    def test_formats(self, capsys):
        assert main(["formats", "--config", REPO_CONFIG]) == 0

        formats = json.loads(capsys.readouterr().out)
        assert formats["input_formats"] == ["csv", "tsv", "json", "yaml"]
        assert formats["optimizations"] == ["DuplicateRemoval", "DataDeduplication", "IndexOptimization"]

    def test_config_init_then_show(self, tmp_path, capsys):
        config_path = tmp_path / "settings" / "transform.yaml"

        assert main(["config", "--init", str(config_path)]) == 0
        assert config_path.exists()
        capsys.readouterr()

        assert main(["config", "--show", "--config", str(config_path)]) == 0
        shown = yaml.safe_load(capsys.readouterr().out)
        assert shown["price_multiplier"] == 100.0
        assert shown["enable_validation"] is True
        assert shown["custom_mappings"]["usa"] == "United States"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "sales-ingest" in capsys.readouterr().out
