"""
Unit tests for Pydantic data models.

Tests the canonical record, configuration and result models for validation
and constraint enforcement.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from sales_ingest.core.models import (
    DataFormat,
    DataQualityIssue,
    QualityMetrics,
    Transaction,
    TransformationResult,
    ValidationResult,
    default_configuration,
)


class TestTransaction:
    """Tests for Transaction model"""

    def test_defaults(self):
        """Test a bare Transaction carries the zero values"""
        record = Transaction()
        assert record.transaction_id == ""
        assert record.quantity == 1
        assert record.transaction_date is None
        assert record.timestamp_seconds() == 0

    def test_timestamp_seconds(self, make_transaction):
        record = make_transaction(transaction_date=datetime(2025, 3, 15, tzinfo=timezone.utc))
        assert record.timestamp_seconds() == 1741996800

    def test_composite_key_covers_every_field(self, make_transaction):
        base = make_transaction()
        assert base.composite_key() == make_transaction().composite_key()
        assert base.composite_key() != make_transaction(region="South").composite_key()
        assert base.composite_key() != make_transaction(quantity=4).composite_key()

    def test_invalid_quantity_type(self):
        with pytest.raises(ValidationError) as exc_info:
            Transaction(quantity="many")
        assert "quantity" in str(exc_info.value)


class TestDataFormat:
    """Tests for DataFormat parsing"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("csv", DataFormat.CSV),
            (".csv", DataFormat.CSV),
            ("TSV", DataFormat.TSV),
            ("YML", DataFormat.YAML),
            (" json ", DataFormat.JSON),
            (DataFormat.XML, DataFormat.XML),
        ],
    )
    def test_parse(self, value, expected):
        assert DataFormat.parse(value) is expected

    def test_unknown_format(self):
        with pytest.raises(ValueError) as exc_info:
            DataFormat.parse("xls")
        assert "Unsupported format: xls" in str(exc_info.value)


class TestTransformConfig:
    """Tests for TransformConfig model"""

    def test_frozen(self, default_config):
        """Test configuration cannot be mutated after creation"""
        with pytest.raises(ValidationError):
            default_config.price_multiplier = 1.0

    def test_default_configuration_is_fresh(self):
        """Test every call returns independent collections"""
        first = default_configuration()
        second = default_configuration()

        assert first == second
        assert first.date_formats is not second.date_formats
        assert first.custom_mappings is not second.custom_mappings

    def test_overrides(self):
        config = default_configuration(default_country="Unknown", validators=[])
        assert config.default_country == "Unknown"
        assert config.validators == []
        assert config.transformations is None

    def test_lookup_mapping_is_case_insensitive(self, default_config):
        assert default_config.lookup_mapping("  USA ") == "United States"
        assert default_config.lookup_mapping("Region_NE") == "Northeast"
        assert default_config.lookup_mapping("atlantis") is None


class TestValidationResult:
    """Tests for ValidationResult model"""

    def test_failed_result(self):
        result = ValidationResult(record_id="A-1", passed=False, failed_rules=["RangeValidator"])
        assert result.failed_rules == ["RangeValidator"]

    def test_passed_with_failures_rejected(self):
        """Test that passed=True with failed_rules raises ValidationError"""
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(record_id="A-1", passed=True, failed_rules=["RangeValidator"])
        assert "passed=True but failed_rules is not empty" in str(exc_info.value)


class TestQualityModels:
    """Tests for QualityMetrics, TransformationResult and DataQualityIssue"""

    def test_score_out_of_range(self):
        with pytest.raises(ValidationError):
            QualityMetrics(completeness=1.2)

    def test_result_defaults(self):
        result = TransformationResult()
        assert result.source == "stream"
        assert result.errors == []
        assert result.data_quality.completeness == 0.0

    def test_result_is_frozen(self):
        result = TransformationResult(original_records=1)
        with pytest.raises(ValidationError):
            result.original_records = 2

    def test_issue_severity_checked(self):
        with pytest.raises(ValidationError) as exc_info:
            DataQualityIssue(type="missing_data", description="x", severity="urgent", count=1)
        assert "severity" in str(exc_info.value)
