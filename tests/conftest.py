"""
Pytest configuration and fixtures for sales-ingest tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from datetime import datetime, timezone

import pytest

from sales_ingest.batch.pipeline import BatchPipeline
from sales_ingest.core.models import RunContext, Transaction, TransformConfig, default_configuration


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for single components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that run the full pipeline in-process"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that drive the command-line interface"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="function")
def default_config() -> TransformConfig:
    """Fresh default configuration for a single test"""
    return default_configuration()


@pytest.fixture(scope="function")
def pipeline(default_config) -> BatchPipeline:
    """Batch pipeline built from the default configuration"""
    return BatchPipeline(default_config)


@pytest.fixture(scope="function")
def run_context() -> RunContext:
    """Empty per-run context"""
    return RunContext()


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def make_transaction():
    """
    Factory for valid transactions

    Returns:
        Callable accepting field overrides
    """
    def _make(**overrides) -> Transaction:
        fields = {
            "transaction_id": "TXN-1001",
            "country": "United States",
            "region": "North",
            "product_name": "Widget A",
            "unit_price_cents": 1999,
            "quantity": 3,
            "transaction_date": datetime(2025, 3, 15, 10, 30, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Transaction(**fields)

    return _make
