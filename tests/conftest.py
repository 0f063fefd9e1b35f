"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import random
from decimal import Decimal

import pytest

import cash_register.core.config as config_module
from cash_register.core.models import (
    DEFAULT_DENOMINATIONS,
    DenominationTable,
    RandomizationPolicy,
)


@pytest.fixture
def us_table() -> DenominationTable:
    """Standard US table: dollar, quarter, dime, nickel, penny."""
    return DEFAULT_DENOMINATIONS


@pytest.fixture
def coin_table() -> DenominationTable:
    """Four-coin US table without the dollar."""
    return DenominationTable.from_pairs(
        [("quarter", "0.25"), ("dime", "0.10"), ("nickel", "0.05"), ("penny", "0.01")]
    )


@pytest.fixture
def policy() -> RandomizationPolicy:
    return RandomizationPolicy()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Reproducible random source."""
    return random.Random(1234)


@pytest.fixture
def change_amounts() -> list[Decimal]:
    """Change amounts covering zero, coins-only and multi-dollar cases."""
    return [Decimal(v) for v in ["0.00", "0.01", "0.03", "0.30", "0.88", "0.99", "1.00", "2.41", "7.77", "19.99"]]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and drop any cached configuration."""
    monkeypatch.setenv("CASH_REGISTER_ENV", "test")
    for name in [
        "CASH_REGISTER_DENOMINATIONS_FILE",
        "CASH_REGISTER_CURRENCY_SYMBOL",
        "CASH_REGISTER_SKIP_PROBABILITY",
        "CASH_REGISTER_PARTIAL_PROBABILITY",
        "CASH_REGISTER_FULL_PROBABILITY",
        "CASH_REGISTER_MAX_COINS",
        "CASH_REGISTER_SEED",
        "CASH_REGISTER_MAX_UPLOAD_BYTES",
        "CASH_REGISTER_CORS_ORIGINS",
        "LOG_LEVEL",
        "DEBUG",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "change: Tests for change decomposition"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
    config.addinivalue_line(
        "markers", "api: Tests for the HTTP API"
    )
