"""
Core Utilities Package

Shared building blocks for the cash register.

This package provides:
- Currency parsing and rounding on Decimal amounts
- Data models for denominations, randomization policy and transactions
- An injectable random source
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_str,
    format_amount,
    parse_amount,
    round_cents,
    to_cents,
)
from .models import (
    DEFAULT_DENOMINATIONS,
    ChangeCombination,
    ConfigurationError,
    Denomination,
    DenominationTable,
    RandomizationPolicy,
    Transaction,
)
from .random_source import RandomSource, make_rng, parse_seed

__all__ = [
    "DEFAULT_DENOMINATIONS",
    "ChangeCombination",
    # Configuration
    "Config",
    "ConfigurationError",
    # Data models
    "Denomination",
    "DenominationTable",
    "Environment",
    "RandomSource",
    "RandomizationPolicy",
    "Transaction",
    # Currency utilities
    "cents_to_str",
    "format_amount",
    "get_config",
    "make_rng",
    "parse_amount",
    "parse_seed",
    "reload_config",
    "round_cents",
    "to_cents",
]
