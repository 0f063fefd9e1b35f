"""
Cash Register - Change Calculator

Calculates the change to hand back for retail transactions, described as
counts of currency denominations.

Key Features:
- Greedy largest-first change for most transactions
- Randomized (but always exact) change when the amount owed is divisible by 3
- Configurable denomination table and randomization bias
- Command-line and HTTP (FastAPI) front ends

Domain Packages:
- core: Currency handling, data models, configuration
- change: Parsing, decomposition and formatting
- cli: Command-line interface
- api: HTTP endpoints

Example Usage:
    from cash_register import ChangeEngine, DEFAULT_DENOMINATIONS, RandomizationPolicy

    engine = ChangeEngine(DEFAULT_DENOMINATIONS, RandomizationPolicy())
    engine.process_transactions(["2.12,3.00"])  # ["3 quarters,1 dime,3 pennies"]
"""

__version__ = "0.1.0"
__author__ = "Cash Register Maintainers"

from .change import ChangeEngine, TransactionFormatError, decompose, process_transactions
from .core.config import Environment, get_config
from .core.models import (
    DEFAULT_DENOMINATIONS,
    ConfigurationError,
    DenominationTable,
    RandomizationPolicy,
)

__all__ = [
    # Engine
    "ChangeEngine",
    "decompose",
    "process_transactions",
    "TransactionFormatError",

    # Models
    "DEFAULT_DENOMINATIONS",
    "DenominationTable",
    "RandomizationPolicy",
    "ConfigurationError",

    # Configuration
    "get_config",
    "Environment",
]
