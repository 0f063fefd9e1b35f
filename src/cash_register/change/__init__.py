"""
Change Calculation Package

Turns "amountOwed,amountPaid" lines into change descriptions like
"3 quarters,1 dime,3 pennies".

Key Components:
- parser: Per-line parsing and batch-level validation
- greedy: Deterministic largest-first decomposition
- randomized: Biased random decomposition with candidate selection
- formatter: Pluralized, table-ordered output
- engine: Routing rule and batch driver
"""

from .engine import ChangeEngine, decompose, process_transactions, uses_random_change
from .formatter import format_combination, pluralize
from .greedy import greedy_combination
from .parser import TransactionFormatError, parse_transaction, validate_transaction_lines
from .randomized import generate_candidate, generate_candidates, randomized_combination

__all__ = [
    "ChangeEngine",
    "TransactionFormatError",
    "decompose",
    "format_combination",
    "generate_candidate",
    "generate_candidates",
    "greedy_combination",
    "parse_transaction",
    "pluralize",
    "process_transactions",
    "randomized_combination",
    "uses_random_change",
    "validate_transaction_lines",
]
