#!/usr/bin/env python3
"""
Change Engine

Drives a batch of transaction lines through parsing, routing and
decomposition.

Routing rule:
- Underpaid transactions are skipped (no change due)
- Amount owed whose integer cents are divisible by 3 -> randomized change
- Everything else -> greedy change

The engine holds only immutable configuration. Randomness is supplied per
call, so one engine can serve concurrent requests as long as each request
brings its own random source.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from ..core.models import (
    ChangeCombination,
    ConfigurationError,
    DenominationTable,
    RandomizationPolicy,
    Transaction,
)
from ..core.random_source import RandomSource, make_rng
from .formatter import format_combination
from .greedy import greedy_combination
from .parser import SEPARATOR, parse_transaction
from .randomized import randomized_combination

logger = logging.getLogger(__name__)

RANDOM_ROUTING_DIVISOR = 3


def uses_random_change(transaction: Transaction) -> bool:
    """True when the amount owed, in whole cents, is divisible by 3."""
    return transaction.owed_cents % RANDOM_ROUTING_DIVISOR == 0


def decompose(
    change_amount: Decimal,
    table: DenominationTable,
    policy: RandomizationPolicy | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Describe the change for an amount.

    Args:
        change_amount: Change to hand back, in base units
        table: Denomination table
        policy: Randomization policy; None selects the greedy path
        rng: Random source for the randomized path (fresh one if omitted)

    Returns:
        Formatted description, "" when there is no change to give

    Example:
        decompose(Decimal("0.88"), DEFAULT_DENOMINATIONS) -> "3 quarters,1 dime,3 pennies"
    """
    if policy is None:
        combination = greedy_combination(change_amount, table)
    else:
        combination = randomized_combination(
            change_amount, table, policy, rng if rng is not None else make_rng()
        )
    return format_combination(combination, table)


def process_transactions(
    lines: Iterable[str],
    table: DenominationTable,
    policy: RandomizationPolicy,
    rng: RandomSource | None = None,
) -> list[str]:
    """Functional form of ``ChangeEngine.process_transactions``."""
    return ChangeEngine(table, policy).process_transactions(lines, rng)


class ChangeEngine:
    """
    Calculates change descriptions for transaction lines.

    Example:
        engine = ChangeEngine(DEFAULT_DENOMINATIONS, RandomizationPolicy())
        engine.process_transactions(["2.12,3.00", "1.97,2.00"])
        -> ["3 quarters,1 dime,3 pennies", "3 pennies"]
    """

    def __init__(
        self,
        table: DenominationTable,
        policy: RandomizationPolicy,
        separator: str = SEPARATOR,
    ):
        """
        Initialize the engine.

        Raises:
            ConfigurationError: If the table or policy is missing or the wrong type
        """
        if not isinstance(table, DenominationTable):
            raise ConfigurationError("A denomination table is required")
        if not isinstance(policy, RandomizationPolicy):
            raise ConfigurationError("A randomization policy is required")
        if len(separator) != 1:
            raise ConfigurationError("Transaction separator must be a single character")

        self.table = table
        self.policy = policy
        self.separator = separator

    def combination_for(self, transaction: Transaction, rng: RandomSource) -> ChangeCombination | None:
        """
        Route one transaction to a decomposition.

        Returns:
            ChangeCombination, or None when the customer underpaid
        """
        if transaction.is_underpaid:
            return None

        if uses_random_change(transaction):
            logger.debug("Owed %s routed to randomized change", transaction.amount_owed)
            return randomized_combination(transaction.change_amount, self.table, self.policy, rng)

        logger.debug("Owed %s routed to greedy change", transaction.amount_owed)
        return greedy_combination(transaction.change_amount, self.table)

    def decompose(self, change_amount: Decimal, randomized: bool = False, rng: RandomSource | None = None) -> str:
        """Describe the change for an amount using this engine's table and policy."""
        return decompose(change_amount, self.table, self.policy if randomized else None, rng)

    def process_transactions(self, lines: Iterable[str], rng: RandomSource | None = None) -> list[str]:
        """
        Calculate change for each line, preserving input order.

        Malformed lines, underpaid transactions and exact payments produce no
        entry; they never abort the batch.

        Args:
            lines: Lines like "2.12,3.00"
            rng: Random source for this batch (fresh one if omitted)

        Returns:
            One description per line that has change due
        """
        if rng is None:
            rng = make_rng()
        results: list[str] = []
        skipped = 0

        for index, line in enumerate(lines, start=1):
            transaction = parse_transaction(line, self.separator)
            if transaction is None:
                logger.warning("Skipping malformed transaction on line %d: %r", index, line)
                skipped += 1
                continue

            combination = self.combination_for(transaction, rng)
            if combination is None:
                logger.warning(
                    "Skipping underpaid transaction on line %d: owed %s, paid %s",
                    index,
                    transaction.amount_owed,
                    transaction.amount_paid,
                )
                skipped += 1
                continue

            description = format_combination(combination, self.table)
            if description:
                results.append(description)

        logger.info(f"Calculated change for {len(results)} transactions ({skipped} skipped)")
        return results
