#!/usr/bin/env python3
"""
Greedy Change Decomposition

Largest-denomination-first breakdown, the way a cash register counts change
out of the drawer. Deterministic: the same amount and table always give the
same combination.
"""

from decimal import Decimal

from ..core.currency import round_cents, whole_units
from ..core.models import ChangeCombination, DenominationTable


def greedy_combination(change_amount: Decimal, table: DenominationTable) -> ChangeCombination:
    """
    Break an amount into denominations in table order.

    Args:
        change_amount: Change to hand back, in base units
        table: Denominations ordered high-to-low

    Returns:
        ChangeCombination; empty when change_amount <= 0

    Example:
        greedy_combination(Decimal("0.88"), DEFAULT_DENOMINATIONS)
        -> {"quarter": 3, "dime": 1, "penny": 3}
    """
    combination = ChangeCombination()
    if change_amount <= 0:
        return combination

    remaining = round_cents(change_amount)
    for denomination in table:
        count = whole_units(remaining, denomination.value)
        if count > 0:
            combination.add(denomination.name, count)
            remaining = round_cents(remaining - count * denomination.value)

    return combination
