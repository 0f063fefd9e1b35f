#!/usr/bin/env python3
"""Render change combinations as "3 quarters,1 dime,3 pennies"."""

from ..core.models import ChangeCombination, Denomination, DenominationTable

IRREGULAR_PLURALS = {
    "penny": "pennies",
}


def pluralize(denomination: Denomination, count: int) -> str:
    """Singular name for a count of 1, plural otherwise."""
    if count == 1:
        return denomination.name
    if denomination.plural:
        return denomination.plural
    return IRREGULAR_PLURALS.get(denomination.name, denomination.name + "s")


def format_combination(combination: ChangeCombination, table: DenominationTable) -> str:
    """
    Join "<count> <name>" entries in table order, skipping zero counts.

    An empty combination formats to the empty string.
    """
    parts = []
    for denomination in table:
        count = combination.get(denomination.name)
        if count > 0:
            parts.append(f"{count} {pluralize(denomination, count)}")
    return ",".join(parts)
