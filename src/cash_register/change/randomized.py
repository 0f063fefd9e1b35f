#!/usr/bin/env python3
"""
Randomized Change Decomposition

Produces change that still sums exactly to the amount due but varies in which
denominations are used.

Approach:
- Run up to MAX_TRIALS independent trials, each walking the denominations in
  a freshly shuffled order and using a biased random count of each
- Keep only distinct candidates, stopping once MAX_CANDIDATES are collected
- Fall back to the greedy combination if no candidate was produced
- Pick one candidate uniformly at random

The sink denomination (the rounding unit) is always consumed in full and
absorbs any residual, which is what keeps every candidate correct.
"""

import logging
from decimal import Decimal

from ..core.currency import RESIDUAL_TOLERANCE, nearest_units, round_cents, whole_units
from ..core.models import ChangeCombination, Denomination, DenominationTable, RandomizationPolicy
from ..core.random_source import RandomSource
from .greedy import greedy_combination

logger = logging.getLogger(__name__)

MAX_TRIALS = 20
MAX_CANDIDATES = 5


def _random_count(
    max_possible: int,
    policy: RandomizationPolicy,
    rng: RandomSource,
) -> int:
    """Choose how many of a non-sink denomination to use (skip / partial / generous)."""
    draw = rng.random()

    if draw < policy.skip_probability:
        return 0

    if draw < policy.skip_probability + policy.partial_probability:
        upper = max(1, max_possible // 2 + 1)
        if upper <= 1:
            return 1
        return rng.randrange(1, upper)

    lower = max(1, max_possible // 2)
    upper = min(max_possible + 1, policy.max_coins_per_denomination + 1)
    if upper <= lower:
        return lower
    return rng.randrange(lower, upper)


def generate_candidate(
    change_amount: Decimal,
    table: DenominationTable,
    policy: RandomizationPolicy,
    rng: RandomSource,
) -> ChangeCombination:
    """
    Run one randomized trial.

    The shuffled order only decides which denomination gets first claim on
    the remaining amount; output order is restored by the formatter.
    """
    combination = ChangeCombination()
    remaining = round_cents(change_amount)
    sink = table.sink

    order: list[Denomination] = list(table)
    rng.shuffle(order)

    for denomination in order:
        if denomination.name == sink.name:
            count = nearest_units(remaining, denomination.value)
        elif remaining >= denomination.value:
            max_possible = whole_units(remaining, denomination.value)
            count = _random_count(max_possible, policy, rng)
        else:
            continue

        if count > 0:
            combination.add(denomination.name, count)
            remaining = round_cents(remaining - count * denomination.value)

    if remaining > RESIDUAL_TOLERANCE:
        combination.add(sink.name, nearest_units(remaining, sink.value))

    return combination


def generate_candidates(
    change_amount: Decimal,
    table: DenominationTable,
    policy: RandomizationPolicy,
    rng: RandomSource,
) -> list[ChangeCombination]:
    """
    Collect up to MAX_CANDIDATES distinct combinations from MAX_TRIALS trials.

    Falls back to a single greedy combination when no trial produced one.
    """
    candidates: list[ChangeCombination] = []

    for _ in range(MAX_TRIALS):
        candidate = generate_candidate(change_amount, table, policy, rng)
        if not candidate.is_empty() and candidate not in candidates:
            candidates.append(candidate)
        if len(candidates) >= MAX_CANDIDATES:
            break

    if not candidates:
        logger.debug("No randomized candidates for %s, using greedy combination", change_amount)
        candidates.append(greedy_combination(change_amount, table))

    return candidates


def randomized_combination(
    change_amount: Decimal,
    table: DenominationTable,
    policy: RandomizationPolicy,
    rng: RandomSource,
) -> ChangeCombination:
    """
    Break an amount into a randomly chosen valid set of denominations.

    Args:
        change_amount: Change to hand back, in base units
        table: Denominations; its sink absorbs rounding
        policy: Skip / partial / generous bias
        rng: Random source for this request

    Returns:
        ChangeCombination summing to change_amount; empty when change_amount <= 0
    """
    if change_amount <= 0:
        return ChangeCombination()

    candidates = generate_candidates(change_amount, table, policy, rng)
    logger.debug("Choosing among %d candidate combinations for %s", len(candidates), change_amount)
    return candidates[rng.randrange(len(candidates))]
