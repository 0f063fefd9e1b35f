#!/usr/bin/env python3
"""
Injectable Random Source

The randomized change path never touches the module-level ``random`` state.
Callers hand in a source per request so concurrent requests do not share a
generator and tests can pin a seed.
"""

import random
from typing import Any, MutableSequence, Protocol


class RandomSource(Protocol):
    """Uniform floats, bounded integers and in-place shuffles."""

    def random(self) -> float: ...

    def randrange(self, start: int, stop: int | None = None) -> int: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def parse_seed(value: Any) -> tuple[int | None, str | None]:
    """
    Parse an optional seed value.

    Returns:
        (seed, None) on success, (None, None) when no seed was given,
        (None, error message) when the value is not a whole number
    """
    if value is None:
        return None, None
    raw = str(value).strip()
    if not raw:
        return None, None
    try:
        return int(raw), None
    except ValueError:
        return None, "Seed must be a whole number."


def make_rng(seed: int | None = None) -> RandomSource:
    """Fresh generator: reproducible when seeded, OS entropy otherwise."""
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)
