#!/usr/bin/env python3
"""
Core Data Models for the Cash Register

Immutable configuration types (denominations, randomization policy) and the
transient values the change engine produces (transactions, change combinations).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from .currency import CENT, to_cents


class ConfigurationError(ValueError):
    """Raised when a denomination table or randomization policy is unusable"""

    pass


@dataclass(frozen=True)
class Denomination:
    """A named unit of currency value, e.g. quarter = 0.25."""

    name: str
    value: Decimal
    plural: str | None = None


@dataclass(frozen=True)
class DenominationTable:
    """
    Ordered denominations, high-to-low by convention.

    Order drives both greedy priority and the order results are written in,
    so the table is an explicit sequence rather than a dict.

    The sink is the rounding unit: the lowest-valued denomination, worth one
    cent, which the randomized decomposition always consumes fully to absorb
    any remainder. Every other value must be a whole number of sink units.
    """

    denominations: tuple[Denomination, ...]
    sink_name: str = ""

    def __post_init__(self) -> None:
        if not self.denominations:
            raise ConfigurationError("Denomination table must contain at least one denomination")

        seen: set[str] = set()
        for denomination in self.denominations:
            if not denomination.name or not denomination.name.strip():
                raise ConfigurationError("Denomination names must be non-empty")
            if denomination.name in seen:
                raise ConfigurationError(f"Duplicate denomination: {denomination.name}")
            if not denomination.value.is_finite() or denomination.value <= 0:
                raise ConfigurationError(
                    f"Denomination {denomination.name} must have a positive value, got {denomination.value}"
                )
            seen.add(denomination.name)

        lowest = min(self.denominations, key=lambda d: d.value)
        if not self.sink_name:
            # frozen dataclass: fill the default sink in place
            object.__setattr__(self, "sink_name", lowest.name)
        elif self.sink_name not in seen:
            raise ConfigurationError(f"Sink denomination {self.sink_name} is not in the table")
        elif self[self.sink_name].value != lowest.value:
            raise ConfigurationError(
                f"Sink denomination {self.sink_name} must be the lowest value ({lowest.name})"
            )

        # Change is rounded to cents, so the sink must make up any whole-cent amount
        sink = self[self.sink_name]
        if sink.value != CENT:
            raise ConfigurationError(f"Sink denomination {sink.name} must be worth {CENT}, got {sink.value}")
        for denomination in self.denominations:
            try:
                whole = denomination.value % sink.value == 0
            except InvalidOperation as e:
                raise ConfigurationError(f"Denomination {denomination.name} value is too large: {denomination.value}") from e
            if not whole:
                raise ConfigurationError(
                    f"Denomination {denomination.name} ({denomination.value}) is not a whole number of {sink.name}"
                )

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, Decimal | str]], sink_name: str = ""
    ) -> "DenominationTable":
        """
        Build a table from ordered (name, value) pairs.

        Example:
            DenominationTable.from_pairs([("quarter", "0.25"), ("penny", "0.01")])
        """
        return cls(
            denominations=tuple(Denomination(name=name, value=Decimal(str(value))) for name, value in pairs),
            sink_name=sink_name,
        )

    @property
    def sink(self) -> Denomination:
        """The rounding-unit denomination."""
        return self[self.sink_name]

    @property
    def names(self) -> list[str]:
        return [d.name for d in self.denominations]

    def __getitem__(self, name: str) -> Denomination:
        for denomination in self.denominations:
            if denomination.name == name:
                return denomination
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self.denominations)

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self.denominations)

    def __len__(self) -> int:
        return len(self.denominations)


DEFAULT_DENOMINATIONS = DenominationTable.from_pairs(
    [
        ("dollar", "1.00"),
        ("quarter", "0.25"),
        ("dime", "0.10"),
        ("nickel", "0.05"),
        ("penny", "0.01"),
    ],
    sink_name="penny",
)


@dataclass(frozen=True)
class RandomizationPolicy:
    """
    Bias applied by the randomized decomposition to each non-sink denomination.

    A uniform draw below ``skip_probability`` skips the denomination, a draw
    below ``skip_probability + partial_probability`` uses a partial count, and
    anything else uses a generous count capped by ``max_coins_per_denomination``.
    ``full_probability`` documents the remaining mass; it is never compared
    against, so the three values need not sum to 1.
    """

    skip_probability: float = 0.3
    partial_probability: float = 0.4
    full_probability: float = 0.3
    max_coins_per_denomination: int = 10

    def __post_init__(self) -> None:
        for name in ("skip_probability", "partial_probability", "full_probability"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative")
        if self.max_coins_per_denomination < 1:
            raise ConfigurationError("max_coins_per_denomination must be at least 1")


@dataclass(frozen=True)
class Transaction:
    """One parsed input line: amount owed and amount paid."""

    amount_owed: Decimal
    amount_paid: Decimal

    @property
    def change_amount(self) -> Decimal:
        """Amount paid minus amount owed; negative when underpaid."""
        return self.amount_paid - self.amount_owed

    @property
    def owed_cents(self) -> int:
        return to_cents(self.amount_owed)

    @property
    def is_underpaid(self) -> bool:
        return self.change_amount < 0


@dataclass
class ChangeCombination:
    """
    Denomination name -> count of that denomination to hand back.

    Only positive counts are stored, so two combinations are equal exactly when
    they use the same denominations with the same counts.
    """

    counts: dict[str, int] = field(default_factory=dict)

    def add(self, name: str, count: int) -> None:
        """Add ``count`` units of a denomination (additive, never overwrites)."""
        if count <= 0:
            return
        self.counts[name] = self.counts.get(name, 0) + count

    def get(self, name: str) -> int:
        return self.counts.get(name, 0)

    def total(self, table: DenominationTable) -> Decimal:
        """Weighted sum of the combination in base units."""
        return sum(
            (table[name].value * count for name, count in self.counts.items()),
            Decimal("0"),
        )

    def is_empty(self) -> bool:
        return not self.counts
