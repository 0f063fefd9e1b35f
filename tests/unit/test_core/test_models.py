#!/usr/bin/env python3
"""Tests for core data models."""

from decimal import Decimal

import pytest

from cash_register.core.models import (
    DEFAULT_DENOMINATIONS,
    ChangeCombination,
    ConfigurationError,
    Denomination,
    DenominationTable,
    RandomizationPolicy,
    Transaction,
)


class TestDenominationTable:
    """Test denomination table construction and lookup."""

    def test_default_table_order_and_sink(self):
        """Test the default table keeps high-to-low order with penny as sink."""
        assert DEFAULT_DENOMINATIONS.names == ["dollar", "quarter", "dime", "nickel", "penny"]
        assert DEFAULT_DENOMINATIONS.sink.name == "penny"
        assert DEFAULT_DENOMINATIONS["quarter"].value == Decimal("0.25")

    def test_sink_defaults_to_lowest_value(self):
        """Test an unnamed sink is the lowest-valued denomination."""
        table = DenominationTable.from_pairs([("cent", "0.01"), ("euro", "1.00")])
        assert table.sink_name == "cent"

    def test_lookup_and_membership(self):
        """Test name lookup and containment."""
        assert "dime" in DEFAULT_DENOMINATIONS
        assert "florin" not in DEFAULT_DENOMINATIONS
        assert len(DEFAULT_DENOMINATIONS) == 5
        with pytest.raises(KeyError):
            DEFAULT_DENOMINATIONS["florin"]

    def test_empty_table_rejected(self):
        """Test an empty table fails fast."""
        with pytest.raises(ConfigurationError):
            DenominationTable(())

    def test_duplicate_name_rejected(self):
        """Test duplicate denomination names fail fast."""
        with pytest.raises(ConfigurationError, match="Duplicate"):
            DenominationTable.from_pairs([("dime", "0.10"), ("dime", "0.01")])

    @pytest.mark.parametrize("value", ["0", "-0.05"])
    def test_non_positive_value_rejected(self, value):
        """Test zero and negative values fail fast."""
        with pytest.raises(ConfigurationError, match="positive"):
            DenominationTable.from_pairs([("dime", "0.10"), ("bogus", value)])

    def test_blank_name_rejected(self):
        """Test blank names fail fast."""
        with pytest.raises(ConfigurationError):
            DenominationTable((Denomination(name=" ", value=Decimal("0.01")),))

    def test_unknown_sink_rejected(self):
        """Test naming a sink that is not in the table fails fast."""
        with pytest.raises(ConfigurationError, match="not in the table"):
            DenominationTable.from_pairs([("dime", "0.10"), ("penny", "0.01")], sink_name="mill")

    def test_sink_must_be_lowest(self):
        """Test a sink that is not the rounding unit fails fast."""
        with pytest.raises(ConfigurationError, match="lowest"):
            DenominationTable.from_pairs([("dime", "0.10"), ("penny", "0.01")], sink_name="dime")

    def test_sink_must_be_one_cent(self):
        """Test a table whose lowest coin is not one cent fails fast."""
        with pytest.raises(ConfigurationError, match="must be worth 0.01"):
            DenominationTable.from_pairs([("quarter", "0.25"), ("nickel", "0.05")])

    def test_named_sink_must_be_one_cent(self):
        with pytest.raises(ConfigurationError, match="must be worth 0.01"):
            DenominationTable.from_pairs([("dollar", "1.00"), ("dime", "0.10")], sink_name="dime")

    @pytest.mark.parametrize("value", ["0.125", "1.005"])
    def test_value_must_be_whole_cents(self, value):
        """Test every value must be made up of whole sink units."""
        with pytest.raises(ConfigurationError, match="not a whole number of penny"):
            DenominationTable.from_pairs([("odd", value), ("penny", "0.01")])

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "1e40"])
    def test_unusable_value_rejected(self, value):
        """Test non-finite and oversized values are configuration errors."""
        with pytest.raises(ConfigurationError):
            DenominationTable.from_pairs([("bogus", value), ("penny", "0.01")])

    def test_table_is_immutable(self):
        """Test the table cannot be modified."""
        with pytest.raises(AttributeError):
            DEFAULT_DENOMINATIONS.sink_name = "dime"  # type: ignore


class TestRandomizationPolicy:
    """Test randomization policy validation."""

    def test_defaults(self):
        """Test default bias values."""
        policy = RandomizationPolicy()
        assert policy.skip_probability == 0.3
        assert policy.partial_probability == 0.4
        assert policy.full_probability == 0.3
        assert policy.max_coins_per_denomination == 10

    def test_probabilities_need_not_sum_to_one(self):
        """Test the generous branch is an 'otherwise' branch, not a checked weight."""
        policy = RandomizationPolicy(skip_probability=0.8, partial_probability=0.5, full_probability=0.0)
        assert policy.skip_probability + policy.partial_probability > 1

    def test_negative_probability_rejected(self):
        """Test negative probabilities fail fast."""
        with pytest.raises(ConfigurationError):
            RandomizationPolicy(skip_probability=-0.1)

    def test_cap_must_be_positive(self):
        """Test a coin cap below one fails fast."""
        with pytest.raises(ConfigurationError):
            RandomizationPolicy(max_coins_per_denomination=0)


class TestTransaction:
    """Test transaction derived values."""

    def test_change_amount(self):
        """Test change is paid minus owed."""
        transaction = Transaction(Decimal("2.12"), Decimal("3.00"))
        assert transaction.change_amount == Decimal("0.88")
        assert not transaction.is_underpaid

    def test_underpaid(self):
        """Test underpayment is detected."""
        assert Transaction(Decimal("5.00"), Decimal("3.00")).is_underpaid

    def test_owed_cents(self):
        """Test owed amount in integer cents."""
        assert Transaction(Decimal("3.00"), Decimal("5.00")).owed_cents == 300
        assert Transaction(Decimal("2.12"), Decimal("3.00")).owed_cents == 212


class TestChangeCombination:
    """Test change combination behaviour."""

    def test_add_is_additive(self):
        """Test adding to an existing denomination accumulates."""
        combination = ChangeCombination()
        combination.add("penny", 2)
        combination.add("penny", 3)
        assert combination.get("penny") == 5

    def test_zero_counts_not_stored(self):
        """Test zero counts leave the combination empty."""
        combination = ChangeCombination()
        combination.add("dime", 0)
        assert combination.is_empty()
        assert combination.get("dime") == 0

    def test_total(self):
        """Test weighted sum over the table."""
        combination = ChangeCombination({"quarter": 3, "dime": 1, "penny": 3})
        assert combination.total(DEFAULT_DENOMINATIONS) == Decimal("0.88")

    def test_structural_equality(self):
        """Test equality compares denominations and counts directly."""
        assert ChangeCombination({"dime": 1, "penny": 2}) == ChangeCombination({"penny": 2, "dime": 1})
        assert ChangeCombination({"dime": 1}) != ChangeCombination({"dime": 1, "penny": 1})
        assert ChangeCombination({"dime": 1}) != ChangeCombination({"dime": 2})
