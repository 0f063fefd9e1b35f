#!/usr/bin/env python3
"""Tests for the injectable random source helpers."""

import random

from cash_register.core.random_source import make_rng, parse_seed


class TestParseSeed:
    """Test optional seed parsing."""

    def test_missing_seed(self):
        assert parse_seed(None) == (None, None)
        assert parse_seed("  ") == (None, None)

    def test_valid_seed(self):
        assert parse_seed("42") == (42, None)
        assert parse_seed(7) == (7, None)

    def test_invalid_seed(self):
        seed, error = parse_seed("forty-two")
        assert seed is None
        assert error == "Seed must be a whole number."


class TestMakeRng:
    """Test generator construction."""

    def test_seeded_generators_repeat(self):
        """Test the same seed yields the same sequence."""
        first = make_rng(99)
        second = make_rng(99)
        assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]

    def test_unseeded_uses_system_random(self):
        """Test unseeded generators draw from OS entropy."""
        assert isinstance(make_rng(), random.SystemRandom)
        assert isinstance(make_rng(None), random.SystemRandom)
