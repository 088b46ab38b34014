"""Tests for rate table generation."""

from random import Random

import pytest

from rent_own_sim.params import DEATH
from rent_own_sim.rates import (
    RateTable,
    bracket_ranges,
    generate_rates,
    interest_bounds,
    summarize_rates,
)

EPS = 1e-12


class TestGenerateRates:
    def test_lengths_match_horizon(self):
        table = generate_rates(Random(1))
        assert table.horizon == DEATH
        assert len(table.interest) == DEATH
        assert len(table.inflation) == DEATH

    def test_custom_horizon(self):
        table = generate_rates(Random(1), horizon=40)
        assert table.horizon == 40

    def test_seeded_is_reproducible(self):
        assert generate_rates(Random(7)) == generate_rates(Random(7))

    def test_different_seeds_differ(self):
        assert generate_rates(Random(7)) != generate_rates(Random(8))

    def test_inflation_range(self):
        for seed in range(20):
            table = generate_rates(Random(seed))
            assert all(-0.005 - EPS <= x <= 0.05 + EPS for x in table.inflation)

    def test_interest_within_bracket_bounds(self):
        """Every interest draw falls inside its age bracket, shifted by its own inflation."""
        for seed in range(50):
            table = generate_rates(Random(seed))
            for age, (rate, infl) in enumerate(zip(table.interest, table.inflation)):
                low, high = interest_bounds(age, infl)
                assert low - EPS <= rate <= high + EPS, (seed, age)

    def test_inflation_drawn_before_interest(self):
        rng = Random(3)
        inflation = [rng.uniform(-0.005, 0.04) + rng.uniform(0.0, 0.01) for _ in range(5)]
        first_interest = rng.uniform(*interest_bounds(0, inflation[0]))
        table = generate_rates(Random(3), horizon=5)
        assert list(table.inflation) == inflation
        assert table.interest[0] == first_interest

    def test_glide_path_narrows(self):
        """Average young-age returns exceed average old-age returns over many draws."""
        rng = Random(11)
        young, old = [], []
        for _ in range(200):
            table = generate_rates(rng)
            young.extend(table.interest[0:36])
            old.extend(table.interest[81:])
        assert sum(young) / len(young) > sum(old) / len(old)
        assert max(young) - min(young) > max(old) - min(old)


class TestInterestBounds:
    @pytest.mark.parametrize("age,low,high", [
        (0, -0.075, 0.20),
        (35, -0.075, 0.20),
        (36, -0.05, 0.175),
        (49, -0.05, 0.175),
        (50, -0.035, 0.15),
        (64, -0.035, 0.15),
        (65, -0.02, 0.125),
        (80, -0.02, 0.125),
        (81, -0.005, 0.10),
        (99, -0.005, 0.10),
    ])
    def test_bracket_boundaries(self, age, low, high):
        lo, hi = interest_bounds(age, 0.02)
        assert lo == pytest.approx(low + 0.01)
        assert hi == pytest.approx(high + 0.01)

    def test_negative_inflation_shifts_down(self):
        lo, hi = interest_bounds(40, -0.004)
        assert lo == pytest.approx(-0.052)
        assert hi == pytest.approx(0.173)


class TestRateTable:
    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="entries"):
            RateTable(interest=(0.0, 0.0), inflation=(0.0,))

    def test_flat(self):
        table = RateTable.flat(0.05, 0.02, horizon=10)
        assert table.interest == (0.05,) * 10
        assert table.inflation == (0.02,) * 10


class TestSummarizeRates:
    def test_brackets_cover_horizon(self):
        assert bracket_ranges() == [(0, 35), (36, 49), (50, 64), (65, 80), (81, 99)]

    def test_brackets_clipped(self):
        assert bracket_ranges(40) == [(0, 35), (36, 39)]

    def test_flat_table_has_zero_std(self):
        summaries = summarize_rates(RateTable.flat(0.06, 0.02))
        assert len(summaries) == 5
        for s in summaries:
            assert s.mean == pytest.approx(0.06)
            assert s.std == pytest.approx(0.0)

    def test_mean_and_std(self):
        interest = tuple(0.0 if age % 2 else 0.1 for age in range(DEATH))
        table = RateTable(interest=interest, inflation=(0.0,) * DEATH)
        first = summarize_rates(table)[0]  # ages 0-35: 18 at 0.1, 18 at 0.0
        assert first.mean == pytest.approx(0.05)
        assert first.std == pytest.approx(0.05)
