"""Monte Carlo simulation over freshly drawn rate tables."""

import math
import sys
from collections import defaultdict
from dataclasses import dataclass, field
from random import Random

from rent_own_sim.params import HouseholdConfig
from rent_own_sim.rates import generate_rates
from rent_own_sim.simulation import Strategy, simulate


MC_PERCENTILES = (5, 25, 50, 75, 95)


@dataclass
class MonteCarloConfig:
    """Configuration for Monte Carlo simulation."""

    n_simulations: int = 1000
    seed: int | None = 42


@dataclass
class MonteCarloResult:
    """Results from Monte Carlo simulation for a single strategy."""

    strategy: Strategy
    n_simulations: int
    final_savings: list[float] = field(default_factory=list)
    depleted_count: int = 0
    percentiles: dict[int, float] = field(default_factory=dict)
    depletion_probability: float = 0.0
    mean: float = 0.0
    std: float = 0.0
    # age → {5: val, 25: val, 50: val, 75: val, 95: val}
    yearly_savings_percentiles: dict[int, dict[int, float]] = field(default_factory=dict)


def _percentile_from_sorted(sorted_vals: list[float], p: int) -> float:
    """Calculate percentile from a pre-sorted list."""
    n = len(sorted_vals)
    idx = max(0, min(int(p / 100 * n), n - 1))
    return sorted_vals[idx]


def _summarize(
    strategy: Strategy,
    n_simulations: int,
    final_savings: list[float],
    depleted_count: int,
    yearly: dict[int, list[float]],
) -> MonteCarloResult:
    final_savings.sort()
    n = len(final_savings)
    mean = sum(final_savings) / n if n > 0 else 0.0
    variance = sum((x - mean) ** 2 for x in final_savings) / n if n > 0 else 0.0
    return MonteCarloResult(
        strategy=strategy,
        n_simulations=n_simulations,
        final_savings=final_savings,
        depleted_count=depleted_count,
        percentiles={p: _percentile_from_sorted(final_savings, p) for p in MC_PERCENTILES} if n else {},
        depletion_probability=depleted_count / n_simulations if n_simulations else 0.0,
        mean=mean,
        std=math.sqrt(variance),
        yearly_savings_percentiles={
            age: {p: _percentile_from_sorted(sorted(vals), p) for p in MC_PERCENTILES}
            for age, vals in sorted(yearly.items())
        },
    )


def run_monte_carlo(
    owner_config: HouseholdConfig,
    renter_config: HouseholdConfig,
    config: MonteCarloConfig,
    quiet: bool = False,
) -> dict[Strategy, MonteCarloResult]:
    """Run N simulations, each on a freshly drawn rate table shared by both strategies.

    Final savings are read at the last tracked age, the value the
    equivalent-rent search targets. A run counts as depleted if savings
    were pinned to zero or the owner plan was infeasible.
    """
    rng = Random(config.seed)
    horizon = max(owner_config.death_age, renter_config.death_age)
    strategies = {Strategy.OWNER: owner_config, Strategy.RENTER: renter_config}

    finals: dict[Strategy, list[float]] = {s: [] for s in strategies}
    depleted: dict[Strategy, int] = {s: 0 for s in strategies}
    yearly: dict[Strategy, dict[int, list[float]]] = {s: defaultdict(list) for s in strategies}

    for i in range(config.n_simulations):
        rates = generate_rates(rng, horizon)
        for strategy, household in strategies.items():
            result = simulate(household, rates, strategy, quiet=True)
            finals[strategy].append(result.trajectory[-1])
            if result.depleted_age is not None or result.infeasible:
                depleted[strategy] += 1
            start = min(household.current_age, horizon)
            for age in range(start, min(household.death_age, horizon)):
                yearly[strategy][age].append(result.trajectory[age])

        if not quiet and (i + 1) % 100 == 0:
            print(f"\r  {i + 1}/{config.n_simulations}", end="", file=sys.stderr)

    if not quiet and config.n_simulations >= 100:
        print(file=sys.stderr)

    return {
        strategy: _summarize(strategy, config.n_simulations, finals[strategy], depleted[strategy], yearly[strategy])
        for strategy in strategies
    }
