"""Monte Carlo interest and inflation rate tables."""

import math
from dataclasses import dataclass
from random import Random

from rent_own_sim.params import DEATH

INFLATION_RANGE = (-0.005, 0.04)
INFLATION_SKEW_RANGE = (0.0, 0.01)

# Risk glide path: (last age of bracket, low, high) before the inflation shift.
# The final bracket is open-ended.
INTEREST_BRACKETS: tuple[tuple[int, float, float], ...] = (
    (35, -0.075, 0.20),
    (49, -0.05, 0.175),
    (64, -0.035, 0.15),
    (80, -0.02, 0.125),
    (math.inf, -0.005, 0.10),
)


@dataclass(frozen=True)
class RateTable:
    """Annual interest and inflation rates indexed by age."""

    interest: tuple[float, ...]
    inflation: tuple[float, ...]

    def __post_init__(self):
        if len(self.interest) != len(self.inflation):
            raise ValueError(
                f"interest has {len(self.interest)} entries but inflation has {len(self.inflation)}"
            )

    @property
    def horizon(self) -> int:
        return len(self.interest)

    @classmethod
    def flat(cls, interest: float = 0.0, inflation: float = 0.0, horizon: int = DEATH) -> "RateTable":
        """Constant rates at every age."""
        return cls(interest=(interest,) * horizon, inflation=(inflation,) * horizon)


@dataclass(frozen=True)
class BracketSummary:
    start_age: int
    end_age: int  # inclusive
    mean: float
    std: float


def interest_bounds(age: int, inflation: float) -> tuple[float, float]:
    """Return the (low, high) interest draw range for an age and its inflation draw."""
    shift = inflation / 2
    for last_age, low, high in INTEREST_BRACKETS:
        if age <= last_age:
            return low + shift, high + shift
    raise ValueError(f"age {age} is not covered by any bracket")  # pragma: no cover


def generate_rates(rng: Random, horizon: int = DEATH) -> RateTable:
    """Draw a fresh rate table.

    Inflation is the sum of two uniform draws (slight right skew). Interest
    is drawn uniformly within the age bracket's range, shifted by half of
    the same age's inflation so returns co-move with inflation.
    All inflation draws are consumed before any interest draw.
    """
    inflation = [
        rng.uniform(*INFLATION_RANGE) + rng.uniform(*INFLATION_SKEW_RANGE)
        for _ in range(horizon)
    ]
    interest = [rng.uniform(*interest_bounds(age, infl)) for age, infl in enumerate(inflation)]
    return RateTable(interest=tuple(interest), inflation=tuple(inflation))


def bracket_ranges(horizon: int = DEATH) -> list[tuple[int, int]]:
    """Inclusive (start, end) age ranges of each bracket, clipped to the horizon."""
    ranges = []
    start = 0
    for last_age, _, _ in INTEREST_BRACKETS:
        end = min(last_age, horizon - 1)
        if start > end:
            break
        ranges.append((start, int(end)))
        start = int(end) + 1
    return ranges


def summarize_rates(table: RateTable) -> list[BracketSummary]:
    """Mean and population std of the interest draws in each age bracket."""
    summaries = []
    for start, end in bracket_ranges(table.horizon):
        vals = table.interest[start:end + 1]
        mean = sum(vals) / len(vals)
        variance = sum((x - mean) ** 2 for x in vals) / len(vals)
        summaries.append(BracketSummary(start, end, mean, math.sqrt(variance)))
    return summaries
