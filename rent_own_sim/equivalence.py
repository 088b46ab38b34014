"""Equivalent-rent calibration."""

from dataclasses import dataclass, field

from rent_own_sim.params import HouseholdConfig
from rent_own_sim.rates import RateTable
from rent_own_sim.simulation import SimulationResult, Strategy, simulate

MAX_ITERATIONS = 1000
TOLERANCE = 100.0
RENT_FLOOR = 100.0
RENT_STEP = 0.1

STOP_TOLERANCE = "tolerance"
STOP_RENT_FLOOR = "rent_floor"
STOP_MAX_ITERATIONS = "max_iterations"


@dataclass
class EquivalentRentResult:
    """Calibrated rent and the renter trajectory it produced.

    Only stop_reason == "tolerance" is a match; the other stops are best effort.
    """

    rent: float
    trajectory: list[float] = field(default_factory=list)
    iterations: int = 0
    stop_reason: str = STOP_MAX_ITERATIONS
    simulation: SimulationResult | None = None

    @property
    def converged(self) -> bool:
        return self.stop_reason == STOP_TOLERANCE


def reference_age(target: list[float]) -> int:
    """First age at which the target trajectory is non-negative (0 if none)."""
    return next((age for age, value in enumerate(target) if value >= 0), 0)


def find_equivalent_rent(
    target: list[float],
    renter_config: HouseholdConfig,
    rates: RateTable,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
    rent_floor: float = RENT_FLOOR,
    step: float = RENT_STEP,
) -> EquivalentRentResult:
    """Search for the rent at which renting matches the target's final savings.

    Fixed-step hill-climb starting from renter_config.monthly_rent: each
    iteration re-simulates the renter and moves the rent by one step, up when
    the renter is under-saving relative to the target and down when
    over-saving. Stops on tolerance, when the rent drops under the floor, or
    after max_iterations simulations.
    """
    target_value = target[-1] if target else 0.0
    ref_age = reference_age(target)

    rent = renter_config.monthly_rent
    trajectory = [0.0] * rates.horizon
    result = None
    stop_reason = STOP_MAX_ITERATIONS
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        config = renter_config.as_renter(monthly_rent=rent)
        result = simulate(config, rates, Strategy.RENTER)
        trajectory = result.trajectory
        renter_value = trajectory[ref_age]

        if abs(target_value - renter_value) < tolerance:
            stop_reason = STOP_TOLERANCE
            break
        if rent < rent_floor:
            stop_reason = STOP_RENT_FLOOR
            break
        if renter_value < target_value:
            rent += step
        else:
            rent -= step

    return EquivalentRentResult(
        rent=rent,
        trajectory=trajectory,
        iterations=iterations,
        stop_reason=stop_reason,
        simulation=result,
    )
