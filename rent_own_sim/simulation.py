"""Core household simulation engine."""

import sys
from dataclasses import dataclass, field
from enum import Enum

from rent_own_sim import mortgage
from rent_own_sim.params import PROPERTY_TAX_RATE, STD_WITHDRAWAL_RATE, HouseholdConfig
from rent_own_sim.rates import RateTable

MONTHS_PER_YEAR = 12
STD_MONTHLY_WITHDRAWAL_RATE = STD_WITHDRAWAL_RATE / MONTHS_PER_YEAR
MONTHLY_PROPERTY_TAX_RATE = PROPERTY_TAX_RATE / MONTHS_PER_YEAR


class Strategy(str, Enum):
    OWNER = "owner"
    RENTER = "renter"


@dataclass
class HouseholdState:
    """Mutable per-run household state. One instance per strategy per run."""

    current_age: int
    retirement_age: int
    total_savings: float
    monthly_income: float
    monthly_expenses: float
    monthly_rent: float
    home_value: float
    mortgage_debt: float
    mortgage_rate: float
    home_expense_rate: float
    min_baseline_retirement_income: float
    max_baseline_retirement_income: float
    active_retirement: bool = False
    mortgage_free_age: int | None = None

    @classmethod
    def from_config(cls, config: HouseholdConfig) -> "HouseholdState":
        return cls(
            current_age=config.current_age,
            retirement_age=config.retirement_age,
            total_savings=config.total_savings,
            monthly_income=config.monthly_income,
            monthly_expenses=config.monthly_expenses,
            monthly_rent=config.monthly_rent,
            home_value=config.home_value,
            mortgage_debt=config.mortgage_debt,
            mortgage_rate=config.mortgage_rate,
            home_expense_rate=config.home_expense_rate,
            min_baseline_retirement_income=config.min_baseline_retirement_income,
            max_baseline_retirement_income=config.max_baseline_retirement_income,
        )

    @property
    def home_equity(self) -> float:
        return self.home_value - self.mortgage_debt

    def liquid_assets(self) -> float:
        """Savings excluding net home equity, floored at zero."""
        return max(0.0, self.total_savings - self.home_equity)


@dataclass
class SimulationResult:
    strategy: Strategy
    trajectory: list[float] = field(default_factory=list)
    mortgage_free_age: int | None = None
    depleted_age: int | None = None
    installment: float | None = None
    infeasible: bool = False


def withdrawal_amount(liquid_assets: float, min_baseline: float, max_baseline: float) -> float:
    """Monthly retirement draw: 4%/year of liquid assets bounded by [min, max] baseline.

    The minimum wins over the standard rate, and the maximum caps it.
    """
    assert min_baseline <= max_baseline, (
        f"min baseline retirement income {min_baseline} exceeds max {max_baseline}"
    )
    if liquid_assets <= 0:
        return 0.0
    std = liquid_assets * STD_MONTHLY_WITHDRAWAL_RATE
    if min_baseline <= std <= max_baseline:
        return std
    if min_baseline > std:
        return min_baseline
    return max_baseline


def monthly_withdrawal(state: HouseholdState) -> float:
    """Retirement draw as a (negative) cash-flow contribution to income."""
    return -withdrawal_amount(
        state.liquid_assets(),
        state.min_baseline_retirement_income,
        state.max_baseline_retirement_income,
    )


def interest_earnings(state: HouseholdState, rates: RateTable) -> float:
    return state.liquid_assets() * (rates.interest[state.current_age] / MONTHS_PER_YEAR)


def _income(state: HouseholdState) -> float:
    if state.active_retirement:
        state.monthly_expenses = 0.0
        return monthly_withdrawal(state)
    return state.monthly_income


def _housing_expenses(state: HouseholdState, installment: float | None) -> float:
    """Property tax, upkeep and mortgage interest. Pays down principal as a side effect."""
    interest = mortgage.monthly_interest(state.mortgage_debt, state.mortgage_rate)
    expenses = (
        state.home_value * MONTHLY_PROPERTY_TAX_RATE
        + state.home_value * (state.home_expense_rate / MONTHS_PER_YEAR)
        + interest
    )
    if state.mortgage_debt > 0:
        principal = mortgage.monthly_principal(installment or 0.0, state.mortgage_debt, state.mortgage_rate)
        state.mortgage_debt = max(0.0, state.mortgage_debt - principal)
    elif state.mortgage_free_age is None:
        state.mortgage_free_age = state.current_age
    return expenses


def apply_monthly_changes(state: HouseholdState, rates: RateTable, installment: float | None) -> float:
    """Run one month of cash flow and inflation. Returns the month-end savings before interest."""
    monthly_inflation = rates.inflation[state.current_age] / MONTHS_PER_YEAR
    income = _income(state)
    expenses = state.monthly_expenses + _housing_expenses(state, installment) + state.monthly_rent
    month_end = state.total_savings + income - expenses

    factor = 1 + monthly_inflation
    state.monthly_income *= factor
    state.monthly_expenses *= factor
    state.monthly_rent *= factor
    state.home_expense_rate *= factor
    state.min_baseline_retirement_income *= factor
    state.max_baseline_retirement_income *= factor
    return month_end


def apply_annual_changes(
    state: HouseholdState,
    rates: RateTable,
    trajectory: list[float],
    installment: float | None = None,
) -> bool:
    """Advance one simulated year (12 months) and record end-of-year savings.

    Returns True if savings were depleted during the year.
    """
    depleted = False
    for _ in range(MONTHS_PER_YEAR):
        # Interest accrues on the balance carried from the prior month
        interest = interest_earnings(state, rates)
        month_end = apply_monthly_changes(state, rates, installment)
        if month_end > state.home_equity:
            state.total_savings = month_end + interest
        else:
            # Nothing left to spend beyond the home itself
            state.total_savings = 0.0
            depleted = True
            break
    trajectory[state.current_age] = state.total_savings
    return depleted


def _owner_installment(config: HouseholdConfig) -> float | None:
    if not config.holds_home:
        return None
    return mortgage.installment(config.mortgage_debt, config.mortgage_rate, config.mortgage_term)


def simulate(
    config: HouseholdConfig,
    rates: RateTable,
    strategy: Strategy = Strategy.OWNER,
    quiet: bool = False,
) -> SimulationResult:
    """Simulate one housing strategy from config.current_age to the death age.

    The owner pays no rent; the renter holds no home. Returns a fresh result
    on every call, so repeated calls with the same inputs are identical.
    """
    horizon = rates.horizon
    trajectory = [0.0] * horizon

    if strategy is Strategy.OWNER:
        config = config.as_owner()
        try:
            installment = _owner_installment(config)
        except ValueError as e:
            if not quiet:
                print(f"Owner plan infeasible, reporting zero savings: {e}", file=sys.stderr)
            return SimulationResult(strategy=strategy, trajectory=trajectory, infeasible=True)
    else:
        config = config.as_renter()
        installment = None

    state = HouseholdState.from_config(config)
    if strategy is Strategy.OWNER and state.mortgage_debt == 0:
        state.mortgage_free_age = state.current_age

    if state.current_age < horizon:
        trajectory[state.current_age] = state.total_savings

    end_age = min(config.death_age, horizon)
    depleted_age = None
    state.current_age += 1
    while state.current_age < end_age and state.total_savings > 0:
        state.active_retirement = state.current_age >= state.retirement_age
        if apply_annual_changes(state, rates, trajectory, installment):
            depleted_age = state.current_age
        state.current_age += 1

    return SimulationResult(
        strategy=strategy,
        trajectory=trajectory,
        mortgage_free_age=state.mortgage_free_age if strategy is Strategy.OWNER else None,
        depleted_age=depleted_age,
        installment=installment,
    )


def calculate_savings(
    config: HouseholdConfig,
    rates: RateTable,
    strategy: Strategy = Strategy.OWNER,
) -> list[float]:
    """Age-indexed end-of-year savings for one strategy."""
    return simulate(config, rates, strategy).trajectory
