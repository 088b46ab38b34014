"""Own-vs-rent household savings simulation package."""

from rent_own_sim.params import (
    DEATH,
    PROPERTY_TAX_RATE,
    STD_WITHDRAWAL_RATE,
    HouseholdConfig,
    validate_config,
)
from rent_own_sim.rates import (
    RateTable,
    BracketSummary,
    generate_rates,
    interest_bounds,
    summarize_rates,
)
from rent_own_sim.mortgage import (
    installment,
    monthly_interest,
    monthly_principal,
    monthly_rate,
    term_months,
)
from rent_own_sim.simulation import (
    HouseholdState,
    SimulationResult,
    Strategy,
    apply_annual_changes,
    apply_monthly_changes,
    calculate_savings,
    monthly_withdrawal,
    simulate,
    withdrawal_amount,
)
from rent_own_sim.equivalence import EquivalentRentResult, find_equivalent_rent
from rent_own_sim.monte_carlo import MonteCarloConfig, MonteCarloResult, run_monte_carlo

__all__ = [
    "DEATH",
    "PROPERTY_TAX_RATE",
    "STD_WITHDRAWAL_RATE",
    "HouseholdConfig",
    "validate_config",
    "RateTable",
    "BracketSummary",
    "generate_rates",
    "interest_bounds",
    "summarize_rates",
    "installment",
    "monthly_interest",
    "monthly_principal",
    "monthly_rate",
    "term_months",
    "HouseholdState",
    "SimulationResult",
    "Strategy",
    "apply_annual_changes",
    "apply_monthly_changes",
    "calculate_savings",
    "monthly_withdrawal",
    "simulate",
    "withdrawal_amount",
    "EquivalentRentResult",
    "find_equivalent_rent",
    "MonteCarloConfig",
    "MonteCarloResult",
    "run_monte_carlo",
]
