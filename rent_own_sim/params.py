"""Household configuration and policy constants."""

import dataclasses
from dataclasses import dataclass

# Simulation horizon: ages 0..DEATH-1 are tracked
DEATH = 100

PROPERTY_TAX_RATE = 0.01           # flat annual rate on home value
STD_WITHDRAWAL_RATE = 0.04         # 4%/year retirement rule


@dataclass(frozen=True)
class HouseholdConfig:
    """Per-run household inputs. Money is nominal, ages are whole years."""

    current_age: int = 30
    retirement_age: int = 65
    death_age: int = DEATH
    total_savings: float = 200000.0
    monthly_income: float = 6000.0
    monthly_expenses: float = 5000.0   # non-housing
    monthly_rent: float = 0.0

    # Ownership
    home_value: float = 0.0
    mortgage_debt: float = 0.0
    mortgage_rate: float = 0.0         # annual fraction
    mortgage_term: int = 0             # years
    home_expense_rate: float = 0.0     # annual fraction of home value

    # Retirement withdrawals, today's dollars
    min_baseline_retirement_income: float = 2000.0
    max_baseline_retirement_income: float = 3000.0

    @property
    def home_equity(self) -> float:
        return self.home_value - self.mortgage_debt

    @property
    def holds_home(self) -> bool:
        return self.home_value > 0 or self.mortgage_debt > 0

    def as_owner(self) -> "HouseholdConfig":
        """Owning strategy inputs: the household pays no rent."""
        return dataclasses.replace(self, monthly_rent=0.0)

    def as_renter(self, monthly_rent: float | None = None) -> "HouseholdConfig":
        """Renting strategy inputs: every housing field is zeroed."""
        return dataclasses.replace(
            self,
            monthly_rent=self.monthly_rent if monthly_rent is None else monthly_rent,
            home_value=0.0,
            mortgage_debt=0.0,
            mortgage_rate=0.0,
            mortgage_term=0,
            home_expense_rate=0.0,
        )


def validate_config(config: HouseholdConfig, horizon: int = DEATH) -> list[str]:
    """Validate a household configuration. Returns list of error messages."""
    errors = []

    for name in ("current_age", "retirement_age", "death_age"):
        age = getattr(config, name)
        if age < 0 or age > horizon:
            errors.append(f"{name}={age} is outside 0-{horizon}")
    if config.death_age <= config.current_age:
        errors.append(
            f"death_age={config.death_age} must be greater than current_age={config.current_age}"
        )

    money_fields = (
        "total_savings",
        "monthly_income",
        "monthly_expenses",
        "monthly_rent",
        "home_value",
        "mortgage_debt",
        "min_baseline_retirement_income",
        "max_baseline_retirement_income",
    )
    for name in money_fields:
        if getattr(config, name) < 0:
            errors.append(f"{name} must be non-negative (got {getattr(config, name)})")

    for name in ("mortgage_rate", "home_expense_rate"):
        rate = getattr(config, name)
        if not 0.0 <= rate <= 1.0:
            errors.append(f"{name}={rate} is outside 0.0-1.0")

    if config.mortgage_term < 0:
        errors.append(f"mortgage_term must be non-negative (got {config.mortgage_term})")
    elif config.mortgage_debt > 0 and config.mortgage_term == 0:
        errors.append("a mortgage balance needs a mortgage term of at least one year")

    if config.min_baseline_retirement_income > config.max_baseline_retirement_income:
        errors.append(
            f"min retirement income {config.min_baseline_retirement_income:,.0f}"
            f" > max retirement income {config.max_baseline_retirement_income:,.0f}"
        )

    return errors
