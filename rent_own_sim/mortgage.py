"""Fixed-payment mortgage arithmetic."""


def monthly_rate(annual_rate: float) -> float:
    return annual_rate / 12


def term_months(term_years: int) -> int:
    return term_years * 12


def installment(principal: float, annual_rate: float, term_years: int) -> float:
    """Calculate the fixed monthly payment.

    A zero rate falls back to straight-line repayment. Raises ValueError for a
    zero-length term, where no installment is defined.
    """
    n = term_months(term_years)
    if n <= 0:
        raise ValueError(f"mortgage term must be at least one month (got {term_years} years)")
    r = monthly_rate(annual_rate)
    if r == 0:
        return principal / n
    return principal * (r * (1 + r) ** n) / ((1 + r) ** n - 1)


def monthly_interest(remaining_debt: float, annual_rate: float) -> float:
    return remaining_debt * monthly_rate(annual_rate)


def monthly_principal(fixed_installment: float, remaining_debt: float, annual_rate: float) -> float:
    """Principal portion of this month's payment.

    Uses the installment fixed at origination, not one recomputed from the
    current balance.
    """
    return fixed_installment - monthly_interest(remaining_debt, annual_rate)
