"""Tests for mortgage arithmetic."""

import pytest

from rent_own_sim.mortgage import (
    installment,
    monthly_interest,
    monthly_principal,
    monthly_rate,
    term_months,
)


class TestRatesAndTerms:
    def test_monthly_rate(self):
        assert monthly_rate(0.06) == pytest.approx(0.005)

    def test_term_months(self):
        assert term_months(30) == 360


class TestInstallment:
    @pytest.mark.parametrize("principal,years", [(120000, 10), (400000, 30), (1, 1), (0, 5)])
    def test_zero_rate_is_straight_line(self, principal, years):
        assert installment(principal, 0.0, years) == principal / (years * 12)

    def test_standard_amortization(self):
        """$400k over 30 years at 5% is the textbook $2,147.29."""
        assert installment(400000, 0.05, 30) == pytest.approx(2147.29, abs=0.01)

    def test_zero_principal(self):
        assert installment(0, 0.05, 30) == 0.0

    def test_zero_term_raises(self):
        with pytest.raises(ValueError, match="at least one month"):
            installment(10000, 0.0, 0)

    def test_fixed_installment_retires_debt(self):
        """Paying the origination installment for the full term clears the balance."""
        debt = 250000.0
        payment = installment(debt, 0.04, 25)
        for _ in range(term_months(25)):
            debt -= monthly_principal(payment, debt, 0.04)
        assert debt == pytest.approx(0.0, abs=0.01)


class TestInterestSplit:
    def test_monthly_interest(self):
        assert monthly_interest(120000, 0.06) == pytest.approx(600.0)

    def test_principal_is_installment_minus_interest(self):
        payment = installment(400000, 0.05, 30)
        interest = monthly_interest(400000, 0.05)
        assert monthly_principal(payment, 400000, 0.05) == pytest.approx(payment - interest)

    def test_principal_grows_as_balance_falls(self):
        payment = installment(400000, 0.05, 30)
        early = monthly_principal(payment, 400000, 0.05)
        late = monthly_principal(payment, 100000, 0.05)
        assert late > early
