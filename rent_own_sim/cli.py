"""CLI entry point for a single own-vs-rent comparison."""

import argparse
import sys
from pathlib import Path
from random import Random

from rent_own_sim.config import build_household, parse_args
from rent_own_sim.equivalence import find_equivalent_rent
from rent_own_sim.params import HouseholdConfig, validate_config
from rent_own_sim.rates import RateTable, generate_rates, summarize_rates
from rent_own_sim.simulation import SimulationResult, Strategy, simulate


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--equivalent-rent", action="store_true",
        help="search for the rent at which renting ends with the owner's savings",
    )
    parser.add_argument(
        "--every", type=int, default=5,
        help="print one table row every N years (default: 5)",
    )
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="write a trajectory PNG into this directory",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output file name suffix (e.g. 30 → trajectory-30.png)",
    )


def _print_header(household: HouseholdConfig, seed: int | None):
    years = household.death_age - household.current_age
    print("=" * 72)
    print(f"Own vs rent savings projection (age {household.current_age}-{household.death_age}, {years} years)")
    print(
        f"  Savings: ${household.total_savings:,.0f} / income: ${household.monthly_income:,.0f}/mo"
        f" / expenses: ${household.monthly_expenses:,.0f}/mo / retire at {household.retirement_age}"
    )
    print(
        f"  Own: home ${household.home_value:,.0f}, mortgage ${household.mortgage_debt:,.0f}"
        f" at {household.mortgage_rate:.2%} over {household.mortgage_term} years"
    )
    print(f"  Rent: ${household.monthly_rent:,.0f}/mo")
    print(
        f"  Retirement income: ${household.min_baseline_retirement_income:,.0f}"
        f"-${household.max_baseline_retirement_income:,.0f}/mo (today's dollars)"
    )
    print(f"  Rate seed: {'random' if seed is None else seed}")
    print("=" * 72)


def _print_rates(rates: RateTable):
    print("\n[Simulated returns by age bracket]")
    for s in summarize_rates(rates):
        print(f"  {s.start_age:>3}-{s.end_age:<3}  mean {s.mean:>6.1%}  std {s.std:>5.1%}")


def _print_table(owner: SimulationResult, renter: SimulationResult, start_age: int, end_age: int, every: int):
    print(f"\n{'Age':<6}{'Own':>18}{'Rent':>18}{'Own - Rent':>18}")
    print("-" * 60)
    ages = list(range(start_age, end_age, max(1, every)))
    if ages[-1] != end_age - 1:
        ages.append(end_age - 1)
    for age in ages:
        o = owner.trajectory[age]
        r = renter.trajectory[age]
        print(f"{age:<6}{o:>18,.0f}{r:>18,.0f}{o - r:>18,.0f}")
    print("-" * 60)


def _print_summary(owner: SimulationResult, renter: SimulationResult):
    print()
    if owner.infeasible:
        print("  Own: plan infeasible (mortgage term must be at least one year)")
    elif owner.installment is not None:
        print(f"  Own: mortgage installment ${owner.installment:,.2f}/mo")
    if owner.mortgage_free_age is not None:
        print(f"  Own: mortgage-free from age {owner.mortgage_free_age}")
    for label, r in (("Own", owner), ("Rent", renter)):
        if r.depleted_age is not None:
            print(f"  {label}: savings depleted at age {r.depleted_age}")


def main(argv: list[str] | None = None):
    """Execute one own-vs-rent simulation"""
    r, args = parse_args("Own vs rent savings simulation", argv, _add_args)
    household = build_household(r)

    errors = validate_config(household)
    if errors:
        for e in errors:
            print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1)

    seed = args.seed
    rates = generate_rates(Random(seed), household.death_age)

    _print_header(household, seed)

    owner = simulate(household, rates, Strategy.OWNER)
    renter = simulate(household, rates, Strategy.RENTER)

    if args.equivalent_rent:
        eq = find_equivalent_rent(owner.trajectory, household.as_renter(), rates)
        if eq.simulation is not None:
            renter = eq.simulation
        status = "match" if eq.converged else f"no exact match, stopped on {eq.stop_reason}"
        print(f"\n  Home: ${household.home_value:,.0f} ≈ Rent: ${int(eq.rent):,}/mo"
              f" ({status} after {eq.iterations} iterations)")

    _print_rates(rates)
    _print_table(owner, renter, household.current_age, household.death_age, args.every)
    _print_summary(owner, renter)

    if args.chart is not None:
        from rent_own_sim.charts import plot_trajectories

        path = plot_trajectories(
            [owner, renter], household.current_age, args.chart, name=args.name, rates=rates,
        )
        print(f"\nChart written to {path}")


if __name__ == "__main__":
    main()
