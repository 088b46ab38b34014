"""CLI entry point for Monte Carlo simulation."""

import argparse
import sys
from pathlib import Path

from rent_own_sim.config import build_household, parse_args
from rent_own_sim.monte_carlo import MC_PERCENTILES, MonteCarloConfig, MonteCarloResult, run_monte_carlo
from rent_own_sim.params import validate_config
from rent_own_sim.simulation import Strategy

_LABELS = {Strategy.OWNER: "Own", Strategy.RENTER: "Rent"}


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--mc-runs", type=int, default=1000,
        help="number of simulations (default: 1000)",
    )
    parser.add_argument(
        "--every", type=int, default=10,
        help="print per-age medians every N years (default: 10)",
    )
    parser.add_argument(
        "--chart", type=Path, default=None,
        help="write a fan chart PNG into this directory",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output file name suffix (e.g. 30 → mc_fan-30.png)",
    )


def _print_results(results: dict[Strategy, MonteCarloResult], n: int):
    print()
    print(f"[Monte Carlo final savings (N={n:,})]")
    print("─" * 86)
    print(f"{'Strategy':<10}" + "".join(f"{'P' + str(p):>12}" for p in MC_PERCENTILES) + f"{'Depleted':>12}")
    print("─" * 86)
    for strategy, r in results.items():
        row = "".join(f"{r.percentiles.get(p, 0.0):>12,.0f}" for p in MC_PERCENTILES)
        print(f"{_LABELS[strategy]:<10}{row}{r.depletion_probability:>11.1%}")
    print("─" * 86)

    print(f"\n{'Strategy':<10} {'Mean':>14} {'Std':>14}")
    print("─" * 40)
    for strategy, r in results.items():
        print(f"{_LABELS[strategy]:<10} {r.mean:>14,.0f} {r.std:>14,.0f}")
    print("─" * 40)


def _print_medians(results: dict[Strategy, MonteCarloResult], every: int):
    owner = results[Strategy.OWNER].yearly_savings_percentiles
    renter = results[Strategy.RENTER].yearly_savings_percentiles
    ages = sorted(set(owner) | set(renter))
    if not ages:
        return
    print(f"\n{'Age':<6}{'Own P50':>16}{'Rent P50':>16}")
    print("─" * 38)
    for age in ages[::max(1, every)]:
        o = owner.get(age, {}).get(50, 0.0)
        r = renter.get(age, {}).get(50, 0.0)
        print(f"{age:<6}{o:>16,.0f}{r:>16,.0f}")
    print("─" * 38)


def main(argv: list[str] | None = None):
    r, args = parse_args("Monte Carlo own vs rent savings simulation", argv, _add_args)
    household = build_household(r)

    errors = validate_config(household)
    if errors:
        for e in errors:
            print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1)

    mc_config = MonteCarloConfig(n_simulations=args.mc_runs, seed=args.seed)

    print("=" * 72)
    print(f"Monte Carlo own vs rent (age {household.current_age}-{household.death_age})")
    print(f"  N={args.mc_runs:,} / seed={args.seed}")
    print("=" * 72)

    results = run_monte_carlo(household.as_owner(), household.as_renter(), mc_config)

    _print_results(results, args.mc_runs)
    _print_medians(results, args.every)

    if args.chart is not None:
        from rent_own_sim.charts import plot_mc_fan

        path = plot_mc_fan(results, args.chart, name=args.name)
        print(f"\nChart written to {path}")


if __name__ == "__main__":
    main()
