"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path

from rent_own_sim.params import DEATH, HouseholdConfig

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "age": 30,
    "retirement_age": 65,
    "death_age": DEATH,
    "savings": 200000.0,
    "monthly_income": 6000.0,
    "monthly_expenses": 5000.0,
    "rent": 2000.0,
    "home_value": 500000.0,
    "mortgage": 400000.0,
    "mortgage_rate": 0.05,
    "mortgage_term": 30,
    "home_expense_rate": 0.0,
    "min_retirement_income": 2000.0,
    "max_retirement_income": 3000.0,
}

# Accepted TOML spellings → canonical key
_ALIASES = {
    "networth": "savings",
    "net_worth": "savings",
    "current_age": "age",
    "mortgage_debt": "mortgage",
    "home_expenses": "home_expense_rate",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # [household] table is optional; top-level keys also work
    if isinstance(raw.get("household"), dict):
        raw = {**raw, **raw.pop("household")}
    for alias, key in _ALIASES.items():
        if alias in raw:
            raw.setdefault(key, raw.pop(alias))
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared household flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file path (default: config.toml)")
    parser.add_argument("--age", type=int, default=None, help=f"current age (default: {d['age']})")
    parser.add_argument("--retirement-age", type=int, default=None, help=f"retirement age (default: {d['retirement_age']})")
    parser.add_argument("--death-age", type=int, default=None, help=f"simulation end age (default: {d['death_age']})")
    parser.add_argument("--savings", type=float, default=None, help=f"current net worth (default: {d['savings']:,.0f})")
    parser.add_argument("--monthly-income", type=float, default=None, help=f"monthly take-home income (default: {d['monthly_income']:,.0f})")
    parser.add_argument("--monthly-expenses", type=float, default=None, help=f"monthly non-housing expenses (default: {d['monthly_expenses']:,.0f})")
    parser.add_argument("--rent", type=float, default=None, help=f"monthly rent for the renting strategy (default: {d['rent']:,.0f})")
    parser.add_argument("--home-value", type=float, default=None, help=f"home value for the owning strategy (default: {d['home_value']:,.0f})")
    parser.add_argument("--mortgage", type=float, default=None, help=f"mortgage principal (default: {d['mortgage']:,.0f})")
    parser.add_argument("--mortgage-rate", type=float, default=None, help=f"annual mortgage rate as a fraction (default: {d['mortgage_rate']})")
    parser.add_argument("--mortgage-term", type=int, default=None, help=f"mortgage term in years (default: {d['mortgage_term']})")
    parser.add_argument("--home-expense-rate", type=float, default=None, help=f"annual upkeep as a fraction of home value (default: {d['home_expense_rate']})")
    parser.add_argument("--min-retirement-income", type=float, default=None, help=f"minimum monthly retirement income, today's dollars (default: {d['min_retirement_income']:,.0f})")
    parser.add_argument("--max-retirement-income", type=float, default=None, help=f"maximum monthly retirement income, today's dollars (default: {d['max_retirement_income']:,.0f})")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the rate tables (default: unseeded)")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_household(r: dict) -> HouseholdConfig:
    """Build the shared HouseholdConfig from a resolved config dict.

    Derive per-strategy inputs with as_owner() / as_renter().
    """
    return HouseholdConfig(
        current_age=int(r["age"]),
        retirement_age=int(r["retirement_age"]),
        death_age=int(r["death_age"]),
        total_savings=float(r["savings"]),
        monthly_income=float(r["monthly_income"]),
        monthly_expenses=float(r["monthly_expenses"]),
        monthly_rent=float(r["rent"]),
        home_value=float(r["home_value"]),
        mortgage_debt=float(r["mortgage"]),
        mortgage_rate=float(r["mortgage_rate"]),
        mortgage_term=int(r["mortgage_term"]),
        home_expense_rate=float(r["home_expense_rate"]),
        min_baseline_retirement_income=float(r["min_retirement_income"]),
        max_baseline_retirement_income=float(r["max_retirement_income"]),
    )


def parse_args(
    description: str,
    argv: list[str] | None = None,
    add_args_fn=None,
) -> tuple[dict, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, namespace). The namespace carries any extra
    CLI args added via add_args_fn.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    return resolve(args, config), args
