"""Chart generation for rent-vs-own simulation results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from rent_own_sim.monte_carlo import MonteCarloResult
from rent_own_sim.rates import RateTable, summarize_rates
from rent_own_sim.simulation import SimulationResult, Strategy

STRATEGY_COLORS = {
    Strategy.OWNER: "#1f77b4",   # blue
    Strategy.RENTER: "#ff7f0e",  # orange
}

STRATEGY_LABELS = {
    Strategy.OWNER: "Own",
    Strategy.RENTER: "Rent",
}

DEFAULT_COLOR = "#7f7f7f"


def _format_dollar_axis(ax: plt.Axes):
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"${x:,.0f}")
    )


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filepath


def plot_trajectories(
    results: list[SimulationResult],
    start_age: int,
    output_path: Path,
    name: str = "",
    rates: RateTable | None = None,
) -> Path:
    """Generate a line chart of savings by age for each strategy.

    Args:
        results: simulate() results to draw, one line each.
        start_age: first age on the x axis.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "30" → "trajectory-30.png").
        rates: when given, each age bracket is annotated with its mean return.

    Returns:
        Path to the generated PNG file.
    """
    fig, ax = plt.subplots(figsize=(14, 8))

    for r in results:
        ages = list(range(start_age, len(r.trajectory)))
        savings = r.trajectory[start_age:]
        color = STRATEGY_COLORS.get(r.strategy, DEFAULT_COLOR)
        ax.plot(ages, savings, label=STRATEGY_LABELS.get(r.strategy, r.strategy.value), color=color, linewidth=2)
        if r.mortgage_free_age is not None and r.mortgage_free_age > start_age:
            ax.axvline(r.mortgage_free_age, color=color, linewidth=0.8, linestyle=":", alpha=0.6)
        if r.depleted_age is not None:
            ax.axvline(r.depleted_age, color="#d62728", linewidth=1.5, linestyle=":")

    if rates is not None:
        y_lo, y_hi = ax.get_ylim()
        for summary in summarize_rates(rates):
            if summary.end_age < start_age:
                continue
            mid = (max(summary.start_age, start_age) + summary.end_age) / 2
            ax.annotate(
                f"{summary.mean:.1%} ± {summary.std:.1%}",
                xy=(mid, y_lo + (y_hi - y_lo) * 0.03),
                fontsize=9, color="darkseagreen",
                ha="center", va="bottom",
            )

    ax.set_xlabel("Age")
    ax.set_ylabel("Savings")
    ax.set_title("Savings by age: own vs rent")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_dollar_axis(ax)

    return _save(fig, output_path, "trajectory", name)


def plot_mc_fan(
    mc_results: dict[Strategy, MonteCarloResult],
    output_path: Path,
    name: str = "",
) -> Path:
    """Generate a fan chart (P5-P95 bands) per strategy for Monte Carlo results."""
    valid = [r for r in mc_results.values() if r.yearly_savings_percentiles]
    if not valid:
        raise ValueError("No MonteCarloResult with yearly_savings_percentiles")

    fig, axes = plt.subplots(1, len(valid), figsize=(7 * len(valid), 6), squeeze=False)

    for ax, result in zip(axes[0], valid):
        color = STRATEGY_COLORS.get(result.strategy, DEFAULT_COLOR)
        pdata = result.yearly_savings_percentiles
        ages = sorted(pdata.keys())

        ax.fill_between(ages, [pdata[a][5] for a in ages], [pdata[a][95] for a in ages],
                        alpha=0.15, color=color, label="P5–P95")
        ax.fill_between(ages, [pdata[a][25] for a in ages], [pdata[a][75] for a in ages],
                        alpha=0.3, color=color, label="P25–P75")
        ax.plot(ages, [pdata[a][50] for a in ages], color=color, linewidth=2, label="P50 (median)")

        ax.set_title(STRATEGY_LABELS.get(result.strategy, result.strategy.value))
        ax.set_xlabel("Age")
        ax.set_ylabel("Savings")
        ax.legend(loc="upper left", fontsize=9)
        ax.grid(True, alpha=0.3)
        _format_dollar_axis(ax)

    fig.suptitle(f"Monte Carlo fan chart (N={valid[0].n_simulations:,})", fontsize=14, y=1.01)
    return _save(fig, output_path, "mc_fan", name)
