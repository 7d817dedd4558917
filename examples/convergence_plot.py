"""Refinement history of the adaptive Boole integrator.

Integrates the standard normal density over (-inf, x_max] and charts how
the estimate settles and how the change between passes shrinks as the
breakpoints double.

Usage:
    python examples/convergence_plot.py --upper 1.0 --tolerance 1e-10
"""

from __future__ import annotations

import math
from pathlib import Path

import booleint
from booleint.analysis import history_to_dataframe, summarize


def normal_pdf(x: float) -> float:
    return math.exp(-x * x / 2) / math.sqrt(2 * math.pi)


def run_convergence_demo(upper: float, tolerance: float) -> booleint.IntegrationResult:
    return booleint.integrate_boole(normal_pdf, -math.inf, upper, tolerance)


def print_summary(result: booleint.IntegrationResult, upper: float) -> None:
    exact = 0.5 * (1 + math.erf(upper / math.sqrt(2)))
    summary = summarize(result)

    print("=" * 60)
    print(f"  Status:          {summary['status']}")
    print(f"  Estimate:        {summary['value']:.12f}")
    print(f"  Exact:           {exact:.12f}")
    print(f"  Error:           {abs(summary['value'] - exact):.3e}")
    print(f"  Passes:          {summary['iterations']}")
    print(f"  Evaluations:     {summary['function_calls']}")
    print("=" * 60)
    print(history_to_dataframe(result).to_string(index=False))


def visualize_results(result: booleint.IntegrationResult, output_dir: Path) -> None:
    """Plot estimate and per-pass change against the pass number."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)
    df = history_to_dataframe(result)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.plot(df["iteration"], df["estimate"], marker="o", color="#3498db")
    ax.set_xlabel("Pass")
    ax.set_ylabel("Estimate")
    ax.set_title("Estimate per Refinement Pass")
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    finite = df[df["change"].map(math.isfinite) & (df["change"] > 0)]
    ax.semilogy(finite["iteration"], finite["change"], marker="o", color="#e74c3c")
    ax.set_xlabel("Pass")
    ax.set_ylabel("|change|")
    ax.set_title("Change Between Successive Passes")
    ax.grid(True, alpha=0.3, which="both")

    fig.suptitle("Adaptive Boole's Rule Convergence", fontsize=14)
    fig.tight_layout()
    fig.savefig(output_dir / "convergence.png", dpi=150)
    plt.close(fig)
    print(f"Saved: {output_dir / 'convergence.png'}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Chart the refinement history of the adaptive Boole integrator"
    )
    parser.add_argument("--upper", type=float, default=0.0, help="Upper integration bound")
    parser.add_argument("--tolerance", type=float, default=1e-10, help="Absolute tolerance")
    parser.add_argument("--output", type=str, default="output/convergence", help="Output directory")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization")
    args = parser.parse_args()

    booleint.configure_from_env()
    result = run_convergence_demo(args.upper, args.tolerance)
    print_summary(result, args.upper)

    if not args.no_viz:
        visualize_results(result, Path(args.output))
