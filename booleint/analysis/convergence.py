"""Refinement history export.

Turns the per-pass records of an IntegrationResult into a pandas DataFrame
for plotting or tabulation, and into a plain dict summary.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from booleint.numerics.integration import IntegrationResult


def history_to_dataframe(result: IntegrationResult) -> pd.DataFrame:
    """One row per refinement pass.

    Columns: iteration, breakpoints, estimate, change.
    """
    columns = ["iteration", "breakpoints", "estimate", "change"]
    rows = [
        (r.iteration, r.breakpoints, r.estimate, r.change)
        for r in result.history
    ]
    return pd.DataFrame(rows, columns=columns)


def summarize(result: IntegrationResult) -> dict[str, Any]:
    return {
        "status": result.status.value,
        "value": result.value,
        "iterations": result.iterations,
        "function_calls": result.function_calls,
    }
