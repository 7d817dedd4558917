"""Inspection helpers for adaptive integration runs."""

from booleint.analysis.convergence import history_to_dataframe, summarize

__all__ = [
    "history_to_dataframe",
    "summarize",
]
