"""
Financial Calculation Engine

Pure calculation modules for home loan and property investment analysis.
"""

from mortgage_model.calculations import (
    acquisition,
    amortization,
    capital_gains,
    cost_inflation_index,
    returns,
)

__all__ = [
    "acquisition",
    "amortization",
    "capital_gains",
    "cost_inflation_index",
    "returns",
]
