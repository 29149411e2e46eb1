"""
Projection series generator for FIRECalc.

Purpose
-------
Produces the bounded, deterministic yearly portfolio trajectory consumed by
charts and exports. Index 0 is today's snapshot; every later point compounds
the previous nominal balance and adds one contribution:

    W_0 = current_savings
    W_i = W_{i-1}·(1 + r_nominal) + PMT,   i ≥ 1

The inflation-adjusted value discounts each nominal balance independently:

    W_i^real = W_i / (1 + inflation)^i

Monetary fields are rounded half-up to whole units at emission while the
running balance stays unrounded.

Key components
--------------
- ProjectionPoint: one yearly snapshot (immutable).
- generate_projections: build the series.
- target_horizon_years / fixed_horizon_years: series-length policy.
- projections_to_frame: pandas export.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence

import pandas as pd

from .constants import (
    MAX_FIXED_HORIZON_YEARS,
    MAX_PROJECTION_YEARS,
    PROJECTION_BUFFER_YEARS,
)
from .utils import check_non_negative, resolve_year, round_half_up

__all__ = [
    "ProjectionPoint",
    "generate_projections",
    "target_horizon_years",
    "fixed_horizon_years",
    "projections_to_frame",
]


@dataclass(frozen=True)
class ProjectionPoint:
    """
    Yearly portfolio snapshot.

    Attributes
    ----------
    age : int
        Age at this point (current_age + i).
    calendar_year : int
        Calendar year label (current_year + i).
    portfolio_value : float
        Nominal balance, rounded to whole units.
    contribution_this_year : float
        Contribution added this year (current savings at index 0).
    cumulative_contributions : float
        Starting savings plus all contributions so far, rounded.
    inflation_adjusted_value : float
        Nominal balance in today's money, rounded.
    """
    age: int
    calendar_year: int
    portfolio_value: float
    contribution_this_year: float
    cumulative_contributions: float
    inflation_adjusted_value: float


def generate_projections(
    current_age: int,
    current_savings: float,
    annual_contribution: float,
    nominal_return: float,
    inflation_rate: float,
    num_years: int,
    *,
    current_year: Optional[int] = None,
) -> List[ProjectionPoint]:
    """
    Generate ``num_years + 1`` yearly projection points.

    Parameters
    ----------
    current_age : int
        Age at index 0.
    current_savings : float
        Starting balance (also reported as the index-0 contribution).
    annual_contribution : float
        Contribution added at the end of each year.
    nominal_return : float
        Nominal annual return used for compounding.
    inflation_rate : float
        Annual inflation used for the real-value column.
    num_years : int
        Number of years after today.
    current_year : int, optional
        Calendar year of index 0. Defaults to the system year.

    Returns
    -------
    List[ProjectionPoint]

    Examples
    --------
    >>> pts = generate_projections(30, 100_000, 24_000, 0.07, 0.03, 1, current_year=2025)
    >>> [p.portfolio_value for p in pts]
    [100000.0, 131000.0]
    """
    check_non_negative("num_years", num_years)
    year0 = resolve_year(current_year)

    points: List[ProjectionPoint] = []
    portfolio = float(current_savings)
    total_contributions = float(current_savings)

    for i in range(int(num_years) + 1):
        inflation_adjusted = portfolio / (1.0 + inflation_rate) ** i
        points.append(
            ProjectionPoint(
                age=current_age + i,
                calendar_year=year0 + i,
                portfolio_value=round_half_up(portfolio),
                contribution_this_year=float(current_savings if i == 0 else annual_contribution),
                cumulative_contributions=round_half_up(total_contributions),
                inflation_adjusted_value=round_half_up(inflation_adjusted),
            )
        )
        portfolio = portfolio * (1.0 + nominal_return) + annual_contribution
        total_contributions += annual_contribution

    return points


def target_horizon_years(years_to_target: float) -> int:
    """Series length for a time-to-target solve: ceil(years) + buffer, capped."""
    if not math.isfinite(years_to_target):
        return MAX_PROJECTION_YEARS
    return min(math.ceil(years_to_target) + PROJECTION_BUFFER_YEARS, MAX_PROJECTION_YEARS)


def fixed_horizon_years(years: int) -> int:
    """Series length for a fixed horizon: years + buffer, capped."""
    return min(max(0, int(years)) + PROJECTION_BUFFER_YEARS, MAX_FIXED_HORIZON_YEARS)


def projections_to_frame(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """One row per projection point, columns named after the fields."""
    columns = list(ProjectionPoint.__dataclass_fields__)
    if not points:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([asdict(p) for p in points], columns=columns)
