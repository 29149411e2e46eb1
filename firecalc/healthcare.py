"""
Healthcare-gap estimator for FIRECalc.

Purpose
-------
Estimates private health-insurance costs between early retirement and
Medicare eligibility, inflating each cost component year by year:

    cost_i = (12·premium + deductible + out_of_pocket)·(1 + inflation)^i,
    i = 0, …, gap_years - 1,   gap_years = max(0, medicare_age - retirement_age)

Subsidy estimates use a deliberately simplified income banding applied to the
un-inflated base annual cost (see SUBSIDY_BANDS).

Key components
--------------
- HealthcareYear: one gap year's inflated cost breakdown.
- HealthcareGapResult: totals, average and subsidy estimates.
- calculate_healthcare_gap: build the breakdown.
- estimate_subsidy: banded subsidy for one household income.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from .constants import MEDICARE_AGE, MONTHS_PER_YEAR, SUBSIDY_BANDS, SUBSIDY_REFERENCE_INCOMES
from .utils import check_finite, check_non_negative, resolve_year, round_half_up

__all__ = [
    "HealthcareYear",
    "HealthcareGapResult",
    "calculate_healthcare_gap",
    "estimate_subsidy",
]

DEFAULT_MONTHLY_PREMIUM = 600.0
DEFAULT_ANNUAL_DEDUCTIBLE = 2_500.0
DEFAULT_ANNUAL_OUT_OF_POCKET = 2_000.0


@dataclass(frozen=True)
class HealthcareYear:
    age: int
    calendar_year: int
    cost: float
    premium: float
    deductible: float
    out_of_pocket: float


@dataclass(frozen=True)
class HealthcareGapResult:
    """
    Coverage-gap cost summary.

    ``annual_cost`` is the un-inflated base cost; ``total_cost`` and
    ``avg_annual_cost`` sum the inflated years (0 when there is no gap).
    ``subsidies`` maps each reference income to its estimated annual subsidy.
    """
    gap_years: int
    annual_cost: float
    total_cost: float
    avg_annual_cost: float
    yearly_breakdown: List[HealthcareYear]
    subsidies: Dict[float, float]


def estimate_subsidy(household_income: float, annual_cost: float) -> float:
    """Simplified subsidy: the first band whose bound exceeds the income, else 0."""
    for upper_bound, fraction in SUBSIDY_BANDS:
        if household_income < upper_bound:
            return annual_cost * fraction
    return 0.0


def calculate_healthcare_gap(
    current_age: int,
    early_retirement_age: int,
    inflation_rate: float,
    *,
    medicare_age: int = MEDICARE_AGE,
    monthly_premium: float = DEFAULT_MONTHLY_PREMIUM,
    annual_deductible: float = DEFAULT_ANNUAL_DEDUCTIBLE,
    annual_out_of_pocket: float = DEFAULT_ANNUAL_OUT_OF_POCKET,
    current_year: Optional[int] = None,
) -> HealthcareGapResult:
    """
    Estimate healthcare costs for the years before Medicare.

    Parameters
    ----------
    current_age : int
        Age today; only used to label calendar years.
    early_retirement_age : int
        Age at which employer coverage ends.
    inflation_rate : float
        Annual healthcare cost growth.
    medicare_age : int, default 65
    monthly_premium, annual_deductible, annual_out_of_pocket : float
        Cost components (≥ 0).
    current_year : int, optional
        Calendar year today. Defaults to the system year.

    Returns
    -------
    HealthcareGapResult

    Examples
    --------
    >>> res = calculate_healthcare_gap(30, 55, 0.0, current_year=2025)
    >>> res.gap_years, res.annual_cost, res.total_cost
    (10, 11700.0, 117000.0)
    """
    check_finite("calculate_healthcare_gap", monthly_premium, annual_deductible,
                 annual_out_of_pocket, inflation_rate)
    check_non_negative("monthly_premium", monthly_premium)
    check_non_negative("annual_deductible", annual_deductible)
    check_non_negative("annual_out_of_pocket", annual_out_of_pocket)

    gap_years = max(0, medicare_age - early_retirement_age)
    annual_premium = monthly_premium * MONTHS_PER_YEAR
    annual_cost = annual_premium + annual_deductible + annual_out_of_pocket

    first_year = resolve_year(current_year) + (early_retirement_age - current_age)
    factors = (1.0 + inflation_rate) ** np.arange(gap_years, dtype=float)
    costs = annual_cost * factors

    breakdown = [
        HealthcareYear(
            age=early_retirement_age + i,
            calendar_year=first_year + i,
            cost=round_half_up(float(costs[i])),
            premium=round_half_up(annual_premium * float(factors[i])),
            deductible=round_half_up(annual_deductible * float(factors[i])),
            out_of_pocket=round_half_up(annual_out_of_pocket * float(factors[i])),
        )
        for i in range(gap_years)
    ]

    total = float(costs.sum())
    subsidies = {
        income: round_half_up(estimate_subsidy(income, annual_cost))
        for income in SUBSIDY_REFERENCE_INCOMES
    }

    return HealthcareGapResult(
        gap_years=gap_years,
        annual_cost=float(annual_cost),
        total_cost=round_half_up(total),
        avg_annual_cost=round_half_up(total / gap_years) if gap_years > 0 else 0.0,
        yearly_breakdown=breakdown,
        subsidies=subsidies,
    )
