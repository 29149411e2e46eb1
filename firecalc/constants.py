"""
Global constants for FIRECalc.

Purpose
-------
Centralizes the safety caps, policy thresholds and calculator defaults used
throughout the codebase. The caps are the only termination guarantee of the
iterative solvers and must not be tuned per call.

Usage
-----
>>> from firecalc.constants import MAX_YEARS_TO_TARGET, DEBT_MAX_MONTHS
>>> MAX_YEARS_TO_TARGET
100

Categories
----------
- Safety caps: iteration and series-length bounds
- Policy thresholds: lean/fat expense levels, savings-rate bands
- Withdrawal: sensitivity rates
- Healthcare: Medicare age, subsidy bands
- Defaults: calculator inputs used by the CLI and config templates
"""

from typing import Tuple

__all__ = [
    # Safety caps
    "MAX_YEARS_TO_TARGET",
    "MAX_PROJECTION_YEARS",
    "MAX_FIXED_HORIZON_YEARS",
    "PROJECTION_BUFFER_YEARS",
    "DEBT_MAX_MONTHS",
    "TIMELINE_SEARCH_ITERATIONS",
    "TIMELINE_SEARCH_TOLERANCE",
    # Thresholds
    "LEAN_FIRE_THRESHOLD",
    "FAT_FIRE_THRESHOLD",
    "SAVINGS_RATE_BANDS",
    "SAVINGS_RATE_FLOOR_LABEL",
    # Withdrawal
    "SENSITIVITY_RATES",
    "SENSITIVITY_MAX_YEARS",
    # Healthcare
    "MEDICARE_AGE",
    "SUBSIDY_BANDS",
    "SUBSIDY_REFERENCE_INCOMES",
    # Time
    "MONTHS_PER_YEAR",
    "CONTRIBUTION_PERIODS",
    # Defaults
    "DEFAULT_CURRENT_AGE",
    "DEFAULT_RETIREMENT_AGE",
    "DEFAULT_CURRENT_SAVINGS",
    "DEFAULT_ANNUAL_CONTRIBUTION",
    "DEFAULT_EXPECTED_RETURN",
    "DEFAULT_INFLATION_RATE",
    "DEFAULT_WITHDRAWAL_RATE",
    "DEFAULT_ANNUAL_EXPENSES",
    "DEFAULT_PART_TIME_INCOME",
    "DEFAULT_PORTFOLIO_VALUE",
    "DEFAULT_RETIREMENT_YEARS",
    "DEFAULT_DEBT_BUDGET",
    "DEFAULT_DEBT_TARGET_MONTHS",
]


# =============================================================================
# Safety Caps
# =============================================================================

MAX_YEARS_TO_TARGET: int = 100
"""Iteration cap for years_to_target; also the de facto "never" threshold."""

MAX_PROJECTION_YEARS: int = 50
"""Cap on years for projection series driven by a time-to-target solve."""

MAX_FIXED_HORIZON_YEARS: int = 60
"""Cap on years for fixed-horizon series (Coast, Reverse)."""

PROJECTION_BUFFER_YEARS: int = 10
"""Years charted beyond the target so the series shows post-FIRE growth."""

DEBT_MAX_MONTHS: int = 600
"""Debt simulation cap (50 years); reaching it means "never pays off"."""

TIMELINE_SEARCH_ITERATIONS: int = 30
"""Maximum binary-search iterations for the payoff-timeline solver."""

TIMELINE_SEARCH_TOLERANCE: float = 1.0
"""Stop the binary search once the budget bracket is narrower than this."""


# =============================================================================
# Policy Thresholds
# =============================================================================

LEAN_FIRE_THRESHOLD: float = 40_000.0
"""Annual expenses at or below this level classify as Lean FIRE."""

FAT_FIRE_THRESHOLD: float = 100_000.0
"""Annual expenses at or above this level classify as Fat FIRE."""

SAVINGS_RATE_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.50, "Extreme Saver"),
    (0.30, "Aggressive Saver"),
    (0.20, "Good Saver"),
    (0.10, "Average Saver"),
)
"""Savings-rate bands as (lower bound, label), highest first."""

SAVINGS_RATE_FLOOR_LABEL: str = "Below Average"
"""Label for savings rates under the lowest band."""


# =============================================================================
# Withdrawal
# =============================================================================

SENSITIVITY_RATES: Tuple[float, ...] = (0.03, 0.035, 0.04, 0.045, 0.05)
"""Candidate withdrawal rates compared in the sensitivity table."""

SENSITIVITY_MAX_YEARS: int = 50
"""Year cap for each sensitivity-table run."""


# =============================================================================
# Healthcare
# =============================================================================

MEDICARE_AGE: int = 65
"""Age of Medicare eligibility closing the early-retirement coverage gap."""

SUBSIDY_BANDS: Tuple[Tuple[float, float], ...] = (
    (30_000.0, 0.70),
    (50_000.0, 0.50),
    (75_000.0, 0.30),
    (100_000.0, 0.15),
)
"""Simplified subsidy bands as (income strictly below, subsidy fraction)."""

SUBSIDY_REFERENCE_INCOMES: Tuple[float, ...] = (30_000.0, 50_000.0, 75_000.0)
"""Household incomes at which subsidy estimates are reported."""


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year."""

CONTRIBUTION_PERIODS = {"monthly": 12, "quarterly": 4, "annual": 1}
"""Contribution periods per year by frequency name."""


# =============================================================================
# Calculator Defaults
# =============================================================================

DEFAULT_CURRENT_AGE: int = 30
DEFAULT_RETIREMENT_AGE: int = 55
DEFAULT_CURRENT_SAVINGS: float = 100_000.0
DEFAULT_ANNUAL_CONTRIBUTION: float = 24_000.0
DEFAULT_EXPECTED_RETURN: float = 0.07
DEFAULT_INFLATION_RATE: float = 0.03
DEFAULT_WITHDRAWAL_RATE: float = 0.04
DEFAULT_ANNUAL_EXPENSES: float = 48_000.0
DEFAULT_PART_TIME_INCOME: float = 20_000.0
DEFAULT_PORTFOLIO_VALUE: float = 1_000_000.0
DEFAULT_RETIREMENT_YEARS: int = 30
DEFAULT_DEBT_BUDGET: float = 1_000.0
DEFAULT_DEBT_TARGET_MONTHS: int = 36
