"""
FIRE scenario models for FIRECalc.

Purpose
-------
Pure transforms from ScenarioInputs (plus scenario-specific parameters) to
immutable result records. Every model derives the FIRE number as

    FN = annual_expenses / withdrawal_rate        (4% ⇒ 25× expenses)

and overlays its own goal definition on the time-value primitives and the
projection generator.

Key components
--------------
- ScenarioInputs: validated, immutable calculator inputs.
- calculate_standard_fire: years to FN on the real return, plus Coast number.
- calculate_coast_fire: Coast number as primary metric, two projection paths.
- calculate_lean_fire / calculate_fat_fire: Standard plus expense classification.
- calculate_barista_fire: FN reduced by part-time income.
- calculate_reverse_fire: required contribution for a fixed horizon.
- calculate_savings_rate: savings rate, band and years to FN from income.
- calculate_investment_growth: explicit-horizon growth from a contribution plan.

Conventions
-----------
- Money fields are rounded half-up to whole units; year fields to one decimal.
- ``math.inf`` (unreachable) survives rounding and is never coerced.
- Inflation-aware solves use r_real = (1 + r_nominal)/(1 + i) - 1; the charted
  series compound the nominal return.

Example
-------
>>> inputs = ScenarioInputs(
...     current_age=30, retirement_age=55, current_savings=100_000,
...     annual_contribution=24_000, expected_return=0.07, inflation_rate=0.03,
...     withdrawal_rate=0.04, annual_expenses=48_000,
... )
>>> calculate_standard_fire(inputs, current_year=2025).fire_number
1200000.0
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, fields
from typing import List, Optional

from .constants import (
    CONTRIBUTION_PERIODS,
    FAT_FIRE_THRESHOLD,
    LEAN_FIRE_THRESHOLD,
    MONTHS_PER_YEAR,
    SAVINGS_RATE_BANDS,
    SAVINGS_RATE_FLOOR_LABEL,
)
from .exceptions import ConfigurationError
from .projection import (
    ProjectionPoint,
    fixed_horizon_years,
    generate_projections,
    target_horizon_years,
)
from .timevalue import present_value, years_to_target, years_to_target_iterative
from .utils import (
    check_finite,
    check_non_negative,
    check_positive,
    real_return,
    round_half_up,
    round_years,
)

__all__ = [
    "ScenarioInputs",
    "StandardFireResult",
    "CoastFireResult",
    "LeanFireResult",
    "FatFireResult",
    "BaristaFireResult",
    "ReverseFireResult",
    "SavingsRateResult",
    "InvestmentGrowthResult",
    "calculate_standard_fire",
    "calculate_coast_fire",
    "calculate_lean_fire",
    "calculate_fat_fire",
    "calculate_barista_fire",
    "calculate_reverse_fire",
    "calculate_savings_rate",
    "calculate_investment_growth",
    "classify_savings_rate",
]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScenarioInputs:
    """
    Calculator inputs shared by the FIRE scenario models.

    Parameters
    ----------
    current_age : int
        Age today.
    retirement_age : int
        Target retirement age (used for Coast and Reverse horizons).
    current_savings : float
        Invested balance today (≥ 0).
    annual_contribution : float
        Amount invested per year (≥ 0).
    expected_return : float
        Nominal annual return as a decimal.
    inflation_rate : float
        Annual inflation as a decimal.
    withdrawal_rate : float
        Safe withdrawal rate as a decimal (> 0).
    annual_expenses : float
        Annual spending in retirement (≥ 0).

    Raises
    ------
    ValidationError
        For negative amounts, a non-positive withdrawal rate or non-finite values.
    """
    current_age: int
    retirement_age: int
    current_savings: float
    annual_contribution: float
    expected_return: float
    inflation_rate: float
    withdrawal_rate: float
    annual_expenses: float

    def __post_init__(self):
        """Validate inputs."""
        check_finite(
            "ScenarioInputs",
            self.current_age, self.retirement_age, self.current_savings,
            self.annual_contribution, self.expected_return, self.inflation_rate,
            self.withdrawal_rate, self.annual_expenses,
        )
        check_non_negative("current_savings", self.current_savings)
        check_non_negative("annual_contribution", self.annual_contribution)
        check_non_negative("annual_expenses", self.annual_expenses)
        check_positive("withdrawal_rate", self.withdrawal_rate)

    @property
    def real_return(self) -> float:
        """Inflation-adjusted return."""
        return real_return(self.expected_return, self.inflation_rate)

    @property
    def fire_number(self) -> float:
        """Unrounded FIRE number: annual_expenses / withdrawal_rate."""
        return self.annual_expenses / self.withdrawal_rate

    @property
    def years_to_retirement(self) -> int:
        """Non-negative years between current and retirement age."""
        return max(0, self.retirement_age - self.current_age)


def _warn_if_no_horizon(inputs: ScenarioInputs) -> None:
    if inputs.retirement_age <= inputs.current_age:
        warnings.warn(
            f"retirement_age ({inputs.retirement_age}) is not after current_age "
            f"({inputs.current_age}); the retirement horizon is treated as empty.",
            UserWarning,
        )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StandardFireResult:
    fire_number: float
    years_to_fire: float
    fire_age: float
    projections: List[ProjectionPoint]
    savings_rate: float
    monthly_contribution: float
    coast_fire_number: float


@dataclass(frozen=True)
class LeanFireResult(StandardFireResult):
    is_lean: bool
    lean_threshold: float


@dataclass(frozen=True)
class FatFireResult(StandardFireResult):
    is_fat: bool
    fat_threshold: float


@dataclass(frozen=True)
class CoastFireResult:
    """
    Coast FIRE metrics.

    ``projections`` freezes contributions at 0 (the literal coast path);
    ``projections_with_contributions`` continues them for comparison.
    """
    coast_number: float
    years_to_coast: float
    already_coasting: bool
    fire_number: float
    projections: List[ProjectionPoint]
    projections_with_contributions: List[ProjectionPoint]


@dataclass(frozen=True)
class BaristaFireResult:
    barista_number: float
    full_fire_number: float
    years_to_barista_fire: float
    part_time_income: float
    portfolio_expenses: float
    projections: List[ProjectionPoint]
    savings_from_part_time: float


@dataclass(frozen=True)
class ReverseFireResult:
    """
    Required contribution to reach the FIRE number by retirement age.

    ``required_annual_savings`` is exactly 0 when ``already_achievable``.
    """
    fire_number: float
    years_to_fire: int
    required_annual_savings: float
    required_monthly_savings: float
    already_achievable: bool
    current_will_grow_to: float
    projections: List[ProjectionPoint]


@dataclass(frozen=True)
class SavingsRateResult:
    savings_rate: float
    annual_savings: float
    monthly_savings: float
    fire_number: float
    years_to_fire: float
    savings_category: str
    projections: List[ProjectionPoint]


@dataclass(frozen=True)
class InvestmentGrowthResult:
    annual_contribution: float
    final_balance: float
    final_inflation_adjusted: float
    total_contributions: float
    total_growth: float
    projections: List[ProjectionPoint]
    savings_rate: Optional[float] = None
    savings_category: Optional[str] = None


# ---------------------------------------------------------------------------
# Standard / Lean / Fat
# ---------------------------------------------------------------------------

def calculate_standard_fire(
    inputs: ScenarioInputs,
    *,
    current_year: Optional[int] = None,
) -> StandardFireResult:
    """
    Standard FIRE: years until the portfolio reaches 25× expenses (at 4%).

    - FIRE number: FN = E / w
    - Years to FIRE: years_to_target(PV, PMT, r_real, FN)
    - Coast number: FN discounted from retirement_age back to today at r_real
    - Savings rate: PMT / (PMT + E), assuming income = contributions + expenses

    The projection covers ceil(years) + 10 years, capped at 50 (50 when the
    target is unreachable).
    """
    fire_number = inputs.fire_number
    r_real = inputs.real_return

    years = years_to_target(
        inputs.current_savings, inputs.annual_contribution, r_real, fire_number
    )
    fire_age = inputs.current_age + years

    coast_fire_number = present_value(fire_number, r_real, inputs.years_to_retirement)

    estimated_income = inputs.annual_contribution + inputs.annual_expenses
    savings_rate = inputs.annual_contribution / estimated_income if estimated_income > 0 else 0.0

    projections = generate_projections(
        inputs.current_age,
        inputs.current_savings,
        inputs.annual_contribution,
        inputs.expected_return,
        inputs.inflation_rate,
        target_horizon_years(years),
        current_year=current_year,
    )

    return StandardFireResult(
        fire_number=round_half_up(fire_number),
        years_to_fire=round_years(years),
        fire_age=round_years(fire_age),
        projections=projections,
        savings_rate=savings_rate,
        monthly_contribution=inputs.annual_contribution / MONTHS_PER_YEAR,
        coast_fire_number=round_half_up(coast_fire_number),
    )


def _standard_fields(result: StandardFireResult) -> dict:
    return {f.name: getattr(result, f.name) for f in fields(StandardFireResult)}


def calculate_lean_fire(
    inputs: ScenarioInputs,
    *,
    current_year: Optional[int] = None,
) -> LeanFireResult:
    """Standard FIRE plus ``is_lean`` (expenses ≤ LEAN_FIRE_THRESHOLD)."""
    standard = calculate_standard_fire(inputs, current_year=current_year)
    return LeanFireResult(
        **_standard_fields(standard),
        is_lean=inputs.annual_expenses <= LEAN_FIRE_THRESHOLD,
        lean_threshold=LEAN_FIRE_THRESHOLD,
    )


def calculate_fat_fire(
    inputs: ScenarioInputs,
    *,
    current_year: Optional[int] = None,
) -> FatFireResult:
    """Standard FIRE plus ``is_fat`` (expenses ≥ FAT_FIRE_THRESHOLD)."""
    standard = calculate_standard_fire(inputs, current_year=current_year)
    return FatFireResult(
        **_standard_fields(standard),
        is_fat=inputs.annual_expenses >= FAT_FIRE_THRESHOLD,
        fat_threshold=FAT_FIRE_THRESHOLD,
    )


# ---------------------------------------------------------------------------
# Coast
# ---------------------------------------------------------------------------

def calculate_coast_fire(
    inputs: ScenarioInputs,
    *,
    current_year: Optional[int] = None,
) -> CoastFireResult:
    """
    Coast FIRE: the balance needed today so growth alone reaches FN by retirement.

        Coast = FN / (1 + r_real)^(retirement_age - current_age)

    ``years_to_coast`` is 0 when already coasting, otherwise the years for
    current contributions to reach the Coast number. Both projection paths
    span years_to_retirement + 10 years, capped at 60.
    """
    _warn_if_no_horizon(inputs)
    fire_number = inputs.fire_number
    r_real = inputs.real_return
    horizon = inputs.years_to_retirement

    coast_number = present_value(fire_number, r_real, horizon)
    already_coasting = inputs.current_savings >= coast_number

    if already_coasting:
        years_to_coast = 0.0
    else:
        years_to_coast = years_to_target(
            inputs.current_savings, inputs.annual_contribution, r_real, coast_number
        )

    num_years = fixed_horizon_years(horizon)
    coast_path = generate_projections(
        inputs.current_age,
        inputs.current_savings,
        0.0,
        inputs.expected_return,
        inputs.inflation_rate,
        num_years,
        current_year=current_year,
    )
    contributing_path = generate_projections(
        inputs.current_age,
        inputs.current_savings,
        inputs.annual_contribution,
        inputs.expected_return,
        inputs.inflation_rate,
        num_years,
        current_year=current_year,
    )

    return CoastFireResult(
        coast_number=round_half_up(coast_number),
        years_to_coast=round_years(years_to_coast),
        already_coasting=already_coasting,
        fire_number=round_half_up(fire_number),
        projections=coast_path,
        projections_with_contributions=contributing_path,
    )


# ---------------------------------------------------------------------------
# Barista
# ---------------------------------------------------------------------------

def calculate_barista_fire(
    inputs: ScenarioInputs,
    part_time_income: float,
    *,
    current_year: Optional[int] = None,
) -> BaristaFireResult:
    """
    Barista FIRE: part-time income covers part of retirement expenses.

        portfolio_expenses = max(0, E - part_time_income)
        barista_number     = portfolio_expenses / w

    ``savings_from_part_time`` is the reduction versus the full FIRE number.
    """
    check_non_negative("part_time_income", part_time_income)
    full_fire_number = inputs.fire_number
    portfolio_expenses = max(0.0, inputs.annual_expenses - part_time_income)
    barista_number = portfolio_expenses / inputs.withdrawal_rate

    years = years_to_target(
        inputs.current_savings, inputs.annual_contribution, inputs.real_return, barista_number
    )

    projections = generate_projections(
        inputs.current_age,
        inputs.current_savings,
        inputs.annual_contribution,
        inputs.expected_return,
        inputs.inflation_rate,
        target_horizon_years(years),
        current_year=current_year,
    )

    return BaristaFireResult(
        barista_number=round_half_up(barista_number),
        full_fire_number=round_half_up(full_fire_number),
        years_to_barista_fire=round_years(years),
        part_time_income=float(part_time_income),
        portfolio_expenses=float(portfolio_expenses),
        projections=projections,
        savings_from_part_time=round_half_up(full_fire_number - barista_number),
    )


# ---------------------------------------------------------------------------
# Reverse
# ---------------------------------------------------------------------------

def calculate_reverse_fire(
    inputs: ScenarioInputs,
    *,
    current_year: Optional[int] = None,
) -> ReverseFireResult:
    """
    Reverse FIRE: the constant contribution that reaches FN by retirement age.

    Inverse of the future-value annuity with n = max(1, retirement - current):

        PMT = (FN - PV·(1+r)^n)·r / ((1+r)^n - 1),     r = r_real
        PMT = (FN - PV) / n                             when r == 0

    When PV·(1+r)^n ≥ FN the target is ``already_achievable`` and the required
    contribution is 0. The projection runs n + 10 years (capped at 60) at the
    required contribution. ``inputs.annual_contribution`` is not used.
    """
    _warn_if_no_horizon(inputs)
    n = max(1, inputs.retirement_age - inputs.current_age)
    fire_number = inputs.fire_number
    r = inputs.real_return

    compound_factor = (1.0 + r) ** n
    current_will_grow_to = inputs.current_savings * compound_factor
    already_achievable = current_will_grow_to >= fire_number

    if already_achievable:
        required = 0.0
    elif r == 0:
        required = (fire_number - inputs.current_savings) / n
    else:
        required = (fire_number - current_will_grow_to) * r / (compound_factor - 1.0)
    required = max(0.0, required)

    projections = generate_projections(
        inputs.current_age,
        inputs.current_savings,
        required,
        inputs.expected_return,
        inputs.inflation_rate,
        fixed_horizon_years(n),
        current_year=current_year,
    )

    return ReverseFireResult(
        fire_number=round_half_up(fire_number),
        years_to_fire=n,
        required_annual_savings=required,
        required_monthly_savings=required / MONTHS_PER_YEAR,
        already_achievable=already_achievable,
        current_will_grow_to=round_half_up(current_will_grow_to),
        projections=projections,
    )


# ---------------------------------------------------------------------------
# Savings rate / investment growth
# ---------------------------------------------------------------------------

def classify_savings_rate(savings_rate: float) -> str:
    """
    Map a savings rate to its display band.

    Fixed policy: ≥50% Extreme Saver, ≥30% Aggressive Saver, ≥20% Good Saver,
    ≥10% Average Saver, otherwise Below Average.
    """
    for lower_bound, label in SAVINGS_RATE_BANDS:
        if savings_rate >= lower_bound:
            return label
    return SAVINGS_RATE_FLOOR_LABEL


def calculate_savings_rate(
    annual_income: float,
    annual_expenses: float,
    current_savings: float,
    expected_return: float,
    inflation_rate: float,
    withdrawal_rate: float,
    *,
    current_age: int,
    current_year: Optional[int] = None,
) -> SavingsRateResult:
    """
    Savings rate and its effect on the path to FIRE.

    annual_savings = income - expenses; savings_rate = savings / income (0 when
    income is 0). A negative savings amount is allowed and usually makes the
    target unreachable.

    Time to FIRE counts whole years of real growth plus savings, up to
    MAX_YEARS_TO_TARGET, so ``years_to_fire`` is a whole number or ``inf``.
    """
    check_non_negative("annual_income", annual_income)
    check_non_negative("annual_expenses", annual_expenses)
    check_non_negative("current_savings", current_savings)
    check_positive("withdrawal_rate", withdrawal_rate)

    annual_savings = annual_income - annual_expenses
    savings_rate = annual_savings / annual_income if annual_income > 0 else 0.0
    fire_number = annual_expenses / withdrawal_rate

    years = years_to_target_iterative(
        current_savings, annual_savings, real_return(expected_return, inflation_rate), fire_number
    )

    projections = generate_projections(
        current_age,
        current_savings,
        annual_savings,
        expected_return,
        inflation_rate,
        target_horizon_years(years),
        current_year=current_year,
    )

    return SavingsRateResult(
        savings_rate=savings_rate,
        annual_savings=float(annual_savings),
        monthly_savings=annual_savings / MONTHS_PER_YEAR,
        fire_number=round_half_up(fire_number),
        years_to_fire=round_years(years),
        savings_category=classify_savings_rate(savings_rate),
        projections=projections,
    )


def calculate_investment_growth(
    initial_investment: float,
    contribution_amount: float,
    contribution_frequency: str,
    years: int,
    expected_return: float,
    inflation_rate: float,
    *,
    current_age: int = 0,
    annual_income: Optional[float] = None,
    current_year: Optional[int] = None,
) -> InvestmentGrowthResult:
    """
    Grow an investment under a periodic contribution plan over *years*.

    Contributions are annualized (amount × periods per year) and added at the
    end of each year, matching the projection generator. When an income is
    given, the savings rate is annual contribution / income with its band.
    """
    if contribution_frequency not in CONTRIBUTION_PERIODS:
        raise ConfigurationError(
            f"contribution_frequency must be one of {sorted(CONTRIBUTION_PERIODS)}, "
            f"got {contribution_frequency!r}"
        )
    check_non_negative("initial_investment", initial_investment)
    check_non_negative("contribution_amount", contribution_amount)
    check_non_negative("years", years)

    annual_contribution = contribution_amount * CONTRIBUTION_PERIODS[contribution_frequency]
    projections = generate_projections(
        current_age,
        initial_investment,
        annual_contribution,
        expected_return,
        inflation_rate,
        years,
        current_year=current_year,
    )
    final = projections[-1]

    savings_rate: Optional[float] = None
    savings_category: Optional[str] = None
    if annual_income is not None:
        check_non_negative("annual_income", annual_income)
        savings_rate = annual_contribution / annual_income if annual_income > 0 else 0.0
        savings_category = classify_savings_rate(savings_rate)

    return InvestmentGrowthResult(
        annual_contribution=float(annual_contribution),
        final_balance=final.portfolio_value,
        final_inflation_adjusted=final.inflation_adjusted_value,
        total_contributions=final.cumulative_contributions,
        total_growth=final.portfolio_value - final.cumulative_contributions,
        projections=projections,
        savings_rate=savings_rate,
        savings_category=savings_category,
    )
