"""
Withdrawal-longevity model for FIRECalc.

Purpose
-------
Models the drawdown phase: a portfolio growing at the nominal return while an
inflation-indexed withdrawal is taken once per year. Answers "will the money
last through retirement?" and compares a fixed set of candidate rates.

Mathematical Framework
----------------------
Starting from B_0 = portfolio value and D_0 = portfolio · rate:

    B_{t+1} = B_t·(1 + r_nominal) - D_t
    D_{t+1} = D_t·(1 + inflation)

A row (t, B_t, D_t) is recorded while B_t > 0 and t ≤ retirement_years.
Longevity is the index of the last recorded row; the success ratio is
min(1, longevity / retirement_years).

Key components
--------------
- WithdrawalRow / RateAnalysis: immutable table rows.
- WithdrawalResult: longevity, success ratio and the yearly drawdown.
- calculate_withdrawal: run the drawdown and the sensitivity table.
- withdrawal_to_frame / sensitivity_to_frame: pandas export.

Example
-------
>>> res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30)
>>> res.portfolio_longevity, res.success_rate
(30, 1.0)
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import List

import pandas as pd

from .constants import MONTHS_PER_YEAR, SENSITIVITY_MAX_YEARS, SENSITIVITY_RATES
from .utils import check_finite, check_non_negative, round_half_up

__all__ = [
    "WithdrawalRow",
    "RateAnalysis",
    "WithdrawalResult",
    "calculate_withdrawal",
    "withdrawal_to_frame",
    "sensitivity_to_frame",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WithdrawalRow:
    """Balance and withdrawal at the start of drawdown year ``year`` (rounded)."""
    year: int
    balance: float
    withdrawal: float


@dataclass(frozen=True)
class RateAnalysis:
    """Outcome of one candidate rate: years lasted (≤ 50) and ending balance."""
    rate: float
    years: int
    end_balance: float


@dataclass(frozen=True)
class WithdrawalResult:
    """
    Drawdown summary.

    Attributes
    ----------
    portfolio_longevity : int
        Index of the last year with a positive starting balance.
    success_rate : float
        1.0 when longevity covers the horizon, else longevity / horizon.
    annual_withdrawal, monthly_withdrawal : float
        Initial withdrawal, rounded to whole units.
    ending_balance : float
        Balance of the last recorded row (never negative).
    withdrawal_projections : List[WithdrawalRow]
    rate_analysis : List[RateAnalysis]
    """
    portfolio_longevity: int
    success_rate: float
    annual_withdrawal: float
    monthly_withdrawal: float
    ending_balance: float
    withdrawal_projections: List[WithdrawalRow]
    rate_analysis: List[RateAnalysis]


def _run_sensitivity(
    portfolio_value: float,
    rate: float,
    expected_return: float,
    inflation_rate: float,
) -> RateAnalysis:
    balance = float(portfolio_value)
    withdrawal = portfolio_value * rate
    year = 0
    while balance > 0 and year < SENSITIVITY_MAX_YEARS:
        balance = balance * (1.0 + expected_return) - withdrawal
        withdrawal *= 1.0 + inflation_rate
        year += 1
    return RateAnalysis(rate=rate, years=year, end_balance=max(0.0, round_half_up(balance)))


def calculate_withdrawal(
    portfolio_value: float,
    withdrawal_rate: float,
    expected_return: float,
    inflation_rate: float,
    retirement_years: int,
) -> WithdrawalResult:
    """
    Test whether *portfolio_value* sustains an inflation-indexed withdrawal.

    Parameters
    ----------
    portfolio_value : float
        Balance at retirement (≥ 0).
    withdrawal_rate : float
        Initial withdrawal as a fraction of the portfolio (≥ 0).
    expected_return : float
        Nominal annual return.
    inflation_rate : float
        Annual growth of the withdrawal.
    retirement_years : int
        Horizon the portfolio must cover (≥ 0).

    Returns
    -------
    WithdrawalResult
    """
    check_finite(
        "calculate_withdrawal",
        portfolio_value, withdrawal_rate, expected_return, inflation_rate, retirement_years,
    )
    check_non_negative("portfolio_value", portfolio_value)
    check_non_negative("withdrawal_rate", withdrawal_rate)
    check_non_negative("retirement_years", retirement_years)

    annual_withdrawal = portfolio_value * withdrawal_rate

    rows: List[WithdrawalRow] = []
    balance = float(portfolio_value)
    withdrawal = annual_withdrawal
    year = 0
    while balance > 0 and year <= retirement_years:
        rows.append(
            WithdrawalRow(
                year=year,
                balance=round_half_up(balance),
                withdrawal=round_half_up(withdrawal),
            )
        )
        balance = balance * (1.0 + expected_return) - withdrawal
        withdrawal *= 1.0 + inflation_rate
        year += 1

    # An empty portfolio records no rows; report zero years rather than -1.
    longevity = max(0, year - 1)
    ending_balance = max(0.0, rows[-1].balance) if rows else 0.0

    if longevity >= retirement_years:
        success_rate = 1.0
    else:
        success_rate = longevity / retirement_years

    logger.debug(
        "withdrawal: rate=%s lasted %d of %d years", withdrawal_rate, longevity, retirement_years
    )

    rate_analysis = [
        _run_sensitivity(portfolio_value, rate, expected_return, inflation_rate)
        for rate in SENSITIVITY_RATES
    ]

    return WithdrawalResult(
        portfolio_longevity=longevity,
        success_rate=success_rate,
        annual_withdrawal=round_half_up(annual_withdrawal),
        monthly_withdrawal=round_half_up(annual_withdrawal / MONTHS_PER_YEAR),
        ending_balance=ending_balance,
        withdrawal_projections=rows,
        rate_analysis=rate_analysis,
    )


def withdrawal_to_frame(result: WithdrawalResult) -> pd.DataFrame:
    """Yearly drawdown rows as a DataFrame (year, balance, withdrawal)."""
    columns = list(WithdrawalRow.__dataclass_fields__)
    return pd.DataFrame([asdict(r) for r in result.withdrawal_projections], columns=columns)


def sensitivity_to_frame(result: WithdrawalResult) -> pd.DataFrame:
    """Sensitivity table as a DataFrame (rate, years, end_balance)."""
    columns = list(RateAnalysis.__dataclass_fields__)
    return pd.DataFrame([asdict(r) for r in result.rate_analysis], columns=columns)
