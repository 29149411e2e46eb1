"""
Time-value primitives for FIRECalc.

Purpose
-------
Closed-form and hybrid numeric solutions of the annual annuity growth
equation that every FIRE scenario composes:

    FV = PV·(1 + r)^n + PMT·((1 + r)^n - 1) / r

with end-of-year contributions PMT, constant rate r and n years.

Key components
--------------
- future_value:
    Accumulate a starting balance plus constant contributions.
- present_value:
    Discount a future amount back n years.
- years_to_target:
    Solve for (fractional) n given PV, PMT, r and a target. Uses the
    closed-form logarithmic inverse when its domain guard holds and falls
    back to year-by-year iteration otherwise, bounded at
    MAX_YEARS_TO_TARGET years. ``math.inf`` is the "unreachable" sentinel.

Closed form
-----------
    n = ln((PMT + target·r) / (PMT + PV·r)) / ln(1 + r)

valid when the denominator is positive and the ratio exceeds 1. Near that
boundary the expression is ill-conditioned, so those inputs take the
iterative path, which returns whole years.

Example
-------
>>> future_value(100_000, 24_000, 0.07, 1)
131000.0
>>> years_to_target(1_000_000, 0, 0.05, 500_000)
0.0
"""

from __future__ import annotations

import logging
import math

from .constants import MAX_YEARS_TO_TARGET

__all__ = [
    "future_value",
    "present_value",
    "years_to_target",
    "years_to_target_iterative",
]

logger = logging.getLogger(__name__)


def future_value(
    present_value: float,
    annual_contribution: float,
    rate: float,
    years: float,
) -> float:
    """
    Future value of a balance plus constant annual contributions.

    Parameters
    ----------
    present_value : float
        Starting balance (negative values are accepted and compound as debt).
    annual_contribution : float
        Contribution added at the end of each year.
    rate : float
        Annual rate as a decimal.
    years : float
        Number of years (fractional allowed).

    Returns
    -------
    float
        ``PV·(1+r)^n + PMT·((1+r)^n - 1)/r``, or ``PV + PMT·n`` when r == 0.
    """
    if rate == 0:
        return float(present_value + annual_contribution * years)
    compound_factor = (1.0 + rate) ** years
    return float(
        present_value * compound_factor
        + annual_contribution * ((compound_factor - 1.0) / rate)
    )


def present_value(future_value: float, rate: float, years: float) -> float:
    """Discount *future_value* by ``(1 + rate)^years``; unchanged when years <= 0."""
    if years <= 0:
        return float(future_value)
    return float(future_value / (1.0 + rate) ** years)


def years_to_target_iterative(
    present_value: float,
    annual_contribution: float,
    rate: float,
    target: float,
) -> float:
    """
    Whole years until ``current = current·(1+r) + PMT`` reaches *target*.

    Returns ``math.inf`` when MAX_YEARS_TO_TARGET iterations are exhausted.
    """
    years = 0
    current = present_value
    while current < target and years < MAX_YEARS_TO_TARGET:
        current = current * (1.0 + rate) + annual_contribution
        years += 1
    if years >= MAX_YEARS_TO_TARGET:
        logger.debug(
            "years_to_target hit the %d-year cap (PV=%s, PMT=%s, r=%s, target=%s)",
            MAX_YEARS_TO_TARGET, present_value, annual_contribution, rate, target,
        )
        return math.inf
    return float(years)


def years_to_target(
    present_value: float,
    annual_contribution: float,
    rate: float,
    target: float,
) -> float:
    """
    Years needed to grow *present_value* to *target*.

    Parameters
    ----------
    present_value : float
        Starting balance.
    annual_contribution : float
        Constant end-of-year contribution.
    rate : float
        Annual rate as a decimal (use the real return for inflation-aware solves).
    target : float
        Balance to reach.

    Returns
    -------
    float
        Fractional years, exactly ``0.0`` when already at or above target, or
        ``math.inf`` when unreachable within MAX_YEARS_TO_TARGET years.

    Notes
    -----
    - rate == 0 solves linearly; a non-positive contribution is unreachable.
    - The closed form is used only when ``PMT + PV·r > 0`` and
      ``PMT + target·r > PMT + PV·r``; otherwise iterate.
    - A closed-form result below 0 or above MAX_YEARS_TO_TARGET becomes inf.
    """
    if present_value >= target:
        return 0.0

    if rate == 0:
        if annual_contribution <= 0:
            return math.inf
        return float((target - present_value) / annual_contribution)

    numerator = annual_contribution + target * rate
    denominator = annual_contribution + present_value * rate

    if denominator <= 0 or numerator <= denominator:
        logger.debug(
            "closed form outside its domain (num=%s, den=%s); iterating", numerator, denominator
        )
        return years_to_target_iterative(present_value, annual_contribution, rate, target)

    years = math.log(numerator / denominator) / math.log(1.0 + rate)

    if years < 0 or years > MAX_YEARS_TO_TARGET:
        return math.inf

    return float(years)
