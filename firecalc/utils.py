"""General utilities for FIRECalc

Contents
--------
- Validation helpers
- Rate helpers (real return)
- Rounding helpers (half-up money rounding, one-decimal years)
- Calendar helper (injected current year)
- Display formatters (currency, percent, years)
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

import numpy as np

from .exceptions import ValidationError

__all__ = [
    # Validation
    "check_non_negative",
    "check_positive",
    "check_finite",
    # Rates
    "real_return",
    # Rounding
    "round_half_up",
    "round_years",
    "is_unreachable",
    # Calendar
    "resolve_year",
    # Formatters
    "format_currency",
    "format_percent",
    "format_years",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    if value < 0:
        raise ValidationError(f"{name} must be non-negative (got {value}).")


def check_positive(name: str, value: float) -> None:
    """Raise if *value* is zero or negative."""
    if not value > 0:
        raise ValidationError(f"{name} must be positive (got {value}).")


def check_finite(name: str, *values: float) -> None:
    """Raise if any of *values* is NaN or infinite."""
    arr = np.asarray(values, dtype=float)
    if not np.isfinite(arr).all():
        raise ValidationError(f"{name} must contain only finite values (got {values}).")


# ---------------------------------------------------------------------------
# Rates
# ---------------------------------------------------------------------------

def real_return(nominal_return: float, inflation_rate: float) -> float:
    """Inflation-adjusted return: (1 + nominal) / (1 + inflation) - 1."""
    return (1.0 + nominal_return) / (1.0 + inflation_rate) - 1.0


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves toward +infinity.

    Non-finite values (the ``inf`` "unreachable" sentinel) pass through.

    >>> round_half_up(2.5), round_half_up(-2.5)
    (3.0, -2.0)
    """
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_years(value: float) -> float:
    """Round a duration in years to one decimal place (``inf`` preserved)."""
    if not math.isfinite(value):
        return value
    return round_half_up(value * 10.0) / 10.0


def is_unreachable(years: float) -> bool:
    """True when a time-to-target result is the ``inf`` sentinel."""
    return math.isinf(years) and years > 0


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

def resolve_year(current_year: Optional[int]) -> int:
    """Return *current_year* if given, else the system calendar year."""
    if current_year is not None:
        return int(current_year)
    return date.today().year


# ---------------------------------------------------------------------------
# Display formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, symbol: str = "$") -> str:
    """
    Format a monetary value as whole currency units with thousands separators.

    Halves round away from zero. The ``inf`` sentinel formats as "Never".

    Examples
    --------
    >>> format_currency(1_200_000)
    '$1,200,000'
    >>> format_currency(-1234.5)
    '-$1,235'
    """
    if math.isnan(value):
        return "—"
    if math.isinf(value):
        return "Never"
    units = int(math.floor(abs(value) + 0.5))
    sign = "-" if value < 0 and units != 0 else ""
    return f"{sign}{symbol}{units:,}"


def format_percent(value: float) -> str:
    """Format a decimal rate as a percentage with one decimal: 0.04 -> '4.0%'."""
    if not math.isfinite(value):
        return "—"
    return f"{value * 100:.1f}%"


def format_years(value: float) -> str:
    """Format a duration in years; the unreachable sentinel becomes 'Never'."""
    if math.isnan(value):
        return "—"
    if is_unreachable(value):
        return "Never"
    return f"{value:.1f} years"
