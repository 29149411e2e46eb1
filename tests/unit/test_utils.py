"""
Unit tests for utils module.

Covers validation helpers, rate/rounding helpers and display formatters.
"""

import math
from datetime import date

import pytest

from firecalc.exceptions import FireCalcError, ValidationError
from firecalc.utils import (
    check_finite,
    check_non_negative,
    check_positive,
    format_currency,
    format_percent,
    format_years,
    is_unreachable,
    real_return,
    resolve_year,
    round_half_up,
    round_years,
)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:

    def test_non_negative_accepts_zero(self):
        check_non_negative("x", 0)

    def test_non_negative_rejects_negative(self):
        with pytest.raises(ValidationError, match="x must be non-negative"):
            check_non_negative("x", -0.01)

    def test_positive_rejects_zero(self):
        with pytest.raises(ValidationError):
            check_positive("withdrawal_rate", 0.0)

    def test_finite_rejects_nan_and_inf(self):
        with pytest.raises(ValidationError):
            check_finite("values", 1.0, float("nan"))
        with pytest.raises(ValidationError):
            check_finite("values", math.inf)

    def test_validation_error_is_firecalc_error(self):
        """Callers catching the package base error see validation failures."""
        with pytest.raises(FireCalcError):
            check_positive("w", -1)


# ---------------------------------------------------------------------------
# Rates and rounding
# ---------------------------------------------------------------------------

class TestRatesAndRounding:

    def test_real_return(self):
        assert real_return(0.07, 0.03) == pytest.approx(1.07 / 1.03 - 1)

    def test_real_return_zero_inflation(self):
        assert real_return(0.05, 0.0) == pytest.approx(0.05)

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3.0), (-2.5, -2.0), (2.4999, 2.0), (1234.5, 1235.0), (0.0, 0.0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_half_up_keeps_inf(self):
        assert round_half_up(math.inf) == math.inf

    def test_round_years(self):
        assert round_years(24.46) == 24.5
        assert round_years(24.44) == 24.4
        assert round_years(math.inf) == math.inf

    def test_is_unreachable(self):
        assert is_unreachable(math.inf)
        assert not is_unreachable(99.9)
        assert not is_unreachable(-math.inf)


class TestResolveYear:

    def test_explicit_year(self):
        assert resolve_year(2030) == 2030

    def test_defaults_to_today(self):
        assert resolve_year(None) == date.today().year


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

class TestFormatters:

    def test_currency(self):
        assert format_currency(1_200_000) == "$1,200,000"
        assert format_currency(999.5) == "$1,000"

    def test_currency_negative_rounds_away_from_zero(self):
        assert format_currency(-1234.5) == "-$1,235"

    def test_currency_symbol(self):
        assert format_currency(50, symbol="€") == "€50"

    def test_currency_never(self):
        assert format_currency(math.inf) == "Never"

    def test_percent(self):
        assert format_percent(0.04) == "4.0%"
        assert format_percent(0.125) == "12.5%"

    def test_years(self):
        assert format_years(21.5) == "21.5 years"
        assert format_years(math.inf) == "Never"
        assert format_years(0.0) == "0.0 years"
