"""
Unit tests for withdrawal module.
"""

import pytest

from firecalc.exceptions import ValidationError
from firecalc.withdrawal import (
    RateAnalysis,
    calculate_withdrawal,
    sensitivity_to_frame,
    withdrawal_to_frame,
)


class TestCalculateWithdrawal:

    def test_four_percent_rule_lasts(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30)
        assert res.portfolio_longevity == 30
        assert res.success_rate == 1.0
        assert res.annual_withdrawal == 40_000
        assert res.monthly_withdrawal == 3_333
        assert len(res.withdrawal_projections) == 31

    def test_first_row_is_start_of_retirement(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30)
        first, second = res.withdrawal_projections[:2]
        assert (first.year, first.balance, first.withdrawal) == (0, 1_000_000, 40_000)
        assert second.balance == 1_030_000
        assert second.withdrawal == 41_200

    def test_depletion(self):
        """10% a year with no growth runs out after ten withdrawals."""
        res = calculate_withdrawal(1_000_000, 0.10, 0.0, 0.0, 30)
        assert res.portfolio_longevity == 9
        assert res.success_rate == pytest.approx(9 / 30)
        assert res.ending_balance == 100_000
        assert [r.year for r in res.withdrawal_projections] == list(range(10))

    def test_balances_positive(self):
        res = calculate_withdrawal(500_000, 0.08, 0.04, 0.03, 40)
        assert all(r.balance > 0 for r in res.withdrawal_projections)
        assert res.success_rate <= 1.0

    def test_empty_portfolio(self):
        res = calculate_withdrawal(0, 0.04, 0.07, 0.03, 30)
        assert res.portfolio_longevity == 0
        assert res.withdrawal_projections == []
        assert res.ending_balance == 0.0
        assert res.success_rate == 0.0

    def test_zero_horizon(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 0)
        assert res.portfolio_longevity == 0
        assert res.success_rate == 1.0
        assert len(res.withdrawal_projections) == 1

    def test_negative_portfolio_rejected(self):
        with pytest.raises(ValidationError):
            calculate_withdrawal(-1, 0.04, 0.07, 0.03, 30)


class TestSensitivity:

    def test_rates_and_order(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30)
        assert [a.rate for a in res.rate_analysis] == [0.03, 0.035, 0.04, 0.045, 0.05]
        assert all(isinstance(a, RateAnalysis) for a in res.rate_analysis)

    def test_capped_at_fifty_years(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30)
        assert res.rate_analysis[0].years == 50
        assert all(a.years <= 50 for a in res.rate_analysis)

    def test_higher_rate_never_lasts_longer(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.03, 0.03, 30)
        years = [a.years for a in res.rate_analysis]
        assert all(a >= b for a, b in zip(years, years[1:]))

    def test_end_balance_non_negative(self):
        res = calculate_withdrawal(200_000, 0.04, 0.0, 0.05, 30)
        assert all(a.end_balance >= 0 for a in res.rate_analysis)


class TestFrames:

    def test_frames(self):
        res = calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 5)
        df = withdrawal_to_frame(res)
        assert list(df.columns) == ["year", "balance", "withdrawal"]
        assert len(df) == 6
        sens = sensitivity_to_frame(res)
        assert list(sens.columns) == ["rate", "years", "end_balance"]
        assert len(sens) == 5
