"""
Unit tests for scenario module.
"""

from dataclasses import fields

import pytest

from firecalc.debt import DebtPayoffResult, TimelineResult
from firecalc.exceptions import ConfigurationError, InfeasibleError
from firecalc.fire import (
    CoastFireResult,
    StandardFireResult,
    calculate_barista_fire,
    calculate_reverse_fire,
    calculate_standard_fire,
)
from firecalc.healthcare import HealthcareGapResult
from firecalc.scenario import (
    REQUEST_TYPES,
    BaristaRequest,
    CoastRequest,
    DebtPayoffRequest,
    DebtTimelineRequest,
    FatRequest,
    HealthcareRequest,
    InvestmentGrowthRequest,
    LeanRequest,
    ReverseRequest,
    SavingsRateRequest,
    StandardRequest,
    WithdrawalRequest,
    run_scenario,
)
from firecalc.withdrawal import WithdrawalResult


class TestRequestTypes:

    def test_kinds_are_unique(self):
        assert len(REQUEST_TYPES) == 12
        assert REQUEST_TYPES["debt-payoff"] is DebtPayoffRequest
        assert REQUEST_TYPES["savings-rate"] is SavingsRateRequest

    def test_requests_are_immutable(self, default_inputs):
        req = StandardRequest(default_inputs)
        with pytest.raises(AttributeError):
            req.inputs = default_inputs


class TestRunScenario:

    def test_standard(self, default_inputs, current_year):
        res = run_scenario(StandardRequest(default_inputs), current_year=current_year)
        assert isinstance(res, StandardFireResult)
        assert res == calculate_standard_fire(default_inputs, current_year=current_year)

    def test_coast(self, default_inputs, current_year):
        res = run_scenario(CoastRequest(default_inputs), current_year=current_year)
        assert isinstance(res, CoastFireResult)

    def test_lean_and_fat(self, default_inputs):
        assert run_scenario(LeanRequest(default_inputs)).is_lean is False
        assert run_scenario(FatRequest(default_inputs)).is_fat is False

    def test_barista_default_income(self, default_inputs, current_year):
        res = run_scenario(BaristaRequest(default_inputs), current_year=current_year)
        assert res == calculate_barista_fire(default_inputs, 20_000, current_year=current_year)

    def test_reverse(self, default_inputs):
        assert run_scenario(ReverseRequest.from_inputs(default_inputs)).years_to_fire == 25

    def test_reverse_declares_no_contribution(self, default_inputs, current_year):
        req = ReverseRequest.from_inputs(default_inputs)
        assert "annual_contribution" not in {f.name for f in fields(req)}
        assert req.to_inputs().annual_contribution == 0.0
        assert run_scenario(req, current_year=current_year) == calculate_reverse_fire(
            default_inputs, current_year=current_year
        )

    def test_savings_rate(self):
        req = SavingsRateRequest(30, 100_000, 60_000, 50_000, 0.07, 0.03, 0.04)
        assert run_scenario(req).savings_rate == pytest.approx(0.4)

    def test_growth(self):
        req = InvestmentGrowthRequest(10_000, 500, "monthly", 10, 0.07, 0.03)
        assert run_scenario(req).annual_contribution == 6_000

    def test_growth_unknown_frequency(self):
        req = InvestmentGrowthRequest(10_000, 500, "daily", 10, 0.07, 0.03)
        with pytest.raises(ConfigurationError):
            run_scenario(req)

    def test_withdrawal(self):
        res = run_scenario(WithdrawalRequest(1_000_000, 0.04, 0.07, 0.03, 30))
        assert isinstance(res, WithdrawalResult)
        assert res.portfolio_longevity == 30

    def test_healthcare(self, current_year):
        res = run_scenario(HealthcareRequest(30, 55, 0.0), current_year=current_year)
        assert isinstance(res, HealthcareGapResult)
        assert res.total_cost == 117_000

    def test_debt_payoff(self, three_debts):
        res = run_scenario(DebtPayoffRequest(tuple(three_debts), "snowball", 300))
        assert isinstance(res, DebtPayoffResult)
        assert res.payoff_order == ["A", "C", "B"]

    def test_debt_payoff_budget_checked(self, three_debts):
        with pytest.raises(InfeasibleError):
            run_scenario(DebtPayoffRequest(tuple(three_debts), "avalanche", 100))

    def test_debt_payoff_extra_counts_toward_budget(self, three_debts):
        res = run_scenario(DebtPayoffRequest(tuple(three_debts), "avalanche", 200, 100))
        assert res.paid_off

    def test_debt_timeline(self, three_debts):
        res = run_scenario(DebtTimelineRequest(tuple(three_debts), 24, "avalanche"))
        assert isinstance(res, TimelineResult)
        assert res.result.total_months <= 24

    def test_debt_timeline_unsolvable(self, three_debts):
        assert run_scenario(DebtTimelineRequest(tuple(three_debts), 1, "avalanche")) is None

    def test_unknown_request(self):
        with pytest.raises(ConfigurationError, match="Unknown scenario request"):
            run_scenario(object())
