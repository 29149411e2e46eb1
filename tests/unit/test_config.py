"""
Unit tests for config module.

Tests Pydantic models for configuration validation:
- ScenarioInputsConfig
- DebtAccountConfig / DebtPlanConfig
- Reverse, savings-rate and growth request params
- Saved debt request params
- WithdrawalInputsConfig / HealthcareInputsConfig
- AppSettings
"""

import pytest
from pydantic import ValidationError

from firecalc.config import (
    CONFIG_MODELS,
    AppSettings,
    DebtAccountConfig,
    DebtPayoffInputsConfig,
    DebtPlanConfig,
    DebtTimelineInputsConfig,
    GrowthInputsConfig,
    HealthcareInputsConfig,
    ReverseInputsConfig,
    SavingsRateInputsConfig,
    ScenarioInputsConfig,
    WithdrawalInputsConfig,
)
from firecalc.fire import ScenarioInputs
from firecalc.healthcare import calculate_healthcare_gap
from firecalc.withdrawal import calculate_withdrawal


# ---------------------------------------------------------------------------
# ScenarioInputsConfig
# ---------------------------------------------------------------------------

class TestScenarioInputsConfig:

    def test_defaults(self):
        cfg = ScenarioInputsConfig()
        assert cfg.current_age == 30
        assert cfg.retirement_age == 55
        assert cfg.annual_expenses == 48_000
        assert cfg.withdrawal_rate == 0.04

    def test_to_inputs(self, default_inputs):
        assert ScenarioInputsConfig().to_inputs() == default_inputs
        assert isinstance(ScenarioInputsConfig().to_inputs(), ScenarioInputs)

    def test_zero_withdrawal_rate_rejected(self):
        with pytest.raises(ValidationError):
            ScenarioInputsConfig(withdrawal_rate=0)

    def test_negative_contribution_rejected(self):
        with pytest.raises(ValidationError):
            ScenarioInputsConfig(annual_contribution=-100)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            ScenarioInputsConfig(salary=90_000)

    def test_immutable(self):
        cfg = ScenarioInputsConfig()
        with pytest.raises(ValidationError):
            cfg.current_age = 40

    def test_json_round_trip(self):
        cfg = ScenarioInputsConfig(current_age=35, annual_expenses=60_000)
        assert ScenarioInputsConfig.model_validate_json(cfg.model_dump_json()) == cfg


# ---------------------------------------------------------------------------
# Debt
# ---------------------------------------------------------------------------

def _debt(id_: str, **kw) -> dict:
    base = {"id": id_, "balance": 1_000, "annual_rate": 0.1, "min_payment": 25}
    base.update(kw)
    return base


class TestDebtConfigs:

    def test_name_optional(self):
        cfg = DebtAccountConfig(**_debt("loan"))
        assert cfg.name == ""
        assert cfg.to_account().label == "loan"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            DebtAccountConfig(**_debt(""))

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            DebtAccountConfig(**_debt("x", annual_rate=-0.01))

    def test_plan_defaults(self):
        plan = DebtPlanConfig(debts=[_debt("a")])
        assert plan.strategy == "avalanche"
        assert plan.monthly_payment == 1_000
        assert plan.extra_payment == 0
        assert plan.target_months == 36

    def test_plan_requires_debts(self):
        with pytest.raises(ValidationError):
            DebtPlanConfig(debts=[])

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate debt ids"):
            DebtPlanConfig(debts=[_debt("a"), _debt("a")])

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            DebtPlanConfig(debts=[_debt("a")], strategy="blizzard")

    @pytest.mark.parametrize("months", [0, 601])
    def test_target_months_range(self, months):
        with pytest.raises(ValidationError):
            DebtPlanConfig(debts=[_debt("a")], target_months=months)

    def test_to_accounts_keeps_order(self):
        plan = DebtPlanConfig(debts=[_debt("b"), _debt("a")])
        assert [d.id for d in plan.to_accounts()] == ["b", "a"]

    def test_payoff_request_kwargs(self):
        cfg = DebtPayoffInputsConfig(debts=[_debt("a"), _debt("b")], strategy="snowball",
                                     monthly_payment=300)
        kwargs = cfg.to_kwargs()
        assert isinstance(kwargs["debts"], tuple)
        assert [d.id for d in kwargs["debts"]] == ["a", "b"]
        assert kwargs["extra_payment"] == 0.0

    def test_timeline_request_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate debt ids"):
            DebtTimelineInputsConfig(debts=[_debt("a"), _debt("a")], target_months=12,
                                     strategy="avalanche")


# ---------------------------------------------------------------------------
# Withdrawal / healthcare
# ---------------------------------------------------------------------------

class TestCalculatorConfigs:

    def test_withdrawal_kwargs(self):
        res = calculate_withdrawal(**WithdrawalInputsConfig().to_kwargs())
        assert res.portfolio_longevity == 30

    def test_withdrawal_horizon_range(self):
        with pytest.raises(ValidationError):
            WithdrawalInputsConfig(retirement_years=-1)

    def test_healthcare_kwargs(self):
        cfg = HealthcareInputsConfig(inflation_rate=0.0)
        res = calculate_healthcare_gap(**cfg.to_kwargs(), current_year=2025)
        assert res.total_cost == 117_000

    def test_reverse_has_no_contribution(self):
        with pytest.raises(ValidationError):
            ReverseInputsConfig(annual_contribution=24_000)
        assert "annual_contribution" not in ReverseInputsConfig().to_kwargs()

    def test_savings_rate_requires_income(self):
        with pytest.raises(ValidationError):
            SavingsRateInputsConfig()
        assert SavingsRateInputsConfig(annual_income="100000").annual_income == 100_000

    def test_growth_frequency_checked(self):
        with pytest.raises(ValidationError):
            GrowthInputsConfig(initial_investment=0, contribution_amount=100, years=5,
                               contribution_frequency="weekly")

    def test_config_models(self):
        assert set(CONFIG_MODELS) == {"inputs", "debt", "withdrawal", "healthcare"}


# ---------------------------------------------------------------------------
# AppSettings
# ---------------------------------------------------------------------------

class TestAppSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FIRECALC_LOG_LEVEL", raising=False)
        monkeypatch.delenv("FIRECALC_CURRENT_YEAR", raising=False)
        settings = AppSettings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.currency_symbol == "$"
        assert settings.current_year is None

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FIRECALC_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FIRECALC_CURRENT_YEAR", "2030")
        settings = AppSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.current_year == 2030

    def test_invalid_level_rejected(self, monkeypatch):
        monkeypatch.setenv("FIRECALC_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
