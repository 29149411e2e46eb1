"""
Unit tests for serialization module.

Tests request round-trips, version and kind checks, JSON-safe result
conversion and trajectory export.
"""

import json

import pandas as pd
import pytest
from pydantic import ValidationError as PydanticValidationError

from firecalc.advisor import QuizAnswers, recommend_fire_path
from firecalc.debt import calculate_debt_payoff_by_timeline, calculate_snowball_payoff
from firecalc.exceptions import ConfigurationError
from firecalc.fire import calculate_coast_fire, calculate_standard_fire
from firecalc.healthcare import calculate_healthcare_gap
from firecalc.scenario import (
    BaristaRequest,
    DebtPayoffRequest,
    DebtTimelineRequest,
    HealthcareRequest,
    InvestmentGrowthRequest,
    ReverseRequest,
    SavingsRateRequest,
    StandardRequest,
    WithdrawalRequest,
)
from firecalc.serialization import (
    SCHEMA_VERSION,
    load_request,
    request_from_dict,
    request_to_dict,
    result_to_dict,
    result_to_frame,
    save_request,
    save_result,
)
from firecalc.withdrawal import calculate_withdrawal


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class TestRequestDocuments:

    def test_document_layout(self, default_inputs):
        doc = request_to_dict(BaristaRequest(default_inputs, 15_000))
        assert doc["schema_version"] == SCHEMA_VERSION
        assert doc["kind"] == "barista"
        assert doc["params"]["part_time_income"] == 15_000
        assert doc["params"]["inputs"]["annual_expenses"] == 48_000

    def test_debts_written_as_list(self, three_debts):
        doc = request_to_dict(DebtPayoffRequest(tuple(three_debts), "snowball", 300))
        assert [d["id"] for d in doc["params"]["debts"]] == ["a", "b", "c"]
        json.dumps(doc)

    @pytest.mark.parametrize("make", [
        lambda inputs, debts: StandardRequest(inputs),
        lambda inputs, debts: BaristaRequest(inputs, 12_000),
        lambda inputs, debts: ReverseRequest.from_inputs(inputs),
        lambda inputs, debts: SavingsRateRequest(30, 100_000.0, 60_000.0, 50_000.0, 0.07, 0.03, 0.04),
        lambda inputs, debts: WithdrawalRequest(1_000_000.0, 0.04, 0.07, 0.03, 30),
        lambda inputs, debts: HealthcareRequest(30, 55, 0.05),
        lambda inputs, debts: InvestmentGrowthRequest(0.0, 500.0, "quarterly", 10, 0.06, 0.02),
        lambda inputs, debts: DebtPayoffRequest(tuple(debts), "avalanche", 300.0, 50.0),
        lambda inputs, debts: DebtTimelineRequest(tuple(debts), 24, "snowball"),
    ])
    def test_file_round_trip(self, tmp_path, default_inputs, three_debts, make):
        req = make(default_inputs, three_debts)
        path = tmp_path / "nested" / "request.json"
        save_request(req, path)
        assert load_request(path) == req

    def test_schema_mismatch_rejected(self, default_inputs):
        doc = request_to_dict(StandardRequest(default_inputs))
        doc["schema_version"] = "9.9.9"
        with pytest.raises(ConfigurationError, match="schema version"):
            request_from_dict(doc)

    def test_missing_schema_rejected(self, default_inputs):
        doc = request_to_dict(StandardRequest(default_inputs))
        del doc["schema_version"]
        with pytest.raises(ConfigurationError):
            request_from_dict(doc)

    def test_unknown_kind(self):
        with pytest.raises(ConfigurationError, match="Unknown scenario kind"):
            request_from_dict({"schema_version": SCHEMA_VERSION, "kind": "yolo", "params": {}})

    def test_unexpected_parameter(self, default_inputs):
        doc = request_to_dict(StandardRequest(default_inputs))
        doc["params"]["bonus"] = 1
        with pytest.raises(ConfigurationError, match="Invalid parameters"):
            request_from_dict(doc)

    def test_invalid_inputs(self, default_inputs):
        doc = request_to_dict(StandardRequest(default_inputs))
        doc["params"]["inputs"]["withdrawal_rate"] = 0
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)

    def test_debt_name_may_be_omitted(self):
        doc = {
            "schema_version": SCHEMA_VERSION,
            "kind": "debt-timeline",
            "params": {
                "debts": [{"id": "loan", "balance": 500, "annual_rate": 0, "min_payment": 50}],
                "target_months": 12,
                "strategy": "snowball",
            },
        }
        req = request_from_dict(doc)
        assert req.debts[0].label == "loan"

    def test_growth_years_must_be_numeric(self):
        doc = request_to_dict(InvestmentGrowthRequest(0.0, 500.0, "monthly", 10, 0.06, 0.02))
        doc["params"]["years"] = "ten"
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)

    def test_savings_rate_income_must_be_numeric(self):
        doc = request_to_dict(SavingsRateRequest(30, 100_000.0, 60_000.0, 0.0, 0.07, 0.03, 0.04))
        doc["params"]["annual_income"] = "lots"
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)

    def test_debt_strategy_validated(self, three_debts):
        doc = request_to_dict(DebtPayoffRequest(tuple(three_debts), "snowball", 300))
        doc["params"]["strategy"] = "blizzard"
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)

    def test_debt_target_months_must_be_numeric(self, three_debts):
        doc = request_to_dict(DebtTimelineRequest(tuple(three_debts), 24, "snowball"))
        doc["params"]["target_months"] = "soon"
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)

    def test_reverse_rejects_contribution(self, default_inputs):
        doc = request_to_dict(ReverseRequest.from_inputs(default_inputs))
        assert "annual_contribution" not in doc["params"]
        doc["params"]["annual_contribution"] = 24_000
        with pytest.raises(PydanticValidationError):
            request_from_dict(doc)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TestResultToDict:

    def test_unreachable_becomes_null(self, stalled_inputs, current_year):
        d = result_to_dict(calculate_standard_fire(stalled_inputs, current_year=current_year))
        assert d["years_to_fire"] is None
        assert d["fire_age"] is None
        assert d["projections"][0]["age"] == 30

    def test_json_serializable(self, default_inputs, current_year):
        d = result_to_dict(calculate_coast_fire(default_inputs, current_year=current_year))
        parsed = json.loads(json.dumps(d, allow_nan=False))
        assert parsed["coast_number"] == d["coast_number"]

    def test_float_keys_become_strings(self, current_year):
        d = result_to_dict(calculate_healthcare_gap(30, 55, 0.0, current_year=current_year))
        assert d["subsidies"] == {"30000": 5_850, "50000": 3_510, "75000": 1_755}

    def test_tuples_become_lists(self, three_debts):
        d = result_to_dict(calculate_snowball_payoff(three_debts, 300))
        assert isinstance(d["milestones"][0], list)

    def test_none(self):
        assert result_to_dict(None) == {}

    def test_save_result(self, tmp_path):
        path = tmp_path / "out" / "withdrawal.json"
        save_result(calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30), path)
        with open(path) as f:
            doc = json.load(f)
        assert doc["schema_version"] == SCHEMA_VERSION
        assert doc["result"]["portfolio_longevity"] == 30


class TestResultToFrame:

    def test_fire_projections(self, default_inputs, current_year):
        df = result_to_frame(calculate_standard_fire(default_inputs, current_year=current_year))
        assert isinstance(df, pd.DataFrame)
        assert df["calendar_year"].iloc[0] == current_year

    def test_withdrawal_rows(self):
        df = result_to_frame(calculate_withdrawal(1_000_000, 0.04, 0.07, 0.03, 30))
        assert len(df) == 31

    def test_debt_schedule(self, three_debts):
        res = calculate_snowball_payoff(three_debts, 300)
        assert len(result_to_frame(res)) == res.total_months

    def test_timeline_schedule(self, three_debts):
        found = calculate_debt_payoff_by_timeline(three_debts, 24, "avalanche")
        assert len(result_to_frame(found)) == found.result.total_months

    def test_healthcare_breakdown(self, current_year):
        df = result_to_frame(calculate_healthcare_gap(30, 55, 0.03, current_year=current_year))
        assert len(df) == 10
        assert "premium" in df.columns

    def test_no_trajectory(self):
        with pytest.raises(ConfigurationError):
            result_to_frame(recommend_fire_path(QuizAnswers()))
