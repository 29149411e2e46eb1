"""
Pytest configuration and fixtures for FIRECalc test suite.

Fixtures provide canonical calculator inputs so individual tests only state
what they change.
"""

import json
from typing import List

import pytest

from firecalc.debt import DebtAccount
from firecalc.fire import ScenarioInputs


# ---------------------------------------------------------------------------
# Calendar Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def current_year() -> int:
    """Pinned calendar year so projections are reproducible."""
    return 2025


# ---------------------------------------------------------------------------
# Scenario Input Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_inputs() -> ScenarioInputs:
    """
    Calculator defaults.

    Age 30 → 55, 100,000 saved, 24,000/year, 7% nominal, 3% inflation,
    4% withdrawal rate, 48,000 expenses (FIRE number 1,200,000).
    """
    return ScenarioInputs(
        current_age=30,
        retirement_age=55,
        current_savings=100_000,
        annual_contribution=24_000,
        expected_return=0.07,
        inflation_rate=0.03,
        withdrawal_rate=0.04,
        annual_expenses=48_000,
    )


@pytest.fixture
def wealthy_inputs(default_inputs) -> ScenarioInputs:
    """Already past the FIRE number."""
    from dataclasses import replace
    return replace(default_inputs, current_savings=2_000_000)


@pytest.fixture
def stalled_inputs(default_inputs) -> ScenarioInputs:
    """No savings and no contributions: the target is unreachable."""
    from dataclasses import replace
    return replace(default_inputs, current_savings=0, annual_contribution=0)


# ---------------------------------------------------------------------------
# Debt Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def three_debts() -> List[DebtAccount]:
    """
    Reference debt set.

    A: 1,000 @ 20% (min 50), B: 5,000 @ 10% (min 100), C: 2,000 @ 25% (min 60).
    Snowball clears A, C, B; avalanche clears C, A, B.
    """
    return [
        DebtAccount(id="a", name="A", balance=1_000, annual_rate=0.20, min_payment=50),
        DebtAccount(id="b", name="B", balance=5_000, annual_rate=0.10, min_payment=100),
        DebtAccount(id="c", name="C", balance=2_000, annual_rate=0.25, min_payment=60),
    ]


@pytest.fixture
def debt_plan_file(tmp_path):
    """Debt plan JSON holding the reference debt set with a 300/month budget."""
    plan = {
        "debts": [
            {"id": "a", "name": "A", "balance": 1000, "annual_rate": 0.20, "min_payment": 50},
            {"id": "b", "name": "B", "balance": 5000, "annual_rate": 0.10, "min_payment": 100},
            {"id": "c", "name": "C", "balance": 2000, "annual_rate": 0.25, "min_payment": 60},
        ],
        "strategy": "avalanche",
        "monthly_payment": 300,
        "extra_payment": 0,
        "target_months": 24,
    }
    path = tmp_path / "debts.json"
    with open(path, "w") as f:
        json.dump(plan, f)
    return path
