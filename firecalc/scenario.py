"""
Scenario requests and dispatch for FIRECalc.

Purpose
-------
One immutable request type per calculator, each carrying exactly the inputs
its formula needs, and a single ``run_scenario`` entry point that routes a
request to its calculator. Requests are tagged with a ``kind`` string used by
serialization and the CLI.

Key components
--------------
- StandardRequest, CoastRequest, LeanRequest, FatRequest: wrap ScenarioInputs.
- ReverseRequest: ScenarioInputs fields minus the annual contribution.
- BaristaRequest: ScenarioInputs plus part-time income.
- SavingsRateRequest, InvestmentGrowthRequest, WithdrawalRequest,
  HealthcareRequest: stand-alone inputs.
- DebtPayoffRequest, DebtTimelineRequest: debts plus budget or target.
- REQUEST_TYPES: kind → request class.
- run_scenario: dispatch.

Example
-------
>>> from firecalc.fire import ScenarioInputs
>>> req = StandardRequest(ScenarioInputs(30, 55, 100_000, 24_000, 0.07, 0.03, 0.04, 48_000))
>>> run_scenario(req, current_year=2025).fire_number
1200000.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Type, Union

from .constants import DEFAULT_PART_TIME_INCOME, MEDICARE_AGE
from .debt import DebtAccount, calculate_debt_payoff_by_timeline, calculate_payoff, check_budget
from .exceptions import ConfigurationError
from .fire import (
    ScenarioInputs,
    calculate_barista_fire,
    calculate_coast_fire,
    calculate_fat_fire,
    calculate_investment_growth,
    calculate_lean_fire,
    calculate_reverse_fire,
    calculate_savings_rate,
    calculate_standard_fire,
)
from .healthcare import (
    DEFAULT_ANNUAL_DEDUCTIBLE,
    DEFAULT_ANNUAL_OUT_OF_POCKET,
    DEFAULT_MONTHLY_PREMIUM,
    calculate_healthcare_gap,
)
from .withdrawal import calculate_withdrawal

__all__ = [
    "StandardRequest",
    "CoastRequest",
    "LeanRequest",
    "FatRequest",
    "BaristaRequest",
    "ReverseRequest",
    "SavingsRateRequest",
    "InvestmentGrowthRequest",
    "WithdrawalRequest",
    "HealthcareRequest",
    "DebtPayoffRequest",
    "DebtTimelineRequest",
    "ScenarioRequest",
    "REQUEST_TYPES",
    "run_scenario",
]


# ---------------------------------------------------------------------------
# FIRE requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StandardRequest:
    kind: ClassVar[str] = "standard"
    inputs: ScenarioInputs


@dataclass(frozen=True)
class CoastRequest:
    kind: ClassVar[str] = "coast"
    inputs: ScenarioInputs


@dataclass(frozen=True)
class LeanRequest:
    kind: ClassVar[str] = "lean"
    inputs: ScenarioInputs


@dataclass(frozen=True)
class FatRequest:
    kind: ClassVar[str] = "fat"
    inputs: ScenarioInputs


@dataclass(frozen=True)
class BaristaRequest:
    kind: ClassVar[str] = "barista"
    inputs: ScenarioInputs
    part_time_income: float = DEFAULT_PART_TIME_INCOME


@dataclass(frozen=True)
class ReverseRequest:
    """Reverse FIRE solves for the contribution, so it takes none as input."""
    kind: ClassVar[str] = "reverse"
    current_age: int
    retirement_age: int
    current_savings: float
    expected_return: float
    inflation_rate: float
    withdrawal_rate: float
    annual_expenses: float

    @classmethod
    def from_inputs(cls, inputs: ScenarioInputs) -> ReverseRequest:
        """Drop ``inputs.annual_contribution``."""
        return cls(
            inputs.current_age, inputs.retirement_age, inputs.current_savings,
            inputs.expected_return, inputs.inflation_rate, inputs.withdrawal_rate,
            inputs.annual_expenses,
        )

    def to_inputs(self) -> ScenarioInputs:
        return ScenarioInputs(
            current_age=self.current_age,
            retirement_age=self.retirement_age,
            current_savings=self.current_savings,
            annual_contribution=0.0,
            expected_return=self.expected_return,
            inflation_rate=self.inflation_rate,
            withdrawal_rate=self.withdrawal_rate,
            annual_expenses=self.annual_expenses,
        )


@dataclass(frozen=True)
class SavingsRateRequest:
    kind: ClassVar[str] = "savings-rate"
    current_age: int
    annual_income: float
    annual_expenses: float
    current_savings: float
    expected_return: float
    inflation_rate: float
    withdrawal_rate: float


@dataclass(frozen=True)
class InvestmentGrowthRequest:
    kind: ClassVar[str] = "growth"
    initial_investment: float
    contribution_amount: float
    contribution_frequency: str
    years: int
    expected_return: float
    inflation_rate: float
    current_age: int = 0
    annual_income: Optional[float] = None


@dataclass(frozen=True)
class WithdrawalRequest:
    kind: ClassVar[str] = "withdrawal"
    portfolio_value: float
    withdrawal_rate: float
    expected_return: float
    inflation_rate: float
    retirement_years: int


@dataclass(frozen=True)
class HealthcareRequest:
    kind: ClassVar[str] = "healthcare"
    current_age: int
    early_retirement_age: int
    inflation_rate: float
    medicare_age: int = MEDICARE_AGE
    monthly_premium: float = DEFAULT_MONTHLY_PREMIUM
    annual_deductible: float = DEFAULT_ANNUAL_DEDUCTIBLE
    annual_out_of_pocket: float = DEFAULT_ANNUAL_OUT_OF_POCKET


# ---------------------------------------------------------------------------
# Debt requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DebtPayoffRequest:
    """Fixed-budget payoff; the budget must cover the total minimum payments."""
    kind: ClassVar[str] = "debt-payoff"
    debts: Tuple[DebtAccount, ...]
    strategy: str
    monthly_payment: float
    extra_payment: float = 0.0


@dataclass(frozen=True)
class DebtTimelineRequest:
    kind: ClassVar[str] = "debt-timeline"
    debts: Tuple[DebtAccount, ...]
    target_months: int
    strategy: str
    extra_payment: float = 0.0


ScenarioRequest = Union[
    StandardRequest,
    CoastRequest,
    LeanRequest,
    FatRequest,
    BaristaRequest,
    ReverseRequest,
    SavingsRateRequest,
    InvestmentGrowthRequest,
    WithdrawalRequest,
    HealthcareRequest,
    DebtPayoffRequest,
    DebtTimelineRequest,
]

REQUEST_TYPES: Dict[str, Type[Any]] = {
    cls.kind: cls
    for cls in (
        StandardRequest, CoastRequest, LeanRequest, FatRequest, BaristaRequest,
        ReverseRequest, SavingsRateRequest, InvestmentGrowthRequest,
        WithdrawalRequest, HealthcareRequest, DebtPayoffRequest, DebtTimelineRequest,
    )
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _run_debt_payoff(req: DebtPayoffRequest, current_year: Optional[int]):
    check_budget(req.debts, req.monthly_payment + req.extra_payment)
    return calculate_payoff(req.debts, req.strategy, req.monthly_payment, req.extra_payment)


_HANDLERS: Dict[type, Callable[[Any, Optional[int]], Any]] = {
    StandardRequest: lambda r, y: calculate_standard_fire(r.inputs, current_year=y),
    CoastRequest: lambda r, y: calculate_coast_fire(r.inputs, current_year=y),
    LeanRequest: lambda r, y: calculate_lean_fire(r.inputs, current_year=y),
    FatRequest: lambda r, y: calculate_fat_fire(r.inputs, current_year=y),
    BaristaRequest: lambda r, y: calculate_barista_fire(
        r.inputs, r.part_time_income, current_year=y
    ),
    ReverseRequest: lambda r, y: calculate_reverse_fire(r.to_inputs(), current_year=y),
    SavingsRateRequest: lambda r, y: calculate_savings_rate(
        r.annual_income, r.annual_expenses, r.current_savings, r.expected_return,
        r.inflation_rate, r.withdrawal_rate, current_age=r.current_age, current_year=y,
    ),
    InvestmentGrowthRequest: lambda r, y: calculate_investment_growth(
        r.initial_investment, r.contribution_amount, r.contribution_frequency, r.years,
        r.expected_return, r.inflation_rate,
        current_age=r.current_age, annual_income=r.annual_income, current_year=y,
    ),
    WithdrawalRequest: lambda r, y: calculate_withdrawal(
        r.portfolio_value, r.withdrawal_rate, r.expected_return, r.inflation_rate,
        r.retirement_years,
    ),
    HealthcareRequest: lambda r, y: calculate_healthcare_gap(
        r.current_age, r.early_retirement_age, r.inflation_rate,
        medicare_age=r.medicare_age, monthly_premium=r.monthly_premium,
        annual_deductible=r.annual_deductible, annual_out_of_pocket=r.annual_out_of_pocket,
        current_year=y,
    ),
    DebtPayoffRequest: _run_debt_payoff,
    DebtTimelineRequest: lambda r, y: calculate_debt_payoff_by_timeline(
        r.debts, r.target_months, r.strategy, r.extra_payment
    ),
}


def run_scenario(request: ScenarioRequest, *, current_year: Optional[int] = None):
    """
    Run the calculator matching *request*.

    Parameters
    ----------
    request : ScenarioRequest
        Any of the request types in this module.
    current_year : int, optional
        Calendar year for projection labels; defaults to the system year.

    Returns
    -------
    The calculator's result record (``None`` for an unsolvable debt timeline).

    Raises
    ------
    ConfigurationError
        If *request* is not a known request type.
    InfeasibleError
        If a fixed-budget debt request cannot cover the minimum payments.
    """
    handler = _HANDLERS.get(type(request))
    if handler is None:
        raise ConfigurationError(f"Unknown scenario request type: {type(request).__name__}")
    return handler(request, current_year)
