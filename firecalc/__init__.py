"""
FIRECalc — Financial Independence / Retire Early projections

Deterministic calculators for FIRE targets, retirement drawdown,
healthcare-gap costs and debt payoff.

Modules
-------
- timevalue     : Future/present value and time-to-target solver
- projection    : Yearly portfolio projection series
- fire          : Standard, Coast, Lean, Fat, Barista, Reverse, Savings-Rate, Growth
- withdrawal    : Withdrawal longevity and rate sensitivity
- healthcare    : Pre-Medicare healthcare cost estimates
- advisor       : FIRE-path recommendation
- debt          : Snowball/avalanche debt payoff and timeline solver
- scenario      : Request types and dispatch
- serialization : JSON persistence and tabular export
- utils         : Validation, rounding and formatting helpers

"""

__version__ = "0.1.0"

from .fire import (
    ScenarioInputs,
    calculate_standard_fire,
    calculate_coast_fire,
    calculate_lean_fire,
    calculate_fat_fire,
    calculate_barista_fire,
    calculate_reverse_fire,
    calculate_savings_rate,
    calculate_investment_growth,
)
from .withdrawal import calculate_withdrawal
from .healthcare import calculate_healthcare_gap
from .advisor import QuizAnswers, recommend_fire_path
from .debt import (
    DebtAccount,
    calculate_snowball_payoff,
    calculate_avalanche_payoff,
    calculate_debt_payoff_by_timeline,
)
from .scenario import run_scenario
from . import utils

__all__ = [
    "__version__",
    "ScenarioInputs",
    "calculate_standard_fire",
    "calculate_coast_fire",
    "calculate_lean_fire",
    "calculate_fat_fire",
    "calculate_barista_fire",
    "calculate_reverse_fire",
    "calculate_savings_rate",
    "calculate_investment_growth",
    "calculate_withdrawal",
    "calculate_healthcare_gap",
    "QuizAnswers",
    "recommend_fire_path",
    "DebtAccount",
    "calculate_snowball_payoff",
    "calculate_avalanche_payoff",
    "calculate_debt_payoff_by_timeline",
    "run_scenario",
    "utils",
]
