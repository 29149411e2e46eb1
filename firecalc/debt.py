"""
Debt amortization engine for FIRECalc.

Purpose
-------
Month-by-month payoff simulation of several debts under a fixed monthly
budget, using the snowball (smallest balance first) or avalanche (highest
rate first) ordering, plus a budget solver for a target payoff timeline.

Monthly transition
------------------
For accounts in fixed priority order, with balance B and annual rate a:

1. Minimum pass, per active account:
       interest  = B·a/12
       payment   = min(min_payment, B + interest)
       principal = max(0, payment - interest)
   The budget is reduced by each payment.
2. Waterfall: any remaining budget goes to the first still-active account,
   which is charged a second month of interest on its post-minimum balance:
       interest  = B·a/12
       payment   = min(remaining, B + interest)
       principal = max(0, payment - interest)
3. An account reaching 0 is recorded once, in the month it clears.

Balances live in an immutable PayoffState arena indexed by priority position;
the caller's DebtAccount objects are never modified.

Key components
--------------
- DebtAccount, PayoffState, DebtPayoffMonth, DebtPayoffResult
- sort_debts, advance_month, simulate_payoff
- calculate_snowball_payoff / calculate_avalanche_payoff / calculate_payoff
- calculate_debt_payoff_by_timeline: binary search of the budget
- compare_strategies, extra_payment_savings, check_budget
- schedule_to_frame: pandas export

Example
-------
>>> debts = [DebtAccount("a", "Card", 1_000, 0.0, 100)]
>>> calculate_snowball_payoff(debts, 100).total_months
10
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .constants import (
    DEBT_MAX_MONTHS,
    MONTHS_PER_YEAR,
    TIMELINE_SEARCH_ITERATIONS,
    TIMELINE_SEARCH_TOLERANCE,
)
from .exceptions import ConfigurationError, InfeasibleError
from .utils import check_finite, check_non_negative, round_half_up

__all__ = [
    "STRATEGIES",
    "DebtAccount",
    "PayoffState",
    "DebtPayoffMonth",
    "DebtPayoffResult",
    "TimelineResult",
    "StrategyComparison",
    "ExtraPaymentSavings",
    "sort_debts",
    "advance_month",
    "simulate_payoff",
    "calculate_snowball_payoff",
    "calculate_avalanche_payoff",
    "calculate_payoff",
    "calculate_debt_payoff_by_timeline",
    "compare_strategies",
    "extra_payment_savings",
    "total_minimum_payment",
    "check_budget",
    "schedule_to_frame",
]

logger = logging.getLogger(__name__)

STRATEGIES = ("snowball", "avalanche")


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DebtAccount:
    """
    One debt to be repaid.

    Parameters
    ----------
    id : str
        Opaque identifier.
    name : str
        Display name; may be empty.
    balance : float
        Outstanding principal (≥ 0).
    annual_rate : float
        Annual interest rate as a decimal (≥ 0).
    min_payment : float
        Required monthly payment (≥ 0).
    """
    id: str
    name: str
    balance: float
    annual_rate: float
    min_payment: float

    def __post_init__(self):
        check_finite(f"DebtAccount {self.id!r}", self.balance, self.annual_rate, self.min_payment)
        check_non_negative("balance", self.balance)
        check_non_negative("annual_rate", self.annual_rate)
        check_non_negative("min_payment", self.min_payment)

    @property
    def label(self) -> str:
        """``name`` when non-empty, else ``id``."""
        return self.name or self.id

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / MONTHS_PER_YEAR


@dataclass(frozen=True)
class PayoffState:
    """
    Simulation state after ``month`` months.

    ``balances[k]`` belongs to the account at priority position k. Balances
    only decrease and are clamped to exactly 0.0 once cleared.
    """
    balances: Tuple[float, ...]
    month: int = 0
    cumulative_principal: float = 0.0
    cumulative_interest: float = 0.0
    payoff_order: Tuple[str, ...] = ()

    @classmethod
    def initial(cls, accounts: Sequence[DebtAccount]) -> "PayoffState":
        return cls(balances=tuple(float(a.balance) for a in accounts))

    @property
    def total_balance(self) -> float:
        return sum(self.balances)

    @property
    def has_debt(self) -> bool:
        return any(b > 0 for b in self.balances)


@dataclass(frozen=True)
class DebtPayoffMonth:
    """
    One simulated month (unrounded amounts).

    ``debts_remaining`` lists ``(label, balance)`` for accounts still open at
    the end of the month, in priority order.
    """
    month_index: int
    total_balance: float
    principal_paid: float
    interest_paid: float
    cumulative_principal: float
    cumulative_interest: float
    debts_paid_off: Tuple[str, ...]
    debts_remaining: Tuple[Tuple[str, float], ...]


@dataclass(frozen=True)
class DebtPayoffResult:
    """
    Outcome of a payoff simulation.

    ``paid_off`` is False when the DEBT_MAX_MONTHS cap stopped the run.
    ``milestones`` pairs each payoff with its month.
    """
    total_months: int
    total_interest: float
    total_principal: float
    monthly_payment: float
    projections: List[DebtPayoffMonth]
    payoff_order: List[str]
    milestones: List[Tuple[int, str]]
    paid_off: bool


@dataclass(frozen=True)
class TimelineResult:
    required_payment: float
    result: DebtPayoffResult


@dataclass(frozen=True)
class StrategyComparison:
    """Snowball vs avalanche; positive savings favour avalanche."""
    snowball: DebtPayoffResult
    avalanche: DebtPayoffResult
    interest_saved: float
    months_saved: int


@dataclass(frozen=True)
class ExtraPaymentSavings:
    months_saved: int
    interest_saved: float


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def _check_strategy(strategy: str) -> None:
    if strategy not in STRATEGIES:
        raise ConfigurationError(f"strategy must be one of {STRATEGIES}, got {strategy!r}")


def sort_debts(debts: Sequence[DebtAccount], strategy: str) -> List[DebtAccount]:
    """
    Priority order for *strategy* (stable for ties).

    - snowball: ascending balance
    - avalanche: descending annual rate
    """
    _check_strategy(strategy)
    if strategy == "snowball":
        return sorted(debts, key=lambda d: d.balance)
    return sorted(debts, key=lambda d: d.annual_rate, reverse=True)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def advance_month(
    accounts: Sequence[DebtAccount],
    state: PayoffState,
    budget: float,
) -> Tuple[PayoffState, DebtPayoffMonth]:
    """
    Apply one month of interest and payments.

    Parameters
    ----------
    accounts : Sequence[DebtAccount]
        Accounts in priority order (same positions as ``state.balances``).
    state : PayoffState
        State before the month.
    budget : float
        Total available payment for the month.

    Returns
    -------
    (PayoffState, DebtPayoffMonth)
    """
    balances = list(state.balances)
    remaining_budget = budget
    principal_paid = 0.0
    interest_paid = 0.0
    cleared: List[int] = []

    for pos, account in enumerate(accounts):
        balance = balances[pos]
        if balance <= 0:
            continue
        interest = balance * account.monthly_rate
        payment = min(account.min_payment, balance + interest)
        if payment >= balance + interest:
            principal = balance
        else:
            principal = min(balance, max(0.0, payment - interest))

        balances[pos] = balance - principal
        remaining_budget -= payment
        principal_paid += principal
        interest_paid += interest

        if balances[pos] <= 0:
            balances[pos] = 0.0
            cleared.append(pos)

    if remaining_budget > 0:
        target = next((pos for pos, b in enumerate(balances) if b > 0), None)
        if target is not None:
            balance = balances[target]
            extra_interest = balance * accounts[target].monthly_rate
            pay = min(remaining_budget, balance + extra_interest)
            if pay >= balance + extra_interest:
                principal = balance
            else:
                principal = min(balance, max(0.0, pay - extra_interest))
            principal_paid += principal
            interest_paid += extra_interest
            balances[target] = balance - principal
            if balances[target] <= 0:
                balances[target] = 0.0
                if target not in cleared:
                    cleared.append(target)

    month = state.month + 1
    paid_off = tuple(accounts[pos].label for pos in cleared)
    new_state = PayoffState(
        balances=tuple(balances),
        month=month,
        cumulative_principal=state.cumulative_principal + principal_paid,
        cumulative_interest=state.cumulative_interest + interest_paid,
        payoff_order=state.payoff_order + paid_off,
    )
    record = DebtPayoffMonth(
        month_index=month,
        total_balance=new_state.total_balance,
        principal_paid=principal_paid,
        interest_paid=interest_paid,
        cumulative_principal=new_state.cumulative_principal,
        cumulative_interest=new_state.cumulative_interest,
        debts_paid_off=paid_off,
        debts_remaining=tuple(
            (account.label, b) for account, b in zip(accounts, balances) if b > 0
        ),
    )
    return new_state, record


def _warn_on_negative_amortization(accounts: Sequence[DebtAccount]) -> None:
    for account in accounts:
        interest = account.balance * account.monthly_rate
        if account.balance > 0 and account.min_payment < interest:
            warnings.warn(
                f"Minimum payment of {account.label!r} ({account.min_payment:.2f}) does not "
                f"cover its first month of interest ({interest:.2f}).",
                UserWarning,
            )


def simulate_payoff(
    sorted_debts: Sequence[DebtAccount],
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> DebtPayoffResult:
    """
    Simulate months until every balance is 0 or DEBT_MAX_MONTHS is reached.

    *sorted_debts* must already be in priority order. The budget is
    ``monthly_payment + extra_payment``; callers are expected to have checked
    it covers the minimum payments (see ``check_budget``).
    """
    accounts = list(sorted_debts)
    _warn_on_negative_amortization(accounts)
    budget = monthly_payment + extra_payment

    state = PayoffState.initial(accounts)
    projections: List[DebtPayoffMonth] = []
    milestones: List[Tuple[int, str]] = []

    while state.has_debt and state.month < DEBT_MAX_MONTHS:
        state, record = advance_month(accounts, state, budget)
        projections.append(record)
        milestones.extend((record.month_index, label) for label in record.debts_paid_off)
        if record.total_balance <= 0:
            break

    paid_off = not state.has_debt
    if not paid_off:
        logger.debug(
            "debt payoff stopped at the %d-month cap with %.2f outstanding",
            DEBT_MAX_MONTHS, state.total_balance,
        )

    return DebtPayoffResult(
        total_months=state.month,
        total_interest=state.cumulative_interest,
        total_principal=float(sum(a.balance for a in accounts)),
        monthly_payment=budget,
        projections=projections,
        payoff_order=list(state.payoff_order),
        milestones=milestones,
        paid_off=paid_off,
    )


def calculate_snowball_payoff(
    debts: Sequence[DebtAccount],
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> DebtPayoffResult:
    """Smallest balance first."""
    return simulate_payoff(sort_debts(debts, "snowball"), monthly_payment, extra_payment)


def calculate_avalanche_payoff(
    debts: Sequence[DebtAccount],
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> DebtPayoffResult:
    """Highest annual rate first."""
    return simulate_payoff(sort_debts(debts, "avalanche"), monthly_payment, extra_payment)


def calculate_payoff(
    debts: Sequence[DebtAccount],
    strategy: str,
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> DebtPayoffResult:
    """Dispatch to the snowball or avalanche simulation by name."""
    return simulate_payoff(sort_debts(debts, strategy), monthly_payment, extra_payment)


# ---------------------------------------------------------------------------
# Timeline solver
# ---------------------------------------------------------------------------

def calculate_debt_payoff_by_timeline(
    debts: Sequence[DebtAccount],
    target_months: int,
    strategy: str,
    extra_payment: float = 0.0,
) -> Optional[TimelineResult]:
    """
    Smallest monthly budget (found by bisection) that clears all debt in time.

    The budget is searched between the sum of minimum payments and the sum of
    balances for at most TIMELINE_SEARCH_ITERATIONS probes, stopping once the
    bracket is narrower than TIMELINE_SEARCH_TOLERANCE.

    Returns
    -------
    TimelineResult or None
        None when there are no debts, *target_months* ≤ 0, or no probed budget
        met the target. ``required_payment`` is rounded half-up.
    """
    _check_strategy(strategy)
    if target_months <= 0 or not debts:
        return None

    low = total_minimum_payment(debts)
    high = float(sum(d.balance for d in debts))
    best: Optional[Tuple[float, DebtPayoffResult]] = None

    for _ in range(TIMELINE_SEARCH_ITERATIONS):
        probe = (low + high) / 2.0
        result = calculate_payoff(debts, strategy, probe, extra_payment)
        if result.paid_off and result.total_months <= target_months:
            best = (probe, result)
            high = probe
        else:
            low = probe
        if abs(high - low) < TIMELINE_SEARCH_TOLERANCE:
            break

    if best is None:
        logger.debug("no probed budget paid off the debts within %d months", target_months)
        return None
    return TimelineResult(required_payment=round_half_up(best[0]), result=best[1])


# ---------------------------------------------------------------------------
# Comparisons and checks
# ---------------------------------------------------------------------------

def compare_strategies(
    debts: Sequence[DebtAccount],
    monthly_payment: float,
    extra_payment: float = 0.0,
) -> StrategyComparison:
    """Run both strategies on the same budget."""
    snowball = calculate_snowball_payoff(debts, monthly_payment, extra_payment)
    avalanche = calculate_avalanche_payoff(debts, monthly_payment, extra_payment)
    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        interest_saved=snowball.total_interest - avalanche.total_interest,
        months_saved=snowball.total_months - avalanche.total_months,
    )


def extra_payment_savings(base: DebtPayoffResult, with_extra: DebtPayoffResult) -> ExtraPaymentSavings:
    """Months and interest saved by the run with an extra payment."""
    return ExtraPaymentSavings(
        months_saved=base.total_months - with_extra.total_months,
        interest_saved=base.total_interest - with_extra.total_interest,
    )


def total_minimum_payment(debts: Sequence[DebtAccount]) -> float:
    return float(sum(d.min_payment for d in debts))


def check_budget(debts: Sequence[DebtAccount], monthly_budget: float) -> None:
    """
    Raise InfeasibleError when *monthly_budget* is below the total minimums.

    The engine itself does not enforce this; callers check it first.
    """
    required = total_minimum_payment(debts)
    if monthly_budget < required:
        raise InfeasibleError(
            f"Monthly budget {monthly_budget:.2f} is below the total minimum "
            f"payments {required:.2f}."
        )


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def schedule_to_frame(result: DebtPayoffResult) -> pd.DataFrame:
    """Monthly schedule with amounts rounded to whole units."""
    columns = [
        "month", "total_balance", "principal_paid", "interest_paid",
        "cumulative_principal", "cumulative_interest", "debts_paid_off",
    ]
    rows = [
        {
            "month": m.month_index,
            "total_balance": round_half_up(m.total_balance),
            "principal_paid": round_half_up(m.principal_paid),
            "interest_paid": round_half_up(m.interest_paid),
            "cumulative_principal": round_half_up(m.cumulative_principal),
            "cumulative_interest": round_half_up(m.cumulative_interest),
            "debts_paid_off": ", ".join(m.debts_paid_off),
        }
        for m in result.projections
    ]
    return pd.DataFrame(rows, columns=columns)
