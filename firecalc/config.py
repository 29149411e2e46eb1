"""
Configuration management module for FIRECalc.

Purpose
-------
Pydantic models for validating calculator inputs read from files or the
command line, with conversions into the core value types, plus application
settings loaded from the environment.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and ranges at the boundary
- Immutable: frozen models, unknown keys rejected
- Defaults: mirror the calculator defaults in ``firecalc.constants``
- Environment-aware: ``FIRECALC_`` variables and ``.env`` files

Example
-------
>>> from firecalc.config import ScenarioInputsConfig
>>> cfg = ScenarioInputsConfig(current_age=35, annual_expenses=60_000)
>>> round(cfg.to_inputs().fire_number)
1500000
>>> ScenarioInputsConfig.model_validate_json(cfg.model_dump_json()) == cfg
True
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_ANNUAL_CONTRIBUTION,
    DEFAULT_ANNUAL_EXPENSES,
    DEFAULT_CURRENT_AGE,
    DEFAULT_CURRENT_SAVINGS,
    DEFAULT_DEBT_BUDGET,
    DEFAULT_DEBT_TARGET_MONTHS,
    DEFAULT_EXPECTED_RETURN,
    DEFAULT_INFLATION_RATE,
    DEFAULT_PORTFOLIO_VALUE,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_RETIREMENT_YEARS,
    DEFAULT_WITHDRAWAL_RATE,
    MEDICARE_AGE,
)
from .debt import DebtAccount
from .fire import ScenarioInputs
from .healthcare import (
    DEFAULT_ANNUAL_DEDUCTIBLE,
    DEFAULT_ANNUAL_OUT_OF_POCKET,
    DEFAULT_MONTHLY_PREMIUM,
)

__all__ = [
    "ScenarioInputsConfig",
    "ReverseInputsConfig",
    "SavingsRateInputsConfig",
    "GrowthInputsConfig",
    "DebtAccountConfig",
    "DebtPlanConfig",
    "DebtPayoffInputsConfig",
    "DebtTimelineInputsConfig",
    "WithdrawalInputsConfig",
    "HealthcareInputsConfig",
    "CONFIG_MODELS",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# FIRE inputs
# ---------------------------------------------------------------------------

class ScenarioInputsConfig(BaseModel):
    """
    Shared inputs of the FIRE scenario calculators.

    Attributes
    ----------
    current_age, retirement_age : int
        Ages in years (0-120).
    current_savings, annual_contribution, annual_expenses : float
        Non-negative amounts.
    expected_return, inflation_rate : float
        Nominal return and inflation as decimals (-1 < r ≤ 1).
    withdrawal_rate : float
        Safe withdrawal rate (0 < w ≤ 1).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_age: int = Field(default=DEFAULT_CURRENT_AGE, ge=0, le=120, description="Age today")
    retirement_age: int = Field(
        default=DEFAULT_RETIREMENT_AGE, ge=0, le=120, description="Target retirement age"
    )
    current_savings: float = Field(
        default=DEFAULT_CURRENT_SAVINGS, ge=0, description="Invested balance today"
    )
    annual_contribution: float = Field(
        default=DEFAULT_ANNUAL_CONTRIBUTION, ge=0, description="Amount invested per year"
    )
    expected_return: float = Field(
        default=DEFAULT_EXPECTED_RETURN, gt=-1.0, le=1.0, description="Nominal annual return"
    )
    inflation_rate: float = Field(
        default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0, description="Annual inflation"
    )
    withdrawal_rate: float = Field(
        default=DEFAULT_WITHDRAWAL_RATE, gt=0.0, le=1.0, description="Safe withdrawal rate"
    )
    annual_expenses: float = Field(
        default=DEFAULT_ANNUAL_EXPENSES, ge=0, description="Annual spending in retirement"
    )

    def to_inputs(self) -> ScenarioInputs:
        return ScenarioInputs(**self.model_dump())


class ReverseInputsConfig(BaseModel):
    """Reverse FIRE inputs: the shared inputs without an annual contribution."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_age: int = Field(default=DEFAULT_CURRENT_AGE, ge=0, le=120)
    retirement_age: int = Field(default=DEFAULT_RETIREMENT_AGE, ge=0, le=120)
    current_savings: float = Field(default=DEFAULT_CURRENT_SAVINGS, ge=0)
    expected_return: float = Field(default=DEFAULT_EXPECTED_RETURN, gt=-1.0, le=1.0)
    inflation_rate: float = Field(default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0)
    withdrawal_rate: float = Field(default=DEFAULT_WITHDRAWAL_RATE, gt=0.0, le=1.0)
    annual_expenses: float = Field(default=DEFAULT_ANNUAL_EXPENSES, ge=0)

    def to_kwargs(self) -> Dict[str, float]:
        return self.model_dump()


class SavingsRateInputsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    current_age: int = Field(default=DEFAULT_CURRENT_AGE, ge=0, le=120)
    annual_income: float = Field(ge=0, description="Gross annual income")
    annual_expenses: float = Field(default=DEFAULT_ANNUAL_EXPENSES, ge=0)
    current_savings: float = Field(default=DEFAULT_CURRENT_SAVINGS, ge=0)
    expected_return: float = Field(default=DEFAULT_EXPECTED_RETURN, gt=-1.0, le=1.0)
    inflation_rate: float = Field(default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0)
    withdrawal_rate: float = Field(default=DEFAULT_WITHDRAWAL_RATE, gt=0.0, le=1.0)

    def to_kwargs(self) -> Dict[str, float]:
        """Fields of a ``SavingsRateRequest``."""
        return self.model_dump()


class GrowthInputsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_investment: float = Field(ge=0, description="Starting balance")
    contribution_amount: float = Field(ge=0, description="Amount per contribution period")
    contribution_frequency: Literal["monthly", "quarterly", "annual"] = "monthly"
    years: int = Field(ge=0, le=100, description="Explicit horizon")
    expected_return: float = Field(default=DEFAULT_EXPECTED_RETURN, gt=-1.0, le=1.0)
    inflation_rate: float = Field(default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0)
    current_age: int = Field(default=0, ge=0, le=120)
    annual_income: Optional[float] = Field(default=None, ge=0)

    def to_kwargs(self) -> Dict[str, object]:
        """Fields of an ``InvestmentGrowthRequest``."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# Debt
# ---------------------------------------------------------------------------

class DebtAccountConfig(BaseModel):
    """
    One debt.

    Examples
    --------
    >>> DebtAccountConfig(id="cc", name="Visa", balance=5_000,
    ...                   annual_rate=0.22, min_payment=150).to_account().label
    'Visa'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Opaque identifier")
    name: str = Field(default="", max_length=100, description="Display name (may be empty)")
    balance: float = Field(ge=0, description="Outstanding principal")
    annual_rate: float = Field(ge=0, description="Annual interest rate as a decimal")
    min_payment: float = Field(ge=0, description="Required monthly payment")

    def to_account(self) -> DebtAccount:
        return DebtAccount(**self.model_dump())


def _check_unique_ids(debts: List[DebtAccountConfig]) -> List[DebtAccountConfig]:
    ids = [d.id for d in debts]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate debt ids: {duplicates}")
    return debts


class DebtPlanConfig(BaseModel):
    """
    A set of debts and how to repay them.

    ``monthly_payment`` drives fixed-budget runs; ``target_months`` drives the
    timeline solver.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    debts: List[DebtAccountConfig] = Field(min_length=1, description="Debts to repay")
    strategy: Literal["snowball", "avalanche"] = Field(
        default="avalanche", description="Payoff ordering"
    )
    monthly_payment: float = Field(
        default=DEFAULT_DEBT_BUDGET, ge=0, description="Monthly budget for all debts"
    )
    extra_payment: float = Field(default=0.0, ge=0, description="Extra monthly payment")
    target_months: int = Field(
        default=DEFAULT_DEBT_TARGET_MONTHS, gt=0, le=600, description="Target payoff months"
    )

    @field_validator("debts")
    @classmethod
    def validate_unique_ids(cls, v):
        """Ensure debt ids are unique."""
        return _check_unique_ids(v)

    def to_accounts(self) -> List[DebtAccount]:
        return [d.to_account() for d in self.debts]


# ---------------------------------------------------------------------------
# Saved debt requests
# ---------------------------------------------------------------------------

class DebtPayoffInputsConfig(BaseModel):
    """Parameters of a saved fixed-budget payoff request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    debts: List[DebtAccountConfig] = Field(min_length=1)
    strategy: Literal["snowball", "avalanche"]
    monthly_payment: float = Field(ge=0)
    extra_payment: float = Field(default=0.0, ge=0)

    @field_validator("debts")
    @classmethod
    def validate_unique_ids(cls, v):
        return _check_unique_ids(v)

    def to_kwargs(self) -> Dict[str, object]:
        """Fields of a ``DebtPayoffRequest``, with debts as a tuple of accounts."""
        kwargs = self.model_dump(exclude={"debts"})
        kwargs["debts"] = tuple(d.to_account() for d in self.debts)
        return kwargs


class DebtTimelineInputsConfig(BaseModel):
    """Parameters of a saved timeline request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    debts: List[DebtAccountConfig] = Field(min_length=1)
    target_months: int = Field(ge=0, le=600)
    strategy: Literal["snowball", "avalanche"]
    extra_payment: float = Field(default=0.0, ge=0)

    @field_validator("debts")
    @classmethod
    def validate_unique_ids(cls, v):
        return _check_unique_ids(v)

    def to_kwargs(self) -> Dict[str, object]:
        """Fields of a ``DebtTimelineRequest``, with debts as a tuple of accounts."""
        kwargs = self.model_dump(exclude={"debts"})
        kwargs["debts"] = tuple(d.to_account() for d in self.debts)
        return kwargs


# ---------------------------------------------------------------------------
# Withdrawal / healthcare
# ---------------------------------------------------------------------------

class WithdrawalInputsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    portfolio_value: float = Field(
        default=DEFAULT_PORTFOLIO_VALUE, ge=0, description="Balance at retirement"
    )
    withdrawal_rate: float = Field(
        default=DEFAULT_WITHDRAWAL_RATE, ge=0, le=1.0, description="Initial withdrawal rate"
    )
    expected_return: float = Field(
        default=DEFAULT_EXPECTED_RETURN, gt=-1.0, le=1.0, description="Nominal annual return"
    )
    inflation_rate: float = Field(
        default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0, description="Withdrawal growth"
    )
    retirement_years: int = Field(
        default=DEFAULT_RETIREMENT_YEARS, ge=0, le=100, description="Horizon to cover"
    )

    def to_kwargs(self) -> Dict[str, float]:
        """Keyword arguments for ``calculate_withdrawal``."""
        return self.model_dump()


class HealthcareInputsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    current_age: int = Field(default=DEFAULT_CURRENT_AGE, ge=0, le=120)
    early_retirement_age: int = Field(default=DEFAULT_RETIREMENT_AGE, ge=0, le=120)
    inflation_rate: float = Field(default=DEFAULT_INFLATION_RATE, gt=-1.0, le=1.0)
    medicare_age: int = Field(default=MEDICARE_AGE, ge=0, le=120)
    monthly_premium: float = Field(default=DEFAULT_MONTHLY_PREMIUM, ge=0)
    annual_deductible: float = Field(default=DEFAULT_ANNUAL_DEDUCTIBLE, ge=0)
    annual_out_of_pocket: float = Field(default=DEFAULT_ANNUAL_OUT_OF_POCKET, ge=0)

    def to_kwargs(self) -> Dict[str, float]:
        """Keyword arguments for ``calculate_healthcare_gap``."""
        return self.model_dump()


CONFIG_MODELS: Dict[str, Type[BaseModel]] = {
    "inputs": ScenarioInputsConfig,
    "debt": DebtPlanConfig,
    "withdrawal": WithdrawalInputsConfig,
    "healthcare": HealthcareInputsConfig,
}
"""Config file kinds understood by ``firecalc config``."""


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Variables are prefixed with FIRECALC_ (e.g. FIRECALC_LOG_LEVEL=DEBUG) and
    may also come from a ``.env`` file.

    Attributes
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".
    currency_symbol : str
        Prefix used by the CLI's currency formatter.
    current_year : int, optional
        Pins the calendar year used for projection labels.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="FIRECALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=4,
        description="Currency prefix for display"
    )
    current_year: Optional[int] = Field(
        default=None,
        ge=1900,
        le=2200,
        description="Calendar year override for projection labels"
    )
