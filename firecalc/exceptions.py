"""
Custom exceptions for FIRECalc.

Purpose
-------
Provides a unified exception hierarchy for input validation across all
FIRECalc modules. The numeric core never raises for "no valid answer"
conditions (those are sentinel values such as ``math.inf`` or ``None``);
exceptions are reserved for inputs that a caller must fix.

Exception Hierarchy
-------------------
FireCalcError (base)
├── ConfigurationError - Invalid configuration or parameter combinations
├── ValidationError - Data validation failures
└── InfeasibleError - Debt budget cannot cover the minimum payments

Usage
-----
>>> from firecalc.exceptions import ValidationError
>>>
>>> raise ValidationError("withdrawal_rate must be positive, got 0")
>>>
>>> # Catch all FIRECalc exceptions
>>> try:
...     result = run_scenario(request)
... except FireCalcError as e:
...     print(f"FIRECalc error: {e}")
"""

__all__ = [
    "FireCalcError",
    "ConfigurationError",
    "ValidationError",
    "InfeasibleError",
]


class FireCalcError(Exception):
    """
    Base exception for all FIRECalc errors.

    Examples
    --------
    >>> try:
    ...     run_scenario(request)
    ... except FireCalcError as e:
    ...     logger.error(f"Calculation rejected: {e}")
    """
    pass


class ConfigurationError(FireCalcError):
    """
    Invalid configuration or parameters.

    Raised when a request or configuration cannot be interpreted, such as:
    - Unknown payoff strategy or contribution frequency
    - Unknown scenario ``kind`` in a saved request
    - Schema version mismatch when loading files

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "strategy must be 'snowball' or 'avalanche', got 'dynamic'"
    ... )
    """
    pass


class ValidationError(FireCalcError):
    """
    Data validation failures.

    Raised when input values fail validation checks, such as:
    - Negative balances, savings or expenses
    - Non-positive withdrawal rate (the FIRE number divides by it)
    - Non-finite values

    Examples
    --------
    >>> raise ValidationError(
    ...     "withdrawal_rate must be positive, got 0.0. "
    ...     "The FIRE number is annual_expenses / withdrawal_rate."
    ... )
    """
    pass


class InfeasibleError(FireCalcError):
    """
    The monthly debt budget is below the sum of minimum payments.

    The amortization engine assumes minimums are always payable; callers
    check the budget before simulating and raise this when it is not.

    Examples
    --------
    >>> raise InfeasibleError(
    ...     "Monthly budget 150.00 is below total minimum payments 210.00."
    ... )
    """
    pass
