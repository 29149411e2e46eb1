"""
Type definitions for FIRECalc.

Purpose
-------
TypedDict definitions for the JSON-facing dictionaries produced and consumed
by ``firecalc.serialization`` and ``firecalc.cli``.

Type Definitions
----------------
DebtAccountDict
    One debt as read from a request file: {"id", "name", "balance", ...}
RequestDocumentDict
    Saved scenario request: {"schema_version", "kind", "params"}
"""

from typing import Any, Dict

from typing_extensions import NotRequired, TypedDict

__all__ = [
    "DebtAccountDict",
    "RequestDocumentDict",
]


class DebtAccountDict(TypedDict):
    """Debt entry in a request file; ``name`` may be omitted or empty."""

    id: str
    name: NotRequired[str]
    balance: float
    annual_rate: float
    min_payment: float


class RequestDocumentDict(TypedDict):
    """
    Saved scenario request.

    Attributes
    ----------
    schema_version : str
        Format version; must match serialization.SCHEMA_VERSION.
    kind : str
        Scenario tag (e.g. "standard", "debt-payoff").
    params : dict
        Request fields; nested ``inputs`` for scenarios built on ScenarioInputs
        and a ``debts`` list for debt requests.
    """

    schema_version: str
    kind: str
    params: Dict[str, Any]
