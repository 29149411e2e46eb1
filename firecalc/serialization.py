"""
Serialization module for FIRECalc.

Purpose
-------
JSON persistence of scenario requests and results, and tabular export of
result trajectories.

Supports:
- Scenario requests (tagged with ``kind`` and ``schema_version``)
- Any result record (dataclasses, nested lists, tuples)
- Trajectory frames (projections, drawdown rows, debt schedule)

Design Principles
-----------------
- Type-safe: file inputs are validated through the pydantic configs
- Human-readable: indented JSON
- JSON-safe: ``inf`` (unreachable) and ``nan`` are written as ``null``
- Versioned: a schema mismatch is rejected on load

Example
-------
>>> from pathlib import Path
>>> from firecalc.fire import ScenarioInputs
>>> from firecalc.scenario import StandardRequest
>>> req = StandardRequest(ScenarioInputs(30, 55, 100_000, 24_000, 0.07, 0.03, 0.04, 48_000))
>>> save_request(req, Path("standard.json"))
>>> load_request(Path("standard.json")) == req
True
"""

from __future__ import annotations

import dataclasses
import json
import math
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .config import (
    DebtPayoffInputsConfig,
    DebtTimelineInputsConfig,
    GrowthInputsConfig,
    HealthcareInputsConfig,
    ReverseInputsConfig,
    SavingsRateInputsConfig,
    ScenarioInputsConfig,
    WithdrawalInputsConfig,
)
from .debt import DebtAccount, DebtPayoffResult, TimelineResult, schedule_to_frame
from .exceptions import ConfigurationError
from .healthcare import HealthcareGapResult
from .projection import projections_to_frame
from .scenario import REQUEST_TYPES, ScenarioRequest
from .types import DebtAccountDict, RequestDocumentDict
from .withdrawal import WithdrawalResult, withdrawal_to_frame

__all__ = [
    "SCHEMA_VERSION",
    "request_to_dict",
    "request_from_dict",
    "save_request",
    "load_request",
    "result_to_dict",
    "save_result",
    "result_to_frame",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

def _debt_to_dict(debt: DebtAccount) -> DebtAccountDict:
    return {
        "id": debt.id,
        "name": debt.name,
        "balance": debt.balance,
        "annual_rate": debt.annual_rate,
        "min_payment": debt.min_payment,
    }


def request_to_dict(request: ScenarioRequest) -> RequestDocumentDict:
    """
    Convert a scenario request to its JSON document.

    Examples
    --------
    >>> from firecalc.scenario import WithdrawalRequest
    >>> request_to_dict(WithdrawalRequest(1e6, 0.04, 0.07, 0.03, 30))["kind"]
    'withdrawal'
    """
    params: Dict[str, Any] = {}
    for f in dataclasses.fields(request):
        value = getattr(request, f.name)
        if f.name == "inputs":
            params["inputs"] = dataclasses.asdict(value)
        elif f.name == "debts":
            params["debts"] = [_debt_to_dict(d) for d in value]
        else:
            params[f.name] = value
    return {"schema_version": SCHEMA_VERSION, "kind": request.kind, "params": params}


_PARAM_CONFIGS = {
    "reverse": ReverseInputsConfig,
    "savings-rate": SavingsRateInputsConfig,
    "growth": GrowthInputsConfig,
    "withdrawal": WithdrawalInputsConfig,
    "healthcare": HealthcareInputsConfig,
    "debt-payoff": DebtPayoffInputsConfig,
    "debt-timeline": DebtTimelineInputsConfig,
}
"""Request kinds whose flat params are validated by a pydantic model."""


def request_from_dict(data: Dict[str, Any]) -> ScenarioRequest:
    """
    Rebuild a scenario request from its JSON document.

    Raises
    ------
    ConfigurationError
        On a schema-version mismatch, an unknown ``kind`` or unknown/missing
        parameters.
    pydantic.ValidationError
        When the inputs, debts or flat parameters fail validation.
    """
    schema_version = data.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        raise ConfigurationError(
            f"Request schema version {schema_version} differs from supported "
            f"version {SCHEMA_VERSION}."
        )

    kind = data.get("kind")
    request_cls = REQUEST_TYPES.get(kind)
    if request_cls is None:
        raise ConfigurationError(
            f"Unknown scenario kind {kind!r}; expected one of {sorted(REQUEST_TYPES)}"
        )

    params = dict(data.get("params", {}))
    if kind in _PARAM_CONFIGS:
        params = _PARAM_CONFIGS[kind].model_validate(params).to_kwargs()
    elif "inputs" in params:
        params["inputs"] = ScenarioInputsConfig.model_validate(params["inputs"]).to_inputs()

    try:
        return request_cls(**params)
    except TypeError as e:
        raise ConfigurationError(f"Invalid parameters for {kind!r} request: {e}") from e


def save_request(request: ScenarioRequest, path: Path) -> None:
    """Write *request* as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(request_to_dict(request), f, indent=2)


def load_request(path: Path) -> ScenarioRequest:
    """Read a request saved by ``save_request``."""
    with open(path, "r") as f:
        data = json.load(f)
    return request_from_dict(data)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

def _json_safe(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _json_safe(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k) if not isinstance(k, float) else f"{k:g}": _json_safe(v)
                for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def result_to_dict(result: Any) -> Dict[str, Any]:
    """
    Convert a result record to a JSON-safe dict.

    Nested dataclasses become dicts, tuples become lists, non-finite floats
    become ``None`` and float mapping keys become strings.

    Examples
    --------
    >>> from firecalc.fire import ScenarioInputs, calculate_standard_fire
    >>> inputs = ScenarioInputs(30, 55, 0, 0, 0.07, 0.03, 0.04, 48_000)
    >>> result_to_dict(calculate_standard_fire(inputs, current_year=2025))["years_to_fire"] is None
    True
    """
    if result is None:
        return {}
    return _json_safe(result)


def save_result(result: Any, path: Path) -> None:
    """Write a result record as indented JSON with the schema version."""
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {"schema_version": SCHEMA_VERSION, "result": result_to_dict(result)}
    with open(path, "w") as f:
        json.dump(document, f, indent=2)


def result_to_frame(result: Any) -> pd.DataFrame:
    """
    Trajectory of a result as a DataFrame, for CSV export.

    - FIRE results: the yearly projection series
    - WithdrawalResult: drawdown rows
    - DebtPayoffResult / TimelineResult: monthly schedule
    - HealthcareGapResult: yearly cost breakdown

    Raises
    ------
    ConfigurationError
        If the result has no tabular trajectory.
    """
    if isinstance(result, WithdrawalResult):
        return withdrawal_to_frame(result)
    if isinstance(result, DebtPayoffResult):
        return schedule_to_frame(result)
    if isinstance(result, TimelineResult):
        return schedule_to_frame(result.result)
    if isinstance(result, HealthcareGapResult):
        rows: List[Dict[str, Any]] = [dataclasses.asdict(y) for y in result.yearly_breakdown]
        return pd.DataFrame(rows)
    projections = getattr(result, "projections", None)
    if projections is not None:
        return projections_to_frame(projections)
    raise ConfigurationError(f"{type(result).__name__} has no tabular trajectory to export")
