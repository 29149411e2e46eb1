"""
Command-Line Interface for FIRECalc.

Purpose
-------
Runs every calculator from the shell, with human-readable tables, JSON output
and CSV export of the trajectory.

Commands
--------
- standard / coast / lean / fat / barista / reverse: FIRE scenarios
- savings-rate / growth: savings and contribution-plan calculators
- withdrawal / healthcare: drawdown and pre-Medicare cost estimates
- advise: recommend a FIRE path from a few answers
- debt payoff / timeline / compare: debt amortization
- run: execute a saved request file
- config create / validate / show: configuration files and settings
- info: caps and versions

Example Usage
-------------
    $ firecalc standard --annual-expenses 60000 --current-savings 150000
    $ firecalc coast --current-age 28 --retirement-age 60 --json
    $ firecalc withdrawal --portfolio-value 1500000 --output drawdown.csv
    $ firecalc config create debt debts.json
    $ firecalc debt payoff --config debts.json --strategy snowball
    $ firecalc --version
"""

from __future__ import annotations

import functools
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .advisor import LIFESTYLES, PRIMARY_GOALS, WORK_PREFERENCES, QuizAnswers, recommend_fire_path
from .config import (
    CONFIG_MODELS,
    AppSettings,
    DebtAccountConfig,
    DebtPlanConfig,
    HealthcareInputsConfig,
    ScenarioInputsConfig,
    WithdrawalInputsConfig,
)
from .constants import (
    CONTRIBUTION_PERIODS,
    DEBT_MAX_MONTHS,
    DEFAULT_ANNUAL_CONTRIBUTION,
    DEFAULT_ANNUAL_EXPENSES,
    DEFAULT_CURRENT_AGE,
    DEFAULT_CURRENT_SAVINGS,
    DEFAULT_EXPECTED_RETURN,
    DEFAULT_INFLATION_RATE,
    DEFAULT_PART_TIME_INCOME,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_WITHDRAWAL_RATE,
    MAX_FIXED_HORIZON_YEARS,
    MAX_PROJECTION_YEARS,
    MAX_YEARS_TO_TARGET,
    TIMELINE_SEARCH_ITERATIONS,
)
from .debt import (
    calculate_debt_payoff_by_timeline,
    calculate_payoff,
    check_budget,
    compare_strategies,
    extra_payment_savings,
)
from .exceptions import FireCalcError
from .fire import (
    calculate_barista_fire,
    calculate_coast_fire,
    calculate_fat_fire,
    calculate_investment_growth,
    calculate_lean_fire,
    calculate_reverse_fire,
    calculate_savings_rate,
    calculate_standard_fire,
)
from .healthcare import calculate_healthcare_gap
from .scenario import run_scenario
from .serialization import SCHEMA_VERSION, load_request, result_to_dict, result_to_frame
from .utils import format_currency, format_percent, format_years, is_unreachable
from .withdrawal import calculate_withdrawal

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

_PERCENT_FIELDS = {"savings_rate", "success_rate"}
_YEAR_FIELDS = {"years_to_fire", "years_to_coast", "years_to_barista_fire", "portfolio_longevity"}


def _format_field(name: str, value: Any, symbol: str) -> str:
    if value is None:
        return "—"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if name in _PERCENT_FIELDS:
        return format_percent(value)
    if name in _YEAR_FIELDS:
        return format_years(float(value))
    if name == "fire_age":
        return "Never" if is_unreachable(value) else f"{value:.1f}"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_currency(value, symbol)
    return str(value)


def _summary_rows(result: Any, symbol: str) -> List[Tuple[str, str]]:
    """Scalar fields of a result record as (label, formatted value) rows."""
    rows: List[Tuple[str, str]] = []
    for f in fields(result):
        value = getattr(result, f.name)
        if is_dataclass(value):
            rows.extend(_summary_rows(value, symbol))
        elif isinstance(value, dict):
            for key, item in value.items():
                rows.append((f"{f.name.replace('_', ' ').title()} @ {key:,.0f}",
                             format_currency(item, symbol)))
        elif not isinstance(value, (list, tuple)):
            rows.append((f.name.replace("_", " ").title(), _format_field(f.name, value, symbol)))
    return rows


def _emit(
    ctx: click.Context,
    result: Any,
    title: str,
    as_json: bool = False,
    output: Optional[Path] = None,
) -> None:
    """Print *result* as JSON, a rich table or plain lines; optionally export CSV."""
    console: Console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    symbol = ctx.obj["settings"].currency_symbol

    if as_json:
        click.echo(json.dumps(result_to_dict(result), indent=2))
    elif not quiet:
        table = Table(title=title, show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")
        for label, value in _summary_rows(result, symbol):
            table.add_row(label, value)
        console.print(table)
    else:
        for label, value in _summary_rows(result, symbol):
            click.echo(f"{label}: {value}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        result_to_frame(result).to_csv(output, index=False)
        if not quiet and not as_json:
            console.print(f"[green]Trajectory saved to {output}[/green]")


def handle_errors(func):
    """Report calculator, validation and JSON errors on stderr and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (FireCalcError, PydanticValidationError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except json.JSONDecodeError as e:
            click.echo(f"Error: invalid JSON: {e}", err=True)
            sys.exit(1)
    return wrapper


def _current_year(ctx: click.Context, current_year: Optional[int]) -> Optional[int]:
    return current_year if current_year is not None else ctx.obj["settings"].current_year


def scenario_input_options(func):
    """Options for the shared ScenarioInputs fields."""
    options = [
        click.option("--current-age", type=int, default=DEFAULT_CURRENT_AGE, show_default=True,
                     help="Age today"),
        click.option("--retirement-age", type=int, default=DEFAULT_RETIREMENT_AGE,
                     show_default=True, help="Target retirement age"),
        click.option("--current-savings", type=float, default=DEFAULT_CURRENT_SAVINGS,
                     show_default=True, help="Invested balance today"),
        click.option("--annual-contribution", type=float, default=DEFAULT_ANNUAL_CONTRIBUTION,
                     show_default=True, help="Amount invested per year"),
        click.option("--expected-return", type=float, default=DEFAULT_EXPECTED_RETURN,
                     show_default=True, help="Nominal annual return (decimal)"),
        click.option("--inflation-rate", type=float, default=DEFAULT_INFLATION_RATE,
                     show_default=True, help="Annual inflation (decimal)"),
        click.option("--withdrawal-rate", type=float, default=DEFAULT_WITHDRAWAL_RATE,
                     show_default=True, help="Safe withdrawal rate (decimal)"),
        click.option("--annual-expenses", type=float, default=DEFAULT_ANNUAL_EXPENSES,
                     show_default=True, help="Annual spending in retirement"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def output_options(func):
    """--json, --output and --current-year."""
    options = [
        click.option("--json", "as_json", is_flag=True, help="Print the result as JSON"),
        click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
                     help="Write the trajectory as CSV"),
        click.option("--current-year", type=int, default=None,
                     help="Calendar year for labels (default: system year)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _inputs_from_options(kwargs: dict):
    keys = ScenarioInputsConfig.model_fields
    return ScenarioInputsConfig(**{k: kwargs.pop(k) for k in list(keys)}).to_inputs()


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="firecalc")
@click.option("--quiet", "-q", is_flag=True, help="Plain output without tables")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    FIRECalc - Financial Independence / Retire Early projections.

    Deterministic calculators for FIRE targets, withdrawal longevity,
    healthcare costs and debt payoff.

    Use 'firecalc COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


# ---------------------------------------------------------------------------
# FIRE scenarios
# ---------------------------------------------------------------------------

_INPUT_SCENARIOS = {
    "standard": (calculate_standard_fire, "Standard FIRE", "Years until savings reach 25x expenses (at 4%)."),
    "coast": (calculate_coast_fire, "Coast FIRE", "Balance needed today so growth alone reaches the FIRE number by retirement."),
    "lean": (calculate_lean_fire, "Lean FIRE", "Standard FIRE for a frugal budget (expenses <= 40,000)."),
    "fat": (calculate_fat_fire, "Fat FIRE", "Standard FIRE for a generous budget (expenses >= 100,000)."),
    "reverse": (calculate_reverse_fire, "Reverse FIRE", "Contribution needed to reach the FIRE number by retirement age."),
}


def _make_input_command(name: str):
    calculator, title, help_text = _INPUT_SCENARIOS[name]

    @main.command(name, help=help_text)
    @scenario_input_options
    @output_options
    @click.pass_context
    @handle_errors
    def command(ctx: click.Context, as_json: bool, output: Optional[Path],
                current_year: Optional[int], **kwargs) -> None:
        inputs = _inputs_from_options(kwargs)
        logger.debug("%s inputs: %s", name, inputs)
        result = calculator(inputs, current_year=_current_year(ctx, current_year))
        _emit(ctx, result, title, as_json, output)

    return command


standard = _make_input_command("standard")
coast = _make_input_command("coast")
lean = _make_input_command("lean")
fat = _make_input_command("fat")
reverse = _make_input_command("reverse")


@main.command()
@scenario_input_options
@click.option("--part-time-income", type=float, default=DEFAULT_PART_TIME_INCOME,
              show_default=True, help="Annual part-time income in retirement")
@output_options
@click.pass_context
@handle_errors
def barista(ctx: click.Context, part_time_income: float, as_json: bool,
            output: Optional[Path], current_year: Optional[int], **kwargs) -> None:
    """Barista FIRE: part-time income covers part of retirement expenses."""
    inputs = _inputs_from_options(kwargs)
    result = calculate_barista_fire(
        inputs, part_time_income, current_year=_current_year(ctx, current_year)
    )
    _emit(ctx, result, "Barista FIRE", as_json, output)


@main.command("savings-rate")
@click.option("--current-age", type=int, default=DEFAULT_CURRENT_AGE, show_default=True)
@click.option("--annual-income", type=float, required=True, help="Annual take-home income")
@click.option("--annual-expenses", type=float, default=DEFAULT_ANNUAL_EXPENSES, show_default=True)
@click.option("--current-savings", type=float, default=DEFAULT_CURRENT_SAVINGS, show_default=True)
@click.option("--expected-return", type=float, default=DEFAULT_EXPECTED_RETURN, show_default=True)
@click.option("--inflation-rate", type=float, default=DEFAULT_INFLATION_RATE, show_default=True)
@click.option("--withdrawal-rate", type=float, default=DEFAULT_WITHDRAWAL_RATE, show_default=True)
@output_options
@click.pass_context
@handle_errors
def savings_rate(ctx: click.Context, current_age: int, annual_income: float,
                 annual_expenses: float, current_savings: float, expected_return: float,
                 inflation_rate: float, withdrawal_rate: float, as_json: bool,
                 output: Optional[Path], current_year: Optional[int]) -> None:
    """Savings rate, its band and the years it implies to reach FIRE."""
    result = calculate_savings_rate(
        annual_income, annual_expenses, current_savings, expected_return, inflation_rate,
        withdrawal_rate, current_age=current_age, current_year=_current_year(ctx, current_year),
    )
    _emit(ctx, result, "Savings Rate", as_json, output)


@main.command()
@click.option("--initial-investment", type=float, default=DEFAULT_CURRENT_SAVINGS, show_default=True)
@click.option("--contribution-amount", type=float, default=2_000.0, show_default=True,
              help="Contribution per period")
@click.option("--frequency", type=click.Choice(sorted(CONTRIBUTION_PERIODS)), default="monthly",
              show_default=True)
@click.option("--years", type=int, default=30, show_default=True)
@click.option("--expected-return", type=float, default=DEFAULT_EXPECTED_RETURN, show_default=True)
@click.option("--inflation-rate", type=float, default=DEFAULT_INFLATION_RATE, show_default=True)
@click.option("--current-age", type=int, default=DEFAULT_CURRENT_AGE, show_default=True)
@click.option("--annual-income", type=float, default=None, help="Enables the savings-rate band")
@output_options
@click.pass_context
@handle_errors
def growth(ctx: click.Context, initial_investment: float, contribution_amount: float,
           frequency: str, years: int, expected_return: float, inflation_rate: float,
           current_age: int, annual_income: Optional[float], as_json: bool,
           output: Optional[Path], current_year: Optional[int]) -> None:
    """Grow an investment under a periodic contribution plan."""
    result = calculate_investment_growth(
        initial_investment, contribution_amount, frequency, years, expected_return,
        inflation_rate, current_age=current_age, annual_income=annual_income,
        current_year=_current_year(ctx, current_year),
    )
    _emit(ctx, result, "Investment Growth", as_json, output)


# ---------------------------------------------------------------------------
# Withdrawal / healthcare / advisor
# ---------------------------------------------------------------------------

@main.command()
@click.option("--portfolio-value", type=float, default=None)
@click.option("--withdrawal-rate", type=float, default=None)
@click.option("--expected-return", type=float, default=None)
@click.option("--inflation-rate", type=float, default=None)
@click.option("--retirement-years", type=int, default=None)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Write the drawdown rows as CSV")
@click.pass_context
@handle_errors
def withdrawal(ctx: click.Context, as_json: bool, output: Optional[Path], **kwargs) -> None:
    """How long a portfolio lasts under inflation-indexed withdrawals."""
    cfg = WithdrawalInputsConfig(**{k: v for k, v in kwargs.items() if v is not None})
    result = calculate_withdrawal(**cfg.to_kwargs())
    _emit(ctx, result, "Withdrawal Longevity", as_json, output)

    if not as_json and not ctx.obj["quiet"]:
        table = Table(title="Withdrawal Rate Sensitivity")
        table.add_column("Rate", style="cyan")
        table.add_column("Years", justify="right")
        table.add_column("End Balance", justify="right")
        symbol = ctx.obj["settings"].currency_symbol
        for row in result.rate_analysis:
            table.add_row(format_percent(row.rate), str(row.years),
                          format_currency(row.end_balance, symbol))
        ctx.obj["console"].print(table)


@main.command()
@click.option("--current-age", type=int, default=None)
@click.option("--early-retirement-age", type=int, default=None)
@click.option("--inflation-rate", type=float, default=None)
@click.option("--medicare-age", type=int, default=None)
@click.option("--monthly-premium", type=float, default=None)
@click.option("--annual-deductible", type=float, default=None)
@click.option("--annual-out-of-pocket", type=float, default=None)
@output_options
@click.pass_context
@handle_errors
def healthcare(ctx: click.Context, as_json: bool, output: Optional[Path],
               current_year: Optional[int], **kwargs) -> None:
    """Healthcare costs between early retirement and Medicare."""
    cfg = HealthcareInputsConfig(**{k: v for k, v in kwargs.items() if v is not None})
    result = calculate_healthcare_gap(
        **cfg.to_kwargs(), current_year=_current_year(ctx, current_year)
    )
    _emit(ctx, result, "Healthcare Gap", as_json, output)


@main.command()
@click.option("--current-age", type=int, default=None)
@click.option("--retirement-age", type=int, default=None)
@click.option("--annual-expenses", type=float, default=None)
@click.option("--lifestyle", type=click.Choice(LIFESTYLES), default=None)
@click.option("--work-preference", type=click.Choice(WORK_PREFERENCES), default=None)
@click.option("--primary-goal", type=click.Choice(PRIMARY_GOALS), default=None)
@click.pass_context
@handle_errors
def advise(ctx: click.Context, **kwargs) -> None:
    """Recommend a FIRE path from a few answers."""
    rec = recommend_fire_path(QuizAnswers(**kwargs))
    if ctx.obj["quiet"]:
        click.echo(f"{rec.scenario}: {rec.title}")
        return
    body = f"[bold]{rec.title}[/bold]\n\n{rec.reason}\n\n{rec.description}\n\n" \
           f"Try: [cyan]firecalc {rec.scenario}[/cyan]"
    ctx.obj["console"].print(Panel(body, title="Recommended Path", border_style="green"))


# ---------------------------------------------------------------------------
# Debt
# ---------------------------------------------------------------------------

@main.group()
def debt() -> None:
    """
    Debt payoff commands.

    Debts are read from a plan file created with 'firecalc config create debt'.
    """
    pass


def _load_plan(path: Path) -> DebtPlanConfig:
    with open(path, "r") as f:
        return DebtPlanConfig.model_validate(json.load(f))


def _print_order(ctx: click.Context, result) -> None:
    if ctx.obj["quiet"]:
        return
    if result.paid_off:
        ctx.obj["console"].print("Payoff order: " + " → ".join(result.payoff_order))
    else:
        ctx.obj["console"].print(
            f"[yellow]Debts are not paid off within {DEBT_MAX_MONTHS} months.[/yellow]"
        )


@debt.command("payoff")
@click.option("--config", "config_file", type=click.Path(exists=True, path_type=Path),
              required=True, help="Debt plan file (JSON)")
@click.option("--strategy", type=click.Choice(["snowball", "avalanche"]), default=None)
@click.option("--budget", type=float, default=None, help="Monthly budget (overrides the plan)")
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.option("--json", "as_json", is_flag=True)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None)
@click.pass_context
@handle_errors
def debt_payoff(ctx: click.Context, config_file: Path, strategy: Optional[str],
                budget: Optional[float], extra: Optional[float], as_json: bool,
                output: Optional[Path]) -> None:
    """Simulate paying off all debts with a fixed monthly budget."""
    plan = _load_plan(config_file)
    debts = plan.to_accounts()
    strategy = strategy or plan.strategy
    budget = plan.monthly_payment if budget is None else budget
    extra = plan.extra_payment if extra is None else extra

    check_budget(debts, budget)
    result = calculate_payoff(debts, strategy, budget, extra)
    _emit(ctx, result, f"Debt Payoff ({strategy})", as_json, output)
    if as_json:
        return
    _print_order(ctx, result)

    if extra > 0 and not ctx.obj["quiet"]:
        savings = extra_payment_savings(calculate_payoff(debts, strategy, budget), result)
        symbol = ctx.obj["settings"].currency_symbol
        ctx.obj["console"].print(
            f"Extra {format_currency(extra, symbol)}/mo saves {savings.months_saved} months and "
            f"{format_currency(savings.interest_saved, symbol)} in interest."
        )


@debt.command("timeline")
@click.option("--config", "config_file", type=click.Path(exists=True, path_type=Path),
              required=True, help="Debt plan file (JSON)")
@click.option("--months", type=int, default=None, help="Target months (overrides the plan)")
@click.option("--strategy", type=click.Choice(["snowball", "avalanche"]), default=None)
@click.option("--json", "as_json", is_flag=True)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None)
@click.pass_context
@handle_errors
def debt_timeline(ctx: click.Context, config_file: Path, months: Optional[int],
                  strategy: Optional[str], as_json: bool, output: Optional[Path]) -> None:
    """Monthly budget needed to be debt-free within a target number of months."""
    plan = _load_plan(config_file)
    months = plan.target_months if months is None else months
    strategy = strategy or plan.strategy

    found = calculate_debt_payoff_by_timeline(
        plan.to_accounts(), months, strategy, plan.extra_payment
    )
    if found is None:
        click.echo(f"Error: no budget pays off these debts within {months} months.", err=True)
        sys.exit(1)
    _emit(ctx, found, f"Debt Timeline ({months} months, {strategy})", as_json, output)


@debt.command("compare")
@click.option("--config", "config_file", type=click.Path(exists=True, path_type=Path),
              required=True, help="Debt plan file (JSON)")
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
@handle_errors
def debt_compare(ctx: click.Context, config_file: Path, as_json: bool) -> None:
    """Compare snowball and avalanche on the plan's budget."""
    plan = _load_plan(config_file)
    debts = plan.to_accounts()
    check_budget(debts, plan.monthly_payment)
    comparison = compare_strategies(debts, plan.monthly_payment, plan.extra_payment)

    if as_json:
        click.echo(json.dumps(result_to_dict(comparison), indent=2))
        return

    symbol = ctx.obj["settings"].currency_symbol
    rows = [
        ("Months", str(comparison.snowball.total_months), str(comparison.avalanche.total_months)),
        ("Total Interest", format_currency(comparison.snowball.total_interest, symbol),
         format_currency(comparison.avalanche.total_interest, symbol)),
        ("Payoff Order", ", ".join(comparison.snowball.payoff_order),
         ", ".join(comparison.avalanche.payoff_order)),
    ]
    if ctx.obj["quiet"]:
        for label, snow, aval in rows:
            click.echo(f"{label}: snowball={snow} avalanche={aval}")
        return

    table = Table(title="Snowball vs Avalanche")
    table.add_column("Metric", style="cyan")
    table.add_column("Snowball", justify="right")
    table.add_column("Avalanche", justify="right")
    for row in rows:
        table.add_row(*row)
    ctx.obj["console"].print(table)
    cheaper = "Avalanche" if comparison.interest_saved >= 0 else "Snowball"
    ctx.obj["console"].print(
        f"{cheaper} saves {format_currency(abs(comparison.interest_saved), symbol)} in interest; "
        f"months saved by avalanche: {comparison.months_saved}."
    )


# ---------------------------------------------------------------------------
# Saved requests
# ---------------------------------------------------------------------------

@main.command()
@click.argument("request_file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None)
@click.option("--current-year", type=int, default=None)
@click.pass_context
@handle_errors
def run(ctx: click.Context, request_file: Path, as_json: bool, output: Optional[Path],
        current_year: Optional[int]) -> None:
    """
    Execute a saved scenario request.

    Example:
        firecalc run requests/standard.json --json
    """
    request = load_request(request_file)
    result = run_scenario(request, current_year=_current_year(ctx, current_year))
    if result is None:
        click.echo("Error: the request has no solution.", err=True)
        sys.exit(1)
    _emit(ctx, result, f"{request.kind} scenario", as_json, output)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@main.group()
def config() -> None:
    """
    Configuration management commands.

    Create and validate input files, and show the active settings.
    """
    pass


def _template(kind: str) -> dict:
    if kind == "debt":
        plan = DebtPlanConfig(debts=[
            DebtAccountConfig(id="card", name="Credit Card", balance=5_000,
                              annual_rate=0.22, min_payment=150),
            DebtAccountConfig(id="car", name="Car Loan", balance=12_000,
                              annual_rate=0.06, min_payment=300),
        ])
        return plan.model_dump()
    return CONFIG_MODELS[kind]().model_dump()


@config.command("create")
@click.argument("kind", type=click.Choice(sorted(CONFIG_MODELS)))
@click.argument("output_file", type=click.Path(path_type=Path))
@click.pass_context
def config_create(ctx: click.Context, kind: str, output_file: Path) -> None:
    """
    Create a configuration file with default values.

    Example:
        firecalc config create debt debts.json
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as f:
        json.dump(_template(kind), f, indent=2)

    if not ctx.obj["quiet"]:
        ctx.obj["console"].print(f"[green]Created {kind} configuration: {output_file}[/green]")


@config.command("validate")
@click.argument("kind", type=click.Choice(sorted(CONFIG_MODELS)))
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, kind: str, config_file: Path) -> None:
    """
    Validate a configuration file against its schema.

    Example:
        firecalc config validate inputs my_inputs.json
    """
    try:
        with open(config_file, "r") as f:
            data = json.load(f)
        cfg = CONFIG_MODELS[kind].model_validate(data)
    except (json.JSONDecodeError, PydanticValidationError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    if ctx.obj["quiet"]:
        click.echo("Configuration is valid")
        return
    info = "\n".join(f"[cyan]{k}[/cyan]: {v}" for k, v in cfg.model_dump().items()
                     if k != "debts")
    if kind == "debt":
        info += f"\n[cyan]debts[/cyan]: {len(cfg.debts)}"
    ctx.obj["console"].print(Panel(info, title="Configuration Valid", border_style="green"))


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the active application settings (FIRECALC_* environment)."""
    settings: AppSettings = ctx.obj["settings"]
    if ctx.obj["quiet"]:
        click.echo(settings.model_dump_json(indent=2))
        return
    table = Table(title="Application Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in settings.model_dump().items():
        table.add_row(key, "—" if value is None else str(value))
    ctx.obj["console"].print(table)


# ---------------------------------------------------------------------------
# Info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show versions and calculation caps."""
    rows = [
        ("Version", __version__),
        ("Request schema", SCHEMA_VERSION),
        ("Years-to-target cap", f"{MAX_YEARS_TO_TARGET} years"),
        ("Projection cap", f"{MAX_PROJECTION_YEARS} years"),
        ("Fixed-horizon cap", f"{MAX_FIXED_HORIZON_YEARS} years"),
        ("Debt simulation cap", f"{DEBT_MAX_MONTHS} months"),
        ("Timeline search", f"{TIMELINE_SEARCH_ITERATIONS} iterations"),
    ]
    if ctx.obj["quiet"]:
        for label, value in rows:
            click.echo(f"{label}: {value}")
        return
    table = Table(title="FIRECalc")
    table.add_column("Item", style="cyan")
    table.add_column("Value", justify="right")
    for row in rows:
        table.add_row(*row)
    ctx.obj["console"].print(table)


if __name__ == "__main__":
    main()
