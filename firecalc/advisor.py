"""
FIRE-path advisor for FIRECalc.

Purpose
-------
Maps a short questionnaire (lifestyle, work preference, primary goal, ages,
expenses) to the FIRE scenario that best fits it. Rules are evaluated in a
fixed order and the first match wins; Standard FIRE is the fallback.

Rule order
----------
1. lean          lifestyle "minimal", or expenses < 40k with goal "retire-early"
2. fat           lifestyle "luxury", or expenses ≥ 100k with goal "maintain-lifestyle"
3. barista       work "part-time", or < 10 years to target with goal "flexibility"
4. coast         work "coast", or age < 35 with > 20 years to target
5. reverse       goal "retire-early" with < 15 years to target
6. savings-rate  goal "financial-security"
7. standard      otherwise

Missing answers fall back to age 30, retirement age 65 and expenses 50,000.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .constants import FAT_FIRE_THRESHOLD, LEAN_FIRE_THRESHOLD
from .exceptions import ConfigurationError

__all__ = [
    "LIFESTYLES",
    "WORK_PREFERENCES",
    "PRIMARY_GOALS",
    "QuizAnswers",
    "Recommendation",
    "recommend_fire_path",
]

LIFESTYLES = ("minimal", "moderate", "comfortable", "luxury")
WORK_PREFERENCES = ("quit-completely", "part-time", "flexible", "coast")
PRIMARY_GOALS = ("retire-early", "financial-security", "maintain-lifestyle", "flexibility")

QUIZ_DEFAULT_CURRENT_AGE = 30
QUIZ_DEFAULT_RETIREMENT_AGE = 65
QUIZ_DEFAULT_EXPENSES = 50_000.0


@dataclass(frozen=True)
class QuizAnswers:
    """Questionnaire answers; every field is optional."""
    current_age: Optional[int] = None
    retirement_age: Optional[int] = None
    annual_expenses: Optional[float] = None
    lifestyle: Optional[str] = None
    work_preference: Optional[str] = None
    primary_goal: Optional[str] = None

    def __post_init__(self):
        for name, value, allowed in (
            ("lifestyle", self.lifestyle, LIFESTYLES),
            ("work_preference", self.work_preference, WORK_PREFERENCES),
            ("primary_goal", self.primary_goal, PRIMARY_GOALS),
        ):
            if value is not None and value not in allowed:
                raise ConfigurationError(f"{name} must be one of {allowed}, got {value!r}")

    @property
    def age(self) -> int:
        return self.current_age or QUIZ_DEFAULT_CURRENT_AGE

    @property
    def years_to_target(self) -> int:
        return (self.retirement_age or QUIZ_DEFAULT_RETIREMENT_AGE) - self.age

    @property
    def expense_level(self) -> float:
        return self.annual_expenses or QUIZ_DEFAULT_EXPENSES


@dataclass(frozen=True)
class Recommendation:
    """Recommended scenario (a scenario ``kind``) with display text."""
    scenario: str
    title: str
    reason: str
    description: str


_Rule = Tuple[str, Callable[[QuizAnswers], bool], str, str, str]

_RULES: Tuple[_Rule, ...] = (
    (
        "lean",
        lambda a: a.lifestyle == "minimal"
        or (a.expense_level < LEAN_FIRE_THRESHOLD and a.primary_goal == "retire-early"),
        "Lean FIRE",
        "A minimal lifestyle and low expenses put Lean FIRE within reach.",
        "Reach independence sooner on a frugal budget; needs less capital but steady discipline.",
    ),
    (
        "fat",
        lambda a: a.lifestyle == "luxury"
        or (a.expense_level >= FAT_FIRE_THRESHOLD and a.primary_goal == "maintain-lifestyle"),
        "Fat FIRE",
        "Keeping a comfortable lifestyle without cutbacks matches Fat FIRE.",
        "Retire while keeping an upper-middle-class budget; needs a larger portfolio.",
    ),
    (
        "barista",
        lambda a: a.work_preference == "part-time"
        or (a.years_to_target < 10 and a.primary_goal == "flexibility"),
        "Barista FIRE",
        "Willingness to work part-time makes Barista FIRE a natural first step.",
        "Combine portfolio withdrawals with part-time income to leave full-time work earlier.",
    ),
    (
        "coast",
        lambda a: a.work_preference == "coast" or (a.age < 35 and a.years_to_target > 20),
        "Coast FIRE",
        "A long runway at a young age favours Coast FIRE.",
        "Front-load saving, then let compounding carry the portfolio to the target.",
    ),
    (
        "reverse",
        lambda a: a.primary_goal == "retire-early" and a.years_to_target < 15,
        "Reverse FIRE",
        "A fixed retirement date calls for a targeted savings plan.",
        "Start from the target age and solve for the contribution needed each month.",
    ),
    (
        "savings-rate",
        lambda a: a.primary_goal == "financial-security",
        "Savings Rate",
        "The savings rate underpins every FIRE path.",
        "See how the share of income saved drives the time to independence.",
    ),
)

_DEFAULT = Recommendation(
    scenario="standard",
    title="Standard FIRE",
    reason="The classic approach fits balanced goals and timelines.",
    description="Save 25× annual expenses and withdraw 4% a year.",
)


def recommend_fire_path(answers: QuizAnswers) -> Recommendation:
    """
    Return the first matching recommendation for *answers*.

    Examples
    --------
    >>> recommend_fire_path(QuizAnswers(lifestyle="minimal")).scenario
    'lean'
    >>> recommend_fire_path(QuizAnswers(current_age=40, retirement_age=60)).scenario
    'standard'
    """
    for scenario, matches, title, reason, description in _RULES:
        if matches(answers):
            return Recommendation(scenario, title, reason, description)
    return _DEFAULT
