"""
Unit tests for advisor module.
"""

import pytest

from firecalc.advisor import QuizAnswers, recommend_fire_path
from firecalc.exceptions import ConfigurationError


class TestQuizAnswers:

    def test_defaults(self):
        answers = QuizAnswers()
        assert answers.age == 30
        assert answers.years_to_target == 35
        assert answers.expense_level == 50_000

    def test_invalid_option_rejected(self):
        with pytest.raises(ConfigurationError, match="lifestyle"):
            QuizAnswers(lifestyle="extravagant")


class TestRecommendFirePath:

    @pytest.mark.parametrize("answers,expected", [
        (QuizAnswers(lifestyle="minimal"), "lean"),
        (QuizAnswers(annual_expenses=30_000, primary_goal="retire-early"), "lean"),
        (QuizAnswers(lifestyle="luxury"), "fat"),
        (QuizAnswers(annual_expenses=120_000, primary_goal="maintain-lifestyle"), "fat"),
        (QuizAnswers(work_preference="part-time", current_age=45), "barista"),
        (QuizAnswers(current_age=50, retirement_age=55, primary_goal="flexibility"), "barista"),
        (QuizAnswers(work_preference="coast", current_age=45), "coast"),
        (QuizAnswers(current_age=25, retirement_age=60), "coast"),
        (QuizAnswers(current_age=40, retirement_age=50, primary_goal="retire-early"), "reverse"),
        (QuizAnswers(current_age=40, primary_goal="financial-security"), "savings-rate"),
        (QuizAnswers(current_age=40, retirement_age=60), "standard"),
    ])
    def test_rules(self, answers, expected):
        assert recommend_fire_path(answers).scenario == expected

    def test_first_match_wins(self):
        """A minimal lifestyle outranks a part-time work preference."""
        answers = QuizAnswers(lifestyle="minimal", work_preference="part-time")
        assert recommend_fire_path(answers).scenario == "lean"

    def test_default_has_text(self):
        rec = recommend_fire_path(QuizAnswers(current_age=40))
        assert rec.title == "Standard FIRE"
        assert rec.reason and rec.description
