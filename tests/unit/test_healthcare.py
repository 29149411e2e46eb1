"""
Unit tests for healthcare module.
"""

import pytest

from firecalc.exceptions import ValidationError
from firecalc.healthcare import calculate_healthcare_gap, estimate_subsidy


class TestHealthcareGap:

    def test_defaults_without_inflation(self, current_year):
        res = calculate_healthcare_gap(30, 55, 0.0, current_year=current_year)
        assert res.gap_years == 10
        assert res.annual_cost == 11_700
        assert res.total_cost == 117_000
        assert res.avg_annual_cost == 11_700
        assert len(res.yearly_breakdown) == 10

    def test_breakdown_labels(self, current_year):
        res = calculate_healthcare_gap(30, 55, 0.05, current_year=current_year)
        first, last = res.yearly_breakdown[0], res.yearly_breakdown[-1]
        assert (first.age, first.calendar_year) == (55, 2050)
        assert (last.age, last.calendar_year) == (64, 2059)
        assert first.cost == 11_700
        assert first.premium == 7_200

    def test_inflation_compounds(self, current_year):
        res = calculate_healthcare_gap(30, 60, 0.05, current_year=current_year)
        expected = sum(11_700 * 1.05 ** i for i in range(5))
        assert res.total_cost == round(expected)
        costs = [y.cost for y in res.yearly_breakdown]
        assert costs == sorted(costs)
        assert res.yearly_breakdown[1].cost == round(11_700 * 1.05)

    def test_no_gap(self, current_year):
        res = calculate_healthcare_gap(30, 67, 0.03, current_year=current_year)
        assert res.gap_years == 0
        assert res.total_cost == 0
        assert res.avg_annual_cost == 0
        assert res.yearly_breakdown == []

    def test_custom_components(self, current_year):
        res = calculate_healthcare_gap(
            40, 62, 0.0, monthly_premium=500, annual_deductible=1_000,
            annual_out_of_pocket=0, medicare_age=65, current_year=current_year,
        )
        assert res.annual_cost == 7_000
        assert res.total_cost == 21_000

    def test_subsidies(self, current_year):
        res = calculate_healthcare_gap(30, 55, 0.03, current_year=current_year)
        assert res.subsidies == {30_000.0: 5_850, 50_000.0: 3_510, 75_000.0: 1_755}

    def test_negative_premium_rejected(self):
        with pytest.raises(ValidationError):
            calculate_healthcare_gap(30, 55, 0.03, monthly_premium=-1)


class TestEstimateSubsidy:

    @pytest.mark.parametrize("income,expected", [
        (20_000, 700), (29_999, 700), (30_000, 500), (60_000, 300), (99_999, 150), (100_000, 0),
    ])
    def test_bands(self, income, expected):
        assert estimate_subsidy(income, 1_000) == pytest.approx(expected)
