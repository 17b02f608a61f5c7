"""
Chart data processor and number formatting tests
"""

import pytest

from valuation_reports.report_core.charts import data_processors as processors
from valuation_reports.report_core.charts.data_processors import (
    ChartDataInput,
    format_currency,
    format_percentage,
)


@pytest.mark.parametrize("value, expected", [
    (999, "$999"),
    (1000, "$1,000"),
    (1000000, "$1M"),
    (1500000, "$1.5M"),
    (2300000000, "$2.3B"),
    (999_960_000, "$1B"),
    (-2500000, "-$2.5M"),
    (0, "$0"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize("value, expected", [(15.5, "15.5%"), (-5.2, "-5.2%"), (0, "0.0%"), (33.333, "33.3%")])
def test_format_percentage(value, expected):
    assert format_percentage(value) == expected


def test_financial_data_spreads_over_quarters():
    chart = processors.process_financial_data({'annualRevenue': 1000, 'netProfit': 100})
    revenue, profit = chart.datasets

    assert chart.labels == ['Q1', 'Q2', 'Q3', 'Q4']
    assert revenue.data == pytest.approx([220, 240, 260, 280])
    assert profit.data == pytest.approx([20, 23, 27, 30])


def test_financial_data_missing_section_is_zero():
    chart = processors.process_financial_data(None)
    assert all(value == 0 for dataset in chart.datasets for value in dataset.data)


def test_competitive_defaults_and_industry_average():
    chart = processors.process_competitive_data({'competitiveAnalysis': {'positioningData': {'quality': 10}}})
    ours, industry = chart.datasets

    assert ours.data == [6, 7, 10, 6, 7]
    assert industry.data == [5] * 5


def test_roi_uses_scenario_defaults():
    chart = processors.process_roi_data({})
    assert chart.labels == ['Year 1', 'Year 2', 'Year 3', 'Year 5']
    assert [d.label for d in chart.datasets] == ['Conservative', 'Base Case', 'Optimistic']
    assert chart.datasets[1].data == [18, 28, 40, 65]


def test_risk_levels_with_defaults():
    chart = processors.process_risk_data({'riskAssessment': {'market': {'level': 9}}})
    assert chart.datasets[0].data == [4, 3, 9, 2, 4]


def test_valuation_falls_back_to_calculated_value_multiples():
    chart = processors.process_valuation_data({'calculatedValue': 1000, 'valuation': {'dcf': 1234}})
    assert chart.datasets[0].data == pytest.approx([800, 900, 1234, 1100])


def test_scenario_data_keeps_order_and_defaults():
    chart = processors.process_scenario_data({'scenarios': {
        'Low': {'value': 10, 'risk': 8},
        'High': {'value': 30, 'return': 40},
    }})

    assert chart.labels == ['Low', 'High']
    assert chart.datasets[0].data == [10, 30]
    assert chart.metadata == {'risk': [8, 5], 'return': [15, 40]}


def test_exit_strategy_defaults():
    chart = processors.process_exit_strategy_data({})
    assert chart.datasets[0].data == [1000000, 200000, 300000, 150000, 1650000]
    assert chart.labels[0] == 'Current Value'
    assert chart.labels[-1] == 'Exit Value'


def test_capital_structure_partial_override():
    chart = processors.process_capital_structure_data({'current': {'equity': 1, 'debt': 2}})
    equity, debt = chart.datasets
    assert equity.data == [1, 700000, 800000, 500000]
    assert debt.data == [2, 300000, 200000, 500000]


def test_strategic_options_metadata():
    chart = processors.process_strategic_options_data({'options': {'M&A': {'investment': 100, 'expectedReturn': 22}}})
    assert chart.labels == ['M&A']
    assert chart.metadata == {'risk': [5], 'return': [22]}


def test_projections_defaults_per_series():
    chart = processors.process_projections_data({'ebitda': [1, 2, 3, 4, 5]})
    revenue, ebitda, net_income = chart.datasets
    assert revenue.data[0] == 1000000
    assert ebitda.data == [1, 2, 3, 4, 5]
    assert net_income.data[-1] == 207360


def test_chart_data_input_from_camel_case_dict():
    chart = ChartDataInput.from_dict({
        'labels': ['A', 'B'],
        'datasets': [{'label': 'S', 'data': [1, 2], 'backgroundColor': '#fff', 'borderWidth': 2}],
    })
    dataset = chart.datasets[0]

    assert dataset.background_color == '#fff'
    assert dataset.border_width == 2
    assert 'fill' not in dataset.to_dict()
