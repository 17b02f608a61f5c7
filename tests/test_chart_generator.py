"""
Chart generator tests: output formats, caching and failure wrapping
"""

import base64

import pytest

from valuation_reports.report_core.charts import data_processors as processors
from valuation_reports.report_core.charts.chart_generator import (
    ChartExportOptions,
    ChartGenerationError,
    ChartGenerator,
    ChartGeneratorConfig,
    font_families,
)
from valuation_reports.report_core.styling.tokens import ReportTier

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


def _trend_data(revenue=1000000):
    return processors.process_financial_data({'annualRevenue': revenue, 'netProfit': revenue / 10})


def test_default_output_is_png_data_uri(chart_generator):
    image = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')

    prefix = 'data:image/png;base64,'
    assert image.startswith(prefix)
    assert base64.b64decode(image[len(prefix):]).startswith(PNG_SIGNATURE)


def test_png_format_is_raw_base64(chart_generator):
    image = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional', {'format': 'png'})
    assert base64.b64decode(image).startswith(PNG_SIGNATURE)


def test_svg_format(chart_generator):
    image = chart_generator.generate_financial_trends_chart(
        _trend_data(), ReportTier.ENTERPRISE, ChartExportOptions(format='svg')
    )
    prefix = 'data:image/svg+xml;base64,'
    assert image.startswith(prefix)
    assert b'<svg' in base64.b64decode(image[len(prefix):])


def test_identical_request_is_served_from_cache(chart_generator):
    first = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    size_after_first = len(chart_generator.cache)

    second = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')

    assert second == first
    assert len(chart_generator.cache) == size_after_first == 1
    assert chart_generator.get_cache_stats()['hits'] == 1


def test_different_data_creates_new_entry(chart_generator):
    chart_generator.generate_financial_trends_chart(_trend_data(1000000), 'professional')
    chart_generator.generate_financial_trends_chart(_trend_data(2000000), 'professional')
    assert len(chart_generator.cache) == 2


def test_tier_is_part_of_cache_identity(chart_generator):
    chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    chart_generator.generate_financial_trends_chart(_trend_data(), 'enterprise')
    assert len(chart_generator.cache) == 2


def test_render_failure_is_wrapped(chart_generator, monkeypatch):
    def broken_render(*args, **kwargs):
        raise ValueError("renderer exploded")

    monkeypatch.setattr(chart_generator, '_render_figure', broken_render)

    with pytest.raises(ChartGenerationError, match="Failed to generate chart: renderer exploded"):
        chart_generator.generate_roi_calculator_chart(processors.process_roi_data({}), 'professional')
    assert len(chart_generator.cache) == 0


@pytest.mark.parametrize("render", [
    lambda g: g.generate_customer_concentration_chart(
        processors.process_customer_data({'customerAnalysis': {'concentrationData': [
            {'name': 'A', 'percentage': 60}, {'name': 'B', 'percentage': 40}]}}),
        'professional'),
    lambda g: g.generate_customer_concentration_chart({'labels': [], 'datasets': []}, 'professional'),
    lambda g: g.generate_competitive_radar_chart(processors.process_competitive_data({}), 'enterprise'),
    lambda g: g.generate_risk_assessment_chart(processors.process_risk_data({}), 'professional'),
    lambda g: g.generate_valuation_comparison_chart(
        processors.process_valuation_data({'calculatedValue': 5e6}), 'enterprise'),
    lambda g: g.generate_scenario_matrix_chart(processors.process_advanced_risk_data()),
    lambda g: g.generate_exit_strategy_chart(processors.process_exit_strategy_data({})),
    lambda g: g.generate_capital_structure_chart(processors.process_capital_structure_data({})),
    lambda g: g.generate_strategic_options_chart(processors.process_strategic_options_data(
        {'options': {'Expand': {'investment': 250000, 'risk': 6, 'expectedReturn': 18}}})),
])
def test_every_chart_type_renders(chart_generator, render):
    assert render(chart_generator).startswith('data:image/png;base64,')


def test_watermark_changes_output(chart_generator):
    plain = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    marked = chart_generator.generate_financial_trends_chart(
        _trend_data(), 'professional', {'include_watermark': True}
    )
    assert plain != marked
    assert len(chart_generator.cache) == 2


def test_update_config_clears_cache(chart_generator):
    chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    config = chart_generator.update_config(width=500)

    assert config.width == 500
    assert len(chart_generator.cache) == 0


def test_update_theme_clears_cache_and_returns_copy(chart_generator):
    chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    theme = chart_generator.update_theme('professional', font_family='Georgia, serif')

    assert theme.font_family == 'Georgia, serif'
    assert len(chart_generator.cache) == 0

    theme.colors['primary'].clear()
    assert chart_generator.get_theme('professional').colors['primary']


def test_theme_font_family_changes_rendered_chart(chart_generator):
    before = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    chart_generator.update_theme('professional', font_family='DejaVu Serif, serif')
    after = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')

    assert before != after


def test_theme_spacing_changes_rendered_chart(chart_generator):
    before = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')
    chart_generator.update_theme('professional', spacing={'padding': 60, 'margin': 15, 'legend': 30})
    after = chart_generator.generate_financial_trends_chart(_trend_data(), 'professional')

    assert before != after


def test_font_families_skip_missing_faces():
    assert font_families('NoSuchFace Pro, serif') == ('serif',)
    assert font_families('NoSuchFace Pro') == ('sans-serif',)
    assert font_families('"DejaVu Sans", sans-serif') == ('DejaVu Sans', 'sans-serif')


def test_invalid_options_are_rejected():
    with pytest.raises(ValueError):
        ChartExportOptions(format='gif')
    with pytest.raises(ValueError):
        ChartExportOptions(quality=1.5)
    with pytest.raises(ValueError):
        ChartGeneratorConfig(quality='ultra')
