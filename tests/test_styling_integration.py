"""
Report styling integration tests: stylesheet cache, configs and HTML fragments
"""

import pytest

from valuation_reports.report_core.styling import integration as styling_integration
from valuation_reports.report_core.styling.integration import (
    ActionItem,
    MetricChange,
    MetricData,
    OutcomeData,
    RecommendationData,
    ReportSectionType,
    ReportStylingIntegration,
    RiskData,
    ScenarioData,
    SectionStylingOptions,
    TableData,
    TableStylingOptions,
    format_cell_value,
    format_metric_value,
    apply_tier_styling,
    generate_styled_html,
    get_brand_colors,
    get_chart_colors,
)
from valuation_reports.report_core.styling.tokens import CHART_PALETTES, COLOR_SCHEMES, ReportTier


@pytest.fixture
def integration(chart_service):
    return ReportStylingIntegration(chart_service=chart_service)


SCENARIOS = [
    ScenarioData(
        name='Bull Case',
        probability=0.25,
        outcomes=[OutcomeData(label='Exit Value', value=5600000, unit='currency')],
    ),
    ScenarioData(name='Bear Case', probability=0.125),
]


def test_stylesheet_is_cached_per_tier(integration):
    first = integration.generate_stylesheet('professional')
    assert integration.generate_stylesheet(ReportTier.PROFESSIONAL) is first
    assert integration.generate_stylesheet('enterprise') != first


def test_custom_styles_are_appended_and_cached_separately(integration):
    plain = integration.generate_stylesheet('professional')
    custom = integration.generate_stylesheet('professional', '.brand { color: red; }')

    assert custom.startswith(plain)
    assert custom.endswith('/* Custom Styles */\n.brand { color: red; }')
    assert integration.generate_stylesheet('professional') is plain


def test_stylesheet_cache_evicts_oldest_entry(chart_service, monkeypatch):
    builds = []
    original = styling_integration.generate_report_stylesheet

    def counting_build(tier):
        builds.append(tier)
        return original(tier)

    monkeypatch.setattr(styling_integration, 'generate_report_stylesheet', counting_build)
    integration = ReportStylingIntegration(chart_service=chart_service, stylesheet_cache_size=2)

    integration.generate_stylesheet('professional')
    integration.generate_stylesheet('professional', '.a { color: red; }')
    integration.generate_stylesheet('professional', '.b { color: blue; }')
    assert len(builds) == 3

    # Most recent entries are still cached
    integration.generate_stylesheet('professional', '.b { color: blue; }')
    assert len(builds) == 3

    # Oldest entry was evicted and is rebuilt
    integration.generate_stylesheet('professional')
    assert len(builds) == 4


def test_apply_styling_to_config(integration):
    config = {'tier': 'enterprise', 'title': 'Q3', 'styling': {'custom_styles': 'h1 { color: red; }', 'extra': 1}}
    styled = integration.apply_styling_to_config(config)

    assert styled['title'] == 'Q3'
    assert styled['styling']['extra'] == 1
    assert styled['styling']['tier'] == 'enterprise'
    assert styled['styling']['color_scheme'] == COLOR_SCHEMES[ReportTier.ENTERPRISE].to_dict()
    assert styled['styling']['stylesheet'].endswith('h1 { color: red; }')
    assert 'stylesheet' not in config['styling']


def test_html_structure(integration):
    document = integration.generate_styled_html_structure('professional', '<p>Body</p>', title='A & B')

    assert document.startswith('<!DOCTYPE html>')
    assert '<title>A &amp; B</title>' in document
    assert '<p>Body</p>' in document
    assert '@page' in document
    assert 'size: letter' in document


def test_module_level_html_helper_passes_custom_styles():
    document = generate_styled_html('enterprise', '<p/>', custom_styles='.x { margin: 0; }')
    assert '.x { margin: 0; }' in document


def test_section_wrapping(integration):
    html = integration.wrap_section_content(
        ReportSectionType.RISK_ANALYSIS,
        '<p>risks</p>',
        'professional',
        SectionStylingOptions(page_break_before=True, custom_class='highlight'),
    )
    assert 'class="risk-analysis-section page-break highlight"' in html
    assert 'data-section="risk_analysis"' in html


def test_unknown_section_type_uses_generic_class(integration):
    assert integration.get_section_class('glossary') == 'report-section'
    assert 'class="report-section"' in integration.wrap_section_content('glossary', '', 'professional')


@pytest.mark.parametrize("value, unit, expected", [
    (1234567, 'currency', '$1,234,567'),
    (12.345, 'percentage', '12.3%'),
    (1234.5, 'number', '1,234.5'),
    (1.25, 'ratio', '1.25x'),
    (3.0, 'months', '3 months'),
])
def test_format_metric_value(value, unit, expected):
    assert format_metric_value(value, unit) == expected


def test_format_cell_value():
    assert format_cell_value(None) == '-'
    assert format_cell_value(2500, 'currency') == '$2,500'
    assert format_cell_value('n/a', 'currency') == 'n/a'
    assert format_cell_value(4.0) == '4'


def test_metrics_grid(integration):
    metrics = [
        MetricData(label='Revenue', value=2400000, unit='currency',
                   change=MetricChange(value=12.5, unit='%', period='YoY')),
        MetricData(label='Churn', value=4, unit='percentage',
                   change=MetricChange(value=-1, unit='%', period='QoQ')),
    ]
    html = integration.generate_styled_metrics(metrics, 'professional')

    assert html.count('class="metric-card"') == 2
    assert '$2,400,000' in html
    assert 'metric-change positive' in html
    assert 'metric-change negative' in html
    assert '12.5%' in html


def test_table(integration):
    table = TableData.from_dict({
        'title': 'Income Statement',
        'headers': [{'label': 'Line'}, {'label': 'Delta', 'numeric': True, 'type': 'currency'}],
        'rows': [
            {'cells': [{'value': 'Revenue'}, {'value': 1500}]},
            {'cells': ['Costs', -300]},
            {'cells': ['Total', 1200], 'is_total': True},
        ],
    })
    html = integration.generate_styled_table(table, 'enterprise', TableStylingOptions(financial=True, comparison=True))

    assert 'class="data-table financial-table comparison-table"' in html
    assert '<h4 class="table-title">Income Statement</h4>' in html
    assert 'class="numeric positive currency">$1,500' in html
    assert 'class="numeric negative currency">-$300' in html
    assert 'class="total-row"' in html


def test_recommendations(integration):
    recs = [
        RecommendationData(
            title='Reduce customer concentration',
            description='Top customer is 35% of revenue',
            priority='urgent',
            metrics=[MetricData(label='Target share', value=20, unit='percentage')],
            action_items=[ActionItem(text='Open two new channels', timeline='Q1')],
        ),
        RecommendationData.from_dict({'title': 'Refinance debt', 'priority': 'high'}),
    ]
    html = integration.generate_styled_recommendations(recs, 'professional')

    assert 'priority-medium' in html
    assert 'priority-high' in html
    assert '20.0%' in html
    assert '<div class="action-timeline">Q1</div>' in html
    assert html.count('class="recommendation-item"') == 2


def test_risk_assessment_groups_by_category(integration):
    risks = [
        RiskData(category='Market', description='New entrant', level='high'),
        RiskData(category='Financial', description='FX exposure', level='Medium'),
        RiskData(category='Market', description='Pricing pressure', level='low'),
    ]
    html = integration.generate_styled_risk_assessment(risks, 'enterprise')

    assert html.count('class="risk-category"') == 2
    assert html.index('Market Risks') < html.index('Financial Risks')
    assert 'class="risk-level medium">MEDIUM' in html


def test_scenario_analysis_is_enterprise_only(integration):
    assert integration.generate_styled_scenario_analysis(SCENARIOS, 'professional') == ''

    html = integration.generate_styled_scenario_analysis(SCENARIOS, 'enterprise')
    assert 'Bull Case' in html
    assert 'Probability: 25.0%' in html
    assert 'Probability: 12.5%' in html
    assert '$5,600,000' in html


def test_styled_chart_legend_and_note(integration):
    html = integration.generate_styled_chart(
        {
            'id': 'roi',
            'title': 'ROI',
            'series': [{'name': 'Base'}, {'name': 'Upside'}],
            'data_source': {'type': 'scenario'},
        },
        'professional',
        'data:image/png;base64,AAAA',
    )
    first_color = CHART_PALETTES[ReportTier.PROFESSIONAL].primary[0]

    assert f'background-color: {first_color};' in html
    assert 'Scenario-based projections' in html


def test_report_charts_html(integration, evaluation):
    html = integration.generate_report_charts_html('professional', evaluation)
    assert html.count('class="chart-container"') == 6
    assert '<div class="charts-grid">' in html


def test_color_helpers():
    assert get_chart_colors('enterprise') == list(CHART_PALETTES[ReportTier.ENTERPRISE].primary)
    assert get_brand_colors('professional') == COLOR_SCHEMES[ReportTier.PROFESSIONAL]


def test_default_integration_is_shared():
    assert styling_integration.get_styling_integration() is styling_integration.get_styling_integration()


def test_apply_tier_styling_overlays_customizations():
    styled = apply_tier_styling({'tier': 'professional'}, {'watermark': 'DRAFT'})
    assert styled['styling']['watermark'] == 'DRAFT'
    assert styled['styling']['tier'] == 'professional'
