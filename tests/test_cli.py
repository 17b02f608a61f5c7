"""
Command-line report assembly tests
"""

import argparse
import json
from pathlib import Path

import pytest

import main
from valuation_reports.report_core.styling import integration as styling_integration
from valuation_reports.report_core.styling.integration import ReportStylingIntegration

SAMPLE = Path(__file__).parent.parent / "samples" / "sample_evaluation.json"


@pytest.fixture(autouse=True)
def isolated_integration(monkeypatch, chart_service):
    integration = ReportStylingIntegration(chart_service=chart_service)
    monkeypatch.setattr(styling_integration, '_default_integration', integration)
    return integration


def _args(tmp_path, **overrides):
    values = {
        'input': str(SAMPLE),
        'tier': None,
        'output': str(tmp_path / 'report.html'),
        'pdf': None,
        'title': None,
        'no_charts': False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_sample_report_enterprise(tmp_path):
    output = main.run_report(_args(tmp_path))
    document = output.read_text(encoding='utf-8')

    assert '<title>Northwind Components - Business Valuation</title>' in document
    assert 'data-section="executive_summary"' in document
    assert 'data-section="scenario_analysis"' in document
    assert 'Scenario Analysis (Enterprise Only)' in document
    assert 'data-chart-id="exit-strategy"' in document


def test_professional_override_drops_enterprise_content(tmp_path):
    document = main.run_report(_args(tmp_path, tier='professional', no_charts=True)).read_text(encoding='utf-8')

    assert 'data-section="scenario_analysis"' not in document
    assert 'charts-grid' not in document
    assert 'data-section="investment_recommendations"' in document


def test_section_order(tmp_path):
    report_input = json.loads(SAMPLE.read_text(encoding='utf-8'))
    body = main.build_report_body(report_input, 'enterprise', include_charts=False)

    order = ['executive_summary', 'financial_analysis', 'risk_analysis', 'scenario_analysis',
             'investment_recommendations']
    positions = [body.index(f'data-section="{name}"') for name in order]
    assert positions == sorted(positions)


def test_missing_input_exits(tmp_path):
    with pytest.raises(SystemExit):
        main.load_report_input(tmp_path / 'nope.json')
