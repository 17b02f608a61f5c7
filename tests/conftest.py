"""
Shared pytest fixtures for the valuation report test suite
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from valuation_reports.report_core.charts.chart_cache import ChartCache
from valuation_reports.report_core.charts.chart_generator import ChartGenerator, ChartGeneratorConfig
from valuation_reports.report_core.charts.chart_integration import ChartIntegrationService


class FakeClock:
    """Manually advanced time source for cache expiry tests"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def small_config():
    # Small canvas keeps rendering fast
    return ChartGeneratorConfig(width=400, height=300, dpi=72, device_pixel_ratio=1.0, quality='low')


@pytest.fixture
def chart_generator(small_config):
    return ChartGenerator(config=small_config, cache=ChartCache(max_size=50, ttl_seconds=None))


@pytest.fixture
def chart_service(chart_generator):
    return ChartIntegrationService(chart_generator=chart_generator, max_workers=2)


@pytest.fixture
def evaluation():
    return {
        'financialData': {'annualRevenue': 2400000, 'netProfit': 360000},
        'customerAnalysis': {
            'concentrationData': [
                {'name': 'Northwind', 'percentage': 35},
                {'name': 'Contoso', 'percentage': 25},
                {'name': 'Others', 'percentage': 40},
            ]
        },
        'competitiveAnalysis': {
            'positioningData': {'marketShare': 7, 'innovation': 8, 'quality': 9, 'price': 5, 'service': 8}
        },
        'investmentAnalysis': {
            'roiProjections': {
                'conservative': {'year1': 10, 'year2': 15, 'year3': 22, 'year5': 35},
                'baseCase': {'year1': 15, 'year2': 25, 'year3': 38, 'year5': 60},
                'optimistic': {'year1': 22, 'year2': 36, 'year3': 55, 'year5': 90},
            }
        },
        'riskAssessment': {'financial': {'level': 3}, 'market': {'level': 6}},
        'valuation': {'dcf': 4200000},
        'calculatedValue': 4000000,
    }


@pytest.fixture
def enterprise_data():
    return {
        'scenarioAnalysis': {
            'scenarios': {
                'Bear': {'value': 2800000, 'risk': 7, 'return': 5},
                'Base': {'value': 4000000},
                'Bull': {'value': 5600000, 'risk': 4, 'return': 30},
            }
        },
        'exitStrategy': {
            'currentValue': 4000000,
            'improvements': {'operational': 500000, 'market': 800000, 'efficiency': 250000},
            'projectedExitValue': 5550000,
        },
        'capitalStructure': {'current': {'equity': 3000000, 'debt': 1000000}},
        'strategicOptions': {
            'options': {
                'Acquisition': {'investment': 2000000, 'risk': 7, 'expectedReturn': 25},
                'Organic Growth': {'investment': 500000, 'risk': 3, 'expectedReturn': 12},
            }
        },
        'multiYearProjections': {'revenue': [2.4e6, 2.9e6, 3.4e6, 4.0e6, 4.6e6]},
    }
