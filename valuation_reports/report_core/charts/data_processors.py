"""
Chart Data Processors

Map loosely typed evaluation dicts (camelCase keys, as posted by the
questionnaire front end) into the uniform ChartDataInput shape consumed by
ChartGenerator. Missing optional fields are replaced by fixed defaults;
processors never raise on absent data.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional

# ===== CHART INPUT SHAPE =====


@dataclass
class ChartDataset:
    """One data series with optional styling overrides"""
    label: str
    data: List[float]
    background_color: Optional[Any] = None  # Single color or one color per point
    border_color: Optional[Any] = None
    border_width: Optional[float] = None
    fill: Optional[bool] = None
    tension: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class ChartDataInput:
    """Labels plus parallel datasets, with free-form metadata (risk/return arrays)"""
    labels: List[str]
    datasets: List[ChartDataset]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'labels': list(self.labels),
            'datasets': [ds.to_dict() for ds in self.datasets],
        }
        if self.metadata:
            data['metadata'] = self.metadata
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChartDataInput:
        """Build from a plain dict, accepting camelCase styling keys"""
        datasets = []
        for raw in data.get('datasets', []):
            datasets.append(ChartDataset(
                label=raw.get('label', ''),
                data=list(raw.get('data', [])),
                background_color=raw.get('background_color', raw.get('backgroundColor')),
                border_color=raw.get('border_color', raw.get('borderColor')),
                border_width=raw.get('border_width', raw.get('borderWidth')),
                fill=raw.get('fill'),
                tension=raw.get('tension'),
            ))
        return cls(
            labels=[str(label) for label in data.get('labels', [])],
            datasets=datasets,
            metadata=dict(data.get('metadata') or {}),
        )


def _section(source: Optional[Mapping[str, Any]], key: str) -> Dict[str, Any]:
    """Nested dict lookup that treats missing and null sections as empty"""
    if not source:
        return {}
    return source.get(key) or {}


# ===== PROFESSIONAL TIER PROCESSORS =====

FINANCIAL_QUARTER_LABELS = ['Q1', 'Q2', 'Q3', 'Q4']
REVENUE_QUARTER_WEIGHTS = [0.22, 0.24, 0.26, 0.28]
PROFIT_QUARTER_WEIGHTS = [0.20, 0.23, 0.27, 0.30]


def process_financial_data(financial_data: Optional[Mapping[str, Any]]) -> ChartDataInput:
    """Spread annual revenue and net profit over four quarters"""
    financial_data = financial_data or {}
    revenue = financial_data.get('annualRevenue') or 0
    profit = financial_data.get('netProfit') or 0

    return ChartDataInput(
        labels=list(FINANCIAL_QUARTER_LABELS),
        datasets=[
            ChartDataset(
                label='Revenue',
                data=[revenue * w for w in REVENUE_QUARTER_WEIGHTS],
                border_color='#0ea5e9',
                background_color='#0ea5e9',
            ),
            ChartDataset(
                label='Profit',
                data=[profit * w for w in PROFIT_QUARTER_WEIGHTS],
                border_color='#10b981',
                background_color='#10b981',
            ),
        ],
    )


def process_customer_data(evaluation: Mapping[str, Any]) -> ChartDataInput:
    customers = _section(evaluation, 'customerAnalysis').get('concentrationData') or []

    return ChartDataInput(
        labels=[c.get('name') or 'Customer' for c in customers],
        datasets=[ChartDataset(
            label='Revenue Share',
            data=[c.get('percentage') or 0 for c in customers],
        )],
    )


COMPETITIVE_DIMENSIONS = [
    ('Market Share', 'marketShare', 6),
    ('Innovation', 'innovation', 7),
    ('Quality', 'quality', 8),
    ('Price', 'price', 6),
    ('Service', 'service', 7),
]
INDUSTRY_AVERAGE_SCORE = 5


def process_competitive_data(evaluation: Mapping[str, Any]) -> ChartDataInput:
    positioning = _section(evaluation, 'competitiveAnalysis').get('positioningData') or {}

    return ChartDataInput(
        labels=[label for label, _, _ in COMPETITIVE_DIMENSIONS],
        datasets=[
            ChartDataset(
                label='Our Company',
                data=[positioning.get(key) or default for _, key, default in COMPETITIVE_DIMENSIONS],
            ),
            ChartDataset(
                label='Industry Average',
                data=[INDUSTRY_AVERAGE_SCORE] * len(COMPETITIVE_DIMENSIONS),
            ),
        ],
    )


ROI_YEARS = [('Year 1', 'year1'), ('Year 2', 'year2'), ('Year 3', 'year3'), ('Year 5', 'year5')]
ROI_SCENARIOS = [
    ('Conservative', 'conservative', [12, 18, 25, 40]),
    ('Base Case', 'baseCase', [18, 28, 40, 65]),
    ('Optimistic', 'optimistic', [25, 40, 60, 95]),
]


def process_roi_data(evaluation: Mapping[str, Any]) -> ChartDataInput:
    projections = _section(evaluation, 'investmentAnalysis').get('roiProjections') or {}

    datasets = []
    for label, key, defaults in ROI_SCENARIOS:
        scenario = projections.get(key) or {}
        datasets.append(ChartDataset(
            label=label,
            data=[scenario.get(year_key) or default for (_, year_key), default in zip(ROI_YEARS, defaults)],
        ))

    return ChartDataInput(labels=[label for label, _ in ROI_YEARS], datasets=datasets)


RISK_AREAS = [
    ('Financial', 'financial', 4),
    ('Operational', 'operational', 3),
    ('Market', 'market', 5),
    ('Regulatory', 'regulatory', 2),
    ('Technology', 'technology', 4),
]


def process_risk_data(evaluation: Mapping[str, Any]) -> ChartDataInput:
    """Risk level (0-10) per business area"""
    assessment = evaluation.get('riskAssessment') or {}

    return ChartDataInput(
        labels=[label for label, _, _ in RISK_AREAS],
        datasets=[ChartDataset(
            label='Risk Level',
            data=[(assessment.get(key) or {}).get('level') or default for _, key, default in RISK_AREAS],
        )],
    )


VALUATION_METHODS = [
    ('Asset-Based', 'assetBased', 0.8),
    ('Market Multiple', 'marketMultiple', 0.9),
    ('DCF', 'dcf', 1.0),
    ('Comparable Sales', 'comparableSales', 1.1),
]


def process_valuation_data(evaluation: Mapping[str, Any]) -> ChartDataInput:
    """Value per method, defaulting to fixed multiples of the calculated value"""
    valuation = evaluation.get('valuation') or {}
    calculated = evaluation.get('calculatedValue') or 0

    return ChartDataInput(
        labels=[label for label, _, _ in VALUATION_METHODS],
        datasets=[ChartDataset(
            label='Valuation ($)',
            data=[valuation.get(key) or calculated * factor for _, key, factor in VALUATION_METHODS],
        )],
    )


# ===== ENTERPRISE TIER PROCESSORS =====

DEFAULT_SCENARIO_RISK = 5
DEFAULT_SCENARIO_RETURN = 15


def process_scenario_data(scenario_analysis: Optional[Mapping[str, Any]]) -> ChartDataInput:
    """Scenario values with parallel risk/return metadata, in scenario insertion order"""
    scenarios = _section(scenario_analysis, 'scenarios')
    values = list(scenarios.values())

    return ChartDataInput(
        labels=list(scenarios.keys()),
        datasets=[ChartDataset(
            label='Scenario Outcomes',
            data=[s.get('value') or 0 for s in values],
        )],
        metadata={
            'risk': [s.get('risk') or DEFAULT_SCENARIO_RISK for s in values],
            'return': [s.get('return') or DEFAULT_SCENARIO_RETURN for s in values],
        },
    )


def process_exit_strategy_data(exit_strategy: Optional[Mapping[str, Any]]) -> ChartDataInput:
    """Waterfall steps from current value through improvements to exit value"""
    exit_strategy = exit_strategy or {}
    improvements = exit_strategy.get('improvements') or {}

    return ChartDataInput(
        labels=['Current Value', 'Operational Improvements', 'Market Expansion', 'Efficiency Gains', 'Exit Value'],
        datasets=[ChartDataset(
            label='Value Creation',
            data=[
                exit_strategy.get('currentValue') or 1000000,
                improvements.get('operational') or 200000,
                improvements.get('market') or 300000,
                improvements.get('efficiency') or 150000,
                exit_strategy.get('projectedExitValue') or 1650000,
            ],
        )],
    )


CAPITAL_STRUCTURES = [
    ('Current', 'current', 600000, 400000),
    ('Optimized', 'optimized', 700000, 300000),
    ('Conservative', 'conservative', 800000, 200000),
    ('Aggressive', 'aggressive', 500000, 500000),
]


def process_capital_structure_data(capital_structure: Optional[Mapping[str, Any]]) -> ChartDataInput:
    capital_structure = capital_structure or {}
    mixes = [(capital_structure.get(key) or {}) for _, key, _, _ in CAPITAL_STRUCTURES]

    return ChartDataInput(
        labels=[label for label, _, _, _ in CAPITAL_STRUCTURES],
        datasets=[
            ChartDataset(
                label='Equity',
                data=[mix.get('equity') or equity for mix, (_, _, equity, _) in zip(mixes, CAPITAL_STRUCTURES)],
            ),
            ChartDataset(
                label='Debt',
                data=[mix.get('debt') or debt for mix, (_, _, _, debt) in zip(mixes, CAPITAL_STRUCTURES)],
            ),
        ],
    )


def process_strategic_options_data(strategic_options: Optional[Mapping[str, Any]]) -> ChartDataInput:
    """Investment per option with parallel risk/expected-return metadata"""
    options = _section(strategic_options, 'options')
    values = list(options.values())

    return ChartDataInput(
        labels=list(options.keys()),
        datasets=[ChartDataset(
            label='Strategic Options',
            data=[o.get('investment') or 0 for o in values],
        )],
        metadata={
            'risk': [o.get('risk') or DEFAULT_SCENARIO_RISK for o in values],
            'return': [o.get('expectedReturn') or DEFAULT_SCENARIO_RETURN for o in values],
        },
    )


PROJECTION_YEARS = ['Year 1', 'Year 2', 'Year 3', 'Year 4', 'Year 5']
DEFAULT_PROJECTIONS = {
    'revenue': [1000000, 1200000, 1440000, 1728000, 2073600],
    'ebitda': [200000, 240000, 288000, 345600, 414720],
    'netIncome': [100000, 120000, 144000, 172800, 207360],
}


def process_projections_data(projections: Optional[Mapping[str, Any]]) -> ChartDataInput:
    projections = projections or {}

    return ChartDataInput(
        labels=list(PROJECTION_YEARS),
        datasets=[
            ChartDataset(label='Revenue', data=list(projections.get('revenue') or DEFAULT_PROJECTIONS['revenue'])),
            ChartDataset(label='EBITDA', data=list(projections.get('ebitda') or DEFAULT_PROJECTIONS['ebitda'])),
            ChartDataset(label='Net Income', data=list(projections.get('netIncome') or DEFAULT_PROJECTIONS['netIncome'])),
        ],
    )


def process_advanced_risk_data(
    evaluation: Optional[Mapping[str, Any]] = None,
    enterprise_data: Optional[Mapping[str, Any]] = None,
) -> ChartDataInput:
    """Risk impact per severity band (fixed bands, inputs accepted for interface symmetry)"""
    return ChartDataInput(
        labels=['Low Risk', 'Medium Risk', 'High Risk', 'Critical Risk'],
        datasets=[ChartDataset(label='Risk Impact', data=[500000, 1000000, 2000000, 5000000])],
    )


# ===== NUMBER FORMATTING =====


def _compact(value: float, divisor: float) -> str:
    text = f"{value / divisor:.1f}"
    return text[:-2] if text.endswith('.0') else text


def format_currency(value: float) -> str:
    """
    Format a dollar amount for display.

    Below one million the full amount is shown with thousands separators
    ($999, $1,000). From one million up a compact suffix with at most one
    decimal is used ($1M, $1.5M, $2.3B).
    """
    sign = '-' if value < 0 else ''
    amount = abs(value)

    if amount < 1_000_000:
        return f"{sign}${amount:,.0f}"
    # Rounding can carry 999.95M over to the next unit
    if round(amount / 1_000_000, 1) < 1000:
        return f"{sign}${_compact(amount, 1_000_000)}M"
    return f"{sign}${_compact(amount, 1_000_000_000)}B"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


__all__ = [
    "ChartDataset",
    "ChartDataInput",
    "process_financial_data",
    "process_customer_data",
    "process_competitive_data",
    "process_roi_data",
    "process_risk_data",
    "process_valuation_data",
    "process_scenario_data",
    "process_exit_strategy_data",
    "process_capital_structure_data",
    "process_strategic_options_data",
    "process_projections_data",
    "process_advanced_risk_data",
    "format_currency",
    "format_percentage",
]
