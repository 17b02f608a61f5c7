"""
Report Styling Integration

Composes the stylesheet assembler, the chart integration service and the
HTML fragment builders into ready-to-embed report markup:
- Tier styling applied to report generation configs
- Cached tier stylesheets with optional custom CSS
- Document shell with print @page rules
- Metrics grids, tables, recommendations, risk and scenario blocks

All interpolated text is HTML-escaped. Raw HTML passed as section or
document content is inserted as is.
"""

from __future__ import annotations

import html
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from ... import config as app_config
from .stylesheet import generate_report_stylesheet, get_chart_styling, get_tier_styling
from .tokens import ColorScheme, ReportTier, TierLike, get_chart_palette, get_color_scheme, resolve_tier

DEFAULT_REPORT_TITLE = 'Professional Business Analysis Report'
PRIORITIES = ('critical', 'high', 'medium', 'low')


class ReportSectionType(str, Enum):
    COVER_PAGE = 'cover_page'
    EXECUTIVE_SUMMARY = 'executive_summary'
    BUSINESS_OVERVIEW = 'business_overview'
    FINANCIAL_ANALYSIS = 'financial_analysis'
    OPERATIONAL_ASSESSMENT = 'operational_assessment'
    STRATEGIC_POSITIONING = 'strategic_positioning'
    RISK_ANALYSIS = 'risk_analysis'
    INVESTMENT_RECOMMENDATIONS = 'investment_recommendations'
    VALUATION_SUMMARY = 'valuation_summary'
    SCENARIO_ANALYSIS = 'scenario_analysis'
    EXIT_STRATEGY = 'exit_strategy'
    CAPITAL_STRUCTURE = 'capital_structure'
    STRATEGIC_OPTIONS = 'strategic_options'
    MULTI_YEAR_PROJECTIONS = 'multi_year_projections'
    APPENDICES = 'appendices'

    @property
    def css_class(self) -> str:
        return f"{self.value.replace('_', '-')}-section"


# ===== FRAGMENT INPUT TYPES =====


@dataclass
class SectionStylingOptions:
    page_break_before: bool = False
    avoid_page_break: bool = False
    custom_class: str = ''


@dataclass
class TableStylingOptions:
    financial: bool = False
    comparison: bool = False


@dataclass
class MetricChange:
    value: float
    unit: str
    period: str


@dataclass
class MetricData:
    label: str
    value: float
    unit: str  # currency | percentage | number | ratio | free text
    change: Optional[MetricChange] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricData:
        change = data.get('change')
        return cls(
            label=data['label'],
            value=data['value'],
            unit=data.get('unit', 'number'),
            change=MetricChange(**change) if change else None,
        )


@dataclass
class TableHeader:
    label: str
    numeric: bool = False
    type: Optional[str] = None  # currency | percentage | number | text


@dataclass
class TableCell:
    value: Any


@dataclass
class TableRow:
    cells: List[TableCell]
    is_total: bool = False


@dataclass
class TableData:
    headers: List[TableHeader]
    rows: List[TableRow]
    title: Optional[str] = None
    caption: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TableData:
        return cls(
            headers=[TableHeader(**h) for h in data.get('headers', [])],
            rows=[
                TableRow(
                    cells=[TableCell(c['value'] if isinstance(c, Mapping) else c) for c in row.get('cells', [])],
                    is_total=row.get('is_total', False),
                )
                for row in data.get('rows', [])
            ],
            title=data.get('title'),
            caption=data.get('caption'),
        )


@dataclass
class ActionItem:
    text: str
    timeline: Optional[str] = None


@dataclass
class RecommendationData:
    title: str
    description: str
    priority: str  # critical | high | medium | low
    metrics: List[MetricData] = field(default_factory=list)
    action_items: List[ActionItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RecommendationData:
        return cls(
            title=data['title'],
            description=data.get('description', ''),
            priority=data.get('priority', 'medium'),
            metrics=[MetricData.from_dict(m) for m in data.get('metrics', [])],
            action_items=[ActionItem(**a) for a in data.get('action_items', [])],
        )


@dataclass
class RiskData:
    category: str
    description: str
    level: str  # low | medium | high | critical


@dataclass
class OutcomeData:
    label: str
    value: float
    unit: str


@dataclass
class ScenarioData:
    name: str
    probability: float  # 0.0-1.0
    outcomes: List[OutcomeData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScenarioData:
        return cls(
            name=data['name'],
            probability=data.get('probability', 0),
            outcomes=[OutcomeData(**o) for o in data.get('outcomes', [])],
        )


# ===== VALUE FORMATTING =====


def _plain_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_metric_value(value: float, unit: str) -> str:
    """Format a metric value by unit ($1,234 / 12.5% / 1,234.5 / 1.25x)"""
    if unit == 'currency':
        sign = '-' if value < 0 else ''
        return f"{sign}${abs(value):,.0f}"
    if unit == 'percentage':
        return f"{value:.1f}%"
    if unit == 'number':
        if isinstance(value, float):
            return f"{value:,.3f}".rstrip('0').rstrip('.')
        return f"{value:,}"
    if unit == 'ratio':
        return f"{value:.2f}x"
    return f"{_plain_number(value)} {unit}"


def format_cell_value(value: Any, cell_type: Optional[str] = None) -> str:
    if value is None:
        return '-'
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if cell_type in ('currency', 'percentage', 'number'):
            return format_metric_value(value, cell_type)
        return _plain_number(value)
    return str(value)


def _esc(value: Any) -> str:
    return html.escape(str(value))


# ===== INTEGRATION FACADE =====


class ReportStylingIntegration:
    """
    Report Styling Integration

    Explicitly constructed service; hold one per report pipeline, or use
    get_styling_integration() for the shared process default.
    """

    def __init__(self, chart_service=None, stylesheet_cache_size: Optional[int] = None):
        """
        Initialize integration

        Args:
            chart_service: ChartIntegrationService for embedded charts (created on first use if None)
            stylesheet_cache_size: Maximum cached stylesheets, read from settings if None
        """
        self._chart_service = chart_service
        if stylesheet_cache_size is None:
            stylesheet_cache_size = app_config.settings.STYLESHEET_CACHE_MAX_SIZE
        self._style_cache_size = max(stylesheet_cache_size, 1)
        self._style_cache: OrderedDict[Tuple[ReportTier, str], str] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def chart_service(self):
        if self._chart_service is None:
            from ..charts.chart_integration import ChartIntegrationService
            self._chart_service = ChartIntegrationService()
        return self._chart_service

    # ===== Stylesheets and configs =====

    def generate_stylesheet(self, tier: TierLike, custom_styles: Optional[str] = None) -> str:
        """
        Complete stylesheet for a tier, cached per (tier, custom CSS).

        The cache is bounded; the oldest entry is evicted first.

        Custom CSS is appended after the tier styles, so it wins on equal
        specificity.
        """
        tier = resolve_tier(tier)
        cache_key = (tier, custom_styles or '')

        with self._lock:
            cached = self._style_cache.get(cache_key)
        if cached is not None:
            return cached

        stylesheet = generate_report_stylesheet(tier)
        if custom_styles:
            stylesheet = f"{stylesheet}\n\n/* Custom Styles */\n{custom_styles}"

        with self._lock:
            stylesheet = self._style_cache.setdefault(cache_key, stylesheet)
            while len(self._style_cache) > self._style_cache_size:
                self._style_cache.popitem(last=False)
        logger.info(f"Generated {tier.value} stylesheet ({len(stylesheet)} chars)")
        return stylesheet

    def apply_styling_to_config(self, config: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of a report config whose styling carries the tier profile and stylesheet"""
        tier = resolve_tier(config['tier'])
        existing = dict(config.get('styling') or {})
        custom_styles = existing.get('custom_styles') or None

        styling = {
            **existing,
            **get_tier_styling(tier).to_dict(),
            'custom_styles': custom_styles,
            'stylesheet': self.generate_stylesheet(tier, custom_styles),
        }
        return {**config, 'styling': styling}

    def style_chart_configuration(self, chart_config: Mapping[str, Any], tier: TierLike) -> Dict[str, Any]:
        return {
            **chart_config,
            'styling': {**(chart_config.get('styling') or {}), **get_chart_styling(tier)},
        }

    # ===== Document structure =====

    def generate_styled_html_structure(
        self,
        tier: TierLike,
        content: str,
        title: str = DEFAULT_REPORT_TITLE,
        custom_styles: Optional[str] = None,
    ) -> str:
        """Full HTML document with the tier stylesheet and print page rules"""
        stylesheet = self.generate_stylesheet(tier, custom_styles)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_esc(title)}</title>
  <style>
{stylesheet}
  </style>
  <style media="print">
    @page {{
      size: letter;
      margin: 0.75in;
    }}

    body {{
      -webkit-print-color-adjust: exact;
      color-adjust: exact;
      print-color-adjust: exact;
    }}

    .page-break {{
      page-break-before: always;
      break-before: page;
    }}

    .no-page-break {{
      page-break-inside: avoid;
      break-inside: avoid;
    }}

    @page :first {{
      margin-top: 0.5in;
    }}
  </style>
</head>
<body>
  <div class="report-page">
    {content}
  </div>
</body>
</html>
"""

    @staticmethod
    def get_section_class(section_type: Any) -> str:
        """CSS class for a section type, report-section when unrecognized"""
        try:
            return ReportSectionType(section_type).css_class
        except ValueError:
            return 'report-section'

    def wrap_section_content(
        self,
        section_type: Any,
        content: str,
        tier: TierLike,
        options: Optional[SectionStylingOptions] = None,
    ) -> str:
        options = options or SectionStylingOptions()
        classes = ' '.join(filter(None, [
            self.get_section_class(section_type),
            'page-break' if options.page_break_before else '',
            'no-page-break' if options.avoid_page_break else '',
            options.custom_class,
        ]))
        section_name = section_type.value if isinstance(section_type, Enum) else section_type

        return f"""
<section class="{_esc(classes)}" data-section="{_esc(section_name)}">
  {content}
</section>
"""

    # ===== Fragments =====

    def generate_styled_chart(
        self,
        chart_config: Mapping[str, Any],
        tier: TierLike,
        chart_image_url: str,
    ) -> str:
        """
        Chart container for an already rendered image.

        A legend is added for multi-series charts and a note for scenario-sourced data.
        """
        styled = self.style_chart_configuration(chart_config, tier)
        data_source = chart_config.get('data_source') or {}
        note = '<div class="chart-note">*Scenario-based projections</div>' if data_source.get('type') == 'scenario' else ''
        title = _esc(chart_config.get('title', ''))

        return f"""
<div class="chart-container" data-chart-id="{_esc(chart_config.get('id', ''))}">
  <h3 class="chart-title">{title}</h3>
  <div class="chart-canvas">
    <img src="{_esc(chart_image_url)}" alt="{title}" style="max-width: 100%; height: auto;" />
  </div>
  {self._chart_legend(styled)}
  {note}
</div>
"""

    @staticmethod
    def _chart_legend(styled_config: Mapping[str, Any]) -> str:
        series = styled_config.get('series') or []
        if len(series) <= 1:
            return ''

        colors = styled_config['styling']['colors']['primary']
        items = ''.join(
            f"""
      <div class="legend-item">
        <div class="legend-color" style="background-color: {colors[index % len(colors)]};"></div>
        <span>{_esc(s.get('name', ''))}</span>
      </div>"""
            for index, s in enumerate(series)
        )
        return f'<div class="chart-legend">{items}\n</div>'

    @staticmethod
    def _metric_change(change: MetricChange) -> str:
        if change.value > 0:
            change_class, arrow = 'positive', '↗'
        elif change.value < 0:
            change_class, arrow = 'negative', '↙'
        else:
            change_class, arrow = 'neutral', '→'

        return f"""
<div class="metric-change {change_class}">
  <span>{arrow}</span>
  <span>{abs(change.value):.1f}{_esc(change.unit)}</span>
  <span>{_esc(change.period)}</span>
</div>"""

    def generate_styled_metrics(self, metrics: Sequence[MetricData], tier: TierLike) -> str:
        cards = ''.join(
            f"""
<div class="metric-card">
  <div class="metric-value">{_esc(format_metric_value(m.value, m.unit))}</div>
  <div class="metric-label">{_esc(m.label)}</div>
  {self._metric_change(m.change) if m.change else ''}
</div>"""
            for m in metrics
        )
        return f'\n<div class="metrics-grid">{cards}\n</div>\n'

    def generate_styled_table(
        self,
        data: TableData,
        tier: TierLike,
        options: Optional[TableStylingOptions] = None,
    ) -> str:
        options = options or TableStylingOptions()
        table_classes = ['data-table']
        if options.financial:
            table_classes.append('financial-table')
        if options.comparison:
            table_classes.append('comparison-table')

        header_cells = ''.join(
            f'\n    <th class="{"numeric" if h.numeric else ""}">{_esc(h.label)}</th>' for h in data.headers
        )

        rows_html = []
        for row in data.rows:
            cells_html = []
            for index, cell in enumerate(row.cells):
                header = data.headers[index] if index < len(data.headers) else TableHeader(label='')
                classes = ['numeric'] if header.numeric else []
                value = cell.value
                if options.comparison and isinstance(value, (int, float)) and not isinstance(value, bool):
                    if value > 0:
                        classes.append('positive')
                    elif value < 0:
                        classes.append('negative')
                if header.type in ('currency', 'percentage'):
                    classes.append(header.type)
                cells_html.append(
                    f'<td class="{" ".join(classes)}">{_esc(format_cell_value(value, header.type))}</td>'
                )
            row_class = 'total-row' if row.is_total else ''
            rows_html.append(f'\n  <tr class="{row_class}">{"".join(cells_html)}</tr>')

        title = f'<h4 class="table-title">{_esc(data.title)}</h4>' if data.title else ''
        caption = f'<div class="table-caption">{_esc(data.caption)}</div>' if data.caption else ''

        return f"""
<div class="table-container">
  {title}
  <table class="{' '.join(table_classes)}">
<thead>
  <tr>{header_cells}
  </tr>
</thead>
<tbody>{''.join(rows_html)}
</tbody>
  </table>
  {caption}
</div>
"""

    def generate_styled_recommendations(
        self,
        recommendations: Sequence[RecommendationData],
        tier: TierLike,
    ) -> str:
        items = []
        for rec in recommendations:
            priority = rec.priority if rec.priority in PRIORITIES else 'medium'

            metrics_html = ''
            if rec.metrics:
                metric_items = ''.join(
                    f"""
    <div class="metric-item">
      <div class="value">{_esc(format_metric_value(m.value, m.unit))}</div>
      <div class="label">{_esc(m.label)}</div>
    </div>"""
                    for m in rec.metrics
                )
                metrics_html = f'\n  <div class="recommendation-metrics">{metric_items}\n  </div>'

            actions_html = ''
            if rec.action_items:
                action_items = ''.join(
                    f"""
    <div class="action-item">
      <div class="action-checkbox"></div>
      <div class="action-text">
        {_esc(a.text)}
        {f'<div class="action-timeline">{_esc(a.timeline)}</div>' if a.timeline else ''}
      </div>
    </div>"""
                    for a in rec.action_items
                )
                actions_html = f'\n  <div class="action-items">\n    <h5>Action Items:</h5>{action_items}\n  </div>'

            items.append(f"""
<div class="recommendation-item">
  <div class="recommendation-title">{_esc(rec.title)}</div>
  <span class="recommendation-priority priority-{priority}">{_esc(rec.priority)}</span>
  <p>{_esc(rec.description)}</p>{metrics_html}{actions_html}
</div>""")

        return f"""
<div class="recommendations-section">
  <h2>Strategic Recommendations</h2>{''.join(items)}
</div>
"""

    def generate_styled_risk_assessment(self, risks: Sequence[RiskData], tier: TierLike) -> str:
        """Risk items grouped by category, categories in first-seen order"""
        by_category: Dict[str, List[RiskData]] = {}
        for risk in risks:
            by_category.setdefault(risk.category, []).append(risk)

        categories = []
        for category, category_risks in by_category.items():
            entries = ''.join(
                f"""
    <li>
      <span class="risk-level {_esc(r.level.lower())}">{_esc(r.level.upper())}</span>
      {_esc(r.description)}
    </li>"""
                for r in category_risks
            )
            categories.append(f"""
<div class="risk-category">
  <h4>{_esc(category)} Risks</h4>
  <ul class="risk-list">{entries}
  </ul>
</div>""")

        return f"""
<div class="risk-assessment">
  <h2>Risk Analysis</h2>
  <div class="risk-categories">{''.join(categories)}
  </div>
</div>
"""

    def generate_styled_scenario_analysis(self, scenarios: Sequence[ScenarioData], tier: TierLike) -> str:
        """Scenario cards; empty string below the enterprise tier"""
        if resolve_tier(tier) is not ReportTier.ENTERPRISE:
            return ''

        cards = []
        for scenario in scenarios:
            outcomes = ''.join(
                f"""
    <div class="outcome-item">
      <span>{_esc(o.label)}</span>
      <span class="outcome-value">{_esc(format_metric_value(o.value, o.unit))}</span>
    </div>"""
                for o in scenario.outcomes
            )
            cards.append(f"""
<div class="scenario-card">
  <h3 class="scenario-title">{_esc(scenario.name)}</h3>
  <div class="scenario-probability">Probability: {scenario.probability * 100:.1f}%</div>
  <div class="scenario-outcomes">{outcomes}
  </div>
</div>""")

        return f"""
<div class="scenario-analysis">
  <h2>Scenario Analysis</h2>
  <div class="scenario-grid">{''.join(cards)}
  </div>
</div>
"""

    def generate_report_charts_html(
        self,
        tier: TierLike,
        evaluation: Mapping[str, Any],
        enterprise_data: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Render the tier chart set and embed every chart.

        Raises:
            ChartGenerationError: If the tier chart set fails
        """
        from ..charts.chart_integration import embed_chart_in_html

        tier = resolve_tier(tier)
        if tier is ReportTier.ENTERPRISE:
            charts = self.chart_service.generate_enterprise_charts(evaluation, enterprise_data or {})
        else:
            charts = self.chart_service.generate_professional_charts(evaluation)

        embedded = ''.join(embed_chart_in_html(chart) for chart in charts)
        return f'\n<div class="charts-grid">{embedded}\n</div>\n'


_default_integration: Optional[ReportStylingIntegration] = None
_default_lock = threading.Lock()


def get_styling_integration() -> ReportStylingIntegration:
    """Shared process-wide integration, created on first use"""
    global _default_integration
    with _default_lock:
        if _default_integration is None:
            _default_integration = ReportStylingIntegration()
        return _default_integration


def apply_tier_styling(
    config: Mapping[str, Any],
    customizations: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Apply tier styling to a report config, then overlay explicit customizations"""
    styled = get_styling_integration().apply_styling_to_config(config)
    if customizations:
        styled['styling'] = {**styled['styling'], **customizations}
    return styled


def generate_styled_html(
    tier: TierLike,
    content: str,
    custom_styles: Optional[str] = None,
    title: str = DEFAULT_REPORT_TITLE,
) -> str:
    return get_styling_integration().generate_styled_html_structure(tier, content, title, custom_styles)


def get_chart_colors(tier: TierLike) -> List[str]:
    return list(get_chart_palette(tier).primary)


def get_brand_colors(tier: TierLike) -> ColorScheme:
    return get_color_scheme(tier)


__all__ = [
    "DEFAULT_REPORT_TITLE",
    "ReportSectionType",
    "SectionStylingOptions",
    "TableStylingOptions",
    "MetricChange",
    "MetricData",
    "TableHeader",
    "TableCell",
    "TableRow",
    "TableData",
    "ActionItem",
    "RecommendationData",
    "RiskData",
    "OutcomeData",
    "ScenarioData",
    "format_metric_value",
    "format_cell_value",
    "ReportStylingIntegration",
    "get_styling_integration",
    "apply_tier_styling",
    "generate_styled_html",
    "get_chart_colors",
    "get_brand_colors",
]
