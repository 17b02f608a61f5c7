"""
Chart Integration Service

Connects the chart data processors and ChartGenerator to report assembly:
- Fixed per-tier chart sets (all-or-nothing)
- Custom chart requests dispatched by chart type
- Best-effort batch generation on a thread pool
- HTML embedding and summary helpers
"""

from __future__ import annotations

import html
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from loguru import logger

from ... import config as app_config
from ..styling.tokens import ReportTier, TierLike, resolve_tier
from . import data_processors as processors
from .chart_generator import ChartExportOptions, ChartGenerationError, ChartGenerator


@dataclass
class ChartEmbedConfig:
    """Size and format of charts embedded in a report"""
    width: int = 1200
    height: int = 800
    dpi: int = 300
    format: str = 'base64'
    compression: float = 0.9
    include_title: bool = True
    include_subtitle: bool = True


@dataclass(frozen=True)
class GeneratedChart:
    """Rendered chart plus the metadata needed to embed it"""
    id: str
    title: str
    type: str
    data: str  # Encoded image string
    metadata: Mapping[str, Any]
    subtitle: Optional[str] = None

    def __post_init__(self):
        # Freeze metadata so cached results cannot be mutated by callers
        object.__setattr__(self, 'metadata', MappingProxyType(dict(self.metadata)))


@dataclass
class ChartGenerationRequest:
    chart_type: str
    tier: TierLike
    title: str
    data: Any  # ChartDataInput or an equivalent dict
    subtitle: Optional[str] = None
    config: Dict[str, Any] = field(default_factory=dict)  # Partial ChartEmbedConfig overrides


# Report chart catalogue: id -> (title, subtitle, chart type)
CHART_CATALOGUE: Dict[str, tuple] = {
    'financial-trends': ('Financial Performance Trends', 'Revenue, profitability, and cash flow over time', 'line'),
    'customer-concentration': ('Customer Revenue Concentration', 'Distribution of revenue across customer base', 'doughnut'),
    'competitive-radar': ('Competitive Positioning Analysis', 'Comparison across key competitive dimensions', 'radar'),
    'roi-calculator': ('ROI Projection Analysis', 'Return on investment across different scenarios', 'bar'),
    'risk-assessment': ('Risk Assessment Overview', 'Risk levels across different business areas', 'radar'),
    'valuation-summary': ('Valuation Method Comparison', 'Business value across different valuation approaches', 'bar'),
    'scenario-matrix': ('Scenario Analysis Matrix', 'Outcome distribution across scenario variables', 'scatter'),
    'exit-strategy': ('Exit Strategy Value Waterfall', 'Value creation pathway to exit', 'waterfall'),
    'capital-structure': ('Capital Structure Optimization', 'Optimal debt-equity mix analysis', 'stackedBar'),
    'strategic-options': ('Strategic Options Analysis', 'Risk-return-investment mapping of strategic alternatives', 'bubble'),
    'multi-year-projections': ('Multi-Year Financial Projections', 'Five-year financial performance forecast', 'line'),
    'advanced-risk-analysis': ('Advanced Risk Scenario Analysis', 'Risk impact distribution across scenarios', 'heatmap'),
}


class ChartIntegrationService:
    """
    Chart Integration Service

    High-level interface used by report assembly to turn evaluation data into
    embedded chart images.
    """

    def __init__(
        self,
        chart_generator: Optional[ChartGenerator] = None,
        embed_config: Optional[ChartEmbedConfig] = None,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize service

        Args:
            chart_generator: Generator (and cache) to use, a new one if None
            embed_config: Default embed configuration
            max_workers: Batch thread pool size, read from settings if None
        """
        self.chart_generator = chart_generator or ChartGenerator()
        self.embed_config = embed_config or ChartEmbedConfig()
        self.max_workers = max_workers or app_config.settings.CHART_BATCH_MAX_WORKERS

    # ===== Fixed report chart sets =====

    def generate_professional_charts(
        self,
        evaluation: Mapping[str, Any],
        structure: Optional[Mapping[str, Any]] = None,
    ) -> List[GeneratedChart]:
        """
        Generate the Professional report chart set.

        Customer, competitive and ROI charts are only produced when the
        evaluation carries the matching data. Any failure aborts the whole set.

        Raises:
            ChartGenerationError: If any chart in the set fails
        """
        try:
            charts = self._professional_charts(evaluation, ReportTier.PROFESSIONAL)
        except Exception as e:
            logger.error(f"Error generating professional charts: {e}")
            raise ChartGenerationError(f"Failed to generate professional tier charts: {e}") from e

        logger.info(f"Professional chart set complete: {len(charts)} charts")
        return charts

    def generate_enterprise_charts(
        self,
        evaluation: Mapping[str, Any],
        enterprise_data: Mapping[str, Any],
        structure: Optional[Mapping[str, Any]] = None,
    ) -> List[GeneratedChart]:
        """
        Generate the Enterprise report chart set: the professional set followed
        by the enterprise-only charts whose data is present.

        Raises:
            ChartGenerationError: If any chart in the set fails
        """
        enterprise_data = enterprise_data or {}
        generator = self.chart_generator
        export = self._export_options()

        try:
            charts = self._professional_charts(evaluation, ReportTier.PROFESSIONAL)

            optional_charts: Sequence[tuple] = (
                ('scenarioAnalysis', 'scenario-matrix', processors.process_scenario_data,
                 generator.generate_scenario_matrix_chart),
                ('exitStrategy', 'exit-strategy', processors.process_exit_strategy_data,
                 generator.generate_exit_strategy_chart),
                ('capitalStructure', 'capital-structure', processors.process_capital_structure_data,
                 generator.generate_capital_structure_chart),
                ('strategicOptions', 'strategic-options', processors.process_strategic_options_data,
                 generator.generate_strategic_options_chart),
            )
            for key, chart_id, process, render in optional_charts:
                section = enterprise_data.get(key)
                if section is not None:
                    charts.append(self._build_chart(chart_id, ReportTier.ENTERPRISE, render(process(section), export)))

            projections = enterprise_data.get('multiYearProjections')
            if projections is not None:
                image = generator.generate_financial_trends_chart(
                    processors.process_projections_data(projections), ReportTier.ENTERPRISE, export
                )
                charts.append(self._build_chart('multi-year-projections', ReportTier.ENTERPRISE, image))

            image = generator.generate_scenario_matrix_chart(
                processors.process_advanced_risk_data(evaluation, enterprise_data), export
            )
            charts.append(self._build_chart('advanced-risk-analysis', ReportTier.ENTERPRISE, image))

        except Exception as e:
            logger.error(f"Error generating enterprise charts: {e}")
            raise ChartGenerationError(f"Failed to generate enterprise tier charts: {e}") from e

        logger.info(f"Enterprise chart set complete: {len(charts)} charts")
        return charts

    def _professional_charts(self, evaluation: Mapping[str, Any], tier: ReportTier) -> List[GeneratedChart]:
        generator = self.chart_generator
        export = self._export_options()
        charts: List[GeneratedChart] = []

        image = generator.generate_financial_trends_chart(
            processors.process_financial_data(evaluation.get('financialData')), tier, export
        )
        charts.append(self._build_chart('financial-trends', tier, image))

        if (evaluation.get('customerAnalysis') or {}).get('concentrationData'):
            image = generator.generate_customer_concentration_chart(
                processors.process_customer_data(evaluation), tier, export
            )
            charts.append(self._build_chart('customer-concentration', tier, image))

        if (evaluation.get('competitiveAnalysis') or {}).get('positioningData') is not None:
            image = generator.generate_competitive_radar_chart(
                processors.process_competitive_data(evaluation), tier, export
            )
            charts.append(self._build_chart('competitive-radar', tier, image))

        if (evaluation.get('investmentAnalysis') or {}).get('roiProjections') is not None:
            image = generator.generate_roi_calculator_chart(
                processors.process_roi_data(evaluation), tier, export
            )
            charts.append(self._build_chart('roi-calculator', tier, image))

        image = generator.generate_risk_assessment_chart(processors.process_risk_data(evaluation), tier, export)
        charts.append(self._build_chart('risk-assessment', tier, image))

        image = generator.generate_valuation_comparison_chart(
            processors.process_valuation_data(evaluation), tier, export
        )
        charts.append(self._build_chart('valuation-summary', tier, image))

        return charts

    # ===== Custom and batch generation =====

    def _custom_renderers(self) -> Dict[str, Callable[[Any, ReportTier, ChartExportOptions], str]]:
        generator = self.chart_generator
        return {
            'financial-trends': generator.generate_financial_trends_chart,
            'customer-concentration': generator.generate_customer_concentration_chart,
            'competitive-radar': generator.generate_competitive_radar_chart,
            'roi-calculator': generator.generate_roi_calculator_chart,
            'risk-assessment': generator.generate_risk_assessment_chart,
            'valuation-summary': generator.generate_valuation_comparison_chart,
            'scenario-matrix': lambda data, _tier, export: generator.generate_scenario_matrix_chart(data, export),
            'exit-strategy': lambda data, _tier, export: generator.generate_exit_strategy_chart(data, export),
            'capital-structure': lambda data, _tier, export: generator.generate_capital_structure_chart(data, export),
            'strategic-options': lambda data, _tier, export: generator.generate_strategic_options_chart(data, export),
        }

    def generate_custom_chart(self, request: ChartGenerationRequest) -> GeneratedChart:
        """
        Generate a single chart from an explicit request.

        request.config overrides the embed configuration: format, compression
        and the title/subtitle switches reach the renderer, while width, height
        and dpi are the display size recorded in the metadata. The render
        resolution comes from the generator configuration.

        Raises:
            ValueError: If the chart type is not supported
            ChartGenerationError: If rendering fails
        """
        render = self._custom_renderers().get(request.chart_type)
        if render is None:
            raise ValueError(f"Unsupported chart type: {request.chart_type}")

        tier = resolve_tier(request.tier)
        known = {f.name for f in fields(ChartEmbedConfig)}
        embed = replace(self.embed_config, **{k: v for k, v in request.config.items() if k in known})

        image = render(request.data, tier, self._export_options(embed))

        return GeneratedChart(
            id=f"custom-{request.chart_type}-{int(time.time() * 1000)}",
            title=request.title,
            subtitle=request.subtitle,
            type=request.chart_type,
            data=image,
            metadata=self._metadata(image, tier, embed),
        )

    def generate_chart_batch(self, requests: Sequence[ChartGenerationRequest]) -> List[GeneratedChart]:
        """
        Generate many charts concurrently, best effort.

        Failed requests are logged and left out; successful charts are
        returned in request order.
        """
        if not requests:
            return []

        charts: List[GeneratedChart] = []
        errors: List[str] = []

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(requests))) as executor:
            futures = [executor.submit(self.generate_custom_chart, request) for request in requests]

            for index, future in enumerate(futures):
                try:
                    charts.append(future.result())
                except Exception as e:
                    errors.append(f"Chart {index} failed: {e}")
                    logger.warning(f"Chart {index} ({requests[index].chart_type}) failed: {e}")

        if errors:
            logger.warning(f"Some charts failed to generate: {len(errors)}/{len(requests)}")
        return charts

    # ===== Helpers =====

    def _export_options(self, embed: Optional[ChartEmbedConfig] = None) -> ChartExportOptions:
        embed = embed or self.embed_config
        return ChartExportOptions(
            format=embed.format,
            quality=embed.compression,
            include_title=embed.include_title,
            include_subtitle=embed.include_subtitle,
            include_watermark=False,
        )

    @staticmethod
    def _metadata(image: str, tier: ReportTier, embed: ChartEmbedConfig) -> Dict[str, Any]:
        return {
            'width': embed.width,
            'height': embed.height,
            'format': embed.format,
            'size': len(image),
            'generated_at': datetime.now(),
            'tier': tier.value,
        }

    def _build_chart(self, chart_id: str, tier: ReportTier, image: str) -> GeneratedChart:
        title, subtitle, chart_type = CHART_CATALOGUE[chart_id]
        return GeneratedChart(
            id=chart_id,
            title=title,
            subtitle=subtitle,
            type=chart_type,
            data=image,
            metadata=self._metadata(image, tier, self.embed_config),
        )

    def get_cache_stats(self) -> Dict[str, Any]:
        return self.chart_generator.get_cache_stats()

    def clear_cache(self) -> None:
        self.chart_generator.clear_cache()

    def update_config(self, **changes: Any) -> ChartEmbedConfig:
        """Replace default embed configuration fields"""
        self.embed_config = replace(self.embed_config, **changes)
        return self.embed_config


def embed_chart_in_html(chart: GeneratedChart) -> str:
    """Render a chart as an HTML figure block"""
    title = html.escape(chart.title)
    subtitle = f'<p class="chart-subtitle">{html.escape(chart.subtitle)}</p>' if chart.subtitle else ''
    generated_at = chart.metadata.get('generated_at')
    generated_on = generated_at.strftime('%m/%d/%Y') if isinstance(generated_at, datetime) else ''

    return f"""
    <div class="chart-container" data-chart-id="{html.escape(chart.id)}">
      <div class="chart-header">
        <h3 class="chart-title">{title}</h3>
        {subtitle}
      </div>
      <div class="chart-image">
        <img
          src="{html.escape(chart.data)}"
          alt="{title}"
          width="{chart.metadata.get('width')}"
          height="{chart.metadata.get('height')}"
          style="max-width: 100%; height: auto;"
        />
      </div>
      <div class="chart-metadata">
        <small>Generated on {generated_on}</small>
      </div>
    </div>
    """


def get_chart_summary(charts: Sequence[GeneratedChart]) -> Dict[str, Any]:
    """Count, total encoded size and per-type counts of a chart list"""
    chart_types: Dict[str, int] = {}
    for chart in charts:
        chart_types[chart.type] = chart_types.get(chart.type, 0) + 1

    return {
        'total_charts': len(charts),
        'total_size': sum(chart.metadata.get('size', 0) for chart in charts),
        'chart_types': chart_types,
    }


__all__ = [
    "ChartEmbedConfig",
    "GeneratedChart",
    "ChartGenerationRequest",
    "ChartIntegrationService",
    "CHART_CATALOGUE",
    "embed_chart_in_html",
    "get_chart_summary",
]
