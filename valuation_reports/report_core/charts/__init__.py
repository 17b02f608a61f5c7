"""
Valuation Report Engine - Charts

Provides chart data processors, the matplotlib-based ChartGenerator with its
content-addressed cache, and the ChartIntegrationService used by report assembly.
"""

from .data_processors import ChartDataInput, ChartDataset, format_currency, format_percentage
from .chart_cache import ChartCache
from .chart_generator import (
    ChartGenerator,
    ChartGeneratorConfig,
    ChartExportOptions,
    ChartGenerationError,
    ChartTheme,
)
from .chart_integration import (
    ChartIntegrationService,
    ChartEmbedConfig,
    ChartGenerationRequest,
    GeneratedChart,
    embed_chart_in_html,
    get_chart_summary,
)

__all__ = [
    "ChartDataInput",
    "ChartDataset",
    "format_currency",
    "format_percentage",
    "ChartCache",
    "ChartGenerator",
    "ChartGeneratorConfig",
    "ChartExportOptions",
    "ChartGenerationError",
    "ChartTheme",
    "ChartIntegrationService",
    "ChartEmbedConfig",
    "ChartGenerationRequest",
    "GeneratedChart",
    "embed_chart_in_html",
    "get_chart_summary",
]
