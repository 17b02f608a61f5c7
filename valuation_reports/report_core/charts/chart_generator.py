"""
Print-Quality Chart Generator

Renders report charts with matplotlib (Agg backend, object-oriented Figure API)
and returns them as base64 strings ready for HTML/PDF embedding.

Features:
- Professional / Enterprise chart themes (color ramps, font sizes, spacing, grid)
- Line, doughnut, radar, grouped bar, scatter matrix, waterfall, stacked bar
  and bubble charts
- Content-addressed cache shared by concurrent callers
- base64 data URI, raw PNG base64 and SVG data URI output
"""

from __future__ import annotations

import base64
import copy
import io
import math
from dataclasses import asdict, dataclass, fields, replace
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import matplotlib
from matplotlib import font_manager
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.text import Text
from matplotlib.ticker import FuncFormatter
import numpy as np
from loguru import logger

from ... import config as app_config
from ..styling.tokens import ReportTier, TierLike, resolve_tier
from .chart_cache import ChartCache, build_cache_key
from .data_processors import ChartDataInput, format_currency

# Use non-interactive backend
matplotlib.use('Agg')

EXPORT_FORMATS = ('base64', 'png', 'svg')
QUALITY_LEVELS = ('low', 'medium', 'high', 'print')

# Fraction of the device pixel ratio used at each quality level
QUALITY_SCALE = {'low': 0.5, 'medium': 0.75, 'high': 1.0, 'print': 1.0}

# Matrix point color (indigo), alpha varies with the normalized value
MATRIX_RGB = (99 / 255, 102 / 255, 241 / 255)
WATERMARK_TEXT = 'CONFIDENTIAL'

GENERIC_FONT_FAMILIES = ('serif', 'sans-serif', 'cursive', 'fantasy', 'monospace')

# Plot area margins (figure fractions) before theme padding is added
BASE_MARGINS = {'left': 0.1, 'right': 0.92, 'bottom': 0.1}
MAX_PADDING_FRACTION = 0.2


class ChartGenerationError(RuntimeError):
    """Raised when a chart (or a required chart set) cannot be rendered"""


@dataclass
class ChartGeneratorConfig:
    """Rendering resolution and quality"""
    width: int = 1200  # Logical pixels
    height: int = 800
    dpi: int = 300  # Resolution recorded in PNG output
    background_color: str = '#ffffff'
    device_pixel_ratio: float = 2.0
    quality: str = 'print'

    def __post_init__(self):
        if self.quality not in QUALITY_LEVELS:
            raise ValueError(f"Unsupported chart quality: {self.quality}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Chart width and height must be positive")

    @classmethod
    def from_settings(cls) -> ChartGeneratorConfig:
        settings = app_config.settings
        return cls(
            width=settings.CHART_WIDTH,
            height=settings.CHART_HEIGHT,
            dpi=settings.CHART_DPI,
            background_color=settings.CHART_BACKGROUND_COLOR,
            device_pixel_ratio=settings.CHART_DEVICE_PIXEL_RATIO,
            quality=settings.CHART_QUALITY,
        )


@dataclass
class ChartExportOptions:
    """Per-call output options"""
    format: str = 'base64'  # base64 (PNG data URI) | png (raw base64) | svg (SVG data URI)
    quality: float = 1.0  # 0.0-1.0
    include_title: bool = True
    include_subtitle: bool = True
    include_watermark: bool = False

    def __post_init__(self):
        if self.format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {self.format}")
        if not 0.0 <= self.quality <= 1.0:
            raise ValueError("Export quality must be between 0.0 and 1.0")


ExportOptionsLike = Union[ChartExportOptions, Mapping[str, Any], None]
ChartDataLike = Union[ChartDataInput, Mapping[str, Any]]


@dataclass
class ChartTheme:
    """Tier-specific chart look"""
    tier: str
    colors: Dict[str, List[str]]
    font_family: str
    font_sizes: Dict[str, float]
    font_weights: Dict[str, int]
    spacing: Dict[str, float]
    grid: Dict[str, Any]

    def series_color(self, index: int) -> str:
        ramp = self.colors['primary']
        return ramp[index % len(ramp)]


_WARM_ACCENT = ['#f59e0b', '#d97706', '#b45309', '#92400e', '#78350f']


def default_themes() -> Dict[ReportTier, ChartTheme]:
    """Fresh copies of the built-in chart themes"""
    return {
        ReportTier.PROFESSIONAL: ChartTheme(
            tier=ReportTier.PROFESSIONAL.value,
            colors={
                'primary': ['#0ea5e9', '#0284c7', '#0369a1', '#075985', '#0c4a6e'],
                'secondary': ['#64748b', '#475569', '#334155', '#1e293b', '#0f172a'],
                'accent': list(_WARM_ACCENT),
                'success': ['#10b981', '#059669', '#047857', '#065f46', '#064e3b'],
                'warning': list(_WARM_ACCENT),
                'danger': ['#ef4444', '#dc2626', '#b91c1c', '#991b1b', '#7f1d1d'],
                'neutral': ['#f8fafc', '#f1f5f9', '#e2e8f0', '#cbd5e1', '#94a3b8'],
            },
            font_family='Inter, Helvetica Neue, Arial, sans-serif',
            font_sizes={'title': 18, 'subtitle': 14, 'axis': 11, 'legend': 12, 'tooltip': 11},
            font_weights={'normal': 400, 'bold': 600},
            spacing={'padding': 20, 'margin': 15, 'legend': 10},
            grid={'color': '#e2e8f0', 'line_width': 1, 'display': True},
        ),
        ReportTier.ENTERPRISE: ChartTheme(
            tier=ReportTier.ENTERPRISE.value,
            colors={
                'primary': ['#6366f1', '#4f46e5', '#4338ca', '#3730a3', '#312e81'],
                'secondary': ['#374151', '#111827', '#1f2937', '#4b5563', '#6b7280'],
                'accent': list(_WARM_ACCENT),
                'success': ['#059669', '#047857', '#065f46', '#064e3b', '#022c22'],
                'warning': ['#d97706', '#b45309', '#92400e', '#78350f', '#451a03'],
                'danger': ['#dc2626', '#b91c1c', '#991b1b', '#7f1d1d', '#450a0a'],
                'neutral': ['#f9fafb', '#f3f4f6', '#e5e7eb', '#d1d5db', '#9ca3af'],
            },
            font_family='Inter, Helvetica Neue, Arial, sans-serif',
            font_sizes={'title': 20, 'subtitle': 16, 'axis': 12, 'legend': 13, 'tooltip': 12},
            font_weights={'normal': 400, 'bold': 700},
            spacing={'padding': 25, 'margin': 20, 'legend': 15},
            grid={'color': '#e5e7eb', 'line_width': 1, 'display': True},
        ),
    }


@lru_cache(maxsize=32)
def font_families(font_family: str) -> Tuple[str, ...]:
    """
    Translate a CSS font-family value into a matplotlib family list.

    Faces that are not installed are skipped so matplotlib does not warn on
    every text element; the list always includes a generic family.
    """
    installed = {entry.name for entry in font_manager.fontManager.ttflist}
    families = []
    for name in font_family.split(','):
        name = name.strip().strip('"\'')
        if name in installed or name in GENERIC_FONT_FAMILIES:
            families.append(name)
    if not any(name in GENERIC_FONT_FAMILIES for name in families):
        families.append('sans-serif')
    return tuple(families)


def _apply_font_family(fig: Figure, theme: ChartTheme) -> None:
    # New tick labels created at draw time copy their font from the first tick
    families = list(font_families(theme.font_family))
    for text in fig.findobj(Text):
        text.set_fontfamily(families)


def _legend_spacing(theme: ChartTheme) -> Dict[str, float]:
    # Legend paddings are expressed in font-size units
    gap = theme.spacing.get('legend', 10) / theme.font_sizes['legend']
    return {'borderaxespad': gap, 'labelspacing': gap}


def _currency_axis(ax) -> None:
    ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _pos: format_currency(value)))


def _percent_axis(ax) -> None:
    ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _pos: f"{value:.0f}%"))


class ChartGenerator:
    """
    Print-Quality Chart Generator

    Each public generate_* method renders one chart type for a tier and
    returns the encoded image string. Results are cached by content, so an
    identical request is served without re-rendering.
    """

    def __init__(
        self,
        config: Optional[ChartGeneratorConfig] = None,
        cache: Optional[ChartCache] = None,
    ):
        """
        Initialize chart generator

        Args:
            config: Rendering configuration, read from settings if None
            cache: Shared chart cache, a new bounded cache if None
        """
        self.config = config or ChartGeneratorConfig.from_settings()
        # An empty cache is falsy (it defines __len__), so compare with None
        if cache is None:
            cache = ChartCache(
                max_size=app_config.settings.CHART_CACHE_MAX_SIZE,
                ttl_seconds=app_config.settings.CHART_CACHE_TTL_SECONDS,
            )
        self.cache = cache
        self._themes = default_themes()

    # ===== Professional / shared chart types =====

    def generate_financial_trends_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Line chart of financial performance over time"""
        return self._generate('financial-trends', tier, data, options, self._draw_line,
                              title='Financial Performance Trends')

    def generate_customer_concentration_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Doughnut chart of revenue share per customer, legend shows percentages"""
        return self._generate('customer-concentration', tier, data, options, self._draw_doughnut,
                              title='Customer Revenue Concentration')

    def generate_competitive_radar_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Radar chart of 0-10 scores across competitive dimensions"""
        return self._generate('competitive-radar', tier, data, options, self._draw_radar,
                              title='Competitive Positioning Analysis')

    def generate_risk_assessment_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Radar chart of 0-10 risk levels per business area"""
        return self._generate('risk-assessment', tier, data, options, self._draw_radar,
                              title='Risk Assessment Overview')

    def generate_roi_calculator_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Grouped bars of ROI percentages per scenario and horizon"""
        return self._generate('roi-calculator', tier, data, options, self._draw_grouped_bars,
                              title='ROI Projection Analysis')

    def generate_valuation_comparison_chart(
        self, data: ChartDataLike, tier: TierLike, options: ExportOptionsLike = None
    ) -> str:
        """Grouped bars of business value per valuation method"""
        return self._generate('valuation-summary', tier, data, options, self._draw_valuation_bars,
                              title='Valuation Method Comparison')

    # ===== Enterprise-only chart types =====

    def generate_scenario_matrix_chart(self, data: ChartDataLike, options: ExportOptionsLike = None) -> str:
        """Square matrix of scenario outcomes, opacity scaled by value"""
        return self._generate('scenario-matrix', ReportTier.ENTERPRISE, data, options, self._draw_matrix,
                              title='Scenario Analysis Matrix')

    def generate_exit_strategy_chart(self, data: ChartDataLike, options: ExportOptionsLike = None) -> str:
        """Floating waterfall from current value through improvements to exit value"""
        return self._generate('exit-strategy', ReportTier.ENTERPRISE, data, options, self._draw_waterfall,
                              title='Exit Strategy Value Waterfall')

    def generate_capital_structure_chart(self, data: ChartDataLike, options: ExportOptionsLike = None) -> str:
        """Stacked equity/debt bars per capital structure scenario"""
        return self._generate('capital-structure', ReportTier.ENTERPRISE, data, options, self._draw_stacked_bars,
                              title='Capital Structure Optimization')

    def generate_strategic_options_chart(self, data: ChartDataLike, options: ExportOptionsLike = None) -> str:
        """Bubble chart: x = risk, y = expected return, area grows with investment"""
        return self._generate('strategic-options', ReportTier.ENTERPRISE, data, options, self._draw_bubbles,
                              title='Strategic Options Analysis')

    # ===== Pipeline =====

    @staticmethod
    def _resolve_options(options: ExportOptionsLike) -> ChartExportOptions:
        if isinstance(options, ChartExportOptions):
            return options
        known = {f.name for f in fields(ChartExportOptions)}
        return ChartExportOptions(**{k: v for k, v in (options or {}).items() if k in known})

    @staticmethod
    def _coerce_data(data: ChartDataLike) -> ChartDataInput:
        if isinstance(data, ChartDataInput):
            return data
        return ChartDataInput.from_dict(data)

    def _generate(
        self,
        chart_id: str,
        tier: TierLike,
        data: ChartDataLike,
        options: ExportOptionsLike,
        draw: Callable[..., None],
        title: str,
    ) -> str:
        tier = resolve_tier(tier)
        export = self._resolve_options(options)
        chart_data = self._coerce_data(data)

        cache_key = build_cache_key(chart_id, tier.value, {
            'data': chart_data.to_dict(),
            'options': asdict(export),
            'width': self.config.width,
            'height': self.config.height,
            'dpi': self.config.dpi,
        })

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Chart cache hit: {cache_key}")
            return cached

        logger.debug(f"Chart cache miss, rendering: {cache_key}")
        try:
            result = self._render_figure(draw, self._themes[tier], chart_data, export, title)
        except Exception as e:
            logger.error(f"Chart generation failed ({chart_id}, {tier.value}): {e}")
            raise ChartGenerationError(f"Failed to generate chart: {e}") from e

        self.cache.set(cache_key, result)
        return result

    def _render_figure(
        self,
        draw: Callable[..., None],
        theme: ChartTheme,
        data: ChartDataInput,
        export: ChartExportOptions,
        title: str,
    ) -> str:
        cfg = self.config
        fig = Figure(figsize=(cfg.width / 100, cfg.height / 100), dpi=100, facecolor=cfg.background_color)
        FigureCanvasAgg(fig)

        draw(fig, theme, data)

        if export.include_title:
            fig.suptitle(
                title,
                fontsize=theme.font_sizes['title'],
                fontweight=theme.font_weights['bold'],
                y=0.98,
            )
        subtitle = data.metadata.get('subtitle')
        if export.include_subtitle and subtitle:
            fig.text(0.5, 0.925, str(subtitle), ha='center', va='top',
                     fontsize=theme.font_sizes['subtitle'], color=theme.colors['secondary'][0])
        if export.include_watermark:
            fig.text(0.5, 0.5, WATERMARK_TEXT, ha='center', va='center', rotation=30,
                     fontsize=theme.font_sizes['title'] * 3, color='#000000', alpha=0.06)

        _apply_font_family(fig, theme)

        padding = theme.spacing.get('padding', 0)
        pad_x = min(padding / cfg.width, MAX_PADDING_FRACTION)
        pad_y = min(padding / cfg.height, MAX_PADDING_FRACTION)
        top = 0.85 if export.include_title else 0.95
        fig.subplots_adjust(
            left=BASE_MARGINS['left'] + pad_x,
            right=BASE_MARGINS['right'] - pad_x,
            bottom=BASE_MARGINS['bottom'] + pad_y,
            top=top - pad_y,
        )

        render_dpi = 100 * cfg.device_pixel_ratio * QUALITY_SCALE[cfg.quality]
        buffer = io.BytesIO()
        if export.format == 'svg':
            fig.savefig(buffer, format='svg', facecolor=cfg.background_color)
            encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
            return f"data:image/svg+xml;base64,{encoded}"

        fig.savefig(
            buffer,
            format='png',
            dpi=render_dpi,
            facecolor=cfg.background_color,
            pil_kwargs={'dpi': (cfg.dpi, cfg.dpi)},
        )
        encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
        if export.format == 'base64':
            return f"data:image/png;base64,{encoded}"
        return encoded

    # ===== Drawing helpers =====

    @staticmethod
    def _style_axes(ax, theme: ChartTheme, xlabel: str, ylabel: str) -> None:
        axis_size = theme.font_sizes['axis']
        ax.set_xlabel(xlabel, fontsize=axis_size, fontweight=theme.font_weights['bold'])
        ax.set_ylabel(ylabel, fontsize=axis_size, fontweight=theme.font_weights['bold'])
        ax.tick_params(labelsize=axis_size)
        if theme.grid.get('display', True):
            ax.grid(True, color=theme.grid['color'], linewidth=theme.grid.get('line_width', 1))
            ax.set_axisbelow(True)
        for side in ('top', 'right'):
            ax.spines[side].set_visible(False)

    @staticmethod
    def _legend(ax, theme: ChartTheme, **kwargs) -> None:
        if ax.get_legend_handles_labels()[0]:
            ax.legend(fontsize=theme.font_sizes['legend'], frameon=False, **_legend_spacing(theme), **kwargs)

    def _draw_line(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        positions = np.arange(len(data.labels))
        for index, dataset in enumerate(data.datasets):
            ax.plot(
                positions[:len(dataset.data)],
                dataset.data,
                color=theme.series_color(index),
                linewidth=3,
                marker='o',
                markersize=4,
                label=dataset.label,
            )
        ax.set_xticks(positions)
        ax.set_xticklabels(data.labels)
        self._style_axes(ax, theme, 'Time Period', 'Value ($)')
        _currency_axis(ax)
        self._legend(ax, theme, loc='upper left')

    def _draw_doughnut(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        ax.set_aspect('equal')
        ax.axis('off')

        values = [max(float(v), 0.0) for v in (data.datasets[0].data if data.datasets else [])]
        total = sum(values)
        if total <= 0:
            ax.text(0.5, 0.5, 'No data', ha='center', va='center', transform=ax.transAxes,
                    fontsize=theme.font_sizes['legend'], color=theme.colors['secondary'][0])
            return

        colors = [theme.series_color(i) for i in range(len(values))]
        wedges, _ = ax.pie(
            values,
            colors=colors,
            startangle=90,
            counterclock=False,
            wedgeprops={'width': 0.4, 'edgecolor': '#ffffff', 'linewidth': 2},
        )
        legend_labels = [f"{label}: {value / total * 100:.1f}%" for label, value in zip(data.labels, values)]
        ax.legend(
            wedges,
            legend_labels,
            loc='center left',
            bbox_to_anchor=(1.0, 0.5),
            fontsize=theme.font_sizes['legend'],
            frameon=False,
            **_legend_spacing(theme),
        )

    def _draw_radar(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111, projection='polar')
        count = len(data.labels)
        ax.set_ylim(0, 10)
        ax.set_yticks([2, 4, 6, 8, 10])
        ax.tick_params(labelsize=theme.font_sizes['axis'])
        ax.grid(True, color=theme.grid['color'])
        if count == 0:
            return

        angles = np.linspace(0, 2 * np.pi, count, endpoint=False).tolist()
        ax.set_xticks(angles)
        ax.set_xticklabels(data.labels, fontsize=theme.font_sizes['axis'])
        closed_angles = angles + angles[:1]

        for index, dataset in enumerate(data.datasets):
            values = list(dataset.data[:count])
            if len(values) < count:
                continue
            values.append(values[0])
            color = theme.series_color(index)
            ax.plot(closed_angles, values, color=color, linewidth=2, marker='o', markersize=4,
                    markeredgecolor='#ffffff', label=dataset.label)
            ax.fill(closed_angles, values, color=color, alpha=0.125)

        self._legend(ax, theme, loc='upper right', bbox_to_anchor=(1.3, 1.1))

    def _grouped_bars(self, ax, theme: ChartTheme, data: ChartDataInput) -> None:
        positions = np.arange(len(data.labels))
        series = max(len(data.datasets), 1)
        width = 0.8 / series
        for index, dataset in enumerate(data.datasets):
            offset = (index - (series - 1) / 2) * width
            color = theme.series_color(index)
            ax.bar(positions[:len(dataset.data)] + offset, dataset.data, width,
                   color=color, edgecolor=color, linewidth=1, label=dataset.label)
        ax.set_xticks(positions)
        ax.set_xticklabels(data.labels)

    def _draw_grouped_bars(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        self._grouped_bars(ax, theme, data)
        self._style_axes(ax, theme, 'Investment Scenarios', 'ROI (%)')
        _percent_axis(ax)
        self._legend(ax, theme, loc='upper left')

    def _draw_valuation_bars(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        self._grouped_bars(ax, theme, data)
        self._style_axes(ax, theme, 'Valuation Method', 'Value ($)')
        _currency_axis(ax)
        self._legend(ax, theme, loc='upper left')

    def _draw_matrix(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        self._style_axes(ax, theme, 'Variable X', 'Variable Y')

        values = [float(v) for v in (data.datasets[0].data if data.datasets else [])]
        if not values:
            return

        side = math.ceil(math.sqrt(len(values)))
        low, high = min(values), max(values)
        span = high - low

        xs = [i % side for i in range(len(values))]
        ys = [i // side for i in range(len(values))]
        colors = []
        for value in values:
            normalized = (value - low) / span if span else 0.0
            colors.append((*MATRIX_RGB, 0.3 + 0.7 * normalized))

        ax.scatter(xs, ys, s=900, c=colors, edgecolors=theme.colors['primary'][0], linewidths=1)
        for x, y, label in zip(xs, ys, data.labels):
            ax.annotate(str(label), (x, y), textcoords='offset points', xytext=(0, 22), ha='center',
                        fontsize=theme.font_sizes['tooltip'])
        ax.set_xlim(-0.5, side - 0.5)
        ax.set_ylim(-0.5, max(ys) + 0.5)
        ax.set_xticks(range(side))
        ax.set_yticks(range(max(ys) + 1))

    def _draw_waterfall(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        values = [float(v) for v in (data.datasets[0].data if data.datasets else [])]
        endpoint_color = theme.colors['primary'][0]

        bottoms, heights, colors = [], [], []
        running = 0.0
        for index, value in enumerate(values):
            if index == 0 or index == len(values) - 1:
                # Start and end values are totals drawn from zero
                bottoms.append(0.0)
                heights.append(value)
                colors.append(endpoint_color)
                running = value
                continue
            bottoms.append(running if value >= 0 else running + value)
            heights.append(abs(value))
            colors.append(theme.colors['success'][0] if value >= 0 else theme.colors['danger'][0])
            running += value

        positions = np.arange(len(values))
        ax.bar(positions, heights, 0.6, bottom=bottoms, color=colors, edgecolor=endpoint_color, linewidth=1)
        ax.set_xticks(positions)
        ax.set_xticklabels(data.labels[:len(values)])
        self._style_axes(ax, theme, 'Value Creation Timeline', 'Value Impact ($)')
        _currency_axis(ax)

    def _draw_stacked_bars(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        positions = np.arange(len(data.labels))
        bottom = np.zeros(len(data.labels))
        for index, dataset in enumerate(data.datasets):
            values = np.zeros(len(data.labels))
            values[:len(dataset.data)] = dataset.data[:len(data.labels)]
            color = theme.series_color(index)
            ax.bar(positions, values, 0.6, bottom=bottom, color=color, edgecolor=color,
                   linewidth=1, label=dataset.label)
            bottom = bottom + values
        ax.set_xticks(positions)
        ax.set_xticklabels(data.labels)
        self._style_axes(ax, theme, 'Capital Structure Scenarios', 'Capital Amount ($)')
        _currency_axis(ax)
        self._legend(ax, theme, loc='upper right')

    def _draw_bubbles(self, fig: Figure, theme: ChartTheme, data: ChartDataInput) -> None:
        ax = fig.add_subplot(111)
        ax.set_xlim(0, 10)
        self._style_axes(ax, theme, 'Risk Score (1-10)', 'Expected Return (%)')
        _percent_axis(ax)

        investments = [max(float(v), 0.0) for v in (data.datasets[0].data if data.datasets else [])]
        if not investments:
            return

        risks = list(data.metadata.get('risk') or [])
        returns = list(data.metadata.get('return') or [])
        xs = [risks[i] if i < len(risks) and risks[i] else 5 for i in range(len(investments))]
        ys = [returns[i] if i < len(returns) and returns[i] else 15 for i in range(len(investments))]
        # Bubble radius in pixels grows with the square root of the investment
        radii = [math.sqrt(value) / 10 for value in investments]
        sizes = [(2 * max(r, 3)) ** 2 for r in radii]

        color = theme.colors['primary'][0]
        ax.scatter(xs, ys, s=sizes, color=color, alpha=0.375, edgecolors=color, linewidths=2)
        for x, y, label in zip(xs, ys, data.labels):
            ax.annotate(str(label), (x, y), ha='center', va='center', fontsize=theme.font_sizes['tooltip'])

    # ===== Cache, configuration and themes =====

    def get_cache_stats(self) -> Dict[str, Any]:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Chart cache cleared")

    def update_config(self, **changes: Any) -> ChartGeneratorConfig:
        """Replace configuration fields; cached charts are dropped"""
        self.config = replace(self.config, **changes)
        self.clear_cache()
        return self.config

    def get_theme(self, tier: TierLike) -> ChartTheme:
        """Copy of the current theme for a tier"""
        return copy.deepcopy(self._themes[resolve_tier(tier)])

    def update_theme(self, tier: TierLike, **changes: Any) -> ChartTheme:
        """Replace theme fields for a tier; cached charts are dropped"""
        tier = resolve_tier(tier)
        self._themes[tier] = replace(self._themes[tier], **changes)
        self.clear_cache()
        return self.get_theme(tier)


__all__ = [
    "ChartGenerationError",
    "ChartGeneratorConfig",
    "ChartExportOptions",
    "ChartTheme",
    "ChartGenerator",
    "default_themes",
    "font_families",
    "EXPORT_FORMATS",
]
