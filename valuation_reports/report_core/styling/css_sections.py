"""
Report CSS Section Generators

One generator per report section. Each takes a tier and returns a CSS string
interpolated from the tier token tables. Generators are pure: the same tier
always yields the same text.
"""

from __future__ import annotations

from .tokens import TierLike, get_chart_palette, get_color_scheme, get_typography


def _num(value: float) -> str:
    """Render a CSS number without float noise or a trailing .0"""
    return f"{round(value, 2):g}"


def generate_base_styles(tier: TierLike) -> str:
    """Generate base document styles, print color handling and page layout"""
    colors = get_color_scheme(tier)
    typography = get_typography(tier)
    body = typography.body

    return f"""
/* Base Document Styles */
* {{
    box-sizing: border-box;
    margin: 0;
    padding: 0;
}}

body {{
    font-family: {body.family};
    font-size: {_num(body.size)}pt;
    font-weight: {body.weight};
    line-height: {_num(body.line_height)};
    color: {body.color or colors.text};
    background-color: {colors.background};
    -webkit-font-smoothing: antialiased;
    -moz-osx-font-smoothing: grayscale;
}}

/* Print Optimization */
@media print {{
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

    .keep-together {{
        page-break-inside: avoid;
        break-inside: avoid;
    }}
}}

/* Page Layout */
.report-page {{
    width: 8.5in;
    min-height: 11in;
    margin: 0 auto;
    padding: 1in;
    background: white;
    box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
}}

@media print {{
    .report-page {{
        width: 100%;
        min-height: auto;
        margin: 0;
        padding: 0.75in;
        box-shadow: none;
    }}
}}
"""


def generate_typography_styles(tier: TierLike) -> str:
    """Generate heading hierarchy, body text, list, code and caption styles"""
    colors = get_color_scheme(tier)
    typography = get_typography(tier)
    headings = typography.headings
    captions = typography.captions
    mono = typography.monospace

    return f"""
/* Typography Hierarchy */
h1, h2, h3, h4, h5, h6 {{
    font-family: {headings.family};
    font-weight: {headings.weight};
    line-height: {_num(headings.line_height)};
    color: {headings.color or colors.text};
    margin-bottom: 0.75em;
    margin-top: 1.5em;
}}

h1 {{
    font-size: {_num(headings.size)}pt;
    border-bottom: 3px solid {colors.primary};
    padding-bottom: 0.5em;
    margin-top: 0;
}}

h2 {{
    font-size: {_num(headings.size * 0.85)}pt;
    color: {colors.primary};
    border-bottom: 1px solid {colors.secondary};
    padding-bottom: 0.3em;
}}

h3 {{
    font-size: {_num(headings.size * 0.7)}pt;
    color: {colors.secondary};
    margin-bottom: 0.5em;
}}

h4 {{
    font-size: {_num(headings.size * 0.6)}pt;
    color: {colors.text};
    font-weight: 600;
}}

h5, h6 {{
    font-size: {_num(typography.body.size)}pt;
    color: {colors.text};
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 0.05em;
}}

/* Body Text */
p {{
    margin-bottom: 1em;
    text-align: justify;
    orphans: 2;
    widows: 2;
}}

/* Lists */
ul, ol {{
    margin-bottom: 1em;
    padding-left: 1.5em;
}}

li {{
    margin-bottom: 0.5em;
}}

/* Emphasis */
strong, b {{
    font-weight: 700;
    color: {colors.text};
}}

em, i {{
    font-style: italic;
    color: {colors.text};
}}

/* Code */
code, pre {{
    font-family: {mono.family};
    font-size: {_num(mono.size)}pt;
    background: {colors.background};
    padding: 0.2em 0.4em;
    border-radius: 3px;
    border: 1px solid {colors.muted};
}}

pre {{
    padding: 1em;
    overflow-x: auto;
    white-space: pre-wrap;
}}

/* Captions */
.caption, .figure-caption, .table-caption {{
    font-family: {captions.family};
    font-size: {_num(captions.size)}pt;
    font-weight: {captions.weight};
    line-height: {_num(captions.line_height)};
    color: {captions.color or colors.muted};
    text-align: center;
    margin-top: 0.5em;
    margin-bottom: 1em;
    font-style: italic;
}}
"""


def generate_header_footer_styles(tier: TierLike) -> str:
    """Generate report header band and footer styles"""
    colors = get_color_scheme(tier)
    typography = get_typography(tier)

    return f"""
/* Header Styles */
.report-header {{
    display: flex;
    justify-content: space-between;
    align-items: center;
    padding: 0.5in 1in;
    background: linear-gradient(135deg, {colors.primary} 0%, {colors.secondary} 100%);
    color: white;
    margin: -1in -1in 1in -1in;
}}

@media print {{
    .report-header {{
        margin: -0.75in -0.75in 0.75in -0.75in;
        padding: 0.375in 0.75in;
    }}
}}

.report-header h1 {{
    margin: 0;
    color: white;
    border: none;
    padding: 0;
    font-size: {_num(typography.headings.size * 1.2)}pt;
}}

.report-header .company-info {{
    text-align: right;
    font-size: {_num(typography.body.size * 0.9)}pt;
}}

.report-header .logo {{
    max-height: 2in;
    max-width: 3in;
}}

/* Footer Styles */
.report-footer {{
    display: flex;
    justify-content: space-between;
    align-items: center;
    padding: 0.5in 1in;
    margin: 1in -1in -1in -1in;
    border-top: 2px solid {colors.primary};
    background: {colors.background};
    font-size: {_num(typography.captions.size)}pt;
    color: {colors.muted};
}}

@media print {{
    .report-footer {{
        margin: 0.75in -0.75in -0.75in -0.75in;
        padding: 0.375in 0.75in;
        position: fixed;
        bottom: 0;
        left: 0;
        right: 0;
    }}
}}

.report-footer .page-number::after {{
    content: counter(page);
}}

.report-footer .confidential {{
    font-weight: 600;
    color: {colors.secondary};
}}
"""


def generate_metrics_styles(tier: TierLike) -> str:
    """Generate key metric cards, financial highlights and score indicators"""
    colors = get_color_scheme(tier)
    palette = get_chart_palette(tier)

    return f"""
/* Key Metrics Grid */
.metrics-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200pt, 1fr));
    gap: 16pt;
    margin: 1em 0;
}}

.metric-card {{
    background: white;
    border: 1px solid {colors.secondary};
    border-radius: 8pt;
    padding: 16pt;
    text-align: center;
    box-shadow: 0 2pt 4pt rgba(0, 0, 0, 0.1);
    page-break-inside: avoid;
    break-inside: avoid;
}}

.metric-value {{
    font-size: 28pt;
    font-weight: 700;
    color: {colors.primary};
    margin-bottom: 4pt;
}}

.metric-label {{
    font-size: 10pt;
    color: {colors.muted};
    text-transform: uppercase;
    letter-spacing: 0.05em;
    margin-bottom: 8pt;
}}

.metric-change {{
    font-size: 9pt;
    font-weight: 600;
    display: flex;
    align-items: center;
    justify-content: center;
    gap: 4pt;
}}

.metric-change.positive {{
    color: {palette.success};
}}

.metric-change.negative {{
    color: {palette.danger};
}}

.metric-change.neutral {{
    color: {palette.neutral};
}}

/* Financial Highlights */
.financial-highlights {{
    background: linear-gradient(135deg, {colors.background} 0%, white 100%);
    border-left: 4pt solid {colors.primary};
    padding: 16pt;
    margin: 1em 0;
    border-radius: 0 8pt 8pt 0;
}}

.financial-highlights h3 {{
    color: {colors.primary};
    margin-top: 0;
}}

/* Score Indicators */
.score-indicator {{
    display: inline-flex;
    align-items: center;
    gap: 8pt;
    padding: 4pt 12pt;
    border-radius: 20pt;
    font-weight: 600;
    font-size: 9pt;
}}

.score-indicator.excellent {{
    background: {palette.success};
    color: white;
}}

.score-indicator.good {{
    background: {colors.accent};
    color: white;
}}

.score-indicator.fair {{
    background: {palette.warning};
    color: white;
}}

.score-indicator.poor {{
    background: {palette.danger};
    color: white;
}}
"""


def generate_table_styles(tier: TierLike) -> str:
    """Generate data, financial and comparison table styles"""
    colors = get_color_scheme(tier)
    typography = get_typography(tier)
    palette = get_chart_palette(tier)

    return f"""
/* Data Tables */
.data-table {{
    width: 100%;
    border-collapse: collapse;
    margin: 1em 0;
    background: white;
    box-shadow: 0 1pt 3pt rgba(0, 0, 0, 0.1);
    page-break-inside: avoid;
    break-inside: avoid;
}}

.data-table th {{
    background: {colors.primary};
    color: white;
    padding: 12pt;
    text-align: left;
    font-weight: 600;
    font-size: {_num(typography.body.size * 0.9)}pt;
    border: 1px solid {colors.secondary};
}}

.data-table th.numeric {{
    text-align: right;
}}

.data-table td {{
    padding: 10pt 12pt;
    border: 1px solid {colors.background};
    font-size: {_num(typography.body.size)}pt;
}}

.data-table td.numeric {{
    text-align: right;
    font-family: {typography.monospace.family};
    font-weight: 500;
}}

.data-table tbody tr:nth-child(even) {{
    background: {colors.background};
}}

.data-table tbody tr:hover {{
    background: {colors.accent}20;
}}

/* Financial Tables */
.financial-table {{
    border: 2px solid {colors.primary};
}}

.financial-table .total-row {{
    background: {colors.secondary}20;
    font-weight: 700;
    border-top: 2px solid {colors.primary};
}}

.financial-table .currency {{
    color: {colors.primary};
}}

.financial-table .percentage {{
    color: {colors.secondary};
}}

/* Comparison Tables */
.comparison-table .positive {{
    color: {palette.success};
    font-weight: 600;
}}

.comparison-table .negative {{
    color: {palette.danger};
    font-weight: 600;
}}

/* Table Captions */
.table-container {{
    margin: 1.5em 0;
    page-break-inside: avoid;
    break-inside: avoid;
}}

.table-title {{
    font-size: {_num(typography.headings.size * 0.6)}pt;
    font-weight: 600;
    color: {colors.primary};
    margin-bottom: 0.5em;
}}
"""


def generate_chart_styles(tier: TierLike) -> str:
    """Generate chart container, grid, legend and annotation styles"""
    colors = get_color_scheme(tier)

    return f"""
/* Chart Containers */
.chart-container {{
    background: white;
    border: 1px solid {colors.background};
    border-radius: 8pt;
    padding: 16pt;
    margin: 1.5em 0;
    text-align: center;
    page-break-inside: avoid;
    break-inside: avoid;
    box-shadow: 0 2pt 4pt rgba(0, 0, 0, 0.1);
}}

.chart-title {{
    font-size: 14pt;
    font-weight: 600;
    color: {colors.primary};
    margin-bottom: 1em;
    text-align: center;
}}

.chart-subtitle {{
    font-size: 10pt;
    color: {colors.muted};
    margin-bottom: 0.75em;
}}

.chart-canvas {{
    max-width: 100%;
    height: auto;
    margin: 0 auto;
}}

/* Chart Grid Layout */
.charts-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(300pt, 1fr));
    gap: 20pt;
    margin: 1em 0;
}}

.chart-grid-item {{
    background: white;
    border: 1px solid {colors.background};
    border-radius: 8pt;
    padding: 12pt;
    page-break-inside: avoid;
}}

/* Dashboard-style Charts */
.dashboard-chart {{
    background: linear-gradient(135deg, white 0%, {colors.background} 100%);
    border-left: 4pt solid {colors.primary};
}}

/* Chart Legends */
.chart-legend {{
    display: flex;
    justify-content: center;
    gap: 16pt;
    margin-top: 12pt;
    flex-wrap: wrap;
}}

.legend-item {{
    display: flex;
    align-items: center;
    gap: 6pt;
    font-size: 9pt;
    color: {colors.text};
}}

.legend-color {{
    width: 12pt;
    height: 12pt;
    border-radius: 2pt;
}}

/* Chart Annotations */
.chart-note {{
    font-size: 8pt;
    color: {colors.muted};
    font-style: italic;
    text-align: left;
    margin-top: 8pt;
    padding-left: 12pt;
    border-left: 2pt solid {colors.background};
}}

.chart-metadata {{
    font-size: 7pt;
    color: {colors.muted};
    text-align: right;
}}
"""


def generate_recommendation_styles(tier: TierLike) -> str:
    """Generate recommendation cards, priority badges and action item styles"""
    colors = get_color_scheme(tier)
    palette = get_chart_palette(tier)

    return f"""
/* Recommendation Sections */
.recommendations-section {{
    background: {colors.background}40;
    border: 1px solid {colors.secondary};
    border-radius: 8pt;
    padding: 20pt;
    margin: 1.5em 0;
    page-break-inside: avoid;
    break-inside: avoid;
}}

.recommendation-item {{
    background: white;
    border-left: 4pt solid {colors.primary};
    padding: 16pt;
    margin-bottom: 16pt;
    border-radius: 0 8pt 8pt 0;
    box-shadow: 0 1pt 3pt rgba(0, 0, 0, 0.1);
}}

.recommendation-title {{
    font-size: 12pt;
    font-weight: 700;
    color: {colors.primary};
    margin-bottom: 8pt;
}}

.recommendation-priority {{
    display: inline-block;
    padding: 4pt 8pt;
    border-radius: 4pt;
    font-size: 8pt;
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 0.05em;
    margin-bottom: 8pt;
}}

.priority-critical {{
    background: {palette.danger};
    color: white;
}}

.priority-high {{
    background: {palette.warning};
    color: white;
}}

.priority-medium {{
    background: {colors.accent};
    color: white;
}}

.priority-low {{
    background: {palette.neutral};
    color: white;
}}

.recommendation-metrics {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(120pt, 1fr));
    gap: 12pt;
    margin-top: 12pt;
    padding-top: 12pt;
    border-top: 1px solid {colors.background};
}}

.metric-item {{
    text-align: center;
}}

.metric-item .value {{
    font-size: 16pt;
    font-weight: 700;
    color: {colors.primary};
}}

.metric-item .label {{
    font-size: 8pt;
    color: {colors.muted};
    text-transform: uppercase;
}}

/* Action Items */
.action-items {{
    margin-top: 16pt;
}}

.action-item {{
    display: flex;
    align-items: flex-start;
    gap: 8pt;
    margin-bottom: 8pt;
    padding: 8pt;
    background: {colors.background}20;
    border-radius: 4pt;
}}

.action-checkbox {{
    width: 12pt;
    height: 12pt;
    border: 2px solid {colors.primary};
    border-radius: 2pt;
    margin-top: 2pt;
}}

.action-text {{
    flex: 1;
    font-size: 10pt;
    line-height: 1.4;
}}

.action-timeline {{
    font-size: 8pt;
    color: {colors.muted};
    font-style: italic;
}}
"""


def generate_risk_styles(tier: TierLike) -> str:
    """Generate risk assessment, risk level, matrix and category styles"""
    colors = get_color_scheme(tier)
    palette = get_chart_palette(tier)

    return f"""
/* Risk Assessment Sections */
.risk-assessment {{
    border: 2px solid {palette.warning};
    border-radius: 8pt;
    padding: 16pt;
    margin: 1em 0;
    background: {palette.warning}10;
    page-break-inside: avoid;
    break-inside: avoid;
}}

.risk-level {{
    display: inline-flex;
    align-items: center;
    gap: 8pt;
    padding: 6pt 12pt;
    border-radius: 20pt;
    font-weight: 700;
    font-size: 10pt;
    text-transform: uppercase;
    letter-spacing: 0.05em;
}}

.risk-level.low {{
    background: {palette.success};
    color: white;
}}

.risk-level.medium {{
    background: {palette.warning};
    color: white;
}}

.risk-level.high {{
    background: {palette.danger};
    color: white;
}}

.risk-level.critical {{
    background: {colors.text};
    color: white;
}}

/* Risk Matrix */
.risk-matrix {{
    display: grid;
    grid-template-columns: repeat(5, 1fr);
    gap: 2pt;
    margin: 1em 0;
    max-width: 300pt;
}}

.risk-cell {{
    aspect-ratio: 1;
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 8pt;
    font-weight: 600;
    border-radius: 2pt;
}}

.risk-cell.low-risk {{
    background: {palette.success}40;
    color: {palette.success};
}}

.risk-cell.medium-risk {{
    background: {palette.warning}40;
    color: {palette.warning};
}}

.risk-cell.high-risk {{
    background: {palette.danger}40;
    color: {palette.danger};
}}

/* Risk Categories */
.risk-categories {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200pt, 1fr));
    gap: 16pt;
    margin: 1em 0;
}}

.risk-category {{
    background: white;
    border: 1px solid {colors.background};
    border-radius: 8pt;
    padding: 16pt;
    box-shadow: 0 1pt 3pt rgba(0, 0, 0, 0.1);
}}

.risk-category h4 {{
    color: {colors.primary};
    margin-bottom: 12pt;
    padding-bottom: 8pt;
    border-bottom: 1px solid {colors.background};
}}

.risk-list {{
    list-style: none;
    padding: 0;
}}

.risk-list li {{
    padding: 6pt 0;
    border-bottom: 1px dotted {colors.background};
    font-size: 9pt;
}}

.risk-list li:last-child {{
    border-bottom: none;
}}
"""


def generate_scenario_styles(tier: TierLike) -> str:
    """Generate scenario analysis styles (assembled for the enterprise tier only)"""
    colors = get_color_scheme(tier)

    return f"""
/* Scenario Analysis (Enterprise Only) */
.scenario-analysis {{
    background: linear-gradient(135deg, {colors.background} 0%, white 100%);
    border: 2px solid {colors.primary};
    border-radius: 12pt;
    padding: 24pt;
    margin: 1.5em 0;
    page-break-inside: avoid;
    break-inside: avoid;
}}

.scenario-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(250pt, 1fr));
    gap: 20pt;
    margin: 1em 0;
}}

.scenario-card {{
    background: white;
    border: 1px solid {colors.secondary};
    border-radius: 8pt;
    padding: 16pt;
    text-align: center;
    box-shadow: 0 4pt 6pt rgba(0, 0, 0, 0.1);
}}

.scenario-title {{
    font-size: 14pt;
    font-weight: 700;
    color: {colors.primary};
    margin-bottom: 12pt;
}}

.scenario-probability {{
    font-size: 11pt;
    color: {colors.muted};
    margin-bottom: 16pt;
}}

.scenario-outcomes {{
    text-align: left;
}}

.outcome-item {{
    display: flex;
    justify-content: space-between;
    padding: 6pt 0;
    border-bottom: 1px dotted {colors.background};
    font-size: 9pt;
}}

.outcome-item:last-child {{
    border-bottom: none;
}}

.outcome-value {{
    font-weight: 600;
    color: {colors.primary};
}}

/* Scenario Comparison */
.scenario-comparison {{
    background: white;
    border: 1px solid {colors.background};
    border-radius: 8pt;
    padding: 16pt;
    margin: 1em 0;
}}

.comparison-header {{
    display: grid;
    grid-template-columns: 1fr repeat(3, 120pt);
    gap: 12pt;
    padding-bottom: 12pt;
    border-bottom: 2px solid {colors.primary};
    font-weight: 700;
    color: {colors.primary};
}}

.comparison-row {{
    display: grid;
    grid-template-columns: 1fr repeat(3, 120pt);
    gap: 12pt;
    padding: 8pt 0;
    border-bottom: 1px solid {colors.background};
    align-items: center;
}}

.comparison-row:last-child {{
    border-bottom: none;
}}

.comparison-value {{
    text-align: right;
    font-weight: 500;
}}
"""


def generate_responsive_styles() -> str:
    """Generate screen breakpoints and print helpers shared by both tiers"""
    return """
/* Responsive Utilities */
@media screen and (max-width: 768px) {
    .report-page {
        padding: 16pt;
    }

    .metrics-grid {
        grid-template-columns: 1fr;
    }

    .charts-grid {
        grid-template-columns: 1fr;
    }

    .scenario-grid {
        grid-template-columns: 1fr;
    }

    .comparison-header,
    .comparison-row {
        grid-template-columns: 1fr;
        text-align: left;
    }

    .comparison-value {
        text-align: left;
    }
}

@media screen and (min-width: 1200px) {
    .report-page {
        max-width: 1000pt;
    }

    .metrics-grid {
        grid-template-columns: repeat(4, 1fr);
    }

    .charts-grid {
        grid-template-columns: repeat(2, 1fr);
    }
}

/* Print-specific responsive adjustments */
@media print {
    .responsive-hide-print {
        display: none !important;
    }

    .force-page-break {
        page-break-before: always;
        break-before: page;
    }

    .avoid-page-break {
        page-break-inside: avoid;
        break-inside: avoid;
    }
}
"""


__all__ = [
    "generate_base_styles",
    "generate_typography_styles",
    "generate_header_footer_styles",
    "generate_metrics_styles",
    "generate_table_styles",
    "generate_chart_styles",
    "generate_recommendation_styles",
    "generate_risk_styles",
    "generate_scenario_styles",
    "generate_responsive_styles",
]
