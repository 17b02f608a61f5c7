"""
Valuation Report Engine - Styling

Provides tier token tables, CSS section generators, the stylesheet assembler,
style utilities and the ReportStylingIntegration facade.
"""

from .tokens import (
    ReportTier,
    ColorScheme,
    FontRole,
    Typography,
    ChartPalette,
    COLOR_SCHEMES,
    TYPOGRAPHY,
    CHART_PALETTES,
    get_color_scheme,
    get_typography,
    get_chart_palette,
    resolve_tier,
)
from .stylesheet import generate_report_stylesheet, get_tier_styling, get_chart_styling
from .style_utils import (
    to_print_color,
    get_contrast_color,
    get_luminance_contrast_color,
    get_page_break_css,
    px_to_pt,
    pt_to_px,
)
from .integration import (
    ReportStylingIntegration,
    ReportSectionType,
    get_styling_integration,
    apply_tier_styling,
    generate_styled_html,
    get_chart_colors,
    get_brand_colors,
)

__all__ = [
    "ReportTier",
    "ColorScheme",
    "FontRole",
    "Typography",
    "ChartPalette",
    "COLOR_SCHEMES",
    "TYPOGRAPHY",
    "CHART_PALETTES",
    "get_color_scheme",
    "get_typography",
    "get_chart_palette",
    "resolve_tier",
    "generate_report_stylesheet",
    "get_tier_styling",
    "get_chart_styling",
    "to_print_color",
    "get_contrast_color",
    "get_luminance_contrast_color",
    "get_page_break_css",
    "px_to_pt",
    "pt_to_px",
    "ReportStylingIntegration",
    "ReportSectionType",
    "get_styling_integration",
    "apply_tier_styling",
    "generate_styled_html",
    "get_chart_colors",
    "get_brand_colors",
]
