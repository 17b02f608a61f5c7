"""
Report Stylesheet Assembler

Concatenates the CSS section generators into one tier stylesheet and exposes
the structured tier styling profile and chart styling configuration.
"""

from __future__ import annotations

from typing import Any, Dict

from loguru import logger

from ... import config
from ..renderers.layout import (
    Branding,
    HeaderFooterConfig,
    HeaderFooterSection,
    LogoSettings,
    Margins,
    PageLayout,
    ReportStyling,
    SectionStyling,
    TypographySettings,
)
from .css_sections import (
    generate_base_styles,
    generate_chart_styles,
    generate_header_footer_styles,
    generate_metrics_styles,
    generate_recommendation_styles,
    generate_responsive_styles,
    generate_risk_styles,
    generate_scenario_styles,
    generate_table_styles,
    generate_typography_styles,
)
from .tokens import (
    TAGLINES,
    ReportTier,
    TierLike,
    get_chart_palette,
    get_color_scheme,
    get_typography,
    resolve_tier,
)

HEADER_TEMPLATE = (
    '<h1>{{title}}</h1>'
    '<div class="company-info">{{companyName}}<br>{{reportDate}}</div>'
)
FOOTER_TEMPLATE = (
    '<div class="confidential">CONFIDENTIAL</div>'
    '<div class="page-number">Page </div>'
    '<div>{{generatedDate}}</div>'
)


def generate_report_stylesheet(tier: TierLike) -> str:
    """
    Generate the complete CSS stylesheet for a report tier.

    Sections are emitted in a fixed order. The scenario analysis block is
    only included for the enterprise tier.
    """
    tier = resolve_tier(tier)

    sections = [
        generate_base_styles(tier),
        generate_typography_styles(tier),
        generate_header_footer_styles(tier),
        generate_metrics_styles(tier),
        generate_table_styles(tier),
        generate_chart_styles(tier),
        generate_recommendation_styles(tier),
        generate_risk_styles(tier),
    ]
    if tier is ReportTier.ENTERPRISE:
        sections.append(generate_scenario_styles(tier))
    sections.append(generate_responsive_styles())

    stylesheet = '\n\n'.join(sections)
    logger.debug(f"Assembled {tier.value} stylesheet ({len(stylesheet)} chars, {len(sections)} sections)")
    return stylesheet


def get_tier_styling(tier: TierLike) -> ReportStyling:
    """Build the structured styling profile for a tier"""
    tier = resolve_tier(tier)
    colors = get_color_scheme(tier)
    fonts = get_typography(tier)

    return ReportStyling(
        tier=tier.value,
        color_scheme=colors,
        typography=TypographySettings(fonts=fonts),
        page_layout=PageLayout(),
        header_footer=HeaderFooterConfig(
            header=HeaderFooterSection(
                enabled=True,
                content=HEADER_TEMPLATE,
                height=100,
                styling=SectionStyling(
                    background_color=colors.primary,
                    margins=Margins(top=0, right=0, bottom=20, left=0),
                ),
            ),
            footer=HeaderFooterSection(
                enabled=True,
                content=FOOTER_TEMPLATE,
                height=50,
                styling=SectionStyling(
                    background_color=colors.background,
                    margins=Margins(top=20, right=0, bottom=0, left=0),
                ),
            ),
        ),
        branding=Branding(
            company_name=config.settings.BRAND_COMPANY_NAME,
            tagline=TAGLINES[tier],
            logo=LogoSettings(url=config.settings.BRAND_LOGO_URL or ""),
        ),
    )


def get_chart_styling(tier: TierLike) -> Dict[str, Any]:
    """Chart colors, fonts and print layout settings for a tier"""
    tier = resolve_tier(tier)
    palette = get_chart_palette(tier)
    colors = get_color_scheme(tier)

    return {
        'colors': {
            'primary': list(palette.primary),
            'secondary': list(palette.primary[1:]),
            'accent': [colors.accent],
            'neutral': [palette.neutral],
        },
        'fonts': get_typography(tier).to_dict(),
        'layout': {
            'padding': 16,
            'margin': 8,
            'spacing': 12,
            'alignment': 'center',
        },
        'borders': {
            'width': 1,
            'style': 'solid',
            'color': colors.background,
            'radius': 4,
        },
        'background': {
            'color': 'white',
            'opacity': 1,
            'repeat': 'no-repeat',
        },
        # Disabled for print
        'animations': {
            'enabled': False,
            'duration': 0,
            'easing': 'linear',
            'delay': 0,
        },
    }


__all__ = [
    "HEADER_TEMPLATE",
    "FOOTER_TEMPLATE",
    "generate_report_stylesheet",
    "get_tier_styling",
    "get_chart_styling",
]
