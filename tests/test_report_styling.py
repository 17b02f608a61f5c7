"""
Stylesheet assembly and tier token tests
"""

import pytest

from valuation_reports.report_core.styling import (
    CHART_PALETTES,
    COLOR_SCHEMES,
    TYPOGRAPHY,
    ReportTier,
    generate_report_stylesheet,
    get_chart_styling,
    get_tier_styling,
    resolve_tier,
)
from valuation_reports.report_core.styling.css_sections import generate_scenario_styles
from valuation_reports.report_core.styling.tokens import TAGLINES

TIERS = list(ReportTier)


@pytest.mark.parametrize("table", [COLOR_SCHEMES, TYPOGRAPHY, CHART_PALETTES, TAGLINES])
def test_token_tables_cover_every_tier(table):
    assert set(table) == set(ReportTier)


def test_resolve_tier_accepts_strings_and_rejects_unknown():
    assert resolve_tier("enterprise") is ReportTier.ENTERPRISE
    assert resolve_tier(ReportTier.PROFESSIONAL) is ReportTier.PROFESSIONAL
    with pytest.raises(ValueError):
        resolve_tier("basic")


@pytest.mark.parametrize("tier", TIERS)
def test_stylesheet_has_no_unresolved_placeholders(tier):
    css = generate_report_stylesheet(tier)
    assert "{{" not in css
    assert "undefined" not in css
    assert "null" not in css
    assert "None" not in css


@pytest.mark.parametrize("tier", TIERS)
def test_stylesheet_has_print_rules(tier):
    css = generate_report_stylesheet(tier)
    assert "@media print" in css
    assert "page-break-inside: avoid" in css or "break-inside: avoid" in css


def test_scenario_block_only_for_enterprise():
    marker = "Scenario Analysis (Enterprise Only)"
    assert marker in generate_report_stylesheet(ReportTier.ENTERPRISE)
    assert marker not in generate_report_stylesheet(ReportTier.PROFESSIONAL)
    assert ".scenario-analysis" not in generate_report_stylesheet("professional")


def test_stylesheet_uses_tier_colors():
    professional = generate_report_stylesheet("professional")
    enterprise = generate_report_stylesheet("enterprise")
    assert COLOR_SCHEMES[ReportTier.PROFESSIONAL].primary in professional
    assert COLOR_SCHEMES[ReportTier.ENTERPRISE].primary in enterprise
    assert professional != enterprise


def test_scenario_section_generator_is_self_contained():
    css = generate_scenario_styles(ReportTier.ENTERPRISE)
    assert css.count("{") == css.count("}")


def test_tier_styling_profile():
    styling = get_tier_styling("enterprise")
    colors = COLOR_SCHEMES[ReportTier.ENTERPRISE]

    assert styling.tier == "enterprise"
    assert styling.color_scheme == colors
    assert styling.header_footer.header.styling.background_color == colors.primary
    assert styling.header_footer.footer.styling.background_color == colors.background
    assert "{{title}}" in styling.header_footer.header.content
    assert styling.branding.tagline == TAGLINES[ReportTier.ENTERPRISE]
    assert styling.page_layout.page_size == "letter"


@pytest.mark.parametrize("tier", TIERS)
def test_chart_styling_follows_tier_palette(tier):
    styling = get_chart_styling(tier)
    palette = CHART_PALETTES[tier]

    assert styling['colors']['primary'] == list(palette.primary)
    assert styling['colors']['secondary'] == list(palette.primary[1:])
    assert styling['animations']['enabled'] is False
