"""
Report Style Tokens

Static per-tier constants for the report styling system:
- Color schemes (Professional terracotta / Enterprise espresso and navy)
- Typography for headings, body, captions and monospace text
- Chart palettes with gradients and semantic colors

Every table is keyed by every ReportTier member. Nothing in this module
is computed at request time.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class ReportTier(str, Enum):
    """Product tier selecting every styling table lookup"""
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


TierLike = Union[ReportTier, str]


def resolve_tier(tier: TierLike) -> ReportTier:
    """Coerce a tier value or its string form into a ReportTier (ValueError if unknown)"""
    if isinstance(tier, ReportTier):
        return tier
    return ReportTier(tier)


@dataclass(frozen=True)
class ColorScheme:
    """Six named brand colors for one tier"""
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    muted: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class FontRole:
    """Font settings for one typographic role"""
    family: str
    size: float  # Points
    weight: int
    line_height: float
    color: Optional[str] = None


@dataclass(frozen=True)
class Typography:
    """Font roles used across a report"""
    headings: FontRole
    body: FontRole
    captions: FontRole
    monospace: FontRole

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ChartPalette:
    """Chart colors: ordered series colors, gradients and semantic colors"""
    primary: Tuple[str, ...]
    gradients: Tuple[str, ...]
    success: str
    warning: str
    danger: str
    neutral: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['primary'] = list(self.primary)
        data['gradients'] = list(self.gradients)
        return data


# ===== TIER-SPECIFIC COLOR SCHEMES =====

# Warm terracotta palette
PROFESSIONAL_COLOR_SCHEME = ColorScheme(
    primary='#c96442',
    secondary='#b05730',
    accent='#9c87f5',
    background='#ded8c4',
    text='#3d3929',
    muted='#83827d',
)

# Deep espresso / navy palette
ENTERPRISE_COLOR_SCHEME = ColorScheme(
    primary='#2c1810',
    secondary='#1e3a8a',
    accent='#7c3aed',
    background='#f8f6f3',
    text='#1a1611',
    muted='#6b7280',
)

# ===== TYPOGRAPHY CONFIGURATIONS =====

_INTER = '"Inter", "Helvetica Neue", Arial, sans-serif'
_SOURCE_SANS = '"Source Sans Pro", "Helvetica Neue", Arial, sans-serif'

PROFESSIONAL_TYPOGRAPHY = Typography(
    headings=FontRole(_INTER, 28, 700, 1.2, PROFESSIONAL_COLOR_SCHEME.text),
    body=FontRole(_INTER, 11, 400, 1.6, PROFESSIONAL_COLOR_SCHEME.text),
    captions=FontRole(_INTER, 9, 500, 1.4, PROFESSIONAL_COLOR_SCHEME.muted),
    monospace=FontRole('"JetBrains Mono", "Fira Code", monospace', 10, 400, 1.5, PROFESSIONAL_COLOR_SCHEME.text),
)

ENTERPRISE_TYPOGRAPHY = Typography(
    headings=FontRole('"Playfair Display", "Georgia", serif', 32, 700, 1.1, ENTERPRISE_COLOR_SCHEME.text),
    body=FontRole(_SOURCE_SANS, 12, 400, 1.7, ENTERPRISE_COLOR_SCHEME.text),
    captions=FontRole(_SOURCE_SANS, 10, 600, 1.5, ENTERPRISE_COLOR_SCHEME.muted),
    monospace=FontRole('"SF Mono", "Monaco", monospace', 11, 500, 1.6, ENTERPRISE_COLOR_SCHEME.text),
)

# ===== CHART COLOR PALETTES =====

PROFESSIONAL_CHART_PALETTE = ChartPalette(
    primary=('#c96442', '#b05730', '#9c87f5', '#e97a56', '#8b4513'),
    gradients=(
        'linear-gradient(135deg, #c96442 0%, #e97a56 100%)',
        'linear-gradient(135deg, #b05730 0%, #c96442 100%)',
        'linear-gradient(135deg, #9c87f5 0%, #c8b3ff 100%)',
        'linear-gradient(135deg, #8b4513 0%, #b05730 100%)',
    ),
    success='#10b981',
    warning='#f59e0b',
    danger='#ef4444',
    neutral='#6b7280',
)

ENTERPRISE_CHART_PALETTE = ChartPalette(
    primary=('#2c1810', '#1e3a8a', '#7c3aed', '#4338ca', '#581c87'),
    gradients=(
        'linear-gradient(135deg, #2c1810 0%, #4b2c20 100%)',
        'linear-gradient(135deg, #1e3a8a 0%, #3b82f6 100%)',
        'linear-gradient(135deg, #7c3aed 0%, #a855f7 100%)',
        'linear-gradient(135deg, #4338ca 0%, #6366f1 100%)',
    ),
    success='#059669',
    warning='#d97706',
    danger='#dc2626',
    neutral='#4b5563',
)

# ===== TIER LOOKUP TABLES =====

COLOR_SCHEMES: Dict[ReportTier, ColorScheme] = {
    ReportTier.PROFESSIONAL: PROFESSIONAL_COLOR_SCHEME,
    ReportTier.ENTERPRISE: ENTERPRISE_COLOR_SCHEME,
}

TYPOGRAPHY: Dict[ReportTier, Typography] = {
    ReportTier.PROFESSIONAL: PROFESSIONAL_TYPOGRAPHY,
    ReportTier.ENTERPRISE: ENTERPRISE_TYPOGRAPHY,
}

CHART_PALETTES: Dict[ReportTier, ChartPalette] = {
    ReportTier.PROFESSIONAL: PROFESSIONAL_CHART_PALETTE,
    ReportTier.ENTERPRISE: ENTERPRISE_CHART_PALETTE,
}

TAGLINES: Dict[ReportTier, str] = {
    ReportTier.PROFESSIONAL: 'Professional Business Insights',
    ReportTier.ENTERPRISE: 'Strategic Excellence in Business Analysis',
}


def get_color_scheme(tier: TierLike) -> ColorScheme:
    return COLOR_SCHEMES[resolve_tier(tier)]


def get_typography(tier: TierLike) -> Typography:
    return TYPOGRAPHY[resolve_tier(tier)]


def get_chart_palette(tier: TierLike) -> ChartPalette:
    return CHART_PALETTES[resolve_tier(tier)]


__all__ = [
    "ReportTier",
    "TierLike",
    "resolve_tier",
    "ColorScheme",
    "FontRole",
    "Typography",
    "ChartPalette",
    "PROFESSIONAL_COLOR_SCHEME",
    "ENTERPRISE_COLOR_SCHEME",
    "PROFESSIONAL_TYPOGRAPHY",
    "ENTERPRISE_TYPOGRAPHY",
    "PROFESSIONAL_CHART_PALETTE",
    "ENTERPRISE_CHART_PALETTE",
    "COLOR_SCHEMES",
    "TYPOGRAPHY",
    "CHART_PALETTES",
    "TAGLINES",
    "get_color_scheme",
    "get_typography",
    "get_chart_palette",
]
