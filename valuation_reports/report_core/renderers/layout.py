"""
Report Styling Profile

Structured, derived page configuration for a report tier:
- Page size, orientation and margins (points)
- Header and footer templates with {{placeholder}} tokens
- Branding (logo slot, company name, tagline)
- Typography settings wrapping the tier font roles

Profiles can be saved to JSON and loaded back, so a tuned layout can be
reused across report runs. Placeholder substitution is left to the
downstream template engine.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from loguru import logger

if TYPE_CHECKING:
    from ..styling.tokens import ColorScheme, TierLike, Typography


@dataclass
class Margins:
    """Box margins in points (72pt = 1 inch)"""
    top: int = 72
    right: int = 72
    bottom: int = 72
    left: int = 72


@dataclass
class PageLayout:
    """Physical page configuration"""
    page_size: str = "letter"
    orientation: str = "portrait"
    margins: Margins = field(default_factory=Margins)
    columns: int = 1
    column_gap: int = 0


@dataclass
class SectionStyling:
    """Visual settings of a header or footer band"""
    background_color: str
    background_image: Optional[str] = None
    margins: Margins = field(default_factory=lambda: Margins(0, 0, 0, 0))
    orientation: str = "portrait"


@dataclass
class HeaderFooterSection:
    """One running header or footer"""
    enabled: bool
    content: str  # HTML template with {{placeholder}} tokens
    height: int
    styling: SectionStyling


@dataclass
class HeaderFooterConfig:
    header: HeaderFooterSection
    footer: HeaderFooterSection


@dataclass
class LogoSettings:
    url: str = ""
    width: int = 150
    height: int = 50
    position: str = "left"


@dataclass
class Branding:
    """Company identity shown on the report"""
    company_name: str
    tagline: str
    logo: LogoSettings = field(default_factory=LogoSettings)


@dataclass
class TypographySettings:
    """Tier font roles plus document-wide text settings"""
    fonts: Typography
    line_height: float = 1.6
    letter_spacing: float = 0
    word_spacing: float = 0
    text_align: str = "justify"


@dataclass
class ReportStyling:
    """Complete styling profile for one tier"""
    tier: str
    color_scheme: ColorScheme
    typography: TypographySettings
    page_layout: PageLayout
    header_footer: HeaderFooterConfig
    branding: Branding

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ReportStyling:
        """Create profile from dictionary"""
        from ..styling.tokens import ColorScheme, FontRole, Typography

        fonts = data['typography']['fonts']
        typography = TypographySettings(
            fonts=Typography(**{role: FontRole(**fonts[role]) for role in fonts}),
            **{k: v for k, v in data['typography'].items() if k != 'fonts'},
        )

        page = dict(data['page_layout'])
        page['margins'] = Margins(**page.get('margins', {}))

        def _section(raw: Dict[str, Any]) -> HeaderFooterSection:
            styling = dict(raw['styling'])
            styling['margins'] = Margins(**styling.get('margins', {}))
            return HeaderFooterSection(
                enabled=raw['enabled'],
                content=raw['content'],
                height=raw['height'],
                styling=SectionStyling(**styling),
            )

        branding = dict(data['branding'])
        branding['logo'] = LogoSettings(**branding.get('logo', {}))

        return cls(
            tier=data['tier'],
            color_scheme=ColorScheme(**data['color_scheme']),
            typography=typography,
            page_layout=PageLayout(**page),
            header_footer=HeaderFooterConfig(
                header=_section(data['header_footer']['header']),
                footer=_section(data['header_footer']['footer']),
            ),
            branding=Branding(**branding),
        )


def save_styling(styling: ReportStyling, path: str | Path) -> Path:
    """
    Save a styling profile to a JSON file

    Args:
        styling: Profile to save
        path: Save path (parent directories are created)

    Returns:
        Path: Written file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump({'styling': styling.to_dict()}, f, ensure_ascii=False, indent=2)

    logger.info(f"Report styling profile saved: {path}")
    return path


def load_styling(path: str | Path, tier: TierLike) -> ReportStyling:
    """
    Load a styling profile from a JSON file

    Args:
        path: Profile file path
        tier: Tier whose default profile is used when the file is missing

    Returns:
        ReportStyling: Loaded profile, or the tier default
    """
    from ..styling.stylesheet import get_tier_styling
    from ..styling.tokens import resolve_tier

    path = Path(path)

    if not path.exists():
        logger.warning(f"Styling profile does not exist: {path}, using default {resolve_tier(tier).value} styling")
        return get_tier_styling(tier)

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    styling = ReportStyling.from_dict(data['styling'])
    logger.info(f"Report styling profile loaded: {path}")
    return styling


__all__ = [
    "Margins",
    "PageLayout",
    "SectionStyling",
    "HeaderFooterSection",
    "HeaderFooterConfig",
    "LogoSettings",
    "Branding",
    "TypographySettings",
    "ReportStyling",
    "save_styling",
    "load_styling",
]
