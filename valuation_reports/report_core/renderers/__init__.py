"""
Valuation Report Engine - Renderers

Provides report styling profiles (save/load) and the WeasyPrint PDF renderer.
"""

from .layout import (
    ReportStyling,
    PageLayout,
    HeaderFooterConfig,
    HeaderFooterSection,
    Branding,
    TypographySettings,
    save_styling,
    load_styling,
)
from .pdf_renderer import ReportPDFRenderer, WEASYPRINT_AVAILABLE

__all__ = [
    "ReportStyling",
    "PageLayout",
    "HeaderFooterConfig",
    "HeaderFooterSection",
    "Branding",
    "TypographySettings",
    "save_styling",
    "load_styling",
    "ReportPDFRenderer",
    "WEASYPRINT_AVAILABLE",
]
