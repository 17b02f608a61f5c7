"""
Report PDF Renderer - WeasyPrint-based PDF Generation
Converts styled report HTML into print-ready PDF files or byte streams.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# macOS: Automatically add Homebrew library paths for Pango/Cairo dependencies
# to resolve DYLD_LIBRARY_PATH issues before importing WeasyPrint
if sys.platform == 'darwin':
    mac_libs = [Path('/opt/homebrew/lib'), Path('/usr/local/lib')]
    current = os.environ.get('DYLD_LIBRARY_PATH', '')
    inserts = [str(lib) for lib in mac_libs if lib.exists() and str(lib) not in current.split(':')]
    if inserts:
        os.environ['DYLD_LIBRARY_PATH'] = ":".join(inserts + ([current] if current else []))

try:
    from weasyprint import HTML
    from weasyprint.text.fonts import FontConfiguration
    WEASYPRINT_AVAILABLE = True
    PDF_DEP_STATUS = "OK"
except (ImportError, OSError) as e:
    WEASYPRINT_AVAILABLE = False
    if isinstance(e, OSError):
        PDF_DEP_STATUS = (
            "PDF export dependencies missing (Pango/Cairo system libraries not installed). "
            "PDF export functionality will be unavailable. HTML reports are not affected."
        )
    else:
        PDF_DEP_STATUS = "WeasyPrint not installed. PDF export functionality will be unavailable."
    logger.warning(PDF_DEP_STATUS)


class ReportPDFRenderer:
    """
    WeasyPrint-based PDF Renderer for valuation reports

    - Accepts the full HTML document produced by ReportStylingIntegration
    - Can also wrap bare body content in the tier document shell
    - Presentational hints are preserved so print CSS applies unchanged
    """

    def __init__(self, styling_integration=None, base_url: Optional[str] = None):
        """
        Initialize PDF Renderer.

        Args:
            styling_integration: ReportStylingIntegration used by render_content (shared default if None)
            base_url: Base URL for relative resources, current directory if None

        Raises:
            RuntimeError: If WeasyPrint cannot be loaded
        """
        if not WEASYPRINT_AVAILABLE:
            raise RuntimeError(PDF_DEP_STATUS)

        if styling_integration is None:
            from ..styling.integration import get_styling_integration
            styling_integration = get_styling_integration()
        self.styling_integration = styling_integration
        self.base_url = base_url or str(Path.cwd())

    def _document(self, html_content: str):
        return HTML(string=html_content, base_url=self.base_url)

    def render_to_pdf(self, html_content: str, output_path: str | Path) -> Path:
        """
        Render a complete HTML document to a PDF file

        Args:
            html_content: Full HTML document
            output_path: PDF output file path

        Returns:
            Path: Generated PDF file path
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Starting PDF generation: {output_path}")

        try:
            self._document(html_content).write_pdf(
                output_path,
                font_config=FontConfiguration(),
                presentational_hints=True  # Preserve HTML presentational hints
            )
        except Exception as e:
            logger.error(f"PDF generation failed: {e}")
            raise

        logger.info(f"PDF generation successful: {output_path}")
        return output_path

    def render_to_bytes(self, html_content: str) -> bytes:
        """
        Render a complete HTML document to PDF byte content

        Args:
            html_content: Full HTML document

        Returns:
            bytes: PDF file byte content
        """
        return self._document(html_content).write_pdf(
            font_config=FontConfiguration(),
            presentational_hints=True
        )

    def render_content(self, tier, body_html: str, output_path: str | Path, title: Optional[str] = None) -> Path:
        """Wrap body content in the tier document shell, then render it to a PDF file"""
        kwargs = {'title': title} if title else {}
        document = self.styling_integration.generate_styled_html_structure(tier, body_html, **kwargs)
        return self.render_to_pdf(document, output_path)


__all__ = ["ReportPDFRenderer", "WEASYPRINT_AVAILABLE", "PDF_DEP_STATUS"]
