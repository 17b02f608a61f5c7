#!/usr/bin/env python
"""
GoodBuy Valuation Reports
Main CLI Entry Point

Assembles a tier-styled HTML valuation report (and optionally a PDF) from an
evaluation JSON file.

Usage:
    python main.py evaluation.json --tier enterprise --output report.html [--pdf report.pdf]

Input file layout:
    {
      "title": "Acme Corp Valuation",
      "evaluation": {...},          # data consumed by the chart processors
      "enterprise": {...},          # enterprise-only chart data (optional)
      "metrics": [...],             # MetricData dicts
      "tables": [...],              # TableData dicts
      "recommendations": [...],     # RecommendationData dicts
      "risks": [...],               # RiskData dicts
      "scenarios": [...]            # ScenarioData dicts (enterprise only)
    }
"""

import sys
import json
import argparse
from pathlib import Path
from datetime import datetime
from loguru import logger
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from valuation_reports.config import reload_settings
from valuation_reports.report_core.charts import ChartGenerationError
from valuation_reports.report_core.styling import ReportSectionType, get_styling_integration, resolve_tier
from valuation_reports.report_core.styling.integration import (
    DEFAULT_REPORT_TITLE,
    MetricData,
    RecommendationData,
    RiskData,
    ScenarioData,
    SectionStylingOptions,
    TableData,
    TableStylingOptions,
)


def configure_logging(level: str) -> None:
    logger.remove()  # Remove default handler
    logger.add(
        sys.stdout,
        level=level.upper(),
        colorize=True,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    )


def load_report_input(path: Path) -> dict:
    """Read the evaluation JSON file; exits on a missing or malformed file."""
    if not path.exists():
        logger.error(f"Input file not found: {path}")
        sys.exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        sys.exit(1)


def build_report_body(report_input: dict, tier, include_charts: bool = True) -> str:
    """
    Build the report body from the input sections, in report order.

    Args:
        report_input: Parsed input document
        tier: Report tier
        include_charts: Render the tier chart set

    Returns:
        str: Concatenated section HTML
    """
    integration = get_styling_integration()
    sections = []

    metrics = [MetricData.from_dict(m) for m in report_input.get("metrics", [])]
    if metrics:
        sections.append((
            ReportSectionType.EXECUTIVE_SUMMARY,
            integration.generate_styled_metrics(metrics, tier),
            None,
        ))

    tables = [TableData.from_dict(t) for t in report_input.get("tables", [])]
    if tables:
        sections.append((
            ReportSectionType.FINANCIAL_ANALYSIS,
            "".join(
                integration.generate_styled_table(t, tier, TableStylingOptions(financial=True)) for t in tables
            ),
            None,
        ))

    if include_charts and report_input.get("evaluation"):
        sections.append((
            ReportSectionType.VALUATION_SUMMARY,
            integration.generate_report_charts_html(
                tier, report_input["evaluation"], report_input.get("enterprise")
            ),
            SectionStylingOptions(page_break_before=True),
        ))

    risks = [RiskData(**r) for r in report_input.get("risks", [])]
    if risks:
        sections.append((
            ReportSectionType.RISK_ANALYSIS,
            integration.generate_styled_risk_assessment(risks, tier),
            None,
        ))

    scenarios = [ScenarioData.from_dict(s) for s in report_input.get("scenarios", [])]
    scenario_html = integration.generate_styled_scenario_analysis(scenarios, tier) if scenarios else ""
    if scenario_html:
        sections.append((ReportSectionType.SCENARIO_ANALYSIS, scenario_html, None))

    recommendations = [RecommendationData.from_dict(r) for r in report_input.get("recommendations", [])]
    if recommendations:
        sections.append((
            ReportSectionType.INVESTMENT_RECOMMENDATIONS,
            integration.generate_styled_recommendations(recommendations, tier),
            SectionStylingOptions(avoid_page_break=True),
        ))

    return "".join(
        integration.wrap_section_content(section_type, content, tier, options)
        for section_type, content, options in sections
    )


def run_report(args) -> Path:
    """
    Generate the report files for parsed CLI arguments.

    Returns:
        Path: HTML output path
    """
    start_time = datetime.now()
    report_input = load_report_input(Path(args.input))

    tier = resolve_tier(args.tier or report_input.get("tier", "professional"))
    title = args.title or report_input.get("title") or DEFAULT_REPORT_TITLE
    logger.info(f"Building {tier.value} report: {title}")

    body = build_report_body(report_input, tier, include_charts=not args.no_charts)
    document = get_styling_integration().generate_styled_html_structure(tier, body, title=title)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")
    logger.success(f"HTML report saved to: {output_path}")

    if args.pdf:
        from valuation_reports.report_core.renderers import ReportPDFRenderer
        ReportPDFRenderer(base_url=str(output_path.parent.resolve())).render_to_pdf(document, args.pdf)
        logger.success(f"PDF report saved to: {args.pdf}")

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Report generation finished in {duration:.1f} seconds")
    return output_path


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="GoodBuy Valuation Reports - tier-styled valuation report builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Professional report, HTML only
  python main.py evaluation.json --output report.html

  # Enterprise report with PDF export
  python main.py evaluation.json --tier enterprise --output report.html --pdf report.pdf
"""
    )

    parser.add_argument("input", help="Evaluation JSON file")
    parser.add_argument(
        "--tier",
        choices=["professional", "enterprise"],
        help="Report tier (defaults to the input file's \"tier\", then professional)"
    )
    parser.add_argument("--output", default="report.html", help="HTML output path")
    parser.add_argument("--pdf", help="Also render a PDF to this path (requires WeasyPrint)")
    parser.add_argument("--title", help="Report title override")
    parser.add_argument("--no-charts", action="store_true", help="Skip chart rendering")

    args = parser.parse_args()

    settings = reload_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        run_report(args)
    except KeyboardInterrupt:
        logger.warning("Report generation interrupted by user (Ctrl+C)")
        sys.exit(1)
    except (ChartGenerationError, RuntimeError, OSError, ValueError) as e:
        logger.error(f"Report generation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
