"""One-page PDF summary: project inputs and financial metrics."""
from __future__ import annotations

import logging
import re
from datetime import date
from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from wse_finance.reporting.formatting import input_display, report_metric_rows
from wse_finance.types import Result

logger = logging.getLogger(__name__)

PAGE_W, PAGE_H = A4
MARGIN = 14 * mm
DEFAULT_PROJECT_NAME = "Untitled Project"
FOOTER_TEXT = "WSE Project Financial Analysis Tool"

C_HEADER = "#2c3e50"
C_GRAY = "#808080"
C_GRID = "#bdc3c7"


def _on_page(canvas, doc):
    """Footer on every page."""
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor(C_GRAY))
    canvas.drawCentredString(PAGE_W / 2, 10 * mm, FOOTER_TEXT)
    canvas.restoreState()


def _get_styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        "ReportTitle", parent=styles["Title"],
        fontName="Helvetica-Bold", fontSize=16, alignment=TA_CENTER, spaceAfter=4,
    ))
    styles.add(ParagraphStyle(
        "GeneratedOn", parent=styles["Normal"],
        fontSize=10, alignment=TA_CENTER, spaceAfter=10,
    ))
    styles.add(ParagraphStyle(
        "SectionHeader", parent=styles["Heading2"],
        fontName="Helvetica-Bold", fontSize=12, spaceBefore=10, spaceAfter=5,
    ))
    return styles


def _styled_table(header: list[str], rows: list[tuple[str, str]]) -> Table:
    t = Table([header, *[list(r) for r in rows]], colWidths=[80 * mm, 70 * mm], hAlign="LEFT")
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(C_HEADER)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (1, 1), (1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor(C_GRID)),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]))
    return t


def pdf_filename(project_name: str | None) -> str:
    name = (project_name or "").strip() or DEFAULT_PROJECT_NAME
    return f"{re.sub(r'[^a-z0-9]', '_', name, flags=re.IGNORECASE).lower()}_financial_analysis.pdf"


def summary_pdf_bytes(
    result: Result,
    project_name: str | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Render the summary report and return the PDF document bytes."""
    name = (project_name or "").strip() or DEFAULT_PROJECT_NAME
    when = generated_on or date.today()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        title=f"WSE Project Financial Analysis: {name}",
    )
    styles = _get_styles()

    elements: list = [
        Paragraph(escape(f"WSE Project Financial Analysis: {name}"), styles["ReportTitle"]),
        Paragraph(f"Generated on {when.strftime('%d/%m/%Y')}", styles["GeneratedOn"]),
        Paragraph("Project Inputs", styles["SectionHeader"]),
        _styled_table(["Parameter", "Value"], input_display(result.inputs)),
        Spacer(1, 8 * mm),
        Paragraph("Financial Metrics", styles["SectionHeader"]),
        _styled_table(["Metric", "Value"], report_metric_rows(result)),
    ]
    doc.build(elements, onFirstPage=_on_page, onLaterPages=_on_page)
    return buffer.getvalue()


def export_summary_pdf(
    result: Result,
    out_dir: str | Path,
    project_name: str | None = None,
    generated_on: date | None = None,
) -> Path:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / pdf_filename(project_name)
    path.write_bytes(summary_pdf_bytes(result, project_name, generated_on))
    logger.info("PDF summary written to %s", path)
    return path


__all__ = ["pdf_filename", "summary_pdf_bytes", "export_summary_pdf"]
