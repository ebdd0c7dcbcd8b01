"""Paginated comparison report rendered with reportlab."""

import io
from datetime import date
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from policy_compare.comparison.models import ComparisonResult
from policy_compare.export.rows import PDF_LABELS, PDF_LISTS, comparison_cells
from policy_compare.export.transliterate import normalize_for_pdf

REPORT_TITLE = "Sigorta Karsilastirma Raporu"
HEADER_FILL = colors.Color(59 / 255, 130 / 255, 246 / 255)
_MARGIN = 14 * mm
_LABEL_WIDTH = 30 * mm


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    cell = ParagraphStyle("Cell", parent=base["Normal"], fontSize=9, leading=11)
    return {
        "title": ParagraphStyle("ReportTitle", parent=base["Title"], fontSize=18, alignment=0),
        "meta": ParagraphStyle("Meta", parent=base["Normal"], fontSize=10, textColor=colors.grey),
        "heading": ParagraphStyle("SummaryHeading", parent=base["Normal"], fontSize=11),
        "body": ParagraphStyle("Summary", parent=base["Normal"], fontSize=11, leading=14),
        "cell": cell,
        "label": ParagraphStyle("Label", parent=cell, fontName="Helvetica-Bold"),
        "head": ParagraphStyle(
            "Head", parent=cell, fontName="Helvetica-Bold", textColor=colors.white
        ),
    }


def _para(text: str, style: ParagraphStyle) -> Paragraph:
    return Paragraph(escape(normalize_for_pdf(text)).replace("\n", "<br/>"), style)


def _line(lines: list[str], index: int) -> str:
    return lines[index] if index < len(lines) else ""


def _grid(
    result: ComparisonResult, styles: dict[str, ParagraphStyle]
) -> tuple[list[list[Paragraph]], list[tuple[object, ...]]]:
    """Table rows plus the rule commands separating one field from the next.

    List fields take one table row per item so a long list breaks across
    pages between items instead of overflowing a single row.
    """
    rows: list[list[Paragraph]] = [
        [
            _para("Ozellik", styles["head"]),
            *(_para(p.company_name, styles["head"]) for p in result.policies),
        ]
    ]
    rules: list[tuple[object, ...]] = []
    for label, cells in comparison_cells(result, PDF_LABELS, PDF_LISTS):
        depth = max((len(lines) for lines in cells), default=0) or 1
        for line_index in range(depth):
            rows.append(
                [
                    _para(label if line_index == 0 else "", styles["label"]),
                    *(_para(_line(lines, line_index), styles["cell"]) for lines in cells),
                ]
            )
        last = len(rows) - 1
        rules.append(("LINEBELOW", (0, last), (-1, last), 0.5, colors.grey))
    return rows, rules


def build_pdf_report(result: ComparisonResult, generated_on: date | None = None) -> bytes:
    """Render title, date, summary and the field grid as PDF bytes."""
    styles = _styles()
    generated_on = generated_on or date.today()

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=_MARGIN,
        rightMargin=_MARGIN,
        topMargin=_MARGIN,
        bottomMargin=_MARGIN,
        title=REPORT_TITLE,
    )

    rows, rules = _grid(result, styles)
    data_width = doc.width - _LABEL_WIDTH
    column_count = max(len(result.policies), 1)
    table = Table(
        rows,
        colWidths=[_LABEL_WIDTH, *([data_width / column_count] * len(result.policies))],
        repeatRows=1,
        splitInRow=1,
    )
    table.setStyle(
        TableStyle(
            [
                ("BOX", (0, 0), (-1, -1), 0.5, colors.grey),
                ("INNERGRID", (0, 0), (-1, 0), 0.5, colors.grey),
                ("LINEAFTER", (0, 0), (-2, -1), 0.5, colors.grey),
                *rules,
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("TOPPADDING", (0, 0), (-1, -1), 4),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ("LEFTPADDING", (0, 0), (-1, -1), 4),
                ("RIGHTPADDING", (0, 0), (-1, -1), 4),
            ]
        )
    )

    story = [
        _para(REPORT_TITLE, styles["title"]),
        _para(f"Olusturulma Tarihi: {generated_on.strftime('%d.%m.%Y')}", styles["meta"]),
        Spacer(1, 6 * mm),
        _para("Ozet:", styles["heading"]),
        Spacer(1, 2 * mm),
        _para(result.summary, styles["body"]),
        Spacer(1, 8 * mm),
        table,
    ]
    doc.build(story)
    return buf.getvalue()
