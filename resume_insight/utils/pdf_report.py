# resume_insight/utils/pdf_report.py
from __future__ import annotations
from typing import Iterable, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    ListFlowable,
    ListItem,
)

# ---- Theme ----
COL_TEXT   = colors.HexColor("#111827")
COL_MUTED  = colors.HexColor("#6B7280")
COL_ACCENT = colors.HexColor("#4F46E5")
COL_RULE   = colors.HexColor("#E5E7EB")

LEFT = RIGHT = 18 * mm
TOP = 22 * mm
BOTTOM = 18 * mm


def _bullets(lines: Iterable[str], style: ParagraphStyle) -> ListFlowable:
    items = [ListItem(Paragraph(escape(str(s)), style), leftIndent=4) for s in lines]
    return ListFlowable(
        items,
        bulletType="bullet",
        bulletFontName="Helvetica",
        bulletFontSize=8.5,
        bulletColor=COL_ACCENT,
        leftIndent=8,
        bulletOffsetY=1.5,
    )


def generate_report_pdf(buf, payload: dict, file_name: str = "") -> None:
    """Render a stored analysis payload into `buf` and rewind it."""
    if payload is None:
        payload = {}

    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=LEFT,
        rightMargin=RIGHT,
        topMargin=TOP,
        bottomMargin=BOTTOM,
        title="Resume Insight Report",
        author="Resume Insight",
    )

    styles = getSampleStyleSheet()

    Base = styles["Normal"]
    Base.fontName = "Helvetica"
    Base.fontSize = 10.5
    Base.leading  = 15
    Base.textColor = COL_TEXT

    H1 = ParagraphStyle(
        "H1", parent=Base, fontName="Helvetica-Bold",
        fontSize=18, leading=22, textColor=COL_ACCENT, spaceAfter=4,
    )
    SUB = ParagraphStyle(
        "SUB", parent=Base, fontSize=9.5, leading=12,
        textColor=COL_MUTED, spaceAfter=8,
    )
    SEC = ParagraphStyle(
        "SEC", parent=Base, fontName="Helvetica-Bold",
        fontSize=12.5, leading=16, textColor=COL_ACCENT,
        spaceBefore=10, spaceAfter=4,
    )
    BODY = ParagraphStyle(
        "BODY", parent=Base, fontSize=10.5, leading=15, textColor=COL_TEXT,
    )
    METRIC_L = ParagraphStyle(
        "METRIC_L", parent=Base, fontName="Helvetica-Bold",
        fontSize=11, leading=14, textColor=COL_TEXT,
    )
    METRIC_V = ParagraphStyle(
        "METRIC_V", parent=Base, fontName="Helvetica-Bold",
        fontSize=11, leading=14, textColor=COL_ACCENT, alignment=2,  # right
    )

    story: List = []

    story.append(Paragraph("Resume Insight Report", H1))
    story.append(Paragraph(escape(file_name) or "Uploaded resume", SUB))
    story.append(_hrule())

    # Score + summary
    story.append(Spacer(0, 8))
    score_tbl = Table(
        [[Paragraph("ATS Score", METRIC_L), Paragraph(str(payload.get("score", 0)), METRIC_V)]],
        colWidths=[None, 30*mm], hAlign="LEFT",
    )
    score_tbl.setStyle(TableStyle([
        ("BOTTOMPADDING", (0,0), (-1,-1), 4),
        ("TOPPADDING",    (0,0), (-1,-1), 2),
        ("LINEBELOW",     (0,0), (-1,0), 0.4, COL_RULE),
    ]))
    story.append(score_tbl)
    story.append(Spacer(0, 6))
    story.append(Paragraph(escape(payload.get("summary") or ""), BODY))

    for heading, key in (("Strengths", "pros"), ("Weaknesses", "cons"), ("Recommendations", "recommendations")):
        story.append(Spacer(0, 8))
        story.append(Paragraph(heading, SEC))
        story.append(_bullets(payload.get(key) or [], BODY))

    # Job matches
    story.append(Spacer(0, 10))
    story.append(Paragraph("Suggested Roles", SEC))
    rows = [
        [Paragraph(escape(j.get("title", "")), METRIC_L), Paragraph(escape(j.get("matchPercentage", "")), METRIC_V)]
        for j in (payload.get("jobs") or [])
    ]
    if rows:
        jobs_tbl = Table(rows, colWidths=[None, 30*mm], hAlign="LEFT")
        jobs_tbl.setStyle(TableStyle([
            ("BOTTOMPADDING", (0,0), (-1,-1), 4),
            ("TOPPADDING",    (0,0), (-1,-1), 2),
            ("LINEBELOW",     (0,0), (-1,-1), 0.4, COL_RULE),
        ]))
        story.append(jobs_tbl)

    def _footer(c, doc):
        text = "Generated by Resume Insight (rule-based analysis)"
        c.saveState()
        c.setFont("Helvetica", 8)
        c.setFillColor(COL_MUTED)
        w = c.stringWidth(text, "Helvetica", 8)
        c.drawString(doc.pagesize[0] - RIGHT - w, BOTTOM - 6, text)
        c.restoreState()

    doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
    buf.seek(0)

def _hrule():
    t = Table([[""]], colWidths=[None], rowHeights=[0.8])
    t.setStyle(TableStyle([("BACKGROUND", (0,0), (-1,-1), COL_RULE)]))
    return t
