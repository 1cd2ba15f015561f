from __future__ import annotations

import io
import re

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.logging_utils import get_logger
from core.presets import DISCLAIMER

log = get_logger(__name__)


def _esc(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)


def build_summary_pdf(title: str, rows: list[list[str]], analysis: str = "") -> bytes:
    """Render a scenario snapshot to PDF bytes.

    ``rows`` are ``[label, value]`` pairs, already formatted for display.
    """

    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = [Paragraph(f"<b>{_esc(title)}</b>", styles["Title"]), Spacer(1, 12)]
    if rows:
        t = Table([["Snapshot", ""]] + rows, hAlign="LEFT", colWidths=[220, 300])
        t.setStyle(_TABLE_STYLE)
        story += [t, Spacer(1, 12)]
    if analysis:
        story.append(Paragraph("<b>Analysis</b>", styles["Heading3"]))
        for para in analysis.split("\n\n"):
            text = _esc(para.strip()).replace("\n", "<br/>")
            text = re.sub(r"\*\*(.+?)\*\*", r"<b>\1</b>", text)
            if text:
                story += [Paragraph(text, styles["Normal"]), Spacer(1, 6)]
    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles["Normal"])]
    doc.build(story)
    log.debug("summary pdf built", extra={"context": {"title": title, "rows": len(rows)}})
    return buf.getvalue()
