"""Fallback PDF renderer using fpdf2 (pure Python, no system deps)."""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

logger = logging.getLogger(__name__)

# Unicode TTF fonts commonly present on Linux, macOS and Windows
_UNICODE_FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
    "C:/Windows/Fonts/arial.ttf",
]

_BLOCK_TAG = re.compile(r"(</?(?:h[1-3]|p|li|ul|ol)>|<br\s*/?>)")
_TAG_PARTS = re.compile(r"<(/?)(h[1-3]|p|li|ul|ol|br)\s*/?>")

# 0.5in page margins
_MARGIN_MM = 12.7


def _find_unicode_font() -> str | None:
    for path in _UNICODE_FONT_PATHS:
        if Path(path).exists():
            return path
    return None


def html_to_pdf_fpdf2(html_content: str) -> bytes:
    """Lay out the formatter's tags (headings, lists, paragraphs) with fpdf2."""
    body_match = re.search(r"<body>(.*?)</body>", html_content, re.DOTALL)
    body = body_match.group(1) if body_match else html_content

    pdf = FPDF(format="A4")
    pdf.set_margins(_MARGIN_MM, _MARGIN_MM, _MARGIN_MM)
    pdf.set_auto_page_break(auto=True, margin=_MARGIN_MM)
    pdf.add_page()

    font_name = "Helvetica"
    unicode_font = _find_unicode_font()
    if unicode_font:
        try:
            pdf.add_font("ResumeFont", "", unicode_font)
            font_name = "ResumeFont"
        except Exception:
            logger.debug("Failed to load font %s", unicode_font)

    pdf.set_font(font_name, size=11)

    for line_type, text in _parse_html_to_lines(body):
        safe_text = _safe_text(text, pdf)
        if line_type in ("h1", "h2", "h3"):
            pdf.ln(3)
            pdf.set_font_size({"h1": 18, "h2": 14, "h3": 12}[line_type])
            _write(pdf, 8, safe_text)
            pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
            pdf.ln(2)
            pdf.set_font_size(11)
        elif line_type == "bullet":
            _write(pdf, 6, f"  - {safe_text}")
        elif line_type == "break":
            pdf.ln(2)
        elif safe_text.strip():
            _write(pdf, 6, safe_text)

    return bytes(pdf.output())


def _write(pdf: FPDF, height: float, text: str) -> None:
    pdf.multi_cell(0, height, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _safe_text(text: str, pdf: FPDF) -> str:
    """Core fonts only cover latin-1; replace anything else."""
    if pdf.is_ttf_font:
        return text
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _parse_html_to_lines(body_html: str) -> list[tuple[str, str]]:
    """Split simple HTML into (type, text) pairs."""
    lines: list[tuple[str, str]] = []
    current = "text"
    for part in _BLOCK_TAG.split(body_html):
        if not part.strip():
            continue
        tag = _TAG_PARTS.fullmatch(part.strip())
        if tag is None:
            text = _strip_html(part)
            if text:
                lines.append((current, text))
            continue
        closing, name = tag.group(1) == "/", tag.group(2)
        if name == "br":
            lines.append(("break", ""))
        elif closing:
            if name in ("ul", "ol"):
                lines.append(("break", ""))
            current = "text"
        elif name in ("h1", "h2", "h3"):
            current = name
        elif name == "li":
            current = "bullet"
        else:
            current = "text"
    return lines


def _strip_html(text: str) -> str:
    text = re.sub(r"<[^>]+>", "", text)
    return html.unescape(text).strip()
