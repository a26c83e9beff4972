"""Extract plain text from uploaded resume documents."""

from __future__ import annotations

import logging
import re
from io import BytesIO
from pathlib import Path

from ats_tailor.errors import DocumentParseError, UnsupportedFormatError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".doc", ".txt", ".md")

_INVISIBLE_CHARS = re.compile(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]")

# Compound File Binary header used by legacy Word .doc files
_OLE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) into clean plain text."""
    path = Path(file_path)
    return parse_resume_bytes(path.read_bytes(), path.name)


def parse_resume_bytes(data: bytes, file_name: str) -> str:
    """Parse resume content already held in memory, dispatching on extension."""
    suffix = Path(file_name).suffix.lower()
    if suffix == ".doc" and data.startswith(_OLE_MAGIC):
        raise UnsupportedFormatError(
            f"Legacy Word format is not supported: {file_name}. Save it as .docx or PDF"
        )
    if suffix == ".pdf":
        text = _extract(_parse_pdf, data, suffix)
    elif suffix in (".docx", ".doc"):
        text = _extract(_parse_docx, data, suffix)
    elif suffix in (".txt", ".md"):
        text = data.decode("utf-8", errors="replace")
    else:
        raise UnsupportedFormatError(f"Unsupported file format: {suffix or file_name}")
    logger.debug("Parsed %s: %d characters", file_name, len(text))
    return clean_resume_text(text)


def clean_resume_text(text: str) -> str:
    """Remove extraction artifacts without touching the resume's structure.

    Strips BOM and zero-width characters, normalises line endings, trims
    trailing whitespace and collapses runs of blank lines. Bullet glyphs are
    left alone so the formatter can still recognise list items.
    """
    text = _INVISIBLE_CHARS.sub("", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _extract(parser, data: bytes, suffix: str) -> str:
    try:
        return parser(data)
    except ImportError:
        raise
    except Exception as exc:
        logger.debug("Text extraction failed for %s", suffix, exc_info=True)
        raise DocumentParseError(f"Failed to extract text from {suffix} file: {exc}") from exc


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)


def _parse_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
