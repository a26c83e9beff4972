"""Normalise pasted or file-loaded job descriptions."""

from __future__ import annotations

import re
from pathlib import Path

from ats_tailor.parsers.resume_parser import clean_resume_text


def parse_jd(text: str) -> str:
    """Collapse runs of spaces and blank lines; strip every line."""
    text = clean_resume_text(text)
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def load_jd_file(file_path: str | Path) -> str:
    return parse_jd(Path(file_path).read_text(encoding="utf-8"))
