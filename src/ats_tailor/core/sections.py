"""Heading tables and text patterns shared by the validator and formatter.

These are best-effort heuristics. Extend the tables here rather than adding
pattern literals elsewhere.
"""

from __future__ import annotations

import re

# Headings whose disappearance from a tailored resume is reported.
# Matched as case-sensitive substrings.
VALIDATED_SECTIONS: tuple[str, ...] = (
    "PROFESSIONAL SUMMARY",
    "EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "CORE COMPETENCIES",
    "PROFESSIONAL EXPERIENCE",
    "ACHIEVEMENTS",
    "PROJECTS",
)

# Headings the formatter recognises when a line consists of one of them
# (case-insensitive, optional trailing colon).
FORMATTED_SECTIONS: tuple[str, ...] = VALIDATED_SECTIONS + (
    "SUMMARY",
    "OBJECTIVE",
    "CONTACT",
    "WORK EXPERIENCE",
    "TECHNICAL SKILLS",
    "CERTIFICATIONS",
    "AWARDS",
    "PUBLICATIONS",
    "LANGUAGES",
    "VOLUNTEER EXPERIENCE",
    "INTERESTS",
)

PHONE_PATTERN = re.compile(r"\+?\d[\d\s-]{8,}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
NAME_PATTERN = re.compile(r"([A-Z][a-z]+ [A-Z][a-z]+)")

# "• item", "- item", "3. item"
BULLET_PATTERN = re.compile(r"^\s*(?:[•\-]|\d+\.)\s+(?P<body>\S.*)$")

# "<title> | <company> (<date-range>)", applied to already-escaped text
JOB_ENTRY_PATTERN = re.compile(
    r"(?P<title>[^<>|]+?)\s*\|\s*(?P<company>[^<>|()]+?)\s*\((?P<dates>[^<>()|]+)\)"
)
