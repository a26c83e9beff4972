"""Heuristic checks that an AI-tailored resume kept the original's content.

Nothing here calls the AI; the checks are cheap regex and substring tests, so
they can flag likely content loss but never prove the rewrite is faithful.
"""

from __future__ import annotations

import logging
import re

from ats_tailor.core.sections import (
    EMAIL_PATTERN,
    NAME_PATTERN,
    PHONE_PATTERN,
    VALIDATED_SECTIONS,
)
from ats_tailor.models.resume import ValidationResult

logger = logging.getLogger(__name__)

LENGTH_RATIO_THRESHOLD = 0.9
NAME_SCAN_LINES = 5

EMPHASIS = "**"
FALLBACK_NOTE = (
    "NOTE: This resume has been lightly enhanced to highlight key skills "
    "while preserving your original content.\n\n"
)


def validate(
    original: str,
    tailored: str,
    *,
    length_ratio: float = LENGTH_RATIO_THRESHOLD,
    name_lines: int = NAME_SCAN_LINES,
) -> ValidationResult:
    """Compare ``tailored`` against ``original`` and collect every issue found.

    All checks run; none short-circuits the others.
    """
    issues: list[str] = []
    issues.extend(_check_length(original, tailored, length_ratio))
    issues.extend(_check_sections(original, tailored))
    issues.extend(_check_contact_info(original, tailored))
    issues.extend(_check_name(original, tailored, name_lines))
    return ValidationResult(valid=not issues, issues=issues)


def _check_length(original: str, tailored: str, ratio: float) -> list[str]:
    if len(tailored) < len(original) * ratio:
        return [
            "Tailored resume is significantly shorter than the original, "
            "which may indicate content loss"
        ]
    return []


def _check_sections(original: str, tailored: str) -> list[str]:
    return [
        f'Section "{section}" is missing from the tailored resume'
        for section in VALIDATED_SECTIONS
        if section in original and section not in tailored
    ]


def _check_contact_info(original: str, tailored: str) -> list[str]:
    issues = []
    # Presence of any match is enough; the values need not be identical.
    if PHONE_PATTERN.search(original) and not PHONE_PATTERN.search(tailored):
        issues.append("Phone number(s) missing from tailored resume")
    if EMAIL_PATTERN.search(original) and not EMAIL_PATTERN.search(tailored):
        issues.append("Email address(es) missing from tailored resume")
    return issues


def _leading_lines(text: str, count: int) -> str:
    return " ".join(text.split("\n")[:count])


def _check_name(original: str, tailored: str, name_lines: int) -> list[str]:
    match = NAME_PATTERN.search(_leading_lines(original, name_lines))
    if match is None:
        return []
    name = match.group(1)
    if name in _leading_lines(tailored, name_lines):
        return []
    return [f'Name "{name}" may be missing from tailored resume']


def _skill_pattern(skill: str) -> re.Pattern[str]:
    # Lookarounds instead of \b so skills such as "C++" or ".NET" still match
    # as whole words. A mention already inside "**" is left alone.
    return re.compile(
        rf"(?<!\w)(?<!\*\*){re.escape(skill)}(?!\w)(?!\*\*)", re.IGNORECASE
    )


def apply_fallback(original: str, skills: list[str]) -> str:
    """Emphasise whole-word skill mentions in ``original`` and prepend a note."""
    enhanced = original
    for skill in skills:
        if not skill or not skill.strip():
            continue
        enhanced = _skill_pattern(skill.strip()).sub(
            lambda m: f"{EMPHASIS}{m.group(0)}{EMPHASIS}", enhanced
        )
    return FALLBACK_NOTE + enhanced


def apply_resume_fixes(
    original: str,
    tailored: str,
    skills: list[str],
    *,
    length_ratio: float = LENGTH_RATIO_THRESHOLD,
    name_lines: int = NAME_SCAN_LINES,
) -> str:
    """Return ``tailored`` if it validates, otherwise the highlighted original."""
    result = validate(original, tailored, length_ratio=length_ratio, name_lines=name_lines)
    if result.valid:
        return tailored

    logger.warning("Issues detected with tailored resume: %s", "; ".join(result.issues))
    return apply_fallback(original, skills)


def validate_resume_content(original: str, tailored: str) -> dict:
    """Dict form of :func:`validate`: ``{"valid": bool, "issues"?: [...]}``."""
    return validate(original, tailored).to_contract()
