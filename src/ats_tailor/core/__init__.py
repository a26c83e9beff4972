"""Content validation and HTML structuring for tailored resumes."""

from ats_tailor.core.formatter import extract_text, format_resume_html
from ats_tailor.core.validator import (
    apply_fallback,
    apply_resume_fixes,
    validate,
    validate_resume_content,
)

__all__ = [
    "apply_fallback",
    "apply_resume_fixes",
    "extract_text",
    "format_resume_html",
    "validate",
    "validate_resume_content",
]
