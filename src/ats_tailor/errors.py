"""Exception hierarchy for the request-handling layer.

The core validator and formatter never raise for string input; these errors
belong to the collaborators around them (AI calls, document intake, rendering).
"""

from __future__ import annotations


class AtsTailorError(Exception):
    """Base class for all ats-tailor errors."""


class SkillExtractionError(AtsTailorError):
    """Raised when skills cannot be extracted from a job description."""


class ResumeGenerationError(AtsTailorError):
    """Raised when the AI collaborator fails to produce a tailored resume."""


class UnsupportedFormatError(AtsTailorError, ValueError):
    """Raised for resume files whose extension we cannot parse."""


class UploadRejectedError(AtsTailorError, ValueError):
    """Raised when an uploaded file fails the type or size checks."""


class RenderError(AtsTailorError):
    """Raised when a document cannot be rendered to PDF."""


class DocumentParseError(AtsTailorError, ValueError):
    """Raised when a resume document is damaged or cannot be read."""
