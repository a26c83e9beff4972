"""Data models for the resume tailoring pipeline."""

from ats_tailor.models.resume import UploadedResume, ValidationResult
from ats_tailor.models.skills import ExtractedSkills, SkillSelection

__all__ = [
    "ExtractedSkills",
    "SkillSelection",
    "UploadedResume",
    "ValidationResult",
]
