"""Pydantic models for extracted and selected skills."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _clean_skill_list(value: Any) -> list[str]:
    """Drop blanks and non-strings, strip whitespace, de-duplicate in order."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    seen: set[str] = set()
    cleaned: list[str] = []
    for item in value:
        if not isinstance(item, str):
            continue
        skill = item.strip()
        if skill and skill.lower() not in seen:
            seen.add(skill.lower())
            cleaned.append(skill)
    return cleaned


class ExtractedSkills(BaseModel):
    """Skills found in a job description, split by category."""

    model_config = ConfigDict(frozen=True)

    technical: list[str] = []
    soft: list[str] = []

    @field_validator("technical", "soft", mode="before")
    @classmethod
    def _clean(cls, value: Any) -> list[str]:
        return _clean_skill_list(value)


class SkillSelection(BaseModel):
    """Skills the user chose to emphasise."""

    model_config = ConfigDict(frozen=True)

    technical: list[str] = []
    soft: list[str] = []
    custom: list[str] = []

    @field_validator("technical", "soft", "custom", mode="before")
    @classmethod
    def _clean(cls, value: Any) -> list[str]:
        return _clean_skill_list(value)

    @classmethod
    def from_extracted(cls, skills: ExtractedSkills, custom: list[str] | None = None) -> "SkillSelection":
        return cls(technical=skills.technical, soft=skills.soft, custom=custom or [])

    def merged(self) -> list[str]:
        """All selected skills in technical, soft, custom order."""
        return [*self.technical, *self.soft, *self.custom]

    def is_empty(self) -> bool:
        return not (self.technical or self.soft or self.custom)
