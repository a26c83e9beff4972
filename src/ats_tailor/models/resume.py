"""Pydantic models for validation outcomes and accepted uploads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationResult(BaseModel):
    """Outcome of comparing an original resume with its tailored version."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    issues: list[str] = []

    @model_validator(mode="after")
    def _valid_iff_no_issues(self) -> "ValidationResult":
        if self.valid == bool(self.issues):
            raise ValueError("valid must be True exactly when there are no issues")
        return self

    def to_contract(self) -> dict:
        """Plain-dict form: ``issues`` is present only when there are any."""
        data: dict = {"valid": self.valid}
        if self.issues:
            data["issues"] = list(self.issues)
        return data


class UploadedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    content_type: str
    size: int
    text: str
    uploaded_at: datetime = Field(default_factory=datetime.now)
