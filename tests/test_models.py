"""Tests for data models."""

import pytest
from pydantic import ValidationError

from ats_tailor.models.resume import UploadedResume, ValidationResult
from ats_tailor.models.skills import ExtractedSkills, SkillSelection


class TestValidationResult:
    def test_valid_without_issues(self):
        result = ValidationResult(valid=True)
        assert result.issues == []
        assert result.to_contract() == {"valid": True}

    def test_invalid_with_issues(self):
        result = ValidationResult(valid=False, issues=["missing email"])
        assert result.to_contract() == {"valid": False, "issues": ["missing email"]}

    def test_valid_with_issues_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(valid=True, issues=["oops"])

    def test_invalid_without_issues_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(valid=False)

    def test_frozen(self):
        result = ValidationResult(valid=True)
        with pytest.raises(ValidationError):
            result.valid = False


class TestExtractedSkills:
    def test_cleans_lists(self):
        skills = ExtractedSkills(technical=[" Python ", "", "python", "Go"], soft=None)
        assert skills.technical == ["Python", "Go"]
        assert skills.soft == []

    def test_non_strings_dropped(self):
        skills = ExtractedSkills(technical=["SQL", 3, None])
        assert skills.technical == ["SQL"]

    def test_single_string_accepted(self):
        assert ExtractedSkills(soft="Teamwork").soft == ["Teamwork"]


class TestSkillSelection:
    def test_merged_order(self, sample_skills):
        assert sample_skills.merged() == [
            "Python",
            "FastAPI",
            "PostgreSQL",
            "Communication",
            "Kubernetes",
        ]

    def test_from_extracted(self):
        extracted = ExtractedSkills(technical=["Rust"], soft=["Ownership"])
        selection = SkillSelection.from_extracted(extracted, custom=["WASM"])
        assert selection.merged() == ["Rust", "Ownership", "WASM"]

    def test_is_empty(self):
        assert SkillSelection().is_empty()
        assert not SkillSelection(custom=["Go"]).is_empty()


def test_uploaded_resume_timestamp():
    upload = UploadedResume(file_name="cv.txt", content_type="text/plain", size=3, text="abc")
    assert upload.uploaded_at is not None
