"""Tests for pipeline orchestrator."""

import pytest

from ats_tailor.clients.llm_client import LLMResponse
from ats_tailor.core.validator import FALLBACK_NOTE
from ats_tailor.errors import ResumeGenerationError
from ats_tailor.pipeline.orchestrator import TailoringPipeline, TailoringResult


def _reply(text: str) -> LLMResponse:
    return LLMResponse(text=text, input_tokens=10, output_tokens=10)


@pytest.fixture
def pipeline(mock_llm_client):
    return TailoringPipeline(
        mock_llm_client, extraction_model="extract-model", generation_model="gen-model"
    )


class TestTailor:
    async def test_valid_output_is_used(
        self, pipeline, mock_llm_client, sample_resume_text, sample_jd_text, sample_skills
    ):
        tailored = sample_resume_text.replace("Python services", "Python and Kubernetes services")
        mock_llm_client.generate.return_value = _reply(tailored)

        result = await pipeline.tailor(sample_resume_text, sample_jd_text, sample_skills)

        assert isinstance(result, TailoringResult)
        assert result.validation.valid
        assert not result.used_fallback
        assert result.final_text == tailored.strip()
        assert result.tailored == tailored.strip()
        assert "<h2>EDUCATION</h2>" in result.html
        assert result.metadata["skills"] == sample_skills.merged()
        assert mock_llm_client.generate.call_args.kwargs["model"] == "gen-model"

    async def test_content_loss_triggers_fallback(
        self, pipeline, mock_llm_client, sample_resume_text, sample_jd_text, sample_skills
    ):
        mock_llm_client.generate.return_value = _reply("Jane Doe\nPython developer.")

        result = await pipeline.tailor(sample_resume_text, sample_jd_text, sample_skills)

        assert not result.validation.valid
        assert result.used_fallback
        assert result.tailored == "Jane Doe\nPython developer."
        assert result.final_text.startswith(FALLBACK_NOTE)
        assert "**FastAPI**" in result.final_text
        assert "<strong>FastAPI</strong>" in result.html

    async def test_generation_failure_falls_back(
        self, pipeline, mock_llm_client, sample_resume_text, sample_jd_text, sample_skills
    ):
        mock_llm_client.generate.side_effect = RuntimeError("overloaded")

        result = await pipeline.tailor(sample_resume_text, sample_jd_text, sample_skills)

        assert result.tailored is None
        assert result.used_fallback
        assert "overloaded" in result.validation.issues[0]
        assert result.final_text.startswith(FALLBACK_NOTE)

    async def test_blank_resume_raises(self, pipeline, sample_jd_text, sample_skills):
        with pytest.raises(ResumeGenerationError):
            await pipeline.tailor("   ", sample_jd_text, sample_skills)

    async def test_phases_reported(
        self, pipeline, mock_llm_client, sample_resume_text, sample_jd_text, sample_skills
    ):
        mock_llm_client.generate.return_value = _reply("too short")
        phases = []

        await pipeline.tailor(
            sample_resume_text,
            sample_jd_text,
            sample_skills,
            on_phase=lambda phase, detail: phases.append(phase),
        )

        assert phases == ["generating", "validating", "fallback", "formatting", "done"]


class TestExtractSkills:
    async def test_delegates_to_extractor(self, pipeline, mock_llm_client, sample_jd_text):
        mock_llm_client.generate_json.return_value = {"technical": ["Redis"], "soft": []}

        skills = await pipeline.extract_skills(sample_jd_text)

        assert skills.technical == ["Redis"]
        assert mock_llm_client.generate_json.call_args.kwargs["model"] == "extract-model"
