"""Resume Generator - asks the model to rewrite a resume around chosen skills."""

from __future__ import annotations

import logging

from ats_tailor.clients.llm_client import TextGenerator
from ats_tailor.errors import ResumeGenerationError
from ats_tailor.models.skills import SkillSelection

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

SYSTEM_PROMPT = """\
You are an expert ATS resume optimizer.

EXTREMELY IMPORTANT: You must return the ENTIRE resume with ALL original
content preserved. Do not remove ANY information from the original resume.

Your ONLY tasks are to:
1. KEEP the entire original resume structure, all sections, and all content
2. ADD relevant keywords from the job description where appropriate
3. EMPHASIZE skills and experiences that match the job requirements
4. REWORD some bullet points to better highlight relevant achievements
5. MAINTAIN the exact same sections, headings, contact information, and overall structure

DO NOT:
- Remove any sections or content from the original resume
- Change the overall structure or order of the resume
- Add fictional experiences or qualifications
- Completely rewrite sections

Return plain text only: the complete enhanced resume, with no commentary
before or after it."""


class ResumeGenerator:
    def __init__(
        self,
        llm: TextGenerator,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 8192,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(
        self,
        original_resume: str,
        job_description: str,
        skills: SkillSelection,
    ) -> str:
        """Return the model's tailored version of ``original_resume``.

        The text is returned as-is; checking it for content loss is the
        validator's job.
        """
        if not original_resume or not original_resume.strip():
            raise ResumeGenerationError(
                "No original resume content provided. Please upload your resume first."
            )

        all_skills = ", ".join(skills.merged())
        prompt = f"""Original Resume:
{original_resume}

Job Description:
{job_description}

Important Skills to Emphasize:
{all_skills or "(none selected)"}

Return the COMPLETE enhanced resume with ALL original content preserved. Make
sure to include ALL sections from the original resume (Professional Summary,
Core Competencies, Professional Experience, Education, etc.)."""

        logger.info("Generating tailored resume with skills: %s", all_skills or "-")
        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as exc:
            raise ResumeGenerationError(f"Failed to generate tailored resume: {exc}") from exc

        tailored = response.text.strip()
        if not tailored:
            raise ResumeGenerationError("Received empty response from the model")

        logger.debug(
            "Original length: %d, tailored length: %d", len(original_resume), len(tailored)
        )
        return tailored
