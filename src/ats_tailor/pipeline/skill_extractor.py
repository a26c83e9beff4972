"""Skill Extractor - asks the model which skills a job description calls for."""

from __future__ import annotations

import logging

from ats_tailor.clients.llm_client import DEFAULT_MODEL, TextGenerator
from ats_tailor.errors import SkillExtractionError
from ats_tailor.models.skills import ExtractedSkills

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an expert resume tailor and job application specialist.
Extract the skills a job description asks for and categorise them into
"technical" and "soft" skills.

Respond with a JSON object only, with no explanation or other text:
{"technical": ["skill1", "skill2"], "soft": ["skill1", "skill2"]}

Rules:
- Use the wording of the job description for each skill.
- Keep each skill short (a tool, technology, method or trait), not a sentence.
- Do not invent skills the job description does not mention."""


class SkillExtractor:
    def __init__(self, llm: TextGenerator, model: str = DEFAULT_MODEL):
        self.llm = llm
        self.model = model

    async def extract(
        self,
        job_description: str,
        resume_text: str | None = None,
    ) -> ExtractedSkills:
        """Extract technical and soft skills from a job description.

        Raises SkillExtractionError when the description is blank, the call
        fails, or the reply holds no JSON object. No placeholder skills are
        ever substituted.
        """
        if not job_description or not job_description.strip():
            raise SkillExtractionError("Job description is required")

        prompt = f"""Extract skills from the following job description.

Job Description:
{job_description}"""
        if resume_text and resume_text.strip():
            prompt += f"""

Also consider the following resume content to identify skills that match:
{resume_text}"""

        logger.info("Extracting skills from job description (%d chars)", len(job_description))
        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
            )
        except ValueError as exc:
            raise SkillExtractionError("Model reply did not contain a skills object") from exc
        except Exception as exc:
            logger.exception("Skill extraction LLM call failed")
            raise SkillExtractionError(f"Skill extraction failed: {exc}") from exc

        skills = ExtractedSkills(technical=data.get("technical"), soft=data.get("soft"))
        logger.info(
            "Extracted %d technical and %d soft skills",
            len(skills.technical),
            len(skills.soft),
        )
        return skills
