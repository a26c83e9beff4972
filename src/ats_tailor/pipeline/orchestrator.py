"""Pipeline orchestrator - generate, validate, fall back, format."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from ats_tailor.clients.llm_client import DEFAULT_MODEL, TextGenerator
from ats_tailor.core.formatter import format_resume_html
from ats_tailor.core.validator import LENGTH_RATIO_THRESHOLD, apply_fallback, validate
from ats_tailor.errors import ResumeGenerationError
from ats_tailor.models.resume import ValidationResult
from ats_tailor.models.skills import ExtractedSkills, SkillSelection
from ats_tailor.pipeline.resume_generator import DEFAULT_MODEL as GENERATION_MODEL
from ats_tailor.pipeline.resume_generator import ResumeGenerator
from ats_tailor.pipeline.skill_extractor import SkillExtractor

logger = logging.getLogger(__name__)


@dataclass
class TailoringResult:
    """Everything produced by one tailoring run."""

    original: str
    tailored: str | None  # model output; None when generation failed
    final_text: str
    validation: ValidationResult
    html: str
    used_fallback: bool = False
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


class TailoringPipeline:
    """Runs skill extraction and resume tailoring against one AI client."""

    def __init__(
        self,
        llm: TextGenerator,
        *,
        extraction_model: str = DEFAULT_MODEL,
        generation_model: str = GENERATION_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 8192,
        length_ratio: float = LENGTH_RATIO_THRESHOLD,
        name_lines: int = 5,
    ):
        self.skill_extractor = SkillExtractor(llm, model=extraction_model)
        self.resume_generator = ResumeGenerator(
            llm, model=generation_model, temperature=temperature, max_tokens=max_tokens
        )
        self.length_ratio = length_ratio
        self.name_lines = name_lines

    async def extract_skills(
        self, job_description: str, resume_text: str | None = None
    ) -> ExtractedSkills:
        return await self.skill_extractor.extract(job_description, resume_text)

    async def tailor(
        self,
        resume_text: str,
        job_description: str,
        skills: SkillSelection,
        *,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> TailoringResult:
        """Tailor ``resume_text`` and return the text to show plus its HTML.

        The model's rewrite is used only when it passes validation; otherwise
        the original with the selected skills emphasised is returned. A blank
        resume raises ResumeGenerationError since there is nothing to fall
        back to.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = "") -> None:
            if on_phase:
                on_phase(phase, detail)

        if not resume_text or not resume_text.strip():
            raise ResumeGenerationError(
                "No original resume content provided. Please upload your resume first."
            )

        _notify("generating", "Generating tailored resume")
        tailored: str | None
        try:
            tailored = await self.resume_generator.generate(resume_text, job_description, skills)
        except ResumeGenerationError as exc:
            tailored = None
            validation = ValidationResult(valid=False, issues=[str(exc)])
        else:
            _notify("validating", "Checking tailored resume for content loss")
            validation = validate(
                resume_text,
                tailored,
                length_ratio=self.length_ratio,
                name_lines=self.name_lines,
            )

        if validation.valid:
            final_text = tailored
        else:
            logger.warning("Issues detected with tailored resume: %s", "; ".join(validation.issues))
            _notify("fallback", "Highlighting skills in the original resume")
            final_text = apply_fallback(resume_text, skills.merged())

        _notify("formatting", "Formatting resume")
        html = format_resume_html(final_text)

        elapsed = time.monotonic() - start
        _notify("done", f"Done in {elapsed:.1f}s")
        return TailoringResult(
            original=resume_text,
            tailored=tailored,
            final_text=final_text,
            validation=validation,
            html=html,
            used_fallback=not validation.valid,
            elapsed_seconds=elapsed,
            metadata={"skills": skills.merged()},
        )
