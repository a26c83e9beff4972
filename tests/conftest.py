"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ats_tailor.clients.llm_client import LLMClient, LLMResponse
from ats_tailor.models.skills import SkillSelection


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane.doe@example.com | +1 555-123-4567
Berlin, Germany

PROFESSIONAL SUMMARY
Backend engineer with 6 years of experience building Python services.

PROFESSIONAL EXPERIENCE
Senior Engineer | Acme Corp (2021 - Present)
• Built a FastAPI platform serving 2M requests per day
• Cut PostgreSQL query latency by 40%

Software Engineer | Initech (2018 - 2021)
- Maintained Django REST APIs
- Introduced Docker-based CI pipelines

EDUCATION
BSc Computer Science, TU Berlin (2014 - 2018)

SKILLS
Python, Django, FastAPI, PostgreSQL, Docker, AWS
"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Backend Engineer (Python)

We are looking for a backend engineer to design and run our APIs.

Requirements:
- 4+ years of Python experience
- FastAPI or Django
- PostgreSQL, Redis
- Kubernetes is a plus
- Strong communication and ownership
"""


@pytest.fixture
def sample_skills() -> SkillSelection:
    return SkillSelection(
        technical=["Python", "FastAPI", "PostgreSQL"],
        soft=["Communication"],
        custom=["Kubernetes"],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client
