"""Claude API wrapper used for skill extraction and resume generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import anthropic
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ats_tailor.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"

# Client errors (bad request, auth) are not worth retrying.
_RETRYABLE = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)


@dataclass
class LLMResponse:
    """Response text plus token usage."""

    text: str
    input_tokens: int
    output_tokens: int


class TextGenerator(Protocol):
    """What the pipeline needs from an AI text-generation service."""

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ) -> LLMResponse: ...

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ) -> dict: ...


class LLMClient:
    """Async Claude client with exponential-backoff retries.

    Construct one per application and pass it to the pipeline components;
    nothing in the package holds a module-level client.
    """

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._usage: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    @retry(
        retry=retry_if_exception_type(_RETRYABLE),
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=1, max=10),
        reraise=True,
    )
    async def _create_message(
        self,
        prompt: str,
        system: str,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> anthropic.types.Message:
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        return await self.client.messages.create(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text with usage.

        The text may be empty or truncated; callers decide what that means.
        """
        logger.debug("LLM call: model=%s, prompt=%d chars", model, len(prompt))
        try:
            message = await self._create_message(
                prompt=prompt,
                system=system,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._usage.append((model, input_tokens, output_tokens))
        text = message.content[0].text if message.content else ""
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 8192,
    ) -> dict:
        """Send a prompt and parse a JSON object out of the reply."""
        response = await self.generate(
            prompt=prompt,
            system=system,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return extract_json(response.text)

    def usage_summary(self) -> dict:
        """Return accumulated token usage and reset it."""
        summary = {
            "input": sum(u[1] for u in self._usage),
            "output": sum(u[2] for u in self._usage),
            "calls": len(self._usage),
        }
        self._usage.clear()
        return summary
