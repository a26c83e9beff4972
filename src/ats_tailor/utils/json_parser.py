"""Pull a JSON object out of a model reply."""

from __future__ import annotations

import json
import re

_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def extract_json(text: str) -> dict:
    """Parse the first JSON object in ``text``.

    Models often wrap JSON in prose or a fenced block, so this tries the raw
    text, then the contents of a ```json fence, then the span from the first
    "{" to the last "}". Raises ValueError when none of them is an object.
    """
    text = (text or "").strip()
    candidates = [text]

    fence = _FENCE.search(text)
    if fence:
        candidates.append(fence.group(1).strip())

    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except (json.JSONDecodeError, TypeError):
            continue
        if isinstance(data, dict):
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]!r}")
