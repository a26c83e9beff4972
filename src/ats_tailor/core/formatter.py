"""Turn plain resume text into tagged HTML for the rendering templates.

The input is HTML-escaped before any tagging, so every character of the
resume survives either verbatim or as an entity. The only text removed is
the bullet glyph or list number in front of list items, and ``**``
emphasis markers become ``<strong>`` tags. Later steps rely on the markup
produced by earlier ones, so the step order below matters.
"""

from __future__ import annotations

import html
import re

from markupsafe import escape

from ats_tailor.core.sections import BULLET_PATTERN, FORMATTED_SECTIONS, JOB_ENTRY_PATTERN

_HEADINGS = frozenset(name.upper() for name in FORMATTED_SECTIONS)

_BLOCK_TAGS = ("h2", "ul", "li", "p")
_PARAGRAPH_SPLIT = re.compile(r"\n{2,}")
_REPEATED_BREAKS = re.compile(r"(?:<br>){2,}")
_BREAK_BEFORE_BLOCK = re.compile(r"<br>(?=</?(?:%s)>)" % "|".join(_BLOCK_TAGS))
_BREAK_AFTER_BLOCK = re.compile(r"(</?(?:%s)>)<br>" % "|".join(_BLOCK_TAGS))
_EMPHASIS = re.compile(r"\*\*([^*<>\n]+?)\*\*")
_TAB_SPACES = "&nbsp;" * 4


def format_resume_html(text: str) -> str:
    """Convert resume text to an HTML fragment.

    Returns an empty string for empty or whitespace-only input.
    """
    if not text or not text.strip():
        return ""

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line.rstrip() for line in str(escape(normalized)).split("\n")]

    lines = [_tag_heading(line) for line in lines]
    lines = [_tag_bullet(line) for line in lines]
    lines = _group_list_items(lines)
    body = _wrap_paragraphs("\n".join(lines))
    body = body.replace("\n", "<br>").replace("\t", _TAB_SPACES)
    body = JOB_ENTRY_PATTERN.sub(_tag_job_entry, body)
    body = _EMPHASIS.sub(r"<strong>\1</strong>", body)
    return _cleanup_breaks(body)


def _tag_heading(line: str) -> str:
    stripped = line.strip()
    if stripped.rstrip(":").strip().upper() in _HEADINGS:
        return f"<h2>{stripped}</h2>"
    return line


def _tag_bullet(line: str) -> str:
    match = BULLET_PATTERN.match(line)
    if match is None:
        return line
    return f"<li>{match.group('body')}</li>"


def _group_list_items(lines: list[str]) -> list[str]:
    grouped: list[str] = []
    run: list[str] = []
    for line in lines:
        if line.startswith("<li>"):
            run.append(line)
            continue
        if run:
            grouped.append("<ul>" + "".join(run) + "</ul>")
            run = []
        grouped.append(line)
    if run:
        grouped.append("<ul>" + "".join(run) + "</ul>")
    return grouped


def _wrap_paragraphs(text: str) -> str:
    blocks = []
    for block in _PARAGRAPH_SPLIT.split(text):
        block = block.strip("\n")
        if not block.strip():
            continue
        # Escaped input cannot contain "<", so any "<" is one of our tags.
        if "<" in block:
            blocks.append(block)
        else:
            blocks.append(f"<p>{block.strip()}</p>")
    return "\n\n".join(blocks)


def _tag_job_entry(match: re.Match[str]) -> str:
    title = match.group("title")
    lead = title[: len(title) - len(title.lstrip())]
    return (
        f'{lead}<span class="job-title">{title.strip()}</span> | '
        f'<span class="company">{match.group("company").strip()}</span> '
        f'(<span class="date">{match.group("dates").strip()}</span>)'
    )


def _cleanup_breaks(body: str) -> str:
    body = _REPEATED_BREAKS.sub("<br>", body)
    body = _BREAK_BEFORE_BLOCK.sub("", body)
    body = _BREAK_AFTER_BLOCK.sub(r"\1", body)
    return body.removeprefix("<br>").removesuffix("<br>")


_TAG = re.compile(r"<[^>]+>")
_BREAK = re.compile(r"<br\s*/?>")
_STRONG = re.compile(r"</?strong>")
_LIST_ITEM_END = re.compile(r"</li>")
_BLOCK_START = re.compile(r"<(?:h[1-6]|p|ul|ol|div|section)(?:\s[^>]*)?>")
_BLOCK_END = re.compile(r"</(?:h[1-6]|p|ul|ol|div|section)>")


def extract_text(markup: str) -> str:
    """Strip tags from formatter output, keeping block and line boundaries.

    Block elements start on a new line and end with a blank line. List
    items and ``<br>`` end with a newline. ``<strong>`` goes back to ``**``
    and entities are unescaped.
    """
    text = _BREAK.sub("\n", markup)
    text = _STRONG.sub("**", text)
    text = _BLOCK_START.sub("\n", text)
    text = _LIST_ITEM_END.sub("\n", text)
    text = _BLOCK_END.sub("\n\n", text)
    text = html.unescape(_TAG.sub("", text))
    lines = [line.strip() for line in text.split("\n")]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()
