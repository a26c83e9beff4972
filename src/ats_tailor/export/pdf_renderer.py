from __future__ import annotations

import logging
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from ats_tailor.core.formatter import format_resume_html
from ats_tailor.errors import RenderError

logger = logging.getLogger(__name__)

CSS_THEMES_DIR = Path(__file__).parent / "css_themes"
BASE_TEMPLATE_DIR = Path(__file__).parent

AVAILABLE_THEMES = ("ats", "classic")
DEFAULT_THEME = "ats"


def render_html(
    content: str,
    theme: str = DEFAULT_THEME,
    title: str = "Resume",
    *,
    markdown_input: bool = False,
) -> str:
    """Render resume text as a complete, themed HTML page.

    Plain text goes through the resume formatter; ``markdown_input`` treats
    the content as Markdown instead.
    """
    if theme not in AVAILABLE_THEMES:
        logger.debug("Unknown theme %r, using %r", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME
    return _styled_html(_body_html(content, markdown_input), theme, title)


def render_pdf(
    content: str,
    theme: str = DEFAULT_THEME,
    title: str = "Resume",
    *,
    markdown_input: bool = False,
) -> bytes:
    """Render resume text to PDF bytes."""
    return _html_to_pdf(render_html(content, theme, title, markdown_input=markdown_input))


def _body_html(content: str, markdown_input: bool) -> str:
    if markdown_input:
        return markdown.markdown(content, extensions=["tables", "sane_lists"])
    return format_resume_html(content)


def _styled_html(body_html: str, theme: str, title: str) -> str:
    css_path = CSS_THEMES_DIR / f"{theme}.css"
    css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
    env = Environment(
        loader=FileSystemLoader(str(BASE_TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template("base.html")
    return template.render(title=title, css=Markup(css), body=Markup(body_html))


def _html_to_pdf(html: str) -> bytes:
    """Convert HTML to PDF with WeasyPrint, falling back to fpdf2."""
    try:
        from weasyprint import HTML

        return HTML(string=html).write_pdf()
    except (ImportError, OSError):
        logger.warning("WeasyPrint not available, using fpdf2 fallback")

    from ats_tailor.export.pdf_fallback import html_to_pdf_fpdf2

    try:
        return html_to_pdf_fpdf2(html)
    except Exception as exc:
        raise RenderError(f"Failed to generate PDF resume: {exc}") from exc
