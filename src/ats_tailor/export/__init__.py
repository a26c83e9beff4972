"""HTML and PDF export for tailored resumes."""
from ats_tailor.export.pdf_renderer import (
    AVAILABLE_THEMES,
    render_html,
    render_pdf,
)

__all__ = ["render_pdf", "render_html", "AVAILABLE_THEMES"]
