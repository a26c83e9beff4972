"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ats_tailor.clients.llm_client import LLMClient
from ats_tailor.config import load_config
from ats_tailor.core.validator import apply_resume_fixes, validate
from ats_tailor.errors import AtsTailorError
from ats_tailor.export.pdf_renderer import AVAILABLE_THEMES, render_html, render_pdf
from ats_tailor.models.skills import SkillSelection
from ats_tailor.parsers.job_description import load_jd_file
from ats_tailor.parsers.resume_parser import parse_resume
from ats_tailor.parsers.upload import accept_upload
from ats_tailor.pipeline.orchestrator import TailoringPipeline

app = typer.Typer(
    name="ats-tailor",
    help="Tailor a resume to a job description and export it ATS-friendly.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_pipeline() -> TailoringPipeline:
    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout)
    return TailoringPipeline(
        llm,
        extraction_model=config.llm.extraction_model,
        generation_model=config.llm.generation_model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
        length_ratio=config.validation.length_ratio,
        name_lines=config.validation.name_scan_lines,
    )


def _require_file(path: Path, what: str) -> None:
    if not path.exists():
        console.print(f"[red]{what} not found: {path}[/red]")
        raise typer.Exit(1)


@app.command()
def skills(
    jd: Path = typer.Argument(help="Job description text file"),
    resume: Path = typer.Option(None, "--resume", help="Resume to match skills against"),
) -> None:
    """Extract technical and soft skills from a job description."""
    _require_file(jd, "Job description file")
    resume_text = None
    if resume is not None:
        _require_file(resume, "Resume file")
        try:
            resume_text = parse_resume(resume)
        except AtsTailorError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    pipeline = _build_pipeline()
    try:
        with console.status("Extracting skills..."):
            extracted = asyncio.run(pipeline.extract_skills(load_jd_file(jd), resume_text))
    except AtsTailorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Skills")
    table.add_column("Technical")
    table.add_column("Soft")
    for i in range(max(len(extracted.technical), len(extracted.soft))):
        table.add_row(
            extracted.technical[i] if i < len(extracted.technical) else "",
            extracted.soft[i] if i < len(extracted.soft) else "",
        )
    console.print(table)


@app.command()
def tailor(
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF/DOCX/TXT/MD)"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    skill: list[str] = typer.Option(None, "--skill", "-s", help="Skill to emphasise (repeatable)"),
    custom_skill: list[str] = typer.Option(None, "--custom-skill", help="Extra skill not in the JD"),
    output: Path = typer.Option(None, "--output", "-o", help="Output text file (.txt)"),
    theme: str = typer.Option(None, "--theme", "-t", help="HTML/PDF theme"),
    pdf: bool = typer.Option(False, "--pdf", help="Also write a PDF"),
) -> None:
    """Tailor a resume to a job description."""
    _require_file(resume, "Resume file")
    _require_file(jd, "Job description file")

    config = load_config()
    theme = theme or config.export.theme
    try:
        upload = accept_upload(resume.name, resume.read_bytes(), max_bytes=config.upload.max_bytes)
    except AtsTailorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    jd_text = load_jd_file(jd)
    pipeline = _build_pipeline()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Tailoring resume...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=detail)

        async def _run():
            if skill:
                selection = SkillSelection(technical=skill, custom=custom_skill or [])
            else:
                on_phase("skills", "Extracting skills")
                extracted = await pipeline.extract_skills(jd_text, upload.text)
                selection = SkillSelection.from_extracted(extracted, custom=custom_skill)
            return selection, await pipeline.tailor(
                upload.text, jd_text, selection, on_phase=on_phase
            )

        try:
            selection, result = asyncio.run(_run())
        except AtsTailorError as e:
            progress.stop()
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[dim]Skills: {', '.join(selection.merged()) or '-'}[/dim]")

    if output is None:
        output = Path("./output") / f"tailored_{resume.stem}.txt"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.final_text, encoding="utf-8")
    console.print(f"\n[green]Resume saved: {output}[/green]")

    html_path = output.with_suffix(".html")
    html_path.write_text(render_html(result.final_text, theme, config.export.title), encoding="utf-8")
    console.print(f"[green]HTML saved: {html_path}[/green]")

    if pdf:
        pdf_path = output.with_suffix(".pdf")
        try:
            pdf_path.write_bytes(render_pdf(result.final_text, theme, config.export.title))
        except AtsTailorError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]PDF saved: {pdf_path}[/green]")

    if result.used_fallback:
        console.print(
            Panel(
                "\n".join(f"- {issue}" for issue in result.validation.issues),
                title="AI output rejected, original resume with highlighted skills used",
                border_style="yellow",
            )
        )
    else:
        console.print(f"[dim]Done in {result.elapsed_seconds:.1f}s[/dim]")


@app.command("validate")
def validate_cmd(
    original: Path = typer.Argument(help="Original resume file"),
    tailored: Path = typer.Argument(help="Tailored resume file"),
    fix: bool = typer.Option(False, "--fix", help="Write the fallback resume when invalid"),
    skill: list[str] = typer.Option(None, "--skill", "-s", help="Skill to highlight with --fix"),
    output: Path = typer.Option(None, "--output", "-o", help="Where --fix writes its result"),
) -> None:
    """Check a tailored resume for likely content loss."""
    _require_file(original, "Original resume")
    _require_file(tailored, "Tailored resume")
    config = load_config()
    try:
        original_text = parse_resume(original)
        tailored_text = parse_resume(tailored)
    except AtsTailorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    result = validate(
        original_text,
        tailored_text,
        length_ratio=config.validation.length_ratio,
        name_lines=config.validation.name_scan_lines,
    )
    if result.valid:
        console.print("[green]No content loss detected.[/green]")
    else:
        console.print(Panel("\n".join(f"- {i}" for i in result.issues), title="Issues", border_style="yellow"))

    if fix:
        fixed = apply_resume_fixes(
            original_text,
            tailored_text,
            skill or [],
            length_ratio=config.validation.length_ratio,
            name_lines=config.validation.name_scan_lines,
        )
        if output is None:
            typer.echo(fixed)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(fixed, encoding="utf-8")
            console.print(f"[green]Saved: {output}[/green]")
        return

    if not result.valid:
        raise typer.Exit(1)


@app.command()
def render(
    source: Path = typer.Argument(help="Resume text or Markdown file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output path (.html or .pdf)"),
    theme: str = typer.Option(None, "--theme", "-t", help="Theme name"),
    title: str = typer.Option(None, "--title", help="Document title"),
    markdown_input: bool = typer.Option(False, "--markdown", help="Treat the source as Markdown"),
) -> None:
    """Render a resume file to themed HTML or PDF."""
    _require_file(source, "Source file")
    config = load_config()
    theme = theme or config.export.theme
    title = title or config.export.title
    content = source.read_text(encoding="utf-8")

    if output is None:
        output = source.with_suffix(".html")
    output.parent.mkdir(parents=True, exist_ok=True)

    if output.suffix.lower() == ".pdf":
        try:
            output.write_bytes(render_pdf(content, theme, title, markdown_input=markdown_input))
        except AtsTailorError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
    else:
        output.write_text(render_html(content, theme, title, markdown_input=markdown_input), encoding="utf-8")
    console.print(f"[green]Saved: {output}[/green]")


@app.command()
def themes() -> None:
    """List available export themes."""
    for name in AVAILABLE_THEMES:
        console.print(f"  - {name}")


if __name__ == "__main__":
    app()
