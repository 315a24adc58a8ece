"""
Resume PDF Build CLI

Builds resume/resume.pdf from resume.json. Run with no arguments for the
standard build.

Examples:\n

    build-resume                                   # Build with configured paths

    build-resume --html resume/resume.html         # Also keep the rendered HTML

    build-resume -i data/resume.yaml -o out/cv.pdf # Custom input and output
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.intake.profile_loader import RESUME_DATA_PATH
from vitae.contexts.rendering.defaults import EXPORT_PRESET_PATH
from vitae.contexts.rendering.exporter import RESUME_PDF_PATH
from vitae.exceptions import VitaeError
from vitae.pipeline import build_resume
from vitae.utils.logger import setup_logger
from vitae.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))
LOGS_PATH = PROJECT_ROOT / os.getenv("LOGS_PATH", "outs/logs")


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Build the resume PDF from the resume data file",
    add_completion=False,
)


@app.command()
def build(
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="Resume data file (JSON Resume layout, JSON or YAML)",
        ),
    ] = RESUME_DATA_PATH,
    output_path: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Destination PDF",
        ),
    ] = RESUME_PDF_PATH,
    html_path: Annotated[
        Optional[Path],
        typer.Option(
            "--html",
            help="Also write the rendered HTML to this path",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Echo debug logging to the console",
        ),
    ] = False,
):
    """
    Build the resume PDF: load the data file, render HTML, export with headless Chromium.

    Exits 0 on success, 1 on any load, render or export failure.
    """
    log_dir = LOGS_PATH / f"build_{now()}"
    setup_logger(
        context_name="build",
        log_dir=log_dir,
        provenance={
            "Input": input_path,
            "Output": output_path,
            "Page preset": EXPORT_PRESET_PATH or "defaults",
        },
        verbose=verbose,
    )

    try:
        result = build_resume(input_path=input_path, output_path=output_path, html_path=html_path)
    except VitaeError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        typer.echo(f"  Log: {display_path(log_dir / 'build.log')}", err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"Resume PDF built successfully at {display_path(result.pdf_path)}",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    app()
