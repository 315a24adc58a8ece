"""
Resume build pipeline: load → render → export.

Runs once to completion. Any failure propagates as a VitaeError subclass;
there is no partial output mode.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from vitae.contexts.intake import load_profile
from vitae.contexts.intake.profile_loader import RESUME_DATA_PATH
from vitae.contexts.rendering import ExportResult, PageSettings, export_pdf
from vitae.contexts.rendering.exporter import RESUME_PDF_PATH
from vitae.contexts.templating import render


@dataclass
class BuildResult:
    """
    Outcome of a full build.

    Attributes:
        pdf_path: Written PDF
        html_path: Written HTML (None unless requested)
        export: Export details (size, page count, timing)
    """

    pdf_path: Path
    html_path: Optional[Path]
    export: ExportResult


def build_resume(
    input_path: Union[Path, str] = RESUME_DATA_PATH,
    output_path: Union[Path, str] = RESUME_PDF_PATH,
    html_path: Optional[Union[Path, str]] = None,
    settings: Optional[PageSettings] = None,
) -> BuildResult:
    """
    Build the resume PDF from the data file.

    Args:
        input_path: Resume data file (JSON Resume layout)
        output_path: Destination PDF
        html_path: If given, also write the rendered HTML here
        settings: Page settings (default: configured defaults)

    Returns:
        BuildResult

    Raises:
        ParseError: Data file missing or malformed (nothing rendered)
        RenderError: Field of unexpected shape (nothing exported)
        ExportError: Browser launch, content load or PDF write failed
    """
    profile = load_profile(input_path)

    html = render(profile)
    logger.info(f"Rendered HTML document ({len(html)} characters)")

    written_html = None
    if html_path is not None:
        written_html = Path(html_path)
        written_html.parent.mkdir(parents=True, exist_ok=True)
        written_html.write_text(html, encoding="utf-8")
        logger.info(f"HTML saved to: {written_html}")

    export = export_pdf(html, output_path, settings)

    return BuildResult(pdf_path=export.pdf_path, html_path=written_html, export=export)
