"""
PDF Export Module

Lays out a rendered HTML document in headless Chromium (Playwright) and
prints it to a PDF file.
"""

import os
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from dotenv import load_dotenv
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from vitae.contexts.rendering.defaults import PageSettings, load_page_settings
from vitae.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_export_result,
    log_export_start,
)
from vitae.exceptions import ExportError
from vitae.utils.pdf_processing import page_count

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))
RESUME_PDF_PATH = PROJECT_ROOT / os.getenv("RESUME_PDF_PATH", "resume/resume.pdf")

# Chromium refuses to start as root inside containers without this
CHROMIUM_ARGS = ["--no-sandbox"]


@dataclass
class ExportResult:
    """
    Result of a PDF export.

    Attributes:
        pdf_path: Path to the written PDF
        size_bytes: Size of the PDF file
        page_count: Number of pages in the PDF (None if not readable)
        elapsed_s: Wall time from browser launch to file written
    """

    pdf_path: Path
    size_bytes: int
    page_count: Optional[int] = None
    elapsed_s: float = 0.0


@contextmanager
def browser_session(timeout_ms: int) -> Iterator[Page]:
    """
    Launch headless Chromium and yield a fresh page.

    The browser is closed and Playwright stopped on every exit path,
    including when the caller raises.

    Args:
        timeout_ms: Default timeout for page operations

    Raises:
        ExportError: If the browser cannot be launched
    """
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=True, args=CHROMIUM_ARGS)
        except PlaywrightError as e:
            _log_error(f"Chromium launch failed: {e}")
            raise ExportError(
                "Could not launch headless Chromium. Run: playwright install chromium",
                original_error=e,
            ) from e

        _log_debug("Chromium launched")
        try:
            page = browser.new_page()
            page.set_default_timeout(timeout_ms)
            yield page
        finally:
            browser.close()
            _log_debug("Chromium closed")


def export_pdf(
    html: str,
    output_path: Union[Path, str] = RESUME_PDF_PATH,
    settings: Optional[PageSettings] = None,
) -> ExportResult:
    """
    Export a rendered HTML document to PDF.

    Loads the document, waits until the network is idle (no pending
    sub-resource loads), then prints it with the configured page format,
    margins and background graphics. Not retried on failure.

    Args:
        html: Complete HTML document
        output_path: Destination PDF (default: RESUME_PDF_PATH from environment)
        settings: Page settings (default: load_page_settings())

    Returns:
        ExportResult describing the written file

    Raises:
        ExportError: If the browser fails to launch, the content fails to
            settle, or the PDF cannot be written
    """
    settings = settings or load_page_settings()
    output_path = Path(output_path)

    log_export_start(output_path, settings)
    start_time = time.time()

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # A stale file would make a failed export look like a success
        if output_path.exists():
            output_path.unlink()
    except OSError as e:
        raise ExportError("Could not prepare output location", output_path, e) from e

    try:
        with browser_session(settings.timeout_ms) as page:
            page.set_content(html, wait_until="networkidle", timeout=settings.timeout_ms)
            _log_debug("Content settled")
            page.pdf(
                path=str(output_path),
                format=settings.format,
                margin=dict(settings.margins),
                print_background=settings.print_background,
            )
    except PlaywrightError as e:
        _log_error(f"PDF export failed: {e}")
        raise ExportError("PDF export failed", output_path, e) from e

    if not output_path.exists() or output_path.stat().st_size == 0:
        _log_error("PDF file was not written")
        raise ExportError("PDF file was not written", output_path)

    result = ExportResult(
        pdf_path=output_path,
        size_bytes=output_path.stat().st_size,
        page_count=page_count(output_path),
        elapsed_s=time.time() - start_time,
    )
    log_export_result(result)
    return result
