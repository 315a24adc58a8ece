"""
Rendering Context

Responsibilities:
- Launches headless Chromium and releases it on every exit path
- Loads the rendered HTML and waits for it to settle
- Prints the document to PDF at the configured page size and margins
- Reports launch, load and export failures as ExportError
- Rejects unusable page setting presets with SettingsError before launch

Owns: Browser lifecycle, PDF generation, page settings
Never: Modifies document content
"""

from vitae.contexts.rendering.defaults import PageSettings, load_page_settings
from vitae.contexts.rendering.exporter import ExportResult, browser_session, export_pdf

__all__ = [
    "ExportResult",
    "PageSettings",
    "browser_session",
    "export_pdf",
    "load_page_settings",
]
