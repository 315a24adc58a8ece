"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_export_start(output_path: Path, settings) -> None:
    """Log start of export with page settings."""
    _log_info(f"Exporting PDF: {output_path}")
    _log_debug(f"  Format: {settings.format}")
    _log_debug(f"  Margins: {settings.margins}")
    _log_debug(f"  Print background: {settings.print_background}")


def log_export_result(result) -> None:
    """
    Log a successful export.

    Args:
        result: ExportResult from export_pdf()
    """
    _log_success(f"Export succeeded ({result.elapsed_s:.2f}s)")
    _log_debug(f"  Size: {result.size_bytes} bytes")
    if result.page_count is not None:
        _log_info(f"  Pages: {result.page_count}")
