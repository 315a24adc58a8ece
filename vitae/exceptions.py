"""Exceptions raised by the resume build pipeline."""

from pathlib import Path
from typing import Optional


class VitaeError(Exception):
    """Base class for every fatal build error."""


class ParseError(VitaeError, ValueError):
    """
    Exception raised when the profile data file cannot be loaded.

    Covers a missing or unreadable file, content that is not valid structured
    data, and content that does not have the shape of a profile record.

    Attributes:
        message: Error description
        path: Data file being loaded
        field: Dotted location of the offending field (e.g. 'work[2].startDate')
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.field = field

        parts = [message]
        if field:
            parts.append(f"Field: {field}")
        if path:
            parts.append(f"File: {path}")

        super().__init__("\n".join(parts))


class SettingsError(VitaeError, ValueError):
    """
    Exception raised when a page settings preset cannot be applied.

    Attributes:
        message: Error description
        path: Preset file being loaded
        key: Offending setting (e.g. 'margins.top')
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Setting: {key}")
        if path:
            parts.append(f"Preset: {path}")

        super().__init__("\n".join(parts))


class RenderError(VitaeError):
    """
    Exception raised when the profile record cannot be rendered to markup.

    Attributes:
        message: Error description
        section: Section being rendered (e.g. 'skills')
        original_error: The underlying Jinja2 or type error
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.section = section
        self.original_error = original_error

        parts = [message]
        if section:
            parts.append(f"Section: {section}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class ExportError(VitaeError):
    """
    Exception raised when the headless browser fails to produce the PDF.

    Attributes:
        message: Error description
        output_path: Destination PDF path
        original_error: The underlying Playwright or OS error
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.output_path = output_path
        self.original_error = original_error

        parts = [message]
        if output_path:
            parts.append(f"Output: {output_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
