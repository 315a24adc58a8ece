"""
Default page settings for PDF export.

A build configuration may override them with a YAML preset file
(EXPORT_PRESET_PATH), merged over these defaults with OmegaConf.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.rendering.logger import _log_debug, _log_error
from vitae.exceptions import SettingsError

load_dotenv()
EXPORT_PRESET_PATH = os.getenv("EXPORT_PRESET_PATH")
EXPORT_TIMEOUT_MS = int(os.getenv("EXPORT_TIMEOUT_MS", "30000"))

DEFAULT_PAGE_FORMAT = "A4"

DEFAULT_MARGINS = {
    "top": "20mm",
    "right": "20mm",
    "bottom": "20mm",
    "left": "20mm",
}


@dataclass(frozen=True)
class PageSettings:
    """
    Physical page layout passed to the browser's PDF export.

    Attributes:
        format: Paper format name understood by Chromium (e.g. "A4", "Letter")
        margins: CSS lengths for top/right/bottom/left
        print_background: Print background colors and images (the stylesheet relies on them)
        timeout_ms: Timeout for content settle and export, in milliseconds
    """

    format: str = DEFAULT_PAGE_FORMAT
    margins: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MARGINS))
    print_background: bool = True
    timeout_ms: int = EXPORT_TIMEOUT_MS


def load_page_settings(preset_path: Optional[Path] = None) -> PageSettings:
    """
    Build PageSettings from defaults, optionally overridden by a YAML preset.

    Preset keys mirror PageSettings fields; margins may be partial.

    Example preset:
        format: Letter
        margins:
          top: 0.5in
          bottom: 0.5in

    Args:
        preset_path: Preset file (defaults to EXPORT_PRESET_PATH env variable, if set)

    Returns:
        PageSettings for this build

    Raises:
        SettingsError: If the preset is missing, is not valid YAML, names
            unknown settings or gives a setting the wrong type
    """
    if preset_path is None and EXPORT_PRESET_PATH:
        preset_path = Path(EXPORT_PRESET_PATH)
    if preset_path is None:
        return PageSettings()

    try:
        settings = _apply_preset(Path(preset_path))
    except SettingsError as e:
        _log_error(f"Page settings preset rejected: {e.message}")
        raise

    _log_debug(f"Page settings from {preset_path}: {settings.format}, margins {settings.margins}")
    return settings


def _apply_preset(preset_path: Path) -> PageSettings:
    if not preset_path.is_file():
        raise SettingsError("Page settings preset not found", preset_path)

    try:
        preset = OmegaConf.load(preset_path)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML: {e}", preset_path) from e
    except (OSError, ValueError, OmegaConfBaseException) as e:
        raise SettingsError(f"Could not read preset: {e}", preset_path) from e

    if not isinstance(preset, DictConfig):
        raise SettingsError(
            f"Top level must be a mapping, got {type(preset).__name__}", preset_path
        )

    base = OmegaConf.create(
        {
            "format": DEFAULT_PAGE_FORMAT,
            "margins": dict(DEFAULT_MARGINS),
            "print_background": True,
            "timeout_ms": EXPORT_TIMEOUT_MS,
        }
    )

    unknown = set(preset.keys()) - set(base.keys())
    if unknown:
        raise SettingsError(
            f"Unknown page settings: {sorted(unknown)}. Valid settings: {sorted(base.keys())}",
            preset_path,
        )

    try:
        merged = OmegaConf.to_container(OmegaConf.merge(base, preset), resolve=True)
    except OmegaConfBaseException as e:
        raise SettingsError(f"Could not apply preset: {e}", preset_path) from e

    page_format = merged["format"]
    if not isinstance(page_format, str) or not page_format.strip():
        raise SettingsError(
            "Paper format must be a name such as A4 or Letter", preset_path, "format"
        )

    margins = merged["margins"]
    if not isinstance(margins, dict):
        raise SettingsError("Margins must map sides to CSS lengths", preset_path, "margins")
    unknown_sides = set(margins) - set(DEFAULT_MARGINS)
    if unknown_sides:
        raise SettingsError(
            f"Unknown margin sides: {sorted(unknown_sides)}", preset_path, "margins"
        )
    for side, length in margins.items():
        if isinstance(length, bool) or not isinstance(length, (str, int, float)):
            raise SettingsError("Margin must be a CSS length", preset_path, f"margins.{side}")

    if not isinstance(merged["print_background"], bool):
        raise SettingsError("Must be true or false", preset_path, "print_background")

    timeout_ms = merged["timeout_ms"]
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise SettingsError("Must be a positive number of milliseconds", preset_path, "timeout_ms")

    return PageSettings(
        format=page_format,
        margins={side: str(length) for side, length in margins.items()},
        print_background=merged["print_background"],
        timeout_ms=timeout_ms,
    )
