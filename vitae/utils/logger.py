"""
Build log setup.

Each build writes a full DEBUG log to its own directory. The console sink
writes to stderr so stdout carries only the result line; it shows warnings
and errors, or everything with --verbose. Contexts log through the prefix
helpers in contexts/{context}/logger.py.
"""

import platform
import sys
from importlib import metadata
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | {message}"

# Distributions whose versions change what ends up in the PDF
TRACKED_DISTRIBUTIONS = ("vitae", "jinja2", "playwright")


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Dict[str, object]] = None,
    verbose: bool = False,
) -> Path:
    """
    Route loguru to a per-build log file and a stderr console sink.

    Args:
        context_name: Log file stem (e.g., "build")
        log_dir: Directory for this build's logs, created if missing
        provenance: Build inputs recorded in the log header (paths, preset)
        verbose: Echo DEBUG and above to the console instead of WARNING and above

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="build",
            log_dir=Path("outs/logs/build_20261018_123456"),
            provenance={"Input": "resume.json"},
        )
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "WARNING",
        colorize=True,
    )

    log_provenance(provenance)
    return log_file


def distribution_versions() -> Dict[str, str]:
    """Installed versions of TRACKED_DISTRIBUTIONS ("not installed" when absent)."""
    versions = {}
    for name in TRACKED_DISTRIBUTIONS:
        try:
            versions[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            versions[name] = "not installed"
    return versions


def log_provenance(provenance: Optional[Dict[str, object]] = None) -> None:
    """Write the build header: command, interpreter, library versions, build inputs."""
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {platform.python_version()} on {platform.system()}")
    for name, version in distribution_versions().items():
        logger.debug(f"{name}: {version}")
    for key, value in (provenance or {}).items():
        logger.debug(f"{key}: {value}")
