"""
Session logging for FOLIO commands.

One session = one directory under LOGS_PATH holding a single "<context>.log"
file (everything, DEBUG and up) while INFO and up is echoed to a console
stream. Every session opens with a provenance block so a log file can be tied
back to the command and environment that produced it.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Dict, Iterable, TextIO

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors per level; anything not listed keeps loguru's default
LEVEL_COLORS = {
    "SUCCESS": "<green><bold>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

PROVENANCE_PACKAGES = ("folio", "rich")


def package_versions(names: Iterable[str] = PROVENANCE_PACKAGES) -> Dict[str, str]:
    """Installed version of each distribution, "not installed" when missing."""
    versions = {}
    for name in names:
        try:
            versions[name] = version(name)
        except PackageNotFoundError:
            versions[name] = "not installed"
    return versions


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
    console: TextIO = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a logging session for one command run.

    Replaces any sinks already configured, so calling it twice in a process
    starts a fresh session rather than doubling output.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Session directory, created if missing
        extra_provenance: Additional key-value pairs for the provenance block
        level_colors: Overrides for LEVEL_COLORS (e.g., {"INFO": "<cyan>"})
        console: Stream for the console sink (defaults to sys.stdout at call time)
        console_level: Minimum level echoed to the console

    Returns:
        Path to the session's log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"Viewport": "100x40"},
        )
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        console if console is not None else sys.stdout,
        format=CONSOLE_FORMAT,
        level=console_level,
        colorize=True,
    )

    log_provenance({"Context": context_name, **(extra_provenance or {})})
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write the provenance block: command line, working directory, interpreter,
    package versions, then any extra key-value pairs.
    """
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {platform.python_version()} ({platform.system()})")
    for name, installed in package_versions().items():
        logger.info(f"{name}: {installed}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")
    logger.info(rule)
