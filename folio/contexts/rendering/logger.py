"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import TextIO

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path,
    viewport: str = None,
    console: TextIO = None,
    console_level: str = "INFO",
) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        viewport: Optional "COLSxROWS" description for the provenance header
        console: Stream for console output (defaults to stdout)
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    provenance = {"Viewport": viewport} if viewport else None
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance=provenance,
        console=console,
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_paint(width: int, height: int, elapsed_time: float) -> None:
    """Log a completed paint."""
    _log_debug(f"Painted {width}x{height} frame ({elapsed_time * 1000:.1f}ms)")


def log_export_result(output_path: Path, fmt: str, width: int, height: int) -> None:
    """Log a written export file."""
    _log_success(f"Exported {fmt} ({width}x{height})")
    _log_info(f"  Output: {output_path}")


def log_server_start(url: str, default_viewport: str) -> None:
    """Log that the browser host is accepting paint requests."""
    _log_info(f"Serving portfolio at {url}")
    _log_debug(f"  Default viewport: {default_viewport}")


def log_request(path: str, width: int, height: int) -> None:
    """Log one paint request from the browser."""
    _log_debug(f"GET {path} -> {width}x{height}")


def log_startup_failure(error: Exception) -> None:
    """Log a fatal error while constructing the backend or host."""
    _log_error(f"Startup failed: {type(error).__name__}: {error}")
