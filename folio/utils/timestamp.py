"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, sortable string.

    Used to name per-session log directories (e.g., "render_20251114_123456").
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date as YYYY-MM-DD, used for dated results directories."""
    return datetime.now().strftime("%Y-%m-%d")
