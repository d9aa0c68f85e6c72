"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log and output directories
"""

from folio.utils.timestamp import now, today

__all__ = ["now", "today"]
