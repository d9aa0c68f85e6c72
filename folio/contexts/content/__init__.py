"""
Content Context

Responsibilities:
- Defines the immutable portfolio data model (styled spans, jobs, projects)
- Holds the hard-coded portfolio content
- Enforces that content counts match the fixed layout splits

Owns: Portfolio content and its structure
Never: Decides how content is laid out or painted
"""

from folio.contexts.content.exceptions import LayoutSizingError
from folio.contexts.content.portfolio_content import PORTFOLIO
from folio.contexts.content.portfolio_data_structures import (
    Experience,
    FunStuff,
    Portfolio,
    StyledLine,
    StyledSpan,
    styled_line,
)

__all__ = [
    # Data structure classes
    "StyledSpan",
    "StyledLine",
    "styled_line",
    "Experience",
    "FunStuff",
    "Portfolio",
    # Content
    "PORTFOLIO",
    # Errors
    "LayoutSizingError",
]
