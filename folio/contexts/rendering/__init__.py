"""
Rendering Context

Responsibilities:
- Composes the portfolio into nested bordered panels with proportional splits
- Paints full frames on demand (terminal, HTML, SVG)
- Hosts the page for the browser, re-painting on every request
- Reports region maps for layout diagnostics

Owns: Widgets, layout composition, paint backend, browser host
Never: Modifies portfolio content
"""

from folio.contexts.rendering.app import PortfolioApp
from folio.contexts.rendering.backend import Frame, Rect, WebTerminal
from folio.contexts.rendering.exceptions import BackendInitError
from folio.contexts.rendering.layout_diagnostics import map_regions, split_heights
from folio.contexts.rendering.server import PortfolioServer

__all__ = [
    # Application root
    "PortfolioApp",
    # Paint backend
    "WebTerminal",
    "Frame",
    "Rect",
    "BackendInitError",
    # Browser host
    "PortfolioServer",
    # Diagnostics
    "map_regions",
    "split_heights",
]
