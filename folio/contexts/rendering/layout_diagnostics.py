"""
Layout diagnostics for the painted page.

Reports where every named region of the widget tree lands for a viewport,
using the very layouts the widgets paint with, so split proportions and
bounds can be checked without reading painted cells.

Region names:
    header, content                         root split
    summary, fun_stuffs, experience         outer frame interior
    job_0 .. job_2                          experience interior
    project_0, project_1                    fun stuffs interior
    project_N.title, project_N.link         halves of each project

A child's region is clipped to its parent's area: when the viewport is too
small for the fixed header band, the content region is reported empty rather
than hanging off the screen.
"""

import io
from typing import Dict, List

from rich.console import Console

from folio.contexts.rendering.backend import Rect
from folio.contexts.rendering.widgets import MIN_PANEL_HEIGHT, MIN_PANEL_WIDTH


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    OUT_OF_BOUNDS = "'{region}' {rect} extends outside its parent {parent}"


def _console(width: int, height: int) -> Console:
    return Console(width=width, height=height, file=io.StringIO(), legacy_windows=False)


def split_regions(widget, area: Rect, console: Console = None) -> Dict[str, Rect]:
    """
    Resolve a composite widget's split for one area.

    Args:
        widget: Widget exposing region_names and build_layout(height)
        area: Absolute region handed to the split
        console: Console used for measuring (a throwaway one by default)

    Returns:
        Child name -> absolute Rect, clipped to area, in top-to-bottom order.
        Zero-row children are reported as empty rects where they would start.
    """
    if area.is_empty:
        return {}

    console = console or _console(area.width, area.height)
    layout = widget.build_layout(area.height)
    render_map = layout.render(console, console.options.update_dimensions(area.width, area.height))

    regions = {}
    top = area.y
    for name in widget.region_names:
        child = layout[name]
        if child in render_map:
            region = render_map[child].region
            rect = Rect(area.x + region.x, area.y + region.y, region.width, region.height)
        else:
            rect = Rect(area.x, top, area.width, 0)
        regions[name] = rect.intersection(area)
        top = regions[name].bottom
    return regions


def split_heights(widget, width: int, height: int) -> List[int]:
    """Heights of a composite widget's child regions for a width x height area."""
    return [rect.height for rect in split_regions(widget, Rect(0, 0, width, height)).values()]


def map_regions(app, width: int, height: int) -> Dict[str, Rect]:
    """
    Map every named region of the widget tree for a viewport.

    Args:
        app: Root widget (PortfolioApp)
        width: Viewport columns
        height: Viewport rows

    Returns:
        Region name -> absolute Rect, parents before children
    """
    console = _console(width, height)
    regions: Dict[str, Rect] = {}
    _walk(app, Rect(0, 0, width, height), console, regions)
    return regions


def _walk(widget, area: Rect, console: Console, regions: Dict[str, Rect]) -> None:
    layout = widget.build_layout(area.height)
    for name, rect in split_regions(widget, area, console).items():
        regions[name] = rect
        child = layout[name].renderable
        if not hasattr(child, "build_layout") or rect.is_empty:
            continue
        if getattr(child, "bordered", False):
            # Panels too small for a border paint nothing, so they have no interior
            if rect.width < MIN_PANEL_WIDTH or rect.height < MIN_PANEL_HEIGHT:
                continue
            rect = rect.inner()
        _walk(child, rect, console, regions)


def find_out_of_bounds(regions: Dict[str, Rect], viewport: Rect) -> List[str]:
    """Describe every region that is not contained in the viewport."""
    return [
        IssueTemplates.OUT_OF_BOUNDS.format(region=name, rect=rect, parent=viewport)
        for name, rect in regions.items()
        if not viewport.contains(rect)
    ]
