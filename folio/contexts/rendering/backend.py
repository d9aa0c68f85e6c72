"""
Paint backend.

WebTerminal is the host surface: each draw() creates a fresh recording rich
Console of the viewport size, hands a Frame to the paint callback, and returns
the painted Frame for export (text, HTML, SVG). draw_web() registers the same
callback with the browser host so every page request is a new paint.
"""

import io
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from rich.console import Console, RenderableType

from folio.contexts.rendering.exceptions import BackendInitError
from folio.contexts.rendering.logger import log_paint
from folio.contexts.rendering.server import PortfolioServer


@dataclass(frozen=True)
class Rect:
    """
    Rectangular region of the viewport, in terminal cells.

    Attributes:
        x: Left column
        y: Top row
        width: Number of columns
        height: Number of rows
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, margin: int = 1) -> "Rect":
        """Region left inside a border of the given thickness."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def intersection(self, other: "Rect") -> "Rect":
        # An empty result still sits inside other
        x = min(max(self.x, other.x), other.right)
        y = min(max(self.y, other.y), other.bottom)
        right, bottom = min(self.right, other.right), min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def contains(self, other: "Rect") -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


class Frame:
    """
    One paint: a recording console sized to the viewport.

    Attributes:
        area: The whole viewport as a Rect
        console: rich Console the frame paints into
    """

    def __init__(self, width: int, height: int, file: Optional[TextIO] = None):
        self.area = Rect(0, 0, width, height)
        self.console = Console(
            width=width,
            height=height,
            file=file if file is not None else io.StringIO(),
            record=True,
            color_system="truecolor" if file is None else "auto",
            force_terminal=True if file is None else None,
            legacy_windows=False,
            highlight=False,
        )

    def render_widget(self, widget: RenderableType) -> None:
        """Paint a renderable over the whole frame area."""
        self.console.print(widget, width=self.area.width, height=self.area.height, crop=True)

    def export_text(self, styles: bool = False) -> str:
        return self.console.export_text(clear=False, styles=styles)

    def lines(self):
        return self.export_text().splitlines()

    def export_html_code(self) -> str:
        """Painted cells as inline-styled HTML spans, without a surrounding document."""
        return self.console.export_html(clear=False, inline_styles=True, code_format="{code}")

    def export_svg(self, title: str = "folio") -> str:
        return self.console.export_svg(clear=False, title=title)


class WebTerminal:
    """
    Browser-hosted terminal backend.

    Args:
        width: Default viewport width in columns
        height: Default viewport height in rows

    Raises:
        BackendInitError: If the viewport is not positive in both dimensions
    """

    def __init__(self, width: int, height: int):
        _check_viewport(width, height)
        self.width = width
        self.height = height

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def draw(
        self,
        render: Callable[[Frame], None],
        width: Optional[int] = None,
        height: Optional[int] = None,
        file: Optional[TextIO] = None,
    ) -> Frame:
        """
        Perform one full paint and return the painted frame.

        Args:
            render: Paint callback; receives the fresh Frame
            width: Viewport width for this paint (defaults to the terminal's)
            height: Viewport height for this paint (defaults to the terminal's)
            file: Stream to paint to (e.g., sys.stdout); defaults to an in-memory buffer
        """
        width = self.width if width is None else width
        height = self.height if height is None else height
        _check_viewport(width, height)

        start_time = time.perf_counter()
        frame = Frame(width, height, file=file)
        render(frame)
        log_paint(width, height, time.perf_counter() - start_time)
        return frame

    def draw_web(self, render: Callable[[Frame], None], host: str, port: int, **server_options):
        """
        Register the paint callback with a browser host bound to host:port.

        The returned server is bound but not yet serving; call serve_forever().

        Raises:
            OSError: If the address cannot be bound
        """
        return PortfolioServer(self, render, host=host, port=port, **server_options)


def _check_viewport(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise BackendInitError(f"Viewport must be positive, got {width}x{height}")
