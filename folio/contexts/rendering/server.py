"""
Browser host for the portfolio page.

Serves one HTML page over HTTP. Every GET is a paint request: the page is
re-rendered from scratch at the size the browser asks for (?cols=&rows=, in
terminal cells) and wrapped in the page template. Requests are handled one at
a time on the serving thread.
"""

from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any, Dict, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from folio.contexts.content.defaults import DEFAULT_COLORS
from folio.contexts.rendering.config_resolver import get_page_settings, get_server_settings
from folio.contexts.rendering.logger import _log_debug, log_request
from folio.contexts.rendering.registries import PageTemplateRegistry

PAGE_PATHS = {"/", "/index.html"}


def _parse_int(values) -> Optional[int]:
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


def parse_viewport_query(
    query: str,
    default: Tuple[int, int],
    bounds: Dict[str, int],
) -> Tuple[int, int, Optional[int], Optional[int]]:
    """
    Work out the paint size for a request.

    Args:
        query: Raw query string (e.g., "cols=120&rows=45")
        default: (width, height) used when a dimension is missing or not an integer
        bounds: min_cols/max_cols/min_rows/max_rows to clamp to

    Returns:
        (cols, rows, requested_cols, requested_rows) where the requested values
        are what the browser asked for (None if absent or invalid)
    """
    params = parse_qs(query)
    requested_cols = _parse_int(params.get("cols"))
    requested_rows = _parse_int(params.get("rows"))

    cols = requested_cols if requested_cols is not None else default[0]
    rows = requested_rows if requested_rows is not None else default[1]
    cols = min(max(cols, bounds["min_cols"]), bounds["max_cols"])
    rows = min(max(rows, bounds["min_rows"]), bounds["max_rows"])

    return cols, rows, requested_cols, requested_rows


def build_page(
    frame,
    title: str,
    page_settings: Optional[Dict[str, Any]] = None,
    registry: Optional[PageTemplateRegistry] = None,
    live: bool = False,
    requested_cols: Optional[int] = None,
    requested_rows: Optional[int] = None,
) -> str:
    """
    Wrap a painted frame in the HTML page template.

    Args:
        frame: Painted Frame
        title: Page title
        page_settings: font_family / font_size (defaults to render_presets.yaml "page")
        registry: Template registry (a new one by default)
        live: Include the resize script that requests a repaint at the browser's size
            (served pages only)
        requested_cols: Columns the browser asked for, echoed to the resize script
        requested_rows: Rows the browser asked for, echoed to the resize script
    """
    if page_settings is None:
        page_settings = get_page_settings()
    registry = registry or PageTemplateRegistry()

    return registry.render_page(
        title=title,
        code=frame.export_html_code(),
        foreground=DEFAULT_COLORS["foreground"],
        background=DEFAULT_COLORS["background"],
        font_family=page_settings.get("font_family", "monospace"),
        font_size=page_settings.get("font_size", "14px"),
        live=live,
        requested_cols=requested_cols,
        requested_rows=requested_rows,
    )


class PaintRequestHandler(BaseHTTPRequestHandler):
    """Answers GET / with a freshly painted page."""

    server: "PortfolioServer"

    def do_GET(self):
        url = urlparse(self.path)
        if url.path not in PAGE_PATHS:
            self.send_error(404, "Not found")
            return

        body = self.server.paint_page(url.query).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        _log_debug(f"{self.address_string()} {format % args}")


class PortfolioServer(HTTPServer):
    """
    HTTP server that paints the portfolio on every page request.

    Args:
        terminal: WebTerminal providing the default viewport and draw()
        render: Paint callback (e.g., PortfolioApp().render)
        host: Interface to bind
        port: Port to bind (0 picks a free port)
        title: Page title
        settings: Server settings (defaults to render_presets.yaml "server")
        page_settings: Template settings (defaults to render_presets.yaml "page")

    Raises:
        OSError: If the address cannot be bound
    """

    def __init__(
        self,
        terminal,
        render,
        host: str,
        port: int,
        title: str = "Portfolio",
        settings: Optional[Dict[str, Any]] = None,
        page_settings: Optional[Dict[str, Any]] = None,
        registry: Optional[PageTemplateRegistry] = None,
    ):
        self.terminal = terminal
        self.render = render
        self.title = title
        self.settings = settings if settings is not None else get_server_settings()
        self.page_settings = page_settings if page_settings is not None else get_page_settings()
        self.registry = registry or PageTemplateRegistry()
        super().__init__((host, port), PaintRequestHandler)

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}/"

    def paint_page(self, query: str = "") -> str:
        """Paint a frame for the request's viewport and wrap it in the page template."""
        cols, rows, requested_cols, requested_rows = parse_viewport_query(
            query, (self.terminal.width, self.terminal.height), self.settings
        )
        log_request(f"/?{query}" if query else "/", cols, rows)

        frame = self.terminal.draw(self.render, width=cols, height=rows)
        return build_page(
            frame,
            self.title,
            page_settings=self.page_settings,
            registry=self.registry,
            live=True,
            requested_cols=requested_cols,
            requested_rows=requested_rows,
        )
