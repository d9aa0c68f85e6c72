"""
Integration tests for the browser host - real HTTP requests against a local server.
"""

import threading
import urllib.error
import urllib.request

import pytest

from folio.contexts.rendering import PortfolioApp, PortfolioServer, WebTerminal

SETTINGS = {
    "host": "127.0.0.1",
    "port": 0,
    "min_cols": 20,
    "max_cols": 300,
    "min_rows": 10,
    "max_rows": 120,
}
PAGE_SETTINGS = {"font_family": "monospace", "font_size": "14px"}


@pytest.fixture
def server():
    """Portfolio server on a free local port, serving from a background thread."""
    terminal = WebTerminal(100, 40)
    server = terminal.draw_web(
        PortfolioApp().render,
        host="127.0.0.1",
        port=0,
        title="Yew Jung",
        settings=SETTINGS,
        page_settings=PAGE_SETTINGS,
    )
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield server

    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


def _get(url):
    with urllib.request.urlopen(url, timeout=10) as response:
        return response.status, response.headers, response.read().decode("utf-8")


@pytest.mark.integration
def test_page_request_paints_portfolio(server):
    status, headers, body = _get(server.url + "?cols=100&rows=40")

    assert status == 200
    assert headers["Content-Type"].startswith("text/html")
    assert headers["Cache-Control"] == "no-store"
    assert "<title>Yew Jung</title>" in body
    assert "Fun Stuffs" in body
    assert 'href="https://www.github.com/yewjung/deck"' in body
    assert "<script>" in body


@pytest.mark.integration
def test_index_html_alias(server):
    status, _, body = _get(server.url + "index.html")

    assert status == 200
    assert "Yew Jung" in body


@pytest.mark.integration
def test_unknown_path_is_not_found(server):
    with pytest.raises(urllib.error.HTTPError) as exc_info:
        _get(server.url + "favicon.ico")

    assert exc_info.value.code == 404


@pytest.mark.integration
def test_each_request_is_a_fresh_paint(server):
    """The same request twice yields the same page; a different size yields a different one."""
    _, _, first = _get(server.url + "?cols=80&rows=24")
    _, _, second = _get(server.url + "?cols=80&rows=24")
    _, _, resized = _get(server.url + "?cols=120&rows=30")

    assert first == second
    assert resized != first


@pytest.mark.integration
def test_paint_page_clamps_requested_size():
    """Requests below the configured bounds are painted at the minimum size."""
    terminal = WebTerminal(100, 40)
    server = PortfolioServer(
        terminal,
        PortfolioApp().render,
        host="127.0.0.1",
        port=0,
        settings=SETTINGS,
        page_settings=PAGE_SETTINGS,
    )
    try:
        painted = []
        server.render = lambda frame: (painted.append(frame.area), PortfolioApp().render(frame))
        html = server.paint_page("cols=5&rows=5")
    finally:
        server.server_close()

    assert painted[0].width == 20
    assert painted[0].height == 10
    # The browser's own request is echoed so it does not ask again in a loop
    assert "cols: 5" in html


@pytest.mark.integration
def test_bind_failure_raises_os_error():
    terminal = WebTerminal(100, 40)
    first = terminal.draw_web(lambda frame: None, host="127.0.0.1", port=0, settings=SETTINGS)
    try:
        port = first.server_address[1]
        with pytest.raises(OSError):
            terminal.draw_web(lambda frame: None, host="127.0.0.1", port=port, settings=SETTINGS)
    finally:
        first.server_close()
