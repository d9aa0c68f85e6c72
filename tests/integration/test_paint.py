"""Integration tests for painting the full page."""

import pytest

from folio.contexts.content import PORTFOLIO
from folio.contexts.rendering import PortfolioApp, WebTerminal, map_regions

VIEWPORTS = [(100, 40), (160, 48), (80, 24), (60, 30)]


@pytest.fixture(scope="module")
def desktop_frame():
    return WebTerminal(100, 40).draw(PortfolioApp().render)


@pytest.mark.integration
def test_paint_fills_viewport(desktop_frame):
    lines = desktop_frame.lines()

    assert len(lines) == 40
    assert all(len(line) <= 100 for line in lines)

    # Header band is blank, the outer frame starts right below it
    assert all(line.strip() == "" for line in lines[:3])
    assert lines[3].startswith("╭")


@pytest.mark.integration
def test_paint_contains_sections(desktop_frame):
    text = desktop_frame.export_text()

    assert "Yew Jung" in text
    assert "Summary" in text
    assert "Backend engineer with 5+ years" in text
    assert "Fun Stuffs" in text
    assert "Multiplayer Poker Game" in text
    assert "Experience" in text
    assert "Backend Engineer @ BigPay" in text
    assert "Senior Software Engineer @ Theta Service Partner" in text
    assert "• " in text


@pytest.mark.integration
def test_owner_is_frame_title(desktop_frame):
    assert "Yew Jung" in desktop_frame.lines()[3]


@pytest.mark.integration
def test_project_links_exported_as_anchors(desktop_frame):
    html = desktop_frame.export_html_code()

    assert 'href="https://www.github.com/yewjung/poker-rust"' in html
    assert 'href="https://www.github.com/yewjung/deck"' in html


@pytest.mark.integration
@pytest.mark.parametrize("width,height", [(100, 40), (80, 24), (33, 17)])
def test_repaint_is_identical(width, height):
    """Two paints at the same size produce the same cells."""
    terminal = WebTerminal(width, height)
    app = PortfolioApp()

    first = terminal.draw(app.render)
    second = terminal.draw(app.render)

    assert first.export_text() == second.export_text()
    assert first.export_html_code() == second.export_html_code()


@pytest.mark.integration
def test_resize_repaints_at_new_size():
    terminal = WebTerminal(100, 40)
    app = PortfolioApp()

    small = terminal.draw(app.render, width=60, height=20)
    large = terminal.draw(app.render)

    assert len(small.lines()) == 20
    assert all(len(line) <= 60 for line in small.lines())
    assert len(large.lines()) == 40


@pytest.mark.integration
@pytest.mark.parametrize("width,height", [(1, 1), (4, 2), (10, 4), (20, 6)])
def test_tiny_viewports_paint_without_error(width, height):
    frame = WebTerminal(width, height).draw(PortfolioApp().render)
    lines = frame.lines()

    assert len(lines) <= height
    assert all(len(line) <= width for line in lines)


@pytest.mark.integration
@pytest.mark.parametrize("width,height", VIEWPORTS)
def test_project_links_painted(width, height):
    """Every project URL is visible on the painted page, not only in the region map."""
    text = WebTerminal(width, height).draw(PortfolioApp().render).export_text()

    for project in PORTFOLIO.projects:
        assert project.url in text


# ---------------------------------------------------------------------------
# Region map against painted cells
# ---------------------------------------------------------------------------


@pytest.mark.integration
@pytest.mark.parametrize("width,height", VIEWPORTS)
def test_region_map_matches_paint(width, height):
    """Each mapped region holds the content painted for it."""
    app = PortfolioApp()
    lines = WebTerminal(width, height).draw(app.render).lines()
    regions = map_regions(app, width, height)

    def painted_at(rect):
        return lines[rect.y][rect.x : rect.right]

    for i, project in enumerate(PORTFOLIO.projects):
        title, link = regions[f"project_{i}.title"], regions[f"project_{i}.link"]
        if not title.is_empty:
            assert painted_at(title).startswith(project.title)
        assert not link.is_empty
        assert painted_at(link).startswith(project.url)

    for i, job in enumerate(PORTFOLIO.jobs):
        assert painted_at(regions[f"job_{i}"]).startswith(job.title)

    # Bands under three rows have no room for the Summary border
    summary = regions["summary"]
    if summary.height >= 3:
        assert painted_at(summary).startswith("┌─ Summary ")
        assert lines[summary.y + 1][summary.x + 1 :].startswith("Backend engineer")
    else:
        assert painted_at(summary).strip() == ""


@pytest.mark.integration
def test_header_band_is_blank_in_paint():
    app = PortfolioApp()
    lines = WebTerminal(100, 40).draw(app.render).lines()
    header = map_regions(app, 100, 40)["header"]

    assert all(lines[row].strip() == "" for row in range(header.y, header.bottom))
    assert lines[header.bottom].startswith("╭")
