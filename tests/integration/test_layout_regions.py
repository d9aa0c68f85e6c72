"""
Integration tests for layout resolution across viewport sizes.

Regions are read from rich's own layout pass, so these tests cover the
real split arithmetic rather than a re-implementation of it.
"""

import pytest

from folio.contexts.content import PORTFOLIO
from folio.contexts.rendering import PortfolioApp, Rect, map_regions, split_heights
from folio.contexts.rendering.layout_diagnostics import find_out_of_bounds
from folio.contexts.rendering.widgets import Experiences, FunStuffEntry, FunStuffs, PortfolioFrame

VIEWPORTS = [(100, 40), (80, 24), (160, 48), (40, 12), (20, 5), (10, 2), (3, 1), (1, 1)]


@pytest.fixture(scope="module")
def app():
    return PortfolioApp()


@pytest.mark.integration
@pytest.mark.parametrize("width,height", VIEWPORTS)
def test_every_region_inside_viewport(app, width, height):
    """No region ever extends outside the viewport, whatever its size."""
    viewport = Rect(0, 0, width, height)
    regions = map_regions(app, width, height)

    assert find_out_of_bounds(regions, viewport) == []


@pytest.mark.integration
@pytest.mark.parametrize("width,height", VIEWPORTS)
def test_children_inside_parents(app, width, height):
    regions = map_regions(app, width, height)

    parents = {
        "summary": "content",
        "fun_stuffs": "content",
        "experience": "content",
        "job_0": "experience",
        "job_1": "experience",
        "job_2": "experience",
        "project_0": "fun_stuffs",
        "project_1": "fun_stuffs",
        "project_0.title": "project_0",
        "project_0.link": "project_0",
    }
    for child, parent in parents.items():
        if child in regions:
            assert regions[parent].contains(regions[child]), child


@pytest.mark.integration
def test_desktop_region_map(app):
    """At 100x40 every named region is present and lands where expected."""
    regions = map_regions(app, 100, 40)

    assert regions["header"] == Rect(0, 0, 100, 3)
    assert regions["content"] == Rect(0, 3, 100, 37)

    # Outer frame interior is 98x35, split top to bottom
    sections = [regions[name] for name in ("summary", "fun_stuffs", "experience")]
    assert [rect.y for rect in sections] == [4, 7, 14]
    assert sum(rect.height for rect in sections) == 35
    assert all(rect.x == 1 and rect.width == 98 for rect in sections)

    jobs = [regions[f"job_{i}"] for i in range(3)]
    assert jobs[0].y == regions["experience"].y + 1
    assert sum(rect.height for rect in jobs) == regions["experience"].height - 2

    for i in range(2):
        project = regions[f"project_{i}"]
        title, link = regions[f"project_{i}.title"], regions[f"project_{i}.link"]
        assert title.y == project.y
        assert link.y == title.bottom
        assert title.height + link.height == project.height


@pytest.mark.integration
def test_header_reserves_three_rows(app):
    for width, height in [(100, 40), (80, 24), (30, 4)]:
        assert map_regions(app, width, height)["header"].height == 3


@pytest.mark.integration
def test_tiny_viewport_clips_content(app):
    """With fewer rows than the header needs, content is empty but still inside the viewport."""
    regions = map_regions(app, 10, 2)

    assert regions["header"] == Rect(0, 0, 10, 2)
    assert regions["content"].is_empty
    assert "summary" not in regions


@pytest.mark.integration
def test_section_split_at_37_rows():
    """10/20/70 of 37 rows rounds to 4/7/26."""
    assert split_heights(PortfolioFrame(PORTFOLIO), 98, 37) == [4, 7, 26]


@pytest.mark.integration
def test_experience_split_at_26_rows():
    """50/25/25 of 26 rows rounds to 13/6/7."""
    assert split_heights(Experiences(PORTFOLIO.jobs), 96, 26) == [13, 6, 7]


@pytest.mark.integration
@pytest.mark.parametrize("height", range(1, 101))
def test_experience_split_follows_weights(height):
    """Job regions always sum to the height, each within one row of its exact share."""
    heights = split_heights(Experiences(PORTFOLIO.jobs), 80, height)

    assert sum(heights) == height
    for actual, weight in zip(heights, (50, 25, 25)):
        assert abs(actual - height * weight / 100) < 1


@pytest.mark.integration
@pytest.mark.parametrize("height", range(1, 101))
def test_section_split_follows_weights(height):
    heights = split_heights(PortfolioFrame(PORTFOLIO), 80, height)

    assert sum(heights) == height
    for actual, weight in zip(heights, (10, 20, 70)):
        assert abs(actual - height * weight / 100) < 1


@pytest.mark.integration
@pytest.mark.parametrize("height", range(1, 101))
def test_fun_stuff_halves_are_balanced(height):
    """Equal splits never differ by more than one row."""
    projects = split_heights(FunStuffs(PORTFOLIO.projects), 80, height)
    halves = split_heights(FunStuffEntry(PORTFOLIO.projects[0]), 80, height)

    for first, second in (projects, halves):
        assert first + second == height
        assert abs(first - second) <= 1
