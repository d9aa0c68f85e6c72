"""
Portfolio Widgets

rich renderables for each part of the page. Composite widgets list their
child regions in ``region_names`` and expose build_layout(height), which splits
that many rows of interior by weight (see split_sizes); leaf widgets paint
directly. Widgets hold only immutable content, so every paint
rebuilds the same output for the same region size.

Widgets with ``bordered = True`` draw a one-cell frame around their interior.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from folio.contexts.content.defaults import (
    DEFAULT_COLORS,
    EXPERIENCE_SPLIT,
    FUN_STUFF_SPLIT,
    SECTION_SPLIT,
)
from folio.contexts.content.portfolio_data_structures import (
    Experience,
    FunStuff,
    Portfolio,
    StyledLine,
    StyledSpan,
    line_to_text,
    require_slots,
)

TEXT_STYLE = Style(color=DEFAULT_COLORS["foreground"], bgcolor=DEFAULT_COLORS["background"])
FRAME_STYLE = Style(bgcolor=DEFAULT_COLORS["background"])
BULLET = "• "

# Below this a panel has no room for its border and title
MIN_PANEL_WIDTH = 5
MIN_PANEL_HEIGHT = 3


def region_height(options: ConsoleOptions) -> int:
    """Rows available to a renderable: the exact region height when a layout set one."""
    return options.height if options.height is not None else options.max_height


def _fits_panel(options: ConsoleOptions) -> bool:
    return options.max_width >= MIN_PANEL_WIDTH and region_height(options) >= MIN_PANEL_HEIGHT


def split_sizes(total: int, weights: Sequence[int]) -> List[int]:
    """
    Split total rows by weight, largest remainder first.

    Every part is its exact share rounded down or up, and the parts always sum
    to total. Equal remainders go to the later part.

    Example:
        >>> split_sizes(37, (10, 20, 70))
        [4, 7, 26]
    """
    if total <= 0:
        return [0] * len(weights)

    weight_sum = sum(weights)
    sizes = [total * weight // weight_sum for weight in weights]
    remainders = [total * weight % weight_sum for weight in weights]
    leftover = total - sum(sizes)

    by_remainder = sorted(range(len(weights)), key=lambda i: (remainders[i], i), reverse=True)
    for index in by_remainder[:leftover]:
        sizes[index] += 1
    return sizes


def _split_column(name: str, children: Iterable[Tuple[str, object, int]], height: int) -> Layout:
    children = list(children)
    sizes = split_sizes(height, [weight for _, _, weight in children])

    layout = Layout(name=name)
    layout.split_column(
        *(
            # Zero-row parts stay in the tree, hidden, so they can still be looked up by name
            Layout(renderable, name=child_name, size=size, visible=size > 0)
            for (child_name, renderable, _), size in zip(children, sizes)
        )
    )
    return layout


def with_bullet(line: StyledLine) -> StyledLine:
    """Prepend the default-style bullet span, leaving the line's own spans untouched."""
    return (StyledSpan(BULLET),) + tuple(line)


class Blank:
    """Region painted empty."""

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield from ()


class Hyperlink:
    """
    Clickable link to a URL.

    Painted as underlined text carrying a link style: terminals show an OSC 8
    hyperlink, HTML export wraps it in an anchor. Navigation is the host's job.
    """

    def __init__(self, url: str):
        self.url = url
        self.style = Style(underline=True, link=url)

    def to_text(self) -> Text:
        return Text(self.url, style=self.style)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.to_text()


class Summary:
    """Bordered box with the profile summary, word-wrapped, white on black."""

    bordered = True

    def __init__(self, text: str):
        self.text = text

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not _fits_panel(options):
            return
        yield Panel(
            Text(self.text, style=TEXT_STYLE),
            title="Summary",
            title_align="left",
            box=box.SQUARE,
            style=TEXT_STYLE,
            padding=0,
            height=region_height(options),
        )


class ExperienceEntry:
    """One job: bold underlined title, then one bulleted line per achievement."""

    def __init__(self, job: Experience):
        self.job = job

    def lines(self) -> Tuple[StyledLine, ...]:
        title = (StyledSpan(self.job.title).bold().underlined(),)
        return (title,) + tuple(with_bullet(line) for line in self.job.achievements)

    def to_text(self) -> Text:
        return Text("\n", style=TEXT_STYLE).join(line_to_text(line) for line in self.lines())

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self.to_text()


class Experiences:
    """
    Experience panel, split top to bottom into one region per job.

    The number of jobs must equal the number of split weights.

    Raises:
        LayoutSizingError: On construction, if the counts differ
    """

    bordered = True

    def __init__(self, jobs: Sequence[Experience], split: Sequence[int] = EXPERIENCE_SPLIT):
        require_slots("Experience", jobs, split)
        self.entries = tuple(ExperienceEntry(job) for job in jobs)
        self.split = tuple(split)
        self.region_names = tuple(f"job_{i}" for i in range(len(self.entries)))

    def build_layout(self, height: int) -> Layout:
        return _split_column(
            "experience_list",
            zip(self.region_names, self.entries, self.split),
            height,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not _fits_panel(options):
            return
        height = region_height(options)
        yield Panel(
            self.build_layout(height - 2),
            title="Experience",
            title_align="left",
            box=box.ROUNDED,
            padding=0,
            height=height,
        )


class FunStuffEntry:
    """One project: title in the top half, hyperlink in the bottom half."""

    def __init__(self, project: FunStuff, name: str = "project"):
        self.project = project
        self.name = name
        self.link = Hyperlink(project.url)
        self.region_names = (f"{name}.title", f"{name}.link")

    def title_text(self) -> Text:
        return StyledSpan(self.project.title).light_green().bold().to_text()

    def build_layout(self, height: int) -> Layout:
        return _split_column(
            self.name,
            zip(self.region_names, (self.title_text(), self.link), (1, 1)),
            height,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        # Render in place: a yielded Layout would be re-measured against the whole console
        yield from self.build_layout(region_height(options)).__rich_console__(console, options)


class FunStuffs:
    """
    "Fun Stuffs" panel, split into equal regions, one per project.

    Raises:
        LayoutSizingError: On construction, if the project count differs from the split
    """

    bordered = True

    def __init__(self, projects: Sequence[FunStuff], split: Sequence[int] = FUN_STUFF_SPLIT):
        require_slots("Fun Stuffs", projects, split)
        self.entries = tuple(
            FunStuffEntry(project, name=f"project_{i}") for i, project in enumerate(projects)
        )
        self.split = tuple(split)
        self.region_names = tuple(entry.name for entry in self.entries)

    def title_text(self) -> Text:
        return StyledSpan("Fun Stuffs").light_magenta().to_text()

    def build_layout(self, height: int) -> Layout:
        return _split_column(
            "fun_stuff_list",
            zip(self.region_names, self.entries, self.split),
            height,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not _fits_panel(options):
            return
        height = region_height(options)
        yield Panel(
            self.build_layout(height - 2),
            title=self.title_text(),
            title_align="left",
            box=box.ROUNDED,
            padding=0,
            height=height,
        )


class PortfolioFrame:
    """
    Outer frame titled with the owner's name.

    Its interior is split 10/20/70 into Summary, Fun Stuffs and Experience.
    """

    bordered = True

    def __init__(self, portfolio: Portfolio, split: Optional[dict] = None):
        self.owner = portfolio.owner
        self.split = dict(split or SECTION_SPLIT)
        self.sections = {
            "summary": Summary(portfolio.summary),
            "fun_stuffs": FunStuffs(portfolio.projects),
            "experience": Experiences(portfolio.jobs),
        }
        self.region_names = tuple(self.sections)

    def build_layout(self, height: int) -> Layout:
        return _split_column(
            "body",
            ((name, widget, self.split[name]) for name, widget in self.sections.items()),
            height,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not _fits_panel(options):
            return
        height = region_height(options)
        yield Panel(
            self.build_layout(height - 2),
            title=self.owner,
            title_align="center",
            box=box.ROUNDED,
            style=FRAME_STYLE,
            padding=0,
            height=height,
        )
