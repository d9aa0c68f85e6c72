"""
Portfolio Data Structures

Defines immutable data classes for portfolio content: styled spans and lines,
job entries, project entries and the portfolio that owns them.
These structures are shared read-only with the Rendering context.
"""

from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple, Union

from rich.style import Style
from rich.text import Text

from folio.contexts.content.defaults import DEFAULT_COLORS, EXPERIENCE_SPLIT, FUN_STUFF_SPLIT
from folio.contexts.content.exceptions import LayoutSizingError


@dataclass(frozen=True)
class StyledSpan:
    """
    A fragment of text paired with presentation attributes.

    Spans are values: every styling method returns a new span, so they can be
    chained without touching shared state.

    Example:
        StyledSpan("Led the architecture ").light_green().bold()

    Attributes:
        text: The text fragment
        style: rich Style applied to the fragment (null style = default)
    """

    text: str
    style: Style = field(default_factory=Style.null)

    def _with(self, style: Style) -> "StyledSpan":
        return replace(self, style=self.style + style)

    def bold(self) -> "StyledSpan":
        return self._with(Style(bold=True))

    def underlined(self) -> "StyledSpan":
        return self._with(Style(underline=True))

    def fg(self, color: str) -> "StyledSpan":
        return self._with(Style(color=color))

    def bg(self, color: str) -> "StyledSpan":
        return self._with(Style(bgcolor=color))

    def light_green(self) -> "StyledSpan":
        return self.fg(DEFAULT_COLORS["accent"])

    def light_magenta(self) -> "StyledSpan":
        return self.fg(DEFAULT_COLORS["highlight"])

    def to_text(self) -> Text:
        """Convert to a rich Text for painting."""
        return Text(self.text, style=self.style)


# One visual line: ordered spans, each keeping its own style
StyledLine = Tuple[StyledSpan, ...]


def styled_line(*parts: Union[str, StyledSpan]) -> StyledLine:
    """
    Build a StyledLine from spans and plain strings.

    Plain strings become spans with the default style.
    """
    return tuple(part if isinstance(part, StyledSpan) else StyledSpan(part) for part in parts)


def line_to_text(line: StyledLine) -> Text:
    """Assemble a StyledLine into a single rich Text, preserving span styles."""
    return Text.assemble(*(span.to_text() for span in line))


@dataclass(frozen=True)
class Experience:
    """
    Job entry shown in the Experience section.

    Attributes:
        title: Role and employer (e.g., "Backend Engineer @ BigPay")
        achievements: One StyledLine per achievement, in display order
    """

    title: str
    achievements: Tuple[StyledLine, ...] = ()


@dataclass(frozen=True)
class FunStuff:
    """
    Side project shown in the Fun Stuffs section.

    Attributes:
        title: Project name
        url: Link to the project (rendered as a hyperlink, never fetched)
    """

    title: str
    url: str


def require_slots(section: str, entries: Sequence, weights: Sequence[int]) -> None:
    """
    Check that a content list fills its layout split exactly.

    Raises:
        LayoutSizingError: If len(entries) != len(weights)
    """
    if len(entries) != len(weights):
        raise LayoutSizingError(
            "Content count does not match layout split",
            section=section,
            expected=len(weights),
            actual=len(entries),
        )


@dataclass(frozen=True)
class Portfolio:
    """
    All content shown on the page, constructed once at startup.

    Attributes:
        owner: Page owner's name (title of the outer frame)
        summary: Profile summary paragraph
        jobs: Exactly three job entries, most prominent first
        projects: Exactly two side projects
    """

    owner: str
    summary: str
    jobs: Tuple[Experience, Experience, Experience]
    projects: Tuple[FunStuff, FunStuff]

    def __post_init__(self):
        require_slots("Experience", self.jobs, EXPERIENCE_SPLIT)
        require_slots("Fun Stuffs", self.projects, FUN_STUFF_SPLIT)
