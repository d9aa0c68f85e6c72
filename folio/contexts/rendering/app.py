"""
Application root.

PortfolioApp owns the static content and, on every paint, composes the whole
page for the current viewport: a blank header band over the outer frame.
"""

from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout

from folio.contexts.content.defaults import HEADER_HEIGHT
from folio.contexts.content.portfolio_content import PORTFOLIO
from folio.contexts.content.portfolio_data_structures import Portfolio
from folio.contexts.rendering.widgets import Blank, PortfolioFrame, region_height


class PortfolioApp:
    """
    Root of the widget tree.

    Widgets are built once from the portfolio (so sizing errors surface at
    construction); the layout is rebuilt on every paint.

    Example:
        terminal = WebTerminal(100, 40)
        frame = terminal.draw(PortfolioApp().render)
    """

    def __init__(self, portfolio: Portfolio = PORTFOLIO):
        self.portfolio = portfolio
        self.body = PortfolioFrame(portfolio)
        self.region_names = ("header", "content")

    def build_layout(self, height: int) -> Layout:
        header = min(HEADER_HEIGHT, height)
        content = max(0, height - header)

        layout = Layout(name="root")
        layout.split_column(
            # Reserved band, intentionally left empty
            Layout(Blank(), name="header", size=header, visible=header > 0),
            Layout(self.body, name="content", size=content, visible=content > 0),
        )
        return layout

    def render(self, frame) -> None:
        """Paint callback: draw the full page into the frame."""
        frame.render_widget(self)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield from self.build_layout(region_height(options)).__rich_console__(console, options)
