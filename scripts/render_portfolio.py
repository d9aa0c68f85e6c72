#!/usr/bin/env python3
"""
Portfolio Rendering CLI

Paints the terminal-styled portfolio page, exports it, and hosts it for the browser.

Commands:
    show    - Paint once to this terminal
    export  - Paint once and write HTML, SVG or plain text
    regions - Print where every layout region lands for a viewport
    serve   - Host the page; every browser request is a fresh paint

Examples:\n

    render_portfolio.py show                              # Desktop preset (100x40)

    render_portfolio.py show --width 120 --height 45      # Explicit viewport

    render_portfolio.py export --format svg               # Write outs/results/<date>/portfolio.svg

    render_portfolio.py regions --preset compact          # Region map at 80x24

    render_portfolio.py serve --port 8080                 # http://127.0.0.1:8080/
"""

import os
import sys
from pathlib import Path
from typing import Optional, Tuple

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.rendering import PortfolioApp, WebTerminal, map_regions
from folio.contexts.rendering.config_resolver import (
    DEFAULT_VIEWPORT,
    get_server_settings,
    resolve_viewport,
)
from folio.contexts.rendering.logger import (
    log_export_result,
    log_server_start,
    log_startup_failure,
    setup_rendering_logger,
)
from folio.contexts.rendering.server import build_page
from folio.utils.timestamp import now, today

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

EXPORT_FORMATS = {"html": "html", "svg": "svg", "text": "txt"}


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _viewport(preset: str, width: Optional[int], height: Optional[int]) -> Tuple[int, int]:
    preset_width, preset_height = resolve_viewport(preset)
    return width or preset_width, height or preset_height


def _start_session(width: int, height: int, **console_options) -> Path:
    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, viewport=f"{width}x{height}", **console_options)
    return log_dir


PresetOption = Annotated[
    str,
    typer.Option("--preset", "-P", help="Viewport preset from render_presets.yaml"),
]
WidthOption = Annotated[
    Optional[int],
    typer.Option("--width", "-w", help="Viewport columns (overrides the preset)", min=1),
]
HeightOption = Annotated[
    Optional[int],
    typer.Option("--height", "-h", help="Viewport rows (overrides the preset)", min=1),
]


app = typer.Typer(
    help="Paint, export and serve the terminal-styled portfolio page",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show_command(
    preset: PresetOption = DEFAULT_VIEWPORT,
    width: WidthOption = None,
    height: HeightOption = None,
):
    """
    Paint the portfolio once to this terminal.

    Examples:\n

        $ render_portfolio.py show                          # Desktop preset

        $ render_portfolio.py show -w 80 -h 24              # Explicit size
    """
    try:
        width, height = _viewport(preset, width, height)
        terminal = WebTerminal(width, height)
    except (ValueError, OSError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    # stdout carries the page itself: only warnings reach the console, the rest goes to the log file
    _start_session(width, height, console=sys.stderr, console_level="WARNING")
    terminal.draw(PortfolioApp().render, file=sys.stdout)


@app.command("export")
def export_command(
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: html, svg or text"),
    ] = "html",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file (default: RESULTS_PATH/<date>/portfolio.<ext>)"),
    ] = None,
    preset: PresetOption = DEFAULT_VIEWPORT,
    width: WidthOption = None,
    height: HeightOption = None,
):
    """
    Paint the portfolio once and write it to a file.

    Examples:\n

        $ render_portfolio.py export                        # HTML, desktop preset

        $ render_portfolio.py export -f svg -o page.svg     # SVG to a chosen path
    """
    if fmt not in EXPORT_FORMATS:
        typer.secho(
            f"Error: unknown format '{fmt}'. Choose from: {', '.join(EXPORT_FORMATS)}\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        width, height = _viewport(preset, width, height)
        terminal = WebTerminal(width, height)
    except (ValueError, OSError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_dir = _start_session(width, height)
    app_root = PortfolioApp()
    frame = terminal.draw(app_root.render)

    if fmt == "html":
        content = build_page(frame, app_root.portfolio.owner)
    elif fmt == "svg":
        content = frame.export_svg(title=app_root.portfolio.owner)
    else:
        content = frame.export_text()

    if output is None:
        output = RESULTS_PATH / today() / f"portfolio.{EXPORT_FORMATS[fmt]}"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    log_export_result(output, fmt, width, height)

    typer.echo("")
    typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {display_path(output)}")
    typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")
    typer.echo("")


@app.command("regions")
def regions_command(
    preset: PresetOption = DEFAULT_VIEWPORT,
    width: WidthOption = None,
    height: HeightOption = None,
):
    """
    Print every layout region for a viewport.

    Examples:\n

        $ render_portfolio.py regions                       # Desktop preset

        $ render_portfolio.py regions -w 100 -h 40          # Explicit size
    """
    try:
        width, height = _viewport(preset, width, height)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nRegions for {width}x{height}", fg=typer.colors.BLUE, bold=True)
    for name, rect in map_regions(PortfolioApp(), width, height).items():
        typer.echo(
            f"  {name:<20} x={rect.x:<4} y={rect.y:<4} "
            f"width={rect.width:<4} height={rect.height}"
        )
    typer.echo("")


@app.command("serve")
def serve_command(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Interface to bind (default from render_presets.yaml)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port to bind (default from render_presets.yaml)"),
    ] = None,
    preset: PresetOption = DEFAULT_VIEWPORT,
):
    """
    Host the portfolio for the browser.

    The page reports its size in terminal cells and is re-painted on every
    request. Stop with Ctrl+C.

    Examples:\n

        $ render_portfolio.py serve                         # 127.0.0.1:8000

        $ render_portfolio.py serve --host 0.0.0.0 -p 8080  # Reachable on the network
    """
    settings = get_server_settings()
    host = host or settings["host"]
    port = settings["port"] if port is None else port

    try:
        width, height = resolve_viewport(preset)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _start_session(width, height)
    app_root = PortfolioApp()

    # Startup failures are fatal: report and exit, no retry
    try:
        terminal = WebTerminal(width, height)
        server = terminal.draw_web(
            app_root.render, host=host, port=port, title=app_root.portfolio.owner, settings=settings
        )
    except OSError as e:
        log_startup_failure(e)
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_server_start(server.url, f"{width}x{height}")
    typer.secho(f"\nServing {server.url}", fg=typer.colors.GREEN, bold=True)
    typer.echo("Press Ctrl+C to stop.\n")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        typer.echo("\nStopped.")
    finally:
        server.server_close()


if __name__ == "__main__":
    app()
