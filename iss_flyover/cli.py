"""Command-line interface.

Wiring layer between the terminal and ``FlyoverPipeline``: configures
logging, runs the pipeline, and renders the result with ``rich``.
"""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from iss_flyover import __version__
from iss_flyover.core.config import ConfigValidationError, FlyoverConfig
from iss_flyover.core.exceptions import FlyoverError
from iss_flyover.models.flyover import PassWindow
from iss_flyover.orchestrators.flyover_pipeline import FlyoverPipeline

app = typer.Typer(
    no_args_is_help=True,
    help="Predict upcoming ISS passes over your current location.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger("iss_flyover.cli")

EXIT_PIPELINE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def format_pass(window: PassWindow) -> str:
    """Render a pass as ``Next pass at <UTC datetime> for <n> seconds!``."""
    when = window.rise_datetime.strftime("%a %b %d %Y %H:%M:%S UTC")
    return f"Next pass at {when} for {window.duration} seconds!"


def configure_logging(level: int | str) -> None:
    """Send library logs to stderr through ``RichHandler``."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True)],
        force=True,
    )


def _load_config() -> FlyoverConfig:
    try:
        return FlyoverConfig.from_env()
    except ConfigValidationError as exc:
        _err_console.print(f"[red]Configuration error:[/red] {escape(exc.message)}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc


def _build_passes_table(passes: list[PassWindow]) -> Table:
    table = Table(title="Upcoming ISS passes")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Rise time (UTC)", style="cyan", no_wrap=True)
    table.add_column("Duration (s)", style="green", justify="right")
    table.add_column("Summary", style="white")
    for index, window in enumerate(passes, start=1):
        table.add_row(
            str(index),
            window.rise_datetime.isoformat(),
            str(window.duration),
            format_pass(window),
        )
    return table


@app.command()
def passes(
    as_json: bool = typer.Option(False, "--json", help="Print passes as JSON."),
    limit: int | None = typer.Option(
        None,
        "--limit",
        min=1,
        help="Show at most this many passes (display only).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each stage."),
) -> None:
    """Look up your location and print the upcoming ISS passes."""
    config = _load_config()
    configure_logging(logging.DEBUG if verbose else config.log_level_value)

    try:
        windows = FlyoverPipeline(config).run()
    except FlyoverError as exc:
        if as_json:
            _console.print_json(json.dumps({"error": exc.to_error_dict()}))
        else:
            _err_console.print(f"[red]It didn't work![/red] ({exc.stage}) {escape(exc.message)}")
        raise typer.Exit(code=EXIT_PIPELINE_ERROR) from exc

    shown = windows[:limit] if limit is not None else windows
    if as_json:
        _console.print_json(json.dumps({"passes": [w.to_dict() for w in shown]}))
        return

    if not shown:
        _console.print("[yellow]No upcoming passes returned.[/yellow]")
        return
    _console.print(_build_passes_table(shown))


@app.command(name="config")
def show_config() -> None:
    """Print the effective configuration."""
    config = _load_config()

    table = Table(title=f"iss-flyover {__version__}")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("IP service", config.ip_service_url)
    table.add_row("Geolocation service", config.geo_service_url)
    table.add_row("Pass service", config.pass_service_url)
    table.add_row("User-Agent", config.user_agent)
    table.add_row("Log level", config.log_level)
    _console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
