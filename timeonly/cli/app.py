"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..adapters.source_time import SourceTime
from ..config import LOG_LEVELS, AppConfig, get_default_config_path
from ..domain.exceptions import TimeOnlyError
from ..domain.time_only import SUPPORTED_FORMATS, TimeOnly
from ..services.time_windows import TimeWindowService

app = typer.Typer(
    name="timeonly",
    help="Parse, format and do arithmetic on times of day",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./timeonly.yaml"),
]


def _load_config(ctx: typer.Context, config_file: Optional[Path], required: bool = True) -> AppConfig:
    """
    Load the YAML config, falling back to defaults when it is optional and absent.

    The config's log_level applies only when --log-level was not given.
    """
    config_path = config_file or get_default_config_path()
    if not required and config_file is None and not config_path.exists():
        return AppConfig()

    config = AppConfig.load_from_yaml(config_path)
    if not (ctx.obj or {}).get("log_level_from_cli"):
        logging.getLogger().setLevel(config.log_level)
    return config


def _parse_or_exit(text: str) -> TimeOnly:
    ok, value = TimeOnly.try_parse(text)
    if not ok:
        console.print(f"[bold red]Fehler:[/bold red] '{escape(text)}' ist keine gültige Uhrzeit (z. B. 09:30 oder 23:59:59.999).")
        raise typer.Exit(1)
    return value


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help=f"Logging level ({', '.join(LOG_LEVELS)})")] = None,
):
    """
    Time-of-day toolkit.
    """
    level = (log_level or "WARNING").upper()
    if level not in LOG_LEVELS:
        console.print(f"[bold red]Fehler:[/bold red] Unbekanntes Log-Level '{escape(log_level)}' (erlaubt: {', '.join(LOG_LEVELS)}).")
        raise typer.Exit(1)

    ctx.obj = {"log_level_from_cli": log_level is not None}
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


@app.command("format")
def format_time(
    time: Annotated[str, typer.Argument(help="Time of day, e.g. 09:30 or 23:59:59.999")],
    fmt: Annotated[str, typer.Option("--format", "-f", help=f"One of {', '.join(SUPPORTED_FORMATS)}")] = "t",
):
    """
    Re-format a time of day.

    Examples:

        timeonly format 9:5:3.1 -f o
    """
    value = _parse_or_exit(time)
    try:
        console.print(value.to_string(fmt))
    except TimeOnlyError as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def parse(
    text: Annotated[str, typer.Argument(help="Text to parse")],
):
    """
    Parse a time of day and show its components.
    """
    try:
        value = TimeOnly.parse(text)
    except TimeOnlyError as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Feld", style="bold yellow")
    table.add_column("Wert")
    table.add_row("ISO", value.to_string("o"))
    table.add_row("Millisekunden", str(value.milliseconds))
    table.add_row("Ticks", str(value.ticks))

    console.print(table)


@app.command()
def add(
    time: Annotated[str, typer.Argument(help="Start time of day")],
    delta_ms: Annotated[int, typer.Argument(help="Milliseconds to add (negative to subtract)")],
    overflow: Annotated[bool, typer.Option("--overflow", help="Also report how many days were crossed")] = False,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "T",
):
    """
    Add milliseconds to a time of day, wrapping around midnight.

    Examples:

        timeonly add 23:30 3600000 --overflow
        timeonly add 00:00 -- -1
    """
    value = _parse_or_exit(time)
    try:
        if overflow:
            result, days = value.add_with_overflow(delta_ms)
            console.print(f"{result.to_string(fmt)} ({days:+d} Tag(e))")
        else:
            console.print(value.add(delta_ms).to_string(fmt))
    except TimeOnlyError as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def between(
    time: Annotated[str, typer.Argument(help="Time of day to test")],
    start: Annotated[str, typer.Argument(help="Window start (inclusive)")],
    end: Annotated[str, typer.Argument(help="Window end (exclusive), may be before start for overnight windows")],
):
    """
    Check whether a time lies in [start, end). Exits with 1 when it does not.
    """
    value = _parse_or_exit(time)
    window_start = _parse_or_exit(start)
    window_end = _parse_or_exit(end)

    if value.is_between(window_start, window_end):
        console.print(f"[green]✓ {value} liegt in {window_start} - {window_end}[/green]")
    else:
        console.print(f"[yellow]✗ {value} liegt nicht in {window_start} - {window_end}[/yellow]")
        raise typer.Exit(1)


@app.command()
def windows(ctx: typer.Context, config_file: ConfigOption = None):
    """
    List all configured time windows.
    """
    try:
        config = _load_config(ctx, config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not config.windows:
        console.print("[yellow]Keine Zeitfenster in der Config-Datei definiert.[/yellow]")
        return

    table = Table(
        title="Konfigurierte Zeitfenster",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name", style="bold yellow")
    table.add_column("Von")
    table.add_column("Bis")
    table.add_column("Dauer (Min.)", justify="right", style="dim")

    fmt = config.defaults.format
    for window in config.build_windows():
        end = window.end.to_string(fmt) + (" (+1)" if window.is_overnight else "")
        table.add_row(window.name, window.start.to_string(fmt), end, str(window.duration_minutes()))

    console.print()
    console.print(table)
    console.print()


@app.command()
def now(
    ctx: typer.Context,
    config_file: ConfigOption = None,
    utc: Annotated[bool, typer.Option("--utc", help="Read the clock in UTC instead of the configured timezone")] = False,
):
    """
    Show the current time of day and which configured windows are open.
    """
    try:
        config = _load_config(ctx, config_file, required=False)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    timezone = "UTC" if utc else config.defaults.timezone
    current = TimeOnly.from_source_time(SourceTime.now(timezone))
    console.print(f"[bold cyan]{current.to_string(config.defaults.format)}[/bold cyan] ({timezone})")

    service = TimeWindowService(config.build_windows())
    for window in service.active_windows(current):
        console.print(f"  [green]● {window.name}[/green] {window.start} - {window.end}")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timeonly[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
