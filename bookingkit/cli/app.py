"""
Developer CLI using Typer.
"""

from pathlib import Path
from typing import List, NoReturn, Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig
from ..domain.datetime_normalizer import format_timestamp, parse_timestamp
from ..domain.exceptions import BookingKitError, InvalidTimezoneError, ParseError
from ..domain.slugs import generate_slug
from ..domain.timezones import (
    COMMON_TIMEZONES,
    combine_local_to_utc,
    format_local_datetime,
    utc_offset_label,
)
from ..logging_config import configure_logging

app = typer.Typer(
    name="bookingkit",
    help="UTC timestamp normalization and slug tools for the booking API",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./bookingkit.yaml")
]
TimezoneOption = Annotated[
    Optional[str],
    typer.Option("--tz", help="IANA timezone. Defaults to the configured timezone.")
]


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(1)


def _load_config(config_file: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
):
    """
    Normalize timestamps to UTC wire format and generate URL slugs.
    """
    configure_logging(verbose=verbose)


@app.command()
def slug(
    names: Annotated[List[str], typer.Argument(help="Display names to convert")],
):
    """
    Print the slug of each display name.

    Examples:

        bookingkit slug "Acme Corp!!" "Müller & Söhne"
    """
    for name in names:
        console.print(generate_slug(name), highlight=False)


@app.command()
def normalize(
    values: Annotated[List[str], typer.Argument(help="Timestamps to parse (ISO 8601 or common formats)")],
):
    """
    Parse timestamps and print them in canonical UTC wire format.

    Examples:

        bookingkit normalize 2025-12-24T15:22:00+05:30 "2025-12-24 09:52"
    """
    for value in values:
        try:
            wire = format_timestamp(parse_timestamp(value))
        except ParseError as e:
            _fail(e)
        console.print(wire, highlight=False)


@app.command("to-utc")
def to_utc(
    date: Annotated[str, typer.Argument(help="Local date (YYYY-MM-DD, any delimiter)")],
    time_of_day: Annotated[str, typer.Argument(metavar="TIME", help="Local time (15:22 or 03:22 PM)")],
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Convert a local date and time in a timezone to a UTC wire string.
    """
    config = _load_config(config_file)
    zone = tz or config.timezone

    try:
        wire = combine_local_to_utc(date, time_of_day, zone)
    except (ParseError, InvalidTimezoneError) as e:
        _fail(e)

    console.print(wire, highlight=False)


@app.command()
def show(
    value: Annotated[str, typer.Argument(help="Timestamp to display")],
    tz: TimezoneOption = None,
    config_file: ConfigOption = None,
):
    """
    Show a timestamp in UTC wire format and in a local timezone.
    """
    config = _load_config(config_file)
    zone = tz or config.timezone

    try:
        timestamp = parse_timestamp(value)
        local = format_local_datetime(timestamp, zone)
    except (BookingKitError, ValueError) as e:
        _fail(e)

    console.print(f"[bold]UTC:[/bold]   {format_timestamp(timestamp)}", highlight=False)
    console.print(f"[bold]Local:[/bold] {local} ({escape(zone)})", highlight=False)


@app.command()
def timezones(
    config_file: ConfigOption = None,
):
    """
    List the configured display timezones with their current UTC offsets.
    """
    config = _load_config(config_file)

    table = Table(
        title="Display timezones",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Timezone", style="bold yellow")
    table.add_column("Label", style="dim")
    table.add_column("Offset")

    for name in config.display_timezones:
        table.add_row(name, COMMON_TIMEZONES.get(name, ""), utc_offset_label(name))

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]bookingkit[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
