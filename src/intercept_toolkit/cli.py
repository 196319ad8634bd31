"""CLI entrypoint for the Intercept toolkit."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from intercept_toolkit.config import load_settings
from intercept_toolkit.frequency import format_frequency, parse_frequency
from intercept_toolkit.geo import haversine_km, haversine_nm
from intercept_toolkit.icons import ICON_NAMES, classify_protocol, icon
from intercept_toolkit.storage import get_stored, set_stored
from intercept_toolkit.timefmt import format_utc_time, relative_time
from intercept_toolkit.validators import coordinate_errors, is_valid_channel, is_valid_mac

console = Console()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool):
    """Intercept toolkit: helpers behind the signal-monitoring dashboard."""
    level = "DEBUG" if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command()
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.option("--unit", default="nm", type=click.Choice(["nm", "km"]), help="Distance unit.")
def distance(lat1: float, lon1: float, lat2: float, lon2: float, unit: str):
    """Great-circle distance between two coordinates."""
    errors = coordinate_errors(lat1, lon1) + coordinate_errors(lat2, lon2)
    if errors:
        raise click.BadParameter("; ".join(errors))
    calc = haversine_nm if unit == "nm" else haversine_km
    console.print(f"{calc(lat1, lon1, lat2, lon2):.2f} {unit}")


@cli.command()
@click.argument("labels", nargs=-1, required=True)
def classify(labels: tuple[str, ...]):
    """Classify protocol labels (wifi / bluetooth / cellular / unknown)."""
    table = Table(title="Protocol classification")
    table.add_column("Label")
    table.add_column("Category", style="bold")

    for label in labels:
        table.add_row(escape(label), classify_protocol(label).value)

    console.print(table)


@cli.group()
def freq():
    """Format or parse frequencies in MHz."""


@freq.command("format")
@click.argument("mhz", type=float)
@click.option("--decimals", default=3, help="Decimal places.")
def freq_format(mhz: float, decimals: int):
    console.print(format_frequency(mhz, decimals))


@freq.command("parse")
@click.argument("text")
def freq_parse(text: str):
    value = parse_frequency(text)
    if math.isnan(value):
        raise click.ClickException(f"No frequency found in '{text}'")
    console.print(value)


@cli.command()
@click.argument("timestamp")
def ago(timestamp: str):
    """Show an HH:MM:SS local timestamp relative to now."""
    console.print(escape(relative_time(timestamp)))


@cli.command()
def utc():
    """Print the current UTC time as HH:MM:SS."""
    from datetime import datetime, timezone
    console.print(format_utc_time(datetime.now(timezone.utc)))


@cli.group()
def check():
    """Validate user input. Exits 1 when invalid."""


def _report(valid: bool, value: str, kind: str) -> None:
    if valid:
        console.print(f"[green]valid {kind}[/]: {escape(value)}")
        return
    console.print(f"[red]invalid {kind}[/]: {escape(value)}")
    raise SystemExit(1)


@check.command("mac")
@click.argument("value")
def check_mac(value: str):
    _report(is_valid_mac(value), value, "MAC address")


@check.command("channel")
@click.argument("value")
def check_channel(value: str):
    _report(is_valid_channel(value), value, "channel")


@cli.group()
def store():
    """Read and write values in the configured key-value store."""


@store.command("get")
@click.argument("key")
@click.option("--default", "default", default=None, help="Value printed when KEY is absent.")
def store_get(key: str, default: str | None):
    value = get_stored(key, default)
    if isinstance(value, (dict, list)):
        console.print_json(json.dumps(value))
    elif isinstance(value, str):
        console.print(escape(value))
    else:
        console.print(value)


@store.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Decode VALUE as JSON before storing.")
def store_set(key: str, value: str, as_json: bool):
    if as_json:
        try:
            decoded = json.loads(value)
        except ValueError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}") from exc
        set_stored(key, decoded)
    else:
        set_stored(key, value)
    console.print(f"Stored [bold]{escape(key)}[/]")


@cli.command("icon")
@click.argument("name", type=click.Choice(ICON_NAMES))
@click.option("--class-name", default=None, help="Extra CSS class.")
def icon_cmd(name: str, class_name: str | None):
    """Print the SVG markup for an icon."""
    click.echo(icon(name, class_name))


@cli.command("export")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", "filename", default=None, help="Download file name (defaults to SOURCE's name).")
@click.option("--mime-type", default="text/plain", help="MIME type offered to the host.")
def export_cmd(source: Path, filename: str | None, mime_type: str):
    """Offer a text file through the configured download directory."""
    from intercept_toolkit.export import download_file
    download_file(source.read_text(encoding="utf-8"), filename or source.name, mime_type)
    console.print(f"Exported [bold]{escape(filename or source.name)}[/]")
