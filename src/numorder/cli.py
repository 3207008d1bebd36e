"""numorder CLI: command-line interface powered by click and rich."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from numorder._constants import CONFIG_FILENAMES
from numorder._parsing import format_value, parse_value
from numorder._version import __version__
from numorder.core import NumberComparator, get_instance
from numorder.errors import ConfigError, NumorderError

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = """\
# numorder configuration
# Compare absolute values instead of signed values.
absolute: false
# Or select a comparator context by name:
# context: AbsoluteValue
"""

# Negative numbers such as -5 must reach the arguments, not the option parser.
_VALUE_ARGS = {"ignore_unknown_options": True}


def _load_config() -> dict[str, Any]:
    """Load numorder.yaml if it exists."""
    for name in CONFIG_FILENAMES:
        path = Path(name)
        if not path.exists():
            continue
        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {name}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{name} must contain a mapping, got {type(data).__name__}."
            )
        logger.debug("Loaded config from %s: %s", name, data)
        return data
    return {}


def _try_load_config() -> dict[str, Any]:
    """Try to load config, return empty dict on failure."""
    try:
        return _load_config()
    except (OSError, ConfigError) as exc:
        logger.debug("Could not load numorder.yaml: %s", exc)
        return {}


def _resolve_comparator(config: dict, absolute: bool | None) -> NumberComparator:
    """Pick the comparator from the CLI flag, then config, then the default."""
    if absolute is not None:
        return NumberComparator(absolute=absolute)
    if "context" in config:
        return NumberComparator.for_context(config["context"])
    if "absolute" in config:
        value = config["absolute"]
        if not isinstance(value, bool):
            raise ConfigError(
                f"Config key 'absolute' must be true or false, got {value!r}."
            )
        return NumberComparator(absolute=value)
    return get_instance()


def _reject_unknown_options(tokens: tuple[str, ...]) -> None:
    """Raise click's usage error for a long option that slipped through as a value."""
    for token in tokens:
        if token.startswith("--") and len(token) > 2:
            raise click.NoSuchOption(token, ctx=click.get_current_context())


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(exc).rstrip())}[/red]")
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="numorder")
@click.option("-v", "--verbose", is_flag=True, help="Log progress at INFO level")
@click.option("--debug", is_flag=True, help="Log everything at DEBUG level")
def cli(verbose: bool, debug: bool):
    """numorder: order numbers, optionally by absolute value."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command(context_settings=_VALUE_ARGS)
@click.argument("first")
@click.argument("second")
@click.option(
    "--absolute/--signed",
    default=None,
    help="Compare absolute values (default: from numorder.yaml, else signed)",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def compare(first: str, second: str, absolute: bool | None, json_output: bool):
    """Compare two values and print -1, 0 or 1."""
    _reject_unknown_options((first, second))
    a = parse_value(first)
    b = parse_value(second)
    try:
        comparator = _resolve_comparator(_try_load_config(), absolute)
        ordering = comparator.try_compare(a, b).unwrap()
    except NumorderError as exc:
        _fail(exc)

    logger.info("Compared %r and %r with %r", a, b, comparator)

    if json_output:
        payload = {
            "first": a,
            "second": b,
            "absolute": comparator.is_absolute(),
            "result": int(ordering),
        }
        click.echo(json.dumps(payload))
        return

    mode = "absolute" if comparator.is_absolute() else "signed"
    console.print(
        f"{escape(format_value(a))} {ordering.symbol} {escape(format_value(b))}"
        f"  [dim]({int(ordering)}, {mode})[/dim]"
    )


@cli.command(context_settings=_VALUE_ARGS)
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--absolute/--signed",
    default=None,
    help="Compare absolute values (default: from numorder.yaml, else signed)",
)
def matrix(values: tuple[str, ...], absolute: bool | None):
    """Print the pairwise ordering of VALUES as a table."""
    _reject_unknown_options(values)
    try:
        parsed = [parse_value(v, strict=True) for v in values]
        comparator = _resolve_comparator(_try_load_config(), absolute)
    except NumorderError as exc:
        _fail(exc)

    labels = [format_value(v) for v in parsed]
    mode = "absolute" if comparator.is_absolute() else "signed"
    table = Table(title=f"Pairwise ordering ({mode})")
    table.add_column("", style="bold")
    for label in labels:
        table.add_column(escape(label), justify="center")

    for row_value, row_label in zip(parsed, labels):
        cells = [comparator.try_compare(row_value, col).unwrap().symbol for col in parsed]
        table.add_row(escape(row_label), *cells)

    console.print(table)


@cli.command()
def init():
    """Write a default numorder.yaml in the current directory."""
    for name in CONFIG_FILENAMES:
        if Path(name).exists():
            console.print(f"[yellow]{name} already exists.[/yellow]")
            return
    Path(CONFIG_FILENAMES[0]).write_text(_DEFAULT_CONFIG)
    console.print(f"[green]Created {CONFIG_FILENAMES[0]}[/green]")


if __name__ == "__main__":
    cli()
