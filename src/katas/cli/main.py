"""Katas CLI entry point: Click group with one subcommand per exercise."""

from __future__ import annotations

import json
import logging
import sys
from itertools import islice
from typing import Any, NoReturn

import click

from cssbuilder import SelectorError, parse_selector
from cssbuilder.model import Selector
from katas import __version__
from katas.algorithms import (
    can_make_row,
    create_compass_points,
    expand_braces,
    extract_ranges,
    zigzag_matrix,
)
from katas.config import KatasConfig
from katas.errors import KataError
from katas.sequences import bottles_of_beer, fibonacci

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="katas")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity",
)
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text")
@click.option(
    "--ranges-separator",
    default=",",
    show_default=True,
    help="Separator used by the ranges command",
)
@click.pass_context
def cli(
    ctx: click.Context, log_level: str, as_json: bool, ranges_separator: str
) -> None:
    """Katas - CSS selector builder and standalone exercise utilities."""
    config = KatasConfig(
        log_level=log_level.upper(),
        output="json" if as_json else "text",
        ranges_separator=ranges_separator,
    )
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


def _emit(config: KatasConfig, text: str, data: Any) -> None:
    if config.json_output:
        click.echo(json.dumps(data))
    else:
        click.echo(text)


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _describe(selector: Selector) -> list[dict[str, Any]]:
    """Flatten a selector chain into one dict per compound selector."""
    compounds: list[dict[str, Any]] = []
    current: Selector | None = selector
    while current is not None:
        compounds.append(
            {
                "element": current.element,
                "id": current.id,
                "classes": list(current.classes),
                "attributes": list(current.attributes),
                "pseudo_classes": list(current.pseudo_classes),
                "pseudo_element": current.pseudo_element,
                "combinator": current.combinator,
            }
        )
        current = current.next if current.combinator else None
    return compounds


# ---------------------------------------------------------------------------
# CSS selectors
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("text")
@click.pass_obj
def selector(config: KatasConfig, text: str) -> None:
    """Parse a CSS selector and print it in canonical form."""
    try:
        parsed = parse_selector(text)
    except SelectorError as exc:
        _fail(exc)
    rendered = parsed.render()
    _emit(config, rendered, {"selector": rendered, "compounds": _describe(parsed)})


@cli.command()
@click.option("--element", default=None, help="Element (tag) name")
@click.option("--id", "id_", default=None, help="Id fragment")
@click.option("--class", "classes", multiple=True, help="Class fragment (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute fragment (repeatable)")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", default=None, help="Pseudo-element fragment")
@click.pass_obj
def build(
    config: KatasConfig,
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from individual fragments."""
    built = Selector()
    if element is not None:
        built.set_element(element)
    if id_ is not None:
        built.set_id(id_)
    for value in classes:
        built.add_class(value)
    for value in attributes:
        built.add_attribute(value)
    for value in pseudo_classes:
        built.add_pseudo_class(value)
    if pseudo_element is not None:
        built.set_pseudo_element(pseudo_element)
    rendered = built.render()
    logger.debug("built selector %r", rendered)
    _emit(config, rendered, {"selector": rendered})


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_obj
def compass(config: KatasConfig) -> None:
    """Print the 32 compass points and their azimuths."""
    points = create_compass_points()
    text = "\n".join(f"{p.abbreviation:<5} {p.azimuth:6.2f}" for p in points)
    _emit(
        config,
        text,
        [{"abbreviation": p.abbreviation, "azimuth": p.azimuth} for p in points],
    )


@cli.command()
@click.argument("text")
@click.pass_obj
def braces(config: KatasConfig, text: str) -> None:
    """Expand brace alternations, one result per line."""
    expansions = sorted(expand_braces(text))
    _emit(config, "\n".join(expansions), expansions)


@cli.command()
@click.argument("size", type=int)
@click.pass_obj
def zigzag(config: KatasConfig, size: int) -> None:
    """Print the SIZE x SIZE zig-zag matrix."""
    try:
        matrix = zigzag_matrix(size)
    except KataError as exc:
        _fail(exc)
    width = len(str(max(size * size - 1, 0)))
    text = "\n".join(" ".join(f"{v:>{width}}" for v in row) for row in matrix)
    _emit(config, text, matrix)


def _parse_tile(raw: str) -> tuple[int, int]:
    left, sep, right = raw.partition("-")
    if not sep:
        raise KataError(f"Tiles are written as a-b, got {raw!r}")
    try:
        return int(left), int(right)
    except ValueError as exc:
        raise KataError(f"Tile halves must be integers, got {raw!r}") from exc


@cli.command()
@click.argument("tiles", nargs=-1)
@click.pass_obj
def dominoes(config: KatasConfig, tiles: tuple[str, ...]) -> None:
    """Check whether TILES (written a-b) can be laid in one row."""
    try:
        result = can_make_row([_parse_tile(tile) for tile in tiles])
    except KataError as exc:
        _fail(exc)
    _emit(config, "yes" if result else "no", {"can_make_row": result})


@cli.command()
@click.argument("nums")
@click.option("--separator", default=None, help="Override the configured separator")
@click.pass_obj
def ranges(config: KatasConfig, nums: str, separator: str | None) -> None:
    """Compress a comma-separated ordered list of integers."""
    try:
        values = [int(part) for part in nums.split(",") if part.strip()]
    except ValueError:
        _fail(KataError(f"Expected comma-separated integers, got {nums!r}"))
    if separator is None:
        separator = config.ranges_separator
    result = extract_ranges(values, separator=separator)
    _emit(config, result, {"ranges": result})


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------


@cli.command("fibonacci")
@click.option("--count", default=10, type=click.IntRange(min=0), help="How many numbers")
@click.pass_obj
def fibonacci_cmd(config: KatasConfig, count: int) -> None:
    """Print the first COUNT Fibonacci numbers."""
    numbers = list(islice(fibonacci(), count))
    _emit(config, "\n".join(str(n) for n in numbers), numbers)


@cli.command()
@click.pass_obj
def bottles(config: KatasConfig) -> None:
    """Print the lyrics of "99 Bottles of Beer"."""
    lines = list(bottles_of_beer())
    _emit(config, "\n".join(lines), lines)
