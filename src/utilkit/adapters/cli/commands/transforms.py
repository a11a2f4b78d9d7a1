"""CLI commands for the pure domain transformations.

Each command parses its arguments, calls one domain function, and prints
the result. Rejected input exits with ``ExitCode.INVALID_ARGUMENT``.

Contents:
    * :func:`cli_format` - Upper/lowercase text.
    * :func:`cli_filter_ratings` - Keep items rated 4 or higher.
    * :func:`cli_concat` - Concatenate JSON arrays.
    * :func:`cli_measure` - Length of text or double of a number.
    * :func:`cli_most_expensive` - Highest-priced product.
    * :func:`cli_day_type` - Weekend/weekday classification.
    * :func:`cli_describe_vehicle` - Vehicle description lines.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from utilkit.domain import behaviors
from utilkit.domain.enums import Day
from utilkit.domain.models import Product, RatedItem, Vehicle

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import echo_json, parse_json_array, parse_number, parse_records, reject_invalid_input

logger = logging.getLogger(__name__)


@click.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--upper/--lower",
    "to_upper",
    default=None,
    help="Force upper- or lowercase. Uppercase unless --lower is given.",
)
def cli_format(text: str, to_upper: bool | None) -> None:
    """Print TEXT uppercased, or lowercased with --lower."""
    with lib_log_rich.runtime.bind(job_id="cli-format", extra={"command": "format"}):
        logger.debug("Formatting text", extra={"to_upper": to_upper})
        click.echo(behaviors.format_string(text, to_upper))


@click.command("filter-ratings", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("items_json", metavar="JSON")
def cli_filter_ratings(items_json: str) -> None:
    """Print the items from a JSON array of {title, rating} rated 4 or higher."""
    with lib_log_rich.runtime.bind(job_id="cli-filter-ratings", extra={"command": "filter-ratings"}):
        with reject_invalid_input():
            items = parse_records(items_json, RatedItem)
        kept = behaviors.filter_by_rating(items)
        logger.info("Filtered ratings", extra={"received": len(items), "kept": len(kept)})
        echo_json(kept)


@click.command("concat", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("arrays", nargs=-1, metavar="JSON...")
def cli_concat(arrays: tuple[str, ...]) -> None:
    """Print the concatenation of the given JSON arrays, in order.

    ``concat '[1,2]' '[3]' '[]'`` prints ``[1,2,3]``.
    """
    with lib_log_rich.runtime.bind(job_id="cli-concat", extra={"command": "concat"}):
        with reject_invalid_input():
            sequences = [parse_json_array(raw) for raw in arrays]
        echo_json(behaviors.concatenate_arrays(*sequences))


@click.command("measure", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
@click.option("--number", "as_number", is_flag=True, default=False, help="Treat VALUE as a number and double it")
def cli_measure(value: str, as_number: bool) -> None:
    """Print the length of VALUE, or twice VALUE with --number."""
    with lib_log_rich.runtime.bind(job_id="cli-measure", extra={"command": "measure"}):
        with reject_invalid_input():
            result = behaviors.process_value(parse_number(value) if as_number else value)
        click.echo(result)


@click.command("most-expensive", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("products_json", metavar="JSON")
def cli_most_expensive(products_json: str) -> None:
    """Print the highest-priced product from a JSON array of {name, price}.

    Prints ``null`` for an empty array.
    """
    with lib_log_rich.runtime.bind(job_id="cli-most-expensive", extra={"command": "most-expensive"}):
        with reject_invalid_input():
            products = parse_records(products_json, Product)
        echo_json(behaviors.get_most_expensive_product(products))


@click.command("day-type", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("day")
def cli_day_type(day: str) -> None:
    """Print Weekend or Weekday for the named DAY."""
    with lib_log_rich.runtime.bind(job_id="cli-day-type", extra={"command": "day-type"}):
        with reject_invalid_input():
            parsed = Day.parse(day)
        click.echo(behaviors.get_day_type(parsed).value)


@click.command("describe-vehicle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--make", required=True, help="Manufacturer name")
@click.option("--year", type=int, required=True, help="Model year")
@click.option("--model", default=None, help="Model name, if known")
def cli_describe_vehicle(make: str, year: int, model: str | None) -> None:
    """Print the description of a vehicle, plus its model line when given."""
    vehicle = Vehicle(make=make, year=year, model=model)
    with lib_log_rich.runtime.bind(job_id="cli-describe-vehicle", extra={"command": "describe-vehicle"}):
        click.echo(behaviors.describe_vehicle(vehicle))
        model_line = behaviors.describe_model(vehicle)
        if model_line is not None:
            click.echo(model_line)


__all__ = [
    "cli_concat",
    "cli_day_type",
    "cli_describe_vehicle",
    "cli_filter_ratings",
    "cli_format",
    "cli_measure",
    "cli_most_expensive",
]
