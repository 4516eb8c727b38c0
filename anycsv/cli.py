"""
Splits each line of a delimited text file into fields and reports them.
Guarded delimiters are honoured anywhere in a field.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from .config import ParserConfig, build_config
from .engine import CSVParseEngine
from .exceptions import ConfigurationError
from .filesystem import collect_file_stat, enforce_file_size, get_max_file_size, read_records
from .models import GuardDisposition, TrimWhiteSpace

__all__ = ["cli"]

_logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("verbose", "terse", "quiet")
TERSE_SEPARATOR = " | "

SCENARIOS = (
    ("Strip guards, leave whitespace", GuardDisposition.STRIP, TrimWhiteSpace.LEAVE),
    ("Keep guards, leave whitespace", GuardDisposition.KEEP, TrimWhiteSpace.LEAVE),
    ("Strip guards, trim leading whitespace", GuardDisposition.STRIP, TrimWhiteSpace.TRIM_LEADING),
)


def _build_engines(config: ParserConfig, scenarios: bool) -> list[tuple[str, CSVParseEngine]]:
    if not scenarios:
        return [("Configured settings", CSVParseEngine.from_config(config))]
    return [
        (label, CSVParseEngine(config.delimiter, config.guard, guard_disposition, whitespace))
        for label, guard_disposition, whitespace in SCENARIOS
    ]


def _report_fields(label: str | None, fields: list[str], output: str) -> None:
    if output == "terse":
        click.echo(TERSE_SEPARATOR.join(fields))
        return
    if label is not None:
        click.echo(f"  {label}: {len(fields)} fields")
    for number, field in enumerate(fields, start=1):
        click.echo(f"    Field {number}: [{field}]")


@click.command()
@click.version_option(package_name="anycsv")
@click.option("--delimiter", help="Field delimiter: a single character or a name such as tab")
@click.option("--guard", help="Guard character: a single character or a name such as single_quote")
@click.option(
    "--guard-disposition",
    type=click.Choice([member.value for member in GuardDisposition]),
    help="Keep or strip guards enclosing a whole field",
)
@click.option(
    "--whitespace",
    type=click.Choice([member.value for member in TrimWhiteSpace]),
    help="Whitespace trimming applied to each field",
)
@click.option(
    "--output",
    type=click.Choice(OUTPUT_FORMATS),
    default="verbose",
    show_default=True,
    help="Report format",
)
@click.option("--scenarios", is_flag=True, help="Parse every line three ways for comparison")
@click.option("--encoding", default="UTF-8", show_default=True, help="Input file encoding")
@click.option("--debug", is_flag=True, help="Log diagnostics to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    delimiter: str | None = None,
    guard: str | None = None,
    guard_disposition: str | None = None,
    whitespace: str | None = None,
    output: str = "verbose",
    scenarios: bool = False,
    encoding: str = "UTF-8",
    debug: bool = False,
):
    """
    Parse every line of FILEPATH as one delimited record.

    Args:
        filepath: Path to the file to parse.
        delimiter: Override for the field delimiter.
        guard: Override for the guard character.
        guard_disposition: Override for guard stripping (`keep` or `strip`).
        whitespace: Override for whitespace trimming.
        output: `verbose`, `terse`, or `quiet`.
        scenarios: Parse each line with the three comparison scenarios.
        encoding: Text encoding of the input file.
        debug: Enable debug logging on stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the delimiter, guard, or dispositions are
            invalid, including a delimiter equal to the guard.
        click.ClickException: If the file cannot be read or is too large.

    Examples:
        anycsv certs.txt --whitespace trim_both --output terse
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    path = Path(filepath)
    try:
        config = build_config(
            path.resolve().parent,
            delimiter=delimiter,
            guard=guard,
            guard_disposition=guard_disposition,
            whitespace=whitespace,
        )
        engines = _build_engines(config, scenarios)
    except ConfigurationError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        enforce_file_size(collect_file_stat(path), max_file_size, path)
        records = read_records(path, encoding)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    total = len(records)
    for number, record in enumerate(records, start=1):
        _logger.debug("Parsing record %d of %d: %r", number, total, record)
        results = [(label, engine.parse(record)) for label, engine in engines]
        if output == "quiet":
            continue
        if output == "verbose":
            if scenarios:
                click.echo(f"Case {number} of {total}: {record}")
            else:
                click.echo(f"Case {number} of {total} ({len(results[0][1])} fields): {record}")
        for label, fields in results:
            _report_fields(label if scenarios else None, fields, output)

    if output == "quiet":
        click.echo(f"Parsed {total} records.")


if __name__ == "__main__":
    cli()
