"""Configuration loading and management."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path

from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_GUARD,
    DEFAULT_GUARD_DISPOSITION,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_WHITESPACE,
)
from .exceptions import ConfigurationError
from .lookup import describe_character, normalize_name, resolve_delimiter, resolve_guard
from .models import GuardDisposition, TrimWhiteSpace

_logger = logging.getLogger(__name__)

PYPROJECT_TABLE = ("tool", "anycsv")
DOTFILE_NAME = ".anycsv.toml"


@dataclass
class ParserConfig:
    """Settings for parsing delimited text, as read from configuration files.

    Attributes:
        delimiter: Field delimiter, either a single character or a symbolic
            name such as ``"tab"`` or ``"VerticalBar"``.
        guard: Guard character, either a single character or a symbolic name
            such as ``"double_quote"``.
        guard_disposition: ``"keep"`` or ``"strip"``.
        whitespace: ``"leave"``, ``"trim_leading"``, ``"trim_trailing"`` or
            ``"trim_both"``.
        max_file_size: Maximum input file size in bytes accepted by the CLI.

    Examples:
        ParserConfig(delimiter="tab", whitespace="trim_both")
    """

    # Characters
    delimiter: str = DEFAULT_DELIMITER
    guard: str = DEFAULT_GUARD

    # Dispositions
    guard_disposition: str = DEFAULT_GUARD_DISPOSITION.value
    whitespace: str = DEFAULT_WHITESPACE.value

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


# Files consulted in each directory, in order, with the tables they may hold.
CONFIG_SOURCES = (
    ("pyproject.toml", (PYPROJECT_TABLE,)),
    (DOTFILE_NAME, (("anycsv",), PYPROJECT_TABLE)),
)

_FIELD_NAMES = frozenset(field.name for field in fields(ParserConfig))


def load_config(search_path: Path) -> ParserConfig:
    """Find the parser settings that apply to files under `search_path`.

    The directory and each of its parents are searched in turn; within a
    directory, a ``[tool.anycsv]`` table in `pyproject.toml` takes precedence
    over `.anycsv.toml` (``[anycsv]`` or ``[tool.anycsv]``). The first table
    found wins outright, even an empty one, so settings are never merged
    across directories. Names such as ``"tab"`` or ``"TrimBoth"`` are resolved
    before returning.

    Args:
        search_path: Directory holding the input file.

    Returns:
        ParserConfig: Settings from the nearest table, or the defaults
        (comma, double quote, strip, leave) when there is none.

    Raises:
        ConfigurationError: If the nearest table is not a table, has keys
            other than the `ParserConfig` fields, or names an unknown
            character or disposition.

    Examples:
        load_config(Path("exports/2016"))
    """
    start = search_path.resolve()

    for directory in (start, *start.parents):
        for filename, table_paths in CONFIG_SOURCES:
            config = _load_from_file(directory / filename, table_paths)
            if config is not None:
                return normalize_config(config)

    return ParserConfig()


def _load_from_file(
    config_file: Path, table_paths: tuple[tuple[str, ...], ...]
) -> ParserConfig | None:
    # None means the search continues in the next file.
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            document = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        _logger.debug("Skipping unreadable config file %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        table = _find_table(document, table_path)
        if table is not None:
            _logger.debug("Using [%s] from %s", ".".join(table_path), config_file)
            return _config_from_table(table, config_file, table_path)

    return None


def _find_table(document: dict, table_path: tuple[str, ...]) -> object | None:
    node: object = document
    for key in table_path:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def _config_from_table(
    table: object, config_file: Path, table_path: tuple[str, ...]
) -> ParserConfig:
    location = f"`[{'.'.join(table_path)}]` in {config_file}"

    if not isinstance(table, dict):
        raise ConfigurationError(f"{location} must be a table of parser settings")

    unknown = sorted(set(table) - _FIELD_NAMES)
    if unknown:
        raise ConfigurationError(f"Unknown settings in {location}: {', '.join(unknown)}")

    return ParserConfig(**table)


def _normalize_option(value: object, option_type: type[Enum], option_name: str) -> str:
    if isinstance(value, option_type):
        return value.value
    if not isinstance(value, str):
        raise ConfigurationError(f"`{option_name}` must be a string")
    try:
        return option_type(normalize_name(value)).value
    except ValueError as error:
        choices = ", ".join(member.value for member in option_type)
        raise ConfigurationError(f"`{option_name}` must be one of: {choices}") from error


def normalize_config(config: ParserConfig) -> ParserConfig:
    """Resolve symbolic names in `config` to literal characters and option values.

    Raises:
        ConfigurationError: If a name cannot be resolved.

    Examples:
        normalize_config(ParserConfig(delimiter="tab")).delimiter  # "\\t"
    """
    return replace(
        config,
        delimiter=resolve_delimiter(config.delimiter),
        guard=resolve_guard(config.guard),
        guard_disposition=_normalize_option(
            config.guard_disposition, GuardDisposition, "guard_disposition"
        ),
        whitespace=_normalize_option(config.whitespace, TrimWhiteSpace, "whitespace"),
    )


def validate_config(config: ParserConfig) -> None:
    """Validate a `ParserConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigurationError: If the delimiter or guard is not a single
            character, both are the same character, a disposition is
            unsupported, or the file size limit is not a positive integer.

    Examples:
        validate_config(ParserConfig(delimiter="|", guard="'"))
    """
    config = normalize_config(config)

    if config.delimiter == config.guard:
        raise ConfigurationError(
            f"`delimiter` and `guard` must differ, both are "
            f"{describe_character(config.delimiter)}",
            delimiter=config.delimiter,
            guard=config.guard,
        )

    if isinstance(config.max_file_size, bool) or not isinstance(config.max_file_size, int):
        raise ConfigurationError("`max_file_size` must be an integer")
    if config.max_file_size <= 0:
        raise ConfigurationError("`max_file_size` must be a positive integer")


def apply_overrides(config: ParserConfig, **overrides: object) -> ParserConfig:
    """Layer command line values over settings loaded from a file.

    Args:
        config: Settings loaded by `load_config`.
        overrides: Values keyed by `ParserConfig` field; None means the option
            was not given and the file's value stands.

    Returns:
        ParserConfig: `config` itself when nothing is overridden, otherwise a
        copy carrying the overrides. Names are not resolved here.

    Raises:
        TypeError: If an override is not a `ParserConfig` field.

    Examples:
        apply_overrides(config, delimiter="VerticalBar", guard=None)
    """
    changes = {name: value for name, value in overrides.items() if value is not None}
    return replace(config, **changes) if changes else config


def build_config(search_path: Path, **overrides: object) -> ParserConfig:
    """Produce the settings the CLI parses with.

    Settings come from the nearest configuration file, then command line
    overrides, then name resolution and validation, so an override that
    collides with the file's guard is still rejected.

    Args:
        search_path: Directory holding the input file.
        overrides: Command line values; None entries are ignored.

    Returns:
        ParserConfig: Resolved settings, ready for `CSVParseEngine.from_config`.

    Raises:
        ConfigurationError: If the file or the overrides are invalid, or the
            resulting delimiter equals the guard.

    Examples:
        build_config(Path("exports"), delimiter="tab", whitespace="trim_both")
    """
    config = apply_overrides(load_config(search_path), **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config
