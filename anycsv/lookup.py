"""Lookup tables between symbolic names and delimiter or guard characters."""

from __future__ import annotations

from types import MappingProxyType

from . import constants
from .exceptions import ConfigurationError
from .models import CharacterMapping, DelimiterChar, GuardChar

DELIMITER_MAP = (
    CharacterMapping(DelimiterChar.CARAT, constants.CARAT, "Carat"),
    CharacterMapping(DelimiterChar.CARRIAGE_RETURN, constants.CARRIAGE_RETURN, "Carriage Return"),
    CharacterMapping(DelimiterChar.COMMA, constants.COMMA, "Comma"),
    CharacterMapping(DelimiterChar.LINE_FEED, constants.LINE_FEED, "Line Feed"),
    CharacterMapping(DelimiterChar.SPACE, constants.SPACE, "Space"),
    CharacterMapping(DelimiterChar.TAB, constants.TAB, "Tab"),
    CharacterMapping(DelimiterChar.VERTICAL_BAR, constants.VERTICAL_BAR, "Vertical Bar"),
)

GUARD_MAP = (
    CharacterMapping(GuardChar.BACK_QUOTE, constants.BACK_QUOTE, "Back Quote"),
    CharacterMapping(GuardChar.DOUBLE_QUOTE, constants.DOUBLE_QUOTE, "Double Quote"),
    CharacterMapping(GuardChar.SINGLE_QUOTE, constants.SINGLE_QUOTE, "Single Quote"),
)

_DELIMITER_BY_SYMBOL = MappingProxyType({row.symbol: row for row in DELIMITER_MAP})
_DELIMITER_BY_CHAR = MappingProxyType({row.character: row for row in DELIMITER_MAP})
_GUARD_BY_SYMBOL = MappingProxyType({row.symbol: row for row in GUARD_MAP})
_GUARD_BY_CHAR = MappingProxyType({row.character: row for row in GUARD_MAP})
_DISPLAY_BY_CHAR = MappingProxyType(
    {row.character: row.display for row in (*DELIMITER_MAP, *GUARD_MAP)}
)


def delimiter_to_char(symbol: DelimiterChar) -> str:
    """Return the character for a delimiter symbol.

    Raises:
        ConfigurationError: If `symbol` is `DelimiterChar.OTHER` or not a
            `DelimiterChar` at all.
    """
    row = _DELIMITER_BY_SYMBOL.get(symbol) if isinstance(symbol, DelimiterChar) else None
    if row is None:
        raise ConfigurationError(f"{symbol!r} does not name a delimiter character")
    return row.character


def guard_to_char(symbol: GuardChar) -> str:
    """Return the character for a guard symbol.

    Raises:
        ConfigurationError: If `symbol` is `GuardChar.OTHER` or not a
            `GuardChar` at all.
    """
    row = _GUARD_BY_SYMBOL.get(symbol) if isinstance(symbol, GuardChar) else None
    if row is None:
        raise ConfigurationError(f"{symbol!r} does not name a guard character")
    return row.character


def char_to_delimiter(character: str) -> DelimiterChar:
    row = _DELIMITER_BY_CHAR.get(character)
    return row.symbol if row else DelimiterChar.OTHER


def char_to_guard(character: str) -> GuardChar:
    row = _GUARD_BY_CHAR.get(character)
    return row.symbol if row else GuardChar.OTHER


def normalize_name(name: str) -> str:
    """Fold ``"VerticalBar"``, ``"vertical-bar"`` and ``"VERTICAL_BAR"`` together."""
    name = name.strip()
    folded = []
    for position, character in enumerate(name):
        if character in "- ":
            character = "_"
        elif character.isupper() and position and name[position - 1].islower():
            folded.append("_")
        folded.append(character.lower())
    return "".join(folded)


def resolve_delimiter(value: str | DelimiterChar) -> str:
    """Resolve a delimiter given as a character, a symbol or a symbolic name.

    Args:
        value: A single character, a `DelimiterChar` member, or a name such as
            ``"comma"`` or ``"VerticalBar"``.

    Returns:
        str: The delimiter character.

    Raises:
        ConfigurationError: If `value` cannot be resolved to one character.

    Examples:
        resolve_delimiter("tab")  # "\\t"
        resolve_delimiter(";")  # ";"
    """
    if isinstance(value, DelimiterChar):
        return delimiter_to_char(value)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Delimiter must be a single character, got {value!r}")
    if len(value) == 1:
        return value
    try:
        symbol = DelimiterChar(normalize_name(value))
    except ValueError as error:
        raise ConfigurationError(f"Unknown delimiter name: {value!r}") from error
    return delimiter_to_char(symbol)


def resolve_guard(value: str | GuardChar) -> str:
    """Resolve a guard given as a character, a symbol or a symbolic name.

    Raises:
        ConfigurationError: If `value` cannot be resolved to one character.

    Examples:
        resolve_guard("SingleQuote")  # "'"
    """
    if isinstance(value, GuardChar):
        return guard_to_char(value)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Guard must be a single character, got {value!r}")
    if len(value) == 1:
        return value
    try:
        symbol = GuardChar(normalize_name(value))
    except ValueError as error:
        raise ConfigurationError(f"Unknown guard name: {value!r}") from error
    return guard_to_char(symbol)


def describe_character(character: str) -> str:
    """Render a character unambiguously for error messages.

    Examples:
        describe_character(",")  # "Comma (,)"
        describe_character("\\t")  # "Tab (0x09)"
        describe_character("~")  # "Other (~, 0x7e)"
    """
    display = _DISPLAY_BY_CHAR.get(character)
    if display is None:
        return f"Other ({character}, 0x{ord(character):02x})"
    if character.isprintable() and not character.isspace():
        return f"{display} ({character})"
    return f"{display} (0x{ord(character):02x})"
