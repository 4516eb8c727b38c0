"""Delimited string parsing."""

from __future__ import annotations

from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_GUARD,
    DEFAULT_GUARD_DISPOSITION,
    DEFAULT_WHITESPACE,
)
from .exceptions import InvalidOptionError
from .lookup import resolve_delimiter, resolve_guard
from .models import DelimiterChar, GuardChar, GuardDisposition, ScanState, TrimWhiteSpace
from .transform import transform_field


def _flush_field(
    state: ScanState,
    guard: str,
    guard_disposition: GuardDisposition,
    whitespace: TrimWhiteSpace,
) -> str:
    """Transform the accumulated field and reset the state for the next one.

    Args:
        state: Scan state holding the raw field.
        guard: Guard character.
        guard_disposition: Guard stripping policy.
        whitespace: Whitespace trimming policy.

    Returns:
        str: The finished field.
    """
    field = transform_field("".join(state.buffer), guard, guard_disposition, whitespace)
    state.reset()
    return field


def _try_protect_delimiter(state: ScanState, character: str) -> bool:
    """Keep a delimiter as field content when it sits inside a guard.

    Args:
        state: Scan state to update.
        character: The delimiter just read.

    Returns:
        bool: True when the delimiter was protected and appended.

    Examples:
        _try_protect_delimiter(ScanState(inside_guard=True), ",")  # True
    """
    if not state.inside_guard:
        return False
    state.buffer.append(character)
    return True


def _consume_guard(state: ScanState, character: str) -> None:
    # Guards stay in the buffer; stripping is decided once the field ends.
    state.buffer.append(character)
    state.inside_guard = not state.inside_guard
    state.in_progress = True


def _consume_ordinary(state: ScanState, character: str) -> None:
    state.buffer.append(character)
    state.in_progress = True


def _ensure_dispositions(guard_disposition: object, whitespace: object) -> None:
    if not isinstance(guard_disposition, GuardDisposition):
        raise InvalidOptionError("guard_disposition", guard_disposition)
    if not isinstance(whitespace, TrimWhiteSpace):
        raise InvalidOptionError("whitespace", whitespace)


def parse(
    text: str | None,
    delimiter: str | DelimiterChar = DEFAULT_DELIMITER,
    guard: str | GuardChar = DEFAULT_GUARD,
    guard_disposition: GuardDisposition = DEFAULT_GUARD_DISPOSITION,
    whitespace: TrimWhiteSpace = DEFAULT_WHITESPACE,
) -> list[str]:
    """Split a delimited string into fields in a single pass.

    A guard character anywhere in a field toggles protection: while an odd
    number of guards has been seen since the field began, delimiters are
    kept as content. Guards are always kept while scanning; only a pair that
    encloses the entire field is removed, and only under
    `GuardDisposition.STRIP`. Every string has a defined result; malformed
    quoting merely yields fields that are not eligible for stripping.

    The caller is responsible for choosing a delimiter that differs from the
    guard; use `CSVParseEngine` for validated, reusable settings.

    Args:
        text: String to split. None and the empty string both yield a single
            empty field.
        delimiter: Field delimiter, as a character or `DelimiterChar`.
        guard: Guard character, as a character or `GuardChar`.
        guard_disposition: Whether guards enclosing a whole field are removed.
        whitespace: Trimming applied to each field.

    Returns:
        list[str]: Fields in the order they occur in `text`.

    Raises:
        ConfigurationError: If `delimiter` or `guard` is not a single
            character or a named symbol.
        InvalidOptionError: If a disposition is not a member of its enum.

    Examples:
        parse('CN=RapidSSL CA, O="GeoTrust, Inc.", C=US')
        # ['CN=RapidSSL CA', ' O="GeoTrust, Inc."', ' C=US']
        parse("a,b,")  # ['a', 'b', '']
        parse("a|'b|c'", "|", "'")  # ['a', 'b|c']
    """
    delimiter = resolve_delimiter(delimiter)
    guard = resolve_guard(guard)
    _ensure_dispositions(guard_disposition, whitespace)

    if not text:
        return [""]

    fields: list[str] = []
    state = ScanState()

    for character in text:
        if character == delimiter:
            if _try_protect_delimiter(state, character):
                continue
            if state.in_progress:
                fields.append(_flush_field(state, guard, guard_disposition, whitespace))
            else:
                # Nothing since the last boundary: an empty field.
                fields.append("")
        elif character == guard:
            _consume_guard(state, character)
        else:
            _consume_ordinary(state, character)

    if state.in_progress:
        fields.append(_flush_field(state, guard, guard_disposition, whitespace))
    elif text[-1] == delimiter:
        fields.append("")

    return fields


def standard_csv_parse(text: str | None) -> list[str]:
    """Parse with a comma delimiter and double-quote guards, stripping guards.

    Examples:
        standard_csv_parse('"x, y",z')  # ['x, y', 'z']
    """
    return parse(
        text,
        DEFAULT_DELIMITER,
        DEFAULT_GUARD,
        DEFAULT_GUARD_DISPOSITION,
        DEFAULT_WHITESPACE,
    )
