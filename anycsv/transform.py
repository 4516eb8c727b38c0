"""Field post-processing: guard stripping and whitespace trimming."""

from __future__ import annotations

from .exceptions import InvalidOptionError
from .models import GuardDisposition, TrimWhiteSpace


def transform_whitespace(text: str, whitespace: TrimWhiteSpace) -> str:
    """Trim whitespace from a field as directed.

    Args:
        text: Field text after guard handling.
        whitespace: Trimming policy.

    Returns:
        str: The trimmed field.

    Raises:
        InvalidOptionError: If `whitespace` is not a `TrimWhiteSpace` member.

    Examples:
        transform_whitespace("  a b  ", TrimWhiteSpace.TRIM_LEADING)  # "a b  "
    """
    if whitespace is TrimWhiteSpace.LEAVE:
        return text
    if whitespace is TrimWhiteSpace.TRIM_LEADING:
        return text.lstrip()
    if whitespace is TrimWhiteSpace.TRIM_TRAILING:
        return text.rstrip()
    if whitespace is TrimWhiteSpace.TRIM_BOTH:
        return text.strip()
    raise InvalidOptionError("whitespace", whitespace)


def transform_field(
    raw: str,
    guard: str,
    guard_disposition: GuardDisposition,
    whitespace: TrimWhiteSpace,
) -> str:
    """Turn a raw scanned field into its final form.

    With `GuardDisposition.STRIP`, a field whose first and last characters are
    both the guard loses exactly those two characters; a field consisting of a
    lone guard becomes empty. Guards anywhere else are kept. Whitespace is
    trimmed afterwards, so spaces inside stripped guards are subject to
    trimming too.

    Args:
        raw: Field text exactly as scanned, guards included.
        guard: Guard character.
        guard_disposition: Whether enclosing guards are removed.
        whitespace: Trimming policy applied last.

    Returns:
        str: The transformed field.

    Raises:
        InvalidOptionError: If either disposition is not a member of its enum.

    Examples:
        transform_field('"a,b"', '"', GuardDisposition.STRIP, TrimWhiteSpace.LEAVE)  # "a,b"
        transform_field('a"b"', '"', GuardDisposition.STRIP, TrimWhiteSpace.LEAVE)  # 'a"b"'
    """
    if guard_disposition is GuardDisposition.STRIP:
        if raw and raw[0] == guard and raw[-1] == guard:
            # A lone guard is both first and last character.
            raw = raw[1:-1]
    elif guard_disposition is not GuardDisposition.KEEP:
        raise InvalidOptionError("guard_disposition", guard_disposition)

    return transform_whitespace(raw, whitespace)
