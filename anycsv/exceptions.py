"""Package-specific exception types."""

from __future__ import annotations


class AnyCSVError(ValueError):
    """Base class for errors raised by anycsv.

    Input content never raises; every error signals a configuration or
    programming mistake by the caller.
    """


class ConfigurationError(AnyCSVError):
    """Raised when parser settings are invalid.

    Covers a delimiter equal to the guard, unknown or multi-character
    delimiter and guard values, and malformed configuration tables.

    Args:
        message: Description of the problem.
        delimiter: Delimiter character involved, if any.
        guard: Guard character involved, if any.

    Attributes:
        delimiter_code: Code point of `delimiter`, or None.
        guard_code: Code point of `guard`, or None.
    """

    def __init__(self, message: str, delimiter: str | None = None, guard: str | None = None):
        self.delimiter = delimiter
        self.guard = guard
        self.delimiter_code = _code_point(delimiter)
        self.guard_code = _code_point(guard)
        super().__init__(message)


class SettingsLockedError(ConfigurationError):
    """Raised when a locked `CSVParseEngine` setting is modified.

    Args:
        setting: Name of the property the caller tried to change.
    """

    def __init__(self, setting: str, delimiter: str | None = None, guard: str | None = None):
        self.setting = setting
        super().__init__(
            f"Settings are locked; `{setting}` cannot be changed after the first parse "
            "or an explicit lock",
            delimiter=delimiter,
            guard=guard,
        )


class InvalidOptionError(AnyCSVError):
    """Raised when a disposition is not a member of its enumeration.

    Args:
        option_name: Name of the offending argument.
        value: The rejected value.
    """

    def __init__(self, option_name: str, value: object):
        self.option_name = option_name
        self.value = value
        super().__init__(f"Invalid value for `{option_name}`: {value!r}")


def _code_point(character: str | None) -> int | None:
    if isinstance(character, str) and len(character) == 1:
        return ord(character)
    return None
