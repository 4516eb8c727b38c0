"""
anycsv: a delimited string parser that honours guard characters anywhere.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    anycsv certificates.txt --output terse

Library Usage:
    from anycsv import CSVParseEngine, DelimiterChar, parse

    parse('CN=RapidSSL CA, O="GeoTrust, Inc.", C=US')
    # ['CN=RapidSSL CA', ' O="GeoTrust, Inc."', ' C=US']

    engine = CSVParseEngine(DelimiterChar.TAB)
    rows = [engine.parse(line) for line in lines]
"""

from .engine import CSVParseEngine
from .exceptions import (
    AnyCSVError,
    ConfigurationError,
    InvalidOptionError,
    SettingsLockedError,
)
from .lookup import (
    char_to_delimiter,
    char_to_guard,
    delimiter_to_char,
    describe_character,
    guard_to_char,
    resolve_delimiter,
    resolve_guard,
)
from .models import (
    DelimiterChar,
    GuardChar,
    GuardDisposition,
    LockMethod,
    LockState,
    TrimWhiteSpace,
)
from .parser import parse, standard_csv_parse
from .transform import transform_field, transform_whitespace

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse",
    "standard_csv_parse",
    "transform_field",
    "transform_whitespace",
    "CSVParseEngine",
    # Symbolic names
    "DelimiterChar",
    "GuardChar",
    "GuardDisposition",
    "TrimWhiteSpace",
    "LockMethod",
    "LockState",
    # Utilities
    "char_to_delimiter",
    "char_to_guard",
    "delimiter_to_char",
    "guard_to_char",
    "resolve_delimiter",
    "resolve_guard",
    "describe_character",
    # Exceptions
    "AnyCSVError",
    "ConfigurationError",
    "InvalidOptionError",
    "SettingsLockedError",
    # Version
    "__version__",
]
