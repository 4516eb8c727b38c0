"""Constants used across the anycsv package."""

from __future__ import annotations

from .models import GuardDisposition, TrimWhiteSpace

# Delimiters
CARAT = "^"
CARRIAGE_RETURN = "\r"
COMMA = ","
LINE_FEED = "\n"
SPACE = " "
TAB = "\t"
VERTICAL_BAR = "|"

# Guards
BACK_QUOTE = "`"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

# Parse defaults
DEFAULT_DELIMITER = COMMA
DEFAULT_GUARD = DOUBLE_QUOTE
DEFAULT_GUARD_DISPOSITION = GuardDisposition.STRIP
DEFAULT_WHITESPACE = TrimWhiteSpace.LEAVE

# Input limits for the command line front end
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
