"""Data models for anycsv."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DelimiterChar(Enum):
    """Symbolic names for the field delimiters with a well-known meaning.

    Attributes:
        CARAT: Circumflex, 0x5E.
        CARRIAGE_RETURN: 0x0D.
        COMMA: 0x2C.
        LINE_FEED: 0x0A.
        SPACE: 0x20.
        TAB: Horizontal tab, 0x09.
        VERTICAL_BAR: 0x7C.
        OTHER: Any character without a symbolic name.
    """

    CARAT = "carat"
    CARRIAGE_RETURN = "carriage_return"
    COMMA = "comma"
    LINE_FEED = "line_feed"
    SPACE = "space"
    TAB = "tab"
    VERTICAL_BAR = "vertical_bar"
    OTHER = "other"


class GuardChar(Enum):
    """Symbolic names for the supported guard (quoting) characters.

    Attributes:
        BACK_QUOTE: Grave accent, 0x60.
        DOUBLE_QUOTE: 0x22.
        SINGLE_QUOTE: Apostrophe, 0x27.
        OTHER: Any character without a symbolic name.
    """

    BACK_QUOTE = "back_quote"
    DOUBLE_QUOTE = "double_quote"
    SINGLE_QUOTE = "single_quote"
    OTHER = "other"


class GuardDisposition(Enum):
    """Whether guards enclosing a whole field are removed from the output."""

    KEEP = "keep"
    STRIP = "strip"


class TrimWhiteSpace(Enum):
    """Whitespace trimming applied to every output field."""

    LEAVE = "leave"
    TRIM_LEADING = "trim_leading"
    TRIM_TRAILING = "trim_trailing"
    TRIM_BOTH = "trim_both"


class LockState(Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"


class LockMethod(Enum):
    """How a `CSVParseEngine` came to be locked.

    Attributes:
        IS_UNLOCKED: Settings may still change.
        LOCKED_EXPLICITLY: The caller invoked ``lock()``.
        LOCKED_IMPLICITLY: The first ``parse()`` call locked the settings.
    """

    IS_UNLOCKED = "is_unlocked"
    LOCKED_EXPLICITLY = "locked_explicitly"
    LOCKED_IMPLICITLY = "locked_implicitly"


@dataclass(frozen=True)
class CharacterMapping:
    """One row of a symbolic-name lookup table.

    Attributes:
        symbol: Enum member naming the character.
        character: The literal character.
        display: Human readable name used in messages.
    """

    symbol: DelimiterChar | GuardChar
    character: str
    display: str


@dataclass
class ScanState:
    """Scanner state for the field currently being accumulated.

    Attributes:
        in_progress: At least one character has been seen since the last
            field boundary.
        inside_guard: An odd number of guard characters has been seen since
            the field began, so delimiters are protected.
        buffer: Raw characters of the current field.
    """

    in_progress: bool = False
    inside_guard: bool = False
    buffer: list[str] = field(default_factory=list)

    def reset(self) -> None:
        self.in_progress = False
        self.inside_guard = False
        self.buffer.clear()
