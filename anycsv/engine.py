"""Reusable parser with settings that freeze on first use."""

from __future__ import annotations

import logging
import threading

from .config import ParserConfig, normalize_config
from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_GUARD,
    DEFAULT_GUARD_DISPOSITION,
    DEFAULT_WHITESPACE,
)
from .exceptions import ConfigurationError, InvalidOptionError, SettingsLockedError
from .lookup import (
    char_to_delimiter,
    char_to_guard,
    describe_character,
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
from .parser import parse

_logger = logging.getLogger(__name__)


def _same_character_error(delimiter: str, guard: str) -> ConfigurationError:
    return ConfigurationError(
        f"The field delimiter, {describe_character(delimiter)}, and the delimiter guard, "
        f"{describe_character(guard)}, must be different characters",
        delimiter=delimiter,
        guard=guard,
    )


class CSVParseEngine:
    """Parser holding one validated set of settings for repeated use.

    Settings may be changed until the engine is locked, either explicitly
    with `lock` or implicitly by the first call to `parse`. A locked engine
    never unlocks, so a sequence of parses sharing one engine always applies
    the same settings.

    Args:
        delimiter: Field delimiter, as a character, `DelimiterChar` or name.
        guard: Guard character, as a character, `GuardChar` or name.
        guard_disposition: Whether guards enclosing a whole field are removed.
        whitespace_disposition: Trimming applied to each field.

    Raises:
        ConfigurationError: If the delimiter and guard are the same character
            or either cannot be resolved.
        InvalidOptionError: If a disposition is not a member of its enum.

    Examples:
        engine = CSVParseEngine(DelimiterChar.TAB, GuardChar.SINGLE_QUOTE)
        for line in lines:
            fields = engine.parse(line)
    """

    def __init__(
        self,
        delimiter: str | DelimiterChar = DEFAULT_DELIMITER,
        guard: str | GuardChar = DEFAULT_GUARD,
        guard_disposition: GuardDisposition = DEFAULT_GUARD_DISPOSITION,
        whitespace_disposition: TrimWhiteSpace = DEFAULT_WHITESPACE,
    ):
        delimiter = resolve_delimiter(delimiter)
        guard = resolve_guard(guard)
        if delimiter == guard:
            raise _same_character_error(delimiter, guard)

        self._delimiter = delimiter
        self._guard = guard
        self._guard_disposition = _checked_guard_disposition(guard_disposition)
        self._whitespace_disposition = _checked_whitespace(whitespace_disposition)
        self._lock_state = LockState.UNLOCKED
        self._lock_method = LockMethod.IS_UNLOCKED

        # Settings and lock state share one lock; the first-parse transition
        # has its own so that parsing never runs under the settings lock.
        self._settings_lock = threading.RLock()
        self._parsing_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ParserConfig) -> CSVParseEngine:
        """Build an engine from a loaded `ParserConfig`.

        Examples:
            engine = CSVParseEngine.from_config(build_config(Path.cwd()))
        """
        config = normalize_config(config)
        return cls(
            config.delimiter,
            config.guard,
            GuardDisposition(config.guard_disposition),
            TrimWhiteSpace(config.whitespace),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CSVParseEngine):
            return NotImplemented
        return self._settings() == other._settings()

    # Settings stay mutable until the engine is locked.
    __hash__ = None

    def _settings(self) -> tuple[str, str, GuardDisposition, TrimWhiteSpace]:
        with self._settings_lock:
            return (
                self._delimiter,
                self._guard,
                self._guard_disposition,
                self._whitespace_disposition,
            )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(delimiter={self._delimiter!r}, guard={self._guard!r}, "
            f"guard_disposition={self._guard_disposition}, "
            f"whitespace_disposition={self._whitespace_disposition}, "
            f"lock_method={self._lock_method})"
        )

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @delimiter.setter
    def delimiter(self, value: str | DelimiterChar) -> None:
        value = resolve_delimiter(value)
        with self._settings_lock:
            self._ensure_unlocked("delimiter")
            if value == self._guard:
                raise _same_character_error(value, self._guard)
            self._delimiter = value

    @property
    def guard(self) -> str:
        return self._guard

    @guard.setter
    def guard(self, value: str | GuardChar) -> None:
        value = resolve_guard(value)
        with self._settings_lock:
            self._ensure_unlocked("guard")
            if value == self._delimiter:
                raise _same_character_error(self._delimiter, value)
            self._guard = value

    @property
    def delimiter_char(self) -> DelimiterChar:
        """Symbolic name of the delimiter, `DelimiterChar.OTHER` when it has none."""
        return char_to_delimiter(self._delimiter)

    @property
    def guard_char(self) -> GuardChar:
        """Symbolic name of the guard, `GuardChar.OTHER` when it has none."""
        return char_to_guard(self._guard)

    @property
    def guard_disposition(self) -> GuardDisposition:
        return self._guard_disposition

    @guard_disposition.setter
    def guard_disposition(self, value: GuardDisposition) -> None:
        with self._settings_lock:
            self._ensure_unlocked("guard_disposition")
            self._guard_disposition = _checked_guard_disposition(value)

    @property
    def whitespace_disposition(self) -> TrimWhiteSpace:
        return self._whitespace_disposition

    @whitespace_disposition.setter
    def whitespace_disposition(self, value: TrimWhiteSpace) -> None:
        with self._settings_lock:
            self._ensure_unlocked("whitespace_disposition")
            self._whitespace_disposition = _checked_whitespace(value)

    @property
    def lock_state(self) -> LockState:
        with self._settings_lock:
            return self._lock_state

    @property
    def lock_method(self) -> LockMethod:
        """How the engine was locked; for diagnostics only."""
        with self._settings_lock:
            return self._lock_method

    @property
    def settings_locked(self) -> bool:
        return self.lock_state is LockState.LOCKED

    def lock(self) -> None:
        """Freeze the settings. Locking a locked engine does nothing."""
        self._lock(LockMethod.LOCKED_EXPLICITLY)

    def parse(self, text: str | None) -> list[str]:
        """Parse `text` with the engine's settings, locking them first.

        Args:
            text: String to split.

        Returns:
            list[str]: Fields in the order they occur in `text`.

        Examples:
            CSVParseEngine().parse("a,b")  # ['a', 'b']
        """
        with self._parsing_lock:
            if self._lock_method is LockMethod.IS_UNLOCKED:
                self._lock(LockMethod.LOCKED_IMPLICITLY)

        return parse(
            text,
            self._delimiter,
            self._guard,
            self._guard_disposition,
            self._whitespace_disposition,
        )

    def _lock(self, method: LockMethod) -> None:
        with self._settings_lock:
            if self._lock_state is LockState.LOCKED:
                return
            self._lock_state = LockState.LOCKED
            self._lock_method = method
        _logger.debug("Settings locked (%s): %r", method.value, self)

    def _ensure_unlocked(self, setting: str) -> None:
        if self._lock_state is LockState.LOCKED:
            raise SettingsLockedError(setting, delimiter=self._delimiter, guard=self._guard)


def _checked_guard_disposition(value: object) -> GuardDisposition:
    if not isinstance(value, GuardDisposition):
        raise InvalidOptionError("guard_disposition", value)
    return value


def _checked_whitespace(value: object) -> TrimWhiteSpace:
    if not isinstance(value, TrimWhiteSpace):
        raise InvalidOptionError("whitespace_disposition", value)
    return value
