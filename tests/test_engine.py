from __future__ import annotations

import threading

import pytest

from anycsv.config import ParserConfig
from anycsv.engine import CSVParseEngine
from anycsv.exceptions import ConfigurationError, InvalidOptionError, SettingsLockedError
from anycsv.models import (
    DelimiterChar,
    GuardChar,
    GuardDisposition,
    LockMethod,
    LockState,
    TrimWhiteSpace,
)


def test_defaults():
    engine = CSVParseEngine()

    assert engine.delimiter == ","
    assert engine.guard == '"'
    assert engine.delimiter_char is DelimiterChar.COMMA
    assert engine.guard_char is GuardChar.DOUBLE_QUOTE
    assert engine.guard_disposition is GuardDisposition.STRIP
    assert engine.whitespace_disposition is TrimWhiteSpace.LEAVE
    assert engine.lock_state is LockState.UNLOCKED
    assert engine.lock_method is LockMethod.IS_UNLOCKED
    assert engine.settings_locked is False


def test_constructor_accepts_symbols():
    engine = CSVParseEngine(DelimiterChar.TAB, GuardChar.BACK_QUOTE)

    assert engine.delimiter == "\t"
    assert engine.guard == "`"


def test_unlisted_characters_report_other():
    engine = CSVParseEngine(";", "~")

    assert engine.delimiter_char is DelimiterChar.OTHER
    assert engine.guard_char is GuardChar.OTHER


def test_constructor_rejects_equal_delimiter_and_guard():
    with pytest.raises(ConfigurationError) as excinfo:
        CSVParseEngine("'", GuardChar.SINGLE_QUOTE)

    error = excinfo.value
    assert error.delimiter == "'"
    assert error.guard == "'"
    assert error.delimiter_code == 0x27
    assert error.guard_code == 0x27
    assert "Single Quote (')" in str(error)


def test_constructor_rejects_invalid_dispositions():
    with pytest.raises(InvalidOptionError):
        CSVParseEngine(guard_disposition="keep")
    with pytest.raises(InvalidOptionError):
        CSVParseEngine(whitespace_disposition=None)


def test_setting_delimiter_equal_to_guard_fails():
    engine = CSVParseEngine()

    with pytest.raises(ConfigurationError) as excinfo:
        engine.delimiter = '"'

    assert not isinstance(excinfo.value, SettingsLockedError)
    assert engine.delimiter == ","


def test_setting_guard_equal_to_delimiter_fails():
    engine = CSVParseEngine(DelimiterChar.VERTICAL_BAR)

    with pytest.raises(ConfigurationError):
        engine.guard = "|"

    assert engine.guard == '"'


def test_settings_are_mutable_before_lock():
    engine = CSVParseEngine()

    engine.delimiter = DelimiterChar.TAB
    engine.guard = "'"
    engine.guard_disposition = GuardDisposition.KEEP
    engine.whitespace_disposition = TrimWhiteSpace.TRIM_BOTH

    assert engine.parse(" 'a\tb' \t c ") == ["'a\tb'", "c"]


def test_swapping_delimiter_and_guard_requires_intermediate_value():
    engine = CSVParseEngine(",", '"')

    engine.delimiter = ";"
    engine.guard = ","
    engine.delimiter = '"'

    assert (engine.delimiter, engine.guard) == ('"', ",")


def test_explicit_lock_blocks_every_setter():
    engine = CSVParseEngine()
    engine.lock()

    assert engine.lock_state is LockState.LOCKED
    assert engine.lock_method is LockMethod.LOCKED_EXPLICITLY
    assert engine.settings_locked is True

    with pytest.raises(SettingsLockedError):
        engine.delimiter = ";"
    with pytest.raises(SettingsLockedError):
        engine.guard = "'"
    with pytest.raises(SettingsLockedError):
        engine.guard_disposition = GuardDisposition.KEEP
    with pytest.raises(SettingsLockedError) as excinfo:
        engine.whitespace_disposition = TrimWhiteSpace.TRIM_BOTH

    assert excinfo.value.setting == "whitespace_disposition"
    assert isinstance(excinfo.value, ConfigurationError)


def test_lock_is_idempotent():
    engine = CSVParseEngine()

    engine.lock()
    engine.lock()

    assert engine.lock_method is LockMethod.LOCKED_EXPLICITLY


def test_first_parse_locks_implicitly():
    engine = CSVParseEngine()

    assert engine.parse("a,b") == ["a", "b"]
    assert engine.lock_state is LockState.LOCKED
    assert engine.lock_method is LockMethod.LOCKED_IMPLICITLY

    with pytest.raises(SettingsLockedError):
        engine.delimiter = ";"

    assert engine.parse("c,d") == ["c", "d"]


def test_explicit_lock_after_parse_keeps_implicit_method():
    engine = CSVParseEngine()
    engine.parse("")

    engine.lock()

    assert engine.lock_method is LockMethod.LOCKED_IMPLICITLY


def test_parse_after_explicit_lock_keeps_explicit_method():
    engine = CSVParseEngine()
    engine.lock()

    engine.parse("a")

    assert engine.lock_method is LockMethod.LOCKED_EXPLICITLY


def test_parse_uses_held_settings():
    engine = CSVParseEngine(
        DelimiterChar.SPACE,
        GuardChar.SINGLE_QUOTE,
        GuardDisposition.STRIP,
        TrimWhiteSpace.LEAVE,
    )

    assert engine.parse("one 'two three' four") == ["one", "two three", "four"]


def test_from_config_resolves_names():
    config = ParserConfig(
        delimiter="vertical_bar",
        guard="BackQuote",
        guard_disposition="Keep",
        whitespace="trim-both",
    )

    engine = CSVParseEngine.from_config(config)

    assert engine.delimiter == "|"
    assert engine.guard == "`"
    assert engine.guard_disposition is GuardDisposition.KEEP
    assert engine.whitespace_disposition is TrimWhiteSpace.TRIM_BOTH
    assert engine.lock_method is LockMethod.IS_UNLOCKED


def test_concurrent_first_parses_lock_once():
    engine = CSVParseEngine()
    barrier = threading.Barrier(8)
    results: list[list[str]] = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        fields = engine.parse('a,"b,c",d')
        with results_lock:
            results.append(fields)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [["a", "b,c", "d"]] * 8
    assert engine.lock_method is LockMethod.LOCKED_IMPLICITLY


def test_repr_mentions_settings():
    text = repr(CSVParseEngine("|", "'"))

    assert "delimiter='|'" in text
    assert "guard=\"'\"" in text


def test_engines_with_same_settings_are_equal():
    assert CSVParseEngine("|", "'") == CSVParseEngine(DelimiterChar.VERTICAL_BAR, "SingleQuote")
    assert CSVParseEngine() != CSVParseEngine(whitespace_disposition=TrimWhiteSpace.TRIM_BOTH)
    assert CSVParseEngine() != CSVParseEngine(guard_disposition=GuardDisposition.KEEP)
    assert CSVParseEngine(";") != CSVParseEngine(",")


def test_equality_ignores_lock_state():
    locked = CSVParseEngine()
    locked.lock()

    assert locked == CSVParseEngine()


def test_equality_follows_setting_changes():
    engine = CSVParseEngine()
    other = CSVParseEngine("|")
    assert engine != other

    engine.delimiter = "|"

    assert engine == other


def test_engine_does_not_equal_other_types():
    engine = CSVParseEngine()

    assert engine != ","
    assert engine.__eq__((",", '"')) is NotImplemented


def test_engine_is_unhashable():
    with pytest.raises(TypeError):
        hash(CSVParseEngine())
