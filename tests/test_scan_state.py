from anycsv.models import GuardDisposition, ScanState, TrimWhiteSpace
from anycsv.parser import (
    _consume_guard,
    _consume_ordinary,
    _flush_field,
    _try_protect_delimiter,
)


def test_consume_ordinary_marks_field_in_progress():
    state = ScanState()

    _consume_ordinary(state, "a")

    assert state.in_progress is True
    assert state.inside_guard is False
    assert state.buffer == ["a"]


def test_consume_guard_toggles_protection_and_keeps_guard():
    state = ScanState()

    _consume_guard(state, '"')
    assert state.inside_guard is True
    assert state.in_progress is True

    _consume_guard(state, '"')
    assert state.inside_guard is False
    assert state.buffer == ['"', '"']


def test_try_protect_delimiter_only_inside_guard():
    state = ScanState()

    assert _try_protect_delimiter(state, ",") is False
    assert state.buffer == []

    state.inside_guard = True
    assert _try_protect_delimiter(state, ",") is True
    assert state.buffer == [","]
    assert state.inside_guard is True


def test_flush_field_transforms_and_resets():
    state = ScanState(in_progress=True, inside_guard=True, buffer=list('" a "'))

    field = _flush_field(state, '"', GuardDisposition.STRIP, TrimWhiteSpace.TRIM_BOTH)

    assert field == "a"
    assert state == ScanState()
