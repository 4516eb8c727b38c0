from __future__ import annotations

import string

from hypothesis import assume, given
from hypothesis import strategies as st
from anycsv.engine import CSVParseEngine
from anycsv.models import GuardDisposition, TrimWhiteSpace
from anycsv.parser import parse, standard_csv_parse
from anycsv.transform import transform_whitespace

plain_text = st.text(alphabet=string.ascii_letters + string.digits + " \t;|")
csv_text = st.text(alphabet=string.ascii_letters + ' ,"\t')


@given(plain_text)
def test_text_without_delimiter_or_guard_is_single_field(text: str):
    assume(text)
    assert parse(text) == [text]


@given(st.lists(plain_text, min_size=1, max_size=10))
def test_joined_fields_round_trip_with_keep_and_leave(fields: list[str]):
    text = ",".join(fields)
    assume(text)

    assert parse(text, ",", '"', GuardDisposition.KEEP, TrimWhiteSpace.LEAVE) == fields


@given(st.text(alphabet="ab,"))
def test_field_count_is_delimiter_count_plus_one_without_guards(text: str):
    assume(text)
    assert len(parse(text)) == text.count(",") + 1


@given(csv_text)
def test_keep_and_leave_preserves_every_character(text: str):
    assume(text)
    fields = parse(text, ",", '"', GuardDisposition.KEEP, TrimWhiteSpace.LEAVE)

    assert ",".join(fields) == text


@given(csv_text)
def test_strip_only_removes_enclosing_guards(text: str):
    stripped = parse(text)
    kept = parse(text, guard_disposition=GuardDisposition.KEEP)

    assert len(stripped) == len(kept)
    for stripped_field, kept_field in zip(stripped, kept):
        if stripped_field != kept_field:
            assert kept_field[0] == kept_field[-1] == '"'
            assert kept_field[1:-1] == stripped_field


@given(st.text())
def test_trim_both_is_idempotent(text: str):
    once = transform_whitespace(text, TrimWhiteSpace.TRIM_BOTH)

    assert transform_whitespace(once, TrimWhiteSpace.TRIM_BOTH) == once


@given(csv_text)
def test_trim_both_equals_trim_leading_then_trailing(text: str):
    both = parse(text, whitespace=TrimWhiteSpace.TRIM_BOTH)
    stepwise = [
        transform_whitespace(field, TrimWhiteSpace.TRIM_TRAILING)
        for field in parse(text, whitespace=TrimWhiteSpace.TRIM_LEADING)
    ]

    assert both == stepwise


@given(st.text())
def test_parse_is_total_and_deterministic(text: str):
    result_one = standard_csv_parse(text)
    result_two = standard_csv_parse(text)

    assert result_one == result_two
    assert result_one


@given(st.lists(csv_text, max_size=10))
def test_locked_engine_matches_functional_parse(lines: list[str]):
    engine = CSVParseEngine(whitespace_disposition=TrimWhiteSpace.TRIM_TRAILING)

    for line in lines:
        assert engine.parse(line) == parse(line, whitespace=TrimWhiteSpace.TRIM_TRAILING)
