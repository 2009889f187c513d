from datetime import UTC, datetime, timedelta, timezone

import pytest

from guards.primitives import (
    is_date,
    is_date_like,
    is_iso_date_string,
    is_non_empty_array,
    is_non_empty_string,
    is_object,
    is_string_array,
    is_valid_email,
    is_valid_url,
    to_datetime,
    to_iso_string,
    within_depth,
)
from tests.conftest import FakeTimestamp


@pytest.mark.parametrize("value", [{}, {"a": 1}])
def test_is_object_accepts_mappings(value):
    assert is_object(value)


@pytest.mark.parametrize("value", [None, [], "x", 3, True, ({},)])
def test_is_object_rejects_everything_else(value):
    assert not is_object(value)


def test_string_array():
    assert is_string_array([])
    assert is_string_array(["a", "b"])
    assert not is_string_array(["a", 1])
    assert not is_string_array(("a",))
    assert not is_string_array("abc")
    assert not is_string_array(None)


def test_non_empty_array_ignores_element_types():
    assert not is_non_empty_array([])
    assert is_non_empty_array([None])
    assert is_non_empty_array([1, "a"])
    assert not is_non_empty_array({"a": 1})


def test_non_empty_string():
    assert is_non_empty_string("a")
    assert is_non_empty_string("  a ")
    assert not is_non_empty_string("")
    assert not is_non_empty_string(" \t\n")
    assert not is_non_empty_string(1)


def test_valid_url_is_a_prefix_check():
    assert is_valid_url("https://example.com")
    assert is_valid_url("http://x")
    assert not is_valid_url("ftp://example.com")
    assert not is_valid_url("not a url")
    assert not is_valid_url("https://")
    assert not is_valid_url(None)


def test_valid_email():
    assert is_valid_email("me@example.com")
    assert not is_valid_email("me@example")
    assert not is_valid_email("me @example.com")
    assert not is_valid_email("me@example.com\n")
    assert not is_valid_email("@example.com")
    assert not is_valid_email(42)


def test_iso_date_string_requires_canonical_form():
    assert is_iso_date_string("2024-01-01T00:00:00.000Z")
    assert is_iso_date_string("1999-12-31T23:59:59.999Z")
    assert not is_iso_date_string("2024-01-01")
    assert not is_iso_date_string("2024-01-01T00:00:00Z")
    assert not is_iso_date_string("2024-01-01T00:00:00.000+00:00")
    assert not is_iso_date_string("2024-01-01T00:00:00.000000Z")
    assert not is_iso_date_string("2024-02-30T00:00:00.000Z")
    assert not is_iso_date_string("garbage")
    assert not is_iso_date_string(None)


def test_to_iso_string_round_trips():
    value = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)
    rendered = to_iso_string(value)
    assert rendered == "2024-05-06T07:08:09.123Z"
    assert is_iso_date_string(rendered)


def test_date_like_accepts_both_representations():
    assert is_date(datetime.now(UTC))
    assert is_date_like(datetime.now(UTC))
    assert is_date_like(FakeTimestamp(0))


class _NoConverter:
    seconds = 1
    nanoseconds = 0


class _BoolSeconds(FakeTimestamp):
    def __init__(self):
        super().__init__(0)
        self.seconds = True


@pytest.mark.parametrize(
    "value",
    [None, "2024-01-01T00:00:00.000Z", 1709296200, {"seconds": 1, "nanoseconds": 0},
     _NoConverter(), _BoolSeconds()],
)
def test_date_like_rejects(value):
    assert not is_date_like(value)


def test_to_datetime_normalizes_to_utc():
    naive = datetime(2024, 1, 1, 9, 0)
    assert to_datetime(naive) == datetime(2024, 1, 1, 9, 0, tzinfo=UTC)

    offset = datetime(2024, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=2)))
    converted = to_datetime(offset)
    assert converted.tzinfo == UTC
    assert converted.hour == 7

    from_timestamp = to_datetime(FakeTimestamp(1704067200, 500_000_000))
    assert from_timestamp == datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=UTC)


def test_to_datetime_falls_back_to_raw_fields():
    class Odd(FakeTimestamp):
        def to_datetime(self):
            return "not a datetime"

    assert to_datetime(Odd(0)) == datetime(1970, 1, 1, tzinfo=UTC)


def test_to_datetime_rejects_non_dates():
    with pytest.raises(TypeError):
        to_datetime("2024-01-01")


def test_within_depth():
    assert within_depth("scalar", 1)
    assert within_depth({"a": 1}, 1)
    assert not within_depth({"a": {"b": 1}}, 1)
    assert within_depth({"a": [{"b": 1}]}, 3)
    assert not within_depth({"a": [{"b": 1}]}, 2)


def test_within_depth_allows_shared_references_but_not_cycles():
    shared = ["x"]
    assert within_depth({"a": shared, "b": shared}, 5)

    cyclic: dict = {}
    cyclic["self"] = cyclic
    assert not within_depth(cyclic, 100)


def test_within_depth_walks_deep_nesting_without_recursing():
    nested: list = []
    for _ in range(4999):
        nested = [nested]

    assert within_depth(nested, 5000)
    assert not within_depth(nested, 4999)
