import re

from toolbelt import timestamp


def test_to_string_matches_iso_pattern():
    text = timestamp.to_string(timestamp.now())
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", text)


def test_round_trip_whole_seconds():
    stamp = 1_700_000_000
    assert timestamp.from_string(timestamp.to_string(stamp)) == stamp


def test_from_string_malformed_is_none():
    assert timestamp.from_string("yesterday") is None
    assert timestamp.from_string("2024-13-01T00:00:00Z") is None


def test_from_string_outside_local_range_is_none():
    assert timestamp.from_string("0001-01-01T00:00:00Z") is None


def test_to_string_out_of_range_is_none():
    assert timestamp.to_string(1e20) is None
