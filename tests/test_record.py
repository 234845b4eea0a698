from datetime import timedelta

import pytest

from scribbleutil.record import Record


def test_defaults():
    record = Record()
    assert record.source == "P"
    assert record.love is False
    assert record.length == timedelta(0)
    assert record.album == ""


def test_empty_record_is_not_defined():
    assert Record().is_defined() is False


@pytest.mark.parametrize(
    "artist, track, expected",
    [
        ("Artist", "Title", True),
        ("Artist", "", False),
        ("", "Title", False),
    ],
)
def test_is_defined(artist, track, expected):
    assert Record(artist=artist, track=track).is_defined() is expected


def test_other_fields_do_not_make_it_defined():
    record = Record(album="Album", number="3", mbid="abc", length=timedelta(seconds=200))
    assert record.is_defined() is False


def test_fields_are_kept():
    record = Record(artist="A", track="T", love=True, source="R", length=timedelta(seconds=61))
    assert record.love is True
    assert record.source == "R"
    assert record.length.total_seconds() == 61
    assert record.is_defined() is True