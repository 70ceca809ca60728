from datetime import datetime, timedelta

from codeblog.dates import parse_date, relative_date

NOW = datetime(2024, 6, 1, 12, 0, 0)


def test_parse_iso_date():
    assert parse_date("2024-03-01") == datetime(2024, 3, 1)
    assert parse_date(" 2024-03-01T10:30:00 ") == datetime(2024, 3, 1, 10, 30)


def test_parse_converts_offsets_to_utc():
    assert parse_date("2024-03-01T10:00:00+02:00") == datetime(2024, 3, 1, 8, 0)


def test_parse_other_formats():
    assert parse_date("March 1, 2024") == datetime(2024, 3, 1)
    assert parse_date("2024/03/01") == datetime(2024, 3, 1)


def test_parse_invalid_or_empty():
    assert parse_date("") is None
    assert parse_date("not a date") is None
    assert parse_date("2024-13-45") is None


def test_relative_date_past():
    assert relative_date(NOW - timedelta(seconds=10), NOW) == "a few seconds ago"
    assert relative_date(NOW - timedelta(minutes=1), NOW) == "a minute ago"
    assert relative_date(NOW - timedelta(minutes=5), NOW) == "5 minutes ago"
    assert relative_date(NOW - timedelta(hours=1), NOW) == "an hour ago"
    assert relative_date(NOW - timedelta(hours=3), NOW) == "3 hours ago"
    assert relative_date(NOW - timedelta(days=1), NOW) == "a day ago"
    assert relative_date(NOW - timedelta(days=4), NOW) == "4 days ago"
    assert relative_date(NOW - timedelta(days=30), NOW) == "a month ago"
    assert relative_date(NOW - timedelta(days=92), NOW) == "3 months ago"
    assert relative_date(NOW - timedelta(days=400), NOW) == "a year ago"
    assert relative_date(NOW - timedelta(days=365 * 3), NOW) == "3 years ago"


def test_relative_date_future():
    assert relative_date(NOW + timedelta(days=4), NOW) == "in 4 days"


def test_relative_date_without_date():
    assert relative_date(None, NOW) == ""


def test_relative_date_rounds_halves_up():
    assert relative_date(NOW - timedelta(seconds=150), NOW) == "3 minutes ago"
    assert relative_date(NOW - timedelta(minutes=150), NOW) == "3 hours ago"
    assert relative_date(NOW - timedelta(hours=60), NOW) == "3 days ago"


def test_parse_trailing_z_as_utc():
    assert parse_date("2024-03-01T10:00:00Z") == datetime(2024, 3, 1, 10, 0)
    assert parse_date("2024-03-01T10:00:00z") == datetime(2024, 3, 1, 10, 0)
