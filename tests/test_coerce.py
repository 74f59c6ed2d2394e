"""Tests for request field coercion."""

from datetime import date, datetime, timezone

import pytest

from mediadesk.core.coerce import blank_to_none, parse_date, parse_int


class TestBlankToNone:
    def test_blank_values(self):
        assert blank_to_none(None) is None
        assert blank_to_none("") is None
        assert blank_to_none("   ") is None

    def test_text_kept(self):
        assert blank_to_none(" a ") == " a "


class TestParseDate:
    def test_empty_is_none(self):
        assert parse_date("") is None
        assert parse_date(None) is None

    def test_iso_date(self):
        assert parse_date("1994-03-12") == date(1994, 3, 12)

    def test_utc_datetime(self):
        assert parse_date("1994-03-12T00:00:00.000Z") == date(1994, 3, 12)

    def test_offset_converted_to_utc(self):
        assert parse_date("1990-05-01T23:30:00-02:00") == date(1990, 5, 2)

    def test_date_and_datetime_objects(self):
        assert parse_date(date(2000, 1, 2)) == date(2000, 1, 2)
        assert parse_date(datetime(2000, 1, 2, 23, tzinfo=timezone.utc)) == date(2000, 1, 2)

    def test_garbage_raises(self):
        with pytest.raises(ValueError, match="dateOfBirth"):
            parse_date("yesterday", "dateOfBirth")


class TestParseInt:
    def test_empty_is_none(self):
        assert parse_int(None) is None
        assert parse_int("") is None

    def test_numbers_and_text(self):
        assert parse_int(5) == 5
        assert parse_int(5.0) == 5
        assert parse_int(" 12 ") == 12
        assert parse_int("90.0") == 90

    @pytest.mark.parametrize("value", ["abc", "1.5", 2.5, True])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError):
            parse_int(value, "views")
