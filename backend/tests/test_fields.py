from datetime import date, datetime

import pytest

from dialysis_records.database import _normalise_url
from dialysis_records.schemas.fields import (
    blank_to_none, clean_to_float, clean_to_int, to_plain_date, to_timestamp, yes_no_flag,
)


@pytest.mark.parametrize("raw,expected", [
    ("72 kg", 72.0),
    ("1.25", 1.25),
    (" 300ml/min ", 300.0),
    (65, 65.0),
    ("", None),
    ("abc", None),
    ("1.2.3", None),
    ("9" * 400, None),
    (float("inf"), None),
    (None, None),
    (True, None),
])
def test_clean_to_float(raw, expected):
    assert clean_to_float(raw) == expected


def test_clean_to_int_truncates():
    assert clean_to_int("12.7 sessions") == 12
    assert clean_to_int("none") is None
    assert clean_to_int("9" * 400) is None


@pytest.mark.parametrize("raw,expected", [
    ("2026-10-01", date(2026, 10, 1)),
    ("2026-10-01T00:00:00.000Z", date(2026, 10, 1)),
    ("2026-03-01T22:30:00-05:00", date(2026, 3, 2)),
    (datetime(2026, 1, 5, 23, 59), date(2026, 1, 5)),
    ("", None),
    ("next tuesday", None),
])
def test_to_plain_date(raw, expected):
    assert to_plain_date(raw) == expected


def test_to_timestamp():
    assert to_timestamp("2026-09-01T07:30:00") == datetime(2026, 9, 1, 7, 30)
    assert to_timestamp("not a time") is None


@pytest.mark.parametrize("raw,expected", [
    ("Y", True), ("yes", True), ("N", False), ("n", False), (False, False), (None, None),
])
def test_yes_no_flag(raw, expected):
    assert yes_no_flag(raw) is expected


def test_blank_to_none():
    assert blank_to_none("   ") is None
    assert blank_to_none(" RN ") == "RN"
    assert blank_to_none(5) == 5


def test_normalise_url():
    url = _normalise_url("postgres://clinic:pw@db.example.com:5432/crm_patient_db?sslmode=require")
    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.example.com"
    assert "sslmode" not in url.query
