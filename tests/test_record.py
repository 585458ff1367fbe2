"""Tests for TimezoneRecord."""

import dataclasses
import uuid

import pytest

from clockzones import TimezoneRecord
from clockzones.record import join_utc, split_utc


def test_defaults():
    record = TimezoneRecord(value="Somewhere")
    assert record.abbreviation == ""
    assert record.offset_hours == 0.0
    assert record.observes_dst is False
    assert record.description == ""
    assert record.utc_identifiers == ()
    assert isinstance(record.id, uuid.UUID)


def test_ids_are_unique():
    assert TimezoneRecord(value="a").id != TimezoneRecord(value="a").id


def test_immutable(tokyo):
    with pytest.raises(dataclasses.FrozenInstanceError):
        tokyo.id = uuid.uuid4()  # type: ignore[misc]


def test_utc_is_joined_with_comma_space():
    record = TimezoneRecord(value="x", utc_identifiers=("America/Sao_Paulo", "America/Rio_Branco"))
    assert record.utc == "America/Sao_Paulo, America/Rio_Branco"


def test_to_row(tokyo):
    row = tokyo.to_row()
    assert row == {
        "id": str(tokyo.id),
        "value": "Tokyo Standard Time",
        "abbr": "TST",
        "offset": 9,
        "isdst": False,
        "text": "(UTC+09:00) Osaka, Sapporo, Tokyo",
        "utc": "Asia/Tokyo",
    }


def test_from_row_restores_record(kolkata):
    assert TimezoneRecord.from_row(kolkata.to_row()) == kolkata


def test_from_row_coerces_sqlite_types():
    row = {
        "id": "0b6f3c9e-6f5b-4c61-9d1c-1f6a3c2a7d10",
        "value": "Nepal Standard Time",
        "abbr": "NST",
        "offset": 5.75,
        "isdst": 0,
        "text": "(UTC+05:45) Kathmandu",
        "utc": "Asia/Kathmandu",
    }
    record = TimezoneRecord.from_row(row)
    assert record.id == uuid.UUID("0b6f3c9e-6f5b-4c61-9d1c-1f6a3c2a7d10")
    assert record.observes_dst is False
    assert record.utc_identifiers == ("Asia/Kathmandu",)


def test_split_utc():
    assert split_utc("America/Sao_Paulo, America/Rio_Branco") == (
        "America/Sao_Paulo",
        "America/Rio_Branco",
    )


def test_split_utc_tolerates_loose_input():
    assert split_utc(" Europe/Paris,Europe/Madrid ,, ") == ("Europe/Paris", "Europe/Madrid")


def test_split_utc_empty():
    assert split_utc("") == ()


def test_join_utc():
    assert join_utc(["a", "b", "c"]) == "a, b, c"
    assert join_utc([]) == ""
