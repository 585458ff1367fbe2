"""Tests for row and clock-face view models."""

import math
from datetime import UTC, datetime

import pytest

from clockzones import project
from clockzones.views import (
    BLACK,
    BLUE,
    WHITE,
    WHITE_80,
    CatalogRow,
    Palette,
    TimezoneRow,
    build_face,
    roman_numeral,
)

NOON = datetime(2022, 1, 1, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("number", "numeral"),
    [(1, "I"), (4, "IV"), (8, "VIII"), (9, "IX"), (12, "XII"), (0, ""), (13, "")],
)
def test_roman_numeral(number, numeral):
    assert roman_numeral(number) == numeral


def test_timezone_row(kolkata):
    row = TimezoneRow.build(kolkata, project(NOON, kolkata.offset_hours))
    assert row == TimezoneRow(digital="17:30", name="India Standard Time", utc_label="UTC: +5:30")


def test_catalog_row(catalog):
    assert CatalogRow.build(catalog[0]) == CatalogRow(
        name="Pacific Standard Time", utc_label="UTC: -8:00"
    )


def test_day_palette():
    palette = Palette.for_time(True)
    assert palette.background == WHITE
    assert palette.stroke == BLACK
    assert palette.hour_hand == BLACK
    assert palette.minute_hand == BLACK
    assert palette.second_hand == BLUE


def test_night_palette():
    palette = Palette.for_time(False)
    assert palette.background == BLACK
    assert palette.numerals == WHITE
    assert palette.minute_hand == WHITE_80
    assert palette.second_hand == BLUE


def test_face_palette_follows_projected_hour():
    assert build_face(project(NOON, 0), radius=100).palette.background == WHITE
    assert build_face(project(NOON, 9), radius=100).palette.background == BLACK


def test_markers_arabic():
    face = build_face(project(NOON, 0), radius=100)
    assert [m.label for m in face.markers] == [str(i) for i in range(1, 13)]


def test_markers_roman():
    face = build_face(project(NOON, 0), radius=100, roman=True)
    assert face.markers[-1].label == "XII"
    assert face.markers[3].label == "IV"


def test_marker_positions():
    face = build_face(project(NOON, 0), radius=100)
    twelve = face.markers[11]
    three = face.markers[2]
    six = face.markers[5]
    assert (twelve.x, twelve.y) == (pytest.approx(100), pytest.approx(20))
    assert (three.x, three.y) == (pytest.approx(180), pytest.approx(100))
    assert (six.x, six.y) == (pytest.approx(100), pytest.approx(180))
    for marker in face.markers:
        assert math.hypot(marker.x - 100, marker.y - 100) == pytest.approx(80)


def test_hands_carry_projected_angles():
    projected = project(datetime(2022, 1, 1, 3, 15, 30, tzinfo=UTC), 0)
    face = build_face(projected, radius=100)
    assert face.hand("hour").angle == projected.hour_angle
    assert face.hand("minute").angle == projected.minute_angle
    assert face.hand("second").angle == projected.second_angle
    assert face.hand("pendulum") is None


def test_hand_geometry():
    face = build_face(project(NOON, 0), radius=200)
    hour, minute, second = face.hands
    assert (hour.length, hour.width) == (pytest.approx(100), 6)
    assert (minute.length, minute.width) == (pytest.approx(140), 4)
    assert (second.length, second.width) == (pytest.approx(170), 2)
    assert second.color == BLUE
