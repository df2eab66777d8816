"""HMS/DMS conversions and sexagesimal string parsing."""

import math

import pytest

from starpath.models import EquatorialCoordinate, GeodeticLocation
from starpath.sexagesimal import (
    coordinate_from_sexagesimal,
    dms_to_deg,
    hms_to_deg,
    location_from_dms,
    parse_dec,
    parse_ra,
    signed_dms_to_deg,
)


class TestHmsToDeg:
    def test_fireworks_ra(self):
        assert hms_to_deg(20, 35, 25) == pytest.approx(308.8541666666, abs=1e-9)

    def test_whole_hours(self):
        assert hms_to_deg(0, 0, 0) == 0.0
        assert hms_to_deg(6, 0, 0) == 90.0
        assert hms_to_deg(24, 0, 0) == 360.0

    def test_out_of_range_minutes_accepted(self):
        assert hms_to_deg(1, 75, 0) == pytest.approx(33.75)


class TestDmsToDeg:
    def test_fireworks_dec(self):
        assert dms_to_deg(60, 14, 47) == pytest.approx(60.2463888888, abs=1e-9)

    def test_sign_only_on_degrees(self):
        # minutes and seconds are added, not subtracted
        assert dms_to_deg(-10, 59, 55.2) == pytest.approx(-9.0013333333, abs=1e-9)


class TestSignedDmsToDeg:
    @pytest.mark.parametrize(
        "args, direction, expected",
        [
            ((42, 41, 1), "N", 42.6836111111),
            ((42, 41, 1), "S", -42.6836111111),
            ((71, 28, 16), "W", -71.4711111111),
            ((71, 28, 16), "e", 71.4711111111),
            ((-10, 59, 55.2), None, -10.9986666666),
            ((10, 59, 55.2), None, 10.9986666666),
        ],
    )
    def test_directions(self, args, direction, expected):
        assert signed_dms_to_deg(*args, direction=direction) == pytest.approx(expected, abs=1e-9)

    def test_unknown_direction(self):
        with pytest.raises(ValueError, match="compass direction"):
            signed_dms_to_deg(10, 0, 0, direction="X")


class TestParse:
    @pytest.mark.parametrize("text", ["20:35:25", "20 35 25", "20h35m25s"])
    def test_parse_ra(self, text):
        assert parse_ra(text) == pytest.approx(308.8541666666, abs=1e-9)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("60:14:47", 60.2463888888),
            ("+60 14 47", 60.2463888888),
            ("-10:59:55.2", -10.9986666666),
            ("-00:30:00", -0.5),
        ],
    )
    def test_parse_dec(self, text, expected):
        assert parse_dec(text) == pytest.approx(expected, abs=1e-9)

    def test_unparsable_is_nan(self):
        assert math.isnan(parse_ra("not an angle"))
        assert math.isnan(parse_dec("north-ish"))


class TestBuilders:
    def test_coordinate(self):
        coord = coordinate_from_sexagesimal((20, 35, 25), (60, 14, 47))
        assert isinstance(coord, EquatorialCoordinate)
        assert coord.ra == pytest.approx(308.8541666666, abs=1e-9)
        assert coord.dec == pytest.approx(60.2463888888, abs=1e-9)

    def test_coordinate_southern(self):
        coord = coordinate_from_sexagesimal((13, 42, 32.13), (10, 59, 55.2), dec_direction="S")
        assert coord.dec == pytest.approx(-10.9986666666, abs=1e-9)

    def test_location(self):
        loc = location_from_dms((42, 41, 1), "N", (71, 28, 16), "W")
        assert isinstance(loc, GeodeticLocation)
        assert loc.latitude == pytest.approx(42.6836111111, abs=1e-9)
        assert loc.longitude == pytest.approx(-71.4711111111, abs=1e-9)
