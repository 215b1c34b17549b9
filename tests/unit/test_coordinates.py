"""Tests for coordinate normalization, degree-minute conversion and formatting."""

import dataclasses
import math

import pytest

from navcore.geodesy.coordinates import (
    Coordinate,
    DegreeMinute,
    bearing_to_compass,
    clamp_latitude,
    compass_to_bearing,
    format_coordinates,
    format_latitude,
    format_longitude,
    normalize_bearing,
    normalize_longitude,
    to_decimal,
    to_degree_minute,
)


class TestCoordinate:
    """Coordinate must always hold normalized values."""

    def test_in_range_values_unchanged(self):
        c = Coordinate(45.123, -10.456)
        assert c.latitude == 45.123
        assert c.longitude == -10.456

    def test_latitude_clamped(self):
        assert Coordinate(95.0, 0.0).latitude == 90.0
        assert Coordinate(-120.0, 0.0).latitude == -90.0

    def test_longitude_wrapped(self):
        assert Coordinate(0.0, 190.0).longitude == pytest.approx(-170.0)
        assert Coordinate(0.0, -190.0).longitude == pytest.approx(170.0)
        assert Coordinate(0.0, 360.0).longitude == pytest.approx(0.0)

    def test_minus_180_becomes_180(self):
        assert Coordinate(0.0, -180.0).longitude == 180.0
        assert Coordinate(0.0, 540.0).longitude == 180.0

    def test_immutable(self):
        c = Coordinate(10.0, 20.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.latitude = 11.0

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            Coordinate(float('nan'), 0.0)

    def test_inf_rejected(self):
        with pytest.raises(ValueError):
            Coordinate(0.0, float('inf'))

    def test_radians(self):
        c = Coordinate(90.0, -180.0)
        assert c.lat_rad == pytest.approx(math.pi / 2)
        assert c.lon_rad == pytest.approx(math.pi)

    def test_equality_is_by_value(self):
        assert Coordinate(10.0, 20.0) == Coordinate(10.0, 20.0)
        assert Coordinate(0.0, 180.0) == Coordinate(0.0, -180.0)

    def test_str_uses_display_format(self):
        assert str(Coordinate(45.5, -10.25)) == "45°30.0'N, 10°15.0'W"


class TestNormalizationHelpers:

    def test_clamp_latitude(self):
        assert clamp_latitude(45.0) == 45.0
        assert clamp_latitude(90.0001) == 90.0

    @pytest.mark.parametrize("lon,expected", [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (181.0, -179.0),
        (-181.0, 179.0),
        (725.0, 5.0),
    ])
    def test_normalize_longitude(self, lon, expected):
        assert normalize_longitude(lon) == pytest.approx(expected)

    @pytest.mark.parametrize("bearing,expected", [
        (0.0, 0.0),
        (360.0, 0.0),
        (-90.0, 270.0),
        (450.0, 90.0),
        (-1e-17, 0.0),
    ])
    def test_normalize_bearing(self, bearing, expected):
        result = normalize_bearing(bearing)
        assert 0.0 <= result < 360.0
        assert result == pytest.approx(expected)


class TestToDecimal:

    def test_north(self):
        assert to_decimal(45, 30, 'N') == 45.5

    def test_west_is_negative(self):
        assert to_decimal(10, 15, 'W') == -10.25

    def test_south_is_negative(self):
        assert to_decimal(33, 54, 'S') == pytest.approx(-33.9)

    def test_hemisphere_case_insensitive(self):
        assert to_decimal(10, 30, 'e') == 10.5

    def test_sign_of_degrees_ignored(self):
        assert to_decimal(-10, 30, 'N') == 10.5

    def test_out_of_range_minutes_still_computed(self):
        assert to_decimal(45, 75, 'N') == 46.25

    def test_unknown_hemisphere(self):
        with pytest.raises(ValueError):
            to_decimal(45, 0, 'X')


class TestToDegreeMinute:

    def test_latitude(self):
        assert to_degree_minute(45.5) == DegreeMinute(45, 30.0, 'N')

    def test_negative_longitude(self):
        assert to_degree_minute(-10.25, 'lon') == DegreeMinute(10, 15.0, 'W')

    def test_zero_is_north_east(self):
        assert to_degree_minute(0.0).hemisphere == 'N'
        assert to_degree_minute(0.0, 'lon').hemisphere == 'E'

    def test_minutes_rounded_to_two_decimals(self):
        dm = to_degree_minute(51.916666666)
        assert dm.degrees == 51
        assert dm.minutes == 55.0

    def test_rounding_carries_into_degrees(self):
        dm = to_degree_minute(10.99999999)
        assert dm.degrees == 11
        assert dm.minutes == 0.0

    def test_unknown_axis(self):
        with pytest.raises(ValueError):
            to_degree_minute(10.0, 'alt')

    @pytest.mark.parametrize("value", [0.0, 45.5, -33.8688, 51.9167, -179.999, 89.123456, 0.0001])
    def test_round_trip_within_rounding(self, value):
        axis = 'lon' if abs(value) > 90 else 'lat'
        back = to_degree_minute(value, axis).to_decimal()
        assert abs(back - value) * 60 <= 0.01


class TestFormatting:

    def test_format_latitude(self):
        assert format_latitude(45.5) == "45°30.0'N"

    def test_format_southern_latitude(self):
        assert format_latitude(-33.9) == "33°54.0'S"

    def test_format_longitude(self):
        assert format_longitude(-10.25) == "10°15.0'W"

    def test_format_eastern_longitude(self):
        assert format_longitude(151.2093) == "151°12.6'E"

    def test_display_rounding_carries(self):
        assert format_latitude(51.9995) == "52°0.0'N"

    def test_format_coordinates(self):
        assert format_coordinates(40.5, -20.0) == "40°30.0'N, 20°0.0'W"


class TestCompass:

    @pytest.mark.parametrize("bearing,name", [
        (0, 'N'),
        (11.25, 'NNE'),
        (45, 'NE'),
        (90, 'E'),
        (180, 'S'),
        (225, 'SW'),
        (348.75, 'N'),
        (359, 'N'),
        (-90, 'W'),
    ])
    def test_bearing_to_compass(self, bearing, name):
        assert bearing_to_compass(bearing) == name

    @pytest.mark.parametrize("name,bearing", [
        ('N', 0.0),
        ('nne', 22.5),
        ('south', 180.0),
        ('northeast', 45.0),
        ('north-east', 45.0),
        ('North North East', 22.5),
        ('west', 270.0),
        ('SSW', 202.5),
    ])
    def test_compass_to_bearing(self, name, bearing):
        assert compass_to_bearing(name) == bearing

    def test_compass_round_trip(self):
        for i in range(16):
            assert compass_to_bearing(bearing_to_compass(i * 22.5)) == i * 22.5

    def test_unknown_compass_point(self):
        with pytest.raises(ValueError):
            compass_to_bearing('upwind')
