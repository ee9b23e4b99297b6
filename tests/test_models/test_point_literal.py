"""
Tests for the literal forms accepted as points.
"""

from collections import namedtuple

import pytest

from navgeo.exceptions import InvalidAngleError
from navgeo.models.geopoint import GeoPoint
from navgeo.models.point_literal import (
    ExistingPoint,
    GeoJsonPoint,
    PointMapping,
    PointPair,
    PointString,
    classify,
    to_point,
)

Waypoint = namedtuple('Waypoint', ['ident', 'latitude', 'longitude'])


class RoutePoint:
    def __init__(self, latitude, longitude):
        self.latitude = latitude
        self.longitude = longitude


class TestClassify:
    """Each input maps to exactly one literal form."""

    def test_pair(self):
        assert classify(1, 2) == PointPair(1, 2)
        assert classify('51N', '1W') == PointPair('51N', '1W')

    def test_string(self):
        assert classify('1, 2') == PointString('1, 2')

    def test_mapping(self):
        assert isinstance(classify({'lat': 1, 'lon': 2}), PointMapping)

    def test_geojson(self):
        literal = classify({'type': 'Point', 'coordinates': [2, 1]})
        assert literal == GeoJsonPoint([2, 1])

    def test_mapping_with_other_type_is_plain_mapping(self):
        assert isinstance(classify({'type': 'Feature', 'lat': 1, 'lon': 2}), PointMapping)

    def test_existing_point(self):
        point = GeoPoint(1, 2)
        assert classify(point) == ExistingPoint(point)

    def test_sequence(self):
        assert classify((1, 2)) == PointPair(1, 2)
        assert classify([1, 2]) == PointPair(1, 2)

    def test_object_with_coordinates(self):
        assert classify(RoutePoint(1, 2)) == PointPair(1, 2)

    def test_empty(self):
        with pytest.raises(InvalidAngleError, match='empty'):
            classify()

    def test_null(self):
        with pytest.raises(InvalidAngleError, match='null'):
            classify(None)
        with pytest.raises(InvalidAngleError, match='null'):
            classify(1, None)

    def test_too_many_arguments(self):
        with pytest.raises(InvalidAngleError):
            classify(1, 2, 3)

    @pytest.mark.parametrize('value', [42, 4.2, (1, 2, 3), object()])
    def test_unrecognized(self, value):
        with pytest.raises(InvalidAngleError):
            classify(value)


class TestResolve:
    """Test cases for building GeoPoints from literals."""

    def test_string_requires_two_parts(self):
        with pytest.raises(InvalidAngleError):
            PointString('1, 2, 3').resolve()

    def test_string_with_dms(self):
        point = PointString('51°28′40.37″N, 000°00′05.29″W').resolve()
        assert point.latitude == pytest.approx(51.47788, abs=1e-6)
        assert point.longitude == pytest.approx(-0.00147, abs=1e-6)

    def test_mapping_key_precedence(self):
        point = PointMapping({'latitude': 1, 'lat': 2, 'longitude': 3, 'lng': 4, 'lon': 5}).resolve()
        assert point.latitude == 2
        assert point.longitude == 5

    def test_mapping_long_keys(self):
        point = PointMapping({'latitude': '10', 'longitude': '20'}).resolve()
        assert (point.latitude, point.longitude) == (10, 20)

    def test_geojson_order_is_lon_lat(self):
        point = GeoJsonPoint([0.119, 52.205]).resolve()
        assert point.latitude == pytest.approx(52.205)
        assert point.longitude == pytest.approx(0.119)

    def test_geojson_needs_two_coordinates(self):
        with pytest.raises(InvalidAngleError):
            GeoJsonPoint([1]).resolve()

    def test_pair_is_wrapped(self):
        point = PointPair(91, 181).resolve()
        assert point.latitude == pytest.approx(89)
        assert point.longitude == pytest.approx(-179)

    def test_existing_point_is_not_copied(self):
        point = GeoPoint(1, 2)
        assert ExistingPoint(point).resolve() is point

    def test_object_with_extra_fields(self):
        point = to_point(Waypoint('EGLL', 51.4706, -0.461941))
        assert point.latitude == pytest.approx(51.4706)
        assert point.longitude == pytest.approx(-0.461941)
