import math
import pytest

from navgeo.exceptions import InvalidAngleError, InvalidFormatError
from navgeo.models.geopoint import GeoPoint


class TestGeoPointConstruction:
    """Coordinates are normalized on construction and assignment."""

    def test_in_range(self):
        point = GeoPoint(52.205, 0.119, 'Cambridge')
        assert point.latitude == 52.205
        assert point.longitude == 0.119
        assert point.name == 'Cambridge'

    def test_out_of_range_is_wrapped(self):
        point = GeoPoint(91, 181)
        assert point.latitude == pytest.approx(89)
        assert point.longitude == pytest.approx(-179)

    def test_deg_min_sec_text(self):
        point = GeoPoint('51°28′40.37″N', '000°00′05.29″W')
        assert point.latitude == pytest.approx(51.47788, abs=1e-6)
        assert point.longitude == pytest.approx(-0.00147, abs=1e-6)

    @pytest.mark.parametrize('lat, lon', [
        ('abc', 0),
        (0, 'xyz'),
        (None, 0),
        (True, 0),
        (float('nan'), 0),
        (0, float('inf')),
        ([1], 0),
    ])
    def test_invalid_coordinates(self, lat, lon):
        with pytest.raises(InvalidAngleError):
            GeoPoint(lat, lon)

    def test_assignment_is_wrapped(self):
        point = GeoPoint(0, 0)
        point.latitude = 95
        point.longitude = 190
        assert point.latitude == pytest.approx(85)
        assert point.longitude == pytest.approx(-170)

    def test_assignment_is_validated(self):
        point = GeoPoint(0, 0)
        with pytest.raises(InvalidAngleError) as excinfo:
            point.longitude = 'east'
        assert excinfo.value.field == 'longitude'
        assert point.longitude == 0

    def test_aliases(self):
        point = GeoPoint(10, 20)
        assert point.lat == 10
        assert point.lon == 20
        assert point.lng == 20
        point.lat = -91
        point.lng = 200
        assert point.latitude == pytest.approx(-89)
        assert point.longitude == pytest.approx(-160)


class TestGeoPointEquality:
    """Points are compared with machine epsilon tolerance."""

    def test_equals(self):
        assert GeoPoint(52.205, 0.119).equals(GeoPoint(52.205, 0.119))
        assert not GeoPoint(52.205, 0.119).equals(GeoPoint(52.205, 0.1191))

    def test_equals_ignores_name(self):
        assert GeoPoint(1, 2, 'A') == GeoPoint(1, 2, 'B')

    def test_equals_point_like(self):
        assert GeoPoint(1, 2).equals('1, 2')
        assert GeoPoint(1, 2).equals((1, 2))

    def test_not_equal_to_other_types(self):
        assert GeoPoint(1, 2) != (1, 2)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(GeoPoint(1, 2))

    def test_copy(self):
        point = GeoPoint(1, 2, 'A')
        copy = point.copy()
        assert copy is not point
        assert copy == point
        assert copy.name == 'A'


class TestGeoPointParse:
    """Test cases for the accepted literal forms."""

    def test_pair(self):
        point = GeoPoint.parse(52.205, 0.119)
        assert (point.latitude, point.longitude) == (52.205, 0.119)

    def test_string(self):
        point = GeoPoint.parse('52.205, 0.119')
        assert point.latitude == pytest.approx(52.205)
        assert point.longitude == pytest.approx(0.119)

    def test_deg_min_sec_pair(self):
        point = GeoPoint.parse('52°12′18.0″N', '000°07′08.4″E')
        assert point.latitude == pytest.approx(52.205)
        assert point.longitude == pytest.approx(0.119)

    def test_mapping(self):
        point = GeoPoint.parse({'lat': 52.205, 'lng': 0.119})
        assert point.latitude == pytest.approx(52.205)
        assert point.longitude == pytest.approx(0.119)

    def test_geojson(self):
        point = GeoPoint.parse({'type': 'Point', 'coordinates': [0.119, 52.205]})
        assert point.latitude == pytest.approx(52.205)
        assert point.longitude == pytest.approx(0.119)

    def test_existing_point_is_returned(self, cambridge):
        assert GeoPoint.parse(cambridge) is cambridge

    @pytest.mark.parametrize('args', [(), (None,), ('52.205',), ('a, b',), ({'lat': 1},)])
    def test_invalid(self, args):
        with pytest.raises(InvalidAngleError):
            GeoPoint.parse(*args)


class TestGeoPointFormatting:
    """Test cases for string and GeoJSON representations."""

    def test_to_string_degrees(self, greenwich, plain_config):
        assert greenwich.to_string('d', config=plain_config) == '51.4779°N, 000.0015°W'

    def test_to_string_dms(self, greenwich, plain_config):
        assert greenwich.to_string('dms', 2, plain_config) == '51°28′40.37″N, 000°00′05.29″W'

    def test_to_string_dm(self, greenwich, plain_config):
        assert greenwich.to_string('dm', config=plain_config) == '51°28.67′N, 000°00.09′W'

    def test_to_string_numeric(self, greenwich):
        assert greenwich.to_string('n') == '51.4779,-0.0015'
        assert greenwich.to_string('n', 2) == '51.48,-0.00'

    def test_to_string_invalid_format(self, greenwich):
        with pytest.raises(InvalidFormatError):
            greenwich.to_string('utm')

    def test_to_dms_tuple(self, greenwich, plain_config):
        assert greenwich.to_dms(config=plain_config) == ('51°28′40″N', '000°00′05″W')

    def test_to_dm_tuple(self, greenwich, plain_config):
        assert greenwich.to_dm(config=plain_config) == ('51°28.67′N', '000°00.09′W')

    def test_to_geojson(self, cambridge):
        assert cambridge.to_geojson() == {'type': 'Point', 'coordinates': [0.119, 52.205]}

    def test_repr(self):
        assert repr(GeoPoint(1.5, 2.5, 'X')) == "GeoPoint(name='X', latitude=1.5, longitude=2.5)"

    def test_str_includes_name(self, cambridge):
        assert str(cambridge).startswith('Cambridge ')


class TestGeoPointNavigation:
    """Geodesy methods return new points and leave the receiver unchanged."""

    def test_distance_and_bearing(self, cambridge, paris):
        assert cambridge.distance_to(paris) == pytest.approx(404279, rel=1e-4)
        assert cambridge.initial_bearing_to(paris) == pytest.approx(156.2, abs=0.05)
        assert cambridge.final_bearing_to(paris) == pytest.approx(157.9, abs=0.05)

    def test_distance_to_accepts_point_like(self, cambridge):
        assert cambridge.distance_to('48.857, 2.351') == pytest.approx(404279, rel=1e-4)

    def test_point_from_bearing_distance(self, greenwich):
        point = greenwich.point_from_bearing_distance(300.7, 7794, 'DEST')
        assert point.name == 'DEST'
        assert point.latitude == pytest.approx(51.5136, abs=1e-3)
        assert point.longitude == pytest.approx(-0.0983, abs=1e-3)
        assert greenwich.latitude == 51.47788

    def test_rhumb_methods(self):
        dover = GeoPoint(51.127, 1.338)
        calais = GeoPoint(50.964, 1.853)
        assert dover.rhumb_distance_to(calais) == pytest.approx(40310, rel=1e-3)
        assert dover.rhumb_bearing_to(calais) == pytest.approx(116.7, abs=0.05)

    def test_max_latitude(self):
        assert GeoPoint(0, 0).max_latitude(0) == pytest.approx(90)
        assert GeoPoint(0, 0).max_latitude(90) == pytest.approx(0, abs=1e-9)

    def test_midpoint_to(self, cambridge, paris):
        mid = cambridge.midpoint_to(paris)
        assert not math.isnan(mid.latitude)
        assert mid.latitude == pytest.approx(50.5363, abs=1e-3)
